#!/usr/bin/env python3
"""Development server for the health endpoint."""

import logging

import uvicorn

from cassandra_health import CassandraConfig
from webapp import create_app
from webapp.config import WebAppConfig

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    # Create app with debug mode
    app = create_app(
        webapp_config=WebAppConfig(debug=True),
        cassandra_config=CassandraConfig(local_datacenter="datacenter1"),
    )

    # Run development server
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        reload=False,  # Set to True for auto-reload during development
        log_level="info",
    )
