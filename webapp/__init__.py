"""WebApp - health endpoint for Cassandra connections."""

from webapp.app import create_app
from webapp.config import WebAppConfig

__all__ = ["create_app", "WebAppConfig"]
