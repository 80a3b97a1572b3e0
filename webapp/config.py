"""WebApp configuration."""

from dataclasses import dataclass


@dataclass
class WebAppConfig:
    """Configuration for the web application."""

    title: str = "Cassandra Health"
    debug: bool = False
