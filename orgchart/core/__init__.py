"""Core: configuration, app lifespan, exception handlers, rate limiter."""

from orgchart.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
