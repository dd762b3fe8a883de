"""Shared cross-cutting helpers (logging). No business logic."""

from orgchart.shared.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
