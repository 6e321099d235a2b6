"""Utility modules for the application."""

from aptskola_mailer.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
