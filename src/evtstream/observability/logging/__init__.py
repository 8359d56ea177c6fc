"""Observability – structured logging helpers."""
from evtstream.observability.logging.factory import JsonLoggerFactory, configure_logging
from evtstream.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
