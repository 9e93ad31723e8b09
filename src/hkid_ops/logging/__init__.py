"""Logging configuration module for hkid-ops."""

from hkid_ops.logging.setup import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
