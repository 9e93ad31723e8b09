"""Logging configuration for the hkid-ops command line.

One stream handler is installed on the root logger. Records are written as
JSON lines or plain text, and each one carries the command being run and a
short run id, so that every line of one invocation can be grouped together.
"""

import logging
import os
import sys
import uuid
from typing import Optional, TextIO

from pythonjsonlogger import jsonlogger


SERVICE_NAME = "hkid-ops"

JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(command)s %(run_id)s %(message)s"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(command)s %(run_id)s] %(message)s"


def new_run_id() -> str:
    """Short random id for one CLI invocation."""
    return uuid.uuid4().hex[:12]


class RunContextFilter(logging.Filter):
    """Stamp every record with the running command and run id."""

    def __init__(self, command: str = "-", run_id: Optional[str] = None):
        super().__init__()
        self.command = command
        self.run_id = run_id or new_run_id()

    def filter(self, record: logging.LogRecord) -> bool:
        record.command = self.command
        record.run_id = self.run_id
        return True


def build_formatter(json_format: bool) -> logging.Formatter:
    """Formatter for JSON lines or for plain text."""
    if json_format:
        return jsonlogger.JsonFormatter(
            JSON_FIELDS,
            datefmt="%Y-%m-%dT%H:%M:%S%z",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
            static_fields={"service": SERVICE_NAME},
        )
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
    command: str = "-",
    run_id: Optional[str] = None,
) -> RunContextFilter:
    """Configure logging for one run.

    Args:
        level: Log level. Defaults to env var HKID_OPS_LOG_LEVEL or INFO.
        json_format: Write JSON lines. Defaults to env var
                     HKID_OPS_LOG_FORMAT == 'json' (the default).
        stream: Output stream. Defaults to stderr so that command output
                on stdout stays clean.
        command: Name of the command being run.
        run_id: Id of this run. A new one is generated if omitted.

    Returns:
        The filter attached to the handler, holding the run context.
    """
    if level is None:
        level = os.getenv("HKID_OPS_LOG_LEVEL", "INFO")
    level = level.upper()
    if json_format is None:
        json_format = os.getenv("HKID_OPS_LOG_FORMAT", "json").lower() == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    context = RunContextFilter(command, run_id)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.addFilter(context)
    handler.setFormatter(build_formatter(json_format))
    root_logger.addHandler(handler)

    # Presidio logs recognizer registration at INFO
    logging.getLogger("presidio-analyzer").setLevel(logging.WARNING)

    return context


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)
