"""Console logging for the hn_client logger tree.

The clients only emit records; nothing here runs on import. The CLI (or an
embedding application that wants the same output) calls ``setup_logging``,
which attaches one handler to the ``hn_client`` logger and leaves the root
logger alone.

Request and hit context travels on records as ``extra`` attributes listed in
``CONTEXT_FIELDS`` so the JSON formatter can emit it as separate keys.
"""

import json
import logging
import sys
from typing import Any, Final, Optional

from hn_client.utils.config import VERSION, get_settings

LIBRARY_LOGGER: Final[str] = "hn_client"

# Record attributes set through ``extra=`` by the clients
CONTEXT_FIELDS: Final[tuple[str, ...]] = ("url", "status_code", "kind", "object_id")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with request and hit context as keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "library": "hn-client",
            "version": VERSION,
        }

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class StandardFormatter(logging.Formatter):
    """Plain text, one line per record."""

    def __init__(self) -> None:
        super().__init__(
            fmt="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_handler: Optional[logging.Handler] = None


def setup_logging(
    level: Optional[str] = None,
    use_json: bool = False,
    force_reconfigure: bool = False,
) -> logging.Logger:
    """
    Attach a stderr handler to the ``hn_client`` logger.

    Output goes to stderr so listings printed on stdout stay clean.

    Args:
        level: Level name, defaults to LOG_LEVEL from settings
        use_json: Emit JSON lines instead of plain text
        force_reconfigure: Replace an existing handler

    Returns:
        The configured ``hn_client`` logger
    """
    global _handler

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None and not force_reconfigure:
        return library_logger

    if _handler is not None:
        library_logger.removeHandler(_handler)

    level_name = (level or get_settings().LOG_LEVEL).upper()
    library_logger.setLevel(getattr(logging, level_name))

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(JsonFormatter() if use_json else StandardFormatter())
    library_logger.addHandler(_handler)

    library_logger.debug(
        f"Logging configured: level={level_name}, format={'json' if use_json else 'standard'}"
    )
    return library_logger


def reset_logging() -> None:
    """Remove the handler added by setup_logging and restore the default level."""
    global _handler

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.setLevel(logging.NOTSET)
    _handler = None
