# wikisummary/logging_setup.py
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty third-party loggers never go below WARNING.
_THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""

    root = logging.getLogger()
    resolved = getattr(logging, level.upper().strip(), logging.INFO)
    root.setLevel(resolved)

    if not any(getattr(h, "_wikisummary", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        handler._wikisummary = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
