"""
Application-wide logging configuration.

Modules keep using ``logging.getLogger(__name__)``; this only wires the
root logger once at startup.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(
    level: str = "INFO",
    fmt: str = "plain",
    log_dir: Optional[str] = None,
) -> None:
    """
    Configure root logging settings.

    Args:
        level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
        fmt: "plain" for a stream handler, "rich" for a rich console handler
        log_dir: If set, also write combined.log (all levels) and
            error.log (errors only) in this directory

    Calling it again is a no-op.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if fmt == "rich":
        from rich.logging import RichHandler

        console_handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)

        combined = logging.FileHandler(path / "combined.log", encoding="utf-8")
        combined.setFormatter(formatter)
        root.addHandler(combined)

        errors = logging.FileHandler(path / "error.log", encoding="utf-8")
        errors.setLevel(logging.ERROR)
        errors.setFormatter(formatter)
        root.addHandler(errors)

    _configured = True
    logging.getLogger(__name__).info("Logging initialized with level %s", level)
