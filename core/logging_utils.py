# core/logging_utils.py
from __future__ import annotations
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_HANDLER_TAG = "_pwcheck_handler"


class ColoredFormatter(logging.Formatter):
    """Colored levelname for console output"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if not color:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger once per process.
    Streamlit reruns app.py on every interaction, so handlers added by an
    earlier run are replaced instead of stacked.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    console = logging.StreamHandler(sys.stdout)
    is_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
    console.setFormatter(ColoredFormatter(_FORMAT) if is_tty else logging.Formatter(_FORMAT))
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path / "pwcheck.log",
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)

    return root
