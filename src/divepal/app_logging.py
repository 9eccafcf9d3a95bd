"""File + console logging, configured once per process."""

import logging
import sys
import threading
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from divepal.config import default_log_dir

_LOCK = threading.Lock()
_CONFIGURED_LOG_PATH: Path | None = None

_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_dir: str | Path | None = None, level: str = "INFO") -> Path:
    """Attach a rotating file handler and a stderr handler to the root logger.

    Streamlit re-executes the script on every interaction, so repeated calls
    return the first log path without adding handlers again.

    Args:
        log_dir: Directory for log files. Defaults to ~/.local/share/DivePal/logs.
        level: Root log level name.

    Returns:
        Path of the active log file.
    """
    global _CONFIGURED_LOG_PATH
    with _LOCK:
        if _CONFIGURED_LOG_PATH is not None:
            return _CONFIGURED_LOG_PATH

        target_dir = Path(log_dir) if log_dir else default_log_dir()
        target_dir.mkdir(parents=True, exist_ok=True)
        log_path = target_dir / datetime.now().strftime("divepal-%Y%m%d.log")

        formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

        root = logging.getLogger()
        root.setLevel(getattr(logging, level.upper(), logging.INFO))

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

        _install_exception_hook()

        _CONFIGURED_LOG_PATH = log_path
        logging.getLogger(__name__).info("File logging initialized: %s", log_path)
        return log_path


def _install_exception_hook() -> None:
    def _sys_hook(exc_type, exc_value, exc_traceback) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.getLogger("uncaught").critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_traceback),
        )

    sys.excepthook = _sys_hook
