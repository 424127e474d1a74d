from __future__ import annotations

import logging
import pathlib
import sys
import threading
import traceback
from typing import Any, Dict


LOG_FILE_NAME = "symmetrica.log"


def get_log_path() -> pathlib.Path:
    return pathlib.Path.cwd() / LOG_FILE_NAME


def setup_logging(overwrite: bool = True, level: int = logging.INFO) -> None:
    """Send all records to symmetrica.log in the working directory.

    The file gets everything from `level` up, stderr only warnings and worse.
    Unhandled exceptions in any thread and `warnings` go through logging too.
    Calling it again in the same process does nothing.
    """
    root_logger = logging.getLogger()
    if getattr(root_logger, "_sym_logging_configured", False):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(process)d:%(threadName)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler = logging.FileHandler(get_log_path(), mode="w" if overwrite else "a", encoding="utf-8")
    file_handler.setFormatter(formatter)
    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(max(level, logging.WARNING))

    logging.basicConfig(level=level, handlers=[file_handler, stderr_handler], force=True)
    root_logger._sym_logging_configured = True  # type: ignore[attr-defined]
    logging.captureWarnings(True)

    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]
    threading.excepthook = _log_thread_exception  # type: ignore[assignment]


def setup_logging_from_config(cfg: Dict[str, Any]) -> None:
    """setup_logging driven by the `[logging]` table of a parsed config file"""
    section = cfg.get("logging", {}) or {}
    level = logging.getLevelName(str(section.get("level", "INFO")).upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {section.get('level')!r}")
    setup_logging(overwrite=bool(section.get("overwrite", True)), level=level)


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logging.getLogger("unhandled").critical("Unhandled exception:\n%s", tb_str)


def _log_thread_exception(args) -> None:  # type: ignore[no-untyped-def]
    tb_str = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    logging.getLogger("thread").critical("Unhandled thread exception in %s:\n%s", getattr(args, "thread", None), tb_str)
