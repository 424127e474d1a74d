from __future__ import annotations

import logging
import os
import pathlib
import time
from typing import Any, Dict, Optional

import orjson

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.symmetrica"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parents[1] / "config" / "defaults.toml"


def ensure_config(path: Optional[pathlib.Path] = None) -> bool:
    """Write the packaged defaults to `path` if nothing is there yet."""
    target = path or CONFIG_PATH
    if target.exists():
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
    logging.getLogger(__name__).info("Initialised configuration at %s", target)
    return True


def load_config(path: Optional[pathlib.Path] = None) -> Dict[str, Any]:
    # Parse TOML config; prefer stdlib tomllib (3.11+), else tomli
    try:
        import tomllib as toml_reader  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as toml_reader  # type: ignore[no-redef]
    with open(path or CONFIG_PATH, "rb") as f:
        return toml_reader.load(f)


def log_event(module: str, event: str, **kwargs: Any) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    line = orjson.dumps(payload, default=str).decode("utf-8")
    logging.getLogger(f"event.{module}").info(line)
