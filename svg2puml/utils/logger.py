"""Logging setup shared by every module."""
import logging
import sys

ROOT_LOGGER = "svg2puml"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root logger."""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_level(level) -> None:
    """Set the level of the package root logger (name or number)."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(ROOT_LOGGER).setLevel(level)
