"""geomkernel logging.

Все модули пишут через :func:`get_logger`, логгеры живут в иерархии
``geomkernel``.

Environment variables:
    GEOMKERNEL_LOG_LEVEL  — DEBUG / INFO / WARNING (default) / ERROR
    GEOMKERNEL_LOG_FILE   — optional path; appends plain-text log lines
"""

import logging
import os
import sys

_CONFIGURED = False

ROOT_LOGGER_NAME = "geomkernel"


def _configure_once() -> None:
    """One-time lazy init of the ``geomkernel`` root logger."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    _CONFIGURED = True

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = os.environ.get("GEOMKERNEL_LOG_LEVEL", "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(console)

    log_file = os.environ.get("GEOMKERNEL_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``geomkernel`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    _configure_once()
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
