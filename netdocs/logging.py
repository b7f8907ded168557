"""Logger setup for netdocs builds.

Every module logs under ``netdocs.<name>``. A build parses a single framework
variant, so the console prefix carries its framework id to keep interleaved
runs (``core`` then ``framework``) apart.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "netdocs"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [{framework}]: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def console_prefix(framework_id: str | None = None) -> str:
    """Return ``[netdocs]`` or ``[netdocs <framework id>]``."""
    if framework_id:
        return f"[{ROOT_LOGGER} {framework_id}]"
    return f"[{ROOT_LOGGER}]"


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    framework_id: str | None = None,
) -> logging.Logger:
    """Route netdocs records to stderr and, when given, to ``log_file``."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter(f"{console_prefix(framework_id)} %(levelname)s %(message)s")
    )
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT.format(framework=framework_id or "-")))
        logger.addHandler(sink)

    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "console_prefix", "get_logger"]
