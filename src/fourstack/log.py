from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

# Sink ids installed by configure_logging so repeated calls replace rather than stack.
_sink_ids: list[int] = []


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> list[int]:
    """Route loguru output to stderr (and optionally a rotating file).

    Replaces loguru's default handler. Returns the ids of the installed sinks.
    """
    global _sink_ids
    if not _sink_ids:
        logger.remove()
    for sink_id in _sink_ids:
        logger.remove(sink_id)
    _sink_ids = [logger.add(sys.stderr, level=level.upper())]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _sink_ids.append(logger.add(path, rotation="10 MB", level=level.upper()))
    return list(_sink_ids)
