from __future__ import annotations

import logging
from typing import Optional

from transithub.config.models import LoggingSettings


def configure_logging(settings: LoggingSettings, *, force: bool = False) -> None:
    """
    Configure root logging from typed settings.

    `force=True` replaces handlers installed earlier (e.g. when a script runs twice in one process).
    """

    level = getattr(logging, settings.level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {settings.level}")

    handlers: Optional[list[logging.Handler]] = None
    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(settings.file, encoding="utf-8"), logging.StreamHandler()]

    logging.basicConfig(level=level, format=settings.format, handlers=handlers, force=force)
    # Domain warnings (full vehicle, schedule limit) come from `transithub.model.*`.
    logging.getLogger("transithub").setLevel(level)
