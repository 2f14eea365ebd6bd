"""Shared logging helpers for projecthub."""

from __future__ import annotations

import logging
import os


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``PROJECTHUB_LOG_LEVEL`` (or INFO) and a terse format suitable for
    CLI and server output. Pass ``force=True`` to reconfigure during tests or
    specialised entry points.
    """

    if level is None:
        level = os.getenv("PROJECTHUB_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
