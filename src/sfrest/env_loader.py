# src/sfrest/env_loader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)


def default_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    return (cwd / ".env", cwd / ".dotenv", Path.home() / ".sfrest.env")


def load_env_files(
    candidates: Optional[Iterable[Path]] = None,
    *,
    override: bool = False,
) -> Optional[Path]:
    """Load SF_* settings from the first existing .env candidate.

    Looks in the working directory (.env, .dotenv) and then ~/.sfrest.env.
    Variables already in the environment win unless ``override`` is set.
    Returns the file that was loaded, if any.
    """
    for path in candidates if candidates is not None else default_candidates():
        if path.exists():
            load_dotenv(path, override=override)
            _logger.debug("Loaded environment variables from %s", path)
            return path
    _logger.debug("No .env file found")
    return None
