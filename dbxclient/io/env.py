"""
Helpers for loading Dropbox environment configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DROPBOX_ENV_FILENAME = "dropbox.env"


def default_env_path() -> Path:
    return Path.home() / DROPBOX_ENV_FILENAME


def load_env(path: Optional[Path] = None) -> bool:
    """
    Loads ``DROPBOX_*`` variables from ``path`` (``~/dropbox.env`` by default)
    into the process environment. Variables already set are kept.

    :return: True if a file was found and read.
    """
    path = Path(path) if path is not None else default_env_path()
    if not path.is_file():
        return False
    return load_dotenv(path, override=False)
