"""Resolve ``KEY_FILE`` environment variables into ``KEY`` (Docker secrets)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping, Optional

import structlog

logger = structlog.get_logger(__name__)

FILE_SUFFIX = "_FILE"


def read_secret_file(path: str) -> Optional[str]:
    """Return the stripped contents of a secret file, or ``None`` if unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("env.secret_file.unreadable", path=path, error=str(exc))
        return None


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Expose secrets mounted as files through regular environment variables.

    ``SUPABASE_API_KEY_FILE=/run/secrets/supabase_key`` sets
    ``SUPABASE_API_KEY`` to the file contents unless it is already set.
    """
    env = os.environ if environ is None else environ

    for key, path in list(env.items()):
        if not key.endswith(FILE_SUFFIX) or not path:
            continue
        target = key[: -len(FILE_SUFFIX)]
        if env.get(target):
            continue
        value = read_secret_file(path)
        if value is not None:
            env[target] = value


load_secret_file_variables()
