"""Helpers for the local uploads directory."""

import os
from pathlib import Path

from core.utils.constants import DEFAULT_UPLOADS_DIR, ENV_UPLOADS_DIR


def resolve_uploads_dir() -> Path:
    """Return the absolute uploads directory configured for this process."""
    return Path(os.getenv(ENV_UPLOADS_DIR) or DEFAULT_UPLOADS_DIR).resolve()


def resolve_within(root: Path, relative_path: str) -> Path | None:
    """Resolve relative_path under root, or None if it escapes root."""
    candidate = (root / relative_path.lstrip("/")).resolve()

    if candidate == root or not candidate.is_relative_to(root):
        return None

    return candidate
