"""
Read already-uploaded images from the local uploads directory.
"""

from pathlib import Path

from aws_lambda_powertools import Logger

from core.utils.mime import guess_content_type
from core.utils.uploads import resolve_within

logger = Logger(utc=True)


class StaticAssetService:
    """Serves files found below a fixed root directory."""

    def __init__(self, root: Path) -> None:
        self.root = root.resolve()

    def read_asset(self, relative_path: str) -> tuple[bytes, str] | None:
        """Return (content, content_type) for a file under the root.

        Returns None when the path is empty, escapes the root, or does not
        name an existing file.
        """
        if not relative_path:
            return None

        path = resolve_within(self.root, relative_path)
        if path is None:
            logger.warning(
                "Rejected asset path outside uploads directory",
                extra={"path": relative_path},
            )
            return None

        if not path.is_file():
            logger.debug("Asset not found", extra={"path": str(path)})
            return None

        content = path.read_bytes()
        return content, guess_content_type(content)
