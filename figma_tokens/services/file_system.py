"""File system gateway for persisting generated artifacts."""

import logging
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Persists named content."""

    def save_file(self, path: str, content: str) -> None:
        ...


class LocalFileSystem:
    """Writes files to the local disk under a root directory."""

    def __init__(self, root: Optional[str] = None):
        """Initialize the gateway.

        Args:
            root: Directory relative paths are resolved against
                  (defaults to the current working directory)
        """
        self.root = Path(root) if root else Path(".")

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def save_file(self, path: str, content: str) -> None:
        """Write content to a file, creating parent directories.

        Existing files are overwritten.

        Args:
            path: Path of the file, relative to the root
            content: Text to write (UTF-8)
        """
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info("Wrote %s (%d bytes)", target, len(content.encode("utf-8")))
