"""Local filesystem provider used by the resolver and generator.

Wraps the four operations the core needs and translates OSError into
the insta-component error taxonomy.
"""

from __future__ import annotations

from pathlib import Path

from insta_component.errors import FilesystemConflict, FilesystemError


class LocalFilesystem:
    """Direct pathlib-backed filesystem access."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def create_directory(self, path: Path) -> None:
        """Create a single directory.

        Raises:
            FilesystemConflict: If path already exists.
            FilesystemError: If the parent is missing or creation fails.
        """
        path = Path(path)
        try:
            path.mkdir()
        except FileExistsError as e:
            raise FilesystemConflict(path) from e
        except FileNotFoundError as e:
            raise FilesystemError(f"Parent directory does not exist: {path.parent}", path) from e
        except OSError as e:
            raise FilesystemError(f"Could not create directory {path}: {e}", path) from e

    def write_text(self, path: Path, content: str) -> None:
        """Create or overwrite a UTF-8 text file."""
        path = Path(path)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"Could not write {path}: {e}", path) from e

    def read_text(self, path: Path) -> str:
        path = Path(path)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"Could not read {path}: {e}", path) from e
