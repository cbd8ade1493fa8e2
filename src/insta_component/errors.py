"""Error taxonomy for insta-component.

Every failure surfaces to the CLI as an InstaComponentError subclass,
which reports it and exits with status 1. Nothing is retried and
nothing already written is rolled back.
"""

from __future__ import annotations

from pathlib import Path


class InstaComponentError(Exception):
    """Base class for all insta-component failures."""


class InputError(InstaComponentError):
    """Raised when prompt collection is aborted (EOF, Ctrl-C)."""


class ConfigError(InstaComponentError):
    """Raised when the persisted config file cannot be read or validated."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class FilesystemError(InstaComponentError):
    """Raised when an underlying filesystem operation fails.

    Attributes:
        path: The path the failing operation targeted.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class FilesystemConflict(FilesystemError):
    """Raised when the component directory already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory already exists: {path}", path)
