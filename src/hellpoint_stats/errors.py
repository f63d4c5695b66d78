from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class HellpointStatsError(Exception):
    """Base error for the save inspector. The CLI reports these and exits non-zero."""


class NotFound(HellpointStatsError):
    """Raised when a save directory or a save cannot be found."""


class SaveDirectoryNotFound(NotFound):
    def __init__(self, candidates: Iterable[Path]):
        self.candidates = list(candidates)
        checked = ", ".join(f"'{c}'" for c in self.candidates) or "none"
        super().__init__(f"Hellpoint save directory not found (checked: {checked})")


class SaveNotFound(NotFound):
    def __init__(self, name: Optional[str] = None):
        self.name = name
        message = "No save found"
        if name is not None:
            message = f"No save found named '{name}'"
        super().__init__(message)


class SaveReadError(HellpointStatsError):
    """Raised when the save directory or a save file cannot be read."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Failed to read {self.path}: {reason}")


class SaveDecodeError(HellpointStatsError):
    """Raised when a save file is not a valid Hellpoint save."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Invalid save file {self.path}: {reason}")


class ConfigurationError(HellpointStatsError):
    """Raised when the environment cannot be used to locate saves (e.g., no home directory)."""
