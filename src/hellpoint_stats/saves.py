from __future__ import annotations

import logging
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from .errors import SaveDecodeError, SaveReadError
from .models import SaveRecord

__all__ = [
    "SAVE_SUFFIX",
    "SaveFile",
    "list_save_files",
    "load_save",
    "load_saves",
]

logger = logging.getLogger(__name__)

SAVE_SUFFIX = ".hp"


@dataclass(frozen=True)
class SaveFile:
    path: Path
    modified: float


def list_save_files(directory: Path) -> List[SaveFile]:
    """List ``.hp`` save files in ``directory``, newest first.

    Entries whose metadata cannot be read (permissions, deleted mid-listing)
    are skipped. Files with equal modification times keep directory order.

    Raises:
        SaveReadError if the directory itself cannot be read.
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise SaveReadError(directory, exc.strerror or str(exc)) from exc

    files: List[SaveFile] = []
    for entry in entries:
        if entry.suffix != SAVE_SUFFIX:
            continue
        try:
            st = entry.stat()
        except OSError as exc:
            logger.debug("Skipping %s: %s", entry, exc)
            continue
        if not stat.S_ISREG(st.st_mode):
            continue
        files.append(SaveFile(path=entry, modified=st.st_mtime))

    files.sort(key=lambda f: f.modified, reverse=True)
    logger.debug("Found %d save file(s) in %s", len(files), directory)
    return files


def load_save(path: Path) -> SaveRecord:
    """Read and decode a single save file.

    Raises:
        SaveReadError if the file cannot be read.
        SaveDecodeError if the contents are not a valid save.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SaveDecodeError(path, f"not UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise SaveReadError(path, exc.strerror or str(exc)) from exc

    # Strict: "3661", true or 3661.0 are not valid integers in a save
    try:
        save = SaveRecord.model_validate_json(text, strict=True)
    except ValidationError as exc:
        raise SaveDecodeError(path, _format_validation_error(exc)) from exc

    logger.debug("Loaded save '%s' from %s", save.name, path)
    return save


def load_saves(files: Iterable[SaveFile]) -> List[SaveRecord]:
    """Decode every save in order. The first failure aborts the whole load."""
    return [load_save(f.path) for f in files]


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)
