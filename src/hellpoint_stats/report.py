from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .errors import SaveNotFound
from .models import SaveRecord

__all__ = [
    "select_save",
    "split_playtime",
    "pad",
    "format_playtime",
    "format_report",
]


def select_save(saves: Sequence[SaveRecord], name: Optional[str] = None) -> SaveRecord:
    """Pick the save to report.

    ``saves`` must be ordered newest first. Without ``name`` the newest save is
    returned; with ``name`` the newest save whose name matches exactly.
    """
    if name is None:
        if saves:
            return saves[0]
        raise SaveNotFound()
    for save in saves:
        if save.name == name:
            return save
    raise SaveNotFound(name)


def split_playtime(total_seconds: int) -> Tuple[int, int, int]:
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds - hours * 3600 - minutes * 60
    return hours, minutes, seconds


def pad(value: int, width: int = 2) -> str:
    """Zero-pad ``value`` to at least ``width`` digits. Wider values are kept whole."""
    return str(value).rjust(width, "0")


def format_playtime(total_seconds: int) -> str:
    return ":".join(pad(part) for part in split_playtime(total_seconds))


def format_report(save: SaveRecord) -> str:
    return f"{save.name} (Level {save.level}) {format_playtime(save.total_time)}"
