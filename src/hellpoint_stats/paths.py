from __future__ import annotations

import logging
import os
import platform
from pathlib import Path
from typing import List, Optional

from platformdirs.unix import Unix

from .errors import ConfigurationError, SaveDirectoryNotFound

__all__ = [
    "ENV_SAVE_DIR",
    "GAME_DIR",
    "FLATPAK_STEAM_CONFIG",
    "get_home_dir",
    "get_config_root",
    "candidate_save_dirs",
    "get_save_dir",
]

logger = logging.getLogger(__name__)

# Explicit save directory override (useful for tests and non-standard installs)
ENV_SAVE_DIR = "HELLPOINT_SAVE_DIR"

# Unity stores player data under <root>/unity3d/<company>/<product>
GAME_DIR = Path("unity3d") / "Cradle Games" / "Hellpoint"
WINDOWS_GAME_DIR = Path("AppData") / "LocalLow" / "Cradle Games" / "Hellpoint"
FLATPAK_STEAM_CONFIG = Path(".var") / "app" / "com.valvesoftware.Steam" / "config"


def get_home_dir() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise ConfigurationError(f"Could not determine the home directory: {exc}") from exc


def get_config_root() -> Path:
    """Return the XDG configuration root.

    ``$XDG_CONFIG_HOME`` when set and non-empty, otherwise ``~/.config``.
    """
    return Unix().user_config_path


def candidate_save_dirs(system: Optional[str] = None) -> List[Path]:
    """Return the save directories to probe, in order of preference.

    Windows: ~/AppData/LocalLow/Cradle Games/Hellpoint
    Others:  $XDG_CONFIG_HOME/unity3d/Cradle Games/Hellpoint, then the
             Flatpak Steam config directory under the home directory.
    """
    override = os.getenv(ENV_SAVE_DIR)
    if override:
        return [Path(override).expanduser()]

    home = get_home_dir()
    system = system or platform.system()
    if system == "Windows":
        return [home / WINDOWS_GAME_DIR]
    # Treat everything else as Linux/Unix
    return [
        get_config_root() / GAME_DIR,
        home / FLATPAK_STEAM_CONFIG / GAME_DIR,
    ]


def get_save_dir(system: Optional[str] = None) -> Path:
    """Return the first candidate save directory that exists.

    Raises:
        SaveDirectoryNotFound if none of the candidates exist.
        ConfigurationError if the home directory cannot be determined.
    """
    candidates = candidate_save_dirs(system)
    for candidate in candidates:
        if candidate.exists():
            logger.debug("Using save directory %s", candidate)
            return candidate
        logger.debug("Save directory candidate %s does not exist", candidate)
    raise SaveDirectoryNotFound(candidates)
