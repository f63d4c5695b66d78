from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Hellpoint counts a fresh character's starting points as level 0.
LEVEL_OFFSET = -7


class PlayerRecord(BaseModel):
    """Player block of a save. Stat order is defined by the game."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    stats: List[int] = Field(..., description="Points allocated per attribute")


class SaveRecord(BaseModel):
    """One Hellpoint save as stored in a ``.hp`` file.

    Only the fields needed for the report are modelled; anything else in the
    file is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., description="Character name")
    total_time: int = Field(..., alias="totalTime", ge=0, description="Playtime in seconds")
    player: PlayerRecord

    @property
    def level(self) -> int:
        return player_level(self.player)


def player_level(player: PlayerRecord) -> int:
    """Return the character level derived from the player's stat points."""
    return sum(player.stats, LEVEL_OFFSET)
