from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import field_serializer, field_validator

from damareen.core.enums import ReasonCategory, Winner

from ._base import BaseModel

ReasonParams = tuple[tuple[str, str | int], ...]


class BattleReason(BaseModel):
    """Why a round went the way it did.

    ``params`` carries the values a presentation layer substitutes into the
    localized message for ``category``. They are stored as ``(name, value)``
    pairs so a finished result stays immutable, and accept or dump as a mapping.
    """

    category: ReasonCategory
    params: ReasonParams = ()

    @field_validator("params", mode="before")
    @classmethod
    def params_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @field_serializer("params")
    def serialize_params(self, value: ReasonParams) -> dict[str, str | int]:
        return dict(value)

    def params_dict(self) -> dict[str, str | int]:
        return dict(self.params)


class RoundOutcome(BaseModel):
    winner: Winner
    reason: BattleReason


class BattleRoundResult(BaseModel):
    round: int
    """1-based round index."""
    player_card_id: str
    dungeon_card_id: str
    winner: Winner
    reason: BattleReason


class BattleResult(BaseModel):
    dungeon_id: str
    player_wins: int
    dungeon_wins: int
    rounds: tuple[BattleRoundResult, ...]
    player_victory: bool
    timestamp: datetime
