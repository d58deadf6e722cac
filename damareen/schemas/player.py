from ._base import BaseModel
from .battle import BattleResult
from .card import DeckEntry, PlayerCardState


class PlayerProfile(BaseModel):
    id: str
    name: str
    environment_id: str
    collection: tuple[PlayerCardState, ...] = ()
    deck: tuple[DeckEntry, ...] = ()
    battle_history: tuple[BattleResult, ...] = ()
