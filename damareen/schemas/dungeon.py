from typing import NamedTuple

from damareen.core.enums import DungeonType

from ._base import BaseModel
from .card import WorldCard


class DungeonRequirement(NamedTuple):
    total: int
    standard: int
    leader: int


# Lineup shape enforced by the authoring tool; leader slots come last.
DUNGEON_REQUIREMENTS: dict[DungeonType, DungeonRequirement] = {
    DungeonType.ENCOUNTER: DungeonRequirement(total=1, standard=1, leader=0),
    DungeonType.MINOR: DungeonRequirement(total=4, standard=3, leader=1),
    DungeonType.MAJOR: DungeonRequirement(total=6, standard=5, leader=1),
}


class Dungeon(BaseModel):
    id: str
    name: str
    type: DungeonType
    card_order: tuple[str, ...] = ()

    @property
    def expected_size(self) -> int:
        return DUNGEON_REQUIREMENTS[self.type].total


class GameEnvironment(BaseModel):
    """Card catalog plus the dungeons built from it."""

    id: str
    name: str
    world_cards: tuple[WorldCard, ...] = ()
    dungeons: tuple[Dungeon, ...] = ()
    starter_collection: tuple[str, ...] = ()

    def get_card(self, card_id: str) -> WorldCard | None:
        return next((card for card in self.world_cards if card.id == card_id), None)

    def get_dungeon(self, dungeon_id: str) -> Dungeon | None:
        return next((dungeon for dungeon in self.dungeons if dungeon.id == dungeon_id), None)
