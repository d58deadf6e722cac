from damareen.core.enums import CardKind, Element

from ._base import BaseModel


class WorldCard(BaseModel):
    """Card definition from an environment's catalog."""

    id: str
    name: str
    damage: int
    health: int
    element: Element
    kind: CardKind = CardKind.STANDARD
    source_card_id: str | None = None
    """Standard card a leader was derived from. Provenance only."""
    background_image: str | None = None

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"


class PlayerCardState(BaseModel):
    """A card in a player's collection with its permanent bonuses."""

    card_id: str
    damage_bonus: int = 0
    health_bonus: int = 0


class DeckEntry(BaseModel):
    card_id: str


class ResolvedCard(BaseModel):
    """Effective stats of one side of a round."""

    id: str
    name: str
    damage: int
    health: int
    element: Element
    kind: CardKind
