"""Shared pytest fixtures for the battle engine tests."""

from datetime import UTC, datetime

import pytest
from loguru import logger

from damareen.core.enums import CardKind, Element
from damareen.data.default_environment import DEFAULT_ENVIRONMENT
from damareen.schemas.card import ResolvedCard
from damareen.schemas.dungeon import GameEnvironment

FIXED_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


def make_card(
    damage: int,
    health: int,
    element: Element = Element.EARTH,
    *,
    card_id: str = "card",
    name: str = "Card",
) -> ResolvedCard:
    return ResolvedCard(
        id=card_id,
        name=name,
        damage=damage,
        health=health,
        element=element,
        kind=CardKind.STANDARD,
    )


@pytest.fixture
def environment() -> GameEnvironment:
    return DEFAULT_ENVIRONMENT


@pytest.fixture
def arena() -> GameEnvironment:
    """Small catalog with hand-picked stats for predictable rounds.

    Against each other at base stats:
    - hammer (10/3 fire) out-damages the health of every other card
    - pebble (2/9 earth) vs mirror (2/9 earth) is a stalemate
    - tide (2/9 water) beats ember (2/9 air) on element
    """
    return GameEnvironment.model_validate(
        {
            "id": "arena",
            "name": "Arena",
            "worldCards": [
                {"id": "hammer", "name": "Hammer", "damage": 10, "health": 3, "element": "fire"},
                {"id": "pebble", "name": "Pebble", "damage": 2, "health": 9, "element": "earth"},
                {"id": "tide", "name": "Tide", "damage": 2, "health": 9, "element": "water"},
                {"id": "mirror", "name": "Mirror", "damage": 2, "health": 9, "element": "earth"},
                {"id": "ember", "name": "Ember", "damage": 2, "health": 9, "element": "air"},
                {"id": "brute", "name": "Brute", "damage": 5, "health": 4, "element": "water"},
            ],
            "starterCollection": ["hammer", "pebble", "tide"],
            "dungeons": [],
        }
    )


@pytest.fixture
def warning_records():
    """Collect the records loguru emits at WARNING and above during a test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    yield records
    logger.remove(handler_id)
