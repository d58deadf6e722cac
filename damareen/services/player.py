from collections.abc import Sequence

from loguru import logger

from damareen.core.enums import DungeonType
from damareen.schemas.battle import BattleResult
from damareen.schemas.card import DeckEntry, PlayerCardState
from damareen.schemas.dungeon import Dungeon, GameEnvironment
from damareen.schemas.player import PlayerProfile
from damareen.services.reward import apply_reward


def prepare_initial_collection(environment: GameEnvironment) -> list[PlayerCardState]:
    """Build a new player's collection from the environment's starter cards.

    Starter ids missing from the catalog are skipped.
    """
    collection: list[PlayerCardState] = []
    for card_id in environment.starter_collection:
        if environment.get_card(card_id) is None:
            logger.warning(f"Starter card {card_id} not found in environment {environment.id}")
            continue
        collection.append(PlayerCardState(card_id=card_id))
    return collection


def create_player(environment: GameEnvironment, *, player_id: str, name: str) -> PlayerProfile:
    """Create a player profile with the environment's starter collection.

    Raises:
        ValueError: If the name is blank or the environment has no usable starter cards.
    """
    name = name.strip()
    if not name:
        msg = "Player name must not be blank"
        raise ValueError(msg)

    collection = prepare_initial_collection(environment)
    if not collection:
        msg = f"Environment {environment.id} has no starter collection"
        raise ValueError(msg)

    logger.info(f"Created player {name} ({player_id}) in environment {environment.id}")
    return PlayerProfile(
        id=player_id, name=name, environment_id=environment.id, collection=tuple(collection)
    )


def deck_matches_dungeon(deck: Sequence[DeckEntry], dungeon: Dungeon) -> bool:
    """Check that a deck has exactly one card per round of the dungeon."""
    return len(deck) == len(dungeon.card_order)


def record_battle(profile: PlayerProfile, result: BattleResult) -> PlayerProfile:
    return profile.model_copy(update={"battle_history": (*profile.battle_history, result)})


def claim_reward(
    profile: PlayerProfile, card_id: str, dungeon_type: DungeonType | str
) -> PlayerProfile:
    """Apply a victory reward to one card of the player's collection."""
    collection = apply_reward(profile.collection, card_id, dungeon_type)
    return profile.model_copy(update={"collection": tuple(collection)})
