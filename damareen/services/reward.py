from collections.abc import Sequence

from loguru import logger

from damareen.core.enums import DungeonType, RewardStat
from damareen.schemas.card import PlayerCardState
from damareen.schemas.reward import RewardDescriptor

REWARD_TABLE: dict[DungeonType, RewardDescriptor] = {
    DungeonType.ENCOUNTER: RewardDescriptor(stat=RewardStat.DAMAGE, amount=1),
    DungeonType.MINOR: RewardDescriptor(stat=RewardStat.HEALTH, amount=2),
    DungeonType.MAJOR: RewardDescriptor(stat=RewardStat.DAMAGE, amount=3),
}


def get_reward_descriptor(dungeon_type: DungeonType | str) -> RewardDescriptor | None:
    """Get the reward a victory over this kind of dungeon grants, if any."""
    return REWARD_TABLE.get(dungeon_type)  # pyright: ignore[reportArgumentType]


def _with_bonus(card: PlayerCardState, reward: RewardDescriptor) -> PlayerCardState:
    if reward.stat == RewardStat.DAMAGE:
        return card.model_copy(update={"damage_bonus": card.damage_bonus + reward.amount})
    return card.model_copy(update={"health_bonus": card.health_bonus + reward.amount})


def apply_reward(
    player_cards: Sequence[PlayerCardState], card_id: str, dungeon_type: DungeonType | str
) -> list[PlayerCardState]:
    """Grant a victory reward to one card of the player's collection.

    Returns a new collection. Every card other than ``card_id`` is passed through
    unchanged, and an unknown dungeon type leaves the whole collection as is.
    Each call is a separate reward event, so repeated calls accumulate.
    """
    reward = get_reward_descriptor(dungeon_type)
    if reward is None:
        logger.warning(f"No reward defined for dungeon type {dungeon_type!r}")
        return list(player_cards)

    if all(card.card_id != card_id for card in player_cards):
        logger.warning(f"Reward target {card_id} is not in the collection")

    return [
        _with_bonus(card, reward) if card.card_id == card_id else card for card in player_cards
    ]
