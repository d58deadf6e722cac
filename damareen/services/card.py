from damareen.core.enums import CardKind, LeaderMode
from damareen.schemas.card import PlayerCardState, ResolvedCard, WorldCard
from damareen.schemas.dungeon import GameEnvironment

LEADER_STAT_CAP = 200


def resolve_environment_card(environment: GameEnvironment, card_id: str) -> ResolvedCard | None:
    """Resolve a catalog card at its base stats, as the dungeon fields it."""
    base = environment.get_card(card_id)
    if base is None:
        return None

    return ResolvedCard(
        id=base.id,
        name=base.name,
        damage=base.damage,
        health=base.health,
        element=base.element,
        kind=base.kind,
    )


def resolve_player_card(
    environment: GameEnvironment, owned: PlayerCardState
) -> ResolvedCard | None:
    """Resolve an owned card with its bonuses layered on the catalog stats."""
    base = environment.get_card(owned.card_id)
    if base is None:
        return None

    return ResolvedCard(
        id=base.id,
        name=base.name,
        damage=base.damage + owned.damage_bonus,
        health=base.health + owned.health_bonus,
        element=base.element,
        kind=base.kind,
    )


def derive_leader_card(
    base: WorldCard, *, card_id: str, name: str, mode: LeaderMode
) -> WorldCard:
    """Create a leader card from a standard card with one stat doubled.

    The doubled stat is capped at ``LEADER_STAT_CAP``. The element is inherited
    and the background image is left for the caller to generate.

    Raises:
        ValueError: If ``base`` is already a leader or ``name`` is blank.
    """
    if base.kind == CardKind.LEADER:
        msg = f"Cannot derive a leader from leader card {base}"
        raise ValueError(msg)

    name = name.strip()
    if not name:
        msg = "Leader card name must not be blank"
        raise ValueError(msg)

    damage = base.damage
    health = base.health
    if mode == LeaderMode.DOUBLE_DAMAGE:
        damage = min(base.damage * 2, LEADER_STAT_CAP)
    elif mode == LeaderMode.DOUBLE_HEALTH:
        health = min(base.health * 2, LEADER_STAT_CAP)

    return WorldCard(
        id=card_id,
        name=name,
        damage=damage,
        health=health,
        element=base.element,
        kind=CardKind.LEADER,
        source_card_id=base.id,
    )
