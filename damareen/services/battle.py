from collections.abc import Sequence
from datetime import datetime

from loguru import logger

from damareen.core.enums import Element, ReasonCategory, Winner
from damareen.schemas.battle import BattleReason, BattleResult, BattleRoundResult, RoundOutcome
from damareen.schemas.card import DeckEntry, PlayerCardState, ResolvedCard
from damareen.schemas.dungeon import Dungeon, GameEnvironment
from damareen.services.card import resolve_environment_card, resolve_player_card
from damareen.utils.misc import get_utc_now

# Each element beats the one it maps to: fire > earth > water > air > fire
ELEMENT_ADVANTAGE: dict[Element, Element] = {
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.AIR,
    Element.AIR: Element.FIRE,
}

MISSING_CARD_ID = "missing"


def beats(attacker: Element, defender: Element) -> bool:
    """Whether ``attacker`` has the elemental advantage over ``defender``."""
    return ELEMENT_ADVANTAGE[attacker] == defender


def resolve_round(player: ResolvedCard, dungeon: ResolvedCard) -> RoundOutcome:
    """Decide a single round between two resolved cards.

    Rules are checked in order and the first match wins:

    1. Both sides would be knocked out: the player strikes first and wins.
    2. Player damage exceeds dungeon health: player wins.
    3. Dungeon damage exceeds player health: dungeon wins.
    4. Player element beats dungeon element: player wins.
    5. Dungeon element beats player element: dungeon wins.
    6. Anything else is a stalemate, which the dungeon wins.
    """
    player_lethal = player.damage > dungeon.health
    dungeon_lethal = dungeon.damage > player.health

    if player_lethal and dungeon_lethal:
        return RoundOutcome(
            winner=Winner.PLAYER,
            reason=BattleReason(
                category=ReasonCategory.DECISIVE_STRIKE,
                params={"player_name": player.name, "dungeon_name": dungeon.name},
            ),
        )

    if player_lethal:
        return RoundOutcome(
            winner=Winner.PLAYER,
            reason=BattleReason(
                category=ReasonCategory.PLAYER_DAMAGE_OVERFLOW,
                params={
                    "player_name": player.name,
                    "player_damage": player.damage,
                    "dungeon_name": dungeon.name,
                    "dungeon_health": dungeon.health,
                },
            ),
        )

    if dungeon_lethal:
        return RoundOutcome(
            winner=Winner.DUNGEON,
            reason=BattleReason(
                category=ReasonCategory.DUNGEON_DAMAGE_OVERFLOW,
                params={
                    "dungeon_name": dungeon.name,
                    "dungeon_damage": dungeon.damage,
                    "player_name": player.name,
                    "player_health": player.health,
                },
            ),
        )

    element_params: dict[str, str | int] = {
        "player_name": player.name,
        "player_element": player.element.value,
        "dungeon_name": dungeon.name,
        "dungeon_element": dungeon.element.value,
    }

    if beats(player.element, dungeon.element):
        return RoundOutcome(
            winner=Winner.PLAYER,
            reason=BattleReason(
                category=ReasonCategory.PLAYER_ELEMENT_ADVANTAGE, params=element_params
            ),
        )

    if beats(dungeon.element, player.element):
        return RoundOutcome(
            winner=Winner.DUNGEON,
            reason=BattleReason(
                category=ReasonCategory.DUNGEON_ELEMENT_ADVANTAGE, params=element_params
            ),
        )

    # Ties go to the defender
    return RoundOutcome(
        winner=Winner.DUNGEON,
        reason=BattleReason(
            category=ReasonCategory.STALEMATE, params={"dungeon_name": dungeon.name}
        ),
    )


def run_battle(
    environment: GameEnvironment,
    deck: Sequence[DeckEntry],
    dungeon: Dungeon,
    player_cards: Sequence[PlayerCardState],
    *,
    timestamp: datetime | None = None,
) -> BattleResult:
    """Fight a deck against a dungeon's lineup, one round per dungeon card.

    Rounds are driven by the dungeon's card order. Deck entries past its length
    are ignored, and any round whose cards cannot be resolved is scored as a
    dungeon win with a ``missing_card`` reason instead of raising.

    The player takes the battle when they win at least as many rounds as the
    dungeon, so an even split is a player victory.

    Args:
        environment: Catalog the card ids resolve against.
        deck: The player's ordered deck.
        dungeon: The opposing lineup.
        player_cards: The player's collection, providing per-card bonuses.
        timestamp: Completion time to record. Defaults to the current UTC time.
    """
    owned_cards = {card.card_id: card for card in player_cards}
    rounds: list[BattleRoundResult] = []
    player_wins = 0
    dungeon_wins = 0

    for index, dungeon_card_id in enumerate(dungeon.card_order):
        round_number = index + 1
        deck_entry = deck[index] if index < len(deck) else None

        dungeon_card = resolve_environment_card(environment, dungeon_card_id)
        owned = owned_cards.get(deck_entry.card_id) if deck_entry else None
        player_card = resolve_player_card(environment, owned) if owned else None

        if dungeon_card is None or player_card is None:
            logger.warning(
                f"Missing card data in round {round_number} of dungeon {dungeon.id}: "
                f"player={deck_entry.card_id if deck_entry else None} dungeon={dungeon_card_id}"
            )
            dungeon_wins += 1
            rounds.append(
                BattleRoundResult(
                    round=round_number,
                    player_card_id=deck_entry.card_id if deck_entry else MISSING_CARD_ID,
                    dungeon_card_id=dungeon_card_id,
                    winner=Winner.DUNGEON,
                    reason=BattleReason(category=ReasonCategory.MISSING_CARD),
                )
            )
            continue

        outcome = resolve_round(player_card, dungeon_card)
        logger.debug(
            f"Round {round_number}: {player_card.name} vs {dungeon_card.name} -> "
            f"{outcome.winner} ({outcome.reason.category})"
        )
        rounds.append(
            BattleRoundResult(
                round=round_number,
                player_card_id=player_card.id,
                dungeon_card_id=dungeon_card.id,
                winner=outcome.winner,
                reason=outcome.reason,
            )
        )

        if outcome.winner == Winner.PLAYER:
            player_wins += 1
        else:
            dungeon_wins += 1

    player_victory = player_wins >= dungeon_wins
    logger.info(
        f"Battle against dungeon {dungeon.id} finished {player_wins}-{dungeon_wins}, "
        f"player_victory={player_victory}"
    )

    return BattleResult(
        dungeon_id=dungeon.id,
        player_wins=player_wins,
        dungeon_wins=dungeon_wins,
        rounds=tuple(rounds),
        player_victory=player_victory,
        timestamp=timestamp or get_utc_now(),
    )
