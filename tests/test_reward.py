"""Victory reward tests."""

import pytest

from damareen.core.enums import DungeonType, RewardStat
from damareen.schemas.card import PlayerCardState
from damareen.services.reward import REWARD_TABLE, apply_reward, get_reward_descriptor


@pytest.fixture
def collection() -> list[PlayerCardState]:
    return [
        PlayerCardState(card_id="aragorn"),
        PlayerCardState(card_id="galadriel", damage_bonus=1, health_bonus=2),
        PlayerCardState(card_id="melian"),
    ]


class TestApplyReward:
    @pytest.mark.parametrize(
        ("dungeon_type", "damage_bonus", "health_bonus"),
        [
            (DungeonType.ENCOUNTER, 2, 2),
            (DungeonType.MINOR, 1, 4),
            (DungeonType.MAJOR, 4, 2),
        ],
    )
    def test_bonus_by_dungeon_type(self, collection, dungeon_type, damage_bonus, health_bonus):
        updated = apply_reward(collection, "galadriel", dungeon_type)

        assert updated[1] == PlayerCardState(
            card_id="galadriel", damage_bonus=damage_bonus, health_bonus=health_bonus
        )

    def test_other_cards_untouched(self, collection):
        updated = apply_reward(collection, "galadriel", DungeonType.MINOR)

        assert updated[0] is collection[0]
        assert updated[2] is collection[2]
        assert [card.card_id for card in updated] == ["aragorn", "galadriel", "melian"]

    def test_input_is_not_mutated(self, collection):
        original = [card.model_copy() for card in collection]
        updated = apply_reward(collection, "aragorn", DungeonType.MAJOR)

        assert updated is not collection
        assert collection == original

    def test_rewards_accumulate(self, collection):
        """Each victory is its own reward event."""
        once = apply_reward(collection, "melian", DungeonType.MINOR)
        twice = apply_reward(once, "melian", DungeonType.MINOR)

        assert once[2].health_bonus == 2
        assert twice[2].health_bonus == 4
        assert twice[2].damage_bonus == 0

    def test_plain_string_type(self, collection):
        updated = apply_reward(collection, "aragorn", "encounter")
        assert updated[0].damage_bonus == 1

    def test_unknown_type_passes_through(self, collection):
        updated = apply_reward(collection, "aragorn", "legendary")

        assert updated == collection
        assert all(new is old for new, old in zip(updated, collection, strict=True))

    def test_unknown_card_passes_through(self, collection):
        updated = apply_reward(collection, "durin", DungeonType.MAJOR)
        assert updated == collection


class TestRewardDescriptor:
    def test_descriptors(self):
        assert get_reward_descriptor(DungeonType.ENCOUNTER).model_dump() == {
            "stat": RewardStat.DAMAGE,
            "amount": 1,
        }
        assert get_reward_descriptor(DungeonType.MINOR).stat == RewardStat.HEALTH
        assert get_reward_descriptor(DungeonType.MINOR).amount == 2
        assert get_reward_descriptor("major").amount == 3

    def test_unknown_type(self):
        assert get_reward_descriptor("legendary") is None

    def test_every_dungeon_type_has_a_reward(self):
        assert set(REWARD_TABLE) == set(DungeonType)
