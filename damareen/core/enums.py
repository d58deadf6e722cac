from enum import StrEnum


class Element(StrEnum):
    EARTH = "earth"
    WATER = "water"
    AIR = "air"
    FIRE = "fire"


class CardKind(StrEnum):
    STANDARD = "standard"
    LEADER = "leader"


class DungeonType(StrEnum):
    ENCOUNTER = "encounter"
    MINOR = "minor"
    MAJOR = "major"


class Winner(StrEnum):
    PLAYER = "player"
    DUNGEON = "dungeon"


class ReasonCategory(StrEnum):
    DECISIVE_STRIKE = "decisive_strike"
    PLAYER_DAMAGE_OVERFLOW = "player_damage_overflow"
    DUNGEON_DAMAGE_OVERFLOW = "dungeon_damage_overflow"
    PLAYER_ELEMENT_ADVANTAGE = "player_element_advantage"
    DUNGEON_ELEMENT_ADVANTAGE = "dungeon_element_advantage"
    STALEMATE = "stalemate"
    MISSING_CARD = "missing_card"


class RewardStat(StrEnum):
    DAMAGE = "damage"
    HEALTH = "health"


class LeaderMode(StrEnum):
    DOUBLE_DAMAGE = "double_damage"
    DOUBLE_HEALTH = "double_health"
