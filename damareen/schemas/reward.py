from damareen.core.enums import RewardStat

from ._base import BaseModel


class RewardDescriptor(BaseModel):
    """Bonus granted to the chosen card after a dungeon victory."""

    stat: RewardStat
    amount: int
