"""Pet size tiers, derived from weight and used as a pricing dimension."""

from decimal import Decimal
from enum import Enum
from typing import Union

SMALL_MAX_KG = 10
MEDIUM_MAX_KG = 25


class SizeTier(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    def __str__(self) -> str:
        return self.value


def classify_size(weight: Union[int, float, Decimal]) -> SizeTier:
    """Size tier for a weight in kg; callers guarantee weight > 0."""
    if weight <= SMALL_MAX_KG:
        return SizeTier.SMALL
    if weight <= MEDIUM_MAX_KG:
        return SizeTier.MEDIUM
    return SizeTier.LARGE
