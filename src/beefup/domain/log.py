"""Daily log snapshot models."""

from dataclasses import dataclass

from beefup.domain.foods import ResolvedFoodItem


@dataclass(frozen=True)
class DailyLogSnapshot:
    """Point-in-time view of the daily log."""

    items: tuple[ResolvedFoodItem, ...]
    total_calories: float
    total_protein: float
