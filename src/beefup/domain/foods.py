"""Food domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodReferenceEntry:
    """Static per-serving nutrition values with matching keywords."""

    display_name: str
    calories_per_serving: float
    protein_grams_per_serving: float
    serving_description: str
    match_keywords: tuple[str, ...]


@dataclass(frozen=True)
class ResolvedFoodItem:
    """A food description resolved to calories and protein."""

    id: str
    name: str
    calories: float
    protein: float
