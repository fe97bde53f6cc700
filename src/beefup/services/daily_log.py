"""In-memory daily food log with running totals."""

import threading
from fractions import Fraction

from beefup.domain.foods import ResolvedFoodItem
from beefup.domain.log import DailyLogSnapshot


class DailyLog:
    """Ordered ledger of resolved foods.

    Totals are adjusted on every append and remove instead of being summed
    from the items. They are kept as exact rationals, so removing an item
    restores the previous totals exactly and a total always equals the
    correctly rounded sum of the remaining items.
    """

    def __init__(self) -> None:
        self._items: dict[str, ResolvedFoodItem] = {}
        self._total_calories = Fraction(0)
        self._total_protein = Fraction(0)
        self._lock = threading.Lock()

    def append(self, item: ResolvedFoodItem) -> None:
        """Add an item at the end of the log."""
        calories = Fraction(item.calories)
        protein = Fraction(item.protein)
        with self._lock:
            if item.id in self._items:
                raise ValueError(f"Duplicate food item id: {item.id}")
            self._items[item.id] = item
            self._total_calories += calories
            self._total_protein += protein

    def remove(self, item_id: str) -> ResolvedFoodItem | None:
        """Remove an item by id; unknown ids are ignored."""
        with self._lock:
            item = self._items.pop(item_id, None)
            if item is None:
                return None
            self._total_calories -= Fraction(item.calories)
            self._total_protein -= Fraction(item.protein)
            return item

    def clear(self) -> None:
        """Drop every item and zero the totals."""
        with self._lock:
            self._items.clear()
            self._total_calories = Fraction(0)
            self._total_protein = Fraction(0)

    def snapshot(self) -> DailyLogSnapshot:
        """Return a consistent copy of items and totals."""
        with self._lock:
            return DailyLogSnapshot(
                items=tuple(self._items.values()),
                total_calories=float(self._total_calories),
                total_protein=float(self._total_protein),
            )

    @property
    def total_calories(self) -> float:
        with self._lock:
            return float(self._total_calories)

    @property
    def total_protein(self) -> float:
        with self._lock:
            return float(self._total_protein)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
