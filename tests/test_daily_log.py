"""Tests for the in-memory daily log."""

import math
import random
import threading

import pytest

from beefup.domain.foods import ResolvedFoodItem
from beefup.services.daily_log import DailyLog


def _item(item_id: str, calories: float, protein: float) -> ResolvedFoodItem:
    return ResolvedFoodItem(
        id=item_id, name=f"food {item_id}", calories=calories, protein=protein
    )


def test_append_keeps_order_and_totals() -> None:
    log = DailyLog()

    log.append(_item("a", 104, 3))
    log.append(_item("b", 130, 2.7))

    snapshot = log.snapshot()
    assert [item.id for item in snapshot.items] == ["a", "b"]
    assert snapshot.total_calories == 234
    assert snapshot.total_protein == pytest.approx(5.7)


def test_remove_decrements_totals() -> None:
    log = DailyLog()
    log.append(_item("a", 104, 3))
    log.append(_item("b", 130, 2.7))

    removed = log.remove("a")

    assert removed is not None
    assert removed.id == "a"
    assert log.total_calories == 130
    assert log.total_protein == 2.7
    assert len(log) == 1


def test_remove_unknown_id_is_a_noop() -> None:
    log = DailyLog()
    log.append(_item("a", 104, 3))

    assert log.remove("missing") is None
    assert log.total_calories == 104
    assert len(log) == 1


def test_append_then_remove_restores_totals_exactly() -> None:
    log = DailyLog()
    log.append(_item("a", 0.1, 0.2))
    before = log.snapshot()

    log.append(_item("b", 0.2, 0.7))
    log.remove("b")

    after = log.snapshot()
    assert after.total_calories == before.total_calories
    assert after.total_protein == before.total_protein


def test_duplicate_ids_are_rejected() -> None:
    log = DailyLog()
    log.append(_item("a", 104, 3))

    with pytest.raises(ValueError):
        log.append(_item("a", 50, 1))
    assert log.total_calories == 104


def test_clear_empties_log() -> None:
    log = DailyLog()
    log.append(_item("a", 104, 3))

    log.clear()

    assert len(log) == 0
    assert log.total_calories == 0
    assert log.total_protein == 0


def test_random_sequences_keep_totals_consistent() -> None:
    rng = random.Random(1234)
    for _ in range(50):
        log = DailyLog()
        next_id = 0
        for _ in range(60):
            snapshot = log.snapshot()
            if snapshot.items and rng.random() < 0.4:
                target = rng.choice(snapshot.items).id
                log.remove(target)
            elif rng.random() < 0.1:
                log.remove(f"ghost-{rng.randint(0, 1000)}")
            else:
                log.append(
                    _item(
                        str(next_id),
                        rng.choice([39, 104, 130, rng.uniform(0, 900)]),
                        rng.choice([2, 2.7, 6, rng.uniform(0, 60)]),
                    )
                )
                next_id += 1
            snapshot = log.snapshot()
            assert snapshot.total_calories == math.fsum(
                item.calories for item in snapshot.items
            )
            assert snapshot.total_protein == math.fsum(
                item.protein for item in snapshot.items
            )


def test_concurrent_appends_and_removes() -> None:
    log = DailyLog()

    def worker(prefix: str) -> None:
        for index in range(200):
            log.append(_item(f"{prefix}-{index}", 10, 1))
            if index % 2:
                log.remove(f"{prefix}-{index - 1}")

    threads = [threading.Thread(target=worker, args=(str(n),)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    snapshot = log.snapshot()
    assert len(snapshot.items) == 400
    assert snapshot.total_calories == 4000
    assert snapshot.total_protein == 400
