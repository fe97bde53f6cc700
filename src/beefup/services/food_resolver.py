"""Food description resolution via the reference table and the oracle."""

import asyncio
import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from uuid import uuid4

from pydantic import BaseModel, ValidationError

from beefup.domain.errors import OracleError, ResolutionError
from beefup.domain.foods import FoodReferenceEntry, ResolvedFoodItem
from beefup.domain.reference_table import REFERENCE_TABLE
from beefup.services.oracle import (
    FieldKind,
    FieldSpec,
    ObjectShape,
    OracleClient,
    parse_structured,
)

FOOD_SHAPE = ObjectShape.of(
    FieldSpec("name", FieldKind.STRING),
    FieldSpec("calories", FieldKind.NUMBER),
    FieldSpec("protein", FieldKind.NUMBER),
)

_DIGITS_RE = re.compile(r"[0-9]+")

_logger = logging.getLogger(__name__)


class FoodEstimate(BaseModel):
    """Oracle estimate for a food description."""

    name: str
    calories: float
    protein: float


@dataclass(frozen=True)
class ReferenceMatch:
    """Local table hit with its serving multiplier."""

    entry: FoodReferenceEntry
    multiplier: int

    @property
    def name(self) -> str:
        if self.multiplier > 1:
            return f"{self.entry.display_name} ({self.multiplier}x)"
        return f"{self.entry.display_name} ({self.entry.serving_description})"

    @property
    def calories(self) -> float:
        return self.entry.calories_per_serving * self.multiplier

    @property
    def protein(self) -> float:
        return self.entry.protein_grams_per_serving * self.multiplier


def match_reference(
    description: str, table: Sequence[FoodReferenceEntry] = REFERENCE_TABLE
) -> ReferenceMatch | None:
    """Return the first table entry with a keyword inside the description."""
    normalized = description.lower().strip()
    for entry in table:
        if any(keyword in normalized for keyword in entry.match_keywords):
            return ReferenceMatch(
                entry=entry, multiplier=_extract_multiplier(normalized)
            )
    return None


def _extract_multiplier(normalized: str) -> int:
    """Read the first run of digits as a serving count, never below one."""
    match = _DIGITS_RE.search(normalized)
    if match is None:
        return 1
    return max(int(match.group(0)), 1)


def _default_id_factory() -> str:
    return str(uuid4())


@dataclass
class FoodResolver:
    """Resolve free-text food descriptions to calories and protein."""

    oracle: OracleClient
    table: Sequence[FoodReferenceEntry] = REFERENCE_TABLE
    id_factory: Callable[[], str] = field(default=_default_id_factory)
    timeout_seconds: float = 20.0

    async def resolve(self, description: str) -> ResolvedFoodItem:
        """Resolve locally when possible, otherwise ask the oracle."""
        local = match_reference(description, self.table)
        if local is not None:
            _logger.info(
                "Resolved %r from reference table -> %s",
                description,
                local.entry.display_name,
            )
            return ResolvedFoodItem(
                id=self.id_factory(),
                name=local.name,
                calories=local.calories,
                protein=local.protein,
            )

        _logger.info("No reference match for %r, asking oracle", description)
        estimate = await self._estimate(description)
        return ResolvedFoodItem(
            id=self.id_factory(),
            name=estimate.name,
            calories=estimate.calories,
            protein=estimate.protein,
        )

    async def _estimate(self, description: str) -> FoodEstimate:
        prompt = (
            f'Estimate the calories and protein for: "{description}".\n'
            "Return a JSON object with name (short display name), "
            "calories (number), and protein (number in grams).\n"
            "Be conservative but realistic."
        )
        try:
            text = await asyncio.wait_for(
                self.oracle.complete(prompt, FOOD_SHAPE),
                timeout=self.timeout_seconds,
            )
            return FoodEstimate.model_validate(parse_structured(text, FOOD_SHAPE))
        except TimeoutError as exc:
            _logger.warning("Food estimate timed out for %r", description)
            raise ResolutionError("Food estimate timed out") from exc
        except (OracleError, ValidationError) as exc:
            _logger.warning("Food estimate failed for %r: %s", description, exc)
            raise ResolutionError("Could not identify food") from exc
