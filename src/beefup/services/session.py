"""Single-user diet session tying the plan, log and avatar together."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from beefup.domain.errors import NotOnboardedError, SessionBusyError
from beefup.domain.foods import ResolvedFoodItem
from beefup.domain.log import DailyLogSnapshot
from beefup.domain.profile import DietPlan, UserProfile
from beefup.domain.progress import AvatarState
from beefup.services.daily_log import DailyLog
from beefup.services.food_resolver import FoodResolver
from beefup.services.plan_generator import PlanGenerator
from beefup.services.progress import classify, progress_ratio

PLAN_ACTION = "plan"
FOOD_ACTION = "food"

_logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    """Progress toward the plan for the current log."""

    profile: UserProfile
    plan: DietPlan
    log: DailyLogSnapshot
    calorie_progress: float
    protein_progress: float
    remaining_calories: float
    avatar: AvatarState


@dataclass
class DietSession:
    """In-memory session state; nothing survives a restart."""

    plan_generator: PlanGenerator
    food_resolver: FoodResolver
    profile: UserProfile | None = None
    plan: DietPlan | None = None
    log: DailyLog = field(default_factory=DailyLog)
    _pending: set[str] = field(default_factory=set)

    @property
    def is_onboarded(self) -> bool:
        return self.profile is not None and self.plan is not None

    def is_pending(self, action: str) -> bool:
        """Whether an oracle call for the action is in flight."""
        return action in self._pending

    async def onboard(self, profile: UserProfile) -> DietPlan:
        """Generate a plan and start a fresh log.

        Nothing is committed when plan generation fails.
        """
        with self._in_flight(PLAN_ACTION):
            plan = await self.plan_generator.generate(profile)
        self.profile = profile
        self.plan = plan
        self.log.clear()
        _logger.info("Session onboarded with goal %s", profile.goal.value)
        return plan

    async def log_food(self, description: str) -> ResolvedFoodItem:
        """Resolve a description and append it to the log."""
        self._require_onboarded()
        with self._in_flight(FOOD_ACTION):
            item = await self.food_resolver.resolve(description)
        self.log.append(item)
        return item

    def remove_food(self, item_id: str) -> ResolvedFoodItem | None:
        """Remove a logged item; unknown ids are ignored."""
        return self.log.remove(item_id)

    def reset(self) -> None:
        """Forget the profile, plan and log."""
        self.profile = None
        self.plan = None
        self.log.clear()

    def dashboard(self) -> DashboardSummary:
        """Summarize progress and the avatar for the current totals."""
        profile, plan = self._require_onboarded()
        snapshot = self.log.snapshot()
        calorie_progress = progress_ratio(
            snapshot.total_calories, plan.target_calories
        )
        return DashboardSummary(
            profile=profile,
            plan=plan,
            log=snapshot,
            calorie_progress=calorie_progress,
            protein_progress=progress_ratio(
                snapshot.total_protein, plan.target_protein_grams
            ),
            remaining_calories=plan.target_calories - snapshot.total_calories,
            avatar=classify(calorie_progress),
        )

    def _require_onboarded(self) -> tuple[UserProfile, DietPlan]:
        if self.profile is None or self.plan is None:
            raise NotOnboardedError("Complete onboarding first")
        return self.profile, self.plan

    @contextmanager
    def _in_flight(self, action: str) -> Iterator[None]:
        if action in self._pending:
            raise SessionBusyError(f"A {action} request is already in progress")
        self._pending.add(action)
        try:
            yield
        finally:
            self._pending.discard(action)
