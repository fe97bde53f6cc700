"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from beefup.config import Settings
from beefup.containers import AppContainer
from beefup.domain.errors import OracleError
from beefup.domain.profile import ActivityLevel, Gender, Goal, UserProfile
from beefup.services.food_resolver import FoodResolver
from beefup.services.oracle import OracleClient, OutputShape
from beefup.services.plan_generator import PlanGenerator
from beefup.services.session import DietSession

PLAN_PAYLOAD = {
    "targetCalories": 2000,
    "targetProteinGrams": 150,
    "advice": "Hit your protein every day and keep lifting heavy.",
}

FOOD_PAYLOAD = {"name": "Grilled Salmon", "calories": 420, "protein": 38}


@dataclass
class ScriptedOracle(OracleClient):
    """Fake oracle that replays queued responses and records prompts."""

    responses: list[str | Exception] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    shapes: list[OutputShape | None] = field(default_factory=list)

    def queue_json(self, payload: dict[str, object]) -> None:
        self.responses.append(json.dumps(payload))

    async def complete(self, prompt: str, shape: OutputShape | None = None) -> str:
        self.prompts.append(prompt)
        self.shapes.append(shape)
        if not self.responses:
            raise OracleError("No scripted response")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        return None


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", oracle_timeout_seconds=5)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        age=28,
        gender=Gender.MALE,
        weight=72,
        height=178,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        goal=Goal.BULK,
    )


@pytest.fixture
def oracle() -> ScriptedOracle:
    return ScriptedOracle()


@pytest.fixture
def session(oracle: ScriptedOracle) -> DietSession:
    return DietSession(
        plan_generator=PlanGenerator(oracle=oracle),
        food_resolver=FoodResolver(oracle=oracle),
    )


@pytest.fixture
def container(
    settings: Settings, oracle: ScriptedOracle, session: DietSession
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        oracle_client=oracle,
        provider_client=oracle,
        plan_generator=session.plan_generator,
        food_resolver=session.food_resolver,
        session=session,
        close_resources=close_resources,
    )
