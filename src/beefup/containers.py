"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from beefup.adapters.openai_oracle_client import OpenAIOracleClient
from beefup.adapters.relay_oracle_client import RelayOracleClient
from beefup.config import Settings
from beefup.services.food_resolver import FoodResolver
from beefup.services.oracle import OracleClient
from beefup.services.plan_generator import PlanGenerator
from beefup.services.session import DietSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    oracle_client: OracleClient
    provider_client: OracleClient
    plan_generator: PlanGenerator
    food_resolver: FoodResolver
    session: DietSession
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    The provider client holds the credential and backs the relay endpoint.
    The session talks to it directly, or through the relay in relay mode.
    """
    resolved_settings = settings or Settings()
    timeout = resolved_settings.oracle_timeout_seconds
    provider_client = OpenAIOracleClient.create(
        resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        timeout_seconds=timeout,
    )
    relay_client: RelayOracleClient | None = None
    oracle_client: OracleClient = provider_client
    if resolved_settings.oracle_mode == "relay":
        relay_client = RelayOracleClient.create(
            resolved_settings.relay_url, timeout_seconds=timeout
        )
        oracle_client = relay_client

    plan_generator = PlanGenerator(oracle=oracle_client, timeout_seconds=timeout)
    food_resolver = FoodResolver(oracle=oracle_client, timeout_seconds=timeout)
    session = DietSession(plan_generator=plan_generator, food_resolver=food_resolver)

    async def close_resources() -> None:
        await provider_client.close()
        if relay_client is not None:
            await relay_client.close()

    return AppContainer(
        settings=resolved_settings,
        oracle_client=oracle_client,
        provider_client=provider_client,
        plan_generator=plan_generator,
        food_resolver=food_resolver,
        session=session,
        close_resources=close_resources,
    )
