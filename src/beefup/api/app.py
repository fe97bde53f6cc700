"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from beefup.api.models import (
    AvatarResponse,
    DashboardResponse,
    FoodItemResponse,
    FoodRequest,
    LogFoodResponse,
    PlanResponse,
)
from beefup.app_logging import configure_logging
from beefup.containers import AppContainer
from beefup.domain.errors import (
    ConfigurationError,
    NotOnboardedError,
    OracleError,
    PlanError,
    ResolutionError,
    SessionBusyError,
)
from beefup.domain.profile import UserProfile
from beefup.services.avatar import build_figure, render_svg
from beefup.services.oracle import ObjectShape

FOOD_ERROR_MESSAGE = "Could not identify food. Try being more specific."
PLAN_ERROR_MESSAGE = "Could not generate your plan. Please try again."
MISSING_KEY_MESSAGE = "Server configuration error: Missing API Key"


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ConfigurationError)
    async def configuration_error(
        request: Request, exc: ConfigurationError
    ) -> Response:
        logger.error("Oracle configuration error: %s", exc)
        return _detail(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))

    @app.exception_handler(ResolutionError)
    async def resolution_error(request: Request, exc: ResolutionError) -> Response:
        return _detail(status.HTTP_502_BAD_GATEWAY, FOOD_ERROR_MESSAGE)

    @app.exception_handler(PlanError)
    async def plan_error(request: Request, exc: PlanError) -> Response:
        return _detail(status.HTTP_502_BAD_GATEWAY, PLAN_ERROR_MESSAGE)

    @app.exception_handler(SessionBusyError)
    async def busy_error(request: Request, exc: SessionBusyError) -> Response:
        return _detail(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(NotOnboardedError)
    async def onboarding_error(request: Request, exc: NotOnboardedError) -> Response:
        return _detail(status.HTTP_409_CONFLICT, str(exc))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/session/onboard")
    async def onboard(profile: UserProfile, request: Request) -> PlanResponse:
        """Generate targets for the profile and start a fresh log."""
        state_container: AppContainer = request.app.state.container
        plan = await state_container.session.onboard(profile)
        return PlanResponse.from_plan(plan)

    @app.get("/session")
    async def dashboard(request: Request) -> DashboardResponse:
        """Return progress toward the plan."""
        state_container: AppContainer = request.app.state.container
        return _dashboard_response(state_container)

    @app.post("/session/foods")
    async def log_food(body: FoodRequest, request: Request) -> LogFoodResponse:
        """Resolve a meal description and add it to the log."""
        state_container: AppContainer = request.app.state.container
        item = await state_container.session.log_food(body.description)
        return LogFoodResponse(
            item=FoodItemResponse.from_item(item),
            dashboard=_dashboard_response(state_container),
        )

    @app.delete("/session/foods/{item_id}")
    async def remove_food(item_id: str, request: Request) -> DashboardResponse:
        """Remove a logged item; unknown ids leave the log unchanged."""
        state_container: AppContainer = request.app.state.container
        state_container.session.remove_food(item_id)
        return _dashboard_response(state_container)

    @app.get("/session/avatar")
    async def avatar(request: Request) -> dict[str, object]:
        """Return the avatar state with its SVG path data."""
        state_container: AppContainer = request.app.state.container
        figure = build_figure(state_container.session.dashboard().avatar)
        return {
            "avatar": AvatarResponse.from_figure(figure).model_dump(),
            "paths": {
                "torso": figure.torso_path,
                "left_arm": figure.left_arm_path,
                "right_arm": figure.right_arm_path,
                "left_leg": figure.left_leg_path,
                "right_leg": figure.right_leg_path,
                "face": figure.face_path,
            },
            "belly": (
                {"rx": figure.belly_rx, "ry": figure.belly_ry}
                if figure.belly_rx is not None
                else None
            ),
        }

    @app.get("/session/avatar.svg")
    async def avatar_svg(request: Request) -> Response:
        """Render the avatar as an SVG image."""
        state_container: AppContainer = request.app.state.container
        figure = build_figure(state_container.session.dashboard().avatar)
        return Response(content=render_svg(figure), media_type="image/svg+xml")

    @app.post("/session/reset")
    async def reset(request: Request) -> dict[str, str]:
        """Forget the profile, plan and log."""
        state_container: AppContainer = request.app.state.container
        state_container.session.reset()
        return {"status": "ok"}

    @app.post("/api/oracle")
    async def oracle_relay(request: Request) -> Response:  # noqa: PLR0911
        """Forward a prompt to the provider using the server-side credential."""
        state_container: AppContainer = request.app.state.container
        if not state_container.settings.openai_api_key:
            logger.error("Relay called without a provider API key")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, MISSING_KEY_MESSAGE)
        try:
            body = await request.json()
        except ValueError:
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")
        if not isinstance(body, dict) or not body.get("prompt"):
            return _error(status.HTTP_400_BAD_REQUEST, "Missing prompt")
        raw_schema = body.get("schema")
        shape = None
        if raw_schema is not None:
            if not isinstance(raw_schema, dict):
                return _error(status.HTTP_400_BAD_REQUEST, "Invalid schema")
            try:
                shape = ObjectShape.from_json_schema(raw_schema)
            except ValueError as exc:
                return _error(status.HTTP_400_BAD_REQUEST, f"Invalid schema: {exc}")
        try:
            text = await state_container.provider_client.complete(
                str(body["prompt"]), shape
            )
        except ConfigurationError as exc:
            logger.error("Relay provider rejected the credential: %s", exc)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, MISSING_KEY_MESSAGE)
        except OracleError as exc:
            logger.warning("Relay provider call failed: %s", exc)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
        return JSONResponse({"text": text})

    @app.api_route("/api/oracle", methods=["GET", "PUT", "PATCH", "DELETE"])
    async def oracle_relay_method_not_allowed() -> Response:
        """Reject non-POST relay requests."""
        return _error(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")

    return app


def _dashboard_response(container: AppContainer) -> DashboardResponse:
    summary = container.session.dashboard()
    return DashboardResponse.from_summary(summary, build_figure(summary.avatar))


def _detail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
