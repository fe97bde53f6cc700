"""Pydantic request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from beefup.domain.foods import ResolvedFoodItem
from beefup.domain.profile import DietPlan, UserProfile
from beefup.domain.progress import FigureGeometry
from beefup.services.session import DashboardSummary


class FoodRequest(BaseModel):
    """Free-text meal description."""

    description: str = Field(min_length=1)


class PlanResponse(BaseModel):
    """Daily targets for the session."""

    target_calories: int
    target_protein_grams: int
    advice: str

    @classmethod
    def from_plan(cls, plan: DietPlan) -> "PlanResponse":
        return cls(
            target_calories=plan.target_calories,
            target_protein_grams=plan.target_protein_grams,
            advice=plan.advice,
        )


class FoodItemResponse(BaseModel):
    """Logged food item."""

    id: str
    name: str
    calories: float
    protein: float

    @classmethod
    def from_item(cls, item: ResolvedFoodItem) -> "FoodItemResponse":
        return cls(
            id=item.id, name=item.name, calories=item.calories, protein=item.protein
        )


class AvatarResponse(BaseModel):
    """Avatar classification and render hints."""

    ratio: float
    shape: str
    mood: str
    badge: str
    torso_shape: str
    limb_width: float
    torso_width: float
    muscle_definition: float
    belly_scale: float
    head_radius: float

    @classmethod
    def from_figure(cls, figure: FigureGeometry) -> "AvatarResponse":
        state = figure.state
        return cls(
            ratio=state.ratio,
            shape=state.shape.value,
            mood=state.mood.value,
            badge=figure.badge,
            torso_shape=figure.torso_shape.value,
            limb_width=state.limb_width,
            torso_width=state.torso_width,
            muscle_definition=state.muscle_definition,
            belly_scale=state.belly_scale,
            head_radius=state.head_radius,
        )


class DashboardResponse(BaseModel):
    """Session progress toward the plan."""

    profile: UserProfile
    plan: PlanResponse
    items: list[FoodItemResponse]
    total_calories: float
    total_protein: float
    calorie_progress: float
    protein_progress: float
    remaining_calories: float
    avatar: AvatarResponse

    @classmethod
    def from_summary(
        cls, summary: DashboardSummary, figure: FigureGeometry
    ) -> "DashboardResponse":
        return cls(
            profile=summary.profile,
            plan=PlanResponse.from_plan(summary.plan),
            items=[FoodItemResponse.from_item(item) for item in summary.log.items],
            total_calories=summary.log.total_calories,
            total_protein=summary.log.total_protein,
            calorie_progress=summary.calorie_progress,
            protein_progress=summary.protein_progress,
            remaining_calories=summary.remaining_calories,
            avatar=AvatarResponse.from_figure(figure),
        )


class LogFoodResponse(BaseModel):
    """Newly logged item with the refreshed dashboard."""

    item: FoodItemResponse
    dashboard: DashboardResponse
