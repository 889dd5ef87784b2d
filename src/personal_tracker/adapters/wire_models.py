"""Pydantic models for the tracker service's JSON payloads."""

from datetime import UTC, date, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from personal_tracker.domain.auth import AuthResponse, User
from personal_tracker.domain.health import (
    ConsumedTarget,
    Exercise,
    ExerciseSet,
    FoodItem,
    HealthSummary,
    MealRecord,
    MealType,
    NutritionTarget,
    WaterRecord,
    WeightRecord,
    WorkoutRecord,
    WorkoutType,
)
from personal_tracker.domain.inventory import (
    InventoryCategory,
    InventoryItem,
    InventorySummary,
)
from personal_tracker.domain.reminders import (
    Reminder,
    ReminderList,
    ReminderPriority,
    SyncResult,
)


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


Instant = Annotated[datetime, AfterValidator(_assume_utc)]


class WireModel(BaseModel):
    """Base model reading and writing camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def to_wire(
    values: dict[str, object],
    renames: dict[str, str] | None = None,
    *,
    skip_none: bool = True,
) -> dict[str, object]:
    """Convert snake_case fields into a JSON-ready camelCase body.

    Keys listed in `renames` are sent under the given name instead. With
    `skip_none`, unset optional fields are left out of the body; partial
    updates pass `skip_none=False` so an explicit None clears the field.
    """
    renames = renames or {}
    return {
        renames.get(key, to_camel(key)): to_jsonable_python(value)
        for key, value in values.items()
        if value is not None or not skip_none
    }


class UserPayload(WireModel):
    id: str
    username: str
    email: str
    avatar: str | None = None
    created_at: Instant | None = None

    def to_domain(self) -> User:
        return User(
            id=self.id,
            username=self.username,
            email=self.email,
            avatar=self.avatar,
            created_at=self.created_at,
        )


class AuthResponsePayload(WireModel):
    token: str
    refresh_token: str
    user: UserPayload

    def to_domain(self) -> AuthResponse:
        return AuthResponse(
            token=self.token,
            refresh_token=self.refresh_token,
            user=self.user.to_domain(),
        )


class FoodItemPayload(WireModel):
    id: str
    name: str
    amount: float
    unit: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def to_domain(self) -> FoodItem:
        return FoodItem(**self.model_dump())


class MealPayload(WireModel):
    id: str
    date: date
    meal_type: MealType
    time: str
    foods: list[FoodItemPayload] = Field(default_factory=list)
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    notes: str | None = None
    created_at: Instant | None = None
    updated_at: Instant | None = None

    def to_domain(self) -> MealRecord:
        return MealRecord(
            id=self.id,
            date=self.date,
            meal_type=self.meal_type,
            time=self.time,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            foods=[food.to_domain() for food in self.foods],
            notes=self.notes,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class WaterPayload(WireModel):
    id: str
    date: date
    time: str
    amount: float
    created_at: Instant | None = None

    def to_domain(self) -> WaterRecord:
        return WaterRecord(
            id=self.id,
            date=self.date,
            time=self.time,
            amount=self.amount,
            created_at=self.created_at,
        )


class ExerciseSetPayload(WireModel):
    reps: int
    weight: float | None = None
    duration: float | None = None


class ExercisePayload(WireModel):
    id: str
    name: str
    sets: list[ExerciseSetPayload] = Field(default_factory=list)

    def to_domain(self) -> Exercise:
        return Exercise(
            id=self.id,
            name=self.name,
            sets=[
                ExerciseSet(reps=s.reps, weight=s.weight, duration=s.duration)
                for s in self.sets
            ],
        )


class WorkoutPayload(WireModel):
    id: str
    date: date
    workout_type: WorkoutType = Field(alias="type")
    duration: float
    exercises: list[ExercisePayload] = Field(default_factory=list)
    calories_burned: float = 0.0
    notes: str | None = None
    completed: bool = False
    created_at: Instant | None = None
    updated_at: Instant | None = None

    def to_domain(self) -> WorkoutRecord:
        return WorkoutRecord(
            id=self.id,
            date=self.date,
            workout_type=self.workout_type,
            duration=self.duration,
            calories_burned=self.calories_burned,
            completed=self.completed,
            exercises=[exercise.to_domain() for exercise in self.exercises],
            notes=self.notes,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class WeightPayload(WireModel):
    id: str
    date: date
    weight: float
    body_fat: float | None = None
    created_at: Instant | None = None

    def to_domain(self) -> WeightRecord:
        return WeightRecord(
            id=self.id,
            date=self.date,
            weight=self.weight,
            body_fat=self.body_fat,
            created_at=self.created_at,
        )


class NutritionTargetPayload(WireModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    water: float

    def to_domain(self) -> NutritionTarget:
        return NutritionTarget(**self.model_dump())


class ConsumedTargetPayload(WireModel):
    consumed: float = 0.0
    target: float = 0.0


class WorkoutStatusPayload(WireModel):
    completed: bool = False
    duration: float = 0.0


class HealthSummaryPayload(WireModel):
    date: date
    calories: ConsumedTargetPayload
    protein: ConsumedTargetPayload
    carbs: ConsumedTargetPayload
    fat: ConsumedTargetPayload
    water: ConsumedTargetPayload
    workout: WorkoutStatusPayload = Field(default_factory=WorkoutStatusPayload)

    def to_domain(self) -> HealthSummary:
        def pair(value: ConsumedTargetPayload) -> ConsumedTarget:
            return ConsumedTarget(consumed=value.consumed, target=value.target)

        return HealthSummary(
            date=self.date,
            calories=pair(self.calories),
            protein=pair(self.protein),
            carbs=pair(self.carbs),
            fat=pair(self.fat),
            water=pair(self.water),
            workout_completed=self.workout.completed,
            workout_duration=self.workout.duration,
        )


class InventoryItemPayload(WireModel):
    id: str
    name: str
    category: InventoryCategory
    quantity: float
    unit: str
    min_quantity: float = 0.0
    expiry_date: Instant | None = None
    last_replaced: Instant | None = None
    replacement_cycle: int | None = None
    location: str | None = None
    notes: str | None = None
    needs_to_buy: bool = False
    created_at: Instant | None = None
    updated_at: Instant | None = None

    def to_domain(self) -> InventoryItem:
        return InventoryItem(**self.model_dump())


class InventorySummaryPayload(WireModel):
    total_items: int = 0
    needs_to_buy: int = 0
    expiring_soon: int = 0
    needs_replacement: int = 0

    def to_domain(self) -> InventorySummary:
        return InventorySummary(**self.model_dump())


class ReminderPayload(WireModel):
    id: str
    title: str
    notes: str | None = None
    due_date: Instant | None = None
    priority: ReminderPriority = ReminderPriority.NONE
    completed: bool = False
    list: ReminderList
    created_at: Instant | None = None
    updated_at: Instant | None = None

    def to_domain(self) -> Reminder:
        return Reminder(**self.model_dump())


class SyncResultPayload(WireModel):
    synced: bool = False
    last_synced: Instant | None = None

    def to_domain(self) -> SyncResult:
        return SyncResult(synced=self.synced, last_synced=self.last_synced)
