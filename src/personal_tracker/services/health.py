"""Health state: meals, water, workouts, weight, and nutrition targets."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol, TypeVar

from personal_tracker.domain.health import (
    HealthSummary,
    MacroProgress,
    MealRecord,
    NewMeal,
    NewWorkout,
    NutritionProgress,
    NutritionTarget,
    WaterRecord,
    WeightRecord,
    WorkoutRecord,
)

_logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", MealRecord, WorkoutRecord)


class HealthApi(Protocol):
    """Remote interface for health records."""

    async def list_meals(self, day: date) -> list[MealRecord]:
        """Return meals logged on a date."""

    async def list_meals_in_range(self, start: date, end: date) -> list[MealRecord]:
        """Return meals logged between two dates, inclusive."""

    async def create_meal(self, meal: NewMeal) -> MealRecord:
        """Create a meal and return it with its assigned id."""

    async def update_meal(self, meal_id: str, changes: dict[str, object]) -> MealRecord:
        """Apply field changes to a meal and return the stored meal."""

    async def delete_meal(self, meal_id: str) -> None:
        """Delete a meal."""

    async def list_water(self, day: date) -> list[WaterRecord]:
        """Return water records for a date."""

    async def create_water(self, day: date, time: str, amount: float) -> WaterRecord:
        """Record a drink and return it."""

    async def delete_water(self, record_id: str) -> None:
        """Delete a water record."""

    async def list_workouts(self, day: date) -> list[WorkoutRecord]:
        """Return workouts for a date."""

    async def list_workouts_in_range(
        self, start: date, end: date
    ) -> list[WorkoutRecord]:
        """Return workouts between two dates, inclusive."""

    async def create_workout(self, workout: NewWorkout) -> WorkoutRecord:
        """Create a workout and return it."""

    async def update_workout(
        self, workout_id: str, changes: dict[str, object]
    ) -> WorkoutRecord:
        """Apply field changes to a workout and return it."""

    async def delete_workout(self, workout_id: str) -> None:
        """Delete a workout."""

    async def list_weight(self, days: int) -> list[WeightRecord]:
        """Return weight records for the last `days` days."""

    async def create_weight(
        self, day: date, weight: float, body_fat: float | None
    ) -> WeightRecord:
        """Record a weight measurement and return it."""

    async def get_summary(self, day: date) -> HealthSummary:
        """Return the server-computed summary for a date."""

    async def get_targets(self) -> NutritionTarget:
        """Return the user's nutrition targets."""

    async def update_targets(self, targets: NutritionTarget) -> NutritionTarget:
        """Replace the user's nutrition targets."""


@dataclass
class HealthService:
    """Local copy of the health collections for the selected date.

    Fetches replace collections wholesale. Write actions touch local state
    only after the service confirms them, and re-raise failures. Every
    `today_*` value is computed from the current collections on read.
    """

    api: HealthApi
    meals: list[MealRecord] = field(default_factory=list)
    water_records: list[WaterRecord] = field(default_factory=list)
    workouts: list[WorkoutRecord] = field(default_factory=list)
    weight_history: list[WeightRecord] = field(default_factory=list)
    targets: NutritionTarget = field(default_factory=NutritionTarget)
    selected_date: date = field(default_factory=date.today)
    loading: bool = False

    async def fetch_today_data(self) -> None:
        """Refresh meals, water, and workouts for the selected date.

        The three requests run concurrently and are applied together only if
        all of them succeed. Failures are logged and leave the collections as
        they were.
        """
        self.loading = True
        try:
            day = self.selected_date
            meals, water, workouts = await asyncio.gather(
                self.api.list_meals(day),
                self.api.list_water(day),
                self.api.list_workouts(day),
            )
            self.meals = meals
            self.water_records = water
            self.workouts = workouts
        except Exception:
            _logger.exception("Failed to fetch health data")
        finally:
            self.loading = False

    async def fetch_weight_history(self, days: int = 30) -> None:
        """Replace the weight history with the last `days` days."""
        try:
            self.weight_history = await self.api.list_weight(days)
        except Exception:
            _logger.exception("Failed to fetch weight history")

    async def fetch_targets(self) -> None:
        """Replace the nutrition targets with the stored ones."""
        try:
            self.targets = await self.api.get_targets()
        except Exception:
            _logger.exception("Failed to fetch nutrition targets")

    async def set_selected_date(self, day: date) -> None:
        """Move the date cursor and refresh the day's records."""
        self.selected_date = day
        await self.fetch_today_data()

    async def add_meal(self, meal: NewMeal) -> MealRecord:
        try:
            created = await self.api.create_meal(meal)
        except Exception:
            _logger.exception("Failed to add meal")
            raise
        self.meals.append(created)
        return created

    async def update_meal(self, meal_id: str, changes: dict[str, object]) -> MealRecord:
        try:
            updated = await self.api.update_meal(meal_id, changes)
        except Exception:
            _logger.exception("Failed to update meal %s", meal_id)
            raise
        self.meals = _replace_by_id(self.meals, updated)
        return updated

    async def delete_meal(self, meal_id: str) -> None:
        try:
            await self.api.delete_meal(meal_id)
        except Exception:
            _logger.exception("Failed to delete meal %s", meal_id)
            raise
        self.meals = [meal for meal in self.meals if meal.id != meal_id]

    async def add_water(self, amount: float) -> WaterRecord:
        """Record a drink on the selected date, stamped with the current time."""
        try:
            record = await self.api.create_water(
                self.selected_date, datetime.now(tz=UTC).isoformat(), amount
            )
        except Exception:
            _logger.exception("Failed to add water record")
            raise
        self.water_records.append(record)
        return record

    async def delete_water(self, record_id: str) -> None:
        try:
            await self.api.delete_water(record_id)
        except Exception:
            _logger.exception("Failed to delete water record %s", record_id)
            raise
        self.water_records = [r for r in self.water_records if r.id != record_id]

    async def add_workout(self, workout: NewWorkout) -> WorkoutRecord:
        try:
            created = await self.api.create_workout(workout)
        except Exception:
            _logger.exception("Failed to add workout")
            raise
        self.workouts.append(created)
        return created

    async def update_workout(
        self, workout_id: str, changes: dict[str, object]
    ) -> WorkoutRecord:
        try:
            updated = await self.api.update_workout(workout_id, changes)
        except Exception:
            _logger.exception("Failed to update workout %s", workout_id)
            raise
        self.workouts = _replace_by_id(self.workouts, updated)
        return updated

    async def delete_workout(self, workout_id: str) -> None:
        try:
            await self.api.delete_workout(workout_id)
        except Exception:
            _logger.exception("Failed to delete workout %s", workout_id)
            raise
        self.workouts = [w for w in self.workouts if w.id != workout_id]

    async def add_weight(
        self, weight: float, body_fat: float | None = None
    ) -> WeightRecord:
        """Record a weight measurement on the selected date."""
        try:
            record = await self.api.create_weight(self.selected_date, weight, body_fat)
        except Exception:
            _logger.exception("Failed to add weight record")
            raise
        self.weight_history.append(record)
        return record

    async def update_targets(self, targets: NutritionTarget) -> NutritionTarget:
        try:
            stored = await self.api.update_targets(targets)
        except Exception:
            _logger.exception("Failed to update nutrition targets")
            raise
        self.targets = stored
        return stored

    @property
    def today_meals(self) -> list[MealRecord]:
        return [meal for meal in self.meals if meal.date == self.selected_date]

    @property
    def today_calories(self) -> float:
        return sum(meal.calories for meal in self.today_meals)

    @property
    def today_protein(self) -> float:
        return sum(meal.protein for meal in self.today_meals)

    @property
    def today_carbs(self) -> float:
        return sum(meal.carbs for meal in self.today_meals)

    @property
    def today_fat(self) -> float:
        return sum(meal.fat for meal in self.today_meals)

    @property
    def today_water_intake(self) -> float:
        return sum(
            record.amount
            for record in self.water_records
            if record.date == self.selected_date
        )

    @property
    def today_workout(self) -> WorkoutRecord | None:
        """Return the first workout on the selected date, if any."""
        return next(
            (w for w in self.workouts if w.date == self.selected_date), None
        )

    @property
    def nutrition_progress(self) -> NutritionProgress:
        targets = self.targets
        return NutritionProgress(
            calories=MacroProgress(self.today_calories, targets.calories),
            protein=MacroProgress(self.today_protein, targets.protein),
            carbs=MacroProgress(self.today_carbs, targets.carbs),
            fat=MacroProgress(self.today_fat, targets.fat),
            water=MacroProgress(self.today_water_intake, targets.water),
        )


def _replace_by_id(records: list[RecordT], updated: RecordT) -> list[RecordT]:
    return [updated if record.id == updated.id else record for record in records]
