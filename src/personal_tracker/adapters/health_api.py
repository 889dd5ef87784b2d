"""HTTP adapter for the health endpoints."""

from dataclasses import asdict, dataclass
from datetime import date

from personal_tracker.adapters.remote_client import HttpxRemoteClient, parse, parse_list
from personal_tracker.adapters.wire_models import (
    HealthSummaryPayload,
    MealPayload,
    NutritionTargetPayload,
    WaterPayload,
    WeightPayload,
    WorkoutPayload,
    to_wire,
)
from personal_tracker.domain.health import (
    HealthSummary,
    MealRecord,
    NewMeal,
    NewWorkout,
    NutritionTarget,
    WaterRecord,
    WeightRecord,
    WorkoutRecord,
)
from personal_tracker.services.health import HealthApi

_WORKOUT_RENAMES = {"workout_type": "type"}


@dataclass
class HttpxHealthApi(HealthApi):
    """Health API backed by the shared remote client."""

    remote: HttpxRemoteClient

    async def list_meals(self, day: date) -> list[MealRecord]:
        payload = await self.remote.request(
            "GET", "/health/meals", params={"date": day.isoformat()}
        )
        return [meal.to_domain() for meal in parse_list(MealPayload, payload)]

    async def list_meals_in_range(self, start: date, end: date) -> list[MealRecord]:
        payload = await self.remote.request(
            "GET",
            "/health/meals",
            params={"startDate": start.isoformat(), "endDate": end.isoformat()},
        )
        return [meal.to_domain() for meal in parse_list(MealPayload, payload)]

    async def create_meal(self, meal: NewMeal) -> MealRecord:
        payload = await self.remote.request(
            "POST", "/health/meals", json=to_wire(asdict(meal))
        )
        return parse(MealPayload, payload).to_domain()

    async def update_meal(self, meal_id: str, changes: dict[str, object]) -> MealRecord:
        payload = await self.remote.request(
            "PUT",
            f"/health/meals/{meal_id}",
            json=to_wire(changes, skip_none=False),
        )
        return parse(MealPayload, payload).to_domain()

    async def delete_meal(self, meal_id: str) -> None:
        await self.remote.request("DELETE", f"/health/meals/{meal_id}")

    async def list_water(self, day: date) -> list[WaterRecord]:
        payload = await self.remote.request(
            "GET", "/health/water", params={"date": day.isoformat()}
        )
        return [record.to_domain() for record in parse_list(WaterPayload, payload)]

    async def create_water(self, day: date, time: str, amount: float) -> WaterRecord:
        payload = await self.remote.request(
            "POST",
            "/health/water",
            json={"date": day.isoformat(), "time": time, "amount": amount},
        )
        return parse(WaterPayload, payload).to_domain()

    async def delete_water(self, record_id: str) -> None:
        await self.remote.request("DELETE", f"/health/water/{record_id}")

    async def list_workouts(self, day: date) -> list[WorkoutRecord]:
        payload = await self.remote.request(
            "GET", "/health/workouts", params={"date": day.isoformat()}
        )
        return [w.to_domain() for w in parse_list(WorkoutPayload, payload)]

    async def list_workouts_in_range(
        self, start: date, end: date
    ) -> list[WorkoutRecord]:
        payload = await self.remote.request(
            "GET",
            "/health/workouts",
            params={"startDate": start.isoformat(), "endDate": end.isoformat()},
        )
        return [w.to_domain() for w in parse_list(WorkoutPayload, payload)]

    async def create_workout(self, workout: NewWorkout) -> WorkoutRecord:
        payload = await self.remote.request(
            "POST",
            "/health/workouts",
            json=to_wire(asdict(workout), renames=_WORKOUT_RENAMES),
        )
        return parse(WorkoutPayload, payload).to_domain()

    async def update_workout(
        self, workout_id: str, changes: dict[str, object]
    ) -> WorkoutRecord:
        payload = await self.remote.request(
            "PUT",
            f"/health/workouts/{workout_id}",
            json=to_wire(changes, renames=_WORKOUT_RENAMES, skip_none=False),
        )
        return parse(WorkoutPayload, payload).to_domain()

    async def delete_workout(self, workout_id: str) -> None:
        await self.remote.request("DELETE", f"/health/workouts/{workout_id}")

    async def list_weight(self, days: int) -> list[WeightRecord]:
        payload = await self.remote.request(
            "GET", "/health/weight", params={"days": days}
        )
        return [record.to_domain() for record in parse_list(WeightPayload, payload)]

    async def create_weight(
        self, day: date, weight: float, body_fat: float | None
    ) -> WeightRecord:
        payload = await self.remote.request(
            "POST",
            "/health/weight",
            json=to_wire({"date": day, "weight": weight, "body_fat": body_fat}),
        )
        return parse(WeightPayload, payload).to_domain()

    async def get_summary(self, day: date) -> HealthSummary:
        payload = await self.remote.request(
            "GET", "/health/summary", params={"date": day.isoformat()}
        )
        return parse(HealthSummaryPayload, payload).to_domain()

    async def get_targets(self) -> NutritionTarget:
        payload = await self.remote.request("GET", "/health/targets")
        return parse(NutritionTargetPayload, payload).to_domain()

    async def update_targets(self, targets: NutritionTarget) -> NutritionTarget:
        payload = await self.remote.request(
            "PUT", "/health/targets", json=to_wire(asdict(targets))
        )
        return parse(NutritionTargetPayload, payload).to_domain()
