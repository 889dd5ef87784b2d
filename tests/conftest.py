"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from personal_tracker.config import Settings
from personal_tracker.containers import AppContainer
from personal_tracker.domain.auth import AuthResponse, LoginCredentials, User
from personal_tracker.domain.errors import RemoteFailure
from personal_tracker.domain.health import (
    HealthSummary,
    MealRecord,
    MealType,
    NewMeal,
    NewWorkout,
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
    NewInventoryItem,
)
from personal_tracker.domain.reminders import (
    Reminder,
    ReminderList,
    SyncResult,
)
from personal_tracker.services.credentials import InMemoryCredentialStore
from personal_tracker.services.health import HealthApi, HealthService
from personal_tracker.services.inventory import InventoryApi, InventoryService
from personal_tracker.services.reminders import RemindersApi, RemindersService
from personal_tracker.services.session import AuthApi, SessionService


def _new_id() -> str:
    return str(uuid4())


@dataclass
class FailureSwitch:
    """Makes named fake operations raise RemoteFailure."""

    fail_on: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    def check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise RemoteFailure(500, f"{operation} failed")


def make_meal(day: date, calories: float = 500, **overrides: object) -> MealRecord:
    values: dict[str, object] = {
        "id": _new_id(),
        "date": day,
        "meal_type": MealType.LUNCH,
        "time": "12:30",
        "calories": calories,
        "protein": 30,
        "carbs": 50,
        "fat": 10,
    }
    values.update(overrides)
    return MealRecord(**values)


def make_new_meal(day: date, calories: float = 500) -> NewMeal:
    return NewMeal(
        date=day,
        meal_type=MealType.DINNER,
        time="19:00",
        calories=calories,
        protein=30,
        carbs=50,
        fat=10,
    )


def make_water(day: date, amount: float) -> WaterRecord:
    return WaterRecord(id=_new_id(), date=day, time="08:00", amount=amount)


def make_workout(day: date, **overrides: object) -> WorkoutRecord:
    values: dict[str, object] = {
        "id": _new_id(),
        "date": day,
        "workout_type": WorkoutType.LEGS_CORE,
        "duration": 45,
        "calories_burned": 320,
        "completed": True,
    }
    values.update(overrides)
    return WorkoutRecord(**values)


def make_item(**overrides: object) -> InventoryItem:
    values: dict[str, object] = {
        "id": _new_id(),
        "name": "Cat food",
        "category": InventoryCategory.PET_SUPPLIES,
        "quantity": 3,
        "unit": "can",
        "min_quantity": 2,
    }
    values.update(overrides)
    return InventoryItem(**values)


def make_reminder(
    list_name: ReminderList, title: str = "Task", completed: bool = False
) -> Reminder:
    return Reminder(id=_new_id(), title=title, list=list_name, completed=completed)


@dataclass
class InMemoryHealthApi(HealthApi):
    """In-memory health API for tests."""

    meals: list[MealRecord] = field(default_factory=list)
    water: list[WaterRecord] = field(default_factory=list)
    workouts: list[WorkoutRecord] = field(default_factory=list)
    weights: list[WeightRecord] = field(default_factory=list)
    targets: NutritionTarget = field(default_factory=NutritionTarget)
    switch: FailureSwitch = field(default_factory=FailureSwitch)
    list_gate: asyncio.Event | None = None
    create_delays: list[float] = field(default_factory=list)

    async def _wait_gate(self) -> None:
        if self.list_gate is not None:
            await self.list_gate.wait()

    async def list_meals(self, day: date) -> list[MealRecord]:
        self.switch.check("list_meals")
        result = [meal for meal in self.meals if meal.date == day]
        await self._wait_gate()
        return result

    async def list_meals_in_range(self, start: date, end: date) -> list[MealRecord]:
        self.switch.check("list_meals_in_range")
        return [meal for meal in self.meals if start <= meal.date <= end]

    async def create_meal(self, meal: NewMeal) -> MealRecord:
        if self.create_delays:
            await asyncio.sleep(self.create_delays.pop(0))
        self.switch.check("create_meal")
        created = MealRecord(
            id=_new_id(),
            date=meal.date,
            meal_type=meal.meal_type,
            time=meal.time,
            calories=meal.calories,
            protein=meal.protein,
            carbs=meal.carbs,
            fat=meal.fat,
            foods=meal.foods,
            notes=meal.notes,
        )
        self.meals.append(created)
        return created

    async def update_meal(self, meal_id: str, changes: dict[str, object]) -> MealRecord:
        self.switch.check("update_meal")
        for index, meal in enumerate(self.meals):
            if meal.id == meal_id:
                self.meals[index] = replace(meal, **changes)
                return self.meals[index]
        raise RemoteFailure(404, "Meal not found")

    async def delete_meal(self, meal_id: str) -> None:
        self.switch.check("delete_meal")
        self.meals = [meal for meal in self.meals if meal.id != meal_id]

    async def list_water(self, day: date) -> list[WaterRecord]:
        self.switch.check("list_water")
        result = [record for record in self.water if record.date == day]
        await self._wait_gate()
        return result

    async def create_water(self, day: date, time: str, amount: float) -> WaterRecord:
        self.switch.check("create_water")
        record = WaterRecord(id=_new_id(), date=day, time=time, amount=amount)
        self.water.append(record)
        return record

    async def delete_water(self, record_id: str) -> None:
        self.switch.check("delete_water")
        self.water = [record for record in self.water if record.id != record_id]

    async def list_workouts(self, day: date) -> list[WorkoutRecord]:
        self.switch.check("list_workouts")
        result = [workout for workout in self.workouts if workout.date == day]
        await self._wait_gate()
        return result

    async def list_workouts_in_range(
        self, start: date, end: date
    ) -> list[WorkoutRecord]:
        self.switch.check("list_workouts_in_range")
        return [w for w in self.workouts if start <= w.date <= end]

    async def create_workout(self, workout: NewWorkout) -> WorkoutRecord:
        self.switch.check("create_workout")
        created = WorkoutRecord(
            id=_new_id(),
            date=workout.date,
            workout_type=workout.workout_type,
            duration=workout.duration,
            calories_burned=workout.calories_burned,
            completed=workout.completed,
            exercises=workout.exercises,
            notes=workout.notes,
        )
        self.workouts.append(created)
        return created

    async def update_workout(
        self, workout_id: str, changes: dict[str, object]
    ) -> WorkoutRecord:
        self.switch.check("update_workout")
        for index, workout in enumerate(self.workouts):
            if workout.id == workout_id:
                self.workouts[index] = replace(workout, **changes)
                return self.workouts[index]
        raise RemoteFailure(404, "Workout not found")

    async def delete_workout(self, workout_id: str) -> None:
        self.switch.check("delete_workout")
        self.workouts = [w for w in self.workouts if w.id != workout_id]

    async def list_weight(self, days: int) -> list[WeightRecord]:
        self.switch.check("list_weight")
        return list(self.weights)

    async def create_weight(
        self, day: date, weight: float, body_fat: float | None
    ) -> WeightRecord:
        self.switch.check("create_weight")
        record = WeightRecord(id=_new_id(), date=day, weight=weight, body_fat=body_fat)
        self.weights.append(record)
        return record

    async def get_summary(self, day: date) -> HealthSummary:
        raise NotImplementedError

    async def get_targets(self) -> NutritionTarget:
        self.switch.check("get_targets")
        return self.targets

    async def update_targets(self, targets: NutritionTarget) -> NutritionTarget:
        self.switch.check("update_targets")
        self.targets = targets
        return targets


@dataclass
class InMemoryInventoryApi(InventoryApi):
    """In-memory inventory API for tests."""

    items: list[InventoryItem] = field(default_factory=list)
    switch: FailureSwitch = field(default_factory=FailureSwitch)
    summary_calls: int = 0

    async def list_items(
        self, category: InventoryCategory | None = None
    ) -> list[InventoryItem]:
        self.switch.check("list_items")
        return [
            item for item in self.items if category is None or item.category == category
        ]

    async def get_summary(self) -> InventorySummary:
        self.summary_calls += 1
        self.switch.check("get_summary")
        return InventorySummary(
            total_items=len(self.items),
            needs_to_buy=sum(1 for item in self.items if item.needs_to_buy),
        )

    async def list_needs_purchase(self) -> list[InventoryItem]:
        return [item for item in self.items if item.needs_to_buy]

    async def list_expiring(self, days: int = 7) -> list[InventoryItem]:
        return []

    async def list_needs_replacement(self) -> list[InventoryItem]:
        return []

    async def create_item(self, item: NewInventoryItem) -> InventoryItem:
        self.switch.check("create_item")
        created = InventoryItem(
            id=_new_id(),
            name=item.name,
            category=item.category,
            quantity=item.quantity,
            unit=item.unit,
            min_quantity=item.min_quantity,
            needs_to_buy=item.quantity <= item.min_quantity,
            expiry_date=item.expiry_date,
            last_replaced=item.last_replaced,
            replacement_cycle=item.replacement_cycle,
        )
        self.items.append(created)
        return created

    async def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem:
        self.switch.check("update_item")
        return self._patch(item_id, **changes)

    async def delete_item(self, item_id: str) -> None:
        self.switch.check("delete_item")
        self.items = [item for item in self.items if item.id != item_id]

    async def mark_purchased(self, item_id: str, quantity: float) -> InventoryItem:
        self.switch.check("mark_purchased")
        current = next(item for item in self.items if item.id == item_id)
        total = current.quantity + quantity
        return self._patch(
            item_id, quantity=total, needs_to_buy=total <= current.min_quantity
        )

    async def mark_replaced(self, item_id: str) -> InventoryItem:
        self.switch.check("mark_replaced")
        return self._patch(item_id, last_replaced=datetime.now(tz=UTC))

    def _patch(self, item_id: str, **changes: object) -> InventoryItem:
        for index, item in enumerate(self.items):
            if item.id == item_id:
                self.items[index] = replace(item, **changes)
                return self.items[index]
        raise RemoteFailure(404, "Item not found")


@dataclass
class InMemoryRemindersApi(RemindersApi):
    """In-memory reminders API for tests."""

    lists: dict[str, list[Reminder]] = field(default_factory=dict)
    switch: FailureSwitch = field(default_factory=FailureSwitch)
    synced_at: datetime = field(
        default_factory=lambda: datetime(2026, 10, 19, 9, 0, tzinfo=UTC)
    )
    pending_after_sync: dict[str, list[Reminder]] | None = None

    async def list_reminders(
        self, list_name: ReminderList | None = None
    ) -> list[Reminder]:
        if list_name is None:
            return [r for entries in self.lists.values() for r in entries]
        return list(self.lists.get(list_name, []))

    async def list_all(self) -> dict[str, list[Reminder]]:
        self.switch.check("list_all")
        return {name: list(entries) for name, entries in self.lists.items()}

    async def get_reminder(self, reminder_id: str) -> Reminder:
        for entries in self.lists.values():
            for reminder in entries:
                if reminder.id == reminder_id:
                    return reminder
        raise RemoteFailure(404, "Reminder not found")

    async def sync(self) -> SyncResult:
        self.switch.check("sync")
        if self.pending_after_sync is not None:
            self.lists = self.pending_after_sync
        return SyncResult(synced=True, last_synced=self.synced_at)


@dataclass
class FakeAuthApi(AuthApi):
    """Fake auth API accepting a single username and password."""

    username: str = "oliver"
    password: str = "secret"
    switch: FailureSwitch = field(default_factory=FailureSwitch)
    user: User = field(
        default_factory=lambda: User(id="u-1", username="oliver", email="o@example.com")
    )
    issued: int = 0

    def _issue(self) -> AuthResponse:
        self.issued += 1
        return AuthResponse(
            token=f"token-{self.issued}",
            refresh_token=f"refresh-{self.issued}",
            user=self.user,
        )

    async def login(self, credentials: LoginCredentials) -> AuthResponse:
        self.switch.check("login")
        if (credentials.username, credentials.password) != (
            self.username,
            self.password,
        ):
            raise RemoteFailure(400, "Wrong username or password")
        return self._issue()

    async def logout(self) -> None:
        self.switch.check("logout")

    async def refresh(self, refresh_token: str) -> AuthResponse:
        self.switch.check("refresh")
        return self._issue()

    async def get_current_user(self) -> User:
        self.switch.check("get_current_user")
        return self.user

    async def update_profile(self, changes: dict[str, object]) -> User:
        self.switch.check("update_profile")
        self.user = replace(self.user, **changes)
        return self.user


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="https://tracker.test/api")


@pytest.fixture
def credentials() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def health_api() -> InMemoryHealthApi:
    return InMemoryHealthApi()


@pytest.fixture
def inventory_api() -> InMemoryInventoryApi:
    return InMemoryInventoryApi()


@pytest.fixture
def reminders_api() -> InMemoryRemindersApi:
    return InMemoryRemindersApi()


@pytest.fixture
def auth_api() -> FakeAuthApi:
    return FakeAuthApi()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    credentials: InMemoryCredentialStore,
    auth_api: FakeAuthApi,
    health_api: InMemoryHealthApi,
    inventory_api: InMemoryInventoryApi,
    reminders_api: InMemoryRemindersApi,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        credentials=credentials,
        session_service=SessionService(api=auth_api, credentials=credentials),
        health_service=HealthService(health_api),
        inventory_service=InventoryService(inventory_api),
        reminders_service=RemindersService(reminders_api),
        close_resources=close_resources,
    )
