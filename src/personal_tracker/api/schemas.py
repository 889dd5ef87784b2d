"""Pydantic models for the dashboard API."""

from datetime import date, datetime

from pydantic import BaseModel

from personal_tracker.domain.reminders import ReminderPriority


class LoginRequest(BaseModel):
    """Login form payload."""

    username: str
    password: str


class LoginResult(BaseModel):
    ok: bool
    error: str | None = None


class SessionStatus(BaseModel):
    authenticated: bool
    username: str


class Progress(BaseModel):
    current: float
    target: float
    ratio: float


class WorkoutStatus(BaseModel):
    workout_type: str
    duration: float
    completed: bool


class NutritionDashboard(BaseModel):
    """Derived nutrition view for one date."""

    date: date
    calories: Progress
    protein: Progress
    carbs: Progress
    fat: Progress
    water: Progress
    meal_count: int
    workout: WorkoutStatus | None = None


class InventoryDashboard(BaseModel):
    """Server summary next to the locally derived counts."""

    total_items: int
    needs_to_buy: int
    expiring_soon: int
    needs_replacement: int
    filtered_count: int
    purchase_count: int
    expiring_count: int
    replacement_count: int


class ReminderView(BaseModel):
    id: str
    title: str
    priority: ReminderPriority
    due_date: datetime | None = None


class RemindersDashboard(BaseModel):
    total_count: int
    list_counts: dict[str, int]
    upcoming: list[ReminderView]
    last_synced: datetime | None = None


class SyncStatus(BaseModel):
    last_synced: datetime | None = None
