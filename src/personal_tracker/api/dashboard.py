"""Read-only dashboard endpoints over the state managers' derived views."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from personal_tracker.api.schemas import (
    InventoryDashboard,
    NutritionDashboard,
    Progress,
    ReminderView,
    RemindersDashboard,
    WorkoutStatus,
)

if TYPE_CHECKING:
    from personal_tracker.containers import AppContainer
    from personal_tracker.domain.health import MacroProgress

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _progress(value: MacroProgress) -> Progress:
    return Progress(current=value.current, target=value.target, ratio=value.ratio)


@router.get("/nutrition")
async def nutrition(
    request: Request, day: date | None = Query(default=None, alias="date")
) -> NutritionDashboard:
    """Return the nutrition progress, reloading the given date first."""
    container: AppContainer = request.app.state.container
    health = container.health_service
    if day is not None:
        await health.set_selected_date(day)
    progress = health.nutrition_progress
    workout = health.today_workout
    return NutritionDashboard(
        date=health.selected_date,
        calories=_progress(progress.calories),
        protein=_progress(progress.protein),
        carbs=_progress(progress.carbs),
        fat=_progress(progress.fat),
        water=_progress(progress.water),
        meal_count=len(health.today_meals),
        workout=(
            WorkoutStatus(
                workout_type=workout.workout_type.value,
                duration=workout.duration,
                completed=workout.completed,
            )
            if workout
            else None
        ),
    )


@router.get("/inventory")
async def inventory(request: Request) -> InventoryDashboard:
    container: AppContainer = request.app.state.container
    service = container.inventory_service
    summary = service.summary
    return InventoryDashboard(
        total_items=summary.total_items,
        needs_to_buy=summary.needs_to_buy,
        expiring_soon=summary.expiring_soon,
        needs_replacement=summary.needs_replacement,
        filtered_count=len(service.filtered_items),
        purchase_count=len(service.items_needing_purchase),
        expiring_count=len(service.expiring_items),
        replacement_count=len(service.items_needing_replacement),
    )


@router.get("/reminders")
async def reminders(request: Request) -> RemindersDashboard:
    container: AppContainer = request.app.state.container
    service = container.reminders_service
    return RemindersDashboard(
        total_count=service.total_count,
        list_counts={name.value: count for name, count in service.list_counts.items()},
        upcoming=[
            ReminderView(
                id=r.id, title=r.title, priority=r.priority, due_date=r.due_date
            )
            for r in service.upcoming_reminders
        ],
        last_synced=service.last_synced,
    )
