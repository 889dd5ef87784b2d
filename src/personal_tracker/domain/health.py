"""Domain models for meals, water, workouts, and body weight."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum


class MealType(StrEnum):
    """Meal slots within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class WorkoutType(StrEnum):
    """Training split for a workout day."""

    BACK_SHOULDER = "back_shoulder"
    CHEST_SHOULDER = "chest_shoulder"
    LEGS_CORE = "legs_core"
    CARDIO = "cardio"
    REST = "rest"


@dataclass(frozen=True)
class FoodItem:
    """A single food eaten as part of a meal."""

    id: str
    name: str
    amount: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MealRecord:
    """A logged meal with its macro totals."""

    id: str
    date: date
    meal_type: MealType
    time: str
    calories: float
    protein: float
    carbs: float
    fat: float
    foods: list[FoodItem] = field(default_factory=list)
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NewMeal:
    """Meal fields submitted on create; the service assigns the id."""

    date: date
    meal_type: MealType
    time: str
    calories: float
    protein: float
    carbs: float
    fat: float
    foods: list[FoodItem] = field(default_factory=list)
    notes: str | None = None


@dataclass(frozen=True)
class WaterRecord:
    """A single drink, amount in millilitres."""

    id: str
    date: date
    time: str
    amount: float
    created_at: datetime | None = None


@dataclass(frozen=True)
class ExerciseSet:
    """One set of an exercise."""

    reps: int
    weight: float | None = None
    duration: float | None = None


@dataclass(frozen=True)
class Exercise:
    """An exercise with its sets."""

    id: str
    name: str
    sets: list[ExerciseSet] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutRecord:
    """A workout session, duration in minutes."""

    id: str
    date: date
    workout_type: WorkoutType
    duration: float
    calories_burned: float
    completed: bool
    exercises: list[Exercise] = field(default_factory=list)
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NewWorkout:
    """Workout fields submitted on create."""

    date: date
    workout_type: WorkoutType
    duration: float
    calories_burned: float
    completed: bool = False
    exercises: list[Exercise] = field(default_factory=list)
    notes: str | None = None


@dataclass(frozen=True)
class WeightRecord:
    """A body weight measurement."""

    id: str
    date: date
    weight: float
    body_fat: float | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class NutritionTarget:
    """Daily nutrition targets; water in millilitres."""

    calories: float = 2000
    protein: float = 150
    carbs: float = 200
    fat: float = 60
    water: float = 2500


@dataclass(frozen=True)
class MacroProgress:
    """Current intake against its target."""

    current: float
    target: float

    @property
    def ratio(self) -> float:
        if not self.target:
            return 0.0
        return self.current / self.target


@dataclass(frozen=True)
class NutritionProgress:
    """Progress for each tracked quantity on the selected date."""

    calories: MacroProgress
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
    water: MacroProgress


@dataclass(frozen=True)
class ConsumedTarget:
    """Server-reported consumption against target."""

    consumed: float
    target: float


@dataclass(frozen=True)
class HealthSummary:
    """Server-computed summary for one date."""

    date: date
    calories: ConsumedTarget
    protein: ConsumedTarget
    carbs: ConsumedTarget
    fat: ConsumedTarget
    water: ConsumedTarget
    workout_completed: bool
    workout_duration: float
