"""Domain models for household inventory."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class InventoryCategory(StrEnum):
    """Fixed inventory categories."""

    FOOD = "food"
    PET_SUPPLIES = "pet_supplies"
    HOUSEHOLD = "household"
    PERSONAL_CARE = "personal_care"
    ELECTRONICS = "electronics"
    OTHER = "other"


@dataclass(frozen=True)
class InventoryItem:
    """A stocked item. `needs_to_buy` is computed by the service."""

    id: str
    name: str
    category: InventoryCategory
    quantity: float
    unit: str
    min_quantity: float
    needs_to_buy: bool = False
    expiry_date: datetime | None = None
    last_replaced: datetime | None = None
    replacement_cycle: int | None = None
    location: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NewInventoryItem:
    """Item fields submitted on create."""

    name: str
    category: InventoryCategory
    quantity: float
    unit: str
    min_quantity: float
    expiry_date: datetime | None = None
    last_replaced: datetime | None = None
    replacement_cycle: int | None = None
    location: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class InventorySummary:
    """Server-computed inventory counts."""

    total_items: int = 0
    needs_to_buy: int = 0
    expiring_soon: int = 0
    needs_replacement: int = 0
