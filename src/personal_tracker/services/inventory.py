"""Inventory state: stocked items, server summary, and shortage views."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from personal_tracker.domain.inventory import (
    InventoryCategory,
    InventoryItem,
    InventorySummary,
    NewInventoryItem,
)

EXPIRY_WINDOW = timedelta(days=7)
_SECONDS_PER_DAY = 86400

_logger = logging.getLogger(__name__)


class InventoryApi(Protocol):
    """Remote interface for inventory items."""

    async def list_items(
        self, category: InventoryCategory | None = None
    ) -> list[InventoryItem]:
        """Return all items, or only those in a category."""

    async def get_summary(self) -> InventorySummary:
        """Return the server-computed counts."""

    async def list_needs_purchase(self) -> list[InventoryItem]:
        """Return items the service flags for purchase."""

    async def list_expiring(self, days: int = 7) -> list[InventoryItem]:
        """Return items expiring within `days` days."""

    async def list_needs_replacement(self) -> list[InventoryItem]:
        """Return items past their replacement cycle."""

    async def create_item(self, item: NewInventoryItem) -> InventoryItem:
        """Create an item and return it."""

    async def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem:
        """Apply field changes to an item and return it."""

    async def delete_item(self, item_id: str) -> None:
        """Delete an item."""

    async def mark_purchased(self, item_id: str, quantity: float) -> InventoryItem:
        """Record a purchase of `quantity` units and return the item."""

    async def mark_replaced(self, item_id: str) -> InventoryItem:
        """Record a replacement today and return the item."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InventoryService:
    """Local copy of the inventory with locally derived views.

    The summary is only ever fetched; it reflects server policy and is
    refreshed after every successful mutation. The expiry and replacement
    views are evaluated against `clock` on each read.
    """

    api: InventoryApi
    items: list[InventoryItem] = field(default_factory=list)
    summary: InventorySummary = field(default_factory=InventorySummary)
    selected_category: InventoryCategory | None = None
    loading: bool = False
    clock: Callable[[], datetime] = _utcnow

    async def fetch_items(self, category: InventoryCategory | None = None) -> None:
        """Replace the items with the service's list."""
        self.loading = True
        try:
            self.items = await self.api.list_items(category)
        except Exception:
            _logger.exception("Failed to fetch inventory items")
        finally:
            self.loading = False

    async def fetch_summary(self) -> None:
        try:
            self.summary = await self.api.get_summary()
        except Exception:
            _logger.exception("Failed to fetch inventory summary")

    async def add_item(self, item: NewInventoryItem) -> InventoryItem:
        try:
            created = await self.api.create_item(item)
        except Exception:
            _logger.exception("Failed to add inventory item")
            raise
        self.items.append(created)
        await self.fetch_summary()
        return created

    async def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem:
        try:
            updated = await self.api.update_item(item_id, changes)
        except Exception:
            _logger.exception("Failed to update inventory item %s", item_id)
            raise
        self._replace(updated)
        await self.fetch_summary()
        return updated

    async def delete_item(self, item_id: str) -> None:
        try:
            await self.api.delete_item(item_id)
        except Exception:
            _logger.exception("Failed to delete inventory item %s", item_id)
            raise
        self.items = [item for item in self.items if item.id != item_id]
        await self.fetch_summary()

    async def mark_purchased(self, item_id: str, quantity: float) -> InventoryItem:
        try:
            updated = await self.api.mark_purchased(item_id, quantity)
        except Exception:
            _logger.exception("Failed to mark item %s as purchased", item_id)
            raise
        self._replace(updated)
        await self.fetch_summary()
        return updated

    async def mark_replaced(self, item_id: str) -> InventoryItem:
        try:
            updated = await self.api.mark_replaced(item_id)
        except Exception:
            _logger.exception("Failed to mark item %s as replaced", item_id)
            raise
        self._replace(updated)
        await self.fetch_summary()
        return updated

    def set_category(self, category: InventoryCategory | None) -> None:
        self.selected_category = category

    def _replace(self, updated: InventoryItem) -> None:
        self.items = [
            updated if item.id == updated.id else item for item in self.items
        ]

    @property
    def filtered_items(self) -> list[InventoryItem]:
        """Items in the selected category, or all items when none is selected."""
        if self.selected_category is None:
            return list(self.items)
        return [item for item in self.items if item.category == self.selected_category]

    @property
    def items_needing_purchase(self) -> list[InventoryItem]:
        return [item for item in self.items if item.needs_to_buy]

    @property
    def expiring_items(self) -> list[InventoryItem]:
        """Items whose expiry falls within [now, now + EXPIRY_WINDOW]."""
        now = self.clock()
        horizon = now + EXPIRY_WINDOW
        return [
            item
            for item in self.items
            if item.expiry_date is not None and now <= item.expiry_date <= horizon
        ]

    @property
    def items_needing_replacement(self) -> list[InventoryItem]:
        """Items whose whole days since last replacement reach their cycle."""
        now = self.clock()
        due = []
        for item in self.items:
            if item.last_replaced is None or item.replacement_cycle is None:
                continue
            elapsed = now - item.last_replaced
            days_since = int(elapsed.total_seconds() // _SECONDS_PER_DAY)
            if days_since >= item.replacement_cycle:
                due.append(item)
        return due
