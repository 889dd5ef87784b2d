"""HTTP adapter for the inventory endpoints."""

from dataclasses import asdict, dataclass

from personal_tracker.adapters.remote_client import HttpxRemoteClient, parse, parse_list
from personal_tracker.adapters.wire_models import (
    InventoryItemPayload,
    InventorySummaryPayload,
    to_wire,
)
from personal_tracker.domain.inventory import (
    InventoryCategory,
    InventoryItem,
    InventorySummary,
    NewInventoryItem,
)
from personal_tracker.services.inventory import InventoryApi


@dataclass
class HttpxInventoryApi(InventoryApi):
    """Inventory API backed by the shared remote client."""

    remote: HttpxRemoteClient

    async def list_items(
        self, category: InventoryCategory | None = None
    ) -> list[InventoryItem]:
        payload = await self.remote.request(
            "GET",
            "/inventory",
            params={"category": category.value if category else None},
        )
        return _items(payload)

    async def get_summary(self) -> InventorySummary:
        payload = await self.remote.request("GET", "/inventory/summary")
        return parse(InventorySummaryPayload, payload).to_domain()

    async def list_needs_purchase(self) -> list[InventoryItem]:
        return _items(await self.remote.request("GET", "/inventory/needs-purchase"))

    async def list_expiring(self, days: int = 7) -> list[InventoryItem]:
        payload = await self.remote.request(
            "GET", "/inventory/expiring", params={"days": days}
        )
        return _items(payload)

    async def list_needs_replacement(self) -> list[InventoryItem]:
        return _items(
            await self.remote.request("GET", "/inventory/needs-replacement")
        )

    async def create_item(self, item: NewInventoryItem) -> InventoryItem:
        payload = await self.remote.request(
            "POST", "/inventory", json=to_wire(asdict(item))
        )
        return parse(InventoryItemPayload, payload).to_domain()

    async def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem:
        payload = await self.remote.request(
            "PUT",
            f"/inventory/{item_id}",
            json=to_wire(changes, skip_none=False),
        )
        return parse(InventoryItemPayload, payload).to_domain()

    async def delete_item(self, item_id: str) -> None:
        await self.remote.request("DELETE", f"/inventory/{item_id}")

    async def mark_purchased(self, item_id: str, quantity: float) -> InventoryItem:
        payload = await self.remote.request(
            "POST", f"/inventory/{item_id}/purchase", json={"quantity": quantity}
        )
        return parse(InventoryItemPayload, payload).to_domain()

    async def mark_replaced(self, item_id: str) -> InventoryItem:
        payload = await self.remote.request("POST", f"/inventory/{item_id}/replace")
        return parse(InventoryItemPayload, payload).to_domain()


def _items(payload: object) -> list[InventoryItem]:
    return [item.to_domain() for item in parse_list(InventoryItemPayload, payload)]
