"""HTTP adapter for the reminders endpoints."""

from dataclasses import dataclass

from personal_tracker.adapters.remote_client import HttpxRemoteClient, parse, parse_list
from personal_tracker.adapters.wire_models import ReminderPayload, SyncResultPayload
from personal_tracker.domain.errors import RemoteFailure
from personal_tracker.domain.reminders import Reminder, ReminderList, SyncResult
from personal_tracker.services.reminders import RemindersApi


@dataclass
class HttpxRemindersApi(RemindersApi):
    """Read-only reminders API; edits happen in Apple Reminders."""

    remote: HttpxRemoteClient

    async def list_reminders(
        self, list_name: ReminderList | None = None
    ) -> list[Reminder]:
        payload = await self.remote.request(
            "GET",
            "/reminders",
            params={"list": list_name.value if list_name else None},
        )
        return [r.to_domain() for r in parse_list(ReminderPayload, payload)]

    async def list_all(self) -> dict[str, list[Reminder]]:
        payload = await self.remote.request("GET", "/reminders/all")
        if not isinstance(payload, dict):
            raise RemoteFailure(None, detail="Expected reminders keyed by list")
        lists: dict[str, list[Reminder]] = {}
        for name in ReminderList:
            entries = payload.get(name.value)
            if entries is not None:
                lists[name.value] = [
                    r.to_domain() for r in parse_list(ReminderPayload, entries)
                ]
        return lists

    async def get_reminder(self, reminder_id: str) -> Reminder:
        payload = await self.remote.request("GET", f"/reminders/{reminder_id}")
        return parse(ReminderPayload, payload).to_domain()

    async def sync(self) -> SyncResult:
        payload = await self.remote.request("POST", "/reminders/sync")
        return parse(SyncResultPayload, payload).to_domain()
