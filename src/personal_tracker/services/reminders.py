"""Reminders state mirrored from the Apple Reminders source."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from personal_tracker.domain.reminders import Reminder, ReminderList, SyncResult

UPCOMING_LIMIT = 5

_logger = logging.getLogger(__name__)


class RemindersApi(Protocol):
    """Remote interface for reminders."""

    async def list_reminders(
        self, list_name: ReminderList | None = None
    ) -> list[Reminder]:
        """Return reminders, optionally for one list."""

    async def list_all(self) -> dict[str, list[Reminder]]:
        """Return every list keyed by list name."""

    async def get_reminder(self, reminder_id: str) -> Reminder:
        """Return a single reminder."""

    async def sync(self) -> SyncResult:
        """Pull the latest state from the reminders source."""


@dataclass
class RemindersService:
    """Five disjoint reminder lists plus derived counts."""

    api: RemindersApi
    inbox: list[Reminder] = field(default_factory=list)
    next: list[Reminder] = field(default_factory=list)
    waiting: list[Reminder] = field(default_factory=list)
    someday: list[Reminder] = field(default_factory=list)
    projects: list[Reminder] = field(default_factory=list)
    loading: bool = False
    last_synced: datetime | None = None

    async def fetch_all_reminders(self) -> None:
        """Replace every list; a list missing from the response becomes empty."""
        self.loading = True
        try:
            data = await self.api.list_all()
            self.inbox = list(data.get(ReminderList.INBOX, []))
            self.next = list(data.get(ReminderList.NEXT, []))
            self.waiting = list(data.get(ReminderList.WAITING, []))
            self.someday = list(data.get(ReminderList.SOMEDAY, []))
            self.projects = list(data.get(ReminderList.PROJECTS, []))
        except Exception:
            _logger.exception("Failed to fetch reminders")
        finally:
            self.loading = False

    async def sync_with_apple(self) -> SyncResult:
        """Sync with the source, then pull the post-sync lists."""
        self.loading = True
        try:
            result = await self.api.sync()
            self.last_synced = result.last_synced
            await self.fetch_all_reminders()
        except Exception:
            _logger.exception("Failed to sync reminders")
            raise
        finally:
            self.loading = False
        return result

    def get_reminders_by_list(self, name: str) -> list[Reminder]:
        """Return the list with this name, or an empty list for any other name."""
        match name:
            case ReminderList.INBOX:
                return self.inbox
            case ReminderList.NEXT:
                return self.next
            case ReminderList.WAITING:
                return self.waiting
            case ReminderList.SOMEDAY:
                return self.someday
            case ReminderList.PROJECTS:
                return self.projects
            case _:
                return []

    @property
    def all_reminders(self) -> list[Reminder]:
        return [
            *self.inbox,
            *self.next,
            *self.waiting,
            *self.someday,
            *self.projects,
        ]

    @property
    def total_count(self) -> int:
        return len(self.all_reminders)

    @property
    def list_counts(self) -> dict[ReminderList, int]:
        return {name: len(self.get_reminders_by_list(name)) for name in ReminderList}

    @property
    def upcoming_reminders(self) -> list[Reminder]:
        """First incomplete reminders of the `next` list."""
        return [r for r in self.next if not r.completed][:UPCOMING_LIMIT]
