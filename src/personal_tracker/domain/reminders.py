"""Domain models for reminders mirrored from Apple Reminders."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class ReminderList(StrEnum):
    """The five fixed reminder lists, in display order."""

    INBOX = "inbox"
    NEXT = "next"
    WAITING = "waiting"
    SOMEDAY = "someday"
    PROJECTS = "projects"


class ReminderPriority(StrEnum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Reminder:
    """A single task; belongs to exactly one list."""

    id: str
    title: str
    list: ReminderList
    priority: ReminderPriority = ReminderPriority.NONE
    completed: bool = False
    notes: str | None = None
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a sync with the reminders source."""

    synced: bool
    last_synced: datetime | None
