"""Event log sinks for merge and diff history."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from mapmerge.domain.ports import EventLog


def _utcnow() -> datetime:
    return datetime.now(UTC)


class LoggingEventLog:
    """Forward events to a standard-library logger."""

    def __init__(self, logger: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("mapmerge.history")
        self._level = level

    def log(self, message: str, category: str) -> None:
        self._logger.log(self._level, "[%s] %s", category, message)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    time: datetime
    category: str
    message: str


class HistoryEventLog:
    """Keep a timestamped history of events, optionally forwarding each one."""

    def __init__(
        self,
        *,
        forward_to: EventLog | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._entries: list[HistoryEntry] = []
        self._forward_to = forward_to
        self._clock = clock

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(entry.message for entry in self._entries)

    def for_category(self, category: str) -> tuple[HistoryEntry, ...]:
        return tuple(entry for entry in self._entries if entry.category == category)

    def log(self, message: str, category: str) -> None:
        self._entries.append(HistoryEntry(time=self._clock(), category=category, message=message))
        if self._forward_to is not None:
            self._forward_to.log(message, category)
