"""Best-effort delivery of reconciliation messages to an event log."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mapmerge.domain.ports import EventLog

log = getLogger(__name__)


@dataclass(slots=True)
class EventEmitter:
    """Forward messages to ``event_log`` under one category.

    Sink failures are logged and dropped; they never abort reconciliation.
    """

    event_log: EventLog | None
    category: str

    def __call__(self, message: str) -> None:
        log.debug("%s: %s", self.category, message)
        if self.event_log is None:
            return
        try:
            self.event_log.log(message, self.category)
        except Exception:
            log.exception("Event log rejected %s entry: %s", self.category, message)
