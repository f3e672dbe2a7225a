"""Base class for aggregates that emit domain events.

The pending-event buffer belongs to the aggregate alone. It can only be
appended to from inside a domain method and drained from outside.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

import structlog

from storefront.domain.events import DomainEvent

logger = structlog.get_logger()


@dataclass
class AggregateRoot:
    """Owns the pending-event buffer and the lock that guards it.

    The lock is not a dataclass field and is left out of pickled state,
    so aggregates can be copied, pickled and passed to ``asdict``.
    Subclasses that define ``__post_init__`` must call ``super().__post_init__()``.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._events_lock = threading.Lock()

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        state.pop("_events_lock", None)
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._events_lock = threading.Lock()

    def pull_events(self) -> list[DomainEvent]:
        """Return every pending event, oldest first, and clear the buffer."""
        with self._events_lock:
            events, self._events = self._events, []

        if events:
            logger.debug(
                "domain_events.pulled",
                aggregate=type(self).__name__,
                aggregate_id=getattr(self, "id", None),
                count=len(events),
            )
        return events

    def _record(self, event: DomainEvent) -> None:
        with self._events_lock:
            self._events.append(event)

        logger.debug(
            "domain_event.recorded",
            aggregate=type(self).__name__,
            aggregate_id=getattr(self, "id", None),
            event_type=event.name,
        )
