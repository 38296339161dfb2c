"""Ordered, de-duplicated collection of card records.

Records are keyed by id and kept in arrival order, which is also the print
order. Changes are announced to subscribed listeners instead of being
rendered inline, so the collection works without any display attached.
"""

from enum import Enum
from typing import Callable, Iterator, Optional

from proxysheet.core.logging import get_logger
from proxysheet.models import CardRecord

logger = get_logger(__name__)


class CollectionEvent(Enum):
    """Events a collection emits, and the payload each listener receives."""

    CARD_ADDED = "card_added"  # payload: CardRecord
    CARD_REMOVED = "card_removed"  # payload: CardRecord
    COLLECTION_RESET = "collection_reset"  # payload: None


Listener = Callable[[Optional[CardRecord]], None]


class Collection:
    """Cards accumulated by one session for printing.

    All operations are total. add() and remove() report "already present" or
    "not present" through their return value.
    """

    def __init__(self):
        self._records: dict[str, CardRecord] = {}
        self._listeners: dict[CollectionEvent, list[Listener]] = {
            event: [] for event in CollectionEvent
        }

    def subscribe(self, event: CollectionEvent, listener: Listener) -> Callable[[], None]:
        """Register a listener for an event.

        Returns:
            A callable that removes the listener again
        """
        self._listeners[event].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

        return unsubscribe

    def _emit(self, event: CollectionEvent, payload: Optional[CardRecord]) -> None:
        for listener in list(self._listeners[event]):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener for {} raised", event.value)

    def add(self, record: CardRecord) -> bool:
        if record.id in self._records:
            return False
        self._records[record.id] = record
        self._emit(CollectionEvent.CARD_ADDED, record)
        return True

    def remove(self, card_id: str) -> bool:
        record = self._records.pop(card_id, None)
        if record is None:
            return False
        self._emit(CollectionEvent.CARD_REMOVED, record)
        return True

    def clear(self) -> None:
        self._records.clear()
        self._emit(CollectionEvent.COLLECTION_RESET, None)

    def count(self) -> int:
        return len(self._records)

    def get(self, card_id: str) -> Optional[CardRecord]:
        return self._records.get(card_id)

    def records(self) -> list[CardRecord]:
        """Snapshot of the records in insertion order."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CardRecord]:
        return iter(self.records())

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._records
