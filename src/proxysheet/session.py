"""Proxy session service.

One ProxySession owns one collection and one lookup client. The web UI and
the CLI both drive a session; it turns classified lookup failures into the
messages shown to the user.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from proxysheet.collection import Collection
from proxysheet.config import ProxySheetSettings, get_settings
from proxysheet.core.logging import get_logger, log_operation
from proxysheet.errors import InvalidInputError, NotFoundError, TransportError
from proxysheet.lookup import LookupClient, parse_name_list
from proxysheet.models import CardRecord
from proxysheet.net import ScryfallClient
from proxysheet.render import ProxyCardView, card_views, render_sheet
from proxysheet.result import Result, failure, success

logger = get_logger(__name__)

MSG_EMPTY_QUERY = "Please enter a card name to search"
MSG_EMPTY_LIST = "Please enter at least one card name."
MSG_NO_RESULTS = "No cards found. Try a different search term."
MSG_SEARCH_ERROR = "Error searching for cards. Please try again."
MSG_NOTHING_TO_PRINT = "No cards to print. Search for cards first."


@dataclass
class SearchOutcome:
    """What one search (or one batch line) did to the collection."""

    query: str
    added: list[CardRecord] = field(default_factory=list)
    duplicates: list[CardRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ProxySession:
    """Application state for one user session."""

    def __init__(self, lookup: LookupClient, collection: Optional[Collection] = None):
        self.lookup = lookup
        self.collection = collection if collection is not None else Collection()

    @classmethod
    def from_settings(cls, settings: Optional[ProxySheetSettings] = None) -> "ProxySession":
        settings = settings or get_settings()
        api = ScryfallClient.from_settings(settings)
        return cls(LookupClient(api, result_cap=settings.search_result_cap))

    def _accept(self, outcome: SearchOutcome, records: list[CardRecord]) -> None:
        for record in records:
            if self.collection.add(record):
                outcome.added.append(record)
            else:
                outcome.duplicates.append(record)

    def search(self, query: str) -> SearchOutcome:
        """Look up one query and add every record it resolves to."""
        outcome = SearchOutcome(query=query.strip() if isinstance(query, str) else "")
        try:
            records = self.lookup.lookup_one(query)
        except InvalidInputError:
            outcome.error = MSG_EMPTY_QUERY
        except NotFoundError:
            outcome.error = MSG_NO_RESULTS
        except TransportError as exc:
            logger.warning("Search error: {}", exc)
            outcome.error = MSG_SEARCH_ERROR
        else:
            self._accept(outcome, records)
        return outcome

    def add_list(
        self,
        text: str,
        on_outcome: Optional[Callable[[int, int, SearchOutcome], None]] = None,
    ) -> list[SearchOutcome]:
        """Look up newline-separated names one by one and add each hit.

        Args:
            text: One card name per line
            on_outcome: Called as (done, total, outcome) after each name
        """
        names = parse_name_list(text) if isinstance(text, str) else []
        if not names:
            return [SearchOutcome(query="", error=MSG_EMPTY_LIST)]

        outcomes = []
        with log_operation("Batch lookup", names=len(names)):
            for name, result in self.lookup.lookup_many(names):
                outcome = self._batch_outcome(name, result)
                outcomes.append(outcome)
                if on_outcome is not None:
                    on_outcome(len(outcomes), len(names), outcome)
        return outcomes

    def _batch_outcome(self, name: str, result: Result) -> SearchOutcome:
        outcome = SearchOutcome(query=name)
        if result["ok"]:
            self._accept(outcome, result["value"])
        elif isinstance(result["error"], TransportError):
            outcome.error = f"Error searching for card: {name}"
        else:
            outcome.error = f"Card not found: {name}"
        return outcome

    def remove(self, card_id: str) -> bool:
        return self.collection.remove(card_id)

    def clear(self) -> None:
        self.collection.clear()

    def count(self) -> int:
        return self.collection.count()

    def cards(self) -> list[ProxyCardView]:
        return card_views(self.collection)

    def print_sheet(self) -> Result:
        """Render the collection for printing.

        Returns:
            Result holding the auto-printing HTML sheet, or an
            InvalidInputError when the collection is empty
        """
        if not self.collection.count():
            return failure(InvalidInputError(MSG_NOTHING_TO_PRINT))
        return success(render_sheet(self.collection, auto_print=True))
