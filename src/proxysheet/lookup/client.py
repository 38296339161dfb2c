"""Card lookup: free text in, card records out.

Single lookups go through two phases:
1. Fuzzy single match (exactly one record)
2. Broad name-ordered search (up to the result cap) when phase 1 finds nothing

Batch lookups only run phase 1 for each name, one name at a time.
"""

from typing import Iterator, Optional, Sequence

from proxysheet.config import get_settings
from proxysheet.core.logging import get_logger
from proxysheet.errors import InvalidInputError, NotFoundError, TransportError
from proxysheet.models import CardRecord
from proxysheet.net import ApiResponse, ScryfallClient
from proxysheet.result import Result, failure, success

logger = get_logger(__name__)


def _normalize_query(name) -> str:
    if not isinstance(name, str):
        raise InvalidInputError(f"Card name must be text, got {type(name).__name__}")
    query = name.strip()
    if not query:
        raise InvalidInputError("Card name is empty")
    return query


def parse_name_list(text: str) -> list[str]:
    """Split newline-separated batch entry into trimmed, non-blank names.

    Raises:
        InvalidInputError: If text is not a string
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Card list must be text, got {type(text).__name__}")
    return [line.strip() for line in text.splitlines() if line.strip()]


class LookupClient:
    """Resolves card names against the Scryfall API."""

    def __init__(self, api: ScryfallClient, result_cap: Optional[int] = None):
        """
        Args:
            api: Scryfall API client
            result_cap: Most records kept from a broad search
        """
        self.api = api
        self.result_cap = result_cap or get_settings().search_result_cap

    def _record_from(self, response: ApiResponse, query: str) -> CardRecord:
        try:
            return CardRecord.from_api(response.payload)
        except ValueError as exc:
            raise TransportError(query, f"Malformed card object: {exc}") from exc

    def _fuzzy(self, query: str) -> Optional[CardRecord]:
        response = self.api.named_fuzzy(query)
        if not response.found:
            return None
        return self._record_from(response, query)

    def _broad(self, query: str) -> list[CardRecord]:
        response = self.api.search(query, order="name")
        if not response.found:
            raise NotFoundError(query)

        data = response.payload.get("data")
        if not isinstance(data, list):
            raise TransportError(query, "Search response has no data list")
        if not data:
            raise NotFoundError(query)

        records = []
        for entry in data[: self.result_cap]:
            try:
                records.append(CardRecord.from_api(entry))
            except ValueError as exc:
                raise TransportError(query, f"Malformed card object: {exc}") from exc
        return records

    def lookup_one(self, name: str) -> list[CardRecord]:
        """Resolve one name to one or more cards.

        Args:
            name: Free text card name

        Returns:
            One record on a fuzzy hit, otherwise up to result_cap records
            from a broad search in the service's order

        Raises:
            InvalidInputError: If name is not text or is blank
            NotFoundError: If neither phase finds a card
            TransportError: If a request fails or returns garbage
        """
        query = _normalize_query(name)

        record = self._fuzzy(query)
        if record is not None:
            logger.debug("Fuzzy match '{}' -> {}", query, record.name)
            return [record]

        logger.debug("No fuzzy match for '{}', trying broad search", query)
        records = self._broad(query)
        logger.debug("Broad search '{}' returned {} card(s)", query, len(records))
        return records

    def lookup_many(self, names: Sequence[str]) -> Iterator[tuple[str, Result]]:
        """Resolve each name to at most one card, strictly in order.

        Blank names are skipped. The next request is only sent once the
        caller pulls the next outcome from the iterator.

        Args:
            names: Card names, one per entry

        Returns:
            Iterator of (name, Result) pairs; a successful Result holds a
            one-element list, a failed one holds the classified exception

        Raises:
            InvalidInputError: If names holds no non-blank entry
        """
        if isinstance(names, str):
            raise InvalidInputError("Expected a sequence of card names, got a string")

        queries = []
        for name in names:
            if isinstance(name, str) and not name.strip():
                continue
            queries.append(name)

        if not queries:
            raise InvalidInputError("No card names given")

        return self._iter_single_matches(queries)

    def _iter_single_matches(self, names: list) -> Iterator[tuple[str, Result]]:
        for name in names:
            label = name.strip() if isinstance(name, str) else repr(name)
            try:
                query = _normalize_query(name)
                record = self._fuzzy(query)
                if record is None:
                    raise NotFoundError(query)
            except (InvalidInputError, NotFoundError, TransportError) as exc:
                logger.warning("Lookup failed for '{}': {}", label, exc)
                yield label, failure(exc)
                continue

            yield label, success([record])
