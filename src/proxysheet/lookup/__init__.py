"""Card lookup against the Scryfall API."""

from proxysheet.lookup.client import (
    LookupClient,
    parse_name_list,
)

__all__ = [
    "LookupClient",
    "parse_name_list",
]
