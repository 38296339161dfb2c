"""HTTP access to the Scryfall API."""

from .scryfall import ApiResponse, ScryfallClient

__all__ = [
    "ApiResponse",
    "ScryfallClient",
]
