"""Exception hierarchy for Proxy Sheet.

Lookup failures are classified into a small set of exception types so
callers can tell "bad input" from "no such card" from "the network broke".
"""


class ProxySheetError(Exception):
    """Base exception for all Proxy Sheet errors.

    All custom exceptions inherit from this base class for easy catching.
    """

    pass


class ValidationError(ProxySheetError):
    """Validation errors (invalid input, malformed data)."""

    pass


class InvalidInputError(ValidationError):
    """Query text or display text that is empty or not a string."""

    pass


class NotFoundError(ProxySheetError):
    """The card service had no match for a query."""

    def __init__(self, query: str, message: str | None = None):
        self.query = query
        super().__init__(message or f"No card found for '{query}'")


class TransportError(ProxySheetError):
    """Network failure or unparseable response from the card service."""

    def __init__(self, query: str, message: str):
        self.query = query
        super().__init__(f"{message} (query: '{query}')")
