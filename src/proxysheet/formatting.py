"""Text helpers for proxy card display.

Scryfall writes symbols in braces ("{2}{R}", "{T}: Add {G}."). Proxies show
the bare symbol text; no symbol-to-glyph mapping is done.
"""

import re

from proxysheet.errors import InvalidInputError

_BRACES = re.compile(r"[{}]")

ELLIPSIS = "..."
DEFAULT_TEXT_LIMIT = 200
DEFAULT_SEPARATOR = " • "


def _require_text(value, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{what} must be text, got {type(value).__name__}")
    return value


def format_mana_cost(mana_cost: str) -> str:
    """Strip braces from a mana cost: "{3}{U}{U}" -> "3UU"."""
    return _BRACES.sub("", _require_text(mana_cost, "Mana cost"))


def format_oracle_text(
    text: str,
    limit: int = DEFAULT_TEXT_LIMIT,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Shorten rules text for a proxy.

    Text longer than limit is cut to limit characters plus an ellipsis,
    braces are stripped, and line breaks become the separator.
    """
    text = _require_text(text, "Oracle text")
    if len(text) > limit:
        text = text[:limit] + ELLIPSIS
    return _BRACES.sub("", text).replace("\n", separator)
