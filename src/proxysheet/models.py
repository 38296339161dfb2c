"""Card records as returned by the Scryfall API.

A CardRecord is a read-only snapshot taken at lookup time. Only the
display-relevant fields are kept; everything else in the payload is dropped.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


class CardFields:
    """Scryfall JSON keys read when building records."""

    ID = "id"
    NAME = "name"
    TYPE_LINE = "type_line"
    ORACLE_TEXT = "oracle_text"
    MANA_COST = "mana_cost"
    SET_NAME = "set_name"
    SET_CODE = "set"  # NOT "set_code"
    POWER = "power"
    TOUGHNESS = "toughness"
    CARD_FACES = "card_faces"


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def _optional_text(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class CardFace:
    """One face of a multi-faced card (transform, modal DFC, split, ...)."""

    name: str = ""
    type_line: str = ""
    oracle_text: str = ""
    mana_cost: str = ""
    power: Optional[str] = None
    toughness: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "CardFace":
        return cls(
            name=_text(payload, CardFields.NAME),
            type_line=_text(payload, CardFields.TYPE_LINE),
            oracle_text=_text(payload, CardFields.ORACLE_TEXT),
            mana_cost=_text(payload, CardFields.MANA_COST),
            power=_optional_text(payload, CardFields.POWER),
            toughness=_optional_text(payload, CardFields.TOUGHNESS),
        )


@dataclass(frozen=True)
class CardRecord:
    """A resolved card, keyed by its Scryfall id."""

    id: str
    name: str = ""
    type_line: str = ""
    oracle_text: str = ""
    mana_cost: str = ""
    set_name: str = ""
    set_code: str = ""
    power: Optional[str] = None
    toughness: Optional[str] = None
    faces: tuple[CardFace, ...] = ()

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "CardRecord":
        """Build a record from a Scryfall card object.

        Raises:
            ValueError: If the payload is not a card object with an id
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Expected a card object, got {type(payload).__name__}")

        card_id = payload.get(CardFields.ID)
        if not isinstance(card_id, str) or not card_id:
            raise ValueError("Card object has no id")

        raw_faces = payload.get(CardFields.CARD_FACES) or []
        faces = tuple(
            CardFace.from_api(face) for face in raw_faces if isinstance(face, Mapping)
        )

        return cls(
            id=card_id,
            name=_text(payload, CardFields.NAME),
            type_line=_text(payload, CardFields.TYPE_LINE),
            oracle_text=_text(payload, CardFields.ORACLE_TEXT),
            mana_cost=_text(payload, CardFields.MANA_COST),
            set_name=_text(payload, CardFields.SET_NAME),
            set_code=_text(payload, CardFields.SET_CODE),
            power=_optional_text(payload, CardFields.POWER),
            toughness=_optional_text(payload, CardFields.TOUGHNESS),
            faces=faces,
        )

    @property
    def display_face(self) -> "CardFace | CardRecord":
        """First face for multi-faced cards, the record itself otherwise."""
        if self.faces:
            return self.faces[0]
        return self
