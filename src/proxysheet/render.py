"""Proxy card rendering.

Turns card records into view models and a printable HTML sheet. The sheet
is handed to the browser's print dialog; nothing here rasterizes images.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from proxysheet.config import get_settings
from proxysheet.formatting import format_mana_cost, format_oracle_text
from proxysheet.models import CardRecord

_env = Environment(
    loader=PackageLoader("proxysheet", "templates"),
    autoescape=select_autoescape(["html"]),
)


@dataclass(frozen=True)
class ProxyCardView:
    """Display strings for one proxy card."""

    card_id: str
    name: str
    mana_cost: str
    type_line: str
    text: str
    set_info: str
    power_toughness: str

    @classmethod
    def from_record(
        cls,
        record: CardRecord,
        text_limit: Optional[int] = None,
        separator: Optional[str] = None,
    ) -> "ProxyCardView":
        config = get_settings()
        face = record.display_face

        power_toughness = ""
        if face.power and face.toughness:
            power_toughness = f"{face.power}/{face.toughness}"

        return cls(
            card_id=record.id,
            name=face.name,
            mana_cost=format_mana_cost(face.mana_cost),
            type_line=face.type_line,
            text=format_oracle_text(
                face.oracle_text,
                limit=text_limit or config.oracle_text_limit,
                separator=separator if separator is not None else config.oracle_text_separator,
            ),
            set_info=f"{record.set_name} ({record.set_code.upper()})",
            power_toughness=power_toughness,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def card_views(records: Iterable[CardRecord]) -> list[ProxyCardView]:
    return [ProxyCardView.from_record(record) for record in records]


def render_sheet(records: Iterable[CardRecord], auto_print: bool = False) -> str:
    """Render the printable proxy sheet as a standalone HTML page.

    Args:
        records: Cards in print order
        auto_print: Open the print dialog as soon as the page loads
    """
    template = _env.get_template("sheet.html")
    return template.render(cards=card_views(records), auto_print=auto_print)


def write_sheet(
    records: Iterable[CardRecord], path: Path, auto_print: bool = True
) -> Path:
    """Write the proxy sheet to path and return the resolved path."""
    path = Path(path).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_sheet(records, auto_print=auto_print), encoding="utf-8")
    return path
