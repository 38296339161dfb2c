"""Unit tests for proxy card view models and the printable sheet."""

from proxysheet.models import CardRecord
from proxysheet.render import ProxyCardView, render_sheet, write_sheet
from tests.fakes import COUNTERSPELL, DELVER, GRIZZLY_BEARS, SOL_RING


class TestProxyCardView:
    def test_plain_card(self):
        view = ProxyCardView.from_record(CardRecord.from_api(COUNTERSPELL))

        assert view.card_id == "counterspell-id"
        assert view.name == "Counterspell"
        assert view.mana_cost == "UU"
        assert view.type_line == "Instant"
        assert view.text == "Counter target spell."
        assert view.set_info == "Dominaria Remastered (DMR)"
        assert view.power_toughness == ""

    def test_creature_power_toughness(self):
        view = ProxyCardView.from_record(CardRecord.from_api(GRIZZLY_BEARS))

        assert view.power_toughness == "2/2"

    def test_multi_faced_uses_first_face(self):
        view = ProxyCardView.from_record(CardRecord.from_api(DELVER))

        assert view.name == "Delver of Secrets"
        assert view.mana_cost == "U"
        assert view.power_toughness == "1/1"
        assert " • " in view.text
        assert view.set_info == "Innistrad (ISD)"

    def test_to_dict(self):
        data = ProxyCardView.from_record(CardRecord.from_api(SOL_RING)).to_dict()

        assert data["name"] == "Sol Ring"
        assert data["text"] == "T: Add CC."


class TestSheet:
    def test_sheet_lists_cards_in_order(self):
        records = [CardRecord.from_api(p) for p in (SOL_RING, COUNTERSPELL)]

        html = render_sheet(records)

        assert html.count('class="card-proxy"') == 2
        assert html.index("Sol Ring") < html.index("Counterspell")
        assert "window.print()" not in html
        assert "Remove card" not in html

    def test_auto_print(self):
        html = render_sheet([CardRecord.from_api(SOL_RING)], auto_print=True)

        assert "window.print()" in html

    def test_card_text_is_escaped(self):
        record = CardRecord(id="evil", name="<script>alert(1)</script>")

        html = render_sheet([record])

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_write_sheet(self, tmp_path):
        path = write_sheet([CardRecord.from_api(SOL_RING)], tmp_path / "out" / "sheet.html")

        assert path.exists()
        assert "Sol Ring" in path.read_text(encoding="utf-8")
