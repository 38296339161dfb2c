"""Integration tests for Proxy Sheet.

Drives the Flask UI end to end against a fake Scryfall session.
"""

from unittest.mock import patch

import pytest

from proxysheet.config import ProxySheetSettings
from proxysheet.lookup import LookupClient
from proxysheet.net import ScryfallClient
from proxysheet.session import MSG_EMPTY_QUERY, MSG_NOTHING_TO_PRINT, MSG_SEARCH_ERROR, ProxySession
from proxysheet.web import create_app, run

from tests.fakes import FakeScryfall, fake_session


@pytest.fixture
def app(proxy_session):
    app = create_app(session=proxy_session, settings=ProxySheetSettings(error_display_seconds=3))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


class TestIndex:
    def test_empty_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert 'id="cardCount">0<' in body
        assert "3000" in body  # error auto-dismiss delay in ms


class TestSearchFlow:
    def test_search_adds_card(self, client, proxy_session):
        response = client.post("/search", data={"query": "Sol Ring"}, follow_redirects=True)

        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert 'data-card-id="sol-ring-id"' in body
        assert proxy_session.count() == 1

    def test_search_miss_flashes_message(self, client):
        response = client.post(
            "/search", data={"query": "Not A Real Card Name XYZ"}, follow_redirects=True
        )

        assert "No cards found. Try a different search term." in response.get_data(as_text=True)

    def test_batch_partial_failure(self, client, proxy_session):
        response = client.post(
            "/batch",
            data={"names": "Sol Ring\nNot A Real Card Name XYZ\nCounterspell"},
            follow_redirects=True,
        )

        body = response.get_data(as_text=True)
        assert "Card not found: Not A Real Card Name XYZ" in body
        assert body.index('data-card-id="sol-ring-id"') < body.index(
            'data-card-id="counterspell-id"'
        )
        assert proxy_session.count() == 2

    def test_remove_and_clear(self, client, proxy_session):
        client.post("/batch", data={"names": "Sol Ring\nCounterspell"})

        client.post("/cards/sol-ring-id/remove")
        assert [c.card_id for c in proxy_session.cards()] == ["counterspell-id"]

        client.post("/cards/unknown-id/remove")
        assert proxy_session.count() == 1

        client.post("/clear")
        assert proxy_session.count() == 0


class TestPrint:
    def test_print_empty_redirects_with_message(self, client):
        response = client.get("/print", follow_redirects=True)

        assert MSG_NOTHING_TO_PRINT in response.get_data(as_text=True)

    def test_print_sheet(self, client):
        client.post("/search", data={"query": "Delver"})

        response = client.get("/print")

        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert response.mimetype == "text/html"
        assert "window.print()" in body
        assert "Delver of Secrets" in body
        assert "Insectile Aberration" not in body


class TestApi:
    def test_api_cards(self, client):
        client.post("/search", data={"query": "Grizzly Bears"})

        data = client.get("/api/cards").get_json()

        assert data["count"] == 1
        assert data["cards"][0]["power_toughness"] == "2/2"

    def test_api_search(self, client):
        ok = client.post("/api/search", json={"query": "bear"})
        miss = client.post("/api/search", json={"query": "zzz"})

        assert ok.status_code == 200
        assert ok.get_json()["added"] == ["grizzly-bears-id"]
        assert miss.status_code == 404
        assert miss.get_json()["error"]

    def test_api_search_blank_query_is_bad_request(self, client):
        response = client.post("/api/search", json={"query": "   "})

        assert response.status_code == 400
        assert response.get_json()["error"] == MSG_EMPTY_QUERY

    def test_api_search_upstream_failure_is_bad_gateway(self):
        api = ScryfallClient(
            api_base="https://api.example.test",
            timeout=5,
            session=fake_session(FakeScryfall(failing={"Sol Ring"})),
        )
        client = create_app(session=ProxySession(LookupClient(api))).test_client()

        response = client.post("/api/search", json={"query": "Sol Ring"})

        assert response.status_code == 502
        assert response.get_json()["error"] == MSG_SEARCH_ERROR


class TestRun:
    @pytest.fixture(autouse=True)
    def _not_under_flask_cli(self, monkeypatch):
        monkeypatch.delenv("FLASK_RUN_FROM_CLI", raising=False)

    def test_serves_single_threaded(self):
        with patch("werkzeug.serving.run_simple") as run_simple:
            run(host="127.0.0.1", port=5099, settings=ProxySheetSettings())

        args, kwargs = run_simple.call_args
        assert args[:2] == ("127.0.0.1", 5099)
        assert kwargs["threaded"] is False

    def test_defaults_come_from_settings(self):
        settings = ProxySheetSettings(web_host="0.0.0.0", web_port=6123)

        with patch("werkzeug.serving.run_simple") as run_simple:
            run(settings=settings)

        assert run_simple.call_args.args[:2] == ("0.0.0.0", 6123)


def test_apps_do_not_share_collections(lookup):
    first = create_app(session=ProxySession(lookup)).test_client()
    second = create_app(session=ProxySession(lookup)).test_client()

    first.post("/search", data={"query": "Sol Ring"})

    assert first.get("/api/cards").get_json()["count"] == 1
    assert second.get("/api/cards").get_json()["count"] == 0
