"""Shared fixtures for the Proxy Sheet tests."""

import pytest

from proxysheet.lookup import LookupClient
from proxysheet.net import ScryfallClient
from proxysheet.session import ProxySession

from tests.fakes import COUNTERSPELL, DELVER, GRIZZLY_BEARS, SOL_RING, FakeScryfall, fake_session


@pytest.fixture
def fake_api():
    return FakeScryfall(
        named={
            "Sol Ring": SOL_RING,
            "Counterspell": COUNTERSPELL,
            "Grizzly Bears": GRIZZLY_BEARS,
            "Delver": DELVER,
        },
        searches={
            "bear": [GRIZZLY_BEARS],
        },
    )


@pytest.fixture
def scryfall(fake_api):
    return ScryfallClient(
        api_base="https://api.example.test",
        user_agent="ProxySheetTests/1.0",
        timeout=5,
        session=fake_session(fake_api),
    )


@pytest.fixture
def lookup(scryfall):
    return LookupClient(scryfall, result_cap=10)


@pytest.fixture
def proxy_session(lookup):
    return ProxySession(lookup)
