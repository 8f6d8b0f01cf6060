import logging

import pytest

from predator_sdk.client.predator_client import PredatorClient
from tests.helpers import FakeTransport


@pytest.fixture
def logger():
    return logging.getLogger("predator-sdk-tests")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport, logger):
    return PredatorClient(logger=logger, transport=transport)


@pytest.fixture
def buy_options():
    return {"privateKeys": "PK1,PK2", "tokenAddress": "Mint111", "amount": "0.001"}


@pytest.fixture
def create_options():
    return {
        "privateKeys": "PK1",
        "devPrivateKey": "D",
        "amount": "0.5",
        "name": "Example Token",
        "symbol": "EXT",
        "description": "An example token",
        "telegram": "https://t.me/exampletoken",
        "twitter": "https://twitter.com/exampletoken",
        "website": "https://www.exampletoken.com",
        "file": "https://example.com/logo.png",
    }
