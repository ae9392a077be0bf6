"""Shared fixtures: a configured client whose HTTP traffic is mocked."""

import pytest

from paymill_client import PaymillConfig, create_paymill_client

from factories import API_KEY, API_URL


@pytest.fixture
def config() -> PaymillConfig:
    return PaymillConfig(api_key=API_KEY, api_url=API_URL, timeout_seconds=5)


@pytest.fixture
def paymill(config):
    return create_paymill_client(config=config)
