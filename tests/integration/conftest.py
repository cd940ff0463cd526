"""Shared fixtures for integration tests."""

import pytest

from stockfighter import StockfighterConfig


@pytest.fixture
def live_config() -> StockfighterConfig:
    return StockfighterConfig.from_env()
