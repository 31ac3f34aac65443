"""Shared pytest fixtures for docmark tests."""

import os
import sys

import pytest
from loguru import logger

from tests.fixtures.fake_oracle import FakeOracle


@pytest.fixture
def fake_oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture(autouse=True)
def _clean_docmark_env(monkeypatch):
    """Keep DOCMARK_* variables from the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("DOCMARK_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_loguru():
    """CLI runs point loguru at the captured stderr; restore the default sink."""
    yield
    logger.remove()
    logger.add(sys.stderr)
