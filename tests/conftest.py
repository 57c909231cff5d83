"""
Test configuration and fixtures for the link shortener.
This centralizes all test setup, making individual tests clean.
"""

import os

# Point the app at a throwaway database before anything imports settings
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from main import app
from shortlinks_app.database.connection import Base, SessionLocal, engine
from shortlinks_app.dependencies import get_link_store
from shortlinks_app.services.link_service import LinkService
from shortlinks_app.services.redirect_service import RedirectService
from shortlinks_app.services.short_code_strategies import RandomShortCodeStrategy, ShortCodeStrategy
from shortlinks_app.storage.link_store import LinkStore


class ScriptedShortCodeStrategy(ShortCodeStrategy):
    """Hands out a fixed list of codes, to force collisions in tests."""

    def __init__(self, codes):
        self.codes = list(codes)
        self.calls = 0

    def generate(self) -> str:
        code = self.codes[self.calls]
        self.calls += 1
        return code


@pytest.fixture(scope="function")
def link_store():
    """
    Fresh tables and a new store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    try:
        yield LinkStore(SessionLocal)
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def link_service(link_store):
    return LinkService(link_store, RandomShortCodeStrategy(length=8), max_attempts=3)


@pytest.fixture
def redirect_service(link_store):
    return RedirectService(link_store)


@pytest.fixture(scope="function")
def client(link_store):
    """
    Create a test client with the link store dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_link_store] = lambda: link_store
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()


@pytest.fixture
def scripted_strategy():
    """The ScriptedShortCodeStrategy class, for tests that need forced collisions"""
    return ScriptedShortCodeStrategy
