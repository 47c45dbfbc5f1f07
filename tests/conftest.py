"""Shared fixtures for the Bookshelf API tests."""

import pytest
from fastapi.testclient import TestClient

from bookshelf.catalog.store import Catalog, SEED_TITLES
from bookshelf.main import create_app


@pytest.fixture
def catalog():
    """A fresh catalogue holding the seed titles."""
    return Catalog()


@pytest.fixture
def client(catalog):
    """Test client over an app that owns ``catalog``."""
    app = create_app(catalog=catalog)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seed_titles():
    return list(SEED_TITLES)
