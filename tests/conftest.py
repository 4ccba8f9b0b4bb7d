"""Shared fixtures: small fixed collections and apps built from them."""

import pytest
from fastapi.testclient import TestClient

from plot_device.config import Settings
from plot_device.data_store import make_collection
from plot_device.main import create_app
from plot_device.models import CollectionName


@pytest.fixture
def collections():
    return {
        CollectionName.rocks: make_collection(CollectionName.rocks, ["a", "b", "c"]),
        CollectionName.lake: make_collection(CollectionName.lake, ["x", "y", "z", "w"]),
    }


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(settings, collections):
    return create_app(settings, collections)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
