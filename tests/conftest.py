"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import Dataset  # noqa: E402
from storage import JsonFileStore  # noqa: E402


class _BaseTestConfig(Config):
    TESTING = True
    RATE_LIMIT = "1000 per minute"


@pytest.fixture()
def data_file(tmp_path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture()
def app(data_file) -> Flask:
    """Create a Flask application instance for tests."""

    class TestConfig(_BaseTestConfig):
        DATA_FILE = str(data_file)

    yield create_app(TestConfig)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def store(app: Flask) -> JsonFileStore:
    """Return the store backing the test application."""

    return app.extensions["json_store"]


@pytest.fixture()
def dataset() -> Dataset:
    """An empty in-memory dataset for service-level tests."""

    return Dataset()
