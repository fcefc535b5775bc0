"""Storage backends."""

from flask import current_app

from .abstract_storage import AbstractStore
from .json_store import JsonFileStore


def get_store() -> AbstractStore:
    """Return the store bound to the current application."""

    return current_app.extensions["json_store"]


__all__ = ["AbstractStore", "JsonFileStore", "get_store"]
