"""Flat JSON file storage implementation."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from config import Config
from models import Dataset

from .abstract_storage import AbstractStore

logger = logging.getLogger(__name__)


class JsonFileStore(AbstractStore):
    """Persist the whole dataset as one JSON document on the local filesystem."""

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = Path(path or Config.DATA_FILE)
        self._lock = threading.RLock()

    def init_app(self, app) -> None:
        """Register the store on a Flask application."""

        app.extensions["json_store"] = self

    def load(self) -> Dataset:
        """Return the dataset stored on disk.

        A missing file is created empty. A file that cannot be read or parsed
        is moved aside so it is not overwritten, and an empty dataset is
        returned in its place.
        """

        with self._lock:
            if not self.path.exists():
                dataset = Dataset()
                self.save(dataset)
                return dataset

            try:
                with open(self.path, "r", encoding="utf-8") as handle:
                    raw = json.load(handle)
                if not isinstance(raw, dict):
                    raise ValueError("Data file must contain a JSON object.")
                return Dataset.from_dict(raw)
            except (OSError, ValueError, KeyError, TypeError):
                backup = self._quarantine()
                logger.exception(
                    "Could not read data file %s; moved to %s and starting empty",
                    self.path,
                    backup,
                )
                return Dataset()

    def save(self, dataset: Dataset) -> None:
        """Write the dataset to a temporary file and swap it into place."""

        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(dataset.to_dict(), handle, indent=2, sort_keys=True)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise

    @contextmanager
    def transaction(self) -> Iterator[Dataset]:
        """Serialize load, mutate and save against other callers in this process."""

        with self._lock:
            dataset = self.load()
            yield dataset
            self.save(dataset)

    def _quarantine(self) -> Path | None:
        backup = self.path.with_name(f"{self.path.name}.corrupt-{int(time.time() * 1000)}")
        try:
            os.replace(self.path, backup)
        except OSError:
            return None
        return backup
