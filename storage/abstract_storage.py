"""Storage abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from models import Dataset


class AbstractStore(ABC):
    """Interface for dataset storage backends."""

    @abstractmethod
    def load(self) -> Dataset:
        """Return the persisted dataset, initializing an empty one if needed."""

    @abstractmethod
    def save(self, dataset: Dataset) -> None:
        """Overwrite the persisted dataset as a single unit."""

    @contextmanager
    def transaction(self) -> Iterator[Dataset]:
        """Load the dataset, hand it to the caller and save it afterwards.

        Nothing is saved when the block raises.
        """

        dataset = self.load()
        yield dataset
        self.save(dataset)
