from typing import List
from abc import ABC, abstractmethod
from .metadata import Record


class BaseTodoStore(ABC):
    """Abstract class that encapsulates the access to the storage of the todo list.

    The whole list is always read and written at once. There is no partial update.
    Entries that aren't todos are read as RawRecord objects and written back untouched.

    Attributes:
        strict (bool): If False, storage failures are logged and hidden from the caller: reads return
            an empty list and writes are dropped. If True, they raise StorageException.
    """

    strict: "bool"

    def __init__(self, strict: "bool" = False):
        self.strict = strict

    def __repr__(self):  # pragma: no cover
        return f"{self.__class__.__name__}(strict={self.strict})"

    @abstractmethod
    def read(self) -> "List[Record]":  # pragma: no cover
        """Returns the full todo list, in insertion order.

        Returns:
            List[Record]: The stored entries. Never fails unless the store is strict.
        """

    @abstractmethod
    def write(self, records: "List[Record]"):  # pragma: no cover
        """Replaces the stored todo list.

        Args:
            records (List[Record]): The full list to be persisted.
        """
