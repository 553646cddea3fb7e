from jsontodo.core.store import BaseTodoStore
from jsontodo.core.metadata import Record, load_record
from typing import Any, List
import copy


class InMemoryTodoStore(BaseTodoStore):
    """Keeps the todo list in memory. Nothing survives the process."""

    def __init__(self, strict: "bool" = False):
        super().__init__(strict=strict)
        self._db: "List[Any]" = []

    def read(self) -> "List[Record]":
        return [load_record(value) for value in self._db]

    def write(self, records: "List[Record]"):
        self._db = [copy.deepcopy(record.to_record()) for record in records]
