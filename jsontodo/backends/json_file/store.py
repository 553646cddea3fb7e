from jsontodo.core.store import BaseTodoStore
from jsontodo.core.metadata import Record, is_todo_record, load_record
from jsontodo.core.exceptions import StorageException
from typing import Any, List
import json
import logging
import os

logger = logging.getLogger(__name__)


class JSONFileTodoStore(BaseTodoStore):
    """Keeps the todo list as a pretty-printed JSON array in a single file.

    Writes overwrite the file in place. There is no atomic rename and no fsync.

    Attributes:
        path (str): Location of the backing document.
        indent (int): Indentation used when the JSON is written.
    """

    path: "str"
    indent: "int"

    def __init__(self, path: "str", strict: "bool" = False, indent: "int" = 2):
        super().__init__(strict=strict)
        self.path = path
        self.indent = indent

    def __repr__(self):  # pragma: no cover
        return f"JSONFileTodoStore(path='{self.path}', strict={self.strict})"

    def _parse(self, content: "str") -> "List[Record]":
        if not content.strip():
            return []

        data: "Any" = json.loads(content)
        if not isinstance(data, list):
            raise ValueError(
                "Expected a JSON array, found %s" % (type(data).__name__)
            )

        records = []
        for value in data:
            if not is_todo_record(value):
                logger.warning(
                    "Keeping entry without an id in %s as is: %r", self.path, value
                )
            records.append(load_record(value))
        return records

    def read(self) -> "List[Record]":
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
            return self._parse(content)
        except FileNotFoundError:
            logger.info("%s not found, creating an empty one.", self.path)
            self.write([])
            return []
        except (OSError, ValueError) as e:
            if self.strict:
                raise StorageException(path=self.path, operation="read", cause=e)
            logger.error("Error reading %s: %s", self.path, e)
            return []

    def write(self, records: "List[Record]"):
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            content = json.dumps(
                [record.to_record() for record in records], indent=self.indent
            )
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except (OSError, TypeError, ValueError) as e:
            if self.strict:
                raise StorageException(path=self.path, operation="write", cause=e)
            logger.error("Error writing to %s: %s", self.path, e)
