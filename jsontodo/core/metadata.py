from typing import Any, Dict, Optional, Union
import copy


class Todo:
    """A single item of the todo list.

    Attributes:
        id (str): Unique identifier, assigned when the todo is created.
        text (str): Description of the todo, without surrounding whitespace.
        completed (bool): Whether the todo was marked as done.
        extra (Dict): Any other keys found in the stored record. They are kept so that
            a write doesn't drop data this service doesn't know about.
    """

    id: "str"
    text: "str"
    completed: "bool"
    extra: "Dict[str, Any]"

    def __init__(
        self,
        id: "str",
        text: "str",
        completed: "bool" = False,
        extra: "Optional[Dict[str, Any]]" = None,
    ):
        self.id = id
        self.text = text
        self.completed = completed
        self.extra = extra or {}

    def __repr__(self):  # pragma: no cover
        return f"Todo(id='{self.id}', text='{self.text}', completed={self.completed})"

    def __eq__(self, other: "object"):
        if not isinstance(other, Todo):
            return NotImplemented

        return (
            self.id == other.id
            and self.text == other.text
            and self.completed == other.completed
            and self.extra == other.extra
        )

    def to_dict(self) -> "Dict[str, Any]":
        data: "Dict[str, Any]" = {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
        }
        data.update(copy.deepcopy(self.extra))
        return data

    @classmethod
    def from_dict(cls, data: "Dict[str, Any]") -> "Todo":
        extra = {
            key: value
            for key, value in data.items()
            if key not in ("id", "text", "completed")
        }
        return cls(
            id=str(data["id"]),
            text=data.get("text", ""),
            completed=data.get("completed", False),
            extra=copy.deepcopy(extra),
        )

    def to_record(self) -> "Any":
        return self.to_dict()


class RawRecord:
    """A stored entry that isn't a todo, such as an object without an "id" or a bare value.

    It never matches an id and is written back exactly as it was read.

    Attributes:
        value (Any): The entry as decoded from the JSON document.
    """

    id: "Optional[str]" = None
    value: "Any"

    def __init__(self, value: "Any"):
        self.value = copy.deepcopy(value)

    def __repr__(self):  # pragma: no cover
        return f"RawRecord(value={self.value!r})"

    def __eq__(self, other: "object"):
        if not isinstance(other, RawRecord):
            return NotImplemented

        return self.value == other.value

    def to_record(self) -> "Any":
        return copy.deepcopy(self.value)


Record = Union[Todo, RawRecord]


def is_todo_record(value: "Any") -> "bool":
    return isinstance(value, dict) and value.get("id") is not None


def load_record(value: "Any") -> "Record":
    """Converts an entry of the stored JSON array to a Todo, or to a RawRecord when it isn't one."""
    if is_todo_record(value):
        return Todo.from_dict(value)
    return RawRecord(value)
