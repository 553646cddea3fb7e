from typing import Any, Dict, List
from .metadata import Record, Todo
from .store import BaseTodoStore
from .utils import BaseWriteLock
from .ids import BaseIdGenerator
from .exceptions import TodoNotFoundException, TodoValidationException
import logging

logger = logging.getLogger(__name__)

EMPTY_TEXT_MESSAGE = "Sorry there, Todo text cannot be empty."
INVALID_COMPLETED_MESSAGE = "Todo completed must be true or false."


class TodoRepository:
    """Operations over the todo list.

    Every operation reads the whole list from the store, and the ones that change it write the
    whole list back. The read-modify-write cycle runs inside the write lock, so whether two
    concurrent mutations can overwrite each other depends on the lock being used.

    Attributes:
        store (BaseTodoStore): Where the list is persisted.
        write_lock (BaseWriteLock): Serializes access to the store.
        id_generator (BaseIdGenerator): Creates the ids of new todos.
    """

    store: "BaseTodoStore"
    write_lock: "BaseWriteLock"
    id_generator: "BaseIdGenerator"

    def __init__(
        self,
        store: "BaseTodoStore",
        write_lock: "BaseWriteLock",
        id_generator: "BaseIdGenerator",
    ):
        self.store = store
        self.write_lock = write_lock
        self.id_generator = id_generator

    def _clean_text(self, text: "Any") -> "str":
        if not isinstance(text, str) or not text.strip():
            raise TodoValidationException(message=EMPTY_TEXT_MESSAGE)
        return text.strip()

    def list(self) -> "List[Record]":
        with self.write_lock.lock():
            return self.store.read()

    def create(self, text: "Any") -> "Todo":
        """Appends a new todo to the list.

        Args:
            text (Any): Text of the todo. Surrounding whitespace is removed.

        Raises:
            TodoValidationException: If the text is missing or blank.

        Returns:
            Todo: The created todo.
        """
        text = self._clean_text(text)

        with self.write_lock.lock():
            todos = self.store.read()
            todo = Todo(id=self.id_generator.generate(), text=text, completed=False)
            todos.append(todo)
            self.store.write(todos)

        logger.debug("Created todo %s", todo.id)
        return todo

    def update(self, id: "str", changes: "Dict[str, Any]") -> "Todo":
        """Changes the fields of an existing todo.

        Only the keys present in ``changes`` are applied, so ``{"completed": False}`` marks the
        todo as not done and leaves its text alone.

        Args:
            id (str): Id of the todo.
            changes (Dict[str, Any]): May contain "text" and/or "completed".

        Raises:
            TodoNotFoundException: If no todo has the given id.
            TodoValidationException: If "text" is present but blank, or "completed" is not a boolean.

        Returns:
            Todo: The updated todo.
        """
        with self.write_lock.lock():
            todos = self.store.read()
            todo = next(
                (
                    todo
                    for todo in todos
                    if isinstance(todo, Todo) and todo.id == id
                ),
                None,
            )
            if todo is None:
                raise TodoNotFoundException(id=id)

            # An unknown id is reported before an invalid body.
            if "text" in changes:
                text = self._clean_text(changes["text"])
            if "completed" in changes and not isinstance(changes["completed"], bool):
                raise TodoValidationException(message=INVALID_COMPLETED_MESSAGE)

            if "text" in changes:
                todo.text = text
            if "completed" in changes:
                todo.completed = changes["completed"]

            self.store.write(todos)

        logger.debug("Updated todo %s", id)
        return todo

    def delete(self, id: "str"):
        """Removes a todo from the list.

        Raises:
            TodoNotFoundException: If no todo has the given id. Nothing is written in that case.
        """
        with self.write_lock.lock():
            todos = self.store.read()
            filtered = [todo for todo in todos if todo.id != id]
            if len(filtered) == len(todos):
                raise TodoNotFoundException(id=id)

            self.store.write(filtered)

        logger.debug("Deleted todo %s", id)
