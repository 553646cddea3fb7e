from jsontodo.core.repository import TodoRepository
from jsontodo.core.store import BaseTodoStore
from jsontodo.core.utils import BaseWriteLock, FileWriteLock, ThreadWriteLock
from jsontodo.backends.json_file import JSONFileTodoStore
from jsontodo.backends.in_memory import InMemoryTodoStore
from jsontodo.settings import TodoSettings, todo_settings
from typing import Optional


def create_store(settings: "TodoSettings" = todo_settings) -> "BaseTodoStore":
    if settings.BACKEND == "json_file":
        return JSONFileTodoStore(path=settings.DB_PATH, strict=settings.STRICT_STORAGE)
    elif settings.BACKEND == "in_memory":
        return InMemoryTodoStore(strict=settings.STRICT_STORAGE)
    else:
        raise ValueError("Unexpected backend: %s" % (settings.BACKEND))


def create_write_lock(settings: "TodoSettings" = todo_settings) -> "BaseWriteLock":
    lock_class = settings.WRITE_LOCK_CLASS
    # The in-memory backend has no file to lock.
    if settings.BACKEND == "in_memory" and issubclass(lock_class, FileWriteLock):
        lock_class = ThreadWriteLock

    return lock_class(path=settings.DB_PATH, timeout=settings.LOCK_TIMEOUT)


def create_repository(
    settings: "TodoSettings" = todo_settings,
    store: "Optional[BaseTodoStore]" = None,
    write_lock: "Optional[BaseWriteLock]" = None,
) -> "TodoRepository":

    if store is None:
        store = create_store(settings=settings)

    if write_lock is None:
        write_lock = create_write_lock(settings=settings)

    return TodoRepository(
        store=store,
        write_lock=write_lock,
        id_generator=settings.ID_GENERATOR_CLASS(),
    )
