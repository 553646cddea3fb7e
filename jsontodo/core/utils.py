from typing import ContextManager, Optional
from abc import ABC, abstractmethod
from filelock import FileLock
import contextlib
import threading
import logging

logger = logging.getLogger(__name__)


class BaseWriteLock(ABC):
    """Prevents two read-modify-write cycles over the todo list from running at the same time."""

    @abstractmethod
    def lock(self) -> "ContextManager":  # pragma: no cover
        """Returns a ContextManager that locks the execution.
        """


class NullWriteLock(BaseWriteLock):
    """Doesn't lock anything. Concurrent mutations can overwrite each other's writes."""

    def __init__(self, path: "Optional[str]" = None, timeout: "float" = -1):
        pass

    def lock(self) -> "ContextManager":
        return contextlib.nullcontext()


class ThreadWriteLock(BaseWriteLock):
    """Serializes mutations among the threads of the current process."""

    def __init__(self, path: "Optional[str]" = None, timeout: "float" = -1):
        self.timeout = timeout
        self._lock = threading.Lock()

    @contextlib.contextmanager
    def _acquire(self):
        if not self._lock.acquire(timeout=self.timeout):
            raise TimeoutError("Could not acquire the write lock")
        try:
            yield
        finally:
            self._lock.release()

    def lock(self) -> "ContextManager":
        return self._acquire()


class FileWriteLock(BaseWriteLock):
    """
    Serializes mutations using a lock file that sits next to the backing document, so it also
    protects the document from other processes using the same path.
    """

    def __init__(self, path: "Optional[str]" = None, timeout: "float" = -1):
        """
        Args:
            path (str): The path to the backing document. The lock file is created at "<path>.lock".
            timeout (float): Maximum number of seconds to wait for the lock. -1 waits forever.
        """
        if path is None:
            raise ValueError("FileWriteLock requires the path of the backing document")

        self.lock_path = path + ".lock"
        # Each thread holds its own file descriptor, so threads block each other too.
        self._lock = FileLock(self.lock_path, timeout=timeout, thread_local=True)

    def lock(self) -> "ContextManager":
        logger.debug("Acquiring %s", self.lock_path)
        return self._lock
