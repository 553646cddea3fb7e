from abc import ABC, abstractmethod
import threading
import time
import uuid


class BaseIdGenerator(ABC):
    """Creates the identifiers given to new todos."""

    @abstractmethod
    def generate(self) -> "str":  # pragma: no cover
        """Returns a new identifier."""


class TimestampIdGenerator(BaseIdGenerator):
    """Identifiers made of the current time in milliseconds since the epoch.

    Two todos created within the same millisecond would get the same timestamp, so the
    generator never hands out a value lower than or equal to the previous one, bumping it by one
    millisecond when needed. Uniqueness only holds within a single process.
    """

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def _now_ms(self) -> "int":
        return int(time.time() * 1000)

    def generate(self) -> "str":
        with self._lock:
            value = max(self._now_ms(), self._last + 1)
            self._last = value
        return str(value)


class UUIDIdGenerator(BaseIdGenerator):
    """Random 128-bit identifiers."""

    def generate(self) -> "str":
        return str(uuid.uuid4())
