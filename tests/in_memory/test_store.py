import unittest
from jsontodo.backends.in_memory import InMemoryTodoStore
from tests.base_store import StoreTestMixin


class InMemoryStoreTest(StoreTestMixin, unittest.TestCase):
    def _create_store(self, strict: "bool" = False) -> "InMemoryTodoStore":
        return InMemoryTodoStore(strict=strict)
