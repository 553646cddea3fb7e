import unittest
import unittest.mock
from jsontodo.backends.in_memory import InMemoryTodoStore
from jsontodo.core.repository import TodoRepository, EMPTY_TEXT_MESSAGE
from jsontodo.core.exceptions import TodoNotFoundException, TodoValidationException
from jsontodo.core.ids import TimestampIdGenerator
from jsontodo.core.metadata import Todo, RawRecord
from jsontodo.core.utils import ThreadWriteLock


class TodoRepositoryTest(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryTodoStore()
        self.repository = TodoRepository(
            store=self.store,
            write_lock=ThreadWriteLock(),
            id_generator=TimestampIdGenerator(),
        )

    def _add(self, *todos: "Todo"):
        self.store.write(self.store.read() + list(todos))

    def test_list_empty(self):
        self.assertEqual(self.repository.list(), [])

    def test_create(self):
        """ Tests that a new todo gets an id, trimmed text and is not completed. """
        todo = self.repository.create(text="  buy milk ")

        self.assertTrue(todo.id)
        self.assertEqual(todo.text, "buy milk")
        self.assertFalse(todo.completed)
        self.assertEqual(self.repository.list(), [todo])

    def test_create_appends(self):
        first = self.repository.create(text="first")
        second = self.repository.create(text="second")

        self.assertEqual(self.repository.list(), [first, second])

    def test_create_unique_ids(self):
        """ Tests that todos created in a tight loop never share an id. """
        ids = [self.repository.create(text="todo %d" % i).id for i in range(50)]
        self.assertEqual(len(set(ids)), 50)

    def test_create_empty_text(self):
        """ Tests that missing or blank text is rejected and nothing is stored. """
        for text in [None, "", "   ", "\n\t", 42]:
            with self.assertRaises(TodoValidationException) as context:
                self.repository.create(text=text)
            self.assertEqual(context.exception.message, EMPTY_TEXT_MESSAGE)

        self.assertEqual(self.repository.list(), [])

    def test_create_empty_text_does_not_touch_store(self):
        with unittest.mock.patch.object(
            self.store, "read", wraps=self.store.read
        ) as read_mock, unittest.mock.patch.object(
            self.store, "write", wraps=self.store.write
        ) as write_mock:
            with self.assertRaises(TodoValidationException):
                self.repository.create(text="")

        read_mock.assert_not_called()
        write_mock.assert_not_called()

    def test_update_completed_only(self):
        """ Tests that updating only 'completed' leaves the text unchanged. """
        self._add(Todo(id="1", text="buy milk"))

        todo = self.repository.update(id="1", changes={"completed": True})

        self.assertEqual(todo, Todo(id="1", text="buy milk", completed=True))
        self.assertEqual(self.repository.list(), [todo])

    def test_update_completed_false(self):
        """ Tests that an explicit false is applied, not mistaken for a missing field. """
        self._add(Todo(id="1", text="buy milk", completed=True))

        todo = self.repository.update(id="1", changes={"completed": False})

        self.assertFalse(todo.completed)
        self.assertFalse(self.repository.list()[0].completed)

    def test_update_text_only(self):
        self._add(Todo(id="1", text="buy milk", completed=True))

        todo = self.repository.update(id="1", changes={"text": "  buy bread  "})

        self.assertEqual(todo, Todo(id="1", text="buy bread", completed=True))

    def test_update_both_fields(self):
        self._add(Todo(id="1", text="buy milk"), Todo(id="2", text="walk the dog"))

        self.repository.update(id="2", changes={"text": "walk the cat", "completed": True})

        self.assertEqual(
            self.repository.list(),
            [
                Todo(id="1", text="buy milk"),
                Todo(id="2", text="walk the cat", completed=True),
            ],
        )

    def test_update_no_changes(self):
        self._add(Todo(id="1", text="buy milk"))

        todo = self.repository.update(id="1", changes={})

        self.assertEqual(todo, Todo(id="1", text="buy milk"))

    def test_update_blank_text(self):
        self._add(Todo(id="1", text="buy milk"))

        with self.assertRaises(TodoValidationException):
            self.repository.update(id="1", changes={"text": "   "})

        self.assertEqual(self.repository.list(), [Todo(id="1", text="buy milk")])

    def test_update_invalid_completed(self):
        self._add(Todo(id="1", text="buy milk"))

        with self.assertRaises(TodoValidationException):
            self.repository.update(id="1", changes={"completed": None})

    def test_update_not_found(self):
        self._add(Todo(id="1", text="buy milk"))

        with unittest.mock.patch.object(
            self.store, "write", wraps=self.store.write
        ) as write_mock:
            with self.assertRaises(TodoNotFoundException) as context:
                self.repository.update(id="2", changes={"completed": True})

        self.assertEqual(context.exception.id, "2")
        write_mock.assert_not_called()

    def test_delete(self):
        self._add(Todo(id="1", text="buy milk"), Todo(id="2", text="walk the dog"))

        self.repository.delete(id="1")

        self.assertEqual(self.repository.list(), [Todo(id="2", text="walk the dog")])

    def test_delete_not_found(self):
        """ Tests that deleting an unknown id raises and never writes. """
        self._add(Todo(id="1", text="buy milk"))

        with unittest.mock.patch.object(
            self.store, "write", wraps=self.store.write
        ) as write_mock:
            with self.assertRaises(TodoNotFoundException):
                self.repository.delete(id="2")

        write_mock.assert_not_called()
        self.assertEqual(self.repository.list(), [Todo(id="1", text="buy milk")])

    def test_ids_compared_as_strings(self):
        self._add(Todo.from_dict({"id": 1718000000000, "text": "numeric id"}))

        todo = self.repository.update(id="1718000000000", changes={"completed": True})

        self.assertEqual(todo.id, "1718000000000")

    def test_update_not_found_before_validation(self):
        """ Tests that an unknown id is reported even when the body is invalid. """
        for changes in [{"text": "   "}, {"completed": "yes"}]:
            with self.assertRaises(TodoNotFoundException):
                self.repository.update(id="404", changes=changes)

    def test_update_completed_must_be_boolean(self):
        self._add(Todo(id="1", text="buy milk"))

        for value in ["yes", 1, "true"]:
            with self.assertRaises(TodoValidationException):
                self.repository.update(id="1", changes={"completed": value})

        self.assertEqual(self.repository.list(), [Todo(id="1", text="buy milk")])

    def test_raw_records_are_kept(self):
        """ Tests that entries without an id are listed, never matched, and survive every mutation. """
        legacy = RawRecord({"text": "legacy"})
        self._add(Todo(id="1", text="buy milk"), legacy)

        created = self.repository.create(text="walk the dog")
        self.repository.update(id="1", changes={"completed": True})
        self.repository.delete(id="1")

        with self.assertRaises(TodoNotFoundException):
            self.repository.delete(id="None")

        self.assertEqual(self.repository.list(), [legacy, created])
