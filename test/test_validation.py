import unittest

from core.application.create_task import CreateTaskCommand
from core.application.list_tasks import ListTasksCommand
from core.application.update_task import UpdateTaskCommand
from core.application.validation import (
    parse_limit,
    parse_page,
    parse_status_filter,
    parse_task_id,
)
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import TaskStatus


class PaginationParsingTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cmd = ListTasksCommand.from_query()

        self.assertEqual((cmd.page, cmd.limit, cmd.status), (1, 20, None))
        self.assertEqual(cmd.offset, 0)

    def test_offset(self) -> None:
        cmd = ListTasksCommand.from_query(page="3", limit="10")

        self.assertEqual(cmd.offset, 20)

    def test_page_rejects_invalid_values(self) -> None:
        for raw in ("0", "-1", "abc", "", "  ", "1.5", "2x"):
            with self.subTest(raw=raw):
                with self.assertRaises(TaskValidationError) as ctx:
                    parse_page(raw)
                self.assertEqual(str(ctx.exception), "page must be an integer >= 1")

    def test_limit_bounds(self) -> None:
        self.assertEqual(parse_limit("1"), 1)
        self.assertEqual(parse_limit("100"), 100)
        for raw in ("0", "101", "abc", ""):
            with self.subTest(raw=raw):
                with self.assertRaises(TaskValidationError) as ctx:
                    parse_limit(raw)
                self.assertEqual(
                    str(ctx.exception), "limit must be an integer between 1 and 100"
                )

    def test_surrounding_whitespace_is_accepted(self) -> None:
        self.assertEqual(parse_page(" 2 "), 2)


class StatusParsingTests(unittest.TestCase):
    def test_valid_status_is_trimmed(self) -> None:
        self.assertEqual(parse_status_filter(" in-progress "), TaskStatus.IN_PROGRESS)

    def test_blank_status(self) -> None:
        with self.assertRaises(TaskValidationError) as ctx:
            parse_status_filter("   ")
        self.assertEqual(str(ctx.exception), "status must be a non-empty string")

    def test_unknown_status(self) -> None:
        with self.assertRaises(TaskValidationError) as ctx:
            parse_status_filter("banana")
        self.assertEqual(
            str(ctx.exception), "status must be one of: open, in-progress, done"
        )


class TaskIdParsingTests(unittest.TestCase):
    def test_positive_integer(self) -> None:
        self.assertEqual(parse_task_id("42"), 42)
        self.assertEqual(parse_task_id("9223372036854775807"), 2**63 - 1)

    def test_invalid_ids_are_not_found(self) -> None:
        for raw in ("0", "-3", "abc", "1.0", "", "٣", "9223372036854775808"):
            with self.subTest(raw=raw):
                with self.assertRaises(TaskNotFoundError) as ctx:
                    parse_task_id(raw)
                self.assertEqual(str(ctx.exception), "Task not found")


class PayloadParsingTests(unittest.TestCase):
    def test_create_trims_title(self) -> None:
        self.assertEqual(CreateTaskCommand.from_payload({"title": "  x  "}).title, "x")

    def test_create_requires_string_title(self) -> None:
        for payload in (None, {}, {"title": ""}, {"title": "   "}, {"title": 5}):
            with self.subTest(payload=payload):
                with self.assertRaises(TaskValidationError) as ctx:
                    CreateTaskCommand.from_payload(payload)
                self.assertEqual(str(ctx.exception), "title is required")

    def test_update_requires_a_field(self) -> None:
        with self.assertRaises(TaskValidationError) as ctx:
            UpdateTaskCommand.from_payload({"other": 1})
        self.assertEqual(str(ctx.exception), "title or status is required")

    def test_update_rejects_empty_values(self) -> None:
        for payload in ({"title": " "}, {"status": ""}, {"title": None}, {"status": 3}):
            with self.subTest(payload=payload):
                with self.assertRaises(TaskValidationError) as ctx:
                    UpdateTaskCommand.from_payload(payload)
                self.assertEqual(
                    str(ctx.exception), "title/status must be non-empty strings"
                )

    def test_update_rejects_unknown_status(self) -> None:
        with self.assertRaises(TaskValidationError) as ctx:
            UpdateTaskCommand.from_payload({"status": "banana"})
        self.assertEqual(
            str(ctx.exception), "status must be one of: open, in-progress, done"
        )

    def test_non_object_bodies_read_as_empty(self) -> None:
        with self.assertRaises(TaskValidationError) as ctx:
            UpdateTaskCommand.from_payload(["title"])
        self.assertEqual(str(ctx.exception), "title or status is required")

        with self.assertRaises(TaskValidationError) as ctx:
            CreateTaskCommand.from_payload("title")
        self.assertEqual(str(ctx.exception), "title is required")

    def test_update_leaves_absent_fields_unset(self) -> None:
        cmd = UpdateTaskCommand.from_payload({"status": " done "})

        self.assertIsNone(cmd.title)
        self.assertEqual(cmd.status, TaskStatus.DONE)


if __name__ == "__main__":
    unittest.main()
