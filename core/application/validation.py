"""
Parsing of raw request values (query string, path, JSON body) into
validated domain values.

Raw values arrive as strings or ``None`` when absent. Nothing is silently
coerced: a value that is present but malformed is rejected.
"""

import re
from typing import Any

from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import TaskStatus

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
# Largest value SQLite can bind as an INTEGER.
MAX_SQLITE_INTEGER = 2**63 - 1

PAGE_ERROR = "page must be an integer >= 1"
LIMIT_ERROR = f"limit must be an integer between 1 and {MAX_LIMIT}"
STATUS_EMPTY_ERROR = "status must be a non-empty string"
STATUS_ENUM_ERROR = "status must be one of: " + ", ".join(s.value for s in TaskStatus)
TITLE_REQUIRED_ERROR = "title is required"
UPDATE_REQUIRED_ERROR = "title or status is required"
UPDATE_EMPTY_ERROR = "title/status must be non-empty strings"


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str) -> int | None:
    value = raw.strip()
    if not _INTEGER_RE.fullmatch(value):
        return None
    return int(value)


def parse_page(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_PAGE
    page = _parse_int(raw)
    if page is None or page < 1:
        raise TaskValidationError(PAGE_ERROR)
    return page


def parse_limit(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_LIMIT
    limit = _parse_int(raw)
    if limit is None or not 1 <= limit <= MAX_LIMIT:
        raise TaskValidationError(LIMIT_ERROR)
    return limit


def parse_status(value: str) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError:
        raise TaskValidationError(STATUS_ENUM_ERROR) from None


def parse_status_filter(raw: str | None) -> TaskStatus | None:
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        raise TaskValidationError(STATUS_EMPTY_ERROR)
    return parse_status(value)


def parse_task_id(raw: str) -> int:
    # Anything that is not a positive integer is reported as a missing task.
    if not (raw.isascii() and raw.isdigit()):
        raise TaskNotFoundError()
    task_id = int(raw)
    if not 1 <= task_id <= MAX_SQLITE_INTEGER:
        raise TaskNotFoundError()
    return task_id


def as_object(payload: Any) -> dict[str, Any]:
    """Return the JSON body as a dict; anything but an object reads as empty."""
    return payload if isinstance(payload, dict) else {}


def clean_string(value: Any) -> str | None:
    """Return the trimmed string, or ``None`` if it is not a non-empty string."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
