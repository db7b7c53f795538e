"""Task Rules - partial-update allow-list and the completion rule.

Invariants:
    - Only UPDATABLE_FIELDS are read from the request body; everything else is dropped
    - status "completed" forces progress 100 and stamps completed_at
    - progress 100 on a task not yet completed forces status "completed" and stamps completed_at
    - progress is read like a leading integer: "50abc" -> 50, 12.5 -> 12, "abc" -> unusable
    - Invalid values (progress outside 0-100 or without leading digits, unknown enum
      values, unparseable dates, empty strings) are ignored, never rejected
    - Pure: the caller supplies `now`
"""

import math
import re
from datetime import datetime
from typing import Any

from club_api.core.domain_types import TaskPriority, TaskStatus

UPDATABLE_FIELDS = (
    "title", "description", "status", "priority", "progress", "dueDate", "category",
)

MIN_PROGRESS = 0
MAX_PROGRESS = 100

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_progress(raw: Any) -> int | None:
    """Integer progress in [0, 100], or None when the value is unusable."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        raw = int(raw)
    if isinstance(raw, str):
        match = LEADING_INTEGER.match(raw)
        if match is None:
            return None
        raw = int(match.group(1))
    if not isinstance(raw, int):
        return None
    if raw < MIN_PROGRESS or raw > MAX_PROGRESS:
        return None
    return raw


def parse_due_date(raw: Any) -> datetime | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return datetime.fromisoformat(raw.strip())
    except ValueError:
        return None


def _text(raw: Any) -> str | None:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


def build_task_update(existing: dict, body: dict, now: datetime) -> dict[str, Any]:
    """Translate a free-form update body into storage column values."""
    values: dict[str, Any] = {}

    for column, key in (("title", "title"), ("description", "description"), ("category", "category")):
        text = _text(body.get(key))
        if text is not None:
            values[column] = text

    priority = body.get("priority")
    if priority in {p.value for p in TaskPriority}:
        values["priority"] = priority

    due_date = parse_due_date(body.get("dueDate"))
    if due_date is not None:
        values["due_date"] = due_date

    status = body.get("status")
    if status in {s.value for s in TaskStatus}:
        values["status"] = status

    if "progress" in body:
        progress = parse_progress(body["progress"])
        if progress is not None:
            values["progress"] = progress
            if progress == MAX_PROGRESS and existing.get("status") != TaskStatus.COMPLETED.value:
                values["status"] = TaskStatus.COMPLETED.value
                values["completed_at"] = now

    if values.get("status") == TaskStatus.COMPLETED.value:
        values["progress"] = MAX_PROGRESS
        values.setdefault("completed_at", now)

    return values
