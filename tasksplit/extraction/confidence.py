"""Heuristic confidence scoring and batch summaries for extracted tasks."""

from __future__ import annotations

from collections.abc import Sequence

from tasksplit.extraction.models import TaskRecord, TaskType

BASE_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95
LOCAL_CONFIDENCE = 0.8
RELAY_CONFIDENCE = 0.9

EMPTY_SUMMARY = "No tasks identified in the description"


def _is_valid(task: TaskRecord) -> bool:
    return len(task.title) > 5 and len(task.description) > 10


def score(
    tasks: Sequence[TaskRecord],
    tokens_used: int | None = None,
    max_tokens: int = 2000,
) -> float:
    """Estimate how trustworthy a batch of remote-extracted tasks is.

    Args:
        tasks: The normalised tasks.
        tokens_used: Total tokens reported by the service, if known.
        max_tokens: Completion budget the request was sent with.

    Returns:
        A value in ``[0, 0.95]``; never full certainty.
    """
    confidence = BASE_CONFIDENCE

    if 3 <= len(tasks) <= 8:
        confidence += 0.2

    if tasks:
        valid = sum(1 for t in tasks if _is_valid(t))
        confidence += valid / len(tasks) * 0.2

    if tokens_used and max_tokens > 0:
        ratio = tokens_used / max_tokens
        if 0.3 < ratio < 0.8:
            confidence += 0.1

    return max(0.0, min(confidence, MAX_CONFIDENCE))


def summarize_batch(tasks: Sequence[TaskRecord]) -> str:
    """One-line description of a batch, e.g. ``"5 tasks identified (3 features, 2 issues)"``."""
    if not tasks:
        return EMPTY_SUMMARY
    features = sum(1 for t in tasks if t.type is TaskType.FEATURE)
    issues = sum(1 for t in tasks if t.type is TaskType.ISSUE)
    return f"{len(tasks)} tasks identified ({features} features, {issues} issues)"
