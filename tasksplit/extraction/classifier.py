"""Keyword-based classification of task units by type and module."""

from __future__ import annotations

from tasksplit.extraction.keywords import (
    ACTION_KEYWORDS,
    FEATURE_KEYWORDS,
    ISSUE_KEYWORDS,
    MODULE_KEYWORDS,
)
from tasksplit.extraction.models import DEFAULT_MODULE, TaskType


def _matches(text: str, keywords: tuple[str, ...]) -> list[str]:
    """Return the distinct keywords occurring in *text*, in table order."""
    lower = text.lower()
    return [kw for kw in dict.fromkeys(keywords) if kw in lower]


def classify_type(text: str) -> TaskType:
    """Label *text* as a Feature or an Issue.

    Issue keywords are checked first and win outright, then feature keywords.
    With neither present, more than one distinct action keyword means Feature.
    """
    if _matches(text, ISSUE_KEYWORDS):
        return TaskType.ISSUE
    if _matches(text, FEATURE_KEYWORDS):
        return TaskType.FEATURE
    return TaskType.FEATURE if len(_matches(text, ACTION_KEYWORDS)) > 1 else TaskType.ISSUE


def classify_module(text: str) -> str:
    """Return the first module whose keywords occur in *text*, or ``"Other"``."""
    lower = text.lower()
    for label, keywords in MODULE_KEYWORDS:
        if any(kw in lower for kw in keywords):
            return label
    return DEFAULT_MODULE
