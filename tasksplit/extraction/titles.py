"""Deterministic title and summary generation for task units."""

from __future__ import annotations

import re
from dataclasses import dataclass

from tasksplit.extraction.keywords import (
    ACTION_KEYWORDS,
    FEATURE_KEYWORDS,
    ISSUE_KEYWORDS,
    PRIORITY_KEYWORDS,
)

MIN_TITLE_LENGTH = 10
FALLBACK_TITLE_LENGTH = 20
FALLBACK_SUMMARY_LENGTH = 15
SUMMARY_KEYWORD_COUNT = 3

_TOKEN_SPLIT = re.compile(r"[\s,;:.!?()\[\]{}\"'`，、]+")
_TITLE_STRIP = re.compile(r"[^\w\s-]")

_ACTIONS = frozenset(ACTION_KEYWORDS)
_FEATURES = frozenset(FEATURE_KEYWORDS)
_ISSUES = frozenset(ISSUE_KEYWORDS)
_SUMMARY_WORDS = _ACTIONS | _FEATURES | _ISSUES | frozenset(PRIORITY_KEYWORDS)


@dataclass(frozen=True)
class TitleSummary:
    title: str
    summary: str


def tokenize(text: str) -> list[str]:
    """Split *text* on whitespace and punctuation, keeping hyphenated words."""
    return [token for token in _TOKEN_SPLIT.split(text) if token]


def _first(
    tokens: list[str], vocabulary: frozenset[str], skip: int | None = None
) -> int | None:
    for index, token in enumerate(tokens):
        if index != skip and len(token) > 1 and token.lower() in vocabulary:
            return index
    return None


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def generate_title(text: str, project_name: str) -> str:
    """Build a short title from the action and category words in *text*."""
    tokens = tokenize(text)
    action = _first(tokens, _ACTIONS)
    feature = _first(tokens, _FEATURES, skip=action)
    issue = _first(tokens, _ISSUES, skip=action)

    if action is not None:
        if feature is not None:
            title = f"{tokens[action]} {tokens[feature]}"
        elif issue is not None:
            title = f"{tokens[action]} {tokens[issue]}"
        elif action + 1 < len(tokens) and len(tokens[action + 1]) > 2:
            title = f"{tokens[action]} {tokens[action + 1]}"
        else:
            title = tokens[action]
    elif feature is not None:
        title = f"Implement {tokens[feature]}"
    elif issue is not None:
        title = f"Fix {tokens[issue]}"
    else:
        title = _truncate(" ".join(tokens[:3]), FALLBACK_TITLE_LENGTH)

    title = _TITLE_STRIP.sub("", title).strip()
    if len(title) < MIN_TITLE_LENGTH:
        title = f"{project_name} - {title}"
    return title


def generate_summary(text: str) -> str:
    """Join the first few keywords of *text*, or truncate it when none match."""
    keywords = [
        token
        for token in tokenize(text)
        if len(token) > 1 and token.lower() in _SUMMARY_WORDS
    ]
    if keywords:
        return " ".join(keywords[:SUMMARY_KEYWORD_COUNT])
    return _truncate(text, FALLBACK_SUMMARY_LENGTH)


def generate(text: str, project_name: str) -> TitleSummary:
    """Derive the title and summary for one unit of text."""
    return TitleSummary(
        title=generate_title(text, project_name),
        summary=generate_summary(text),
    )
