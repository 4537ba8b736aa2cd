"""Split raw project descriptions into candidate task units."""

from __future__ import annotations

import re

from tasksplit.extraction.models import ExtractionUnit

MIN_SENTENCE_LENGTH = 10
MIN_LINE_LENGTH = 5

_NUMBERED_MARKER = re.compile(r"(?:^|\n)[ \t]*\d+\.[ \t]*")
_SENTENCE_END = re.compile(r"[.!?]+")
_LINE_BREAK = re.compile(r"\n+")


def split_numbered_sections(text: str) -> list[str]:
    """Split *text* wherever a line starts with ``<integer>.``.

    Text without any marker comes back as a single section.
    """
    return [section for section in _NUMBERED_MARKER.split(text) if section.strip()]


def _sentence_units(text: str) -> list[ExtractionUnit]:
    units: list[ExtractionUnit] = []
    for section in split_numbered_sections(text):
        for sentence in _SENTENCE_END.split(section):
            trimmed = sentence.strip()
            if len(trimmed) > MIN_SENTENCE_LENGTH:
                units.append(ExtractionUnit(text=trimmed))
    return units


def _line_units(text: str) -> list[ExtractionUnit]:
    units: list[ExtractionUnit] = []
    for line in _LINE_BREAK.split(text):
        trimmed = line.strip()
        if len(trimmed) > MIN_LINE_LENGTH:
            units.append(ExtractionUnit(text=trimmed))
    return units


def segment(text: str) -> list[ExtractionUnit]:
    """Cut *text* into ordered extraction units.

    Numbered sections split into sentences are tried first; when no sentence
    is long enough the text is split line by line instead. Identical units
    are kept, and an empty list means nothing usable was found.

    Args:
        text: The raw project description.

    Returns:
        Units in the order they appear in *text*.
    """
    units = _sentence_units(text)
    if units:
        return units
    return _line_units(text)
