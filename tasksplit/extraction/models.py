"""Data models for task extraction results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tasksplit.pipeline_config import ExtractionStrategy

INITIAL_STATUS = "Not start"
DEFAULT_MODULE = "Other"


class TaskType(str, Enum):
    """Category of a piece of work."""

    FEATURE = "Feature"
    ISSUE = "Issue"

    @classmethod
    def parse(cls, value: object) -> TaskType | None:
        """Match *value* case-insensitively against the known types."""
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


@dataclass(frozen=True)
class ExtractionUnit:
    """A candidate piece of work cut out of the input text."""

    text: str


@dataclass(frozen=True)
class TaskRecord:
    """A classified, titled piece of work ready to hand to the host."""

    title: str
    description: str
    type: TaskType
    module: str = DEFAULT_MODULE
    summary: str = ""
    status: str = INITIAL_STATUS

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "type": self.type.value,
            "module": self.module,
            "summary": self.summary,
            "status": self.status,
        }


@dataclass(frozen=True)
class ExtractionStats:
    """Usage figures reported by a remote-backed extraction."""

    model: str
    tokens_used: int = 0
    processing_time_ms: int = 0


@dataclass(frozen=True)
class ExtractionResult:
    """The value every strategy converges on."""

    tasks: tuple[TaskRecord, ...]
    summary: str
    confidence: float
    strategy: ExtractionStrategy
    stats: ExtractionStats | None = None


@dataclass(frozen=True)
class RelayPrompt:
    """Prompt to hand to an external agent before its answer is pasted back."""

    project_name: str
    prompt: str
