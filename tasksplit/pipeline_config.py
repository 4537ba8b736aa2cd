"""Extraction configuration: strategy enums and the ExtractionOptions dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExtractionStrategy(str, Enum):
    """Interchangeable backends that turn free text into task records."""

    LOCAL = "local"
    REMOTE_SERVICE = "remote_service"
    AGENT_RELAY = "agent_relay"


class RemoteProvider(str, Enum):
    """Wire protocols the remote extraction service can speak."""

    OPENAI_COMPATIBLE = "openai_compatible"
    ANTHROPIC = "anthropic"


class SupportedModel(str, Enum):
    """Model identifiers accepted by the remote extraction service."""

    GPT_4 = "gpt-4"
    GPT_35_TURBO = "gpt-3.5-turbo"
    CLAUDE_3 = "claude-3"
    CLAUDE_35_SONNET = "claude-3.5-sonnet"


_MODEL_DESCRIPTIONS: dict[SupportedModel, tuple[str, str]] = {
    SupportedModel.GPT_4: ("GPT-4", "Most capable model, best for complex tasks"),
    SupportedModel.GPT_35_TURBO: ("GPT-3.5 Turbo", "Fast and cost-effective"),
    SupportedModel.CLAUDE_3: ("Claude-3", "Excellent for analysis and reasoning"),
    SupportedModel.CLAUDE_35_SONNET: ("Claude-3.5 Sonnet", "Balanced performance and speed"),
}


def supported_models() -> list[dict[str, str]]:
    """Return the model catalogue as ``{id, name, description}`` dicts."""
    return [
        {"id": model.value, "name": name, "description": description}
        for model, (name, description) in _MODEL_DESCRIPTIONS.items()
    ]


@dataclass(frozen=True)
class ExtractionOptions:
    """Immutable per-call options for a task extraction.

    ``max_tasks`` is a hint passed to the remote service and is not enforced.
    ``context`` falls back to the configured default when left empty.
    ``relay_response`` holds text pasted back from an external agent; when it
    is ``None`` the agent-relay strategy returns a prompt instead of tasks.
    """

    language: str = "en"
    model: SupportedModel = SupportedModel.GPT_4
    max_tasks: int = 5
    context: str = ""
    relay_response: str | None = None
