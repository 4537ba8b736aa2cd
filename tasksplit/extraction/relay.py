"""Agent-relay protocol: prompt an external agent by hand and parse its reply."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from tasksplit.extraction.classifier import classify_module, classify_type
from tasksplit.extraction.exceptions import MalformedResponse
from tasksplit.extraction.models import DEFAULT_MODULE, RelayPrompt, TaskRecord, TaskType

logger = logging.getLogger(__name__)

RELAY_SUMMARY_LENGTH = 100
REQUIRED_FIELDS = ("title", "description", "type", "status")

_NUMBERED_LINE = re.compile(r"^\d+\.")
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")

PROMPT_TEMPLATE = """Project: {project_name}

Please analyze the following project description and break it down into 3-8 specific, actionable tasks.

Project Description:
{description}

Requirements:
- Extract 3-8 specific, actionable tasks
- Each task should be clear, measurable, and implementable
- Classify tasks as either "Feature" (new functionality) or "Issue" (bug fix/improvement)
- Provide concise but descriptive titles and detailed descriptions
- Set status to "Not start" for all tasks
- Assign appropriate module names based on task content (e.g., "Frontend", "Backend", "Database", "Testing", "UI/UX", "Security", "Compliance", "User Management", etc.)

Specialized patterns to recognize and handle:
- Re-generation of topics or content (re-gen topic)
- Compliance matrix queries and editing functionality
- Valid option configurations with showSendBtn boolean properties
- Data source view-only implementations
- User management view-only access for non-CMP users

Please return the tasks in the following JSON format:
[
  {{
    "title": "Task title",
    "description": "Detailed task description",
    "type": "Feature" or "Issue",
    "status": "Not start",
    "module": "Module name"
  }}
]

Return only the JSON array, no additional text."""


def build_prompt(project_name: str, description: str) -> RelayPrompt:
    """Render the prompt a user copies into an external reasoning agent."""
    return RelayPrompt(
        project_name=project_name,
        prompt=PROMPT_TEMPLATE.format(project_name=project_name, description=description),
    )


def find_json_array(content: str) -> list[Any] | None:
    """Return the first task-shaped JSON array embedded in *content*.

    Only an empty array or one holding at least one object qualifies, so
    footnote markers such as ``[1]`` and inner lists of a broken outer array
    are skipped. Returns ``None`` when nothing qualifies.
    """
    decoder = json.JSONDecoder()
    for match in re.finditer(r"\[", content):
        try:
            value, _ = decoder.raw_decode(content, match.start())
        except json.JSONDecodeError:
            continue
        if isinstance(value, list) and (
            not value or any(isinstance(item, dict) for item in value)
        ):
            return value
    return None


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def _relay_task(raw: Any) -> TaskRecord | None:
    if not isinstance(raw, dict):
        return None
    if not all(raw.get(field) for field in REQUIRED_FIELDS):
        return None
    task_type = TaskType.parse(raw["type"])
    if task_type is None:
        return None

    description = str(raw["description"])
    return TaskRecord(
        title=str(raw["title"]),
        description=description,
        type=task_type,
        module=str(raw.get("module") or DEFAULT_MODULE),
        summary=_truncate(description, RELAY_SUMMARY_LENGTH),
    )


def extract_numbered_tasks(content: str) -> list[TaskRecord]:
    """Fallback parser for answers that are a numbered list instead of JSON.

    Each ``N.`` line opens a task titled with the rest of the line; the lines
    that follow, up to the next numbered line, form its description.
    """
    drafts: list[tuple[str, list[str]]] = []
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if _NUMBERED_LINE.match(stripped):
            drafts.append((_NUMBER_PREFIX.sub("", stripped), []))
        elif drafts:
            drafts[-1][1].append(stripped)

    tasks: list[TaskRecord] = []
    for title, lines in drafts:
        if not title:
            continue
        description = "\n".join(lines)
        combined = f"{title} {description}"
        tasks.append(
            TaskRecord(
                title=title,
                description=description,
                type=classify_type(combined),
                module=classify_module(combined),
                summary=_truncate(title, 20),
            )
        )
    return tasks


def parse_response(content: str) -> list[TaskRecord]:
    """Parse text pasted back from the agent into task records.

    Objects missing a required field or carrying an unknown type are dropped
    one by one. When no JSON array can be decoded the numbered-list fallback
    is used instead.

    Raises:
        MalformedResponse: if no valid task could be recovered.
    """
    items = find_json_array(content)
    if items is None:
        logger.info("No JSON array in relayed response, trying numbered-list fallback")
        tasks = extract_numbered_tasks(content)
    else:
        tasks = [task for task in map(_relay_task, items) if task is not None]
        dropped = len(items) - len(tasks)
        if dropped:
            logger.warning("Dropped %d relayed tasks with missing or invalid fields", dropped)

    if not tasks:
        raise MalformedResponse("No valid tasks found in the relayed response", content)
    return tasks
