"""Remote-service extraction over a chat-completions endpoint or the Anthropic API."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx
from anthropic import APIConnectionError, APIStatusError, AsyncAnthropic

from tasksplit.config import Settings
from tasksplit.extraction.classifier import classify_type
from tasksplit.extraction.confidence import score, summarize_batch
from tasksplit.extraction.exceptions import MalformedResponse, ServiceUnavailable
from tasksplit.extraction.models import (
    DEFAULT_MODULE,
    ExtractionResult,
    ExtractionStats,
    TaskRecord,
    TaskType,
)
from tasksplit.extraction.relay import extract_numbered_tasks, find_json_array
from tasksplit.pipeline_config import ExtractionOptions, ExtractionStrategy, RemoteProvider

logger = logging.getLogger(__name__)

UNTITLED = "Untitled Task"
REMOTE_SUMMARY_LENGTH = 20
MAX_SUGGESTED_TASKS = 10

SYSTEM_PROMPT = """You are an expert project manager and software developer specializing in enterprise applications and compliance systems. Your task is to analyze project descriptions and break them down into specific, actionable tasks.

Guidelines:
1. Extract specific, actionable tasks from the project description
2. Each task should be clear, measurable, and implementable
3. Classify tasks as either "Feature" (new functionality) or "Issue" (bug fix/improvement)
4. Provide concise but descriptive titles and detailed descriptions
5. Assign a module name based on the task content

Output format: Return a JSON array of tasks with the following structure:
[
  {
    "title": "Task title (max 50 chars)",
    "description": "Detailed task description",
    "type": "Feature" or "Issue",
    "module": "Module name",
    "summary": "Brief summary (max 20 chars)",
    "status": "Not start"
  }
]

Pay special attention to compliance, security, and access control requirements."""

# Tool definition for Claude structured output
EXTRACTION_TOOL: dict[str, Any] = {
    "name": "store_extracted_tasks",
    "description": (
        "Store the tasks extracted from a project description. "
        "Call this once with every task."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "tasks": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string", "description": "Short task title."},
                        "description": {
                            "type": "string",
                            "description": "What needs to be done.",
                        },
                        "type": {"type": "string", "enum": ["Feature", "Issue"]},
                        "module": {
                            "type": "string",
                            "description": "Subsystem the task belongs to.",
                        },
                        "summary": {
                            "type": "string",
                            "description": "Brief summary (max 20 chars).",
                        },
                    },
                    "required": ["title", "description", "type"],
                },
            },
        },
        "required": ["tasks"],
    },
}

# Alternative field names some services use.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title", "name", "task"),
    "description": ("description", "details", "desc"),
    "type": ("type", "category", "kind"),
    "module": ("module", "component", "area"),
    "summary": ("summary", "short_summary"),
}


@dataclass(frozen=True)
class RemoteCompletion:
    """Raw answer from the remote service before normalisation."""

    content: str
    items: list[Any] | None
    tokens_used: int
    model: str


def build_user_prompt(
    project_name: str, text: str, options: ExtractionOptions, settings: Settings
) -> str:
    """Render the per-request prompt sent alongside SYSTEM_PROMPT."""
    upper = min(options.max_tasks + 3, MAX_SUGGESTED_TASKS)
    return (
        f"Project: {project_name}\n"
        f"Context: {options.context or settings.default_context}\n"
        f"Language: {options.language}\n\n"
        f"Please analyze the following project description and break it down into "
        f"{options.max_tasks} to {upper} specific, actionable tasks:\n\n"
        f"{text}\n\n"
        "Requirements:\n"
        "- Each task should be specific and actionable\n"
        "- Classify as Feature (new functionality) or Issue (bug fix/improvement)\n"
        "- Provide clear titles and detailed descriptions\n"
        '- Set status to "Not start" for all tasks\n\n'
        "Return only the JSON array, no additional text."
    )


def _field(raw: dict[str, Any], name: str) -> str:
    for key in _FIELD_ALIASES[name]:
        value = raw.get(key)
        if value:
            return str(value).strip()
    return ""


def normalise_task(raw: dict[str, Any]) -> TaskRecord:
    """Fill defaults and force the initial status on one service task."""
    title = _field(raw, "title") or UNTITLED
    description = _field(raw, "description")
    task_type = TaskType.parse(_field(raw, "type")) or classify_type(f"{title} {description}")
    return TaskRecord(
        title=title,
        description=description,
        type=task_type,
        module=_field(raw, "module") or DEFAULT_MODULE,
        summary=_field(raw, "summary") or title[:REMOTE_SUMMARY_LENGTH],
    )


def normalise_remote_tasks(completion: RemoteCompletion) -> list[TaskRecord]:
    """Convert a service answer into task records.

    A decoded JSON array is normalised item by item; otherwise the answer is
    read as a numbered list. An empty array is a valid empty batch.

    Raises:
        MalformedResponse: if the answer holds neither form, or its array
            holds no task objects.
    """
    if completion.items is not None:
        tasks = [normalise_task(item) for item in completion.items if isinstance(item, dict)]
        if completion.items and not tasks:
            raise MalformedResponse(
                "Remote service returned an array without task objects",
                completion.content or json.dumps(completion.items),
            )
        return tasks

    tasks = extract_numbered_tasks(completion.content)
    if not tasks:
        raise MalformedResponse(
            "Failed to parse tasks from remote service response", completion.content
        )
    return tasks


async def _complete_openai_compatible(
    client: httpx.AsyncClient,
    settings: Settings,
    messages: list[dict[str, str]],
    model: str,
    max_tokens: int,
) -> dict[str, Any]:
    try:
        response = await client.post(
            settings.remote_endpoint,
            headers={"Authorization": f"Bearer {settings.remote_api_key}"},
            json={
                "model": model,
                "messages": messages,
                "max_tokens": max_tokens,
                "temperature": settings.remote_temperature,
            },
            timeout=settings.request_timeout,
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ServiceUnavailable(f"Remote service unreachable: {exc}") from exc

    if not response.is_success:
        raise ServiceUnavailable(
            f"API request failed: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            content=response.text,
        )

    try:
        data = response.json()
    except json.JSONDecodeError as exc:
        raise MalformedResponse("Remote service returned invalid JSON", response.text) from exc
    if not isinstance(data, dict):
        raise MalformedResponse("Remote service returned an unexpected payload", response.text)
    return data


async def request_openai_compatible(
    client: httpx.AsyncClient,
    settings: Settings,
    project_name: str,
    text: str,
    options: ExtractionOptions,
) -> RemoteCompletion:
    """Send the extraction prompt to a chat-completions endpoint."""
    data = await _complete_openai_compatible(
        client,
        settings,
        [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(project_name, text, options, settings)},
        ],
        model=options.model.value,
        max_tokens=settings.remote_max_tokens,
    )

    try:
        content = data["choices"][0]["message"]["content"] or ""
    except (KeyError, IndexError, TypeError):
        content = ""
    if not content:
        raise MalformedResponse("No content received from remote service", json.dumps(data))

    usage = data.get("usage") or {}
    return RemoteCompletion(
        content=content,
        items=find_json_array(content),
        tokens_used=int(usage.get("total_tokens") or 0),
        model=options.model.value,
    )


def _parse_tool_response(response: Any) -> list[Any] | None:
    """Collect the task list from the Claude tool_use blocks, if any.

    Raises:
        MalformedResponse: if a tool call carries anything but an object
            with a ``tasks`` list.
    """
    items: list[Any] | None = None
    for block in response.content:
        if block.type != "tool_use" or block.name != EXTRACTION_TOOL["name"]:
            continue
        data = block.input
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as exc:
                raise MalformedResponse("Extraction tool input is not valid JSON", data) from exc
        tasks = data.get("tasks", []) if isinstance(data, dict) else None
        if not isinstance(tasks, list):
            raise MalformedResponse("Malformed extraction tool call", json.dumps(data))
        items = (items or []) + tasks
    return items


async def request_anthropic(
    settings: Settings,
    project_name: str,
    text: str,
    options: ExtractionOptions,
) -> RemoteCompletion:
    """Ask Claude for tasks through a forced tool call."""
    try:
        async with AsyncAnthropic(
            api_key=settings.anthropic_api_key, timeout=settings.request_timeout
        ) as client:
            response = await client.messages.create(
                model=settings.anthropic_model,
                max_tokens=settings.remote_max_tokens,
                system=SYSTEM_PROMPT,
                tools=[EXTRACTION_TOOL],
                tool_choice={"type": "tool", "name": EXTRACTION_TOOL["name"]},
                messages=[
                    {
                        "role": "user",
                        "content": build_user_prompt(project_name, text, options, settings),
                    }
                ],
            )
    except APIStatusError as exc:
        raise ServiceUnavailable(
            f"LLM unavailable: {exc.message}", status_code=exc.status_code
        ) from exc
    except APIConnectionError as exc:
        raise ServiceUnavailable(f"LLM unreachable: {exc.message}") from exc

    items = _parse_tool_response(response)
    text_content = "\n".join(
        block.text for block in response.content if getattr(block, "type", None) == "text"
    )
    if items is None:
        raise MalformedResponse("Claude did not call the extraction tool", text_content)

    return RemoteCompletion(
        content=text_content,
        items=items,
        tokens_used=response.usage.input_tokens + response.usage.output_tokens,
        model=settings.anthropic_model,
    )


async def run_remote(
    settings: Settings,
    project_name: str,
    text: str,
    options: ExtractionOptions,
    client: httpx.AsyncClient | None = None,
) -> ExtractionResult:
    """Run the remote-service strategy end to end.

    Args:
        settings: Settings carrying the endpoint and credential.
        project_name: Name of the project the tasks belong to.
        text: The raw project description.
        options: Model, language and prompt hints.
        client: Optional caller-owned HTTP client; one is opened per call otherwise.

    Returns:
        An ExtractionResult with ``stats`` populated.
    """
    started = time.perf_counter()

    if settings.remote_provider is RemoteProvider.ANTHROPIC:
        completion = await request_anthropic(settings, project_name, text, options)
    elif client is not None:
        completion = await request_openai_compatible(client, settings, project_name, text, options)
    else:
        async with httpx.AsyncClient() as own_client:
            completion = await request_openai_compatible(
                own_client, settings, project_name, text, options
            )

    tasks = tuple(normalise_remote_tasks(completion))
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    logger.info(
        "Remote extraction produced %d tasks for %s (%d tokens, %d ms)",
        len(tasks),
        project_name,
        completion.tokens_used,
        elapsed_ms,
    )

    return ExtractionResult(
        tasks=tasks,
        summary=summarize_batch(tasks),
        confidence=score(tasks, completion.tokens_used, settings.remote_max_tokens),
        strategy=ExtractionStrategy.REMOTE_SERVICE,
        stats=ExtractionStats(
            model=completion.model,
            tokens_used=completion.tokens_used,
            processing_time_ms=elapsed_ms,
        ),
    )


async def check_connection(settings: Settings, client: httpx.AsyncClient | None = None) -> bool:
    """Send a tiny request to verify the credential works. Never raises."""
    if not settings.credential:
        return False

    try:
        if settings.remote_provider is RemoteProvider.ANTHROPIC:
            async with AsyncAnthropic(
                api_key=settings.anthropic_api_key, timeout=settings.request_timeout
            ) as anthropic_client:
                await anthropic_client.messages.create(
                    model=settings.anthropic_model,
                    max_tokens=10,
                    messages=[{"role": "user", "content": "Hello, this is a test message."}],
                )
            return True

        messages = [{"role": "user", "content": "Hello, this is a test message."}]
        if client is not None:
            await _complete_openai_compatible(client, settings, messages, "gpt-3.5-turbo", 10)
        else:
            async with httpx.AsyncClient() as own_client:
                await _complete_openai_compatible(
                    own_client, settings, messages, "gpt-3.5-turbo", 10
                )
        return True
    except (ServiceUnavailable, MalformedResponse, APIStatusError, APIConnectionError) as exc:
        logger.warning("Remote connection check failed: %s", exc)
        return False
