"""Extraction endpoint: split a project description into tasks."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tasksplit.api.dependencies import get_extractor
from tasksplit.api.models import ExtractRequest, ExtractResponse, RelayPromptResponse
from tasksplit.extraction.coordinator import TaskExtractor
from tasksplit.extraction.models import RelayPrompt
from tasksplit.pipeline_config import ExtractionOptions

router = APIRouter()


@router.post(
    "/api/extract-tasks",
    response_model=ExtractResponse | RelayPromptResponse,
)
async def extract_tasks(
    request: ExtractRequest,
    extractor: TaskExtractor = Depends(get_extractor),
) -> ExtractResponse | RelayPromptResponse:
    """Split a free-text description into classified tasks.

    Local and remote strategies answer with tasks straight away. The
    agent-relay strategy answers with the prompt to copy into the agent;
    its reply goes to ``/api/relay/response``.
    """
    options = ExtractionOptions(
        language=request.language,
        model=request.model or extractor.settings.default_model,
        max_tasks=request.max_tasks,
        context=request.context,
    )
    result = await extractor.extract(
        request.project_name, request.text, request.strategy, options
    )

    if isinstance(result, RelayPrompt):
        return RelayPromptResponse(project_name=result.project_name, prompt=result.prompt)
    return ExtractResponse.from_result(result)
