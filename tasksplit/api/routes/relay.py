"""Agent-relay endpoints: hand out the prompt and take the pasted answer back."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tasksplit.api.dependencies import get_extractor
from tasksplit.api.models import (
    ExtractResponse,
    RelayPromptRequest,
    RelayPromptResponse,
    RelayResponseRequest,
)
from tasksplit.extraction.coordinator import TaskExtractor

router = APIRouter(prefix="/api/relay")


@router.post("/prompt", response_model=RelayPromptResponse)
async def relay_prompt(
    request: RelayPromptRequest,
    extractor: TaskExtractor = Depends(get_extractor),
) -> RelayPromptResponse:
    prompt = extractor.build_relay_prompt(request.project_name, request.text)
    return RelayPromptResponse(project_name=prompt.project_name, prompt=prompt.prompt)


@router.post("/response", response_model=ExtractResponse)
async def relay_response(
    request: RelayResponseRequest,
    extractor: TaskExtractor = Depends(get_extractor),
) -> ExtractResponse:
    """Parse the text an agent produced for a relay prompt."""
    result = extractor.accept_relay_response(request.project_name, request.response)
    return ExtractResponse.from_result(result)
