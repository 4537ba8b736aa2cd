"""Remote-service status endpoints: credential presence, health and catalogue."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tasksplit.api.dependencies import get_extractor
from tasksplit.api.models import (
    ConnectionTestResponse,
    ModelInfo,
    RemoteConfigResponse,
    StrategiesResponse,
)
from tasksplit.extraction.coordinator import TaskExtractor
from tasksplit.pipeline_config import supported_models

router = APIRouter(prefix="/api")


@router.get("/remote/config", response_model=RemoteConfigResponse)
async def remote_config(
    extractor: TaskExtractor = Depends(get_extractor),
) -> RemoteConfigResponse:
    """Report whether an API key is configured, without revealing it."""
    if extractor.settings.credential:
        return RemoteConfigResponse(has_api_key=True, message="Remote API key is configured")
    return RemoteConfigResponse(has_api_key=False, message="No remote API key configured")


@router.get("/remote/test-connection", response_model=ConnectionTestResponse)
async def test_connection(
    extractor: TaskExtractor = Depends(get_extractor),
) -> ConnectionTestResponse:
    if not extractor.settings.credential:
        return ConnectionTestResponse(success=False, message="No remote API key configured")
    success = await extractor.check_connection()
    return ConnectionTestResponse(
        success=success,
        message="Remote API connection successful" if success else "Remote API connection failed",
    )


@router.get("/models", response_model=list[ModelInfo])
async def list_models() -> list[ModelInfo]:
    return [ModelInfo(**model) for model in supported_models()]


@router.get("/strategies", response_model=StrategiesResponse)
async def list_strategies(
    extractor: TaskExtractor = Depends(get_extractor),
) -> StrategiesResponse:
    return StrategiesResponse(strategies=await extractor.available_strategies())
