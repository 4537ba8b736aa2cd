"""Pydantic request/response schemas for the Task Splitter API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tasksplit.extraction.models import ExtractionResult, TaskRecord
from tasksplit.pipeline_config import ExtractionStrategy, SupportedModel


class ExtractRequest(BaseModel):
    """Request body for the /api/extract-tasks endpoint."""

    project_name: str
    text: str
    strategy: ExtractionStrategy = ExtractionStrategy.LOCAL
    language: str = "en"
    model: SupportedModel | None = None
    max_tasks: int = Field(default=5, ge=1, le=50)
    context: str = ""


class TaskResponse(BaseModel):
    """A single extracted task in API responses."""

    title: str
    description: str
    type: str
    module: str
    summary: str
    status: str

    @classmethod
    def from_record(cls, record: TaskRecord) -> TaskResponse:
        return cls(**record.to_dict())


class StatsResponse(BaseModel):
    model: str
    tokens_used: int
    processing_time_ms: int


class ExtractResponse(BaseModel):
    """Response body for a completed extraction."""

    strategy: ExtractionStrategy
    tasks: list[TaskResponse]
    summary: str
    confidence: float
    stats: StatsResponse | None = None

    @classmethod
    def from_result(cls, result: ExtractionResult) -> ExtractResponse:
        stats = None
        if result.stats is not None:
            stats = StatsResponse(
                model=result.stats.model,
                tokens_used=result.stats.tokens_used,
                processing_time_ms=result.stats.processing_time_ms,
            )
        return cls(
            strategy=result.strategy,
            tasks=[TaskResponse.from_record(t) for t in result.tasks],
            summary=result.summary,
            confidence=result.confidence,
            stats=stats,
        )


class RelayPromptRequest(BaseModel):
    """Request body for the /api/relay/prompt endpoint."""

    project_name: str
    text: str


class RelayPromptResponse(BaseModel):
    """Prompt to copy into an external agent."""

    strategy: ExtractionStrategy = ExtractionStrategy.AGENT_RELAY
    project_name: str
    prompt: str


class RelayResponseRequest(BaseModel):
    """Request body for the /api/relay/response endpoint."""

    project_name: str
    response: str


class RemoteConfigResponse(BaseModel):
    has_api_key: bool
    message: str


class ConnectionTestResponse(BaseModel):
    success: bool
    message: str


class ModelInfo(BaseModel):
    id: str
    name: str
    description: str


class StrategiesResponse(BaseModel):
    strategies: list[ExtractionStrategy]
