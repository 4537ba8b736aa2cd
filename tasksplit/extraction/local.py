"""Local heuristic extraction: segment, classify and title each unit."""

from __future__ import annotations

import logging

from tasksplit.extraction.classifier import classify_module, classify_type
from tasksplit.extraction.confidence import LOCAL_CONFIDENCE, summarize_batch
from tasksplit.extraction.models import ExtractionResult, ExtractionUnit, TaskRecord
from tasksplit.extraction.segmenter import segment
from tasksplit.extraction.titles import generate
from tasksplit.pipeline_config import ExtractionStrategy

logger = logging.getLogger(__name__)


def build_task(unit: ExtractionUnit, project_name: str) -> TaskRecord:
    """Turn one unit into a fully classified TaskRecord."""
    generated = generate(unit.text, project_name)
    return TaskRecord(
        title=generated.title,
        description=unit.text,
        type=classify_type(unit.text),
        module=classify_module(unit.text),
        summary=generated.summary,
    )


def split_description(project_name: str, text: str) -> list[TaskRecord]:
    """Split *text* into task records without any network access."""
    return [build_task(unit, project_name) for unit in segment(text)]


def run_local(project_name: str, text: str) -> ExtractionResult:
    """Run the local strategy and wrap its tasks in an ExtractionResult."""
    tasks = tuple(split_description(project_name, text))
    logger.info("Local extraction produced %d tasks for %s", len(tasks), project_name)
    return ExtractionResult(
        tasks=tasks,
        summary=summarize_batch(tasks),
        confidence=LOCAL_CONFIDENCE,
        strategy=ExtractionStrategy.LOCAL,
    )
