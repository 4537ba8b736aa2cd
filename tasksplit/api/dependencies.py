"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from tasksplit.config import get_settings
from tasksplit.extraction.coordinator import TaskExtractor


def get_extractor() -> TaskExtractor:
    """Build a TaskExtractor from the cached application settings."""
    return TaskExtractor(get_settings())
