"""Single entry point that dispatches extraction to the selected strategy."""

from __future__ import annotations

import logging

import httpx

from tasksplit.config import Settings
from tasksplit.extraction.confidence import RELAY_CONFIDENCE, summarize_batch
from tasksplit.extraction.exceptions import (
    CredentialMissing,
    InvalidInput,
    MalformedResponse,
    ServiceUnavailable,
)
from tasksplit.extraction.local import run_local
from tasksplit.extraction.models import ExtractionResult, RelayPrompt
from tasksplit.extraction.relay import build_prompt, parse_response
from tasksplit.extraction.remote import check_connection, run_remote
from tasksplit.pipeline_config import ExtractionOptions, ExtractionStrategy

logger = logging.getLogger(__name__)

_CREDENTIALED = frozenset({ExtractionStrategy.REMOTE_SERVICE, ExtractionStrategy.AGENT_RELAY})


class TaskExtractor:
    """Turns free-text project descriptions into classified task records.

    The credential lives in the injected ``settings``; nothing else is shared
    between calls, so one extractor can serve concurrent requests. An
    ``http_client`` passed in stays owned by the caller.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        self.settings = settings
        self.http_client = http_client

    def _validate(self, project_name: str, text: str, field: str = "text") -> None:
        if not project_name or not project_name.strip():
            raise InvalidInput("Missing required field: project_name", field="project_name")
        if not text or not text.strip():
            raise InvalidInput(f"Missing required field: {field}", field=field)

    def _require_credential(self, strategy: ExtractionStrategy) -> None:
        if strategy in _CREDENTIALED and not self.settings.credential:
            raise CredentialMissing(strategy.value)

    async def extract(
        self,
        project_name: str,
        text: str,
        strategy: ExtractionStrategy = ExtractionStrategy.LOCAL,
        options: ExtractionOptions | None = None,
    ) -> ExtractionResult | RelayPrompt:
        """Extract tasks from *text* with the chosen strategy.

        The agent-relay strategy returns a RelayPrompt until a pasted answer
        is supplied through ``options.relay_response``.

        Raises:
            InvalidInput: if the project name or text is empty.
            CredentialMissing: if a credentialed strategy has no API key.
            ServiceUnavailable: if the remote service fails.
            MalformedResponse: if a remote or relayed answer holds no task.
        """
        options = options or ExtractionOptions(model=self.settings.default_model)
        strategy = ExtractionStrategy(strategy)
        self._validate(project_name, text)
        self._require_credential(strategy)

        if strategy is ExtractionStrategy.LOCAL:
            return run_local(project_name, text)

        if strategy is ExtractionStrategy.REMOTE_SERVICE:
            try:
                return await run_remote(
                    self.settings, project_name, text, options, client=self.http_client
                )
            except (ServiceUnavailable, MalformedResponse) as exc:
                logger.warning("Remote extraction failed for %s: %s", project_name, exc.message)
                raise

        if options.relay_response is None:
            return self.build_relay_prompt(project_name, text)
        return self.accept_relay_response(project_name, options.relay_response)

    def build_relay_prompt(self, project_name: str, text: str) -> RelayPrompt:
        """Render the prompt for the manual agent-relay hand-off."""
        self._validate(project_name, text)
        self._require_credential(ExtractionStrategy.AGENT_RELAY)
        return build_prompt(project_name.strip(), text)

    def accept_relay_response(self, project_name: str, response_text: str) -> ExtractionResult:
        """Parse an agent answer pasted back by the user."""
        self._validate(project_name, response_text, field="response")
        self._require_credential(ExtractionStrategy.AGENT_RELAY)

        tasks = tuple(parse_response(response_text))
        logger.info("Relayed response produced %d tasks for %s", len(tasks), project_name)
        return ExtractionResult(
            tasks=tasks,
            summary=summarize_batch(tasks),
            confidence=RELAY_CONFIDENCE,
            strategy=ExtractionStrategy.AGENT_RELAY,
        )

    async def check_connection(self) -> bool:
        """Return True when the remote credential is set and accepted."""
        return await check_connection(self.settings, client=self.http_client)

    async def available_strategies(self) -> list[ExtractionStrategy]:
        """List the strategies that can run with the current configuration."""
        strategies = [ExtractionStrategy.LOCAL]
        if not self.settings.credential:
            return strategies
        if await self.check_connection():
            strategies.append(ExtractionStrategy.REMOTE_SERVICE)
        strategies.append(ExtractionStrategy.AGENT_RELAY)
        return strategies
