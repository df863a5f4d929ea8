"""
Job-title based permission suggestions.

``PermissionSuggestionClient.suggest`` asks the configured LLM adapter which
catalog systems fit a job title and returns only ids that exist in the
catalog passed in by the caller.
"""

from typing import Any, Dict, List, Optional, Sequence
import uuid

from loguru import logger

from catalog.models import System
from generation.exceptions import SuggestionFailedError
from generation.models.adapters.interface import GeneratorAdapter
from generation.postprocessors.base import PostProcessorAdapter
from generation.postprocessors.catalog_filter import CatalogFilterPostProcessor, RESPONSE_KEY
from generation.prompts.render_template import render_messages
from orchestrator.observability import trace_request, increment

SUGGESTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        RESPONSE_KEY: {
            "type": "array",
            "description": "A list of suggested system IDs based on the user's title.",
            "items": {"type": "string"},
        },
    },
    "required": [RESPONSE_KEY],
    "additionalProperties": False,
}


class PermissionSuggestionClient:

    def __init__(self,
                 adapter: GeneratorAdapter,
                 postprocessor: Optional[PostProcessorAdapter] = None,
                 prompts_path: Optional[str] = None):
        self.adapter = adapter
        self.postprocessor = postprocessor or CatalogFilterPostProcessor()
        self.prompts_path = prompts_path
        self.logger = logger

    async def suggest(self, title: str, catalog: Sequence[System]) -> List[str]:
        """
        Suggest system ids for ``title``.

        Raises:
            ValueError: ``title`` is empty; callers must check first.
            SuggestionFailedError: the prompt could not be rendered or the
                provider call failed.
        """
        if not title:
            raise ValueError("A job title is required to request suggestions")

        request_id = uuid.uuid4().hex[:12]
        increment("suggestions.requested")

        with trace_request(request_id, "suggestions.suggest", {"title": title}):
            try:
                messages = render_messages(title, catalog, self.prompts_path)
                raw_answer = await self.adapter.generate_json(
                    messages,
                    SUGGESTION_SCHEMA,
                    schema_name="permission_suggestions",
                    request_id=request_id,
                )
            except Exception as e:
                self.logger.error(f"Suggestion request {request_id} failed: {e!r}")
                increment("suggestions.failed")
                raise SuggestionFailedError() from e

        suggested = self.postprocessor.process(raw_answer, catalog)
        increment("suggestions.returned", len(suggested))
        self.logger.info(f"Suggested {len(suggested)} system(s) for title '{title}'")
        return suggested
