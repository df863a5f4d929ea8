"""
Turns raw model output into system ids that are safe to store.

The model's answer is untrusted: it may be empty, not JSON, shaped wrong, or
mention systems that do not exist. Parsing problems yield no suggestions
rather than an error, and unknown ids are dropped.
"""

import json
from typing import Any, Collection, Iterable, List

from loguru import logger

from catalog.models import System
from generation.postprocessors.base import PostProcessorAdapter
from orchestrator.observability import increment

RESPONSE_KEY = "suggested_permissions"


def parse_suggestions(raw_answer: str) -> List[Any]:
    """Return the ``suggested_permissions`` array, or ``[]`` if there isn't one."""
    text = (raw_answer or "").strip()
    if not text:
        logger.warning("Suggestion provider returned an empty response.")
        increment("suggestions.malformed")
        return []

    try:
        result = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(f"Could not parse suggestion response as JSON: {e}")
        increment("suggestions.malformed")
        return []

    values = result.get(RESPONSE_KEY) if isinstance(result, dict) else None
    if not isinstance(values, list):
        logger.warning(f"Could not parse suggested permissions from response: {result!r}")
        increment("suggestions.malformed")
        return []

    return values


def filter_to_catalog(values: Iterable[Any], valid_ids: Collection[str]) -> List[str]:
    """Keep ids present in ``valid_ids``; order and repeats are preserved."""
    kept = [v for v in values if isinstance(v, str) and v in valid_ids]
    return kept


class CatalogFilterPostProcessor(PostProcessorAdapter):

    def process(self, raw_answer: str, catalog: Iterable[System]) -> List[str]:
        values = parse_suggestions(raw_answer)
        valid_ids = {system.id for system in catalog}
        kept = filter_to_catalog(values, valid_ids)

        dropped = len(values) - len(kept)
        if dropped:
            logger.debug(f"Dropped {dropped} suggested id(s) not in the catalog")
            increment("suggestions.dropped", dropped)
        return kept
