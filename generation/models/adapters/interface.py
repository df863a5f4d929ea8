from abc import ABC, abstractmethod
from typing import List, Dict, Any


class GeneratorAdapter(ABC):
    """Boundary to an LLM provider that can answer with schema-constrained JSON."""

    @abstractmethod
    async def generate_json(self, messages: List[Dict[str, str]], schema: Dict[str, Any], **kwargs) -> str:
        """Return the raw response text; the caller parses it."""
        raise NotImplementedError

    @abstractmethod
    def get_model_info(self) -> Dict[str, Any]:
        raise NotImplementedError
