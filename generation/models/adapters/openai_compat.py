import os
from typing import List, Dict, Any, Optional

from dotenv import load_dotenv
from loguru import logger
from openai import AsyncOpenAI, OpenAIError

from generation.models.adapters.interface import GeneratorAdapter
from orchestrator.observability import trace_request, log_metrics

load_dotenv()

API_KEY_ENV_VARS = ("SUGGESTION_API_KEY", "GEMINI_API_KEY", "API_KEY")


def resolve_api_key(api_key: Optional[str] = None) -> Optional[str]:
    if api_key and api_key.strip():
        return api_key.strip()
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None


class OpenAICompatibleAdapter(GeneratorAdapter):
    """
    Chat-completions adapter for any OpenAI-compatible endpoint.

    Structured output is requested through ``response_format`` with a strict
    JSON schema. The SDK client is built with ``max_retries=0``: one attempt
    per call.
    """

    def __init__(self,
                 api_url: Optional[str] = None,
                 api_key: Optional[str] = None,
                 model: str = "gemini-2.5-flash",
                 temperature: float = 0.0,
                 max_tokens: int = 512,
                 timeout: Optional[float] = None,
                 ):
        self.api_url = os.getenv("SUGGESTION_API_URL") or api_url
        self.model = os.getenv("SUGGESTION_MODEL") or model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.logger = logger

        key = resolve_api_key(api_key)
        if not key:
            raise ValueError("Suggestion API key not set")

        client_kwargs: Dict[str, Any] = {"api_key": key, "max_retries": 0}
        if self.api_url:
            client_kwargs["base_url"] = self.api_url
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self.client = AsyncOpenAI(**client_kwargs)

    async def generate_json(self, messages: List[Dict[str, str]], schema: Dict[str, Any], **kwargs) -> str:
        """Send one chat completion constrained to ``schema``; return its text."""

        with trace_request(kwargs.get("request_id"), "openai_compat.generate_json"):
            try:
                completion = await self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                    response_format={
                        "type": "json_schema",
                        "json_schema": {
                            "name": kwargs.get("schema_name", "response"),
                            "strict": True,
                            "schema": schema,
                        },
                    },
                )
            except OpenAIError as e:
                self.logger.error(f"LLM provider error: {e}")
                raise

            content = completion.choices[0].message.content if completion.choices else None

            usage = getattr(completion, "usage", None)
            if usage:
                log_metrics({
                    "llm.prompt_tokens": usage.prompt_tokens or 0,
                    "llm.completion_tokens": usage.completion_tokens or 0,
                })

        return content or ""

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "provider": "openai-compatible",
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "api_url": self.api_url,
        }
