"""Generation client for the hosted model provider.

Wraps a single provider call (or stream) behind one interface and converts
every provider-side failure into ``GenerationFailed``.
"""

from typing import AsyncIterator, List, Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from loguru import logger

from ministry_companion.adapters import BaseLLMAdapter, get_adapter
from ministry_companion.config import Settings
from ministry_companion.exceptions import GenerationFailed
from ministry_companion.prompts import PromptSpec

GENERATION_ERROR_PREFIX = "콘텐츠 생성 중 오류가 발생했습니다"


class GenerationClient:
    """Provider client bound to one model.

    Example:
        >>> client = GenerationClient(get_config())
        >>> text = await client.generate_prompt(build_prompt(request))
    """

    def __init__(
        self,
        settings: Settings,
        adapter: Optional[BaseLLMAdapter] = None,
        model: Optional[str] = None,
    ) -> None:
        """
        Args:
            settings: API key, temperature and token limit
            adapter: Provider adapter (default: Gemini with settings.google_api_key)
            model: Model name (default: settings.gemini_model)
        """
        self.settings = settings
        self.adapter = adapter or get_adapter("gemini", api_key=settings.google_api_key)
        self._model_name = model or settings.gemini_model

    def _create_llm(self, structured: bool = False, schema: Optional[dict] = None) -> BaseChatModel:
        return self.adapter.create_llm(
            model=self._model_name,
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_output_tokens,
            json_mode=structured,
            response_schema=schema,
        )

    async def generate(
        self,
        system_instruction: str,
        user_prompt: str,
        structured: bool = False,
        schema: Optional[dict] = None,
    ) -> str:
        """Run one non-streaming generation.

        When ``structured`` is set the provider is asked for application/json
        matching ``schema``; the returned text is not validated here.

        Raises:
            GenerationFailed: on any provider error
        """
        messages = [
            SystemMessage(content=system_instruction),
            HumanMessage(content=user_prompt),
        ]
        try:
            llm = self._create_llm(structured, schema)
            response = await llm.ainvoke(messages)
        except Exception as e:
            logger.exception(f"Generation failed ({self._model_name}): {e}")
            raise GenerationFailed(f"{GENERATION_ERROR_PREFIX}: {e}") from e

        text = self.adapter.normalize_chunk(response).text
        logger.debug(f"Generated {len(text)} chars with {self._model_name}")
        return text

    async def generate_prompt(self, spec: PromptSpec) -> str:
        """Shortcut for a built PromptSpec."""
        return await self.generate(
            spec.system_instruction,
            spec.user_prompt,
            structured=spec.structured,
            schema=spec.schema,
        )

    async def stream(
        self,
        system_instruction: str,
        history: Sequence[BaseMessage],
        message: str,
    ) -> AsyncIterator[str]:
        """Stream text deltas for one chat turn.

        Args:
            system_instruction: System prompt
            history: Previous turns (HumanMessage / AIMessage)
            message: New user message

        Yields:
            Non-empty text deltas in arrival order

        Raises:
            GenerationFailed: from the iteration, on any provider error
        """
        messages: List[BaseMessage] = [SystemMessage(content=system_instruction)]
        messages.extend(history)
        messages.append(HumanMessage(content=message))

        try:
            llm = self._create_llm()
            async for chunk in llm.astream(messages):
                text = self.adapter.normalize_chunk(chunk).text
                if text:
                    yield text
        except Exception as e:
            logger.exception(f"Streaming failed ({self._model_name}): {e}")
            raise GenerationFailed(f"{GENERATION_ERROR_PREFIX}: {e}") from e

    @property
    def provider_name(self) -> str:
        return self.adapter.provider_name

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name


__all__ = ["GenerationClient", "GENERATION_ERROR_PREFIX"]
