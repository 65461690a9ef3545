"""Gemini LLM Adapter"""
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from .base import BaseLLMAdapter, NormalizedChunk


# 모든 요청에 고정으로 붙는 안전 설정
SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
}


class GeminiAdapter(BaseLLMAdapter):
    """Google Gemini LLM Adapter

    특징:
    - chunk.content가 str 또는 list[dict] 형식: [{"type": "text", "text": "..."}]
    - httpx 클라이언트가 첫 번째 이벤트 루프에 바인딩됨
    - Streamlit 환경에서 매 요청마다 새 인스턴스 필요
    """

    def __init__(self, api_key: str, thinking_budget: Optional[int] = None):
        """
        Args:
            api_key: Google API 키 (Settings에서 주입)
            thinking_budget: Native Thinking 토큰 예산 (None이면 모델 기본값)
        """
        self.api_key = api_key
        self.thinking_budget = thinking_budget

    def create_llm(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        json_mode: bool = False,
        response_schema: Optional[dict] = None,
    ) -> BaseChatModel:
        extra = {}
        if json_mode:
            extra["response_mime_type"] = "application/json"
            if response_schema is not None:
                extra["response_schema"] = response_schema
        if self.thinking_budget is not None:
            extra["thinking_budget"] = self.thinking_budget

        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=self.api_key,
            temperature=temperature,
            max_output_tokens=max_tokens,
            safety_settings=SAFETY_SETTINGS,
            **extra,
        )

    def normalize_chunk(self, chunk: Any) -> NormalizedChunk:
        """Gemini 청크 정규화

        Gemini 형식:
        - 일반: chunk.content = "..." 또는 [{"type": "text", "text": "..."}]
        - Thinking: chunk.content = [{"type": "thinking", "thinking": "..."}]
        """
        content = chunk.content if chunk else ""

        if isinstance(content, str):
            return NormalizedChunk(text=content)

        if isinstance(content, list):
            texts = []
            thinking_texts = []

            for item in content:
                if isinstance(item, str):
                    texts.append(item)
                elif isinstance(item, dict):
                    if item.get("type", "text") == "thinking":
                        thinking_texts.append(item.get("thinking", ""))
                    else:
                        texts.append(item.get("text", ""))

            return NormalizedChunk(
                text="".join(texts),
                thinking="".join(thinking_texts) if thinking_texts else None
            )

        # 예상치 못한 형식 처리
        return NormalizedChunk(text=str(content) if content else "")

    @property
    def provider_name(self) -> str:
        return "gemini"
