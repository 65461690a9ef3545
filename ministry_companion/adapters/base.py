"""LLM Adapter 베이스 클래스"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel


@dataclass
class NormalizedChunk:
    """정규화된 스트리밍 청크

    프로바이더의 청크(또는 완성된 메시지)를 통일된 형식으로 변환
    """
    text: str
    thinking: Optional[str] = None


class BaseLLMAdapter(ABC):
    """LLM Adapter 추상 베이스 클래스

    각 LLM 프로바이더별 차이점을 캡슐화:
    - LLM 인스턴스 생성 방식 (안전 설정, 응답 형식 포함)
    - 스트리밍 청크 형식 정규화
    """

    @abstractmethod
    def create_llm(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        json_mode: bool = False,
        response_schema: Optional[dict] = None,
    ) -> BaseChatModel:
        """LLM 인스턴스 생성

        Args:
            model: 모델명
            temperature: 샘플링 온도
            max_tokens: 최대 토큰 수
            json_mode: True면 application/json 응답 요청
            response_schema: json_mode일 때 강제할 응답 스키마

        Returns:
            LangChain BaseChatModel 인스턴스
        """
        pass

    @abstractmethod
    def normalize_chunk(self, chunk: Any) -> NormalizedChunk:
        """청크(AIMessageChunk 또는 AIMessage)를 정규화된 형식으로 변환"""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """프로바이더 이름 (로깅/디버깅용)"""
        pass
