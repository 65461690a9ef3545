"""공용 fixture"""
import json
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from ministry_companion.config import Settings
from ministry_companion.exceptions import GenerationFailed


class FakeStreamClient:
    """미리 정한 조각을 흘려보내는 스트리밍 클라이언트

    error가 있으면 모든 조각을 보낸 뒤 GenerationFailed를 던집니다.
    """

    def __init__(self, chunks: List[str], error: Optional[str] = None):
        self.chunks = chunks
        self.error = error
        self.calls = []

    async def stream(self, system_instruction, history, message):
        self.calls.append((system_instruction, list(history), message))
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise GenerationFailed(self.error)


@pytest.fixture
def settings():
    """테스트용 설정 (실제 API 키 불필요)"""
    return Settings(google_api_key="test-api-key")


@pytest.fixture
def mock_client():
    """generate_prompt를 AsyncMock으로 둔 GenerationClient 대역"""
    client = MagicMock()
    client.generate_prompt = AsyncMock(return_value="생성된 결과")
    client.provider_name = "gemini"
    client.model_name = "gemini-2.5-pro"
    return client


@pytest.fixture
def scripture_item():
    """성경 구절 검색 결과 1건을 만드는 함수"""
    def _make(reference: str, verse: str = "본문", summary: str = "요약") -> dict:
        return {"reference": reference, "verse": verse, "summary": summary}
    return _make


@pytest.fixture
def serialize():
    """dict 목록을 JSON 배열 문자열로"""
    def _serialize(items) -> str:
        return json.dumps(items, ensure_ascii=False)
    return _serialize


@pytest.fixture
def envelope_response():
    """<final_response>/<follow_up> 형식의 모델 응답"""
    return (
        "<thinking_process>\n1. 질문 분석\n</thinking_process>\n"
        "<final_response>\n### 설교 아이디어\n- **감사의 능력**: 범사에 감사\n</final_response>\n"
        "<follow_up>\n감사 설교 본문을 추천해 주세요.\n\n어린이 설교로 바꿀 수 있나요?\n</follow_up>"
    )


@pytest.fixture
def make_stream_client():
    """FakeStreamClient 생성 함수"""
    return FakeStreamClient
