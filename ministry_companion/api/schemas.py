"""API 스키마 정의"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ministry_companion.schemas import FeatureRequest


class GenerateRequest(BaseModel):
    """기능별 콘텐츠 생성 요청"""
    session_id: Optional[str] = Field(None, description="세션 ID (없으면 새로 발급)")
    request: FeatureRequest = Field(..., description="기능별 입력 (feature 필드로 구분)")


class LoadMoreRequest(BaseModel):
    """성경 구절 검색 결과 더 보기"""
    session_id: str = Field(..., min_length=1, description="세션 ID")


class FeatureResultResponse(BaseModel):
    """기능 화면 상태"""
    session_id: str
    feature: str
    result: str = Field("", description="결과 원문 (성경 검색은 JSON 배열 문자열)")
    html: str = Field("", description="렌더링된 결과")
    error: Optional[str] = None
    notice: Optional[str] = None
    can_load_more: bool = False


class ChatRequest(BaseModel):
    """채팅 요청"""
    message: str = Field(..., min_length=1, description="사용자 메시지")
    session_id: Optional[str] = Field(None, description="세션 ID (없으면 새로 발급)")


class ChatMessageOut(BaseModel):
    role: Literal["user", "model"]
    text: str = Field(..., description="최종 답변만 남긴 표시용 텍스트")


class ConversationResponse(BaseModel):
    """채팅 세션 상태"""
    session_id: str
    state: str
    messages: List[ChatMessageOut]
    suggestions: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class SessionListResponse(BaseModel):
    """세션 목록 응답"""
    sessions: List[str]


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str = "ok"
    provider: str
    model: str
    chat_model: str
