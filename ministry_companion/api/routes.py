"""API 라우트 정의"""
import json
import uuid
from typing import AsyncGenerator, List
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from loguru import logger
from sse_starlette.sse import EventSourceResponse

from ministry_companion.chat import CHAT_FALLBACK_MESSAGE, ChatMessage, ConversationSession
from ministry_companion.exceptions import EmptyTranscriptError
from ministry_companion.export import (
    DOCX_MEDIA_TYPE,
    TRANSCRIPT_FILENAME,
    TRANSCRIPT_TEXT_FILENAME,
    build_transcript_docx,
    build_transcript_text,
)
from ministry_companion.views import FeatureView, InMemoryViewStore
from .schemas import (
    ChatMessageOut,
    ChatRequest,
    ConversationResponse,
    FeatureResultResponse,
    GenerateRequest,
    HealthResponse,
    LoadMoreRequest,
    SessionListResponse,
)

router = APIRouter()

CHAT_BUSY_MESSAGE = "이전 답변을 처리 중입니다."
LOAD_MORE_UNAVAILABLE = "추가로 불러올 검색 결과가 없습니다."


def get_store(request: Request) -> InMemoryViewStore:
    """앱 수명 동안 유지되는 화면 상태 저장소"""
    return request.app.state.store


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"}


def _existing_view(store: InMemoryViewStore, session_id: str) -> FeatureView:
    if not store.has_feature_view(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return store.feature_view(session_id)


def _feature_response(session_id: str, view: FeatureView) -> FeatureResultResponse:
    return FeatureResultResponse(
        session_id=session_id,
        feature=view.feature.value,
        result=view.result,
        html=view.render_html(),
        error=view.error,
        notice=view.notice,
        can_load_more=view.can_load_more,
    )


def _conversation_response(session_id: str, session: ConversationSession) -> ConversationResponse:
    return ConversationResponse(
        session_id=session_id,
        state=session.state.value,
        messages=[
            ChatMessageOut(role=message.role, text=message.display_text)
            for message in session.messages
        ],
        suggestions=session.suggestions,
        error=session.error,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(store: InMemoryViewStore = Depends(get_store)):
    """헬스 체크"""
    return HealthResponse(
        status="ok",
        provider=store.feature_client.provider_name,
        model=store.feature_client.model_name,
        chat_model=store.chat_client.model_name,
    )


# ============================================================
# 기능 화면
# ============================================================
@router.post("/generate", response_model=FeatureResultResponse)
async def generate(body: GenerateRequest, store: InMemoryViewStore = Depends(get_store)):
    """기능별 콘텐츠 생성 (오류는 error 필드로 전달)"""
    session_id = body.session_id or str(uuid.uuid4())
    view = store.feature_view(session_id)

    if not await view.generate(body.request):
        raise HTTPException(status_code=409, detail="이전 요청을 처리 중입니다.")

    return _feature_response(session_id, view)


@router.post("/scripture/more", response_model=FeatureResultResponse)
async def load_more(body: LoadMoreRequest, store: InMemoryViewStore = Depends(get_store)):
    """성경 구절 검색 결과 더 보기"""
    if not store.has_feature_view(body.session_id):
        raise HTTPException(status_code=409, detail=LOAD_MORE_UNAVAILABLE)

    view = store.feature_view(body.session_id)
    if not await view.load_more():
        raise HTTPException(status_code=409, detail=LOAD_MORE_UNAVAILABLE)

    return _feature_response(body.session_id, view)


@router.get("/sessions/{session_id}/result", response_model=FeatureResultResponse)
async def get_result(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """현재 기능 화면 상태"""
    return _feature_response(session_id, _existing_view(store, session_id))


@router.get("/sessions/{session_id}/download")
async def download_result(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """현재 결과를 텍스트 파일로 다운로드"""
    view = _existing_view(store, session_id)
    if not view.result:
        raise HTTPException(status_code=404, detail="다운로드할 결과가 없습니다.")

    filename, content = view.download()
    return PlainTextResponse(content, headers=_attachment(filename))


# ============================================================
# 채팅
# ============================================================
@router.post("/chat/stream")
async def chat_stream(body: ChatRequest, store: InMemoryViewStore = Depends(get_store)):
    """채팅 (SSE Streaming)

    이벤트 타입:
    - token: 모델 텍스트 조각
    - done: 턴 완료 (최종 답변, 후속 질문)
    - error: 턴 실패
    """
    if not body.message.strip():
        raise HTTPException(status_code=422, detail="메시지를 입력해주세요.")

    session_id = body.session_id or str(uuid.uuid4())
    session = store.conversation(session_id)
    if session.is_busy:
        raise HTTPException(status_code=409, detail=CHAT_BUSY_MESSAGE)

    async def event_generator() -> AsyncGenerator[dict, None]:
        # 스트림이 시작되기 전에 연결이 끊기면 턴도 시작되지 않음
        turn = session.begin_turn(body.message)
        if turn is None:
            yield {
                "event": "error",
                "data": json.dumps({"error": CHAT_BUSY_MESSAGE, "message": ""}, ensure_ascii=False)
            }
            return

        async with turn:
            async for delta in turn:
                yield {
                    "event": "token",
                    "data": json.dumps({"content": delta}, ensure_ascii=False)
                }

        if session.error:
            yield {
                "event": "error",
                "data": json.dumps(
                    {"error": session.error, "message": CHAT_FALLBACK_MESSAGE},
                    ensure_ascii=False,
                )
            }
            return

        messages = session.messages
        answer = messages[-1].display_text if messages else ""
        yield {
            "event": "done",
            "data": json.dumps(
                {
                    "session_id": session_id,
                    "answer": answer,
                    "suggestions": session.suggestions,
                },
                ensure_ascii=False,
            )
        }

    return EventSourceResponse(event_generator())


@router.get("/chat/{session_id}", response_model=ConversationResponse)
async def get_conversation(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """채팅 기록 조회"""
    if not store.has_conversation(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return _conversation_response(session_id, store.conversation(session_id))


def _transcript_messages(store: InMemoryViewStore, session_id: str) -> List[ChatMessage]:
    if not store.has_conversation(session_id):
        return []
    return store.conversation(session_id).messages


@router.get("/chat/{session_id}/transcript.docx")
async def export_transcript(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """채팅 기록 DOCX 내보내기"""
    try:
        content = build_transcript_docx(_transcript_messages(store, session_id))
    except EmptyTranscriptError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(content=content, media_type=DOCX_MEDIA_TYPE, headers=_attachment(TRANSCRIPT_FILENAME))


@router.get("/chat/{session_id}/transcript.txt")
async def export_transcript_text(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """채팅 기록 텍스트 내보내기"""
    try:
        content = build_transcript_text(_transcript_messages(store, session_id))
    except EmptyTranscriptError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return PlainTextResponse(content, headers=_attachment(TRANSCRIPT_TEXT_FILENAME))


@router.delete("/chat/{session_id}/messages")
async def clear_conversation(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """채팅 기록 초기화"""
    if store.has_conversation(session_id):
        store.conversation(session_id).reset()
    return {"message": "Session cleared", "session_id": session_id}


# ============================================================
# 세션
# ============================================================
@router.get("/sessions", response_model=SessionListResponse)
async def list_sessions(store: InMemoryViewStore = Depends(get_store)):
    """세션 목록 조회"""
    return SessionListResponse(sessions=store.list_sessions())


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, store: InMemoryViewStore = Depends(get_store)):
    """세션 삭제"""
    if session_id not in store.list_sessions():
        raise HTTPException(status_code=404, detail="Session not found")

    store.delete_session(session_id)
    logger.info(f"Deleted session {session_id}")
    return {"message": "Session deleted", "session_id": session_id}
