"""FastAPI 애플리케이션"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ministry_companion import __version__
from ministry_companion.config import Settings, allowed_origins_from_env, get_config
from ministry_companion.generation import GenerationClient
from ministry_companion.utils import setup_logging
from ministry_companion.views import InMemoryViewStore
from .routes import router


def build_store(settings: Settings) -> InMemoryViewStore:
    """설정으로 기능/채팅 클라이언트를 만들어 저장소 생성"""
    return InMemoryViewStore(
        feature_client=GenerationClient(settings),
        chat_client=GenerationClient(settings, model=settings.gemini_chat_model),
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryViewStore] = None,
) -> FastAPI:
    """앱 생성

    Args:
        settings: 명시적 설정 (없으면 시작 시 환경 변수에서 읽음)
        store: 미리 만든 저장소 (테스트용)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.store is None:
            # API 키가 없으면 여기서 ConfigurationError로 시작 실패
            resolved = settings or get_config()
            setup_logging(resolved.log_level)
            app.state.store = build_store(resolved)
            logger.info(f"Ministry Companion API started (model={resolved.gemini_model})")
        yield

    app = FastAPI(
        title="Ministry Companion",
        description="장로교 목회자를 위한 AI 목회 비서",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins if settings else allowed_origins_from_env(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API 라우트 등록
    app.include_router(router, prefix="/api")

    return app
