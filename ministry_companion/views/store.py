"""In-Memory 화면 상태 저장소

HTTP API용. 세션 ID마다 FeatureView 1개와 ConversationSession 1개를 둡니다.
서버 재시작 시 데이터 소실됩니다.
"""
from typing import Callable, Dict, List

from ministry_companion.chat import ConversationSession
from ministry_companion.generation import GenerationClient
from .feature_view import FeatureView


class InMemoryViewStore:
    """세션별 화면 상태 저장소

    사용 예시:
        store = InMemoryViewStore(feature_client, chat_client)
        view = store.feature_view("session-1")
        chat = store.conversation("session-1")
    """

    def __init__(
        self,
        feature_client: GenerationClient,
        chat_client: GenerationClient,
        session_factory: Callable[[GenerationClient], ConversationSession] = ConversationSession,
    ):
        self.feature_client = feature_client
        self.chat_client = chat_client
        self._session_factory = session_factory
        self._views: Dict[str, FeatureView] = {}
        self._chats: Dict[str, ConversationSession] = {}

    def feature_view(self, session_id: str) -> FeatureView:
        """세션의 FeatureView (없으면 생성)"""
        if session_id not in self._views:
            self._views[session_id] = FeatureView(self.feature_client)
        return self._views[session_id]

    def conversation(self, session_id: str) -> ConversationSession:
        """세션의 ConversationSession (없으면 생성)"""
        if session_id not in self._chats:
            self._chats[session_id] = self._session_factory(self.chat_client)
        return self._chats[session_id]

    def has_feature_view(self, session_id: str) -> bool:
        return session_id in self._views

    def has_conversation(self, session_id: str) -> bool:
        return session_id in self._chats

    def delete_session(self, session_id: str) -> None:
        """세션 완전 삭제"""
        self._views.pop(session_id, None)
        self._chats.pop(session_id, None)

    def list_sessions(self) -> List[str]:
        """모든 세션 ID 조회"""
        return sorted(set(self._views) | set(self._chats))
