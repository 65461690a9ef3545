"""목회 컨설턴트 채팅 (무엇이든 물어보세요)"""
from .envelope import extract_final_answer, extract_follow_ups
from .prompts import (
    CHAT_FALLBACK_MESSAGE,
    CHAT_INIT_ERROR,
    CHAT_TURN_ERROR,
    EXAMPLE_PROMPTS,
    QNA_SYSTEM_PROMPT,
    WELCOME_SUBTITLE,
    WELCOME_TITLE,
)
from .session import ChatMessage, ChatTurn, ConversationSession, TurnState

__all__ = [
    "ConversationSession",
    "ChatMessage",
    "ChatTurn",
    "TurnState",
    "extract_final_answer",
    "extract_follow_ups",
    "QNA_SYSTEM_PROMPT",
    "EXAMPLE_PROMPTS",
    "WELCOME_TITLE",
    "WELCOME_SUBTITLE",
    "CHAT_TURN_ERROR",
    "CHAT_FALLBACK_MESSAGE",
    "CHAT_INIT_ERROR",
]
