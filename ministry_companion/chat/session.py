"""목회 컨설턴트 채팅 세션

한 번에 하나의 턴만 진행됩니다.

턴 상태:
    IDLE → AWAITING_RESPONSE → (STREAMING_PARTIAL)* → COMPLETE

사용 예시:
    session = ConversationSession(GenerationClient(settings, model=settings.gemini_chat_model))

    # 토큰 단위로 받기
    turn = session.begin_turn("설교 아이디어를 알려주세요")
    if turn is not None:
        async with turn:
            async for delta in turn:
                ...

    # 끝까지 한 번에
    await session.send("심방 질문 리스트를 만들어 주세요")
"""
from dataclasses import dataclass
from enum import Enum
from typing import AsyncGenerator, List, Literal, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from loguru import logger

from ministry_companion.exceptions import GenerationFailed
from ministry_companion.generation import GenerationClient
from .envelope import extract_final_answer, extract_follow_ups
from .prompts import CHAT_FALLBACK_MESSAGE, CHAT_TURN_ERROR, QNA_SYSTEM_PROMPT


class TurnState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"
    STREAMING_PARTIAL = "streaming_partial"
    COMPLETE = "complete"


@dataclass
class ChatMessage:
    """대화 기록 1건 (모델 메시지는 스트리밍 중 text가 계속 늘어남)"""
    role: Literal["user", "model"]
    text: str

    @property
    def display_text(self) -> str:
        if self.role == "model":
            return extract_final_answer(self.text)
        return self.text


class ConversationSession:
    """채팅 화면 1개가 소유하는 대화 상태

    - messages: 화면에 보이는 전체 기록 (실패 안내 메시지 포함, 잘리지 않음)
    - 프로바이더에 보내는 히스토리는 성공한 턴만 포함
    - reset() 이후에 도착한 이전 턴의 결과는 버려짐
    """

    def __init__(self, client: GenerationClient, system_prompt: str = QNA_SYSTEM_PROMPT):
        self.client = client
        self.system_prompt = system_prompt
        self._messages: List[ChatMessage] = []
        self._history: List[BaseMessage] = []
        self.suggestions: List[str] = []
        self.error: Optional[str] = None
        self.state = TurnState.IDLE
        self._epoch = 0

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    @property
    def is_busy(self) -> bool:
        return self.state in (TurnState.AWAITING_RESPONSE, TurnState.STREAMING_PARTIAL)

    def begin_turn(self, text: str) -> Optional["ChatTurn"]:
        """새 턴 시작

        진행 중인 턴이 있거나 빈 입력이면 아무것도 하지 않고 None을 돌려줍니다.
        그 외에는 사용자 메시지를 즉시 기록하고, 텍스트 조각을 내보내는
        ChatTurn을 돌려줍니다. 끝까지 소비하거나 aclose()해야 턴이 닫힙니다.
        """
        if not text or not text.strip() or self.is_busy:
            return None

        self.suggestions = []
        self.error = None
        self._messages.append(ChatMessage(role="user", text=text))
        self.state = TurnState.AWAITING_RESPONSE
        return ChatTurn(self, self._run_turn(text, self._epoch), self._epoch)

    async def send(self, text: str) -> bool:
        """턴 하나를 끝까지 진행. 무시된 제출이면 False."""
        turn = self.begin_turn(text)
        if turn is None:
            return False
        async with turn:
            async for _ in turn:
                pass
        return True

    def _close_turn(self, epoch: int) -> None:
        """응답 없이 끝난 턴 정리 (이미 완료됐거나 reset된 턴은 무시)"""
        if epoch == self._epoch and self.is_busy:
            logger.warning("Chat turn closed before completion")
            self.state = TurnState.COMPLETE

    async def _run_turn(self, text: str, epoch: int) -> AsyncGenerator[str, None]:
        history = list(self._history)
        collected: List[str] = []
        model_message: Optional[ChatMessage] = None

        try:
            async for delta in self.client.stream(self.system_prompt, history, text):
                if epoch != self._epoch:
                    return
                if model_message is None:
                    model_message = ChatMessage(role="model", text="")
                    self._messages.append(model_message)
                collected.append(delta)
                model_message.text = "".join(collected)
                self.state = TurnState.STREAMING_PARTIAL
                yield delta

            if epoch != self._epoch:
                return

            answer = "".join(collected)
            if model_message is None:
                self._messages.append(ChatMessage(role="model", text=""))
            self.suggestions = extract_follow_ups(answer)
            self._history.extend([HumanMessage(content=text), AIMessage(content=answer)])
            self.state = TurnState.COMPLETE
            logger.info(f"Chat turn complete ({len(answer)} chars, {len(self.suggestions)} follow-ups)")
        except GenerationFailed as e:
            if epoch != self._epoch:
                return
            logger.error(f"Chat turn failed: {e.message}")
            self.error = CHAT_TURN_ERROR
            self._messages.append(ChatMessage(role="model", text=CHAT_FALLBACK_MESSAGE))
            self.state = TurnState.COMPLETE
        finally:
            # 소비자가 중간에 멈춘 경우에도 턴은 닫힘
            self._close_turn(epoch)

    def reset(self) -> None:
        """대화 초기화 (진행 중인 턴의 결과는 버려짐)"""
        self._epoch += 1
        self._messages = []
        self._history = []
        self.suggestions = []
        self.error = None
        self.state = TurnState.IDLE


class ChatTurn:
    """진행 중인 턴 1개

    async iterator로 텍스트 조각을 내보냅니다. 한 번도 소비하지 않은 채
    aclose()해도 턴은 COMPLETE로 닫힙니다 (async with 사용 가능).
    """

    def __init__(self, session: ConversationSession, steps: AsyncGenerator[str, None], epoch: int):
        self._session = session
        self._steps = steps
        self._epoch = epoch

    def __aiter__(self) -> "ChatTurn":
        return self

    async def __anext__(self) -> str:
        return await self._steps.__anext__()

    async def aclose(self) -> None:
        await self._steps.aclose()
        self._session._close_turn(self._epoch)

    async def __aenter__(self) -> "ChatTurn":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
