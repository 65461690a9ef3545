"""chat/session.py 테스트"""
import pytest
from langchain_core.messages import AIMessage, HumanMessage

from ministry_companion.chat import (
    CHAT_FALLBACK_MESSAGE,
    CHAT_TURN_ERROR,
    QNA_SYSTEM_PROMPT,
    ConversationSession,
    TurnState,
)


class TestSubmission:
    """제출 규칙"""

    def test_initial_state(self, make_stream_client):
        """처음에는 IDLE, 빈 기록"""
        session = ConversationSession(make_stream_client([]))

        assert session.state is TurnState.IDLE
        assert session.messages == []
        assert session.suggestions == []
        assert session.error is None

    def test_blank_submission_ignored(self, make_stream_client):
        """빈 입력은 무시"""
        session = ConversationSession(make_stream_client(["답"]))

        assert session.begin_turn("   ") is None
        assert session.messages == []
        assert session.state is TurnState.IDLE

    def test_second_submission_while_awaiting_is_noop(self, make_stream_client):
        """응답 대기 중 두 번째 제출은 무시"""
        session = ConversationSession(make_stream_client(["답"]))

        first = session.begin_turn("첫 질문")
        second = session.begin_turn("두 번째 질문")

        assert first is not None
        assert second is None
        assert session.state is TurnState.AWAITING_RESPONSE
        assert [m.text for m in session.messages] == ["첫 질문"]

    @pytest.mark.asyncio
    async def test_send_returns_false_while_busy(self, make_stream_client):
        """진행 중이면 send는 False"""
        session = ConversationSession(make_stream_client(["답"]))
        session.begin_turn("첫 질문")

        assert await session.send("두 번째 질문") is False


class TestStreaming:
    """스트리밍 턴"""

    @pytest.mark.asyncio
    async def test_chunks_accumulate_in_order(self, make_stream_client):
        """조각은 도착 순서대로 모델 메시지에 누적"""
        session = ConversationSession(make_stream_client(["안녕", "하세요", "!"]))
        turn = session.begin_turn("인사")

        seen = []
        async for delta in turn:
            seen.append(session.messages[-1].text)
            assert session.state is TurnState.STREAMING_PARTIAL

        assert seen == ["안녕", "안녕하세요", "안녕하세요!"]
        assert session.state is TurnState.COMPLETE

    @pytest.mark.asyncio
    async def test_user_then_model_entry(self, make_stream_client, envelope_response):
        """턴마다 사용자 1개 + 모델 1개"""
        session = ConversationSession(make_stream_client([envelope_response]))

        assert await session.send("감사 설교 아이디어") is True

        roles = [m.role for m in session.messages]
        assert roles == ["user", "model"]
        assert session.messages[1].text == envelope_response

    @pytest.mark.asyncio
    async def test_final_answer_and_follow_ups(self, make_stream_client, envelope_response):
        """완료 시 최종 답변과 후속 질문 추출"""
        session = ConversationSession(make_stream_client([envelope_response[:40], envelope_response[40:]]))

        await session.send("감사 설교 아이디어")

        assert session.messages[-1].display_text.startswith("### 설교 아이디어")
        assert session.suggestions == [
            "감사 설교 본문을 추천해 주세요.",
            "어린이 설교로 바꿀 수 있나요?",
        ]

    @pytest.mark.asyncio
    async def test_no_chunks_leaves_empty_model_message(self, make_stream_client):
        """조각이 없으면 빈 모델 메시지로 완료"""
        session = ConversationSession(make_stream_client([]))

        await session.send("질문")

        assert session.messages[-1].role == "model"
        assert session.messages[-1].text == ""
        assert session.state is TurnState.COMPLETE

    @pytest.mark.asyncio
    async def test_history_sent_to_provider(self, make_stream_client):
        """두 번째 턴에는 첫 턴이 히스토리로 전달"""
        client = make_stream_client(["답"])
        session = ConversationSession(client)

        await session.send("첫 질문")
        await session.send("두 번째 질문")

        system, history, message = client.calls[1]
        assert system == QNA_SYSTEM_PROMPT
        assert isinstance(history[0], HumanMessage)
        assert history[0].content == "첫 질문"
        assert isinstance(history[1], AIMessage)
        assert history[1].content == "답"
        assert message == "두 번째 질문"

    @pytest.mark.asyncio
    async def test_suggestions_cleared_on_new_turn(self, make_stream_client, envelope_response):
        """새 턴을 시작하면 이전 후속 질문 제거"""
        session = ConversationSession(make_stream_client([envelope_response]))
        await session.send("첫 질문")
        assert session.suggestions

        session.begin_turn("다음 질문")

        assert session.suggestions == []


class TestFailure:
    """전송 실패"""

    @pytest.mark.asyncio
    async def test_mid_stream_failure(self, make_stream_client):
        """도중 실패: COMPLETE, 마지막 메시지는 고정 안내 문구, error 설정"""
        session = ConversationSession(make_stream_client(["부분 답"], error="connection reset"))

        await session.send("질문")

        assert session.state is TurnState.COMPLETE
        assert session.messages[-1].role == "model"
        assert session.messages[-1].text == CHAT_FALLBACK_MESSAGE
        assert session.error == CHAT_TURN_ERROR

    @pytest.mark.asyncio
    async def test_partial_message_kept(self, make_stream_client):
        """이미 받은 부분 응답은 기록에 남음"""
        session = ConversationSession(make_stream_client(["부분 답"], error="connection reset"))

        await session.send("질문")

        assert [m.text for m in session.messages] == ["질문", "부분 답", CHAT_FALLBACK_MESSAGE]

    @pytest.mark.asyncio
    async def test_failed_turn_not_in_history(self, make_stream_client):
        """실패한 턴은 프로바이더 히스토리에서 제외"""
        client = make_stream_client([], error="timeout")
        session = ConversationSession(client)
        await session.send("실패할 질문")

        client.error = None
        client.chunks = ["답"]
        await session.send("다시 질문")

        _, history, _ = client.calls[1]
        assert history == []
        assert session.error is None

    @pytest.mark.asyncio
    async def test_can_submit_after_failure(self, make_stream_client):
        """실패 후에도 다음 제출 가능"""
        session = ConversationSession(make_stream_client([], error="timeout"))
        await session.send("질문")

        assert session.begin_turn("다시") is not None


class TestReset:
    """reset 테스트"""

    @pytest.mark.asyncio
    async def test_reset_clears_everything(self, make_stream_client, envelope_response):
        session = ConversationSession(make_stream_client([envelope_response]))
        await session.send("질문")

        session.reset()

        assert session.messages == []
        assert session.suggestions == []
        assert session.state is TurnState.IDLE

    @pytest.mark.asyncio
    async def test_in_flight_turn_discarded(self, make_stream_client):
        """reset 이전에 시작된 턴의 결과는 버려짐"""
        session = ConversationSession(make_stream_client(["늦은", " 답"]))
        turn = session.begin_turn("질문")

        session.reset()
        remaining = [delta async for delta in turn]

        assert remaining == []
        assert session.messages == []
        assert session.state is TurnState.IDLE


class TestTurnClose:
    """턴을 소비하지 않고 닫는 경우"""

    @pytest.mark.asyncio
    async def test_unstarted_turn_aclose_completes(self, make_stream_client):
        """한 번도 소비하지 않은 턴을 닫으면 COMPLETE, 다음 제출 가능"""
        client = make_stream_client(["답"])
        session = ConversationSession(client)
        turn = session.begin_turn("질문")

        await turn.aclose()

        assert session.state is TurnState.COMPLETE
        assert session.is_busy is False
        assert client.calls == []
        assert session.begin_turn("다음 질문") is not None

    @pytest.mark.asyncio
    async def test_context_manager_closes_partial_turn(self, make_stream_client):
        """async with 블록을 중간에 빠져나와도 턴은 닫힘"""
        session = ConversationSession(make_stream_client(["첫", " 조각"]))

        async with session.begin_turn("질문") as turn:
            async for _ in turn:
                break

        assert session.state is TurnState.COMPLETE
        assert session.suggestions == []

    @pytest.mark.asyncio
    async def test_aclose_after_reset_keeps_idle(self, make_stream_client):
        """reset 이후에 닫힌 이전 턴은 상태를 바꾸지 않음"""
        session = ConversationSession(make_stream_client(["답"]))
        turn = session.begin_turn("질문")

        session.reset()
        await turn.aclose()

        assert session.state is TurnState.IDLE
