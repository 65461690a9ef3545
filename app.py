"""Streamlit UI - 목회 동반자 AI

Usage:
    streamlit run app.py
"""
import asyncio
import uuid

import streamlit as st

from ministry_companion.chat import (
    CHAT_INIT_ERROR,
    EXAMPLE_PROMPTS,
    WELCOME_SUBTITLE,
    WELCOME_TITLE,
    ConversationSession,
    extract_final_answer,
)
from ministry_companion.config import get_config
from ministry_companion.exceptions import ConfigurationError
from ministry_companion.export import (
    DOCX_MEDIA_TYPE,
    EMPTY_TRANSCRIPT_MESSAGE,
    TRANSCRIPT_FILENAME,
    TRANSCRIPT_TEXT_FILENAME,
    build_transcript_docx,
    build_transcript_text,
)
from ministry_companion.generation import GenerationClient
from ministry_companion.prompts import EVENT_PLACEHOLDERS
from ministry_companion.schemas import (
    BULLETIN_CONTENT_TYPES,
    EVENT_TYPES,
    FEATURE_TITLES,
    MESSAGE_TYPES,
    BulletinRequest,
    EventRequest,
    Feature,
    MessageRequest,
    PrayerRequest,
    ScriptureSearchRequest,
    SermonRequest,
    SermonStyle,
)
from ministry_companion.utils import setup_logging
from ministry_companion.views import FeatureView


st.set_page_config(
    page_title="목회 동반자 AI",
    page_icon="⛪",
    layout="wide"
)


def init_session() -> bool:
    """세션 초기화 (API 키가 없으면 False)"""
    if "session_id" not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
    if "feature_view" in st.session_state:
        return True

    try:
        settings = get_config()
    except ConfigurationError as e:
        st.session_state.init_error = str(e)
        return False

    setup_logging(settings.log_level)
    st.session_state.feature_view = FeatureView(GenerationClient(settings))
    st.session_state.conversation = ConversationSession(
        GenerationClient(settings, model=settings.gemini_chat_model)
    )
    st.session_state.pending_question = None
    return True


def select_feature(feature: Feature):
    st.session_state.feature_view.select_feature(feature)


# ============================================================
# 입력 폼
# ============================================================
def sermon_form():
    with st.form("sermon_form"):
        topic = st.text_input("설교 주제", placeholder="예: '믿음의 능력'")
        scripture = st.text_input("성경 본문", placeholder="예: '히브리서 11:1-6'")
        notes = st.text_area(
            "핵심 메시지 및 메모",
            placeholder="설교에 포함하고 싶은 핵심 내용이나 예화, 질문 등을 입력하세요.",
            height=120,
        )
        styles = st.multiselect(
            "설교 스타일 (선택)",
            options=list(SermonStyle),
            format_func=lambda style: style.label,
        )
        if st.form_submit_button("설교문 생성하기", use_container_width=True):
            if not topic.strip() or not scripture.strip():
                st.warning("설교 주제와 성경 본문을 입력해주세요.")
                return None
            return SermonRequest(topic=topic, scripture=scripture, notes=notes, styles=styles)
    return None


def prayer_form():
    with st.form("prayer_form"):
        situation = st.text_input("기도 상황", value="주일 낮예배 대표기도")
        details = st.text_area(
            "구체적인 내용 또는 기도 제목",
            placeholder="나라와 민족, 환우, 교회 행사 등 기도에 포함될 구체적인 내용을 입력하세요.",
            height=150,
        )
        if st.form_submit_button("기도문 생성하기", use_container_width=True):
            if not situation.strip():
                st.warning("기도 상황을 입력해주세요.")
                return None
            return PrayerRequest(situation=situation, details=details)
    return None


def scripture_search_form():
    with st.form("scripture_search_form"):
        query = st.text_area(
            "검색어",
            placeholder="찾고 싶은 성경 구절, 주제, 또는 단어를 입력하세요. 예: '사랑은 오래 참고', '용서', '요한복음 3:16'",
            height=120,
        )
        if st.form_submit_button("성경 구절 검색하기", use_container_width=True):
            if not query.strip():
                st.warning("검색어를 입력해주세요.")
                return None
            return ScriptureSearchRequest(query=query)
    return None


def bulletin_form():
    with st.form("bulletin_form"):
        content_type = st.selectbox("콘텐츠 종류", BULLETIN_CONTENT_TYPES)
        topic = st.text_input("주제 또는 행사명", placeholder="예: '전교인 가을 수련회'")
        info = st.text_area(
            "포함될 주요 정보",
            placeholder="날짜, 시간, 장소, 대상, 회비 등 공지에 필요한 정보를 입력하세요.",
            height=150,
        )
        if st.form_submit_button("주보/공지 생성하기", use_container_width=True):
            if not topic.strip():
                st.warning("주제 또는 행사명을 입력해주세요.")
                return None
            return BulletinRequest(content_type=content_type, topic=topic, info=info)
    return None


def message_form():
    with st.form("message_form"):
        message_type = st.selectbox("메시지 종류", MESSAGE_TYPES)
        situation = st.text_area("대상 및 상황", placeholder="예: 김 집사님, 수술 후 회복 중", height=150)
        if st.form_submit_button("메시지 생성하기", use_container_width=True):
            if not situation.strip():
                st.warning("대상 및 상황을 입력해주세요.")
                return None
            return MessageRequest(message_type=message_type, situation=situation)
    return None


def event_form():
    # 행사 종류에 따라 안내 문구가 바뀌므로 폼 밖에서 선택
    event_type = st.selectbox("행사 종류", EVENT_TYPES)
    names_hint, details_hint = EVENT_PLACEHOLDERS[event_type]

    with st.form("event_form"):
        names = st.text_input("대상", placeholder=names_hint)
        details = st.text_area("포함될 내용", placeholder=details_hint, height=150)
        scripture = st.text_input("참고 성경 구절 (선택)", placeholder="예: '고린도전서 13:4-7'")
        if st.form_submit_button("행사/예식 콘텐츠 생성하기", use_container_width=True):
            if not names.strip():
                st.warning("대상을 입력해주세요.")
                return None
            return EventRequest(event_type=event_type, names=names, details=details, scripture=scripture)
    return None


FORMS = {
    Feature.SERMON: sermon_form,
    Feature.PRAYER: prayer_form,
    Feature.SCRIPTURE_SEARCH: scripture_search_form,
    Feature.BULLETIN: bulletin_form,
    Feature.COMMUNICATION: message_form,
    Feature.EVENTS: event_form,
}


# ============================================================
# 결과 화면
# ============================================================
async def result_panel(view: FeatureView):
    st.subheader("생성 결과")

    if view.error:
        st.error(view.error)
    if view.notice:
        st.info(view.notice)

    if not view.result:
        if not view.error:
            st.caption(view.placeholder)
        return

    st.markdown(view.render_html(), unsafe_allow_html=True)

    filename, content = view.download()
    col1, col2 = st.columns(2)
    with col1:
        with st.popover("복사", use_container_width=True):
            st.code(view.copy_text(), language=None)
    with col2:
        st.download_button(
            "다운로드",
            data=content.encode("utf-8"),
            file_name=filename,
            mime="text/plain",
            use_container_width=True,
        )

    if view.can_load_more and st.button("결과 더 보기", use_container_width=True):
        with st.spinner("추가 결과를 찾는 중..."):
            await view.load_more()
        st.rerun()


async def feature_page(view: FeatureView):
    st.header(FEATURE_TITLES[view.feature])
    form_col, result_col = st.columns([2, 3])

    with form_col:
        request = FORMS[view.feature]()

    if request is not None:
        with result_col:
            with st.spinner("AI가 작성하는 중입니다..."):
                await view.generate(request)

    with result_col:
        await result_panel(view)


# ============================================================
# 채팅
# ============================================================
def transcript_button(session: ConversationSession):
    messages = session.messages
    if not messages:
        if st.button("대화 저장 (DOCX)"):
            st.warning(EMPTY_TRANSCRIPT_MESSAGE)
        return
    st.download_button(
        "대화 저장 (DOCX)",
        data=build_transcript_docx(messages),
        file_name=TRANSCRIPT_FILENAME,
        mime=DOCX_MEDIA_TYPE,
    )
    st.download_button(
        "텍스트로 저장",
        data=build_transcript_text(messages),
        file_name=TRANSCRIPT_TEXT_FILENAME,
        mime="text/plain",
    )


async def chat_page(session: ConversationSession):
    title_col, action_col = st.columns([4, 1])
    with title_col:
        st.header("목회 AI 컨설턴트")
    with action_col:
        transcript_button(session)

    if not session.messages:
        st.markdown(f"#### {WELCOME_TITLE}")
        st.caption(WELCOME_SUBTITLE)
        for index, prompt in enumerate(EXAMPLE_PROMPTS):
            if st.button(prompt, key=f"example_{index}", use_container_width=True):
                st.session_state.pending_question = prompt

    # 이전 대화 표시
    for message in session.messages:
        with st.chat_message("user" if message.role == "user" else "assistant"):
            st.markdown(message.display_text)

    if session.error:
        st.error(session.error)

    if session.suggestions:
        st.caption("추천 질문")
        for index, suggestion in enumerate(session.suggestions):
            if st.button(suggestion, key=f"suggestion_{index}"):
                st.session_state.pending_question = suggestion

    question = st.chat_input("목회 관련 질문을 입력하세요...") or st.session_state.pending_question
    st.session_state.pending_question = None
    if not question:
        return

    turn = session.begin_turn(question)
    if turn is None:
        return

    with st.chat_message("user"):
        st.markdown(question)
    with st.chat_message("assistant"):
        answer_placeholder = st.empty()
        full_answer = ""
        async with turn:
            async for delta in turn:
                full_answer += delta
                answer_placeholder.markdown(extract_final_answer(full_answer) + "▌")

    st.rerun()


async def main():
    if not init_session():
        st.error(CHAT_INIT_ERROR)
        st.caption(st.session_state.init_error)
        st.stop()

    view: FeatureView = st.session_state.feature_view
    if "active_feature" not in st.session_state:
        st.session_state.active_feature = view.feature

    # 사이드바
    with st.sidebar:
        st.title("⛪ 목회 동반자 AI")
        st.caption("장로교 목회자를 위한 AI 목회 비서")
        st.divider()
        for feature, title in FEATURE_TITLES.items():
            selected = st.session_state.active_feature is feature
            if st.button(
                title,
                key=f"nav_{feature.value}",
                type="primary" if selected else "secondary",
                use_container_width=True,
            ):
                st.session_state.active_feature = feature
                if feature is not Feature.QNA:
                    select_feature(feature)
                st.rerun()

        st.divider()
        st.caption(f"Session: `{st.session_state.session_id[:8]}...`")
        if st.button("대화 초기화", use_container_width=True):
            st.session_state.conversation.reset()
            st.rerun()

    if st.session_state.active_feature is Feature.QNA:
        await chat_page(st.session_state.conversation)
    else:
        await feature_page(view)


if __name__ == "__main__":
    asyncio.run(main())
