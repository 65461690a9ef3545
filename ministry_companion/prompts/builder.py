"""기능별 프롬프트 빌더

FeatureRequest 하나를 (system instruction, user prompt, 구조화 여부, 스키마)로 변환합니다.
모든 함수는 순수 함수이며, 알 수 없는 행사 종류에만 InvalidArgument를 던집니다.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from loguru import logger

from ministry_companion.exceptions import InvalidArgument, ParseFailure
from ministry_companion.schemas import (
    SCRIPTURE_SEARCH_SCHEMA,
    BulletinRequest,
    EventRequest,
    FeatureRequest,
    MessageRequest,
    PrayerRequest,
    ScriptureSearchRequest,
    SermonRequest,
)
from ministry_companion.search.results import parse_scripture_results
from . import templates


@dataclass(frozen=True)
class PromptSpec:
    """프로바이더 호출 1회분의 입력"""
    system_instruction: str
    user_prompt: str
    structured: bool = False
    schema: Optional[dict] = None


def build_sermon_prompt(request: SermonRequest) -> PromptSpec:
    if request.styles:
        styles = "\n".join(f"- {style.label}" for style in request.styles)
    else:
        styles = templates.DEFAULT_SERMON_STYLE

    user_prompt = templates.SERMON_USER_TEMPLATE.format(
        topic=request.topic,
        scripture=request.scripture,
        notes=request.notes,
        styles=styles,
    )
    return PromptSpec(templates.SERMON_SYSTEM, user_prompt)


def build_prayer_prompt(request: PrayerRequest) -> PromptSpec:
    user_prompt = templates.PRAYER_USER_TEMPLATE.format(
        situation=request.situation,
        details=request.details,
    )
    return PromptSpec(templates.PRAYER_SYSTEM, user_prompt)


def build_scripture_search_prompt(request: ScriptureSearchRequest) -> PromptSpec:
    """성경 구절 검색 프롬프트

    이전 결과가 있으면 이미 찾은 reference를 제외하고 새 구절을 요청하는
    추가 검색 프롬프트로 바꿉니다. 이전 결과를 파싱할 수 없으면 첫 검색으로 취급합니다.
    """
    user_prompt = templates.SCRIPTURE_SEARCH_USER_TEMPLATE.format(
        query=request.query,
        batch_size=templates.SCRIPTURE_BATCH_SIZE,
    )

    if request.existing_results:
        try:
            existing = parse_scripture_results(request.existing_results)
        except ParseFailure as e:
            logger.warning(f"Could not parse existing results for follow-up query: {e}")
            existing = []

        if existing:
            existing_refs = ", ".join(item.reference for item in existing)
            user_prompt = templates.SCRIPTURE_SEARCH_MORE_TEMPLATE.format(
                query=request.query,
                existing_refs=existing_refs,
                batch_size=templates.SCRIPTURE_BATCH_SIZE,
            )

    return PromptSpec(
        templates.SCRIPTURE_SEARCH_SYSTEM,
        user_prompt,
        structured=True,
        schema=SCRIPTURE_SEARCH_SCHEMA,
    )


def build_bulletin_prompt(request: BulletinRequest) -> PromptSpec:
    user_prompt = templates.BULLETIN_USER_TEMPLATE.format(
        content_type=request.content_type,
        topic=request.topic,
        info=request.info,
    )
    return PromptSpec(templates.BULLETIN_SYSTEM, user_prompt)


def build_message_prompt(request: MessageRequest) -> PromptSpec:
    user_prompt = templates.MESSAGE_USER_TEMPLATE.format(
        message_type=request.message_type,
        situation=request.situation,
    )
    return PromptSpec(templates.MESSAGE_SYSTEM, user_prompt)


def build_event_prompt(request: EventRequest) -> PromptSpec:
    """행사/예식 프롬프트

    Raises:
        InvalidArgument: 지원하지 않는 행사 종류
    """
    template = templates.EVENT_TEMPLATES.get(request.event_type)
    if template is None:
        logger.warning(f"Unknown event type: {request.event_type}")
        raise InvalidArgument("유효하지 않은 행사 종류입니다.")

    event_label, system_instruction = template
    user_prompt = templates.EVENT_USER_TEMPLATE.format(
        event=event_label,
        names=request.names,
        details=request.details,
        scripture=request.scripture or templates.UNSPECIFIED_SCRIPTURE,
    )
    return PromptSpec(system_instruction, user_prompt)


_BUILDERS: Dict[type, Callable[..., PromptSpec]] = {
    SermonRequest: build_sermon_prompt,
    PrayerRequest: build_prayer_prompt,
    ScriptureSearchRequest: build_scripture_search_prompt,
    BulletinRequest: build_bulletin_prompt,
    MessageRequest: build_message_prompt,
    EventRequest: build_event_prompt,
}


def build_prompt(request: FeatureRequest) -> PromptSpec:
    """요청 종류에 맞는 빌더로 분기

    Raises:
        InvalidArgument: 지원하지 않는 요청 종류 또는 행사 종류
    """
    builder = _BUILDERS.get(type(request))
    if builder is None:
        raise InvalidArgument(f"Unsupported feature request: {type(request).__name__}")
    return builder(request)
