"""Pydantic 모델 정의

기능별 입력 폼(FeatureRequest)과 구조화 응답(ScriptureResultItem)을 정의합니다.
"""
from enum import Enum
from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Feature(str, Enum):
    SERMON = "sermon"
    PRAYER = "prayer"
    SCRIPTURE_SEARCH = "scriptureSearch"
    BULLETIN = "bulletin"
    COMMUNICATION = "communication"
    EVENTS = "events"
    QNA = "qna"


class SermonStyle(str, Enum):
    BIBLICAL_HUMOR = "biblicalHumor"
    GENERAL_HUMOR = "generalHumor"
    EXPOSITORY = "expository"
    PRACTICAL = "practical"
    YOUTH_FOCUS = "youthFocus"
    CHILDREN_FOCUS = "childrenFocus"
    NEWCOMER_FOCUS = "newcomerFocus"
    TESTIMONY_FOCUS = "testimonyFocus"
    QA_FORMAT = "qaFormat"
    PARABLE_FOCUS = "parableFocus"
    PROPHETIC_FOCUS = "propheticFocus"
    EXEGETICAL_FOCUS = "exegeticalFocus"
    TOPICAL_FOCUS = "topicalFocus"
    THEOLOGICAL_DEPTH = "theologicalDepth"

    @property
    def label(self) -> str:
        return SERMON_STYLE_LABELS[self]


SERMON_STYLE_LABELS: Dict[SermonStyle, str] = {
    SermonStyle.BIBLICAL_HUMOR: "성경 유머 추천",
    SermonStyle.GENERAL_HUMOR: "설교 유머 추천",
    SermonStyle.EXPOSITORY: "성경 강독 강조",
    SermonStyle.PRACTICAL: "생활 속 실천 강조",
    SermonStyle.YOUTH_FOCUS: "청년 대상 설교",
    SermonStyle.CHILDREN_FOCUS: "어린이/유아 설교",
    SermonStyle.NEWCOMER_FOCUS: "새신자 환영 설교",
    SermonStyle.TESTIMONY_FOCUS: "간증/경험 중심",
    SermonStyle.QA_FORMAT: "질문과 답변 형식",
    SermonStyle.PARABLE_FOCUS: "비유/이야기 중심",
    SermonStyle.PROPHETIC_FOCUS: "도전적/예언자적 강조",
    SermonStyle.EXEGETICAL_FOCUS: "주해 설교 강조",
    SermonStyle.TOPICAL_FOCUS: "주제 설교 강조",
    SermonStyle.THEOLOGICAL_DEPTH: "신학적 깊이 강조",
}

# 폼 선택지 (select box)
BULLETIN_CONTENT_TYPES = ("주간 광고", "목회 칼럼", "행사 안내", "새신자 환영")
MESSAGE_TYPES = ("위로/격려", "새신자 환영", "심방 일정 안내", "행사 참여 독려")
EVENT_TYPES = ("결혼예배 설교", "장례예배 설교", "출산/백일 축사", "입학/졸업 격려사")


# ============================================================
# FeatureRequest (기능별 tagged variant)
# ============================================================
class _FeatureRequestBase(BaseModel):
    """폼 제출 1회 = 요청 1개. 생성 후 변경 불가."""

    model_config = ConfigDict(frozen=True)


class SermonRequest(_FeatureRequestBase):
    feature: Literal["sermon"] = "sermon"
    topic: str = Field(..., description="설교 주제")
    scripture: str = Field(..., description="성경 본문")
    notes: str = Field(default="", description="핵심 메시지 및 메모")
    styles: List[SermonStyle] = Field(default_factory=list, description="요청된 설교 스타일")


class PrayerRequest(_FeatureRequestBase):
    feature: Literal["prayer"] = "prayer"
    situation: str = Field(default="주일 낮예배 대표기도", description="기도 상황")
    details: str = Field(default="", description="구체적인 내용 또는 기도 제목")


class ScriptureSearchRequest(_FeatureRequestBase):
    feature: Literal["scriptureSearch"] = "scriptureSearch"
    query: str = Field(..., min_length=1, description="검색어 (구절, 주제, 단어)")
    existing_results: str = Field(
        default="",
        description="이전에 받은 결과 (직렬화된 JSON 배열). 비어 있지 않으면 추가 검색",
    )


class BulletinRequest(_FeatureRequestBase):
    feature: Literal["bulletin"] = "bulletin"
    content_type: str = Field(default=BULLETIN_CONTENT_TYPES[0], description="콘텐츠 종류")
    topic: str = Field(..., description="주제 또는 행사명")
    info: str = Field(default="", description="포함될 주요 정보")


class MessageRequest(_FeatureRequestBase):
    feature: Literal["communication"] = "communication"
    message_type: str = Field(default=MESSAGE_TYPES[0], description="메시지 종류")
    situation: str = Field(..., description="대상 및 상황")


class EventRequest(_FeatureRequestBase):
    feature: Literal["events"] = "events"
    event_type: str = Field(default=EVENT_TYPES[0], description="행사 종류")
    names: str = Field(..., description="대상")
    details: str = Field(default="", description="포함될 내용")
    scripture: str = Field(default="", description="참고 성경 구절 (선택)")


FeatureRequest = Annotated[
    Union[
        SermonRequest,
        PrayerRequest,
        ScriptureSearchRequest,
        BulletinRequest,
        MessageRequest,
        EventRequest,
    ],
    Field(discriminator="feature"),
]

FEATURE_REQUEST_ADAPTER: TypeAdapter = TypeAdapter(FeatureRequest)


# ============================================================
# 구조화 응답 (성경 구절 검색)
# ============================================================
class ScriptureResultItem(BaseModel):
    """성경 구절 검색 결과 1건 (구조적 동등성만 가짐)"""

    model_config = ConfigDict(frozen=True)

    reference: str = Field(description="성경 구절의 정확한 출처 (예: '요한복음 3:16').")
    verse: str = Field(description="성경 구절의 전체 텍스트.")
    summary: str = Field(description="성경 구절의 의미에 대한 간략한 요약 또는 현대적 적용점.")


SCRIPTURE_RESULTS_ADAPTER: TypeAdapter = TypeAdapter(List[ScriptureResultItem])

# Gemini responseSchema (OpenAPI subset)
SCRIPTURE_SEARCH_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "reference": {
                "type": "string",
                "description": "성경 구절의 정확한 출처 (예: '요한복음 3:16').",
            },
            "verse": {
                "type": "string",
                "description": "성경 구절의 전체 텍스트.",
            },
            "summary": {
                "type": "string",
                "description": "성경 구절의 의미에 대한 간략한 요약 또는 현대적 적용점.",
            },
        },
        "required": ["reference", "verse", "summary"],
    },
}


# 사이드바 메뉴 제목
FEATURE_TITLES: Dict[Feature, str] = {
    Feature.SERMON: "설교 및 예배 준비",
    Feature.PRAYER: "기도문 작성",
    Feature.SCRIPTURE_SEARCH: "성경 구절 검색",
    Feature.BULLETIN: "주보 및 공지",
    Feature.COMMUNICATION: "성도 소통 지원",
    Feature.EVENTS: "행사/예식 지원",
    Feature.QNA: "무엇이든 물어보세요",
}
