"""기능별 결과 표시/복사/다운로드 포맷"""
import json
from datetime import date, datetime, timezone
from typing import List, Optional, Union

from pydantic import ValidationError

from ministry_companion.exceptions import ParseFailure
from ministry_companion.schemas import SCRIPTURE_RESULTS_ADAPTER, Feature
from ministry_companion.search.results import parse_scripture_results
from .markup import SUMMARY_LABEL, Block, ScriptureQuote, render_markup

NO_RESULTS_NOTICE = "검색 결과가 없거나 형식이 올바르지 않습니다."

FeatureLike = Union[Feature, str]


def render_result(feature: FeatureLike, content: str) -> List[Block]:
    """결과 원문을 표시용 블록으로 변환

    성경 구절 검색:
        - JSON이 아니면 원문을 일반 마크업으로 렌더링 (예: 오류 메시지)
        - 비어 있거나 형태가 맞지 않는 배열이면 안내 문구
        - 그 외에는 항목마다 ScriptureQuote 블록
    """
    if Feature(feature) is not Feature.SCRIPTURE_SEARCH:
        return render_markup(content)

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        return render_markup(content)

    try:
        items = SCRIPTURE_RESULTS_ADAPTER.validate_python(data)
    except ValidationError:
        items = []

    if not items:
        return render_markup(NO_RESULTS_NOTICE)

    return [
        ScriptureQuote(reference=item.reference, verse=item.verse, summary=item.summary)
        for item in items
    ]


def format_for_copy(feature: FeatureLike, content: str) -> str:
    """클립보드/다운로드용 평문

    성경 구절 검색 결과는 항목별로
    ``[reference]\\n"verse"\\n\\n요약 및 적용: summary\\n\\n---\\n`` 형식으로 이어 붙이고,
    파싱에 실패하면 원문을 그대로 돌려줍니다.
    """
    if Feature(feature) is not Feature.SCRIPTURE_SEARCH or not content:
        return content

    try:
        items = parse_scripture_results(content)
    except ParseFailure:
        return content

    return "".join(
        f'[{item.reference}]\n"{item.verse}"\n\n{SUMMARY_LABEL}: {item.summary}\n\n---\n'
        for item in items
    )


def download_filename(feature: FeatureLike, today: Optional[date] = None) -> str:
    """``{feature}_{YYYY-MM-DD}.txt`` (날짜는 UTC 기준)"""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return f"{Feature(feature).value}_{today.isoformat()}.txt"
