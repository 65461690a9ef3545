"""성경 구절 검색 결과 직렬화/역직렬화

결과 누적본은 화면 상태에 JSON 문자열로 보관됩니다.
"""
from typing import List, Sequence

from pydantic import ValidationError

from ministry_companion.exceptions import ParseFailure
from ministry_companion.schemas import SCRIPTURE_RESULTS_ADAPTER, ScriptureResultItem


def parse_scripture_results(payload: str) -> List[ScriptureResultItem]:
    """직렬화된 결과 배열을 파싱

    빈 문자열(공백 포함)은 빈 목록으로 취급합니다.

    Raises:
        ParseFailure: JSON이 아니거나 ScriptureResultItem 배열 형태가 아닐 때
    """
    if not payload or not payload.strip():
        return []
    try:
        return SCRIPTURE_RESULTS_ADAPTER.validate_json(payload)
    except ValidationError as e:
        raise ParseFailure(
            f"Malformed scripture results ({e.error_count()} errors)"
        ) from e


def dump_scripture_results(items: Sequence[ScriptureResultItem]) -> str:
    """결과 목록을 JSON 배열 문자열로 직렬화 (한글 그대로 유지)"""
    return SCRIPTURE_RESULTS_ADAPTER.dump_json(list(items)).decode("utf-8")
