"""성경 구절 검색 "결과 더 보기" 병합

기존 누적본 뒤에 새 배치를 그대로 이어 붙입니다.
reference 기준 중복 제거는 하지 않습니다 (같은 구절이 다시 나올 수 있음).
"""
from dataclasses import dataclass
from typing import List, Union

from loguru import logger

from ministry_companion.exceptions import GenerationFailed, ParseFailure
from ministry_companion.schemas import ScriptureResultItem
from .results import dump_scripture_results, parse_scripture_results


@dataclass(frozen=True)
class Merged:
    """병합 성공: existing ++ new

    Attributes:
        items: 병합된 전체 결과 (입력 순서 유지)
        added: 이번 배치에서 추가된 개수
    """

    items: List[ScriptureResultItem]
    added: int

    @property
    def serialized(self) -> str:
        return dump_scripture_results(self.items)


@dataclass(frozen=True)
class NoNewResults:
    """새 배치가 비어 있음. 누적본은 그대로 두고 사용자에게 별도로 알려야 함."""


MergeOutcome = Union[Merged, NoNewResults]


def merge_batch(existing_serialized: str, new_serialized: str) -> MergeOutcome:
    """새 검색 배치를 기존 누적본과 병합

    Args:
        existing_serialized: 지금까지 누적된 결과 (JSON 배열 문자열)
        new_serialized: 프로바이더가 돌려준 새 배치 (JSON 배열 문자열)

    Returns:
        Merged 또는 NoNewResults

    Raises:
        GenerationFailed: 새 배치를 파싱할 수 없을 때
    """
    try:
        existing = parse_scripture_results(existing_serialized)
    except ParseFailure as e:
        # 기존 결과 손실은 허용 (새 결과만 사용)
        logger.warning(f"Failed to parse existing results, treating as empty: {e}")
        existing = []

    try:
        new_items = parse_scripture_results(new_serialized)
    except ParseFailure as e:
        logger.error(f"Failed to parse new scripture batch: {e}")
        raise GenerationFailed(f"검색 결과 형식이 올바르지 않습니다: {e}") from e

    if not new_items:
        logger.info("Scripture search returned no new results")
        return NoNewResults()

    logger.debug(f"Merged {len(new_items)} new results onto {len(existing)} existing")
    return Merged(items=existing + new_items, added=len(new_items))
