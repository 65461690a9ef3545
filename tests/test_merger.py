"""search 모듈 테스트 (결과 파싱 / "결과 더 보기" 병합)"""
import json

import pytest

from ministry_companion.exceptions import GenerationFailed, ParseFailure
from ministry_companion.schemas import ScriptureResultItem
from ministry_companion.search import (
    Merged,
    NoNewResults,
    dump_scripture_results,
    merge_batch,
    parse_scripture_results,
)


class TestParseScriptureResults:
    """parse_scripture_results 테스트"""

    def test_blank_is_empty(self):
        """빈 문자열은 빈 목록"""
        assert parse_scripture_results("") == []
        assert parse_scripture_results("   ") == []

    def test_valid_array(self, scripture_item, serialize):
        """정상 배열 파싱"""
        items = parse_scripture_results(serialize([scripture_item("요한복음 3:16")]))

        assert items == [ScriptureResultItem(reference="요한복음 3:16", verse="본문", summary="요약")]

    @pytest.mark.parametrize("payload", ["{not json", '{"reference": "A"}', '[{"reference": "A"}]'])
    def test_malformed(self, payload):
        """JSON이 아니거나 형태가 다르면 ParseFailure"""
        with pytest.raises(ParseFailure):
            parse_scripture_results(payload)

    def test_dump_keeps_korean(self):
        """직렬화 시 한글 유지"""
        dumped = dump_scripture_results([ScriptureResultItem(reference="시편 23:1", verse="여호와는", summary="목자")])

        assert "시편 23:1" in dumped
        assert json.loads(dumped)[0]["summary"] == "목자"


class TestMergeBatch:
    """merge_batch 테스트"""

    def test_both_empty(self):
        """빈 배치 + 빈 누적본 → NoNewResults"""
        assert isinstance(merge_batch("[]", "[]"), NoNewResults)

    def test_new_empty_keeps_existing(self, scripture_item, serialize):
        """새 배치가 비어 있으면 NoNewResults (누적본은 호출자가 유지)"""
        existing = serialize([scripture_item("A")])

        assert isinstance(merge_batch(existing, "[]"), NoNewResults)

    def test_appends_in_order(self, scripture_item, serialize):
        """existing ++ new, 입력 순서 유지"""
        outcome = merge_batch(serialize([scripture_item("A")]), serialize([scripture_item("B")]))

        assert isinstance(outcome, Merged)
        assert [item.reference for item in outcome.items] == ["A", "B"]
        assert outcome.added == 1

    def test_no_deduplication(self, scripture_item, serialize):
        """reference가 겹쳐도 중복 제거하지 않음"""
        outcome = merge_batch(serialize([scripture_item("A")]), serialize([scripture_item("A")]))

        assert isinstance(outcome, Merged)
        assert len(outcome.items) == 2

    def test_malformed_existing_treated_as_empty(self, scripture_item, serialize):
        """기존 누적본 파싱 실패 → 새 결과만"""
        outcome = merge_batch("{broken", serialize([scripture_item("B"), scripture_item("C")]))

        assert isinstance(outcome, Merged)
        assert [item.reference for item in outcome.items] == ["B", "C"]

    def test_malformed_new_raises(self, scripture_item, serialize):
        """새 배치 파싱 실패 → GenerationFailed"""
        with pytest.raises(GenerationFailed):
            merge_batch(serialize([scripture_item("A")]), "not json")

    def test_serialized_round_trip(self, scripture_item, serialize):
        """serialized는 다시 파싱 가능한 JSON 배열"""
        outcome = merge_batch(serialize([scripture_item("A")]), serialize([scripture_item("B")]))

        assert parse_scripture_results(outcome.serialized) == outcome.items
