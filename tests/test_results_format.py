"""rendering/results.py 테스트 (결과 표시/복사/다운로드)"""
from datetime import date

import pytest

from ministry_companion.rendering import (
    NO_RESULTS_NOTICE,
    Heading,
    Paragraph,
    ScriptureQuote,
    TextSpan,
    download_filename,
    format_for_copy,
    render_result,
)
from ministry_companion.schemas import Feature


class TestRenderResult:
    """render_result 테스트"""

    def test_generic_feature_uses_markup(self):
        """성경 검색이 아닌 기능은 일반 마크업"""
        blocks = render_result(Feature.SERMON, "## 서론\n본문")

        assert isinstance(blocks[0], Heading)
        assert isinstance(blocks[1], Paragraph)

    def test_scripture_items_become_quotes(self, scripture_item, serialize):
        """정상 배열 → 항목마다 ScriptureQuote"""
        content = serialize([scripture_item("요한복음 3:16"), scripture_item("로마서 8:28")])

        blocks = render_result(Feature.SCRIPTURE_SEARCH, content)

        assert [b.reference for b in blocks] == ["요한복음 3:16", "로마서 8:28"]
        assert all(isinstance(b, ScriptureQuote) for b in blocks)

    def test_scripture_parse_failure_renders_raw(self):
        """JSON이 아니면 원문 렌더링"""
        blocks = render_result("scriptureSearch", "콘텐츠 생성 중 오류")

        assert blocks == [Paragraph(spans=[TextSpan("콘텐츠 생성 중 오류")])]

    @pytest.mark.parametrize("content", ["[]", '{"reference": "A"}', '[{"reference": "A"}]'])
    def test_scripture_empty_or_wrong_shape_notice(self, content):
        """빈 배열/형태 불일치는 안내 문구"""
        blocks = render_result(Feature.SCRIPTURE_SEARCH, content)

        assert blocks == [Paragraph(spans=[TextSpan(NO_RESULTS_NOTICE)])]


class TestFormatForCopy:
    """format_for_copy 테스트"""

    def test_scripture_format(self, scripture_item, serialize):
        """항목별 [reference] / "verse" / 요약 및 적용 / 구분선"""
        content = serialize([scripture_item("시편 23:1", "여호와는 나의 목자시니", "돌보심")])

        assert format_for_copy(Feature.SCRIPTURE_SEARCH, content) == (
            '[시편 23:1]\n"여호와는 나의 목자시니"\n\n요약 및 적용: 돌보심\n\n---\n'
        )

    def test_scripture_multiple_items_concatenated(self, scripture_item, serialize):
        content = serialize([scripture_item("A"), scripture_item("B")])

        copied = format_for_copy(Feature.SCRIPTURE_SEARCH, content)

        assert copied.count("---\n") == 2
        assert copied.index("[A]") < copied.index("[B]")

    def test_scripture_parse_failure_returns_raw(self):
        """파싱 실패 시 원문"""
        assert format_for_copy(Feature.SCRIPTURE_SEARCH, "not json") == "not json"

    def test_other_feature_raw(self):
        """다른 기능은 원문 그대로"""
        assert format_for_copy(Feature.PRAYER, "**기도문**") == "**기도문**"


class TestDownloadFilename:
    """download_filename 테스트"""

    def test_feature_and_date(self):
        assert download_filename(Feature.SCRIPTURE_SEARCH, date(2024, 3, 1)) == "scriptureSearch_2024-03-01.txt"

    def test_default_today(self):
        """날짜 생략 시 오늘 (UTC)"""
        filename = download_filename("sermon")

        assert filename.startswith("sermon_")
        assert filename.endswith(".txt")
