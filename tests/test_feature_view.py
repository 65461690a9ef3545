"""views/feature_view.py 테스트"""
import asyncio
from datetime import date
from unittest.mock import AsyncMock

import pytest
from loguru import logger

from ministry_companion.exceptions import GenerationFailed
from ministry_companion.rendering import ScriptureQuote
from ministry_companion.schemas import (
    EventRequest,
    Feature,
    PrayerRequest,
    ScriptureSearchRequest,
    SermonRequest,
)
from ministry_companion.views import (
    DEFAULT_PLACEHOLDER,
    NO_MORE_RESULTS_NOTICE,
    PLACEHOLDERS,
    FeatureView,
)


SERMON = SermonRequest(topic="믿음", scripture="히브리서 11:1")


class TestSelectFeature:
    """기능 전환"""

    def test_default_feature(self, mock_client):
        view = FeatureView(mock_client)

        assert view.feature is Feature.SERMON
        assert view.result == ""
        assert view.placeholder == PLACEHOLDERS[Feature.SERMON]

    @pytest.mark.asyncio
    async def test_select_resets_state(self, mock_client):
        """기능을 바꾸면 결과/오류/검색어 초기화"""
        view = FeatureView(mock_client, Feature.SCRIPTURE_SEARCH)
        await view.generate(ScriptureSearchRequest(query="사랑"))

        view.select_feature(Feature.PRAYER)

        assert view.feature is Feature.PRAYER
        assert view.result == ""
        assert view.error is None
        assert view.last_query == ""
        assert view.is_loading is False

    def test_qna_placeholder_default(self, mock_client):
        assert FeatureView(mock_client, Feature.QNA).placeholder == DEFAULT_PLACEHOLDER


class TestGenerate:
    """generate 테스트"""

    @pytest.mark.asyncio
    async def test_stores_result(self, mock_client):
        view = FeatureView(mock_client)

        assert await view.generate(SERMON) is True

        assert view.result == "생성된 결과"
        assert view.error is None
        assert view.is_loading is False

    @pytest.mark.asyncio
    async def test_switches_to_request_feature(self, mock_client):
        """다른 기능의 요청이면 그 기능으로 전환"""
        view = FeatureView(mock_client)

        await view.generate(PrayerRequest())

        assert view.feature is Feature.PRAYER

    @pytest.mark.asyncio
    async def test_generation_failure_sets_error(self, mock_client):
        """실패하면 오류 문구 저장"""
        mock_client.generate_prompt = AsyncMock(side_effect=GenerationFailed("콘텐츠 생성 중 오류가 발생했습니다: boom"))
        view = FeatureView(mock_client)

        await view.generate(SERMON)

        assert view.error == "콘텐츠 생성 중 오류가 발생했습니다: boom"
        assert view.result == ""
        assert view.is_loading is False

    @pytest.mark.asyncio
    async def test_invalid_event_type_sets_error(self, mock_client):
        """알 수 없는 행사 종류는 호출 없이 오류"""
        view = FeatureView(mock_client, Feature.EVENTS)

        await view.generate(EventRequest(event_type="회갑연", names="대상"))

        assert view.error == "유효하지 않은 행사 종류입니다."
        mock_client.generate_prompt.assert_not_called()

    @pytest.mark.asyncio
    async def test_reentrant_submission_ignored(self, mock_client):
        """처리 중 재제출은 무시"""
        release = asyncio.Event()

        async def slow(spec):
            await release.wait()
            return "결과"

        mock_client.generate_prompt = AsyncMock(side_effect=slow)
        view = FeatureView(mock_client)

        first = asyncio.create_task(view.generate(SERMON))
        await asyncio.sleep(0)

        assert view.is_loading is True
        assert await view.generate(SERMON) is False

        release.set()
        assert await first is True
        assert mock_client.generate_prompt.await_count == 1

    @pytest.mark.asyncio
    async def test_result_after_feature_switch_discarded(self, mock_client):
        """기능 전환 전에 시작된 요청의 결과는 버려짐"""
        release = asyncio.Event()

        async def slow(spec):
            await release.wait()
            return "늦은 결과"

        mock_client.generate_prompt = AsyncMock(side_effect=slow)
        view = FeatureView(mock_client)

        task = asyncio.create_task(view.generate(SERMON))
        await asyncio.sleep(0)
        view.select_feature(Feature.BULLETIN)
        release.set()
        await task

        assert view.feature is Feature.BULLETIN
        assert view.result == ""


class TestLoadMore:
    """성경 검색 "결과 더 보기" 테스트"""

    async def _searched_view(self, mock_client, first_batch):
        mock_client.generate_prompt = AsyncMock(return_value=first_batch)
        view = FeatureView(mock_client, Feature.SCRIPTURE_SEARCH)
        await view.generate(ScriptureSearchRequest(query="사랑"))
        return view

    @pytest.mark.asyncio
    async def test_can_load_more_after_search(self, mock_client, scripture_item, serialize):
        view = await self._searched_view(mock_client, serialize([scripture_item("A")]))

        assert view.last_query == "사랑"
        assert view.can_load_more is True

    @pytest.mark.asyncio
    async def test_not_for_other_features(self, mock_client):
        """다른 기능에서는 불가"""
        view = FeatureView(mock_client)
        await view.generate(SERMON)

        assert view.can_load_more is False
        assert await view.load_more() is False

    @pytest.mark.asyncio
    async def test_appends_new_batch(self, mock_client, scripture_item, serialize):
        """새 배치를 누적본 뒤에 추가"""
        view = await self._searched_view(mock_client, serialize([scripture_item("A")]))
        mock_client.generate_prompt = AsyncMock(return_value=serialize([scripture_item("B")]))

        assert await view.load_more() is True

        assert [b.reference for b in view.render()] == ["A", "B"]
        assert view.is_appending is False

    @pytest.mark.asyncio
    async def test_follow_up_prompt_excludes_seen(self, mock_client, scripture_item, serialize):
        """추가 검색 프롬프트에 기존 reference 포함"""
        view = await self._searched_view(mock_client, serialize([scripture_item("요한복음 3:16")]))
        mock_client.generate_prompt = AsyncMock(return_value="[]")

        await view.load_more()

        spec = mock_client.generate_prompt.call_args.args[0]
        assert "요한복음 3:16" in spec.user_prompt

    @pytest.mark.asyncio
    async def test_no_new_results_notice(self, mock_client, scripture_item, serialize):
        """새 결과가 없으면 안내 문구, 누적본 유지"""
        first = serialize([scripture_item("A")])
        view = await self._searched_view(mock_client, first)
        mock_client.generate_prompt = AsyncMock(return_value="[]")

        await view.load_more()

        assert view.notice == NO_MORE_RESULTS_NOTICE
        assert view.result == first

    @pytest.mark.asyncio
    async def test_failure_keeps_results(self, mock_client, scripture_item, serialize):
        """실패하면 오류만 설정하고 기존 결과 유지"""
        first = serialize([scripture_item("A")])
        view = await self._searched_view(mock_client, first)
        mock_client.generate_prompt = AsyncMock(side_effect=GenerationFailed("네트워크 오류"))

        await view.load_more()

        assert view.error == "네트워크 오류"
        assert view.result == first
        assert view.is_loading is False

    @pytest.mark.asyncio
    async def test_malformed_batch_keeps_results(self, mock_client, scripture_item, serialize):
        """새 배치 형식 오류도 기존 결과 유지"""
        first = serialize([scripture_item("A")])
        view = await self._searched_view(mock_client, first)
        mock_client.generate_prompt = AsyncMock(return_value="not json")

        await view.load_more()

        assert view.error
        assert view.result == first


class TestExport:
    """표시/복사/다운로드"""

    @pytest.mark.asyncio
    async def test_render_scripture_quotes(self, mock_client, scripture_item, serialize):
        mock_client.generate_prompt = AsyncMock(return_value=serialize([scripture_item("A")]))
        view = FeatureView(mock_client, Feature.SCRIPTURE_SEARCH)
        await view.generate(ScriptureSearchRequest(query="사랑"))

        assert isinstance(view.render()[0], ScriptureQuote)
        assert "<blockquote>" in view.render_html()

    def test_render_empty(self, mock_client):
        """결과가 없으면 빈 목록"""
        assert FeatureView(mock_client).render() == []

    @pytest.mark.asyncio
    async def test_download(self, mock_client):
        """파일명과 복사용 텍스트"""
        mock_client.generate_prompt = AsyncMock(return_value="## 기도문")
        view = FeatureView(mock_client, Feature.PRAYER)
        await view.generate(PrayerRequest())

        filename, content = view.download(date(2024, 12, 25))

        assert filename == "prayer_2024-12-25.txt"
        assert content == "## 기도문"
        assert view.copy_text() == "## 기도문"


class TestLoadMoreLogging:
    """병합 결과 로그"""

    @pytest.mark.asyncio
    async def test_added_count_logged(self, mock_client, scripture_item, serialize):
        """추가된 구절 수를 로그에 남김"""
        records = []
        handler_id = logger.add(lambda message: records.append(message.record["message"]), level="INFO")
        try:
            mock_client.generate_prompt = AsyncMock(return_value=serialize([scripture_item("A")]))
            view = FeatureView(mock_client, Feature.SCRIPTURE_SEARCH)
            await view.generate(ScriptureSearchRequest(query="사랑"))
            mock_client.generate_prompt = AsyncMock(
                return_value=serialize([scripture_item("B"), scripture_item("C")])
            )

            await view.load_more()
        finally:
            logger.remove(handler_id)

        assert "Loaded 2 more scripture results for '사랑'" in records
