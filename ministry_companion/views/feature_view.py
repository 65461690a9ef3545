"""기능 화면 상태 (설교, 기도문, 성경 검색, 주보, 메시지, 행사)

화면 1개가 결과 누적본을 소유하며, 한 번에 하나의 요청만 처리합니다.
"""
from datetime import date
from typing import List, Optional

from loguru import logger

from ministry_companion.exceptions import GenerationFailed, InvalidArgument
from ministry_companion.generation import GenerationClient
from ministry_companion.prompts import build_prompt
from ministry_companion.rendering import (
    Block,
    download_filename,
    format_for_copy,
    render_result,
    to_html,
)
from ministry_companion.schemas import Feature, FeatureRequest, ScriptureSearchRequest
from ministry_companion.search import Merged, merge_batch

NO_MORE_RESULTS_NOTICE = "더 이상 찾을 수 있는 결과가 없습니다."

PLACEHOLDERS = {
    Feature.SERMON: "작성된 설교문 초안이 여기에 표시됩니다.",
    Feature.PRAYER: "생성된 기도문이 여기에 표시됩니다.",
    Feature.SCRIPTURE_SEARCH: "검색된 성경 구절 목록이 여기에 표시됩니다.",
    Feature.BULLETIN: "생성된 주보 및 공지 내용이 여기에 표시됩니다.",
    Feature.COMMUNICATION: "작성된 맞춤 메시지가 여기에 표시됩니다.",
    Feature.EVENTS: "생성된 행사/예식 맞춤 콘텐츠가 여기에 표시됩니다.",
}
DEFAULT_PLACEHOLDER = "AI 생성 결과가 여기에 표시됩니다."


class FeatureView:
    """기능 화면 1개의 상태

    Attributes:
        feature: 현재 선택된 기능
        result: 결과 원문 (성경 검색은 JSON 배열 문자열)
        is_loading: 요청 처리 중
        is_appending: "결과 더 보기" 처리 중
        error: 사용자에게 보여줄 오류 문구
        notice: 오류가 아닌 안내 문구 (예: 추가 결과 없음)
        last_query: 마지막 성경 검색어 ("결과 더 보기"에 사용)
    """

    def __init__(self, client: GenerationClient, feature: Feature = Feature.SERMON):
        self.client = client
        self._epoch = 0
        self.select_feature(feature)

    def select_feature(self, feature: Feature) -> None:
        """기능 전환: 모든 상태 초기화 (진행 중인 요청 결과는 버려짐)"""
        self._epoch += 1
        self.feature = Feature(feature)
        self.result = ""
        self.is_loading = False
        self.is_appending = False
        self.error: Optional[str] = None
        self.notice: Optional[str] = None
        self.last_query = ""

    async def generate(self, request: FeatureRequest) -> bool:
        """폼 제출 처리

        Returns:
            요청을 처리했으면 True, 이미 처리 중이라 무시했으면 False
        """
        if self.is_loading:
            return False

        requested = Feature(request.feature)
        if requested is not self.feature:
            self.select_feature(requested)

        epoch = self._epoch
        self.is_loading = True
        self.error = None
        self.notice = None
        self.result = ""
        self.last_query = request.query if isinstance(request, ScriptureSearchRequest) else ""

        try:
            content = await self.client.generate_prompt(build_prompt(request))
        except (InvalidArgument, GenerationFailed) as e:
            if epoch == self._epoch:
                self.error = getattr(e, "message", None) or str(e)
                self.is_loading = False
            return True

        if epoch == self._epoch:
            self.result = content
            self.is_loading = False
        return True

    @property
    def can_load_more(self) -> bool:
        return (
            self.feature is Feature.SCRIPTURE_SEARCH
            and bool(self.result)
            and bool(self.last_query)
            and not self.is_loading
            and not self.error
        )

    async def load_more(self) -> bool:
        """성경 검색 "결과 더 보기"

        실패하면 error만 설정하고 기존 결과는 그대로 둡니다.

        Returns:
            요청을 보냈으면 True
        """
        if not self.can_load_more:
            return False

        epoch = self._epoch
        self.is_loading = True
        self.is_appending = True
        self.error = None
        self.notice = None

        request = ScriptureSearchRequest(query=self.last_query, existing_results=self.result)
        try:
            new_batch = await self.client.generate_prompt(build_prompt(request))
            outcome = merge_batch(self.result, new_batch)
        except GenerationFailed as e:
            if epoch == self._epoch:
                logger.warning(f"Load more failed, keeping {self.feature.value} results: {e.message}")
                self.error = e.message
                self.is_loading = False
                self.is_appending = False
            return True

        if epoch != self._epoch:
            return True

        if isinstance(outcome, Merged):
            self.result = outcome.serialized
            logger.info(f"Loaded {outcome.added} more scripture results for '{self.last_query}'")
        else:
            self.notice = NO_MORE_RESULTS_NOTICE
        self.is_loading = False
        self.is_appending = False
        return True

    # ============================================================
    # 표시 / 내보내기
    # ============================================================
    @property
    def placeholder(self) -> str:
        return PLACEHOLDERS.get(self.feature, DEFAULT_PLACEHOLDER)

    def render(self) -> List[Block]:
        if not self.result:
            return []
        return render_result(self.feature, self.result)

    def render_html(self) -> str:
        return to_html(self.render())

    def copy_text(self) -> str:
        return format_for_copy(self.feature, self.result)

    def download(self, today: Optional[date] = None) -> tuple[str, str]:
        """(파일명, 내용)"""
        return download_filename(self.feature, today), self.copy_text()
