"""채팅 응답 envelope 파싱

모델 응답 형식:
    <thinking_process> ... </thinking_process>
    <final_response> ... </final_response>
    <follow_up> 한 줄에 질문 하나 </follow_up>

스트리밍 중인 (닫히지 않은) 응답에도 안전하게 쓸 수 있어야 합니다.
"""
import re
from typing import List

ENVELOPE_TAGS = ("thinking_process", "final_response", "follow_up")

FINAL_RESPONSE_PATTERN = re.compile(r"<final_response>(.*?)</final_response>", re.DOTALL)
FOLLOW_UP_PATTERN = re.compile(r"<follow_up>(.*?)</follow_up>", re.DOTALL)
CLOSED_REGION_PATTERN = re.compile(
    r"<(thinking_process|follow_up)>.*?</\1>", re.DOTALL
)
UNCLOSED_REGION_PATTERN = re.compile(r"<(thinking_process|follow_up)>.*\Z", re.DOTALL)
STRAY_TAG_PATTERN = re.compile(r"</?(?:thinking_process|final_response|follow_up)>")


def _strip_partial_tag(text: str) -> str:
    """스트리밍 도중 잘린 마지막 태그 조각 제거 (예: '...</final_res')"""
    start = text.rfind("<")
    if start == -1 or ">" in text[start:]:
        return text
    fragment = text[start + 1:].lstrip("/")
    if any(tag.startswith(fragment) for tag in ENVELOPE_TAGS):
        return text[:start]
    return text


def extract_final_answer(text: str) -> str:
    """표시할 최종 답변

    <final_response> 구간이 있으면 그 내용을, 없으면 thinking/follow_up 구간과
    남은 태그를 제거한 전체 텍스트를 돌려줍니다.
    """
    match = FINAL_RESPONSE_PATTERN.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()

    cleaned = CLOSED_REGION_PATTERN.sub("", text)
    cleaned = UNCLOSED_REGION_PATTERN.sub("", cleaned)
    cleaned = STRAY_TAG_PATTERN.sub("", cleaned)
    return _strip_partial_tag(cleaned).strip()


def extract_follow_ups(text: str) -> List[str]:
    """<follow_up> 구간의 비어 있지 않은 줄 목록 (없으면 빈 목록)"""
    match = FOLLOW_UP_PATTERN.search(text)
    if not match:
        return []
    return [line.strip() for line in match.group(1).split("\n") if line.strip()]
