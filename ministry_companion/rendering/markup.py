"""경량 마크업 → 표시용 블록 변환

지원 문법:
    # / ## / ###   제목 (레벨 1-3)
    **text**       굵은 글씨
    - item, * item 순서 없는 목록 (연속된 줄은 하나의 목록)
    줄바꿈          같은 블록 안의 줄바꿈

한 줄씩 한 번만 훑는 스캐너이며 결과는 입력에 대해 결정적입니다.
빈 줄은 문단을 끝냅니다.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

HEADING_PATTERN = re.compile(r"^(#{1,3}) (.*)$")
BULLET_PATTERN = re.compile(r"^\s*[-*] (.*)$")
BOLD_MARKER = "**"
SUMMARY_LABEL = "요약 및 적용"


# ============================================================
# Inline
# ============================================================
@dataclass(frozen=True)
class TextSpan:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class LineBreak:
    pass


Inline = Union[TextSpan, LineBreak]


# ============================================================
# Blocks
# ============================================================
@dataclass(frozen=True)
class Heading:
    level: int
    spans: List[TextSpan]


@dataclass(frozen=True)
class Paragraph:
    spans: List[Inline]


@dataclass(frozen=True)
class BulletList:
    items: List[List[TextSpan]] = field(default_factory=list)


@dataclass(frozen=True)
class ScriptureQuote:
    """성경 구절 검색 결과 1건 (구절 + 출처 + 요약)"""
    reference: str
    verse: str
    summary: str


Block = Union[Heading, Paragraph, BulletList, ScriptureQuote]


def parse_inline(text: str) -> List[TextSpan]:
    """한 줄의 ** 굵은 글씨 구간을 분리

    짝이 맞지 않는 마지막 ** 는 글자 그대로 남깁니다.

    >>> parse_inline("a **b** c")
    [TextSpan(text='a ', bold=False), TextSpan(text='b', bold=True), TextSpan(text=' c', bold=False)]
    >>> parse_inline("a **b")
    [TextSpan(text='a **b', bold=False)]
    """
    parts = text.split(BOLD_MARKER)
    if len(parts) % 2 == 0:
        # 마커 개수가 홀수: 마지막 마커는 짝이 없음
        parts[-2:] = [parts[-2] + BOLD_MARKER + parts[-1]]

    spans = []
    for index, part in enumerate(parts):
        if part:
            spans.append(TextSpan(text=part, bold=index % 2 == 1))
    return spans


def render_markup(text: str) -> List[Block]:
    """마크업 문자열을 블록 목록으로 변환

    Args:
        text: 프로바이더가 돌려준 원문

    Returns:
        Heading / Paragraph / BulletList 블록 목록 (빈 입력이면 빈 목록)
    """
    blocks: List[Block] = []
    paragraph: Optional[List[Inline]] = None
    bullets: Optional[List[List[TextSpan]]] = None

    def close_paragraph() -> None:
        nonlocal paragraph
        if paragraph:
            blocks.append(Paragraph(spans=paragraph))
        paragraph = None

    def close_list() -> None:
        nonlocal bullets
        if bullets:
            blocks.append(BulletList(items=bullets))
        bullets = None

    for line in text.replace("\r\n", "\n").split("\n"):
        heading = HEADING_PATTERN.match(line)
        if heading:
            close_paragraph()
            close_list()
            blocks.append(Heading(level=len(heading.group(1)), spans=parse_inline(heading.group(2))))
            continue

        bullet = BULLET_PATTERN.match(line)
        if bullet:
            close_paragraph()
            if bullets is None:
                bullets = []
            bullets.append(parse_inline(bullet.group(1)))
            continue

        close_list()
        if not line.strip():
            close_paragraph()
            continue

        if paragraph is None:
            paragraph = []
        else:
            paragraph.append(LineBreak())
        paragraph.extend(parse_inline(line))

    close_paragraph()
    close_list()
    return blocks


def blocks_to_text(blocks: List[Block]) -> str:
    """블록을 마커 없는 평문으로 되돌림 (내보내기/미리보기용)"""
    lines = []
    for block in blocks:
        if isinstance(block, Heading):
            lines.append("".join(span.text for span in block.spans))
        elif isinstance(block, Paragraph):
            lines.append("".join(
                "\n" if isinstance(span, LineBreak) else span.text
                for span in block.spans
            ))
        elif isinstance(block, BulletList):
            lines.extend("- " + "".join(span.text for span in item) for item in block.items)
        elif isinstance(block, ScriptureQuote):
            lines.append(f'"{block.verse}"\n{block.reference}\n{SUMMARY_LABEL}: {block.summary}')
    return "\n".join(lines)
