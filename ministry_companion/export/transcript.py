"""채팅 대화 기록 내보내기 (DOCX / 평문)"""
from io import BytesIO
from typing import Iterable, List, Sequence

from docx import Document
from docx.shared import Pt, RGBColor
from loguru import logger

from ministry_companion.chat import ChatMessage
from ministry_companion.exceptions import EmptyTranscriptError
from ministry_companion.rendering import (
    Block,
    BulletList,
    Heading,
    LineBreak,
    Paragraph,
    blocks_to_text,
    render_markup,
)

TRANSCRIPT_TITLE = "목회 AI 컨설턴트 대화 기록"
TRANSCRIPT_FILENAME = "목회_AI_컨설턴트_대화기록.docx"
TRANSCRIPT_TEXT_FILENAME = "목회_AI_컨설턴트_대화기록.txt"
EMPTY_TRANSCRIPT_MESSAGE = "저장할 대화 내용이 없습니다."
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ROLE_LABELS = {
    "user": ("사용자:", "007BFF"),
    "model": ("AI 컨설턴트:", "0D3B66"),
}


def _add_runs(paragraph, spans: Iterable) -> None:
    for span in spans:
        if isinstance(span, LineBreak):
            paragraph.add_run().add_break()
        else:
            paragraph.add_run(span.text).bold = span.bold


def _add_blocks(doc, blocks: List[Block]) -> None:
    for block in blocks:
        if isinstance(block, Heading):
            _add_runs(doc.add_heading("", level=block.level), block.spans)
        elif isinstance(block, Paragraph):
            _add_runs(doc.add_paragraph(), block.spans)
        elif isinstance(block, BulletList):
            for item in block.items:
                _add_runs(doc.add_paragraph(style="List Bullet"), item)


def _add_role_label(doc, role: str) -> None:
    label, color = ROLE_LABELS[role]
    paragraph = doc.add_paragraph()
    paragraph.paragraph_format.space_before = Pt(10)
    run = paragraph.add_run(label)
    run.bold = True
    run.font.color.rgb = RGBColor.from_string(color)


def build_transcript_docx(messages: Sequence[ChatMessage]) -> bytes:
    """대화 기록을 DOCX 바이트로 변환

    모델 메시지는 최종 답변만 남기고 제목/굵은 글씨/목록 서식을 유지합니다.

    Raises:
        EmptyTranscriptError: 메시지가 하나도 없을 때
    """
    if not messages:
        raise EmptyTranscriptError(EMPTY_TRANSCRIPT_MESSAGE)

    doc = Document()
    doc.add_heading(TRANSCRIPT_TITLE, level=0)
    doc.add_paragraph("")

    for message in messages:
        _add_role_label(doc, message.role)
        _add_blocks(doc, render_markup(message.display_text))

    buffer = BytesIO()
    doc.save(buffer)
    logger.info(f"Exported transcript with {len(messages)} messages")
    return buffer.getvalue()


def build_transcript_text(messages: Sequence[ChatMessage]) -> str:
    """대화 기록을 평문으로 변환 (마크업 기호 제거)

    Raises:
        EmptyTranscriptError: 메시지가 하나도 없을 때
    """
    if not messages:
        raise EmptyTranscriptError(EMPTY_TRANSCRIPT_MESSAGE)

    sections = [TRANSCRIPT_TITLE]
    for message in messages:
        label, _ = ROLE_LABELS[message.role]
        sections.append(f"{label}\n{blocks_to_text(render_markup(message.display_text))}")
    return "\n\n".join(sections)
