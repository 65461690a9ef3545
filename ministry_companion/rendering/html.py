"""블록 → HTML (모든 텍스트는 escape)"""
from html import escape
from typing import Iterable, List

from .markup import (
    SUMMARY_LABEL,
    Block,
    BulletList,
    Heading,
    Inline,
    LineBreak,
    Paragraph,
    ScriptureQuote,
)


def inline_to_html(spans: Iterable[Inline]) -> str:
    parts = []
    for span in spans:
        if isinstance(span, LineBreak):
            parts.append("<br />")
        elif span.bold:
            parts.append(f"<strong>{escape(span.text)}</strong>")
        else:
            parts.append(escape(span.text))
    return "".join(parts)


def block_to_html(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{inline_to_html(block.spans)}</h{block.level}>"
    if isinstance(block, Paragraph):
        return f"<p>{inline_to_html(block.spans)}</p>"
    if isinstance(block, BulletList):
        items = "".join(f"<li>{inline_to_html(item)}</li>" for item in block.items)
        return f"<ul>{items}</ul>"
    if isinstance(block, ScriptureQuote):
        return (
            '<div class="scripture-result">'
            f'<blockquote><p>"{escape(block.verse)}"</p>'
            f"<footer>{escape(block.reference)}</footer></blockquote>"
            f"<p><strong>{SUMMARY_LABEL}:</strong> {escape(block.summary)}</p>"
            "</div>"
        )
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def to_html(blocks: List[Block]) -> str:
    """블록 목록을 HTML 조각으로 변환"""
    return "".join(block_to_html(block) for block in blocks)
