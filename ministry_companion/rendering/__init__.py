"""Markup rendering for feature results and chat messages."""
from .html import to_html
from .markup import (
    SUMMARY_LABEL,
    Block,
    BulletList,
    Heading,
    LineBreak,
    Paragraph,
    ScriptureQuote,
    TextSpan,
    blocks_to_text,
    parse_inline,
    render_markup,
)
from .results import NO_RESULTS_NOTICE, download_filename, format_for_copy, render_result

__all__ = [
    "Block",
    "Heading",
    "Paragraph",
    "BulletList",
    "ScriptureQuote",
    "TextSpan",
    "LineBreak",
    "SUMMARY_LABEL",
    "NO_RESULTS_NOTICE",
    "parse_inline",
    "render_markup",
    "blocks_to_text",
    "to_html",
    "render_result",
    "format_for_copy",
    "download_filename",
]
