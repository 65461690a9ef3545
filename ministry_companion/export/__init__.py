from .transcript import (
    DOCX_MEDIA_TYPE,
    EMPTY_TRANSCRIPT_MESSAGE,
    TRANSCRIPT_FILENAME,
    TRANSCRIPT_TEXT_FILENAME,
    TRANSCRIPT_TITLE,
    build_transcript_docx,
    build_transcript_text,
)

__all__ = [
    "build_transcript_docx",
    "build_transcript_text",
    "TRANSCRIPT_TITLE",
    "TRANSCRIPT_FILENAME",
    "TRANSCRIPT_TEXT_FILENAME",
    "EMPTY_TRANSCRIPT_MESSAGE",
    "DOCX_MEDIA_TYPE",
]
