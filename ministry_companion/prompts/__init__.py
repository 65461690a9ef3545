from .builder import (
    PromptSpec,
    build_bulletin_prompt,
    build_event_prompt,
    build_message_prompt,
    build_prayer_prompt,
    build_prompt,
    build_scripture_search_prompt,
    build_sermon_prompt,
)
from .templates import EVENT_PLACEHOLDERS, EVENT_TEMPLATES, SCRIPTURE_BATCH_SIZE

__all__ = [
    "PromptSpec",
    "build_prompt",
    "build_sermon_prompt",
    "build_prayer_prompt",
    "build_scripture_search_prompt",
    "build_bulletin_prompt",
    "build_message_prompt",
    "build_event_prompt",
    "EVENT_TEMPLATES",
    "EVENT_PLACEHOLDERS",
    "SCRIPTURE_BATCH_SIZE",
]
