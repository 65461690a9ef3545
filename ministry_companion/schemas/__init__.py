from .models import (
    BULLETIN_CONTENT_TYPES,
    EVENT_TYPES,
    FEATURE_REQUEST_ADAPTER,
    FEATURE_TITLES,
    MESSAGE_TYPES,
    SCRIPTURE_RESULTS_ADAPTER,
    SCRIPTURE_SEARCH_SCHEMA,
    SERMON_STYLE_LABELS,
    BulletinRequest,
    EventRequest,
    Feature,
    FeatureRequest,
    MessageRequest,
    PrayerRequest,
    ScriptureResultItem,
    ScriptureSearchRequest,
    SermonRequest,
    SermonStyle,
)

__all__ = [
    "Feature",
    "FEATURE_TITLES",
    "SermonStyle",
    "SERMON_STYLE_LABELS",
    "BULLETIN_CONTENT_TYPES",
    "MESSAGE_TYPES",
    "EVENT_TYPES",
    "FeatureRequest",
    "FEATURE_REQUEST_ADAPTER",
    "SermonRequest",
    "PrayerRequest",
    "ScriptureSearchRequest",
    "BulletinRequest",
    "MessageRequest",
    "EventRequest",
    "ScriptureResultItem",
    "SCRIPTURE_RESULTS_ADAPTER",
    "SCRIPTURE_SEARCH_SCHEMA",
]
