from .feature_view import (
    DEFAULT_PLACEHOLDER,
    NO_MORE_RESULTS_NOTICE,
    PLACEHOLDERS,
    FeatureView,
)
from .store import InMemoryViewStore

__all__ = [
    "FeatureView",
    "InMemoryViewStore",
    "NO_MORE_RESULTS_NOTICE",
    "PLACEHOLDERS",
    "DEFAULT_PLACEHOLDER",
]
