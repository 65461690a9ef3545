"""Generation layer: provider calls for feature content and chat."""
from .client import GENERATION_ERROR_PREFIX, GenerationClient

__all__ = ["GenerationClient", "GENERATION_ERROR_PREFIX"]
