"""Scripture search pagination."""
from .merger import Merged, MergeOutcome, NoNewResults, merge_batch
from .results import dump_scripture_results, parse_scripture_results

__all__ = [
    "Merged",
    "MergeOutcome",
    "NoNewResults",
    "merge_batch",
    "parse_scripture_results",
    "dump_scripture_results",
]
