"""Resume collection merge and de-duplication module."""

from .merge_engine import (
    MERGE_RULES,
    MergeEngine,
    MergeResult,
    MergeRule,
    get_merge_engine,
    join_unique_lines,
    merge_resume,
    merge_technologies,
    normalize,
)

__all__ = [
    "MERGE_RULES",
    "MergeEngine",
    "MergeResult",
    "MergeRule",
    "get_merge_engine",
    "join_unique_lines",
    "merge_resume",
    "merge_technologies",
    "normalize",
]
