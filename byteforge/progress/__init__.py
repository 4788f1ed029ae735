"""
Learner progress - client-side completion tracking
"""
from byteforge.progress.store import (
    InMemoryProgressStore, JsonFileProgressStore, ProgressSnapshot, ProgressStore
)
from byteforge.progress.tracker import ProgressTracker, round_half_up

__all__ = [
    "InMemoryProgressStore", "JsonFileProgressStore", "ProgressSnapshot", "ProgressStore",
    "ProgressTracker", "round_half_up",
]
