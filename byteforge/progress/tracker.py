"""
Progress Tracker - per-learner completion of subtopics

=== STATE ===
- completed: topic id -> set of completed subtopic ids
- percentages: topic id -> completion percent, recomputed on every change
- quiz_scores: topic id -> last quiz score (0-100)

=== COMPLETION PERCENT ===
    round(100 * |completed ∩ subtopics(topic)| / |subtopics(topic)|)
rounded half up; 0 for a topic with no subtopics.

`catalog` (topic id -> its subtopic ids) comes from the content API
(ContentClient.progress_catalog) or from the bundled seed data
(seeding.seed_data.static_catalog). Topics are assumed static while a
tracker is alive. Nothing here talks to the server; progress is not
shared between devices.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional

from byteforge.config import settings
from byteforge.progress.store import (
    InMemoryProgressStore, JsonFileProgressStore, ProgressSnapshot, ProgressStore
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ProgressTracker:
    """Tracks completed subtopics and saves after every change"""

    def __init__(
        self,
        catalog: Mapping[str, Iterable[str]],
        store: Optional[ProgressStore] = None,
        autoload: bool = True,
    ):
        # Duplicate subtopic ids in the catalog would skew the percentage
        self.catalog: Dict[str, List[str]] = {
            topic_id: list(dict.fromkeys(subtopic_ids)) for topic_id, subtopic_ids in catalog.items()
        }
        self.store = store if store is not None else InMemoryProgressStore()
        self._state = ProgressSnapshot()
        if autoload:
            self.load()

    @classmethod
    def from_settings(cls, catalog: Mapping[str, Iterable[str]]) -> "ProgressTracker":
        """Tracker backed by the JSON file configured in PROGRESS_FILE"""
        return cls(catalog, JsonFileProgressStore(settings.PROGRESS_FILE))

    # ============================================================
    # LIFECYCLE
    # ============================================================

    def load(self) -> None:
        """Replace in-memory state with what the store holds"""
        self._state = self.store.load()

    def save(self) -> None:
        self._state.last_updated = datetime.now(timezone.utc)
        self.store.save(self._state)

    def reset(self) -> None:
        """Forget all progress"""
        self._state = ProgressSnapshot()
        self.save()
        logger.info("Progress reset")

    # ============================================================
    # MUTATIONS
    # ============================================================

    def mark_complete(self, topic_id: str, subtopic_id: str) -> None:
        """Mark a subtopic complete; marking it twice changes nothing"""
        done = self._state.completed.setdefault(topic_id, set())
        if subtopic_id in done:
            return
        done.add(subtopic_id)
        self._refresh(topic_id)

    def mark_incomplete(self, topic_id: str, subtopic_id: str) -> None:
        done = self._state.completed.get(topic_id)
        if not done or subtopic_id not in done:
            return
        done.discard(subtopic_id)
        self._refresh(topic_id)

    def toggle(self, topic_id: str, subtopic_id: str) -> bool:
        """Flip a subtopic's state; returns True if it is now complete"""
        if self.is_subtopic_complete(topic_id, subtopic_id):
            self.mark_incomplete(topic_id, subtopic_id)
            return False
        self.mark_complete(topic_id, subtopic_id)
        return True

    def update_quiz_score(self, topic_id: str, percentage: float) -> None:
        if not 0 <= percentage <= 100:
            raise ValueError(f"Quiz score must be between 0 and 100, got {percentage}")
        self._state.quiz_scores[topic_id] = float(percentage)
        self.save()

    # ============================================================
    # QUERIES
    # ============================================================

    def is_subtopic_complete(self, topic_id: str, subtopic_id: str) -> bool:
        return subtopic_id in self._state.completed.get(topic_id, set())

    def is_topic_complete(self, topic_id: str) -> bool:
        subtopic_ids = self.catalog.get(topic_id)
        if not subtopic_ids:
            return False
        done = self._state.completed.get(topic_id, set())
        return all(s in done for s in subtopic_ids)

    def completed_subtopics(self, topic_id: str) -> List[str]:
        return sorted(self._state.completed.get(topic_id, set()))

    def get_completion_percentage(self, topic_id: str) -> int:
        """
        Completion percent of a topic

        Topics missing from the catalog fall back to the last saved value,
        so a tracker loaded without a catalog still reports them.
        """
        subtopic_ids = self.catalog.get(topic_id)
        if subtopic_ids is None:
            return self._state.percentages.get(topic_id, 0)
        if not subtopic_ids:
            return 0

        done = self._state.completed.get(topic_id, set())
        count = sum(1 for s in subtopic_ids if s in done)
        return round_half_up(100 * count / len(subtopic_ids))

    def get_quiz_score(self, topic_id: str) -> Optional[float]:
        return self._state.quiz_scores.get(topic_id)

    def percentages(self) -> Dict[str, int]:
        """Completion percent of every known topic"""
        topic_ids = set(self.catalog) | set(self._state.percentages) | set(self._state.completed)
        return {topic_id: self.get_completion_percentage(topic_id) for topic_id in sorted(topic_ids)}

    def _refresh(self, topic_id: str) -> None:
        self._state.percentages[topic_id] = self.get_completion_percentage(topic_id)
        self.save()
