"""
Progress stores - where a learner's completion state lives between sessions

The state is small and client-owned, so it is saved whole on every change:
- JsonFileProgressStore: one JSON file on disk (the browser local-storage
  equivalent for Python clients)
- InMemoryProgressStore: same contract, nothing persisted

A missing or unreadable payload loads as empty progress; it is never an
error for the caller.
"""
import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Protocol, Set, Union

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class ProgressSnapshot(BaseModel):
    """Everything a tracker persists"""
    completed: Dict[str, Set[str]] = Field(default_factory=dict)  # topic id -> completed subtopic ids
    percentages: Dict[str, int] = Field(default_factory=dict)     # topic id -> 0..100
    quiz_scores: Dict[str, float] = Field(default_factory=dict)   # topic id -> 0..100
    last_updated: Optional[datetime] = None


class ProgressStore(Protocol):
    def load(self) -> ProgressSnapshot:
        ...

    def save(self, snapshot: ProgressSnapshot) -> None:
        ...


class InMemoryProgressStore:
    """Keeps the last saved snapshot in memory"""

    def __init__(self, snapshot: Optional[ProgressSnapshot] = None):
        self._payload = snapshot.model_dump_json() if snapshot else None

    def load(self) -> ProgressSnapshot:
        if self._payload is None:
            return ProgressSnapshot()
        return ProgressSnapshot.model_validate_json(self._payload)

    def save(self, snapshot: ProgressSnapshot) -> None:
        self._payload = snapshot.model_dump_json()


class JsonFileProgressStore:
    """Progress saved as a single JSON file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> ProgressSnapshot:
        """Read the file; missing or malformed content gives empty progress"""
        if not self.path.exists():
            return ProgressSnapshot()

        try:
            raw = self.path.read_text(encoding="utf-8")
            return ProgressSnapshot.model_validate(json.loads(raw))
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable progress file {self.path}: {e}")
            return ProgressSnapshot()

    def save(self, snapshot: ProgressSnapshot) -> None:
        """Write the whole snapshot, replacing the file atomically"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = snapshot.model_dump_json(indent=2)

        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.debug(f"Progress saved to {self.path}")
