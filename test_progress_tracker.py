"""
Progress tracker tests - completion percentages and persistence

Running tests:
    pytest test_progress_tracker.py -v
"""
import json

import pytest

from byteforge.progress import (
    InMemoryProgressStore, JsonFileProgressStore, ProgressSnapshot, ProgressTracker, round_half_up
)
from byteforge.seeding.seed_data import static_catalog


CATALOG = {
    "java-basics": ["introduction", "variables-and-types", "control-flow", "methods", "arrays"],
    "java-oop": ["classes", "inheritance", "polymorphism"],
    "empty-topic": [],
}


@pytest.fixture
def tracker():
    return ProgressTracker(CATALOG)


class TestCompletionPercentage:
    def test_starts_at_zero(self, tracker):
        assert tracker.get_completion_percentage("java-basics") == 0
        assert tracker.is_topic_complete("java-basics") is False

    def test_one_of_five_is_twenty(self, tracker):
        tracker.mark_complete("java-basics", "introduction")
        assert tracker.get_completion_percentage("java-basics") == 20

    def test_all_complete_is_hundred(self, tracker):
        for subtopic_id in CATALOG["java-basics"]:
            tracker.mark_complete("java-basics", subtopic_id)

        assert tracker.get_completion_percentage("java-basics") == 100
        assert tracker.is_topic_complete("java-basics") is True

    def test_rounds_half_up(self, tracker):
        tracker.mark_complete("java-oop", "classes")
        assert tracker.get_completion_percentage("java-oop") == 33

        tracker.mark_complete("java-oop", "inheritance")
        assert tracker.get_completion_percentage("java-oop") == 67

        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3

    def test_topic_without_subtopics(self, tracker):
        assert tracker.get_completion_percentage("empty-topic") == 0
        assert tracker.is_topic_complete("empty-topic") is False

    def test_unknown_subtopic_does_not_count(self, tracker):
        tracker.mark_complete("java-basics", "not-in-catalog")
        assert tracker.get_completion_percentage("java-basics") == 0

    def test_duplicate_catalog_entries(self):
        tracker = ProgressTracker({"t": ["a", "a", "b"]})
        tracker.mark_complete("t", "a")
        assert tracker.get_completion_percentage("t") == 50


class TestMutations:
    def test_mark_complete_is_idempotent(self, tracker):
        tracker.mark_complete("java-basics", "introduction")
        tracker.mark_complete("java-basics", "introduction")

        assert tracker.completed_subtopics("java-basics") == ["introduction"]
        assert tracker.get_completion_percentage("java-basics") == 20

    def test_toggle(self, tracker):
        assert tracker.toggle("java-basics", "arrays") is True
        assert tracker.is_subtopic_complete("java-basics", "arrays")

        assert tracker.toggle("java-basics", "arrays") is False
        assert tracker.get_completion_percentage("java-basics") == 0

    def test_quiz_score(self, tracker):
        tracker.update_quiz_score("java-basics", 80)
        assert tracker.get_quiz_score("java-basics") == 80.0
        assert tracker.get_quiz_score("java-oop") is None

        with pytest.raises(ValueError):
            tracker.update_quiz_score("java-basics", 120)

    def test_reset(self, tracker):
        tracker.mark_complete("java-basics", "introduction")
        tracker.reset()

        assert tracker.completed_subtopics("java-basics") == []
        assert tracker.get_completion_percentage("java-basics") == 0

    def test_percentages(self, tracker):
        tracker.mark_complete("java-basics", "introduction")
        assert tracker.percentages() == {"empty-topic": 0, "java-basics": 20, "java-oop": 0}


class TestPersistence:
    def test_every_change_is_saved(self):
        store = InMemoryProgressStore()
        ProgressTracker(CATALOG, store).mark_complete("java-basics", "introduction")

        snapshot = store.load()
        assert snapshot.completed == {"java-basics": {"introduction"}}
        assert snapshot.percentages == {"java-basics": 20}
        assert snapshot.last_updated is not None

    def test_json_file_round_trip(self, tmp_path):
        path = tmp_path / "progress" / "topic_progress.json"
        tracker = ProgressTracker(CATALOG, JsonFileProgressStore(path))
        tracker.mark_complete("java-basics", "introduction")
        tracker.mark_complete("java-oop", "classes")
        tracker.update_quiz_score("java-oop", 75)

        reloaded = ProgressTracker(CATALOG, JsonFileProgressStore(path))

        assert reloaded.percentages() == tracker.percentages()
        assert reloaded.completed_subtopics("java-basics") == ["introduction"]
        assert reloaded.get_quiz_score("java-oop") == 75.0

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["completed"] == {"java-basics": ["introduction"], "java-oop": ["classes"]}

    def test_saved_percentage_without_catalog(self, tmp_path):
        path = tmp_path / "progress.json"
        ProgressTracker(CATALOG, JsonFileProgressStore(path)).mark_complete("java-basics", "introduction")

        reloaded = ProgressTracker({}, JsonFileProgressStore(path))
        assert reloaded.get_completion_percentage("java-basics") == 20

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileProgressStore(tmp_path / "nothing-here.json")
        assert store.load() == ProgressSnapshot()

    @pytest.mark.parametrize("payload", ["{not json", '{"completed": 5}', "[]"])
    def test_malformed_file_is_empty(self, tmp_path, payload):
        path = tmp_path / "progress.json"
        path.write_text(payload, encoding="utf-8")

        tracker = ProgressTracker(CATALOG, JsonFileProgressStore(path))

        assert tracker.percentages() == {"empty-topic": 0, "java-basics": 0, "java-oop": 0}

    def test_no_temp_files_left(self, tmp_path):
        path = tmp_path / "progress.json"
        tracker = ProgressTracker(CATALOG, JsonFileProgressStore(path))
        tracker.mark_complete("java-basics", "introduction")
        tracker.mark_complete("java-basics", "arrays")

        assert [p.name for p in tmp_path.iterdir()] == ["progress.json"]


class TestStaticCatalog:
    def test_seed_catalog_drives_tracker(self):
        tracker = ProgressTracker(static_catalog())
        tracker.mark_complete("java-basics", "introduction")

        assert len(static_catalog()["java-basics"]) == 5
        assert tracker.get_completion_percentage("java-basics") == 20
        assert tracker.get_completion_percentage("java-collections") == 0
