"""
Unit tests for ScoringTracker.
Run: python -m pytest tests/test_scoring.py -v
"""

from phraser.services import ItemRepository, JSONFileStore, ScoringTracker


class TestScoringTracker:

    def test_record_correct_increments_only_correct(self, repository, tracker):
        item = repository.create("你好", "hello")
        assert tracker.record_correct(item.id) is True

        scored = repository.get(item.id)
        assert (scored.correct_count, scored.incorrect_count) == (1, 0)

    def test_record_incorrect_increments_only_incorrect(self, repository, tracker):
        item = repository.create("你好", "hello")
        tracker.record_incorrect(item.id)
        tracker.record_incorrect(item.id)

        scored = repository.get(item.id)
        assert (scored.correct_count, scored.incorrect_count) == (0, 2)

    def test_record_dispatches_on_outcome(self, repository, tracker):
        item = repository.create("你好", "hello")
        tracker.record(item.id, True)
        tracker.record(item.id, False)
        tracker.record(item.id, False)

        scored = repository.get(item.id)
        assert (scored.correct_count, scored.incorrect_count) == (1, 2)

    def test_unknown_id_is_a_no_op(self, repository, tracker):
        item = repository.create("你好", "hello")
        assert tracker.record_correct("missing") is False
        assert tracker.record_incorrect("missing") is False
        assert repository.list() == [item]

    def test_scoring_leaves_text_untouched(self, repository, tracker):
        item = repository.create("你好", "hello")
        tracker.record_correct(item.id)

        scored = repository.get(item.id)
        assert (scored.source_text, scored.target_text, scored.phonetic_hint) == (
            item.source_text, item.target_text, item.phonetic_hint
        )

    def test_only_target_item_changes(self, repository, tracker):
        a = repository.create("一", "one")
        b = repository.create("二", "two")
        tracker.record_incorrect(b.id)

        assert repository.get(a.id) == a
        assert repository.get(b.id).incorrect_count == 1

    def test_counts_survive_reopening_the_store(self, tmp_path):
        store_dir = tmp_path / "store"
        repo = ItemRepository(JSONFileStore(str(store_dir)))
        item = repo.create("你好", "hello")
        ScoringTracker(repo).record_correct(item.id)

        reopened = ItemRepository(JSONFileStore(str(store_dir)))
        assert reopened.get(item.id).correct_count == 1
