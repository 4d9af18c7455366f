from FocusFlow.models.history_item import HistoryItem
from FocusFlow.models.timer import Timer
from FocusFlow.repos.tracker_repo import TrackerRepo
import pytest
from FocusFlow.core.errors import PersistenceError

def test_empty_store_loads_empty(repo):
	assert repo.load_timers() == []
	assert repo.load_history() == []

def test_collections_round_trip_in_order(repo):
	timers = [
		Timer(id="b", title="B", created_at=5, is_running=True, accumulated_ms=10, last_start_time=7),
		Timer(id="a", title="A", created_at=1, accumulated_ms=99, is_minimized=True),
	]
	history = [HistoryItem("x", "X", 30, 6000), HistoryItem("x", "X again", 10, 7000)]
	repo.save_timers(timers)
	repo.save_history(history)
	assert repo.load_timers() == timers
	assert repo.load_history() == history

def test_save_replaces_previous_collection(repo):
	repo.save_history([HistoryItem("a", "A", 1, 6000)])
	repo.save_history([])
	assert repo.load_history() == []

def test_corrupt_file_loads_empty(tmp_path):
	path = tmp_path / "broken.db"
	path.write_bytes(b"this is not sqlite at all" * 100)
	repo = TrackerRepo(path)
	assert repo.load_timers() == []
	assert repo.load_history() == []

def test_save_failure_is_surfaced(tmp_path):
	path = tmp_path / "broken.db"
	path.write_bytes(b"this is not sqlite at all" * 100)
	with pytest.raises(PersistenceError):
		TrackerRepo(path).save_timers([])

def test_replace_all_writes_both_collections(repo):
	repo.save_timers([Timer(id="old", title="Old", created_at=0)])
	timers = [Timer(id="x", title="X", created_at=1), Timer(id="x", title="X copy", created_at=2)]
	history = [HistoryItem("h", "H", 10, 6000)]
	repo.replace_all(timers, history)
	assert repo.load_timers() == timers
	assert repo.load_history() == history

def test_replace_all_leaves_other_collection_alone(repo):
	repo.replace_all([Timer(id="a", title="A", created_at=0)], [HistoryItem("h", "H", 10, 6000)])
	repo.replace_all(timers=[])
	assert repo.load_timers() == []
	assert repo.load_history() == [HistoryItem("h", "H", 10, 6000)]

def test_failed_replace_all_keeps_both_tables(repo):
	repo.replace_all([Timer(id="a", title="A", created_at=0)], [HistoryItem("h", "H", 10, 6000)])
	bad_history = [HistoryItem("n", "N", None, 6000)]
	with pytest.raises(PersistenceError):
		repo.replace_all([], bad_history)
	assert [t.id for t in repo.load_timers()] == ["a"]
	assert repo.load_history() == [HistoryItem("h", "H", 10, 6000)]

def test_unreadable_rows_are_skipped(repo):
	repo.save_history([HistoryItem("ok", "OK", 10, 6000)])
	with repo._transaction() as conn:
		conn.execute("INSERT INTO history (position, id, title, completed_at, duration_ms) VALUES (1, 'bad', '', 'soon', 5)")
	assert [h.id for h in repo.load_history()] == ["ok"]
