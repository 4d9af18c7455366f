from FocusFlow.models.history_item import HistoryItem
from FocusFlow.models.timer import Timer
from FocusFlow.services import accounting, archival

def test_timer_run_for_65_seconds_is_archived():
	timers = accounting.add_timer([], "A", 0, "a")
	timers, item = archival.remove_timer(timers, "a", 65_000)
	assert timers == []
	assert item == HistoryItem(id="a", title="A", completed_at=65_000, duration_ms=65_000)

def test_threshold_is_exclusive():
	t = Timer(id="a", title="A", created_at=0, accumulated_ms=5000)
	assert archival.archive(t, 10**9) is None
	item = archival.archive(Timer(id="a", title="A", created_at=0, accumulated_ms=5001), 0)
	assert item.duration_ms == 5001

def test_completed_at_derives_from_backdated_start():
	t = Timer(id="a", title="A", created_at=1_000_000, is_running=True, accumulated_ms=60_000, last_start_time=9_000_000)
	item = archival.archive(t, 9_030_000)
	assert item.duration_ms == 90_000
	assert item.completed_at == 1_090_000

def test_remove_short_timer_drops_it_without_history():
	timers = accounting.add_timer([], "A", 0, "a")
	timers, item = archival.remove_timer(timers, "a", 4000)
	assert timers == [] and item is None

def test_remove_unknown_id_is_noop():
	timers = accounting.add_timer([], "A", 0, "a")
	assert archival.remove_timer(timers, "zzz", 99_000) == (timers, None)

def test_update_history_item_overwrites_matching_ids():
	history = [
		HistoryItem("a", "A", 10, 6000),
		HistoryItem("b", "B", 20, 7000),
		HistoryItem("a", "A again", 30, 8000),
	]
	updated = archival.update_history_item(history, "a", title="Fixed", duration_ms=1)
	assert [h.title for h in updated] == ["Fixed", "B", "Fixed"]
	assert [h.duration_ms for h in updated] == [1, 7000, 1]
	assert [h.completed_at for h in updated] == [10, 20, 30]
	assert archival.update_history_item(history, "nope", title="x") == history
