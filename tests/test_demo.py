import random
from datetime import datetime
from FocusFlow.core import dates
from FocusFlow.services import accounting, demo

NOW = dates.from_local(datetime(2026, 10, 19, 15, 0))

def test_demo_history_spans_a_year_of_workday_sessions():
	items = demo.generate_demo_history(NOW, random.Random(1))
	assert items
	assert all(15 * 60_000 <= h.duration_ms <= 180 * 60_000 for h in items)
	hours = {dates.to_local(h.completed_at).hour for h in items}
	assert hours <= set(range(9, 17))
	oldest = min(h.completed_at for h in items)
	assert oldest >= dates.shift_days(NOW, -365)
	assert len({h.id for h in items}) == len(items)

def test_demo_history_is_reproducible_with_a_seed():
	a = demo.generate_demo_history(NOW, random.Random(5), id_factory=lambda: "x")
	b = demo.generate_demo_history(NOW, random.Random(5), id_factory=lambda: "x")
	assert a == b

def test_demo_timers_have_one_running():
	timers = demo.generate_demo_timers(NOW, random.Random(2))
	assert len(timers) == 4
	running = accounting.running_timer(timers)
	assert running is timers[0]
	assert accounting.elapsed(running, NOW + 1000) == 45 * 60_000 + 1000
	assert all(t.last_start_time is None for t in timers[1:])
