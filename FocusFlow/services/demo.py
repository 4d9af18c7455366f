import random
from datetime import timedelta
from FocusFlow.core import dates, settings
from FocusFlow.core.ids import generate_id
from FocusFlow.models.history_item import HistoryItem
from FocusFlow.models.timer import Timer

def generate_demo_history(now, rng=None, days=settings.DEMO_HISTORY_DAYS, id_factory=generate_id):
	"""
	Generate a year of plausible sessions ending today.

	Each day gets 1-5 sessions of 15 min to 3 h between 9:00 and 17:59;
	weekend days are skipped 70% of the time.
	"""
	rng = rng or random.Random()
	items = []
	today = dates.to_local(now).replace(second=0, microsecond=0)
	for i in range(days):
		day = today - timedelta(days=i)
		if day.weekday() >= 5 and rng.random() > 0.3:
			continue
		for _ in range(rng.randint(1, 5)):
			minutes = rng.randint(15, 180)
			at = day.replace(hour=9 + rng.randrange(8), minute=rng.randrange(60))
			items.append(HistoryItem(
				id=id_factory(),
				title=rng.choice(settings.DEMO_TASK_TITLES),
				completed_at=dates.from_local(at),
				duration_ms=minutes * 60 * 1000,
			))
	return items

def generate_demo_timers(now, rng=None, id_factory=generate_id):
	"""One running timer followed by paused ones, one per demo title."""
	rng = rng or random.Random()
	titles = settings.DEMO_TIMER_TITLES
	timers = [Timer(
		id=id_factory(),
		title=titles[0],
		created_at=now - 3600000,
		is_running=True,
		accumulated_ms=45 * 60 * 1000,
		last_start_time=now,
	)]
	for title in titles[1:]:
		timers.append(Timer(
			id=id_factory(),
			title=title,
			created_at=now - rng.randrange(86400000),
			accumulated_ms=rng.randrange(120) * 60 * 1000,
		))
	return timers
