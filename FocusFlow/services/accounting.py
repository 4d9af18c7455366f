"""Time accounting over timer collections; at most one timer runs at a time."""
from dataclasses import replace
from FocusFlow.models.timer import Timer
from FocusFlow.core.log import get_logger

logger = get_logger(__name__)

_UNSET = object()

def elapsed(timer: Timer, now: int) -> int:
	"""Total elapsed time: banked time plus the current running interval."""
	if not timer.is_running or timer.last_start_time is None:
		return timer.accumulated_ms
	return timer.accumulated_ms + (now - timer.last_start_time)

def _bank(timer: Timer, now: int) -> Timer:
	"""Pause a timer, folding its running interval into accumulated_ms."""
	return replace(timer, is_running=False, accumulated_ms=elapsed(timer, now), last_start_time=None)

def find_timer(timers, timer_id):
	for t in timers:
		if t.id == timer_id:
			return t
	return None

def running_timer(timers):
	"""Return the running timer, or None."""
	for t in timers:
		if t.is_running:
			return t
	return None

def start_timer(timers, timer_id, now):
	"""Start `timer_id` and pause every other running timer."""
	target = find_timer(timers, timer_id)
	if target is None or target.is_running:
		return list(timers)
	result = []
	for t in timers:
		if t.id == timer_id:
			result.append(replace(t, is_running=True, last_start_time=now))
		elif t.is_running:
			result.append(_bank(t, now))
		else:
			result.append(t)
	logger.debug("started timer %s", timer_id)
	return result

def stop_timer(timers, timer_id, now):
	"""Pause `timer_id`, banking its running interval."""
	target = find_timer(timers, timer_id)
	if target is None or not target.is_running:
		return list(timers)
	logger.debug("stopped timer %s", timer_id)
	return [_bank(t, now) if t.id == timer_id else t for t in timers]

def toggle_timer(timers, timer_id, now):
	target = find_timer(timers, timer_id)
	if target is None:
		return list(timers)
	if target.is_running:
		return stop_timer(timers, timer_id, now)
	return start_timer(timers, timer_id, now)

def edit_timer(timers, timer_id, now, title=_UNSET, created_at=_UNSET, accumulated_ms=_UNSET):
	"""
	Overwrite the given fields of a timer.

	A running timer restarts its interval at `now`, so the new accumulated_ms
	is the base for further counting and the time spent editing is not
	counted twice.
	"""
	changes = {}
	if title is not _UNSET:
		changes["title"] = title
	if created_at is not _UNSET:
		changes["created_at"] = created_at
	if accumulated_ms is not _UNSET:
		changes["accumulated_ms"] = accumulated_ms
	result = []
	for t in timers:
		if t.id == timer_id:
			updated = replace(t, **changes)
			if updated.is_running:
				updated = replace(updated, last_start_time=now)
			result.append(updated)
		else:
			result.append(t)
	return result

def add_timer(timers, title, now, timer_id):
	"""Create a running timer at the front of the collection, pausing all others."""
	new_timer = Timer(
		id=timer_id,
		title=title,
		created_at=now,
		is_running=True,
		accumulated_ms=0,
		last_start_time=now,
	)
	paused = [_bank(t, now) if t.is_running else t for t in timers]
	logger.debug("added timer %s (%r)", timer_id, title)
	return [new_timer] + paused

def set_minimized(timers, timer_id, minimized):
	return [replace(t, is_minimized=bool(minimized)) if t.id == timer_id else t for t in timers]

def enforce_single_active(timers, now):
	"""
	Repair a collection loaded from a stale or foreign snapshot.

	Only the most recently started running timer keeps running; the others
	are banked up to `now`.
	"""
	running = [t for t in timers if t.is_running]
	if len(running) <= 1:
		return list(timers)
	keeper = max(running, key=lambda t: t.last_start_time)
	logger.warning("%d timers were running; keeping %s", len(running), keeper.id)
	return [t if (t is keeper or not t.is_running) else _bank(t, now) for t in timers]
