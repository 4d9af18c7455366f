from dataclasses import replace
from FocusFlow.core import settings
from FocusFlow.core.log import get_logger
from FocusFlow.models.history_item import HistoryItem
from FocusFlow.services.accounting import elapsed, find_timer

logger = get_logger(__name__)

_UNSET = object()

def archive(timer, now, min_duration_ms=settings.ARCHIVE_MIN_DURATION_MS):
	"""
	Turn a timer that is being removed into a HistoryItem.

	Returns None when the final duration is at or below the threshold. The end
	time is created_at + duration rather than `now`, so a backdated start or an
	edited duration still yields a consistent session.
	"""
	duration = elapsed(timer, now)
	if duration <= min_duration_ms:
		logger.debug("discarding %s: %d ms is below the archive threshold", timer.id, duration)
		return None
	return HistoryItem(
		id=timer.id,
		title=timer.title,
		completed_at=timer.created_at + duration,
		duration_ms=duration,
	)

def remove_timer(timers, timer_id, now):
	"""Archive then drop a timer. Delete and complete are the same transition.

	Returns (remaining_timers, history_item_or_None).
	"""
	target = find_timer(timers, timer_id)
	if target is None:
		return list(timers), None
	item = archive(target, now)
	if item is not None:
		logger.info("archived %r (%d ms)", item.title, item.duration_ms)
	return [t for t in timers if t.id != timer_id], item

def update_history_item(history, item_id, title=_UNSET, completed_at=_UNSET, duration_ms=_UNSET):
	"""Overwrite the given fields on every history item carrying `item_id`."""
	changes = {}
	if title is not _UNSET:
		changes["title"] = title
	if completed_at is not _UNSET:
		changes["completed_at"] = completed_at
	if duration_ms is not _UNSET:
		changes["duration_ms"] = duration_ms
	return [replace(h, **changes) if h.id == item_id else h for h in history]
