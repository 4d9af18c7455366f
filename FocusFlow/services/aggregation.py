"""History aggregation into contiguous local-time buckets."""
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional
from FocusFlow.core import dates, settings

DAY = "day"
WEEK = "week"
MONTH = "month"

PRESET = "preset"
YEAR = "year"

@dataclass(frozen=True)
class ViewSpec:
	"""Which aggregation to compute: a rolling preset or one drilldown level."""

	kind: str
	window_days: Optional[int] = None
	focus: Optional[int] = None

	@classmethod
	def preset(cls, window_days):
		if window_days not in settings.PRESET_WINDOWS:
			raise ValueError(f"unsupported preset window: {window_days}")
		return cls(PRESET, window_days=window_days)

	@classmethod
	def year(cls):
		return cls(YEAR)

	@classmethod
	def month(cls, focus):
		return cls(MONTH, focus=focus)

	@classmethod
	def week(cls, focus):
		return cls(WEEK, focus=focus)

@dataclass(frozen=True)
class AggregatedPoint:
	bucket_start: int
	bucket_end: int
	total_ms: int
	label: str
	full_label: str
	granularity: str

	def contains(self, instant):
		return self.bucket_start <= instant < self.bucket_end

@dataclass(frozen=True)
class Aggregation:
	points: list
	max_ms: int

def _label(start, granularity):
	if granularity == DAY:
		return dates.day_name(start), dates.format_date_full(start)
	if granularity == WEEK:
		return f"Wk {dates.to_local(start).day}", f"Week: {dates.format_week_range(start)}"
	return dates.month_name(start), dates.format_month_year(start)

def buckets(view, now):
	"""Return [(start, end, granularity), ...] for a view, oldest first."""
	if view.kind == PRESET:
		if view.window_days == settings.WEEKLY_PRESET_DAYS:
			current = dates.week_start(now)
			starts = [dates.shift_days(current, -7 * i) for i in range(settings.WEEKLY_PRESET_WEEKS - 1, -1, -1)]
			return [(s, dates.shift_days(s, 7), WEEK) for s in starts]
		return [
			(dates.shift_days(now, -i), dates.shift_days(now, -i + 1), DAY)
			for i in range(view.window_days - 1, -1, -1)
		]
	if view.kind == YEAR:
		return [
			(dates.shift_months(now, -i), dates.shift_months(now, -i + 1), MONTH)
			for i in range(settings.YEAR_VIEW_MONTHS - 1, -1, -1)
		]
	if view.kind == MONTH:
		return [(ws, dates.shift_days(ws, 7), WEEK) for ws in dates.weeks_in_month(view.focus)]
	if view.kind == WEEK:
		monday = dates.week_start(view.focus)
		return [(dates.shift_days(monday, i), dates.shift_days(monday, i + 1), DAY) for i in range(7)]
	raise ValueError(f"unknown view kind: {view.kind}")

def aggregate(history, view, now):
	"""Bucket history for a view. max_ms is floored at 1 for consumers that scale by it."""
	spans = buckets(view, now)
	totals = [0] * len(spans)
	starts = [s for s, _, _ in spans]
	for item in history:
		idx = bisect_right(starts, item.completed_at) - 1
		if idx >= 0 and item.completed_at < spans[idx][1]:
			totals[idx] += item.duration_ms
	points = []
	for (start, end, granularity), total in zip(spans, totals):
		label, full_label = _label(start, granularity)
		points.append(AggregatedPoint(start, end, total, label, full_label, granularity))
	max_ms = max([p.total_ms for p in points] + [1])
	return Aggregation(points, max_ms)

def scope_range(view, now):
	"""Return the [start, end) range of items listed under a view."""
	if view.kind == MONTH:
		return dates.month_start(view.focus), dates.shift_months(view.focus, 1)
	spans = buckets(view, now)
	return spans[0][0], spans[-1][1]

def items_in_scope(history, view, now, selected=None):
	"""
	List the raw items behind a view, newest first.

	`selected` narrows the list to the displayed bucket starting at that
	instant, or to its local day when no bucket starts there.
	"""
	start, end = scope_range(view, now)
	items = [h for h in history if start <= h.completed_at < end]
	if selected is not None:
		span = next(((s, e) for s, e, _ in buckets(view, now) if s == selected), None)
		if span is not None:
			items = [h for h in items if span[0] <= h.completed_at < span[1]]
		else:
			items = [h for h in items if dates.is_same_day(h.completed_at, selected)]
	return sorted(items, key=lambda h: h.completed_at, reverse=True)

def summarize(items):
	"""Return (total_ms, count) for a list of history items."""
	return sum(h.duration_ms for h in items), len(items)
