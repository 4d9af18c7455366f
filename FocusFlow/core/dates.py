"""Local-calendar helpers for bucketing epoch-millisecond instants."""
from datetime import date, datetime, time, timedelta

def to_local(instant_ms: int) -> datetime:
	"""Return the naive local datetime for an epoch-millisecond instant."""
	return datetime.fromtimestamp(instant_ms / 1000)

def from_local(dt: datetime) -> int:
	"""Return epoch milliseconds for a naive local datetime."""
	return int(round(dt.timestamp() * 1000))

def date_start(d: date) -> int:
	"""Return the instant local midnight of `d` begins."""
	return from_local(datetime.combine(d, time.min))

def day_start(instant_ms: int) -> int:
	return date_start(to_local(instant_ms).date())

def shift_days(instant_ms: int, days: int) -> int:
	"""Return the start of the local day `days` away from the instant's day."""
	return date_start(to_local(instant_ms).date() + timedelta(days=days))

def week_start(instant_ms: int) -> int:
	"""Return the start of the ISO (Monday-first) week containing the instant."""
	d = to_local(instant_ms).date()
	return date_start(d - timedelta(days=d.weekday()))

def week_end(instant_ms: int) -> int:
	"""Return the exclusive end (next Monday's start) of the instant's week."""
	return shift_days(week_start(instant_ms), 7)

def month_start(instant_ms: int) -> int:
	d = to_local(instant_ms).date()
	return date_start(d.replace(day=1))

def shift_months(instant_ms: int, months: int) -> int:
	"""Return the start of the month `months` away from the instant's month."""
	d = to_local(instant_ms).date()
	index = d.year * 12 + (d.month - 1) + months
	return date_start(date(index // 12, index % 12 + 1, 1))

def is_same_day(a: int, b: int) -> bool:
	return to_local(a).date() == to_local(b).date()

def is_same_week(a: int, b: int) -> bool:
	return week_start(a) == week_start(b)

def is_same_month(a: int, b: int) -> bool:
	da, db = to_local(a), to_local(b)
	return (da.year, da.month) == (db.year, db.month)

def weeks_in_month(month_instant: int) -> list:
	"""
	Return the week starts belonging to the month containing `month_instant`.

	A week belongs to a month when its Monday or its Sunday falls inside it, so
	a week straddling a month boundary is listed under both months.
	"""
	first = to_local(month_start(month_instant)).date()
	weeks = []
	monday = first - timedelta(days=first.weekday())
	while True:
		sunday = monday + timedelta(days=6)
		monday_in = (monday.year, monday.month) == (first.year, first.month)
		sunday_in = (sunday.year, sunday.month) == (first.year, first.month)
		if not monday_in and not sunday_in and monday > first:
			break
		if monday_in or sunday_in:
			weeks.append(date_start(monday))
		monday += timedelta(days=7)
	return weeks

# Labels. strftime follows the process locale, so these are deterministic for
# a given locale and bucket.

def day_name(instant_ms: int) -> str:
	return to_local(instant_ms).strftime("%a")

def month_name(instant_ms: int) -> str:
	return to_local(instant_ms).strftime("%b")

def format_date(instant_ms: int) -> str:
	d = to_local(instant_ms)
	return f"{d:%b} {d.day}"

def format_date_full(instant_ms: int) -> str:
	d = to_local(instant_ms)
	return f"{d:%A}, {d:%B} {d.day}, {d.year}"

def format_month_year(instant_ms: int) -> str:
	return to_local(instant_ms).strftime("%B %Y")

def format_week_range(start_ms: int) -> str:
	"""Return e.g. 'Mar 2 - 8', or 'Mar 30 - Apr 5' across a month boundary."""
	start = to_local(week_start(start_ms))
	end = start + timedelta(days=6)
	if start.month == end.month:
		return f"{start:%b} {start.day} - {end.day}"
	return f"{start:%b} {start.day} - {end:%b} {end.day}"
