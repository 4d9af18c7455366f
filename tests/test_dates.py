from datetime import datetime
from FocusFlow.core import dates

def at(*args):
	return dates.from_local(datetime(*args))

def test_week_starts_on_monday():
	# 2026-03-01 is a Sunday
	assert dates.week_start(at(2026, 3, 1, 18, 30)) == at(2026, 2, 23)
	assert dates.week_start(at(2026, 3, 2, 0, 0)) == at(2026, 3, 2)
	assert dates.week_end(at(2026, 3, 4, 9)) == at(2026, 3, 9)

def test_same_bucket_predicates():
	assert dates.is_same_day(at(2026, 5, 4, 0, 1), at(2026, 5, 4, 23, 59))
	assert not dates.is_same_day(at(2026, 5, 4, 23, 59), at(2026, 5, 5, 0, 0))
	assert dates.is_same_week(at(2026, 5, 4), at(2026, 5, 10, 23))
	assert not dates.is_same_week(at(2026, 5, 10, 23), at(2026, 5, 11))
	assert dates.is_same_month(at(2026, 5, 1), at(2026, 5, 31, 22))

def test_shift_months_crosses_year_boundaries():
	assert dates.shift_months(at(2026, 1, 15), -1) == at(2025, 12, 1)
	assert dates.shift_months(at(2025, 12, 15), 1) == at(2026, 1, 1)
	assert dates.shift_months(at(2026, 10, 19), -11) == at(2025, 11, 1)

def test_weeks_in_month_includes_straddling_weeks():
	assert dates.weeks_in_month(at(2026, 3, 15)) == [
		at(2026, 2, 23), at(2026, 3, 2), at(2026, 3, 9),
		at(2026, 3, 16), at(2026, 3, 23), at(2026, 3, 30),
	]
	# June 2026 starts on a Monday and ends on a Tuesday
	assert dates.weeks_in_month(at(2026, 6, 1)) == [
		at(2026, 6, 1), at(2026, 6, 8), at(2026, 6, 15), at(2026, 6, 22), at(2026, 6, 29),
	]

def test_week_shared_by_two_months():
	# Monday Feb 23 is in February, its Sunday Mar 1 in March
	assert at(2026, 2, 23) in dates.weeks_in_month(at(2026, 2, 1))
	assert at(2026, 2, 23) in dates.weeks_in_month(at(2026, 3, 1))

def test_week_range_label():
	assert dates.format_week_range(at(2026, 3, 2)).endswith(" 2 - 8")
	label = dates.format_week_range(at(2026, 3, 30))
	assert label.startswith(dates.month_name(at(2026, 3, 30)))
	assert label.endswith(f"{dates.month_name(at(2026, 4, 5))} 5")
