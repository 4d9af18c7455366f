"""History view navigation between presets and the year/month/week drilldown."""
from dataclasses import dataclass, replace
from typing import Optional
from FocusFlow.core import dates, settings
from FocusFlow.core.clock import SystemClock
from FocusFlow.core.log import get_logger
from FocusFlow.services.aggregation import ViewSpec, WEEK

logger = get_logger(__name__)

LEVEL_YEAR = "year"
LEVEL_MONTH = "month"
LEVEL_WEEK = "week"

_PARENT = {LEVEL_WEEK: LEVEL_MONTH, LEVEL_MONTH: LEVEL_YEAR}

@dataclass(frozen=True)
class PresetView:
	window_days: int = settings.DEFAULT_PRESET_DAYS
	selected: Optional[int] = None

	def __post_init__(self):
		if self.window_days not in settings.PRESET_WINDOWS:
			raise ValueError(f"unsupported preset window: {self.window_days}")
		if self.selected is not None and self.window_days == settings.WEEKLY_PRESET_DAYS:
			raise ValueError("the weekly preset drills down instead of selecting")

@dataclass(frozen=True)
class DrilldownView:
	level: str
	focus: int
	selected: Optional[int] = None
	came_from_preset: bool = False

	def __post_init__(self):
		if self.level not in (LEVEL_YEAR, LEVEL_MONTH, LEVEL_WEEK):
			raise ValueError(f"unknown drill level: {self.level}")
		if self.selected is not None and self.level != LEVEL_WEEK:
			raise ValueError("only the week level selects a day")
		if self.came_from_preset and self.level != LEVEL_WEEK:
			raise ValueError("a preset only drills into the week level")

def initial_state():
	return PresetView(settings.DEFAULT_PRESET_DAYS)

def select_preset(window_days):
	return PresetView(window_days)

def select_yearly(now):
	return DrilldownView(LEVEL_YEAR, focus=now)

def _toggle(current, bucket_start):
	return None if current == bucket_start else bucket_start

def click_bucket(state, point):
	"""Apply a click on an aggregated bar to the navigation state."""
	if isinstance(state, PresetView):
		if state.window_days == settings.WEEKLY_PRESET_DAYS:
			if point.granularity != WEEK:
				return state
			return DrilldownView(LEVEL_WEEK, focus=point.bucket_start, came_from_preset=True)
		return replace(state, selected=_toggle(state.selected, point.bucket_start))
	if state.level == LEVEL_YEAR:
		return DrilldownView(LEVEL_MONTH, focus=point.bucket_start)
	if state.level == LEVEL_MONTH:
		return DrilldownView(LEVEL_WEEK, focus=point.bucket_start)
	return replace(state, selected=_toggle(state.selected, point.bucket_start))

def can_go_back(state):
	return isinstance(state, DrilldownView) and (state.came_from_preset or state.level != LEVEL_YEAR)

def back(state):
	"""Step back out of the current view. Unavailable states are returned unchanged."""
	if not can_go_back(state):
		return state
	if state.came_from_preset:
		return PresetView(settings.WEEKLY_PRESET_DAYS)
	return DrilldownView(_PARENT[state.level], focus=state.focus)

def view_spec(state):
	if isinstance(state, PresetView):
		return ViewSpec.preset(state.window_days)
	if state.level == LEVEL_YEAR:
		return ViewSpec.year()
	if state.level == LEVEL_MONTH:
		return ViewSpec.month(state.focus)
	return ViewSpec.week(state.focus)

def header_label(state):
	if isinstance(state, PresetView):
		if state.window_days == settings.WEEKLY_PRESET_DAYS:
			return f"Last {state.window_days} Days (Weekly)"
		return f"Last {state.window_days} Days"
	if state.level == LEVEL_YEAR:
		return "Yearly Activity"
	if state.level == LEVEL_MONTH:
		return dates.format_month_year(state.focus)
	return f"Week: {dates.format_week_range(state.focus)}"

class HistoryNavigator:
	"""Holds the current navigation state for one history view."""

	def __init__(self, clock=None):
		self.clock = clock or SystemClock()
		self.state = initial_state()

	@property
	def selected(self):
		return self.state.selected

	def select_preset(self, window_days):
		self.state = select_preset(window_days)
		return self.state

	def select_yearly(self):
		self.state = select_yearly(self.clock.now())
		return self.state

	def click(self, point):
		self.state = click_bucket(self.state, point)
		logger.debug("navigator -> %s", self.state)
		return self.state

	def can_go_back(self):
		return can_go_back(self.state)

	def back(self):
		self.state = back(self.state)
		return self.state

	def view_spec(self):
		return view_spec(self.state)

	def header_label(self):
		return header_label(self.state)
