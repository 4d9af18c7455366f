"""Wire records for the JSON snapshot and the stored rows."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator
from FocusFlow.models.history_item import HistoryItem
from FocusFlow.models.timer import Timer

class TimerRecord(BaseModel):
	"""Serialized timer, camelCase on the wire."""
	model_config = ConfigDict(populate_by_name=True)

	id: str
	title: Optional[str] = ""
	created_at: StrictInt = Field(alias="createdAt")
	is_running: bool = Field(False, alias="isRunning")
	accumulated_ms: Optional[StrictInt] = Field(0, alias="accumulatedMs")
	last_start_time: Optional[StrictInt] = Field(None, alias="lastStartTime")
	is_minimized: bool = Field(False, alias="isMinimized")

	def to_timer(self) -> Timer:
		# running without a start instant loads as paused
		running = self.is_running and self.last_start_time is not None
		return Timer(
			id=self.id,
			title=self.title or "",
			created_at=self.created_at,
			is_running=running,
			accumulated_ms=self.accumulated_ms or 0,
			last_start_time=self.last_start_time if running else None,
			is_minimized=self.is_minimized,
		)

	@classmethod
	def from_timer(cls, timer: Timer) -> "TimerRecord":
		return cls(
			id=timer.id,
			title=timer.title,
			created_at=timer.created_at,
			is_running=timer.is_running,
			accumulated_ms=timer.accumulated_ms,
			last_start_time=timer.last_start_time,
			is_minimized=timer.is_minimized,
		)

class HistoryRecord(BaseModel):
	"""Serialized history item."""
	model_config = ConfigDict(populate_by_name=True)

	id: str
	title: Optional[str] = ""
	completed_at: StrictInt = Field(alias="completedAt")
	duration_ms: StrictInt = Field(alias="durationMs")

	def to_item(self) -> HistoryItem:
		return HistoryItem(
			id=self.id,
			title=self.title or "",
			completed_at=self.completed_at,
			duration_ms=self.duration_ms,
		)

	@classmethod
	def from_item(cls, item: HistoryItem) -> "HistoryRecord":
		return cls(id=item.id, title=item.title, completed_at=item.completed_at, duration_ms=item.duration_ms)

class SnapshotPayload(BaseModel):
	"""The {timers, history, exportedAt} object exchanged between devices."""
	model_config = ConfigDict(populate_by_name=True)

	timers: List[TimerRecord]
	history: List[HistoryRecord]
	exported_at: Optional[StrictInt] = Field(None, alias="exportedAt")

	@model_validator(mode="after")
	def _unique_timer_ids(self):
		ids = [t.id for t in self.timers]
		if len(ids) != len(set(ids)):
			raise ValueError("timer ids must be unique")
		return self
