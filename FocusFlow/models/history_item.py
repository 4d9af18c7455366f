from dataclasses import dataclass

@dataclass(frozen=True)
class HistoryItem:
	"""A finished session. `id` is inherited from the timer it came from."""

	id: str
	title: str
	completed_at: int
	duration_ms: int
