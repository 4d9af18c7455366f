from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Timer:
	"""A task currently being tracked.

	`last_start_time` is set exactly when `is_running` is true; it marks the
	start of the running interval not yet banked into `accumulated_ms`.
	"""

	id: str
	title: str
	created_at: int
	is_running: bool = False
	accumulated_ms: int = 0
	last_start_time: Optional[int] = None
	is_minimized: bool = False
