import time

def now_ms() -> int:
	"""Return current wall-clock time as epoch milliseconds."""
	return int(time.time() * 1000)

class SystemClock:
	"""Clock backed by the system wall clock."""

	def now(self) -> int:
		return now_ms()

class ManualClock:
	"""Clock that only moves when told to. Used to drive the engine deterministically."""

	def __init__(self, start_ms=0):
		self._now = int(start_ms)

	def now(self) -> int:
		return self._now

	def set(self, instant_ms):
		self._now = int(instant_ms)

	def advance(self, delta_ms):
		self._now += int(delta_ms)
		return self._now

def format_time(ms: int) -> str:
	"""Format a duration as MM:SS, or HH:MM:SS once it reaches an hour."""
	total = max(0, int(ms)) // 1000
	h = total // 3600
	m = (total % 3600) // 60
	s = total % 60
	if h > 0:
		return f"{h:02}:{m:02}:{s:02}"
	return f"{m:02}:{s:02}"

def format_duration_short(ms: int) -> str:
	"""Format a duration as '1h 5m', '12m' or '< 1m'."""
	total_minutes = max(0, int(ms)) // 60000
	h = total_minutes // 60
	m = total_minutes % 60
	if h > 0:
		return f"{h}h {m}m"
	if m > 0:
		return f"{m}m"
	return "< 1m"

def duration_from_parts(hours=0, minutes=0, seconds=0) -> int:
	"""Convert edit-form fields to milliseconds, clamping negatives to zero."""
	total = max(0, int(hours or 0)) * 3600 + max(0, int(minutes or 0)) * 60 + max(0, int(seconds or 0))
	return total * 1000
