from enum import Enum
from PySide6.QtCore import QObject, Signal, QTimer
from FocusFlow.core import settings
from FocusFlow.core.clock import SystemClock
from FocusFlow.core.errors import MalformedSnapshotError, PersistenceError
from FocusFlow.core.ids import generate_id
from FocusFlow.core.log import get_logger
from FocusFlow.repos.tracker_repo import TrackerRepo
from FocusFlow.services import accounting, archival, demo, sync

logger = get_logger(__name__)

class Dataset(str, Enum):
	REAL = "real"
	DEMO = "demo"

class TrackerService(QObject):
	"""Owns the timer and history collections of both datasets.

	Every mutation goes through the accounting/archival functions, is saved
	when it touches the real dataset, and is announced through a signal. The
	refresh QTimer only runs while a timer is running and the view is visible;
	it reads elapsed time and never banks it.
	"""

	timers_changed = Signal(object)  # emits list[Timer] of the active dataset
	history_changed = Signal(object)  # emits list[HistoryItem] of the active dataset
	tick = Signal(str, object)  # emits (timer id, elapsed ms)
	dataset_changed = Signal(str)
	persistence_failed = Signal(str)

	def __init__(self, repo=None, clock=None, id_factory=None, rng=None, parent=None):
		super().__init__(parent)
		self.repo = repo if repo is not None else TrackerRepo()
		self.clock = clock or SystemClock()
		self.id_factory = id_factory or generate_id
		self.rng = rng
		now = self.clock.now()
		self._timers = {
			Dataset.REAL: accounting.enforce_single_active(self.repo.load_timers(), now),
			Dataset.DEMO: [],
		}
		self._history = {Dataset.REAL: self.repo.load_history(), Dataset.DEMO: []}
		self.dataset = Dataset.REAL
		self._view_visible = True
		self._timer = QTimer(self)
		self._timer.setInterval(settings.TICK_INTERVAL_MS)
		self._timer.timeout.connect(self._on_tick)
		self._sync_ticker()

	# ---- collections ----

	@property
	def timers(self):
		return list(self._timers[self.dataset])

	@property
	def history(self):
		return list(self._history[self.dataset])

	def active_timers(self):
		return [t for t in self._timers[self.dataset] if not t.is_minimized]

	def minimized_timers(self):
		return [t for t in self._timers[self.dataset] if t.is_minimized]

	def elapsed(self, timer_id):
		"""Live elapsed ms for a timer of the active dataset, or None if unknown."""
		t = accounting.find_timer(self._timers[self.dataset], timer_id)
		return accounting.elapsed(t, self.clock.now()) if t is not None else None

	def _commit(self, timers=None, history=None):
		"""Install new collections, save them together, then announce them."""
		if timers is not None:
			self._timers[self.dataset] = timers
		if history is not None:
			self._history[self.dataset] = history
		if self.dataset is Dataset.REAL:
			try:
				self.repo.replace_all(timers=timers, history=history)
			except PersistenceError as e:
				logger.error("persistence failed: %s", e)
				self.persistence_failed.emit(str(e))
		if history is not None:
			self.history_changed.emit(list(history))
		if timers is not None:
			self.timers_changed.emit(list(timers))
			self._sync_ticker()

	def _set_timers(self, timers):
		self._commit(timers=timers)

	# ---- timer actions ----

	def add_timer(self, title):
		"""Create a running timer, pausing all others. Returns the new id."""
		timer_id = self.id_factory()
		self._set_timers(accounting.add_timer(self._timers[self.dataset], title, self.clock.now(), timer_id))
		return timer_id

	def start_timer(self, timer_id):
		self._set_timers(accounting.start_timer(self._timers[self.dataset], timer_id, self.clock.now()))

	def stop_timer(self, timer_id):
		self._set_timers(accounting.stop_timer(self._timers[self.dataset], timer_id, self.clock.now()))

	def toggle_timer(self, timer_id):
		self._set_timers(accounting.toggle_timer(self._timers[self.dataset], timer_id, self.clock.now()))

	def edit_timer(self, timer_id, **changes):
		"""Overwrite title, created_at and/or accumulated_ms."""
		self._set_timers(accounting.edit_timer(self._timers[self.dataset], timer_id, self.clock.now(), **changes))

	def minimize_timer(self, timer_id):
		self._set_timers(accounting.set_minimized(self._timers[self.dataset], timer_id, True))

	def restore_timer(self, timer_id):
		self._set_timers(accounting.set_minimized(self._timers[self.dataset], timer_id, False))

	def delete_timer(self, timer_id):
		"""Archive (when long enough) and remove a timer. Returns the HistoryItem or None."""
		if accounting.find_timer(self._timers[self.dataset], timer_id) is None:
			return None
		timers, item = archival.remove_timer(self._timers[self.dataset], timer_id, self.clock.now())
		history = [item] + self._history[self.dataset] if item is not None else None
		self._commit(timers=timers, history=history)
		return item

	complete_timer = delete_timer

	def update_history_item(self, item_id, **changes):
		"""Overwrite title, completed_at and/or duration_ms of a history item."""
		self._commit(history=archival.update_history_item(self._history[self.dataset], item_id, **changes))

	# ---- datasets ----

	def set_dataset(self, dataset):
		"""Switch between real and demo data. Demo timers are regenerated on every entry."""
		dataset = Dataset(dataset)
		if dataset is Dataset.DEMO:
			now = self.clock.now()
			self._timers[Dataset.DEMO] = demo.generate_demo_timers(now, self.rng, id_factory=self.id_factory)
			if not self._history[Dataset.DEMO]:
				self._history[Dataset.DEMO] = demo.generate_demo_history(now, self.rng, id_factory=self.id_factory)
		self.dataset = dataset
		logger.info("active dataset: %s", dataset.value)
		self.dataset_changed.emit(dataset.value)
		self.timers_changed.emit(self.timers)
		self.history_changed.emit(self.history)
		self._sync_ticker()

	# ---- sync ----

	def export_snapshot(self):
		return sync.build_snapshot(self._timers[self.dataset], self._history[self.dataset], self.clock.now())

	def share_url(self, base_url):
		"""Raises SnapshotTooLargeError when the data does not fit in a URL."""
		return sync.build_share_url(base_url, self.export_snapshot())

	def import_snapshot(self, snapshot, confirm):
		"""
		Replace both real collections with a validated snapshot.

		`confirm(snapshot)` must return True for anything to change; the import
		is destructive, not a merge. Returns whether it was applied.
		Raises MalformedSnapshotError when two timers share an id.
		"""
		ids = [t.id for t in snapshot.timers]
		if len(ids) != len(set(ids)):
			raise MalformedSnapshotError("snapshot timer ids must be unique")
		if not confirm(snapshot):
			logger.info("snapshot import declined")
			return False
		self.dataset = Dataset.REAL
		self._commit(
			timers=accounting.enforce_single_active(snapshot.timers, self.clock.now()),
			history=list(snapshot.history),
		)
		logger.info("imported %d timers and %d history items", len(snapshot.timers), len(snapshot.history))
		self.dataset_changed.emit(self.dataset.value)
		return True

	# ---- live refresh ----

	@property
	def is_ticking(self):
		return self._timer.isActive()

	def set_view_visible(self, visible):
		self._view_visible = bool(visible)
		self._sync_ticker()

	def shutdown(self):
		"""Stop the refresh loop for good, e.g. when the window closes."""
		self._view_visible = False
		self._timer.stop()

	def _sync_ticker(self):
		should_run = self._view_visible and accounting.running_timer(self._timers[self.dataset]) is not None
		if should_run and not self._timer.isActive():
			self._timer.start()
		elif not should_run and self._timer.isActive():
			self._timer.stop()

	def _on_tick(self):
		t = accounting.running_timer(self._timers[self.dataset])
		if t is None or not self._view_visible:
			self._timer.stop()
			return
		self.tick.emit(t.id, accounting.elapsed(t, self.clock.now()))
