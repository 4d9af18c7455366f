import sqlite3
from contextlib import contextmanager
from pathlib import Path
from pydantic import ValidationError
from FocusFlow.core.errors import PersistenceError
from FocusFlow.core.log import get_logger
from FocusFlow.core.paths import db_path
from FocusFlow.models.schemas import HistoryRecord, TimerRecord

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

class TrackerRepo:
	"""SQLite store for the timer and history collections.

	Each save replaces the stored collection in one transaction and keeps its
	order. Loads never fail: a missing or corrupt store reads as empty.
	"""

	def __init__(self, dbfile=None):
		self.dbfile = Path(dbfile) if dbfile is not None else db_path()

	def connect(self):
		"""Open SQLite connection and ensure schema is applied."""
		conn = sqlite3.connect(self.dbfile)
		conn.row_factory = sqlite3.Row
		with open(SCHEMA_PATH, encoding="utf-8") as f:
			conn.executescript(f.read())
		return conn

	@contextmanager
	def _transaction(self):
		conn = self.connect()
		try:
			with conn:
				yield conn
		finally:
			conn.close()

	def _load_rows(self, query, what):
		try:
			with self._transaction() as conn:
				return conn.execute(query).fetchall()
		except sqlite3.DatabaseError as e:
			logger.warning("could not read %s from %s, starting empty: %s", what, self.dbfile, e)
			return []

	def load_timers(self):
		"""Return stored timers in saved order."""
		rows = self._load_rows(
			"SELECT id, title, created_at, is_running, accumulated_ms, last_start_time, is_minimized "
			"FROM timers ORDER BY position",
			"timers",
		)
		timers = []
		for r in rows:
			try:
				timers.append(TimerRecord(
					id=r["id"],
					title=r["title"],
					created_at=r["created_at"],
					is_running=bool(r["is_running"]),
					accumulated_ms=r["accumulated_ms"],
					last_start_time=r["last_start_time"],
					is_minimized=bool(r["is_minimized"]),
				).to_timer())
			except ValidationError as e:
				logger.warning("skipping unreadable timer row %r: %s", r["id"], e)
		return timers

	def load_history(self):
		"""Return stored history items in saved order."""
		rows = self._load_rows(
			"SELECT id, title, completed_at, duration_ms FROM history ORDER BY position",
			"history",
		)
		items = []
		for r in rows:
			try:
				items.append(HistoryRecord(
					id=r["id"],
					title=r["title"],
					completed_at=r["completed_at"],
					duration_ms=r["duration_ms"],
				).to_item())
			except ValidationError as e:
				logger.warning("skipping unreadable history row %r: %s", r["id"], e)
		return items

	def _write_timers(self, conn, timers):
		conn.execute("DELETE FROM timers")
		conn.executemany(
			"""
			INSERT INTO timers (id, position, title, created_at, is_running, accumulated_ms, last_start_time, is_minimized)
			VALUES (?, ?, ?, ?, ?, ?, ?, ?)
			""",
			[
				(t.id, i, t.title, t.created_at, int(t.is_running), t.accumulated_ms, t.last_start_time, int(t.is_minimized))
				for i, t in enumerate(timers)
			],
		)

	def _write_history(self, conn, history):
		conn.execute("DELETE FROM history")
		conn.executemany(
			"INSERT INTO history (position, id, title, completed_at, duration_ms) VALUES (?, ?, ?, ?, ?)",
			[(i, h.id, h.title, h.completed_at, h.duration_ms) for i, h in enumerate(history)],
		)

	def save_timers(self, timers):
		self.replace_all(timers=timers)

	def save_history(self, history):
		self.replace_all(history=history)

	def replace_all(self, timers=None, history=None):
		"""Write the given collections in one transaction; None leaves a collection as stored."""
		try:
			with self._transaction() as conn:
				if timers is not None:
					self._write_timers(conn, timers)
				if history is not None:
					self._write_history(conn, history)
		except sqlite3.Error as e:
			raise PersistenceError(f"could not save to {self.dbfile}: {e}") from e
