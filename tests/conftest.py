import pytest
from PySide6.QtCore import QCoreApplication
from FocusFlow.core.clock import ManualClock
from FocusFlow.repos.tracker_repo import TrackerRepo

@pytest.fixture(scope="session")
def qapp():
	"""QTimer needs an application instance; no event loop is run."""
	app = QCoreApplication.instance() or QCoreApplication([])
	yield app

@pytest.fixture
def clock():
	return ManualClock(1_700_000_000_000)

@pytest.fixture
def repo(tmp_path):
	return TrackerRepo(tmp_path / "focusflow.db")
