import os
from pathlib import Path
from FocusFlow.core import settings

def user_data_dir(app_name=settings.APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux), honouring FOCUSFLOW_DATA_DIR."""
	override = os.environ.get(settings.DATA_DIR_ENV)
	if override:
		path = Path(override)
	else:
		if os.name == "nt":
			base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
		elif os.name == "posix":
			base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
		else:
			base = os.path.expanduser("~")
		path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def db_path():
	"""Return Path to the tracker database inside user data dir."""
	return user_data_dir() / settings.DB_FILENAME
