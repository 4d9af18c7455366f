import os

APP_NAME = "FocusFlow"
DB_FILENAME = "focusflow.db"

# Environment overrides
DATA_DIR_ENV = "FOCUSFLOW_DATA_DIR"
LOG_LEVEL_ENV = "FOCUSFLOW_LOG_LEVEL"
LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()

# Time accounting
ARCHIVE_MIN_DURATION_MS = 5000
TICK_INTERVAL_MS = 100

# History views
PRESET_WINDOWS = (7, 14, 30)
DEFAULT_PRESET_DAYS = 7
WEEKLY_PRESET_DAYS = 30
WEEKLY_PRESET_WEEKS = 5
YEAR_VIEW_MONTHS = 12

# Sync
SHARE_QUERY_PARAM = "data"
MAX_SHARE_URL_LENGTH = 8000

# Demo data
DEMO_HISTORY_DAYS = 365
DEMO_TASK_TITLES = [
	"Design System Update", "Client Meeting", "Code Review",
	"Bug Fix: Navigation", "Project Planning", "Email & Comms",
	"Deep Work: API", "Team Standup", "Documentation", "Research",
]
DEMO_TIMER_TITLES = ["Q4 Report", "Refactoring Auth", "Design Sprint", "Customer Support"]
