import os
from pathlib import Path

APP_NAME = "JEEProgress"
DATA_DIR_ENV = "JEE_PROGRESS_DATA_DIR"

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux).

	JEE_PROGRESS_DATA_DIR, when set, wins over the platform default.
	"""
	override = os.environ.get(DATA_DIR_ENV)
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
	"""Return Path to focus.db inside user data dir."""
	return user_data_dir() / "focus.db"

def settings_path():
	"""Return Path to the saved timer settings."""
	return user_data_dir() / "timer_settings.json"
