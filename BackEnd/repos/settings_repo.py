import json
import logging

from BackEnd.core.paths import settings_path
from BackEnd.core.settings import TimerSettings

logger = logging.getLogger(__name__)

def load_settings():
	"""Return saved TimerSettings, or defaults when nothing usable is on disk."""
	path = settings_path()
	if not path.exists():
		return TimerSettings()
	try:
		with open(path, 'r', encoding='utf-8') as f:
			data = json.load(f)
	except (OSError, ValueError) as e:
		logger.warning("Could not read %s, using defaults: %s", path, e)
		return TimerSettings()
	return TimerSettings.from_dict(data)

def save_settings(settings: TimerSettings):
	"""Persist settings; returns False if the file could not be written."""
	path = settings_path()
	try:
		path.parent.mkdir(parents=True, exist_ok=True)
		with open(path, 'w', encoding='utf-8') as f:
			json.dump(settings.to_dict(), f, indent=2)
	except OSError as e:
		logger.warning("Failed to save settings to %s: %s", path, e)
		return False
	return True

def clear_settings():
	path = settings_path()
	if path.exists():
		path.unlink()
		return True
	return False
