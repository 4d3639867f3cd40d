import logging
from dataclasses import dataclass, asdict, fields

from BackEnd.core.modes import SessionMode

logger = logging.getLogger(__name__)

MIN_MINUTES = 1
MAX_MINUTES = 180
LONG_BREAK_EVERY = 4
TICK_INTERVAL_MS = 1000
AUTO_START_DELAY_MS = 1000

DEFAULT_MINUTES = {
	SessionMode.WORK: 45,
	SessionMode.SHORT_BREAK: 5,
	SessionMode.LONG_BREAK: 15,
}

_MODE_FIELDS = {
	SessionMode.WORK: "work_minutes",
	SessionMode.SHORT_BREAK: "short_break_minutes",
	SessionMode.LONG_BREAK: "long_break_minutes",
}


def is_valid_minutes(minutes) -> bool:
	"""True for an int (not bool) inside [MIN_MINUTES, MAX_MINUTES]."""
	if isinstance(minutes, bool) or not isinstance(minutes, int):
		return False
	return MIN_MINUTES <= minutes <= MAX_MINUTES


@dataclass
class TimerSettings:
	work_minutes: int = DEFAULT_MINUTES[SessionMode.WORK]
	short_break_minutes: int = DEFAULT_MINUTES[SessionMode.SHORT_BREAK]
	long_break_minutes: int = DEFAULT_MINUTES[SessionMode.LONG_BREAK]
	auto_start_breaks: bool = False
	notifications_enabled: bool = False

	def minutes_for(self, mode: SessionMode) -> int:
		return getattr(self, _MODE_FIELDS[SessionMode(mode)])

	def with_minutes(self, mode: SessionMode, minutes: int):
		"""Return a copy with one mode's duration replaced (no validation)."""
		data = asdict(self)
		data[_MODE_FIELDS[SessionMode(mode)]] = minutes
		return TimerSettings(**data)

	def configuration(self):
		"""Mode -> minutes mapping."""
		return {mode: self.minutes_for(mode) for mode in SessionMode}

	def to_dict(self):
		return asdict(self)

	@classmethod
	def from_dict(cls, data):
		"""Build settings from a loose mapping, falling back to defaults.

		Unknown keys are ignored; durations outside the allowed range and
		non-bool flags are replaced by their defaults.
		"""
		settings = cls()
		if not isinstance(data, dict):
			return settings
		known = {f.name for f in fields(cls)}
		for key, value in data.items():
			if key not in known:
				continue
			if key.endswith("_minutes"):
				if is_valid_minutes(value):
					setattr(settings, key, value)
				else:
					logger.warning("Ignoring invalid %s=%r in saved settings", key, value)
			elif isinstance(value, bool):
				setattr(settings, key, value)
		return settings
