from enum import Enum


class SessionMode(str, Enum):
	"""The three Pomodoro phases; exactly one is active at a time."""
	WORK = "work"
	SHORT_BREAK = "shortBreak"
	LONG_BREAK = "longBreak"

	@property
	def label(self):
		return MODE_LABELS[self]

	@property
	def description(self):
		return MODE_DESCRIPTIONS[self]

	@property
	def is_break(self):
		return self is not SessionMode.WORK


class RunState(str, Enum):
	ACTIVE = "active"
	IDLE = "idle"


MODE_LABELS = {
	SessionMode.WORK: "Focus Time",
	SessionMode.SHORT_BREAK: "Short Break",
	SessionMode.LONG_BREAK: "Long Break",
}

MODE_DESCRIPTIONS = {
	SessionMode.WORK: "Time to focus and get work done",
	SessionMode.SHORT_BREAK: "Quick break to refresh your mind",
	SessionMode.LONG_BREAK: "Extended break for deeper rest",
}


def next_mode_after(completed: SessionMode, session_count: int, long_break_every: int = 4) -> SessionMode:
	"""Pick the mode that follows a finished one.

	session_count is the number of completed Work sessions *including* the
	one that just finished.
	"""
	if completed is SessionMode.WORK:
		if session_count % long_break_every == 0:
			return SessionMode.LONG_BREAK
		return SessionMode.SHORT_BREAK
	return SessionMode.WORK


def completion_message(completed: SessionMode, upcoming: SessionMode) -> str:
	return f"{completed.label} completed! Time for {upcoming.label}."
