import logging
from dataclasses import dataclass, replace

from PySide6.QtCore import QObject, Signal, QTimer

from BackEnd.core.clock import split_mmss
from BackEnd.core.modes import SessionMode, RunState, next_mode_after, completion_message
from BackEnd.core.settings import (
	TimerSettings, is_valid_minutes, LONG_BREAK_EVERY, TICK_INTERVAL_MS, AUTO_START_DELAY_MS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionEvent:
	completed_mode: SessionMode
	next_mode: SessionMode
	session_count: int

	@property
	def message(self):
		return completion_message(self.completed_mode, self.next_mode)


@dataclass(frozen=True)
class TimerSnapshot:
	"""Read-only view handed to the UI on every refresh."""
	active_mode: SessionMode
	remaining_minutes: int
	remaining_seconds: int
	run_state: RunState
	progress_percentage: float
	session_counter: int
	configuration: dict

	@property
	def remaining_total(self):
		return self.remaining_minutes * 60 + self.remaining_seconds


class SessionTimer(QObject):
	"""Pomodoro countdown cycling Work / Short Break / Long Break.

	One repeating QTimer drives the countdown and a single-shot QTimer handles
	the delayed auto-start of breaks. Both are owned by this object and are
	stopped on pause, reset, mode switch and shutdown.
	"""

	tick = Signal(int)  # emits remaining seconds
	state_changed = Signal(str)  # emits 'active' or 'idle'
	mode_changed = Signal(object)  # emits SessionMode
	restarted = Signal(object)  # emits the mode whose duration was loaded
	completed = Signal(object)  # emits CompletionEvent
	settings_changed = Signal(object)  # emits TimerSettings

	def __init__(self, settings: TimerSettings = None, parent=None,
			tick_interval_ms: int = TICK_INTERVAL_MS, autostart_delay_ms: int = AUTO_START_DELAY_MS):
		super().__init__(parent)
		self._settings = settings if settings is not None else TimerSettings()
		self._mode = SessionMode.WORK
		self._run_state = RunState.IDLE
		self._session_count = 0
		self._remaining_sec = self._settings.minutes_for(self._mode) * 60
		self._initial_sec = self._remaining_sec
		self._shut_down = False

		self._timer = QTimer(self)
		self._timer.setInterval(tick_interval_ms)
		self._timer.timeout.connect(self.tick_once)

		self._autostart_timer = QTimer(self)
		self._autostart_timer.setSingleShot(True)
		self._autostart_timer.setInterval(autostart_delay_ms)
		self._autostart_timer.timeout.connect(self.start)

	# --- read side ---

	@property
	def mode(self):
		return self._mode

	@property
	def run_state(self):
		return self._run_state

	@property
	def is_active(self):
		return self._run_state is RunState.ACTIVE

	@property
	def session_count(self):
		return self._session_count

	@property
	def remaining(self):
		"""Remaining time as (minutes, seconds)."""
		return split_mmss(self._remaining_sec)

	@property
	def remaining_total(self):
		return self._remaining_sec

	@property
	def settings(self):
		return self._settings

	@property
	def autostart_pending(self):
		return self._autostart_timer.isActive()

	def progress_percentage(self) -> float:
		if self._initial_sec <= 0:
			return 0.0
		value = (self._initial_sec - self._remaining_sec) / self._initial_sec * 100
		return min(max(value, 0.0), 100.0)

	def snapshot(self) -> TimerSnapshot:
		minutes, seconds = self.remaining
		return TimerSnapshot(
			active_mode=self._mode,
			remaining_minutes=minutes,
			remaining_seconds=seconds,
			run_state=self._run_state,
			progress_percentage=self.progress_percentage(),
			session_counter=self._session_count,
			configuration=self._settings.configuration(),
		)

	# --- controls ---

	def start(self):
		if self._shut_down or self.is_active:
			return
		if self._remaining_sec == 0:
			self.reset()
		self._autostart_timer.stop()
		self._run_state = RunState.ACTIVE
		self._timer.start()
		logger.debug("Started %s with %ss left", self._mode.value, self._remaining_sec)
		self.state_changed.emit(self._run_state.value)

	def pause(self):
		self._autostart_timer.stop()
		if not self.is_active:
			return
		self._timer.stop()
		self._run_state = RunState.IDLE
		self.state_changed.emit(self._run_state.value)

	def toggle(self):
		if self.is_active:
			self.pause()
		else:
			self.start()

	def reset(self, mode: SessionMode = None):
		"""Idle and reload a duration; `mode` picks the duration only, it does not switch modes."""
		target = SessionMode(mode) if mode is not None else self._mode
		self._timer.stop()
		self._autostart_timer.stop()
		was_active = self.is_active
		self._run_state = RunState.IDLE
		self._remaining_sec = self._settings.minutes_for(target) * 60
		self._initial_sec = self._remaining_sec
		self.restarted.emit(target)
		if was_active:
			self.state_changed.emit(self._run_state.value)
		self.tick.emit(self._remaining_sec)

	def set_mode(self, mode: SessionMode):
		self._mode = SessionMode(mode)
		self.reset(self._mode)
		self.mode_changed.emit(self._mode)

	def set_duration(self, mode: SessionMode, minutes) -> bool:
		"""Change one mode's duration. Out-of-range values are ignored.

		Returns True when the new value was applied.
		"""
		mode = SessionMode(mode)
		if not is_valid_minutes(minutes):
			logger.info("Rejected %s duration %r", mode.value, minutes)
			return False
		self._settings = self._settings.with_minutes(mode, minutes)
		if mode is self._mode:
			self.reset(mode)
		self.settings_changed.emit(self._settings)
		return True

	def set_auto_start_breaks(self, enabled: bool):
		self._settings = replace(self._settings, auto_start_breaks=bool(enabled))
		self.settings_changed.emit(self._settings)

	def set_notifications_enabled(self, enabled: bool):
		self._settings = replace(self._settings, notifications_enabled=bool(enabled))
		self.settings_changed.emit(self._settings)

	def reset_session_count(self):
		"""Zero the completed-session counter and go back to Work (manual "Reset Count")."""
		self._session_count = 0
		self.set_mode(SessionMode.WORK)

	def shutdown(self):
		"""Stop every owned timer. Safe to call more than once."""
		if self._shut_down:
			return
		self._shut_down = True
		self._timer.stop()
		self._autostart_timer.stop()
		if self.is_active:
			self._run_state = RunState.IDLE
			self.state_changed.emit(self._run_state.value)

	def __enter__(self):
		return self

	def __exit__(self, exc_type, exc, tb):
		self.shutdown()
		return False

	# --- countdown ---

	def tick_once(self):
		"""Advance the countdown by one second (no-op while idle)."""
		if not self.is_active:
			return
		if self._remaining_sec == 0:
			self._complete()
			return
		self._remaining_sec -= 1
		self.tick.emit(self._remaining_sec)

	def _complete(self):
		finished = self._mode
		self._timer.stop()
		self._run_state = RunState.IDLE
		self.state_changed.emit(self._run_state.value)
		if finished is SessionMode.WORK:
			self._session_count += 1
		upcoming = next_mode_after(finished, self._session_count, LONG_BREAK_EVERY)
		event = CompletionEvent(finished, upcoming, self._session_count)
		logger.info(event.message)
		self.completed.emit(event)
		self.set_mode(upcoming)
		if self._settings.auto_start_breaks and upcoming.is_break:
			self._autostart_timer.start()
