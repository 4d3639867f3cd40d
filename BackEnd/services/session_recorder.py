import logging
import sqlite3

from PySide6.QtCore import QObject

from BackEnd.core.modes import SessionMode
from BackEnd.repos import session_repo

logger = logging.getLogger(__name__)


class SessionRecorder(QObject):
	"""Writes Work sessions of a SessionTimer to the focus log.

	A row opens when the timer starts in Work mode, survives pauses, and is
	closed as completed when the Work countdown finishes or as abandoned when
	the timer is reset, switched to another mode or shut down.
	"""

	def __init__(self, timer, repo=session_repo, parent=None):
		super().__init__(parent)
		self.timer = timer
		self.repo = repo
		self.session_id = None
		self.elapsed_sec = 0
		timer.state_changed.connect(self._on_state)
		timer.tick.connect(self._on_tick)
		timer.completed.connect(self._on_completed)
		timer.restarted.connect(self._on_restarted)

	def _on_state(self, state):
		if state == 'idle':
			self._save_progress()
			return
		if self.timer.mode is not SessionMode.WORK:
			return
		if self.session_id is not None:
			return
		self.elapsed_sec = 0
		planned = self.timer.settings.minutes_for(SessionMode.WORK) * 60
		try:
			self.session_id = self.repo.start_session(mode=SessionMode.WORK.value, planned_sec=planned)
		except sqlite3.Error as e:
			logger.error("Could not open focus session: %s", e)

	def _on_tick(self, remaining):
		if self.session_id is not None and self.timer.is_active:
			self.elapsed_sec += 1

	def _on_completed(self, event):
		if event.completed_mode is SessionMode.WORK:
			self._close(completed=True)

	def _on_restarted(self, mode):
		self._close(completed=False)

	def finish(self):
		"""Close any open row as not completed (window shutdown)."""
		self._close(completed=False)

	def _save_progress(self):
		if self.session_id is None:
			return
		try:
			self.repo.update_elapsed(self.session_id, self.elapsed_sec)
		except sqlite3.Error as e:
			logger.error("Could not save progress of session %s: %s", self.session_id, e)

	def _close(self, completed):
		if self.session_id is None:
			return
		sid, elapsed = self.session_id, self.elapsed_sec
		self.session_id = None
		self.elapsed_sec = 0
		try:
			self.repo.stop_session(sid, elapsed, completed=completed)
		except sqlite3.Error as e:
			logger.error("Could not close focus session %s: %s", sid, e)
