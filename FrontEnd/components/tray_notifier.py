import logging

from PySide6.QtWidgets import QSystemTrayIcon, QApplication

logger = logging.getLogger(__name__)

TITLE = "Pomodoro Timer"


class TrayNotifier:
	"""Best-effort desktop notification for finished sessions.

	Does nothing when notifications are switched off, when the platform has
	no system tray, or when showing the message fails.
	"""

	def __init__(self, timer, parent=None, tray=None):
		self.timer = timer
		self.tray = tray
		if self.tray is None and QSystemTrayIcon.isSystemTrayAvailable():
			self.tray = QSystemTrayIcon(parent)
			app = QApplication.instance()
			if app is not None:
				self.tray.setIcon(app.windowIcon())
		timer.completed.connect(self.notify)

	def notify(self, event) -> bool:
		if not self.timer.settings.notifications_enabled or self.tray is None:
			return False
		try:
			if not self.tray.supportsMessages():
				return False
			self.tray.show()
			self.tray.showMessage(TITLE, event.message, QSystemTrayIcon.MessageIcon.Information, 5000)
		except Exception as e:
			logger.debug("Notification failed: %s", e)
			return False
		return True
