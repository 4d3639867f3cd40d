import logging
from pathlib import Path

from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem, QTableWidget, QTableWidgetItem, QSizePolicy
)
from PySide6.QtCore import Qt
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from BackEnd.core.clock import fmt_hms
from BackEnd.repos import session_repo, settings_repo
from BackEnd.services import analytics
from BackEnd.services.session_recorder import SessionRecorder
from BackEnd.services.session_timer import SessionTimer
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.components.pomodoro_view import PomodoroView
from FrontEnd.components.tray_notifier import TrayNotifier
from FrontEnd.styles.design_tokens import COLORS

logger = logging.getLogger(__name__)

STYLESHEET = Path(__file__).parent / "styles" / "focus.qss"


class MainWindow(QMainWindow):
	def __init__(self, timer: SessionTimer = None):
		super().__init__()
		self.setWindowTitle("JEE Progress - Focus")
		self.resize(1000, 700)

		try:
			with open(STYLESHEET, 'r', encoding='utf-8') as f:
				self.setStyleSheet(f.read())
		except OSError as e:
			logger.warning("Stylesheet not loaded: %s", e)

		session_repo.close_dangling_sessions()

		self.timer = timer if timer is not None else SessionTimer(settings_repo.load_settings(), parent=self)
		self.recorder = SessionRecorder(self.timer, parent=self)
		self.notifier = TrayNotifier(self.timer, parent=self)
		self.timer.settings_changed.connect(settings_repo.save_settings)
		self.timer.completed.connect(self._refresh_stats)

		self.sidebar = QListWidget()
		self.sidebar.setFixedWidth(200)
		self.sidebar.setSpacing(12)
		self.sidebar.addItem(QListWidgetItem("Pomodoro"))
		self.sidebar.addItem(QListWidgetItem("Focus History"))
		self.sidebar.setCurrentRow(0)

		self.stack = QStackedWidget()
		self.pomodoro_tab = PomodoroView(self.timer)
		self.history_tab = self._build_history_tab()
		self.stack.addWidget(self.pomodoro_tab)
		self.stack.addWidget(self.history_tab)
		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)

		self.footer_today = FooterToday()
		self.pomodoro_tab.focus_mode_changed.connect(self._on_focus_mode)

		content_widget = QWidget()
		content_layout = QVBoxLayout()
		content_layout.setContentsMargins(0, 0, 0, 0)
		content_layout.addWidget(self.stack)
		content_layout.addWidget(self.footer_today)
		content_widget.setLayout(content_layout)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(self.sidebar)
		main_layout.addWidget(content_widget)

		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self._refresh_stats()

	def closeEvent(self, event):
		# Close the open focus row before the timer goes away so the log
		# never keeps a dangling session.
		self.recorder.finish()
		self.timer.shutdown()
		settings_repo.save_settings(self.timer.settings)
		super().closeEvent(event)

	def _on_focus_mode(self, enabled):
		self.sidebar.setVisible(not enabled)
		self.footer_today.setVisible(not enabled)

	def _build_history_tab(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setAlignment(Qt.AlignmentFlag.AlignTop)
		layout.setContentsMargins(32, 32, 32, 32)

		self.figure = Figure(figsize=(5, 2.5))
		self.canvas = FigureCanvas(self.figure)
		layout.addWidget(self.canvas)

		# Prev / period / next pill
		self.history_offset = 0
		self.hist_prev_btn = QPushButton("◀")
		self.hist_prev_btn.setFixedSize(28, 28)
		self.hist_prev_btn.setObjectName("NavBtn")
		self.hist_next_btn = QPushButton("▶")
		self.hist_next_btn.setFixedSize(28, 28)
		self.hist_next_btn.setObjectName("NavBtn")
		self.hist_period_label = QLabel("")
		self.hist_period_label.setObjectName("HistPeriodLabel")
		self.hist_period_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		nav_row = QHBoxLayout()
		nav_row.addStretch()
		nav_row.addWidget(self.hist_prev_btn)
		nav_row.addWidget(self.hist_period_label)
		nav_row.addWidget(self.hist_next_btn)
		nav_row.addStretch()
		layout.addLayout(nav_row)

		self.week_label = QLabel("")
		self.week_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.week_label)

		self.totals_label = QLabel("")
		self.totals_label.setObjectName("TotalsLabel")
		self.totals_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		layout.addWidget(self.totals_label)

		self.history_table = QTableWidget()
		self.history_table.setColumnCount(5)
		self.history_table.setHorizontalHeaderLabels(["Day", "Started", "Completed", "Focused", "Points"])
		self.history_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
		self.history_table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		layout.addWidget(self.history_table)
		w.setLayout(layout)

		self.hist_prev_btn.clicked.connect(lambda: self._shift_week(1))
		self.hist_next_btn.clicked.connect(lambda: self._shift_week(-1))
		return w

	def _shift_week(self, delta):
		self.history_offset = max(0, self.history_offset + delta)
		self._update_history()

	def _refresh_stats(self, *_):
		minutes = session_repo.today_total_seconds() // 60
		self.footer_today.set_today(minutes, session_repo.get_daily_streak())
		self.totals_label.setText(
			f"All time: {session_repo.get_total_hours_studied():.1f}h focused over {session_repo.get_total_days_studied()} days"
		)
		self._update_history()

	def _update_history(self):
		days = analytics.week_range(self.history_offset)
		records = analytics.daily_records(days[0], days[-1])
		week = analytics.weekly_breakdown(records)[0]

		self.figure.clear()
		ax = self.figure.add_subplot(111)
		x = [d.day.strftime("%a") for d in week.days]
		y = [d.focus_sec / 3600 for d in week.days]
		bars = ax.bar(x, y, color=COLORS['chart_bar'], edgecolor=COLORS['chart_edge'], linewidth=1.5)
		for bar, value in zip(bars, y):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.05,
					f'{value:.1f}h', ha='center', va='bottom', fontsize=9, color=COLORS['text_strong'])
		ax.set_ylabel("Hours Focused")
		ax.set_title("Focus Time by Day of Week")
		ax.set_ylim(bottom=0)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		self.figure.tight_layout()
		self.canvas.draw()

		if self.history_offset == 0:
			period = "This Week"
		elif self.history_offset == 1:
			period = "Last Week"
		else:
			period = week.start.strftime("%b-%d-%Y")
		self.hist_period_label.setText(period)
		self.hist_next_btn.setEnabled(self.history_offset > 0)
		self.week_label.setText(
			f"{week.total_completed}/{week.total_started} sessions completed · {week.weekly_points:.0f} points"
		)

		self.history_table.setRowCount(len(week.days))
		for row, day in enumerate(week.days):
			self.history_table.setItem(row, 0, QTableWidgetItem(f"{day.day_name} {day.day.isoformat()}"))
			self.history_table.setItem(row, 1, QTableWidgetItem(str(day.started)))
			self.history_table.setItem(row, 2, QTableWidgetItem(str(day.completed)))
			self.history_table.setItem(row, 3, QTableWidgetItem(fmt_hms(day.focus_sec)))
			self.history_table.setItem(row, 4, QTableWidgetItem(f"{day.points:.0f}"))
