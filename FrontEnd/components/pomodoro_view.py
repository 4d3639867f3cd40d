from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
	QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QProgressBar,
	QSpinBox, QCheckBox, QFormLayout, QButtonGroup
)

from BackEnd.core.clock import fmt_mmss
from BackEnd.core.modes import SessionMode, RunState
from BackEnd.core.settings import MIN_MINUTES, MAX_MINUTES
from FrontEnd.styles.design_tokens import MODE_COLORS


class PomodoroView(QWidget):
	"""Pomodoro page. Only reads timer snapshots and calls timer controls."""

	focus_mode_changed = Signal(bool)

	def __init__(self, timer, parent=None):
		super().__init__(parent)
		self.timer = timer

		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)
		outer.setSpacing(12)

		# Focus mode toggle, top-right
		top_row = QHBoxLayout()
		top_row.addStretch()
		self.focus_btn = QPushButton("Focus Mode")
		self.focus_btn.setObjectName("FocusBtn")
		self.focus_btn.setCheckable(True)
		self.focus_btn.toggled.connect(self.set_focus_mode)
		top_row.addWidget(self.focus_btn)
		outer.addLayout(top_row)

		# Mode selector
		self.mode_bar = QWidget()
		mode_row = QHBoxLayout(self.mode_bar)
		mode_row.setContentsMargins(0, 0, 0, 0)
		self.mode_group = QButtonGroup(self)
		self.mode_buttons = {}
		for mode in SessionMode:
			btn = QPushButton(mode.label)
			btn.setCheckable(True)
			btn.setObjectName("ModeBtn")
			btn.clicked.connect(lambda _checked=False, m=mode: self.timer.set_mode(m))
			self.mode_group.addButton(btn)
			self.mode_buttons[mode] = btn
			mode_row.addWidget(btn)
		outer.addWidget(self.mode_bar)

		self.description_label = QLabel()
		self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.description_label)

		self.time_label = QLabel("00:00")
		self.time_label.setObjectName("TimerLabel")
		self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.time_label)

		self.progress = QProgressBar()
		self.progress.setRange(0, 100)
		self.progress.setTextVisible(True)
		outer.addWidget(self.progress)

		self.count_label = QLabel()
		self.count_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		outer.addWidget(self.count_label)

		self.controls_bar = QWidget()
		controls = QHBoxLayout(self.controls_bar)
		controls.setContentsMargins(0, 0, 0, 0)
		controls.setSpacing(24)
		self.start_btn = QPushButton("Start")
		self.start_btn.setObjectName("StartBtn")
		self.reset_btn = QPushButton("Reset")
		self.reset_btn.setObjectName("EndBtn")
		self.reset_count_btn = QPushButton("Reset Count")
		self.reset_count_btn.setObjectName("EndBtn")
		for btn in (self.start_btn, self.reset_btn, self.reset_count_btn):
			btn.setMinimumHeight(48)
			controls.addWidget(btn)
		outer.addWidget(self.controls_bar)

		# Settings
		self.settings_panel = QWidget()
		form = QFormLayout(self.settings_panel)
		form.setContentsMargins(0, 0, 0, 0)
		self.duration_spins = {}
		for mode in SessionMode:
			spin = QSpinBox()
			spin.setRange(MIN_MINUTES, MAX_MINUTES)
			spin.setSuffix(" min")
			spin.setValue(timer.settings.minutes_for(mode))
			spin.valueChanged.connect(lambda value, m=mode: self.timer.set_duration(m, value))
			self.duration_spins[mode] = spin
			form.addRow(f"{mode.label}:", spin)
		self.auto_start_box = QCheckBox("Auto-start breaks")
		self.auto_start_box.setChecked(timer.settings.auto_start_breaks)
		self.auto_start_box.toggled.connect(self.timer.set_auto_start_breaks)
		self.notify_box = QCheckBox("Desktop notifications")
		self.notify_box.setChecked(timer.settings.notifications_enabled)
		self.notify_box.toggled.connect(self.timer.set_notifications_enabled)
		form.addRow(self.auto_start_box)
		form.addRow(self.notify_box)
		outer.addWidget(self.settings_panel)
		outer.addStretch()
		self.setLayout(outer)

		self.start_btn.clicked.connect(self.timer.toggle)
		self.reset_btn.clicked.connect(lambda: self.timer.reset())
		self.reset_count_btn.clicked.connect(self.timer.reset_session_count)
		for signal in (timer.tick, timer.state_changed, timer.mode_changed, timer.settings_changed):
			signal.connect(self.refresh)
		self.refresh()

	def refresh(self, *_):
		snap = self.timer.snapshot()
		mode = snap.active_mode
		self.mode_buttons[mode].setChecked(True)
		self.description_label.setText(mode.description)
		self.time_label.setText(fmt_mmss(snap.remaining_total))
		self.time_label.setStyleSheet(f"color: {MODE_COLORS[mode.value]};")
		self.progress.setValue(round(snap.progress_percentage))
		self.progress.setFormat(f"{round(snap.progress_percentage)}% Complete")
		self.count_label.setText(f"{snap.session_counter} sessions completed")
		self.start_btn.setText("Pause" if snap.run_state is RunState.ACTIVE else "Start")
		for m, spin in self.duration_spins.items():
			if spin.value() != snap.configuration[m]:
				spin.blockSignals(True)
				spin.setValue(snap.configuration[m])
				spin.blockSignals(False)

	@property
	def focus_mode(self):
		return self.focus_btn.isChecked()

	def set_focus_mode(self, enabled: bool):
		"""Full-screen, distraction-free view: only the countdown and the toggle stay."""
		if self.focus_btn.isChecked() != enabled:
			# re-enters through the toggled signal
			self.focus_btn.setChecked(enabled)
			return
		for w in (self.mode_bar, self.description_label, self.progress, self.count_label,
				self.controls_bar, self.settings_panel):
			w.setVisible(not enabled)
		self.focus_btn.setText("Exit Focus" if enabled else "Focus Mode")
		if enabled:
			self.window().showFullScreen()
		else:
			self.window().showNormal()
		self.focus_mode_changed.emit(enabled)

	def keyPressEvent(self, event):
		if event.key() == Qt.Key.Key_Escape and self.focus_mode:
			self.set_focus_mode(False)
			return
		super().keyPressEvent(event)
