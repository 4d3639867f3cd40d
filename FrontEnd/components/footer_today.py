from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS

class FooterToday(QWidget):
    """Footer strip showing today's focused minutes and the streak."""

    def __init__(self, minutes=0, streak=0):
        super().__init__()
        layout = QHBoxLayout()
        layout.addStretch()
        self.label = QLabel()
        self.label.setObjectName("TodayLabel")
        layout.addWidget(self.label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 16px; padding: 8px 24px; color: {COLORS['footer_text']}; font-size: 16px; font-weight: 500;")
        self.set_today(minutes, streak)

    def set_today(self, minutes, streak=0):
        text = f"Today: {minutes}m focused"
        if streak:
            text += f"  ·  {streak} day streak"
        self.label.setText(text)
