import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEventLoop, QTimer
from PySide6.QtWidgets import QApplication

from BackEnd.core.settings import TimerSettings
from BackEnd.services.session_timer import SessionTimer


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point the per-user data dir at a temp folder for every test."""
    path = tmp_path / "data"
    monkeypatch.setenv("JEE_PROGRESS_DATA_DIR", str(path))
    return path


@pytest.fixture
def one_minute_settings():
    return TimerSettings(work_minutes=1, short_break_minutes=1, long_break_minutes=1)


@pytest.fixture
def timer(one_minute_settings):
    t = SessionTimer(one_minute_settings)
    yield t
    t.shutdown()


def wait_ms(ms, until_signal=None):
    """Run the Qt event loop for up to `ms` milliseconds."""
    loop = QEventLoop()
    if until_signal is not None:
        until_signal.connect(loop.quit)
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


def run_to_completion(timer):
    """Start the timer and tick until the current mode completes."""
    timer.start()
    for _ in range(timer.remaining_total + 1):
        timer.tick_once()
