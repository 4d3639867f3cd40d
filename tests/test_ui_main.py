from BackEnd.repos import session_repo, settings_repo
from BackEnd.services.session_timer import SessionTimer
from FrontEnd.ui_main import MainWindow

from conftest import run_to_completion


def test_window_logs_and_refreshes(one_minute_settings):
    timer = SessionTimer(one_minute_settings)
    win = MainWindow(timer)
    win.show()
    assert win.hist_period_label.text() == "This Week"
    assert not win.hist_next_btn.isEnabled()

    run_to_completion(timer)
    assert "Today: 1m focused" in win.footer_today.label.text()
    assert win.week_label.text().startswith("1/1 sessions completed")

    win.hist_prev_btn.click()
    assert win.hist_period_label.text() == "Last Week"
    win.close()


def test_close_saves_settings_and_closes_session(one_minute_settings):
    timer = SessionTimer(one_minute_settings)
    win = MainWindow(timer)
    win.show()
    timer.start()
    timer.tick_once()
    win.close()
    assert session_repo.active_session() is None
    assert not timer.is_active
    assert settings_repo.load_settings().work_minutes == 1


def test_history_shows_all_time_totals(one_minute_settings):
    timer = SessionTimer(one_minute_settings)
    win = MainWindow(timer)
    win.show()
    assert win.totals_label.text() == "All time: 0.0h focused over 0 days"
    run_to_completion(timer)
    assert win.totals_label.text() == "All time: 0.0h focused over 1 days"
    win.close()


def test_focus_mode_hides_window_chrome(one_minute_settings):
    win = MainWindow(SessionTimer(one_minute_settings))
    win.show()
    win.pomodoro_tab.set_focus_mode(True)
    assert win.isFullScreen()
    assert win.sidebar.isHidden()
    assert win.footer_today.isHidden()
    win.pomodoro_tab.set_focus_mode(False)
    assert not win.sidebar.isHidden()
    assert not win.footer_today.isHidden()
    win.close()
