from BackEnd.core.modes import SessionMode
from FrontEnd.components.pomodoro_view import PomodoroView
from FrontEnd.styles.design_tokens import MODE_COLORS


def test_view_reflects_timer(timer):
    view = PomodoroView(timer)
    assert view.time_label.text() == "01:00"
    assert view.start_btn.text() == "Start"

    view.start_btn.click()
    assert timer.is_active
    assert view.start_btn.text() == "Pause"

    timer.tick_once()
    assert view.time_label.text() == "00:59"
    view.deleteLater()


def test_mode_buttons_switch_mode(timer):
    view = PomodoroView(timer)
    view.mode_buttons[SessionMode.LONG_BREAK].click()
    assert timer.mode is SessionMode.LONG_BREAK
    assert view.description_label.text() == SessionMode.LONG_BREAK.description
    view.deleteLater()


def test_spinbox_updates_duration(timer):
    view = PomodoroView(timer)
    view.duration_spins[SessionMode.WORK].setValue(30)
    assert timer.settings.minutes_for(SessionMode.WORK) == 30
    assert view.time_label.text() == "30:00"
    view.deleteLater()


def test_checkboxes_update_flags(timer):
    view = PomodoroView(timer)
    view.auto_start_box.setChecked(True)
    view.notify_box.setChecked(True)
    assert timer.settings.auto_start_breaks is True
    assert timer.settings.notifications_enabled is True
    view.deleteLater()


def test_focus_mode_hides_everything_but_the_countdown(timer):
    view = PomodoroView(timer)
    view.show()
    hideable = [view.mode_bar, view.description_label, view.progress, view.count_label,
                view.controls_bar, view.settings_panel]
    changes = []
    view.focus_mode_changed.connect(changes.append)

    view.focus_btn.click()
    assert view.focus_mode
    assert view.window().isFullScreen()
    assert all(w.isHidden() for w in hideable)
    assert not view.time_label.isHidden()
    assert not view.focus_btn.isHidden()
    assert view.focus_btn.text() == "Exit Focus"

    view.focus_btn.click()
    assert not view.focus_mode
    assert not view.window().isFullScreen()
    assert not any(w.isHidden() for w in hideable)
    assert changes == [True, False]
    view.close()
    view.deleteLater()


def test_focus_mode_set_programmatically_keeps_button_in_sync(timer):
    view = PomodoroView(timer)
    view.show()
    view.set_focus_mode(True)
    assert view.focus_btn.isChecked()
    assert view.settings_panel.isHidden()
    view.set_focus_mode(False)
    assert not view.focus_btn.isChecked()
    assert not view.settings_panel.isHidden()
    view.close()
    view.deleteLater()


def test_every_mode_has_an_accent_color():
    assert set(MODE_COLORS) == {mode.value for mode in SessionMode}
