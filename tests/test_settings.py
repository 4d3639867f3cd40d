import json

from BackEnd.core.modes import SessionMode, next_mode_after, completion_message
from BackEnd.core.settings import TimerSettings, is_valid_minutes
from BackEnd.core.paths import settings_path, user_data_dir
from BackEnd.repos import settings_repo


def test_defaults_match_configuration_input():
    s = TimerSettings()
    assert s.configuration() == {
        SessionMode.WORK: 45,
        SessionMode.SHORT_BREAK: 5,
        SessionMode.LONG_BREAK: 15,
    }
    assert s.auto_start_breaks is False
    assert s.notifications_enabled is False


def test_is_valid_minutes():
    assert is_valid_minutes(1)
    assert is_valid_minutes(180)
    assert not is_valid_minutes(0)
    assert not is_valid_minutes(181)
    assert not is_valid_minutes(False)
    assert not is_valid_minutes(2.0)


def test_from_dict_keeps_valid_and_drops_invalid_values():
    s = TimerSettings.from_dict({
        "work_minutes": 30,
        "short_break_minutes": 500,
        "long_break_minutes": "20",
        "auto_start_breaks": True,
        "notifications_enabled": "yes",
        "theme": "dark",
    })
    assert s.work_minutes == 30
    assert s.short_break_minutes == 5
    assert s.long_break_minutes == 15
    assert s.auto_start_breaks is True
    assert s.notifications_enabled is False


def test_from_dict_non_mapping_gives_defaults():
    assert TimerSettings.from_dict(["work_minutes"]) == TimerSettings()


def test_with_minutes_returns_copy():
    s = TimerSettings()
    changed = s.with_minutes(SessionMode.LONG_BREAK, 25)
    assert changed.long_break_minutes == 25
    assert s.long_break_minutes == 15


def test_next_mode_after():
    assert next_mode_after(SessionMode.WORK, 1) is SessionMode.SHORT_BREAK
    assert next_mode_after(SessionMode.WORK, 4) is SessionMode.LONG_BREAK
    assert next_mode_after(SessionMode.WORK, 8) is SessionMode.LONG_BREAK
    assert next_mode_after(SessionMode.SHORT_BREAK, 3) is SessionMode.WORK
    assert next_mode_after(SessionMode.LONG_BREAK, 4) is SessionMode.WORK


def test_completion_message():
    msg = completion_message(SessionMode.LONG_BREAK, SessionMode.WORK)
    assert msg == "Long Break completed! Time for Focus Time."


def test_data_dir_override(data_dir):
    assert user_data_dir() == data_dir
    assert data_dir.is_dir()


def test_load_without_file_gives_defaults():
    assert settings_repo.load_settings() == TimerSettings()


def test_save_and_load_settings():
    s = TimerSettings(work_minutes=50, auto_start_breaks=True)
    assert settings_repo.save_settings(s)
    assert settings_repo.load_settings() == s


def test_corrupt_settings_file_falls_back_to_defaults():
    settings_path().write_text("{not json", encoding="utf-8")
    assert settings_repo.load_settings() == TimerSettings()


def test_saved_file_is_plain_json():
    settings_repo.save_settings(TimerSettings(short_break_minutes=10))
    data = json.loads(settings_path().read_text(encoding="utf-8"))
    assert data["short_break_minutes"] == 10


def test_clear_settings():
    assert settings_repo.clear_settings() is False
    settings_repo.save_settings(TimerSettings())
    assert settings_repo.clear_settings() is True
    assert not settings_path().exists()
