from BackEnd.core.clock import local_today_str
from BackEnd.core.modes import SessionMode
from BackEnd.repos import session_repo
from BackEnd.services.session_recorder import SessionRecorder

from conftest import run_to_completion


def _rows():
    today = local_today_str()
    return session_repo.sessions_between(today, today)


def test_completed_work_session_is_logged(timer):
    recorder = SessionRecorder(timer)
    run_to_completion(timer)
    assert recorder.session_id is None
    rows = _rows()
    assert len(rows) == 1
    assert rows[0]["mode"] == "work"
    assert rows[0]["completed"] == 1
    assert rows[0]["elapsed_sec"] == 60
    assert rows[0]["planned_sec"] == 60
    assert rows[0]["end_utc"] is not None


def test_session_survives_pause_and_closes_on_reset(timer):
    recorder = SessionRecorder(timer)
    timer.start()
    for _ in range(10):
        timer.tick_once()
    timer.pause()
    assert session_repo.active_session()["elapsed_sec"] == 10
    timer.start()
    for _ in range(5):
        timer.tick_once()
    assert len(_rows()) == 1
    timer.reset()
    rows = _rows()
    assert len(rows) == 1
    assert rows[0]["completed"] == 0
    assert rows[0]["elapsed_sec"] == 15
    assert recorder.session_id is None


def test_breaks_are_not_logged(timer):
    recorder = SessionRecorder(timer)
    timer.set_mode(SessionMode.SHORT_BREAK)
    run_to_completion(timer)
    assert _rows() == []


def test_finish_closes_open_session(timer):
    recorder = SessionRecorder(timer)
    timer.start()
    timer.tick_once()
    recorder.finish()
    assert session_repo.active_session() is None
    assert _rows()[0]["elapsed_sec"] == 1


def test_mode_switch_abandons_session(timer):
    recorder = SessionRecorder(timer)
    timer.start()
    timer.tick_once()
    timer.set_mode(SessionMode.LONG_BREAK)
    rows = _rows()
    assert rows[0]["completed"] == 0
    assert session_repo.active_session() is None
