import datetime
import sqlite3
from pathlib import Path
from BackEnd.core.paths import db_path
from BackEnd.core.clock import utc_now_iso, local_today_str

SCHEMA_PATH = Path(__file__).parent.parent.parent / "SQL" / "schema.sql"

def connect():
	"""Open SQLite connection and ensure schema is applied."""
	conn = sqlite3.connect(db_path())
	conn.row_factory = sqlite3.Row
	with open(SCHEMA_PATH, encoding="utf-8") as f:
		conn.executescript(f.read())
	return conn

def start_session(mode="work", planned_sec=None, local_date=None):
	"""Open a focus session row and return its id."""
	now_utc = utc_now_iso()
	day = local_date or local_today_str()
	with connect() as conn:
		cur = conn.execute(
			"""
			INSERT INTO focus_sessions (start_utc, local_date, mode, planned_sec, updated_at)
			VALUES (?, ?, ?, ?, ?)
			""",
			(now_utc, day, mode, planned_sec, now_utc)
		)
		return cur.lastrowid

def update_elapsed(session_id, elapsed_sec):
	"""Update elapsed_sec and updated_at for an open session."""
	now = utc_now_iso()
	with connect() as conn:
		conn.execute(
			"UPDATE focus_sessions SET elapsed_sec=?, updated_at=? WHERE id=? AND end_utc IS NULL",
			(int(elapsed_sec), now, session_id)
		)

def stop_session(session_id, elapsed_sec, completed=False):
	"""Close an open session. Returns the stored elapsed seconds, or None if
	the session was not open."""
	now_utc = utc_now_iso()
	with connect() as conn:
		cur = conn.execute(
			"SELECT id FROM focus_sessions WHERE id=? AND end_utc IS NULL", (session_id,))
		if cur.fetchone() is None:
			return None
		conn.execute(
			"""
			UPDATE focus_sessions SET end_utc=?, elapsed_sec=?, completed=?, updated_at=? WHERE id=?
			""",
			(now_utc, int(elapsed_sec), 1 if completed else 0, now_utc, session_id)
		)
		return int(elapsed_sec)

def active_session():
	"""Return dict for the open session (end_utc IS NULL), or None."""
	with connect() as conn:
		cur = conn.execute(
			"SELECT id, start_utc, local_date, mode, planned_sec, elapsed_sec FROM focus_sessions "
			"WHERE end_utc IS NULL ORDER BY start_utc DESC, id DESC LIMIT 1"
		)
		row = cur.fetchone()
		return dict(row) if row else None

def close_dangling_sessions():
	"""Close sessions left open by a crash; returns how many were closed."""
	now_utc = utc_now_iso()
	with connect() as conn:
		cur = conn.execute(
			"UPDATE focus_sessions SET end_utc=?, updated_at=? WHERE end_utc IS NULL",
			(now_utc, now_utc)
		)
		return cur.rowcount

def today_total_seconds():
	"""Sum elapsed_sec for sessions with local_date = today."""
	today = local_today_str()
	with connect() as conn:
		cur = conn.execute(
			"SELECT COALESCE(SUM(elapsed_sec),0) as total FROM focus_sessions WHERE local_date=?",
			(today,)
		)
		row = cur.fetchone()
		return row["total"] if row else 0

def daily_rows(start_date, end_date):
	"""Per-day aggregates for the inclusive YYYY-MM-DD range.

	Each dict has local_date, started, completed and focus_sec.
	"""
	with connect() as conn:
		cur = conn.execute(
			"""
			SELECT local_date,
				COUNT(*) as started,
				COALESCE(SUM(completed), 0) as completed,
				COALESCE(SUM(elapsed_sec), 0) as focus_sec
			FROM focus_sessions
			WHERE local_date BETWEEN ? AND ? AND mode='work'
			GROUP BY local_date
			ORDER BY local_date
			""",
			(start_date, end_date)
		)
		return [dict(row) for row in cur.fetchall()]

def sessions_between(start_date, end_date):
	"""All sessions in the inclusive range, newest first."""
	with connect() as conn:
		cur = conn.execute(
			"SELECT local_date, start_utc, end_utc, mode, planned_sec, elapsed_sec, completed "
			"FROM focus_sessions WHERE local_date BETWEEN ? AND ? ORDER BY start_utc DESC, id DESC",
			(start_date, end_date)
		)
		return [dict(row) for row in cur.fetchall()]

def get_daily_streak(today=None):
	"""
	Calculate the current daily streak - consecutive days with at least one
	completed focus session, counted back from today.
	Returns 0 if today has none yet.
	"""
	today = today or datetime.date.today()
	with connect() as conn:
		cur = conn.execute(
			"SELECT DISTINCT local_date FROM focus_sessions WHERE completed = 1 ORDER BY local_date DESC"
		)
		dates = [datetime.date.fromisoformat(row["local_date"]) for row in cur.fetchall()]

	if today not in dates:
		return 0

	streak = 0
	current_date = today
	for study_date in dates:
		if study_date > current_date:
			continue
		if study_date == current_date:
			streak += 1
			current_date -= datetime.timedelta(days=1)
		else:
			# Gap found - streak broken
			break

	return streak

def get_total_days_studied():
	"""Number of distinct days with any focused time."""
	with connect() as conn:
		cur = conn.execute(
			"SELECT COUNT(DISTINCT local_date) as total FROM focus_sessions WHERE elapsed_sec > 0"
		)
		row = cur.fetchone()
		return row["total"] if row else 0

def get_total_hours_studied():
	"""Total focused hours across all sessions."""
	with connect() as conn:
		cur = conn.execute(
			"SELECT COALESCE(SUM(elapsed_sec), 0) as total FROM focus_sessions WHERE elapsed_sec > 0"
		)
		row = cur.fetchone()
		total_seconds = row["total"] if row else 0
		return total_seconds / 3600.0
