"""Daily and weekly focus statistics built from the focus log.

Every day gets "points": the share of started Work sessions that ran to
completion, as a percentage. Weeks are ISO weeks (Monday first) and always
list all seven days, with empty days filled in as zeros.
"""
import datetime
from dataclasses import dataclass, field

from BackEnd.repos import session_repo

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _percent(done, total):
	if not total:
		return 0.0
	return done / total * 100


@dataclass(frozen=True)
class DayRecord:
	day: datetime.date
	started: int = 0
	completed: int = 0
	focus_sec: int = 0

	@property
	def day_name(self):
		return DAY_NAMES[self.day.weekday()]

	@property
	def points(self):
		return _percent(self.completed, self.started)


@dataclass
class WeekSummary:
	year: int
	week: int
	days: list = field(default_factory=list)

	@property
	def total_started(self):
		return sum(d.started for d in self.days)

	@property
	def total_completed(self):
		return sum(d.completed for d in self.days)

	@property
	def total_focus_sec(self):
		return sum(d.focus_sec for d in self.days)

	@property
	def weekly_points(self):
		return _percent(self.total_completed, self.total_started)

	@property
	def start(self):
		return datetime.date.fromisocalendar(self.year, self.week, 1)


def date_range(start: datetime.date, end: datetime.date):
	day = start
	while day <= end:
		yield day
		day += datetime.timedelta(days=1)


def fill_days(records, start: datetime.date, end: datetime.date):
	"""One DayRecord per day in [start, end]; days without data are zeros."""
	by_day = {r.day: r for r in records}
	return [by_day.get(d, DayRecord(d)) for d in date_range(start, end)]


def week_range(offset: int = 0, today: datetime.date = None):
	"""Monday..Sunday of the week `offset` weeks before the current one."""
	today = today or datetime.date.today()
	monday = today - datetime.timedelta(days=today.weekday()) - datetime.timedelta(weeks=offset)
	return [monday + datetime.timedelta(days=i) for i in range(7)]


def daily_records(start: datetime.date, end: datetime.date, repo=session_repo):
	rows = repo.daily_rows(start.isoformat(), end.isoformat())
	records = [
		DayRecord(
			day=datetime.date.fromisoformat(row["local_date"]),
			started=int(row["started"] or 0),
			completed=int(row["completed"] or 0),
			focus_sec=int(row["focus_sec"] or 0),
		)
		for row in rows
	]
	return fill_days(records, start, end)


def weekly_breakdown(records):
	"""Group day records into ISO weeks, newest first."""
	weeks = {}
	for record in records:
		year, week, _ = record.day.isocalendar()
		weeks.setdefault((year, week), []).append(record)

	summaries = []
	for (year, week), days in weeks.items():
		monday = datetime.date.fromisocalendar(year, week, 1)
		sunday = monday + datetime.timedelta(days=6)
		summaries.append(WeekSummary(year, week, fill_days(days, monday, sunday)))
	summaries.sort(key=lambda w: (w.year, w.week), reverse=True)
	return summaries
