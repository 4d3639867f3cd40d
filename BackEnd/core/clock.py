from datetime import datetime, timezone

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

def local_today_str():
	"""Return local date as YYYY-MM-DD string."""
	return datetime.now().date().isoformat()

def split_mmss(seconds: int):
	"""Split a second count into (minutes, seconds)."""
	return seconds // 60, seconds % 60

def fmt_mmss(seconds: int) -> str:
	"""Format seconds as MM:SS (minutes may exceed 59)."""
	m, s = split_mmss(seconds)
	return f"{m:02}:{s:02}"

def fmt_hms(seconds: int) -> str:
	"""Format seconds as HH:MM:SS."""
	h = seconds // 3600
	m = (seconds % 3600) // 60
	s = seconds % 60
	return f"{h:02}:{m:02}:{s:02}"
