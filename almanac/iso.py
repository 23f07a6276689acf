"""
# ISO 8601 text forms of points in time and durations.

# The parsers return plain fields; &.instant.Instant and &.duration.Duration
# construct the values. Calendar dates, ordinal dates, and week dates are
# recognized in their extended and basic forms.
"""
import math
import re

from . import zone

_year = r'([+-]\d{6}|\d{4})'
_time = r'(\d\d)(?::?(\d\d)(?::?(\d\d)(?:[.,](\d{1,30}))?)?)?'
_offset = r'(Z|[+-]\d\d(?::?\d\d)?)'

def _timestamp(date):
	return re.compile(date + r'(?:[T ]' + _time + _offset + r'?)?', re.I)

calendar_date = _timestamp(_year + r'(?:-?(\d\d)(?:-?(\d\d))?)?')
ordinal_date = _timestamp(_year + r'-?(\d{3})')
week_date = _timestamp(r'(\d{4})-?W(\d\d)(?:-?(\d))?')
time_only = re.compile(r'T?' + _time + _offset + '?', re.I)

_duration_number = r'(-?\d{1,20}(?:\.\d{1,20})?)'
duration_pattern = re.compile(
	r'(-)?P'
	r'(?:' + _duration_number + r'Y)?'
	r'(?:' + _duration_number + r'M)?'
	r'(?:' + _duration_number + r'W)?'
	r'(?:' + _duration_number + r'D)?'
	r'(?:T'
		r'(?:' + _duration_number + r'H)?'
		r'(?:' + _duration_number + r'M)?'
		r'(?:(-?\d{1,20})(?:[.,](-?\d{1,20}))?S)?'
	r')?',
)

def parse_millis(fraction):
	"""
	# Convert the digits following a decimal separator into whole milliseconds.
	"""
	if not fraction:
		return 0
	return math.floor(float('0.' + fraction) * 1000)

def parse_offset(text):
	"""
	# Interpret `Z`, `+05`, `-0430`, or `+05:30` as minutes east of UTC.
	"""
	if text is None:
		return None
	if text.upper() == 'Z':
		return 0
	return zone.signed_offset(text[:3], text[3:].lstrip(':') or None)

def _time_fields(groups):
	hour, minute, second, fraction, offset = groups
	if hour is None:
		return {}, None
	fields = {
		'hour': int(hour),
		'minute': int(minute or 0),
		'second': int(second or 0),
		'millisecond': parse_millis(fraction),
	}
	return fields, parse_offset(offset)

def parse_instant(text):
	"""
	# Parse an ISO 8601 date-time.

	# [ Returns ]
	# &None when &text is not recognized, otherwise a pair: a calendar coordinate
	# of one variant with any time fields, and the offset in minutes or &None
	# when the text carries no offset.
	"""
	if not isinstance(text, str):
		return None
	text = text.strip()

	m = calendar_date.fullmatch(text)
	if m is not None:
		g = m.groups()
		fields = {
			'year': int(g[0]),
			'month': int(g[1] or 1),
			'day': int(g[2] or 1),
		}
		t, offset = _time_fields(g[3:])
		fields.update(t)
		return fields, offset

	m = ordinal_date.fullmatch(text)
	if m is not None:
		g = m.groups()
		fields = {'year': int(g[0]), 'ordinal': int(g[1])}
		t, offset = _time_fields(g[2:])
		fields.update(t)
		return fields, offset

	m = week_date.fullmatch(text)
	if m is not None:
		g = m.groups()
		fields = {
			'week_year': int(g[0]),
			'week_number': int(g[1]),
			'weekday': int(g[2] or 1),
		}
		t, offset = _time_fields(g[3:])
		fields.update(t)
		return fields, offset

	return None

def parse_time(text):
	"""
	# Parse an ISO 8601 time of day; same return convention as &parse_instant.
	"""
	m = time_only.fullmatch(text.strip()) if isinstance(text, str) else None
	if m is None:
		return None
	return _time_fields(m.groups())

def parse_duration(text):
	"""
	# Parse an ISO 8601 duration into a unit mapping; &None when unrecognized.
	"""
	if not isinstance(text, str):
		return None
	m = duration_pattern.fullmatch(text.strip())
	if m is None or text.strip() in ('P', '-P', 'PT', '-PT'):
		return None

	negative, years, months, weeks, days, hours, minutes, seconds, fraction = m.groups()
	sign = -1 if negative else 1

	def number(s):
		if s is None:
			return None
		v = float(s) if '.' in s else int(s)
		return v * sign

	values = {
		'years': number(years),
		'months': number(months),
		'weeks': number(weeks),
		'days': number(days),
		'hours': number(hours),
		'minutes': number(minutes),
		'seconds': number(seconds),
	}
	if fraction is not None:
		ms = parse_millis(fraction.lstrip('-'))
		if (seconds or '').startswith('-') or fraction.startswith('-'):
			ms = -ms
		values['milliseconds'] = ms * sign

	return {k: v for k, v in values.items() if v is not None}

def format_year(year):
	if 0 <= year <= 9999:
		return f"{year:04}"
	return ('-' if year < 0 else '+') + f"{abs(year):06}"

def format_date(year, month, day, extended=True):
	separator = '-' if extended else ''
	return separator.join((format_year(year), f"{month:02}", f"{day:02}"))

def format_time(hour, minute, second, millisecond,
		extended=True, suppress_seconds=False, suppress_milliseconds=False):
	"""
	# Render a time of day; zero seconds and milliseconds may be suppressed.
	"""
	separator = ':' if extended else ''
	s = f"{hour:02}{separator}{minute:02}"
	if suppress_seconds and second == 0 and millisecond == 0:
		return s
	s += f"{separator}{second:02}"
	if suppress_milliseconds and millisecond == 0:
		return s
	return s + f".{millisecond:03}"

def format_offset(offset, universal=False, extended=True):
	"""
	# Render an offset for inclusion in a timestamp; `Z` for universal zero offsets.
	"""
	if universal and offset == 0:
		return 'Z'
	return zone.format_offset(offset, 'short' if extended else 'techie')
