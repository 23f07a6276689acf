"""
# Points in time bound to a zone.

# An &Instant is an epoch millisecond count, &Instant.ts, paired with the zone
# whose offset determines its local calendar fields. Calendar arithmetic works on the
# local fields and resolves the offset again afterwards; millisecond arithmetic
# works on the epoch count.

# Instants that could not be constructed carry an &.core.Invalid and
# report &None for their fields.
"""
import math
import logging

from . import core
from . import calendar
from . import gregorian
from . import iso
from . import zone as zones
from .duration import Duration, normalize_unit
from .settings import settings

logger = logging.getLogger(__name__)

ms_per_second = 1000
ms_per_minute = 60 * ms_per_second
ms_per_hour = 60 * ms_per_minute
ms_per_day = 24 * ms_per_hour

gregorian_units = ('year', 'month', 'day', 'hour', 'minute', 'second', 'millisecond')
ordinal_units = ('year', 'ordinal', 'hour', 'minute', 'second', 'millisecond')
week_units = ('week_year', 'week_number', 'weekday', 'hour', 'minute', 'second', 'millisecond')

default_values = {
	'month': 1,
	'day': 1,
	'ordinal': 1,
	'week_number': 1,
	'weekday': 1,
	'hour': 0,
	'minute': 0,
	'second': 0,
	'millisecond': 0,
}

#: Accepted field names and their canonical form.
field_names = {
	'year': 'year', 'years': 'year',
	'quarter': 'quarter', 'quarters': 'quarter',
	'month': 'month', 'months': 'month',
	'day': 'day', 'days': 'day',
	'ordinal': 'ordinal',
	'week_year': 'week_year',
	'week_number': 'week_number',
	'weekday': 'weekday', 'weekdays': 'weekday',
	'hour': 'hour', 'hours': 'hour',
	'minute': 'minute', 'minutes': 'minute',
	'second': 'second', 'seconds': 'second',
	'millisecond': 'millisecond', 'milliseconds': 'millisecond',
}

def normalize_fields(fields):
	"""
	# Canonicalize the field names of &fields and drop &None values.

	# [ Exceptions ]
	# /&core.InvalidUnitError/
		# A key is not a calendar field.
	# /&core.InvalidArgumentError/
		# A value is not a number.
	"""
	normalized = {}
	for k, v in fields.items():
		if v is None:
			continue
		try:
			name = field_names[k]
		except KeyError:
			raise core.InvalidUnitError(k)
		if isinstance(v, bool) or not isinstance(v, (int, float)):
			raise core.InvalidArgumentError(f"invalid value {v!r} for field {k!r}")
		normalized[name] = v
	return normalized

def fields_from_local(ms):
	"""
	# Gregorian coordinate with time fields for a count of local milliseconds.
	"""
	days, remainder = divmod(ms, ms_per_day)
	year, month, day = gregorian.date_from_days(days)
	hour, remainder = divmod(remainder, ms_per_hour)
	minute, remainder = divmod(remainder, ms_per_minute)
	second, millisecond = divmod(remainder, ms_per_second)
	return {
		'year': year,
		'month': month,
		'day': day,
		'hour': hour,
		'minute': minute,
		'second': second,
		'millisecond': millisecond,
	}

def local_from_fields(fields):
	"""
	# Count of local milliseconds for a Gregorian coordinate. Fields may overflow.
	"""
	days = gregorian.days_from_date((fields['year'], fields['month'], fields['day']))
	return (
		days * ms_per_day
		+ fields.get('hour', 0) * ms_per_hour
		+ fields.get('minute', 0) * ms_per_minute
		+ fields.get('second', 0) * ms_per_second
		+ fields.get('millisecond', 0)
	)

def fix_offset(local, offset, zone):
	"""
	# Find the epoch milliseconds and offset of the &local time in &zone.

	# [ Parameters ]
	# /local/
		# Local milliseconds.
	# /offset/
		# The offset guess in minutes.
	# /zone/
		# The zone to resolve the offset in.

	# [ Returns ]
	# `(ts, offset)`. Local times inside of a transition gap resolve with the later offset.
	"""
	guess = local - (offset * ms_per_minute)
	o2 = zone.offset(guess)
	if offset == o2:
		return (guess, offset)

	guess -= (o2 - offset) * ms_per_minute
	o3 = zone.offset(guess)
	if o2 == o3:
		return (guess, o2)

	return (local - (min(o2, o3) * ms_per_minute), max(o2, o3))

def default_zone():
	return zones.normalize_zone(settings.default_zone, zones.SystemZone.instance())

def _units(units):
	if isinstance(units, str):
		units = (units,)
	return [normalize_unit(u) for u in units]

class Instant(object):
	"""
	# An immutable point in time in a zone.

	# [ Properties ]
	# /ts/
		# Milliseconds since the unix epoch; &None when invalid.
	# /zone/
		# The &.abstract.Zone determining the local fields.
	# /offset/
		# The offset of &zone at &ts in minutes.
	# /invalidity/
		# &None or the &core.Invalid describing why the instant could not be constructed.
	"""
	__slots__ = ('ts', 'zone', 'offset', 'invalidity', 'fields', '_week')

	def __init__(self, ts, zone, offset=None, invalidity=None):
		self.zone = zone
		self.invalidity = invalidity
		self._week = None

		if invalidity is None:
			self.ts = math.floor(ts)
			self.offset = zone.offset(self.ts) if offset is None else offset
			self.fields = fields_from_local(self.ts + self.offset * ms_per_minute)
		else:
			self.ts = None
			self.offset = None
			self.fields = {}

	@classmethod
	def invalid(Class, reason, explanation=None):
		"""
		# Construct an invalid instant, or raise &core.InvalidInstantError when
		# &settings.throw_on_invalid is enabled.
		"""
		if not reason:
			raise core.InvalidArgumentError("need to specify a reason the instant is invalid")
		invalid = core.Invalid.of(reason, explanation)
		if settings.throw_on_invalid:
			raise core.InvalidInstantError(invalid)
		logger.debug("invalid instant: %s", invalid)
		return Class(None, zones.FixedOffsetZone.utc_instance(), invalidity=invalid)

	@classmethod
	def _resolve_zone(Class, zone):
		z = zones.normalize_zone(zone, default_zone())
		if not z.is_valid:
			return None, Class.invalid("unsupported zone", f"the zone {z.name!r} is not supported")
		return z, None

	@classmethod
	def from_millis(Class, ms, zone=None):
		"""
		# Construct the instant &ms milliseconds after the unix epoch.
		"""
		if isinstance(ms, bool) or not isinstance(ms, (int, float)):
			raise core.InvalidArgumentError(
				f"from_millis requires a numerical input, but received a {type(ms).__name__}"
			)
		z, failure = Class._resolve_zone(zone)
		if failure is not None:
			return failure
		return Class(ms, z)

	@classmethod
	def now(Class, zone=None):
		return Class.from_millis(settings.now(), zone)

	@classmethod
	def of(Class, zone=None, specific_offset=None, **fields):
		"""
		# Construct an instant from calendar fields in &zone.

		# Exactly one calendar variant is used: Gregorian fields, ordinal fields
		# (`year` and `ordinal`), or week fields (`week_year`, `week_number`, `weekday`).
		# Units larger than the largest given unit default to the current time;
		# smaller units default to their minimums.

		# [ Parameters ]
		# /zone/
			# Zone specifier for &zones.normalize_zone; the configured default when &None.
		# /specific_offset/
			# Offset, in minutes, to try first when resolving the local time.

		# [ Exceptions ]
		# /&core.ConflictingSpecificationError/
			# Week fields were mixed with Gregorian or ordinal fields, or an
			# ordinal was mixed with a month or day.
		"""
		z, failure = Class._resolve_zone(zone)
		if failure is not None:
			return failure

		normalized = normalize_fields(fields)
		normalized.pop('quarter', None)

		contains_ordinal = 'ordinal' in normalized
		contains_gregorian_md = 'month' in normalized or 'day' in normalized
		contains_gregorian = 'year' in normalized or contains_gregorian_md
		definite_week = 'week_year' in normalized or 'week_number' in normalized

		if (contains_gregorian or contains_ordinal) and definite_week:
			raise core.ConflictingSpecificationError(
				"can't mix week_year/week_number units with year/month/day or ordinals"
			)
		if contains_gregorian_md and contains_ordinal:
			raise core.ConflictingSpecificationError("can't mix ordinal dates with month/day")

		use_week = definite_week or ('weekday' in normalized and not contains_gregorian)

		ts_now = settings.now()
		provisional = z.offset(ts_now) if specific_offset is None else specific_offset
		now = fields_from_local(ts_now + provisional * ms_per_minute)

		if use_week:
			units = week_units
			now = calendar.gregorian_to_week(now)
		elif contains_ordinal:
			units = ordinal_units
			now = calendar.gregorian_to_ordinal(now)
		else:
			units = gregorian_units

		found_first = False
		for u in units:
			if u in normalized:
				found_first = True
			elif found_first:
				normalized[u] = default_values[u]
			else:
				normalized[u] = now[u]

		if use_week:
			invalid = calendar.has_invalid_week_data(normalized)
		elif contains_ordinal:
			invalid = calendar.has_invalid_ordinal_data(normalized)
		else:
			invalid = calendar.has_invalid_gregorian_data(normalized)
		invalid = invalid or calendar.has_invalid_time_data(normalized)
		if invalid is not None:
			return Class.invalid(invalid.reason, invalid.explanation)

		normalized = {k: int(v) for k, v in normalized.items()}
		if use_week:
			coordinate = calendar.week_to_gregorian(normalized)
		elif contains_ordinal:
			coordinate = calendar.ordinal_to_gregorian(normalized)
		else:
			coordinate = normalized

		ts, offset = fix_offset(local_from_fields(coordinate), provisional, z)
		pit = Class(ts, z, offset)

		if 'weekday' in normalized and contains_gregorian and normalized['weekday'] != pit.weekday:
			return Class.invalid(
				"mismatched weekday",
				f"you can't specify both a weekday of {normalized['weekday']} and a date of {pit.to_iso()}"
			)

		return pit

	@classmethod
	def _from_parsed(Class, fields, parsed_zone, zone, set_zone, description, text, specific_offset=None):
		if not fields and parsed_zone is None:
			return Class.invalid("unparsable", f"the input {text!r} can't be parsed as {description}")

		pit = Class.of(zone=parsed_zone or zone, specific_offset=specific_offset, **fields)
		if set_zone or not pit.is_valid:
			return pit
		return pit.set_zone(zone)

	@classmethod
	def from_iso(Class, text, zone=None, set_zone=False):
		"""
		# Parse an ISO 8601 date-time.

		# Text without an offset is interpreted in &zone. When &set_zone is true,
		# the result keeps the offset found in the text; otherwise it is converted into &zone.
		"""
		parsed = iso.parse_instant(text)
		if parsed is None:
			return Class.invalid("unparsable", f"the input {text!r} can't be parsed as ISO 8601")

		fields, offset = parsed
		parsed_zone = None if offset is None else zones.FixedOffsetZone.instance(offset)
		return Class._from_parsed(fields, parsed_zone, zone, set_zone, 'ISO 8601', text)

	@classmethod
	def from_format(Class, text, fmt, zone=None, locale=None, set_zone=False):
		"""
		# Parse &text according to the token pattern &fmt.

		# [ Exceptions ]
		# /&core.ConflictingSpecificationError/
			# &fmt mixes 12-hour and 24-hour directives.
		"""
		from . import format
		from .locale import Locale

		result, parsed_zone, specific_offset, reason = format.parse(Locale.create(locale), text, fmt)
		if reason is not None:
			return Class.invalid(reason)
		return Class._from_parsed(
			result or {}, parsed_zone, zone, set_zone,
			f"format {fmt}", text, specific_offset=specific_offset
		)

	def _clone(self, ts, offset=None, zone=None):
		return self.__class__(ts, zone or self.zone, offset)

	def __repr__(self):
		if self.invalidity is not None:
			return f"<{self.__class__.__name__}: {self.invalidity!r}>"
		return f"<{self.__class__.__name__}: {self.to_iso()} {self.zone.name}>"

	def __str__(self):
		return self.to_iso() or 'Invalid Instant'

	@property
	def is_valid(self):
		return self.invalidity is None

	@property
	def invalid_reason(self):
		return None if self.invalidity is None else self.invalidity.reason

	@property
	def invalid_explanation(self):
		return None if self.invalidity is None else self.invalidity.explanation

	@property
	def zone_name(self):
		return self.zone.name

	@property
	def is_offset_fixed(self):
		return self.is_valid and self.zone.is_universal

	# Fields

	@property
	def year(self):
		return self.fields.get('year')

	@property
	def quarter(self):
		if not self.is_valid:
			return None
		return (self.fields['month'] + 2) // 3

	@property
	def month(self):
		return self.fields.get('month')

	@property
	def day(self):
		return self.fields.get('day')

	@property
	def hour(self):
		return self.fields.get('hour')

	@property
	def minute(self):
		return self.fields.get('minute')

	@property
	def second(self):
		return self.fields.get('second')

	@property
	def millisecond(self):
		return self.fields.get('millisecond')

	@property
	def ordinal(self):
		if not self.is_valid:
			return None
		f = self.fields
		return calendar.compute_ordinal(f['year'], f['month'], f['day'])

	def _week_data(self):
		if self._week is None:
			self._week = calendar.gregorian_to_week(self.fields)
		return self._week

	@property
	def week_year(self):
		return self._week_data()['week_year'] if self.is_valid else None

	@property
	def week_number(self):
		return self._week_data()['week_number'] if self.is_valid else None

	@property
	def weekday(self):
		return self._week_data()['weekday'] if self.is_valid else None

	@property
	def days_in_month(self):
		return gregorian.days_in_month(self.year, self.month) if self.is_valid else None

	@property
	def days_in_year(self):
		return gregorian.days_in_year(self.year) if self.is_valid else None

	@property
	def is_in_leap_year(self):
		return self.is_valid and gregorian.year_is_leap(self.year)

	@property
	def weeks_in_week_year(self):
		return gregorian.weeks_in_week_year(self.week_year) if self.is_valid else None

	def to_mapping(self):
		"""
		# The Gregorian coordinate with time fields.
		"""
		return dict(self.fields)

	# Ordering

	def to_millis(self):
		return self.ts

	def _comparable(self, other):
		return isinstance(other, Instant) and self.is_valid and other.is_valid

	def __lt__(self, other):
		if not isinstance(other, Instant):
			return NotImplemented
		return self._comparable(other) and self.ts < other.ts

	def __le__(self, other):
		if not isinstance(other, Instant):
			return NotImplemented
		return self._comparable(other) and self.ts <= other.ts

	def __gt__(self, other):
		if not isinstance(other, Instant):
			return NotImplemented
		return self._comparable(other) and self.ts > other.ts

	def __ge__(self, other):
		if not isinstance(other, Instant):
			return NotImplemented
		return self._comparable(other) and self.ts >= other.ts

	def __eq__(self, other):
		if not isinstance(other, Instant):
			return NotImplemented
		return self._comparable(other) and self.ts == other.ts and self.zone.equals(other.zone)

	def __hash__(self):
		return hash((self.ts, self.zone.name, self.invalidity))

	# Arithmetic

	def plus(self, duration):
		"""
		# Add a &Duration, a unit mapping, or a number of milliseconds.

		# Years, quarters, and months move the local calendar fields, clamping the
		# day to the length of the target month; weeks and days move the local date.
		# Fractions of those units and all smaller units are added as elapsed time.
		"""
		if not self.is_valid:
			return self
		d = Duration.from_duration_like(duration)
		get = d.values.get

		years = get('years', 0)
		quarters = get('quarters', 0)
		months = get('months', 0)
		weeks = get('weeks', 0)
		days = get('days', 0)

		year = self.year + math.trunc(years)
		month = self.month + math.trunc(months) + math.trunc(quarters) * 3
		day = min(self.day, gregorian.days_in_month(year, month)) + math.trunc(days) + math.trunc(weeks) * 7

		elapsed = Duration.from_mapping({
			'years': years - math.trunc(years),
			'quarters': quarters - math.trunc(quarters),
			'months': months - math.trunc(months),
			'weeks': weeks - math.trunc(weeks),
			'days': days - math.trunc(days),
			'hours': get('hours', 0),
			'minutes': get('minutes', 0),
			'seconds': get('seconds', 0),
			'milliseconds': get('milliseconds', 0),
		}).to_millis()

		fields = dict(self.fields, year=year, month=month, day=day)
		ts, offset = fix_offset(local_from_fields(fields), self.offset, self.zone)
		if elapsed != 0:
			ts += elapsed
			offset = None

		return self._clone(ts, offset)

	def minus(self, duration):
		if not self.is_valid:
			return self
		return self.plus(Duration.from_duration_like(duration).negate())

	def set(self, **fields):
		"""
		# Construct the instant with the given fields replaced, keeping the zone.

		# When the day is not given, it is clamped to the length of the resulting month.
		"""
		if not self.is_valid:
			return self

		normalized = normalize_fields(fields)
		normalized.pop('quarter', None)
		setting_week = any(k in normalized for k in ('week_year', 'week_number', 'weekday'))
		contains_ordinal = 'ordinal' in normalized
		contains_gregorian_md = 'month' in normalized or 'day' in normalized
		contains_gregorian = 'year' in normalized or contains_gregorian_md

		if (contains_gregorian or contains_ordinal) and setting_week:
			raise core.ConflictingSpecificationError(
				"can't mix weekday/week_year/week_number units with year/month/day or ordinals"
			)
		if contains_gregorian_md and contains_ordinal:
			raise core.ConflictingSpecificationError("can't mix ordinal dates with month/day")

		if setting_week:
			mixed = dict(calendar.gregorian_to_week(self.fields), **normalized)
			mixed = calendar.week_to_gregorian(mixed)
		elif contains_ordinal:
			mixed = dict(calendar.gregorian_to_ordinal(self.fields), **normalized)
			mixed = calendar.ordinal_to_gregorian(mixed)
		else:
			mixed = dict(self.fields, **normalized)
			if 'day' not in normalized:
				mixed['day'] = min(gregorian.days_in_month(mixed['year'], mixed['month']), mixed['day'])

		ts, offset = fix_offset(local_from_fields(mixed), self.offset, self.zone)
		return self._clone(ts, offset)

	def start_of(self, unit):
		"""
		# The first millisecond of the &unit containing &self. Weeks start on Monday.
		"""
		if not self.is_valid:
			return self

		unit = normalize_unit(unit)
		if unit == 'milliseconds':
			return self

		o = {}
		cascade = ('years', 'quarters', 'months', 'weeks', 'days', 'hours', 'minutes', 'seconds')
		position = cascade.index(unit)
		if position <= 0:
			o['month'] = 1
		if position <= 2:
			o['day'] = 1
		if position <= 4:
			o['hour'] = 0
		if position <= 5:
			o['minute'] = 0
		if position <= 6:
			o['second'] = 0
		o['millisecond'] = 0

		if unit == 'quarters':
			o['month'] = ((self.quarter - 1) * 3) + 1
		if unit == 'weeks':
			o['weekday'] = 1

		return self.set(**o)

	def end_of(self, unit):
		"""
		# The last millisecond of the &unit containing &self.
		"""
		if not self.is_valid:
			return self
		unit = normalize_unit(unit)
		return self.start_of(unit).plus({unit: 1}).minus(1)

	def set_zone(self, zone=None, keep_local_time=False):
		"""
		# The same instant in &zone; or, with &keep_local_time, the same local
		# time in &zone.
		"""
		if not self.is_valid:
			return self

		z = zones.normalize_zone(zone, default_zone())
		if z.equals(self.zone):
			return self
		if not z.is_valid:
			return Instant.invalid("unsupported zone", f"the zone {z.name!r} is not supported")

		ts = self.ts
		offset = None
		if keep_local_time:
			local = self.ts + self.offset * ms_per_minute
			ts, offset = fix_offset(local, z.offset(self.ts), z)
		return self._clone(ts, offset, z)

	def to_utc(self, offset=0, keep_local_time=False):
		return self.set_zone(zones.FixedOffsetZone.instance(offset), keep_local_time)

	def to_local(self):
		return self.set_zone(default_zone())

	def diff(self, other, units=('milliseconds',), conversion_accuracy='casual'):
		"""
		# The difference `self - other` as a &Duration in &units.

		# [ Parameters ]
		# /other/
			# The &Instant to subtract.
		# /units/
			# A unit name or a sequence of unit names.
		# /conversion_accuracy/
			# `'casual'` or `'longterm'`; used for conversions between units.
		"""
		from . import diff

		if not self.is_valid or not other.is_valid:
			return Duration.invalid("created by diffing an invalid instant")

		units = _units(units)
		other_is_later = other.ts > self.ts
		earlier = self if other_is_later else other
		later = other if other_is_later else self
		d = diff.diff(earlier, later, units, conversion_accuracy)
		return d.negate() if other_is_later else d

	def diff_now(self, units=('milliseconds',), conversion_accuracy='casual'):
		return self.diff(Instant.now(self.zone), units, conversion_accuracy)

	def has_same(self, other, unit):
		"""
		# Whether &other falls in the same &unit as &self, as seen in &self's zone.
		"""
		if not self.is_valid or not other.is_valid:
			return False
		ms = other.ts
		adjusted = self.set_zone(other.zone, keep_local_time=True)
		return adjusted.start_of(unit).ts <= ms <= adjusted.end_of(unit).ts

	# Text

	def to_iso_date(self, extended=True):
		if not self.is_valid:
			return None
		return iso.format_date(self.year, self.month, self.day, extended)

	def to_iso_time(self, suppress_milliseconds=False, suppress_seconds=False,
			include_offset=True, extended=True):
		if not self.is_valid:
			return None
		s = iso.format_time(
			self.hour, self.minute, self.second, self.millisecond,
			extended=extended,
			suppress_seconds=suppress_seconds,
			suppress_milliseconds=suppress_milliseconds,
		)
		if include_offset:
			s += iso.format_offset(self.offset, self.zone.is_universal, extended)
		return s

	def to_iso(self, suppress_milliseconds=False, suppress_seconds=False,
			include_offset=True, extended=True):
		"""
		# The ISO 8601 form; &None when invalid.
		"""
		if not self.is_valid:
			return None
		date = self.to_iso_date(extended)
		time = self.to_iso_time(suppress_milliseconds, suppress_seconds, include_offset, extended)
		return date + 'T' + time

	def to_format(self, fmt, locale=None):
		"""
		# Render the instant with the token pattern &fmt.
		"""
		from . import format
		from .locale import Locale

		if not self.is_valid:
			return 'Invalid Instant'
		return format.render(self, fmt, Locale.create(locale))

