"""
# Half-open intervals of points in time.

# An &Interval contains its start and excludes its end. Valid intervals have
# `start <= end`; intervals that could not be constructed carry an &.core.Invalid
# instead of endpoints. The set operations, &Interval.merge, &Interval.xor and
# &Interval.difference, produce sorted, disjoint, non-empty intervals.

#!python
	from almanac.instant import Instant
	from almanac.interval import Interval

	a = Interval.from_instants(Instant.of(year=2024, month=1, day=1), Instant.of(year=2024, month=1, day=5))
	b = Interval.from_instants(Instant.of(year=2024, month=1, day=3), Instant.of(year=2024, month=1, day=7))
	assert Interval.xor([a, b]) == [
		Interval.from_instants(a.start, b.start),
		Interval.from_instants(a.end, b.end),
	]
"""
import math
import collections.abc
import logging

from . import abstract
from . import core
from .duration import Duration
from .instant import Instant
from .settings import settings

logger = logging.getLogger(__name__)

#: Text of invalid intervals.
invalid_text = "Invalid Interval"

def friendly_instant(obj) -> abstract.Point:
	"""
	# Interpret an &Instant, epoch milliseconds, or a field mapping as an &Instant.
	"""
	if isinstance(obj, Instant):
		return obj
	elif isinstance(obj, (int, float)) and not isinstance(obj, bool):
		return Instant.from_millis(obj)
	elif isinstance(obj, collections.abc.Mapping):
		return Instant.of(**obj)
	elif obj is None:
		return None
	raise core.InvalidArgumentError(f"unknown instant argument {obj!r} of type {type(obj).__name__}")

def validate_endpoints(start, end):
	"""
	# The invalid &Interval describing a problem with &start and &end; &None if they are usable.
	"""
	if start is None or not start.is_valid:
		return Interval.invalid("missing or invalid start")
	elif end is None or not end.is_valid:
		return Interval.invalid("missing or invalid end")
	elif end < start:
		return Interval.invalid(
			"end before start",
			"the end of an interval must be after its start, "
			f"but you had start={start.to_iso()} and end={end.to_iso()}"
		)
	return None

class Interval(tuple):
	"""
	# A half-open range of points in time: `(start, end, invalidity)`.

	# [ Properties ]
	# /start/
		# The first point contained; &None when invalid.
	# /end/
		# The first point after the interval; &None when invalid.
	# /invalidity/
		# &None or the &core.Invalid describing why the interval could not be constructed.
	"""
	__slots__ = ()

	@classmethod
	def invalid(Class, reason, explanation=None):
		"""
		# Construct an invalid interval, or raise &core.InvalidIntervalError when
		# &settings.throw_on_invalid is enabled.
		"""
		if not reason:
			raise core.InvalidArgumentError("need to specify a reason the interval is invalid")
		invalid = reason if isinstance(reason, core.Invalid) else core.Invalid.of(reason, explanation)
		if settings.throw_on_invalid:
			raise core.InvalidIntervalError(invalid)
		logger.debug("invalid interval: %s", invalid)
		return Class((None, None, invalid))

	@classmethod
	def from_instants(Class, start, end):
		"""
		# Construct the interval from &start up to, but not including, &end.
		"""
		s = friendly_instant(start)
		e = friendly_instant(end)
		failure = validate_endpoints(s, e)
		if failure is not None:
			return failure
		return Class((s, e, None))

	@classmethod
	def after(Class, start, duration):
		"""
		# The interval of &duration beginning at &start.
		"""
		d = Duration.from_duration_like(duration)
		s = friendly_instant(start)
		return Class.from_instants(s, s.plus(d))

	@classmethod
	def before(Class, end, duration):
		"""
		# The interval of &duration ending at &end.
		"""
		d = Duration.from_duration_like(duration)
		e = friendly_instant(end)
		return Class.from_instants(e.minus(d), e)

	@classmethod
	def from_iso(Class, text, zone=None, set_zone=False):
		"""
		# Parse `<start>/<end>`, `<start>/<duration>`, or `<duration>/<end>`.
		"""
		s, _, e = (text or '').partition('/')
		if s and e:
			start = Instant.from_iso(s, zone=zone, set_zone=set_zone)
			end = Instant.from_iso(e, zone=zone, set_zone=set_zone)

			if start.is_valid and end.is_valid:
				return Class.from_instants(start, end)
			elif start.is_valid:
				d = Duration.from_iso(e)
				if d.is_valid:
					return Class.after(start, d)
			elif end.is_valid:
				d = Duration.from_iso(s)
				if d.is_valid:
					return Class.before(end, d)

		return Class.invalid("unparsable", f"the input {text!r} can't be parsed as ISO 8601")

	@staticmethod
	def merge(intervals):
		"""
		# Combine overlapping and abutting intervals.

		# Invalid intervals are ignored. The result is sorted by start.
		"""
		found = []
		current = None
		for item in sorted((i for i in intervals if i.is_valid), key=lambda i: i[0].to_millis()):
			if current is None:
				current = item
			elif current.overlaps(item) or current.abuts_start(item):
				current = current.union(item)
			else:
				found.append(current)
				current = item

		if current is not None:
			found.append(current)
		return found

	@staticmethod
	def xor(intervals):
		"""
		# The intervals covered by exactly one of &intervals.

		# Invalid intervals are ignored.
		"""
		events = []
		for i in intervals:
			if i.is_valid:
				events.append((i[0], 1))
				events.append((i[1], -1))
		# Stable: simultaneous events keep their input order.
		events.sort(key=lambda x: x[0].to_millis())

		results = []
		start = None
		count = 0
		for pit, change in events:
			count += change
			if count == 1:
				start = pit
			else:
				if start is not None and start.to_millis() != pit.to_millis():
					results.append(Interval.from_instants(start, pit))
				start = None

		return Interval.merge(results)

	def __str__(self):
		if not self.is_valid:
			return invalid_text
		return f"[{self[0].to_iso()} – {self[1].to_iso()})"

	def __repr__(self):
		if not self.is_valid:
			return f"<{self.__class__.__name__}: {self[2]!r}>"
		return f"<{self.__class__.__name__}: {self}>"

	@property
	def start(self):
		return self[0]

	@property
	def end(self):
		return self[1]

	@property
	def invalidity(self):
		return self[2]

	@property
	def is_valid(self):
		return self[2] is None

	@property
	def invalid_reason(self):
		return None if self[2] is None else self[2].reason

	@property
	def invalid_explanation(self):
		return None if self[2] is None else self[2].explanation

	def length(self, unit='milliseconds'):
		"""
		# The length of the interval in &unit; &None when invalid.
		"""
		if not self.is_valid:
			return None
		return self.to_duration(unit).get(unit)

	def count(self, unit='milliseconds'):
		"""
		# The number of &unit periods the interval touches, counting partial periods.
		"""
		if not self.is_valid:
			return None
		s = self[0].start_of(unit)
		e = self[1].start_of(unit)
		return math.floor(e.diff(s, unit).get(unit)) + 1

	def has_same(self, unit):
		"""
		# Whether the interval lies within a single &unit period.
		"""
		if not self.is_valid:
			return False
		return self.is_empty() or self[1].minus(1).has_same(self[0], unit)

	def is_empty(self):
		if not self.is_valid:
			return False
		return self[0].to_millis() == self[1].to_millis()

	def is_after(self, pit):
		"""
		# Whether the interval starts after &pit.
		"""
		if not self.is_valid:
			return False
		return self[0] > pit

	def is_before(self, pit):
		"""
		# Whether the interval ends at or before &pit.
		"""
		if not self.is_valid:
			return False
		return self[1] <= pit

	def contains(self, pit):
		if not self.is_valid:
			return False
		return self[0] <= pit and self[1] > pit

	def set(self, start=None, end=None):
		"""
		# Construct an interval replacing &start, &end, or both.
		"""
		if not self.is_valid:
			return self
		if start is None and end is None:
			return Interval.invalid("both start and end are missing")
		return Interval.from_instants(
			self[0] if start is None else start,
			self[1] if end is None else end,
		)

	def split_at(self, *instants):
		"""
		# Cut the interval at the given points.

		# Points outside of the interval or at its start are ignored, and
		# empty intervals produce no pieces.
		"""
		if not self.is_valid or self.is_empty():
			return []

		s, e = self[0], self[1]
		points = {}
		for x in map(friendly_instant, instants):
			if x.is_valid and s < x < e:
				points.setdefault(x.to_millis(), x)

		results = []
		cursor = s
		for ms in sorted(points):
			results.append(Interval.from_instants(cursor, points[ms]))
			cursor = points[ms]
		results.append(Interval.from_instants(cursor, e))
		return results

	def split_by(self, duration):
		"""
		# Cut the interval into consecutive pieces of &duration.

		# The cuts are measured from the start, `start + duration * k`, so that calendar
		# units do not drift; the last piece is clipped to the end. Empty for invalid
		# intervals and durations that are not positive.
		"""
		d = Duration.from_duration_like(duration)
		if not self.is_valid or not d.is_valid or d.to_millis() <= 0:
			return []

		s, e = self[0], self[1]
		results = []
		cursor = s
		k = 1
		while cursor < e:
			added = s.plus(d.map_units(lambda x, unit: x * k))
			following = e if added.to_millis() > e.to_millis() else added
			results.append(Interval.from_instants(cursor, following))
			cursor = following
			k += 1

		return results

	def divide_equally(self, count):
		"""
		# Split the interval into &count pieces of equal length.
		"""
		if not self.is_valid or count < 1:
			return []
		return self.split_by(self.length() / count)[:count]

	def overlaps(self, other):
		if not self.is_valid or not other.is_valid:
			return False
		return self[1] > other[0] and self[0] < other[1]

	def abuts_start(self, other):
		"""
		# Whether &self ends where &other starts.
		"""
		if not self.is_valid or not other.is_valid:
			return False
		return self[1].to_millis() == other[0].to_millis()

	def abuts_end(self, other):
		"""
		# Whether &other ends where &self starts.
		"""
		if not self.is_valid or not other.is_valid:
			return False
		return other[1].to_millis() == self[0].to_millis()

	def engulfs(self, other):
		if not self.is_valid or not other.is_valid:
			return False
		return self[0] <= other[0] and self[1] >= other[1]

	def equals(self, other):
		if not self.is_valid or not other.is_valid:
			return False
		return self[0] == other[0] and self[1] == other[1]

	def intersection(self, other):
		"""
		# The interval covered by both &self and &other; &None when they do not overlap.
		"""
		if not self.is_valid or not other.is_valid:
			return self
		s = self[0] if self[0] > other[0] else other[0]
		e = self[1] if self[1] < other[1] else other[1]
		if s >= e:
			return None
		return Interval.from_instants(s, e)

	def union(self, other):
		"""
		# The interval from the earliest start to the latest end.
		"""
		if not self.is_valid or not other.is_valid:
			return self
		s = self[0] if self[0] < other[0] else other[0]
		e = self[1] if self[1] > other[1] else other[1]
		return Interval.from_instants(s, e)

	def difference(self, *intervals):
		"""
		# The parts of &self not covered by any of &intervals.
		"""
		results = []
		for i in Interval.xor([self, *intervals]):
			x = self.intersection(i)
			if x is not None and not x.is_empty():
				results.append(x)
		return results

	def to_duration(self, units='milliseconds', conversion_accuracy='casual') -> abstract.Measure:
		"""
		# The length of the interval as a &Duration in &units.
		"""
		if not self.is_valid:
			return Duration.invalid(self.invalid_reason, self.invalid_explanation)
		return self[1].diff(self[0], units, conversion_accuracy)

	def map_endpoints(self, function):
		"""
		# Construct an interval from `function(start)` and `function(end)`.
		"""
		if not self.is_valid:
			return self
		return Interval.from_instants(function(self[0]), function(self[1]))

	def to_iso(self, **options):
		if not self.is_valid:
			return invalid_text
		return f"{self[0].to_iso(**options)}/{self[1].to_iso(**options)}"

	def to_iso_date(self):
		if not self.is_valid:
			return invalid_text
		return f"{self[0].to_iso_date()}/{self[1].to_iso_date()}"

	def to_iso_time(self, **options):
		if not self.is_valid:
			return invalid_text
		return f"{self[0].to_iso_time(**options)}/{self[1].to_iso_time(**options)}"

	def to_format(self, fmt, separator=' – ', locale=None):
		if not self.is_valid:
			return invalid_text
		return f"{self[0].to_format(fmt, locale)}{separator}{self[1].to_format(fmt, locale)}"
