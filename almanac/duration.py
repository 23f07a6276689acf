"""
# Amounts of time expressed in calendar units.

# A &Duration is an ordered mapping of unit names to magnitudes. Units larger than
# a day have no fixed length; conversion between them uses one of two matrices
# selected by the duration's conversion accuracy:

# /`casual`/
	# A year is 365 days, a quarter 91 days, a month 30 days.
# /`longterm`/
	# Averages of the Gregorian cycle: a year is 365.2425 days and a month 30.436875 days.
"""
import math
import collections.abc
import logging

from . import core
from . import gregorian
from .settings import settings

logger = logging.getLogger(__name__)

#: Duration units from largest to smallest.
ordered_units = (
	'years',
	'quarters',
	'months',
	'weeks',
	'days',
	'hours',
	'minutes',
	'seconds',
	'milliseconds',
)

#: Average length of a Gregorian year in days.
days_in_year_accurate = gregorian.days_in_cycle / gregorian.years_in_cycle

#: Average length of a Gregorian month in days.
days_in_month_accurate = days_in_year_accurate / gregorian.months_in_year

_day_units = (
	('hours', 24),
	('minutes', 24 * 60),
	('seconds', 24 * 60 * 60),
	('milliseconds', 24 * 60 * 60 * 1000),
)

def _complete(high):
	# Extend the rows of the units above a day with the fixed sub-day ratios.
	matrix = {}
	rows = dict(high)
	rows['weeks'] = {'days': 7}
	rows['days'] = {'days': 1}

	for unit, row in rows.items():
		days = row['days']
		r = {k: v for k, v in row.items() if k != unit}
		r.update((k, days * v) for k, v in _day_units)
		matrix[unit] = r

	matrix['hours'] = {'minutes': 60, 'seconds': 60 * 60, 'milliseconds': 60 * 60 * 1000}
	matrix['minutes'] = {'seconds': 60, 'milliseconds': 60 * 1000}
	matrix['seconds'] = {'milliseconds': 1000}
	matrix['milliseconds'] = {}
	return matrix

casual_matrix = _complete({
	'years': {'quarters': 4, 'months': 12, 'weeks': 52, 'days': 365},
	'quarters': {'months': 3, 'weeks': 13, 'days': 91},
	'months': {'weeks': 4, 'days': 30},
})

longterm_matrix = _complete({
	'years': {
		'quarters': 4,
		'months': 12,
		'weeks': days_in_year_accurate / 7,
		'days': days_in_year_accurate,
	},
	'quarters': {
		'months': 3,
		'weeks': days_in_year_accurate / 28,
		'days': days_in_year_accurate / 4,
	},
	'months': {
		'weeks': days_in_month_accurate / 7,
		'days': days_in_month_accurate,
	},
})

matrices = {
	'casual': casual_matrix,
	'longterm': longterm_matrix,
}

def normalize_unit(unit):
	"""
	# Identify the plural unit name for &unit; singular forms and any case are accepted.

	# [ Exceptions ]
	# /&core.InvalidUnitError/
		# &unit is not a duration unit.
	"""
	if isinstance(unit, str):
		u = unit.lower()
		if u in matrices['casual']:
			return u
		if u + 's' in matrices['casual']:
			return u + 's'
	raise core.InvalidUnitError(unit)

def _number(value):
	if isinstance(value, float) and value.is_integer():
		return int(value)
	return value

def _is_number(value):
	return isinstance(value, (int, float)) and not isinstance(value, bool)

def millis(matrix, values):
	"""
	# Sum &values in milliseconds using &matrix.
	"""
	total = 0
	for k, v in values.items():
		if k == 'milliseconds':
			total += v
		else:
			total += v * matrix[k]['milliseconds']
	return total

def normalize_values(matrix, values):
	"""
	# Roll magnitudes up into the largest present unit and push fractions down into
	# the next smaller present unit. &values is modified in place.
	"""
	factor = -1 if millis(matrix, values) < 0 else 1
	present = [k for k in ordered_units if k in values]

	previous = None
	for current in reversed(present):
		if previous is not None:
			conversion = matrix[current][previous]
			roll = math.floor((values[previous] * factor) / conversion)
			values[current] += roll * factor
			values[previous] -= roll * conversion * factor
		previous = current

	previous = None
	for current in present:
		if previous is not None:
			fraction = math.fmod(values[previous], 1)
			values[previous] -= fraction
			values[current] += fraction * matrix[previous][current]
		previous = current

	for k in present:
		values[k] = _number(values[k])

class Duration(collections.abc.Mapping):
	"""
	# An immutable amount of time in calendar units.

	# Iteration produces the present units in order of size, largest first.
	# Invalid durations are empty and carry an &core.Invalid.
	"""
	__slots__ = ('values', 'conversion_accuracy', 'invalidity')

	def __init__(self, values, conversion_accuracy='casual', invalidity=None):
		self.values = {k: values[k] for k in ordered_units if k in values}
		self.conversion_accuracy = conversion_accuracy
		self.invalidity = invalidity

	@classmethod
	def from_millis(Class, count, conversion_accuracy='casual'):
		return Class.from_mapping({'milliseconds': count}, conversion_accuracy)

	@classmethod
	def from_mapping(Class, mapping, conversion_accuracy='casual'):
		"""
		# Construct a duration from a mapping of unit names to numbers.

		# [ Exceptions ]
		# /&core.InvalidUnitError/
			# A key is not a duration unit.
		# /&core.InvalidArgumentError/
			# A magnitude is not a number.
		"""
		values = {}
		for k, v in mapping.items():
			if v is None:
				continue
			if not _is_number(v):
				raise core.InvalidArgumentError(f"invalid magnitude {v!r} for unit {k!r}")
			values[normalize_unit(k)] = v
		if conversion_accuracy not in matrices:
			raise core.InvalidArgumentError(f"unknown conversion accuracy {conversion_accuracy!r}")
		return Class(values, conversion_accuracy)

	@classmethod
	def from_duration_like(Class, obj):
		"""
		# Interpret a &Duration, a number of milliseconds, or a unit mapping as a &Duration.
		"""
		if isinstance(obj, Duration):
			return obj
		elif _is_number(obj):
			return Class.from_millis(obj)
		elif isinstance(obj, collections.abc.Mapping):
			return Class.from_mapping(obj)
		raise core.InvalidArgumentError(f"unknown duration argument {obj!r} of type {type(obj).__name__}")

	@classmethod
	def from_iso(Class, text, conversion_accuracy='casual'):
		"""
		# Parse an ISO 8601 duration such as `P1Y2M3DT4H5M6.007S`.
		"""
		from . import iso
		values = iso.parse_duration(text)
		if values is None:
			return Class.invalid("unparsable", f"the input {text!r} can't be parsed as ISO 8601")
		return Class(values, conversion_accuracy)

	@classmethod
	def invalid(Class, reason, explanation=None):
		"""
		# Construct an invalid duration, or raise &core.InvalidDurationError
		# when &settings.throw_on_invalid is enabled.
		"""
		if not reason:
			raise core.InvalidArgumentError("need to specify a reason the duration is invalid")
		invalid = core.Invalid.of(reason, explanation)
		if settings.throw_on_invalid:
			raise core.InvalidDurationError(invalid)
		logger.debug("invalid duration: %s", invalid)
		return Class({}, invalidity=invalid)

	def __getitem__(self, unit):
		return self.values[unit]

	def __iter__(self):
		return iter(self.values)

	def __len__(self):
		return len(self.values)

	def __repr__(self):
		if self.invalidity is not None:
			return f"<{self.__class__.__name__}: {self.invalidity!r}>"
		return f"{self.__class__.__name__}({self.values!r})"

	def __str__(self):
		return self.to_iso() or 'Invalid Duration'

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
	def matrix(self):
		return matrices[self.conversion_accuracy]

	def _clone(self, values):
		return self.__class__(values, self.conversion_accuracy, self.invalidity)

	def get(self, unit, default=0):
		return self.values.get(normalize_unit(unit), default)

	def plus(self, other):
		"""
		# Sum &self and &other unit by unit.
		"""
		if not self.is_valid:
			return self
		other = Duration.from_duration_like(other)
		values = dict(self.values)
		for k, v in other.values.items():
			values[k] = values.get(k, 0) + v
		return self._clone(values)

	def minus(self, other):
		if not self.is_valid:
			return self
		return self.plus(Duration.from_duration_like(other).negate())

	def negate(self):
		if not self.is_valid:
			return self
		return self._clone({k: -v if v else 0 for k, v in self.values.items()})

	def map_units(self, function):
		"""
		# Construct a duration whose magnitudes are `function(magnitude, unit)`.
		"""
		if not self.is_valid:
			return self
		return self._clone({k: function(v, k) for k, v in self.values.items()})

	def to_millis(self):
		if not self.is_valid:
			return math.nan
		return millis(self.matrix, self.values)

	def normalize(self):
		"""
		# Reduce the duration to its canonical form without changing the set of units.
		"""
		if not self.is_valid:
			return self
		values = dict(self.values)
		normalize_values(self.matrix, values)
		return self._clone(values)

	def shift_to(self, *units):
		"""
		# Re-express the duration using only &units.

		# Magnitudes of larger units are converted into the largest requested unit
		# below them; the integer part is kept and the remainder carried into the
		# next requested unit. Anything left after the smallest requested unit
		# becomes its fraction.
		"""
		if not self.is_valid or not units:
			return self

		units = {normalize_unit(u) for u in units}
		matrix = self.matrix
		built = {}
		accumulated = {}
		last = None

		for k in ordered_units:
			if k in units:
				last = k
				own = 0
				for ak in accumulated:
					own += matrix[ak][k] * accumulated[ak]
					accumulated[ak] = 0
				own += self.values.get(k, 0)

				i = math.trunc(own)
				built[k] = i
				accumulated[k] = (own * 1000 - i * 1000) / 1000
			elif k in self.values:
				accumulated[k] = self.values[k]

		for k, v in accumulated.items():
			if v != 0:
				built[last] += v if k == last else v / matrix[last][k]

		normalize_values(matrix, built)
		return self._clone(built)

	def as_unit(self, unit):
		"""
		# The duration expressed as a single, possibly fractional, magnitude of &unit.
		"""
		if not self.is_valid:
			return math.nan
		return self.shift_to(unit).get(unit)

	def to_iso(self):
		"""
		# The ISO 8601 form of the duration; &None when invalid.
		"""
		if not self.is_valid:
			return None

		get = self.values.get
		s = 'P'
		if get('years', 0):
			s += f"{_number(get('years'))}Y"
		if get('months', 0) or get('quarters', 0):
			s += f"{_number(get('months', 0) + get('quarters', 0) * 3)}M"
		if get('weeks', 0):
			s += f"{_number(get('weeks'))}W"
		if get('days', 0):
			s += f"{_number(get('days'))}D"

		hours = get('hours', 0)
		minutes = get('minutes', 0)
		seconds = get('seconds', 0)
		ms = get('milliseconds', 0)
		if hours or minutes or seconds or ms:
			s += 'T'
		if hours:
			s += f"{_number(hours)}H"
		if minutes:
			s += f"{_number(minutes)}M"
		if seconds or ms:
			s += f"{_number(round(seconds + ms / 1000, 3))}S"

		if s == 'P':
			s += 'T0S'
		return s
