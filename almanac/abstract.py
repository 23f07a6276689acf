"""
# Abstract interfaces for points in time, measures of time, and zones.

# The calendar diff engine and the interval algebra only use the
# operations documented here. &.instant.Instant, &.duration.Duration, and the
# &.zone classes are the implementations provided by the package.
"""
from abc import abstractmethod
import typing

class Measure(typing.Protocol):
	"""
	# An amount of time expressed as an ordered mapping of unit names to magnitudes.
	"""

	@property
	@abstractmethod
	def is_valid(self) -> bool:
		"""
		# Whether the measure holds magnitudes or an &.core.Invalid.
		"""

	@abstractmethod
	def get(self, unit) -> float:
		"""
		# The magnitude stored under &unit; zero when absent.
		"""

	@abstractmethod
	def shift_to(self, *units) -> "Measure":
		"""
		# Re-express the measure using only the given &units.
		"""

	@abstractmethod
	def as_unit(self, unit) -> float:
		"""
		# The whole measure expressed as a single, possibly fractional, magnitude of &unit.
		"""

	@abstractmethod
	def plus(self, other) -> "Measure":
		pass

	@abstractmethod
	def negate(self) -> "Measure":
		pass

	@abstractmethod
	def map_units(self, function) -> "Measure":
		"""
		# Construct a new measure by applying &function to every magnitude.
		"""

	@abstractmethod
	def to_millis(self) -> float:
		pass

class Point(typing.Protocol):
	"""
	# A point in time supporting comparison and calendar arithmetic.

	# Points are ordered by their position on the time line regardless of zone.
	"""

	@property
	@abstractmethod
	def is_valid(self) -> bool:
		pass

	@abstractmethod
	def to_millis(self) -> int:
		"""
		# Milliseconds since the unix epoch.
		"""

	@abstractmethod
	def __lt__(self, other) -> bool:
		pass

	@abstractmethod
	def __le__(self, other) -> bool:
		pass

	@abstractmethod
	def plus(self, duration) -> "Point":
		"""
		# Calendar aware addition of a &Measure or a unit mapping.
		"""

	@abstractmethod
	def minus(self, duration) -> "Point":
		pass

	@abstractmethod
	def start_of(self, unit) -> "Point":
		"""
		# The first point of the &unit containing &self.
		"""

	@abstractmethod
	def diff(self, other, units=('milliseconds',)) -> Measure:
		"""
		# The difference, `self - other`, expressed in &units.
		"""

class Zone(typing.Protocol):
	"""
	# A mapping from points in time to UTC offsets.
	"""

	@property
	@abstractmethod
	def type(self) -> str:
		"""
		# Identifier of the kind of zone: `'fixed'`, `'iana'`, `'system'`, or `'invalid'`.
		"""

	@property
	@abstractmethod
	def name(self) -> str:
		pass

	@property
	@abstractmethod
	def is_universal(self) -> bool:
		"""
		# Whether the offset is the same for every point in time.
		"""

	@property
	@abstractmethod
	def is_valid(self) -> bool:
		pass

	@abstractmethod
	def offset(self, ts:int) -> int:
		"""
		# The offset, in minutes, in effect at the epoch milliseconds &ts.
		"""

	@abstractmethod
	def offset_name(self, ts:int, style='short'):
		"""
		# The name of the offset in effect at &ts; &None when unknown.
		"""

	@abstractmethod
	def format_offset(self, ts:int, style) -> str:
		pass

	@abstractmethod
	def equals(self, other) -> bool:
		pass
