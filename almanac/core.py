"""
# Invalidity values and the exception hierarchy.

# Data dependent failures are represented with &Invalid instances that are
# carried by the value that could not be constructed. Exceptions are reserved for
# misuse and for structurally contradictory requests.
"""

class Invalid(tuple):
	"""
	# The reason a value could not be produced.

	# [ Properties ]
	# /reason/
		# Stable, parameter free identifier such as `'unit out of range'`.
	# /explanation/
		# Optional free text detailing the particular failure.
	"""
	__slots__ = ()

	@property
	def reason(self) -> str:
		return self[0]

	@property
	def explanation(self):
		return self[1]

	@classmethod
	def of(Class, reason, explanation=None):
		return Class((reason, explanation))

	def to_message(self) -> str:
		"""
		# Combine the reason and the explanation for display.
		"""
		if self[1]:
			return f"{self[0]}: {self[1]}"
		return self[0]

	def __str__(self):
		return self.to_message()

	def __repr__(self):
		return f"{self.__class__.__name__}.of({self[0]!r}, {self[1]!r})"

class Error(Exception):
	"""
	# Base class for almanac specific errors.
	"""

class InvalidArgumentError(Error):
	"""
	# An operation was given an argument it cannot work with.
	"""

class InvalidUnitError(InvalidArgumentError):
	"""
	# The identified unit is not part of the unit vocabulary.
	"""

	def __init__(self, unit):
		super().__init__(f"invalid unit {unit!r}")
		self.unit = unit

class ConflictingSpecificationError(Error):
	"""
	# The request contradicts itself and there is no safe default.

	# Raised for formats combining 12-hour and 24-hour directives and for
	# field sets mixing week dates with Gregorian or ordinal dates.
	"""

class InvalidValueError(Error):
	"""
	# Raised in place of returning an invalid value when
	# &.settings.Settings.throw_on_invalid is enabled.
	"""

	def __init__(self, invalid:Invalid):
		super().__init__(invalid.to_message())
		self.invalid = invalid

class InvalidInstantError(InvalidValueError):
	pass

class InvalidIntervalError(InvalidValueError):
	pass

class InvalidDurationError(InvalidValueError):
	pass
