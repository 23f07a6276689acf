"""
# Time zone support.

# Zones map epoch milliseconds to UTC offsets expressed in minutes.

# [ Elements ]
# /FixedOffsetZone/
	# A constant offset; `UTC`, `UTC+5:30`.
# /IANAZone/
	# A named zone of the IANA database resolved with &zoneinfo.
# /SystemZone/
	# The host's local time.
# /InvalidZone/
	# Placeholder for zone specifications that could not be resolved.
"""
import os
import re
import time
import datetime
import zoneinfo

from . import abstract
from . import cache

_utc = datetime.timezone.utc
_epoch = datetime.datetime(1970, 1, 1, tzinfo=_utc)

# datetime's range; offsets outside of it are taken from the nearest edge.
_minimum_ts = int((datetime.datetime(1, 1, 2, tzinfo=_utc) - _epoch).total_seconds() * 1000)
_maximum_ts = int((datetime.datetime(9999, 12, 30, tzinfo=_utc) - _epoch).total_seconds() * 1000)

def _aware(ts, tzinfo):
	ts = min(max(ts, _minimum_ts), _maximum_ts)
	return (_epoch + datetime.timedelta(milliseconds=ts)).astimezone(tzinfo)

def signed_offset(hours, minutes):
	"""
	# Combine the textual hour and minute parts of an offset into minutes.

	#!python
		assert signed_offset('-5', '30') == -330
		assert signed_offset('-0', '30') == -30
	"""
	try:
		h = int(hours)
	except (TypeError, ValueError):
		h = 0

	try:
		m = int(minutes)
	except (TypeError, ValueError):
		m = 0

	negative = h < 0 or (hours or '').strip().startswith('-')
	return (h * 60) + (-m if negative else m)

def format_offset(offset, style='short'):
	"""
	# Render an offset in minutes.

	# [ Parameters ]
	# /offset/
		# Minutes east of UTC.
	# /style/
		# `'short'`, `+05:30`; `'narrow'`, `+5:30`; or `'techie'`, `+0530`.
	"""
	hours, minutes = divmod(abs(int(offset)), 60)
	sign = '+' if offset >= 0 else '-'

	if style == 'short':
		return f"{sign}{hours:02}:{minutes:02}"
	elif style == 'narrow':
		return f"{sign}{hours}" + (f":{minutes}" if minutes > 0 else "")
	elif style == 'techie':
		return f"{sign}{hours:02}{minutes:02}"
	else:
		raise ValueError(f"offset format style {style!r} is not one of short, narrow, or techie")

class Zone(abstract.Zone):
	"""
	# Common base of the zone implementations.
	"""

	def format_offset(self, ts, style='short'):
		return format_offset(self.offset(ts), style)

	def __eq__(self, ob):
		if not isinstance(ob, Zone):
			return NotImplemented
		return self.equals(ob)

	def __hash__(self):
		return hash((self.type, self.name))

	def __repr__(self):
		return f"<{self.__class__.__name__}: {self.name}>"

class FixedOffsetZone(Zone):
	"""
	# Zone whose offset never changes.
	"""
	__slots__ = ('fixed',)
	_utc_singleton = None

	def __init__(self, offset):
		self.fixed = offset

	@classmethod
	def utc_instance(Class):
		if Class._utc_singleton is None:
			Class._utc_singleton = Class(0)
		return Class._utc_singleton

	@classmethod
	def instance(Class, offset):
		return Class.utc_instance() if offset == 0 else Class(offset)

	@classmethod
	def parse_specifier(Class, text):
		"""
		# Construct an instance from text of the form `UTC`, `UTC+3`, or `UTC-04:30`.
		# &None when the text is not such a specifier.
		"""
		if text:
			r = re.match(r'^utc(?:([+-]\d{1,2})(?::(\d{2}))?)?$', text, re.I)
			if r is not None:
				return Class(signed_offset(r.group(1), r.group(2)))
		return None

	@property
	def type(self):
		return 'fixed'

	@property
	def name(self):
		if self.fixed == 0:
			return 'UTC'
		return 'UTC' + format_offset(self.fixed, 'narrow')

	@property
	def is_universal(self):
		return True

	@property
	def is_valid(self):
		return True

	def offset(self, ts=None):
		return self.fixed

	def offset_name(self, ts=None, style='short'):
		return self.name

	def equals(self, other):
		return other.type == 'fixed' and other.fixed == self.fixed

class IANAZone(Zone):
	"""
	# A zone identified by its IANA database name.

	# Instances should be retrieved with &create so that the
	# &.cache.zones cache is used.
	"""
	__slots__ = ('zone_name', 'tzinfo')

	def __init__(self, name):
		self.zone_name = name
		try:
			self.tzinfo = zoneinfo.ZoneInfo(name)
		except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
			self.tzinfo = None

	@classmethod
	def create(Class, name):
		return cache.zones.get(name, Class)

	@staticmethod
	def is_valid_zone(name):
		"""
		# Whether &name identifies a zone available to &zoneinfo.
		"""
		if not name:
			return False
		try:
			zoneinfo.ZoneInfo(name)
		except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
			return False
		return True

	@property
	def type(self):
		return 'iana'

	@property
	def name(self):
		return self.zone_name

	@property
	def is_universal(self):
		return False

	@property
	def is_valid(self):
		return self.tzinfo is not None

	def offset(self, ts):
		if self.tzinfo is None:
			return None
		delta = _aware(ts, self.tzinfo).utcoffset()
		return int(delta.total_seconds() // 60)

	def offset_name(self, ts, style='short'):
		if self.tzinfo is None:
			return None
		return _aware(ts, self.tzinfo).tzname()

	def equals(self, other):
		return other.type == 'iana' and other.name == self.name

class SystemZone(Zone):
	"""
	# The zone of the host's local time.
	"""
	__slots__ = ()
	_instance = None

	@classmethod
	def instance(Class):
		if Class._instance is None:
			Class._instance = Class()
		return Class._instance

	@property
	def type(self):
		return 'system'

	@property
	def name(self):
		return os.environ.get('TZ') or time.tzname[0]

	@property
	def is_universal(self):
		return False

	@property
	def is_valid(self):
		return True

	def _local(self, ts):
		return _aware(ts, _utc).astimezone()

	def offset(self, ts):
		return int(self._local(ts).utcoffset().total_seconds() // 60)

	def offset_name(self, ts, style='short'):
		return self._local(ts).tzname()

	def equals(self, other):
		return other.type == 'system'

class InvalidZone(Zone):
	"""
	# A zone that could not be identified.
	"""
	__slots__ = ('zone_name',)

	def __init__(self, name):
		self.zone_name = name

	@property
	def type(self):
		return 'invalid'

	@property
	def name(self):
		return str(self.zone_name)

	@property
	def is_universal(self):
		return False

	@property
	def is_valid(self):
		return False

	def offset(self, ts):
		return None

	def offset_name(self, ts, style='short'):
		return None

	def format_offset(self, ts, style='short'):
		return ''

	def equals(self, other):
		return False

def normalize_zone(specifier, default):
	"""
	# Resolve a zone specification into a &Zone.

	# [ Parameters ]
	# /specifier/
		# &None, a &Zone, a name, or an integer offset in minutes.
	# /default/
		# The &Zone used for &None, `'local'` and `'system'`.
	"""
	if specifier is None:
		return default
	elif isinstance(specifier, Zone):
		return specifier
	elif isinstance(specifier, str):
		lowered = specifier.lower()
		if lowered in ('local', 'system'):
			return default
		elif lowered in ('utc', 'gmt'):
			return FixedOffsetZone.utc_instance()
		return FixedOffsetZone.parse_specifier(lowered) or IANAZone.create(specifier)
	elif isinstance(specifier, int) and not isinstance(specifier, bool):
		return FixedOffsetZone.instance(specifier)
	else:
		return InvalidZone(specifier)
