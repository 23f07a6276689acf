"""
# Process wide configuration.

# A single &Settings instance, &settings, is consulted by the constructors of
# &.instant.Instant, &.interval.Interval, and &.duration.Duration for their defaults.

#!python
	from almanac.settings import settings
	settings.default_zone = 'America/New_York'
	settings.throw_on_invalid = True
	...
	settings.reset()
"""
import time

from . import cache

def system_clock():
	"""
	# Current time in milliseconds since the unix epoch.
	"""
	return int(time.time() * 1000)

class Settings(object):
	"""
	# Defaults used when a call does not specify them.

	# [ Properties ]
	# /default_zone/
		# Zone name or &.abstract.Zone used when constructing instants.
		# `'system'` refers to the host's local time.
	# /default_locale/
		# Locale tag used for parsing and formatting.
	# /default_numbering/
		# Numbering system override; &None selects the locale's own.
	# /throw_on_invalid/
		# Raise &.core.InvalidValueError subclasses instead of returning invalid values.
	# /two_digit_cutoff_year/
		# Two digit years above the cutoff are placed in the 1900s, others in the 2000s.
	# /now/
		# Clock returning epoch milliseconds; replaceable for deterministic tests.
	"""

	defaults = {
		'default_zone': 'system',
		'default_locale': 'en-US',
		'default_numbering': None,
		'throw_on_invalid': False,
		'two_digit_cutoff_year': 60,
		'now': system_clock,
	}

	def __init__(self):
		self.reset()

	def reset(self):
		"""
		# Restore the defaults and clear the caches.
		"""
		for k, v in self.defaults.items():
			setattr(self, k, v)
		self.reset_caches()

	def reset_caches(self):
		cache.reset()

settings = Settings()
