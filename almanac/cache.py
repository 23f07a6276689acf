"""
# Memoization of constructed zones and locales.

# The caches are an optimization. Reads are safe from multiple threads and
# a redundant population on a miss stores an equivalent object; the last writer wins.
"""
import logging

logger = logging.getLogger(__name__)

class Cache(object):
	"""
	# Identifier to object mapping populated on demand.
	"""
	__slots__ = ('name', 'storage',)

	def __init__(self, name):
		self.name = name
		self.storage = {}

	def __len__(self):
		return len(self.storage)

	def __contains__(self, key):
		return key in self.storage

	def get(self, key, constructor):
		"""
		# Retrieve the object identified by &key, constructing and storing it
		# with `constructor(key)` when absent.
		"""
		try:
			return self.storage[key]
		except KeyError:
			obj = constructor(key)
			logger.debug("%s cache populated with %r", self.name, key)
			self.storage[key] = obj
			return obj

	def clear(self):
		self.storage.clear()

#: IANA zone objects by name.
zones = Cache('zone')

#: Locale objects by tag and numbering system.
locales = Cache('locale')

def reset():
	"""
	# Clear all caches.
	"""
	zones.clear()
	locales.clear()
	logger.debug("caches cleared")
