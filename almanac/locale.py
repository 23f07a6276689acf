"""
# Locale lookup tables and the structured formatting capability.

# A &Locale provides the month, weekday, era, and meridiem vocabularies used by the
# format engine along with the digits of its numbering system. &Locale.format_parts
# renders a point in time as a sequence of typed &Part instances; the format
# engine inspects these parts in order to expand macro tokens into primitive directives.

# Only a small, fixed set of locales is defined. Unknown tags fall back on a locale
# of the same language and then on `en-US`.
"""
import re

from . import cache
from . import gregorian
from . import week
from .settings import settings

#: Vocabulary tables by language.
vocabularies = {
	'en': {
		'months': {
			'long': tuple(x.capitalize() for x in gregorian.month_names),
			'short': tuple(x.capitalize() for x in gregorian.month_abbreviations),
			'narrow': tuple(x[0].upper() for x in gregorian.month_names),
		},
		'weekdays': {
			'long': tuple(x.capitalize() for x in week.weekday_names),
			'short': tuple(x.capitalize() for x in week.weekday_abbreviations),
			'narrow': tuple(x[0].upper() for x in week.weekday_names),
		},
		'eras': {
			'long': ('Before Christ', 'Anno Domini'),
			'short': ('BC', 'AD'),
			'narrow': ('B', 'A'),
		},
		'meridiems': ('AM', 'PM'),
	},
	'de': {
		'months': {
			'long': (
				'Januar', 'Februar', 'März', 'April', 'Mai', 'Juni',
				'Juli', 'August', 'September', 'Oktober', 'November', 'Dezember',
			),
			'short': (
				'Jan.', 'Feb.', 'März', 'Apr.', 'Mai', 'Juni',
				'Juli', 'Aug.', 'Sept.', 'Okt.', 'Nov.', 'Dez.',
			),
			'narrow': ('J', 'F', 'M', 'A', 'M', 'J', 'J', 'A', 'S', 'O', 'N', 'D'),
		},
		'weekdays': {
			'long': (
				'Montag', 'Dienstag', 'Mittwoch', 'Donnerstag',
				'Freitag', 'Samstag', 'Sonntag',
			),
			'short': ('Mo.', 'Di.', 'Mi.', 'Do.', 'Fr.', 'Sa.', 'So.'),
			'narrow': ('M', 'D', 'M', 'D', 'F', 'S', 'S'),
		},
		'eras': {
			'long': ('v. Chr.', 'n. Chr.'),
			'short': ('v. Chr.', 'n. Chr.'),
			'narrow': ('v. Chr.', 'n. Chr.'),
		},
		'meridiems': ('AM', 'PM'),
	},
	'fr': {
		'months': {
			'long': (
				'janvier', 'février', 'mars', 'avril', 'mai', 'juin',
				'juillet', 'août', 'septembre', 'octobre', 'novembre', 'décembre',
			),
			'short': (
				'janv.', 'févr.', 'mars', 'avr.', 'mai', 'juin',
				'juil.', 'août', 'sept.', 'oct.', 'nov.', 'déc.',
			),
			'narrow': ('J', 'F', 'M', 'A', 'M', 'J', 'J', 'A', 'S', 'O', 'N', 'D'),
		},
		'weekdays': {
			'long': ('lundi', 'mardi', 'mercredi', 'jeudi', 'vendredi', 'samedi', 'dimanche'),
			'short': ('lun.', 'mar.', 'mer.', 'jeu.', 'ven.', 'sam.', 'dim.'),
			'narrow': ('L', 'M', 'M', 'J', 'V', 'S', 'D'),
		},
		'eras': {
			'long': ('avant Jésus-Christ', 'après Jésus-Christ'),
			'short': ('av. J.-C.', 'ap. J.-C.'),
			'narrow': ('av. J.-C.', 'ap. J.-C.'),
		},
		'meridiems': ('AM', 'PM'),
	},
}

#: Layout templates by locale tag. `{date}` and `{time}` refer to the composed
#: date and time templates; other names are part types.
layouts = {
	'en-US': {
		'numeric': '{month}/{day}/{year}',
		'text': '{month} {day}, {year}',
		'weekday': '{weekday}, {date}',
		'datetime': '{date}, {time}',
		'hour12': True,
	},
	'en-GB': {
		'numeric': '{day}/{month}/{year}',
		'text': '{day} {month} {year}',
		'weekday': '{weekday}, {date}',
		'datetime': '{date}, {time}',
		'hour12': False,
	},
	'de-DE': {
		'numeric': '{day}.{month}.{year}',
		'text': '{day}. {month} {year}',
		'weekday': '{weekday}, {date}',
		'datetime': '{date}, {time}',
		'hour12': False,
	},
	'fr-FR': {
		'numeric': '{day}/{month}/{year}',
		'text': '{day} {month} {year}',
		'weekday': '{weekday} {date}',
		'datetime': '{date} {time}',
		'hour12': False,
	},
}

#: The first and last digit of the supported numbering systems.
numbering_systems = {
	'arab': ('٠', '٩'),
	'arabext': ('۰', '۹'),
	'deva': ('०', '९'),
	'fullwide': ('０', '９'),
	'latn': ('0', '9'),
	'thai': ('๐', '๙'),
}

_field_pattern = re.compile(r'\{(\w+)\}')

class Part(tuple):
	"""
	# A typed fragment of formatted text: `(type, value)`.

	# Types are the field names `year`, `month`, `day`, `weekday`, `hour`,
	# `minute`, `second`, `dayPeriod`, `timeZoneName`, and `literal`.
	"""
	__slots__ = ()

	@property
	def type(self):
		return self[0]

	@property
	def value(self):
		return self[1]

def resolve_tag(tag):
	"""
	# Select the defined locale tag best matching &tag.
	"""
	if tag in layouts:
		return tag

	language = re.split(r'[-_]', tag or '', 1)[0].lower()
	for candidate in layouts:
		if candidate.split('-', 1)[0] == language:
			return candidate
	return 'en-US'

class Locale(object):
	"""
	# Read-only vocabulary and layout tables for a locale.

	# [ Properties ]
	# /tag/
		# The resolved locale tag.
	# /numbering/
		# The numbering system used for digits.
	# /structured/
		# Whether the locale can report structured, &Part based, output.
		# Without it, the name tables and &format_parts are unavailable.
	"""
	__slots__ = ('tag', 'numbering', 'structured', 'vocabulary', 'layout', '_digits')

	def __init__(self, tag, numbering='latn', structured=True):
		self.tag = resolve_tag(tag)
		self.numbering = numbering if numbering in numbering_systems else 'latn'
		self.structured = structured
		self.vocabulary = vocabularies[self.tag.split('-', 1)[0]]
		self.layout = layouts[self.tag]
		self._digits = numbering_systems[self.numbering]

	@classmethod
	def create(Class, tag=None, numbering=None, structured=True):
		"""
		# Retrieve the cached locale for &tag, defaulting to the configured locale.
		"""
		tag = tag or settings.default_locale
		numbering = numbering or settings.default_numbering or 'latn'
		key = (tag, numbering, structured)
		return cache.locales.get(key, lambda k: Class(*k))

	def __repr__(self):
		return f"<{self.__class__.__name__}: {self.tag}/{self.numbering}>"

	def _names(self, table, style):
		if not self.structured:
			return None
		return list(self.vocabulary[table][style])

	def months(self, style='long'):
		return self._names('months', style)

	def weekdays(self, style='long'):
		"""
		# Weekday names in ISO order, Monday first.
		"""
		return self._names('weekdays', style)

	def eras(self, style='short'):
		"""
		# Era names; the era before year one first.
		"""
		return self._names('eras', style)

	def meridiems(self):
		if not self.structured:
			return None
		return list(self.vocabulary['meridiems'])

	def digits(self, quantifier=''):
		"""
		# Regular expression source matching digits of the locale's numbering system.
		"""
		first, last = self._digits
		return f"[{first}-{last}]{quantifier}"

	def parse_digits(self, text):
		"""
		# Interpret &text, written in any decimal numbering system, as an integer.
		"""
		return int(text)

	def transliterate(self, text):
		"""
		# Replace ASCII digits in &text with the locale's digits.
		"""
		first = ord(self._digits[0])
		if first == ord('0'):
			return text
		return text.translate({ord('0') + i: first + i for i in range(10)})

	def _template(self, options):
		layout = self.layout
		date = None
		time = None

		if any(k in options for k in ('year', 'month', 'day')):
			textual = options.get('month') in ('short', 'long', 'narrow')
			date = layout['text'] if textual else layout['numeric']
			if 'weekday' in options:
				date = layout['weekday'].replace('{date}', date)
		elif 'weekday' in options:
			date = '{weekday}'

		if 'hour' in options:
			time = '{hour}:{minute}'
			if 'second' in options:
				time += ':{second}'
			if self.hour12(options):
				time += ' {dayPeriod}'
			if 'timeZoneName' in options:
				time += ' {timeZoneName}'

		if date and time:
			return layout['datetime'].replace('{date}', date).replace('{time}', time)
		return date or time or ''

	def hour12(self, options):
		"""
		# Whether the hour is rendered on a twelve hour clock for &options.
		"""
		cycle = options.get('hourCycle')
		if cycle is not None:
			return cycle in ('h11', 'h12')
		return self.layout['hour12']

	def format_parts(self, pit, options):
		"""
		# Render &pit according to the format &options as a list of &Part instances.

		# [ Parameters ]
		# /pit/
			# The point in time to render; an &.instant.Instant.
		# /options/
			# Mapping of part types to styles: `numeric`, `2-digit`, `short`,
			# `long`, or `narrow`. `hourCycle` selects `h12` or `h23` clocks.

		# [ Returns ]
		# &None when the locale is not &structured.
		"""
		if not self.structured:
			return None

		template = self._template(options)
		parts = []
		position = 0
		for m in _field_pattern.finditer(template):
			if m.start() > position:
				parts.append(Part(('literal', template[position:m.start()])))
			field = m.group(1)
			parts.append(Part((field, self.render_field(field, options.get(field), pit, options))))
			position = m.end()
		if position < len(template):
			parts.append(Part(('literal', template[position:])))

		return parts

	def render_field(self, field, style, pit, options):
		if field == 'dayPeriod':
			return self.vocabulary['meridiems'][0 if pit.hour < 12 else 1]
		elif field == 'timeZoneName':
			ts = pit.to_millis()
			return pit.zone.offset_name(ts, style or 'short') or pit.zone.format_offset(ts, 'short')
		elif field == 'weekday':
			return self.vocabulary['weekdays'][style or 'long'][pit.weekday - 1]
		elif field == 'month' and style in ('short', 'long', 'narrow'):
			return self.vocabulary['months'][style][pit.month - 1]

		value = getattr(pit, field)
		if field == 'hour' and self.hour12(options):
			value = (value % 12) or 12

		if style == '2-digit':
			text = f"{value % 100:02}" if field == 'year' else f"{value:02}"
		else:
			text = str(value)
		return self.transliterate(text)
