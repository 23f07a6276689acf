"""
# Token patterns for parsing and rendering points in time.

# A pattern such as `yyyy-MM-dd HH:mm` is split into &Token instances by &parse_format.
# Runs of a repeated letter are directives, quoted text and runs of other
# characters are literals. Macro tokens, `D` through `FFFF`, name locale dependent
# presets and are expanded into primitive directives by rendering a reference
# point with the locale's structured formatting capability.

# Parsing converts every token into a &Unit: a regular expression fragment with a
# deserializer. The fragments are concatenated into an anchored, case insensitive
# expression; the captured values are keyed by the first letter of their token and
# reconciled into calendar fields by &fields_from_matches.

# [ Elements ]
# /explain/
	# Parse and report every intermediate product as an &Explanation.
# /parse/
	# Parse and report the fields, zone, specific offset, and any disqualifying reason.
# /render/
	# Render a point in time with a pattern.
"""
import enum
import logging
import re
from dataclasses import dataclass

from . import core
from . import gregorian
from . import zone as zones
from . import iso
from .instant import Instant
from .locale import Locale
from .settings import settings

logger = logging.getLogger(__name__)

#: Reason given when the locale cannot report structured output.
missing_structured_format = "missing structured format support"

#: Epoch milliseconds of the point rendered to expand macro tokens.
reference_ms = 1555555555555

class Token(tuple):
	"""
	# A segment of a pattern: `(literal, value, invalid)`.

	# [ Properties ]
	# /literal/
		# Whether &value is matched and rendered verbatim.
	# /value/
		# The text of the segment.
	# /invalid/
		# Reason the token cannot be used; &None for usable tokens.
	"""
	__slots__ = ()

	@property
	def literal(self) -> bool:
		return self[0]

	@property
	def value(self) -> str:
		return self[1]

	@property
	def invalid(self):
		return self[2]

	@classmethod
	def of(Class, literal, value, invalid=None):
		return Class((literal, value, invalid))

def parse_format(fmt):
	"""
	# Split the pattern &fmt into &Token instances.

	# Single quotes delimit literal text; a quote is not part of the result.
	# Runs of whitespace and runs of characters other than letters are literal.
	"""
	tokens = []
	current = None
	run = ''
	quoted = False

	def flush(literal):
		if run:
			tokens.append(Token.of(literal or not run[0].isalpha(), run))

	for c in fmt:
		if c == "'":
			flush(quoted)
			current = None
			run = ''
			quoted = not quoted
		elif quoted:
			run += c
		elif c == current:
			run += c
		else:
			flush(False)
			run = c
			current = c

	flush(quoted)
	return tokens

class Directive(enum.Enum):
	"""
	# The primitive pattern directives.
	"""
	era_short = 'G'
	era_long = 'GG'
	era_narrow = 'GGGGG'

	year = 'y'
	year_two_digit = 'yy'
	year_four_digit = 'yyyy'
	year_extended = 'yyyyy'
	year_six_digit = 'yyyyyy'

	month = 'M'
	month_two_digit = 'MM'
	month_short = 'MMM'
	month_long = 'MMMM'
	month_narrow = 'MMMMM'
	standalone_month = 'L'
	standalone_month_two_digit = 'LL'
	standalone_month_short = 'LLL'
	standalone_month_long = 'LLLL'
	standalone_month_narrow = 'LLLLL'

	day = 'd'
	day_two_digit = 'dd'
	ordinal = 'o'
	ordinal_three_digit = 'ooo'

	hour24 = 'H'
	hour24_two_digit = 'HH'
	hour12 = 'h'
	hour12_two_digit = 'hh'
	minute = 'm'
	minute_two_digit = 'mm'
	second = 's'
	second_two_digit = 'ss'
	millisecond = 'S'
	millisecond_three_digit = 'SSS'
	fraction = 'u'
	fraction_hundredths = 'uu'
	fraction_tenths = 'uuu'

	quarter = 'q'
	quarter_two_digit = 'qq'
	meridiem = 'a'

	week_year_two_digit = 'kk'
	week_year = 'kkkk'
	week_number = 'W'
	week_number_two_digit = 'WW'

	weekday = 'E'
	weekday_short = 'EEE'
	weekday_long = 'EEEE'
	weekday_narrow = 'EEEEE'
	standalone_weekday = 'c'
	standalone_weekday_short = 'ccc'
	standalone_weekday_long = 'cccc'
	standalone_weekday_narrow = 'ccccc'

	offset_narrow = 'Z'
	offset = 'ZZ'
	offset_techie = 'ZZZ'
	offset_name = 'ZZZZ'
	offset_name_long = 'ZZZZZ'
	zone = 'z'

	unix_seconds = 'X'
	unix_milliseconds = 'x'

	@classmethod
	def identify(Class, value):
		"""
		# The directive spelled &value; &None when &value is not a directive.
		"""
		try:
			return Class(value)
		except ValueError:
			return None

#: Format options of the macro tokens.
macro_options = {
	'D': {'year': 'numeric', 'month': 'numeric', 'day': 'numeric'},
	'DD': {'year': 'numeric', 'month': 'short', 'day': 'numeric'},
	'DDD': {'year': 'numeric', 'month': 'long', 'day': 'numeric'},
	'DDDD': {'year': 'numeric', 'month': 'long', 'day': 'numeric', 'weekday': 'long'},
	't': {'hour': 'numeric', 'minute': '2-digit'},
	'tt': {'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit'},
	'ttt': {'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit', 'timeZoneName': 'short'},
	'tttt': {'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit', 'timeZoneName': 'long'},
	'T': {'hour': 'numeric', 'minute': '2-digit', 'hourCycle': 'h23'},
	'TT': {'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit', 'hourCycle': 'h23'},
	'TTT': {
		'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit',
		'timeZoneName': 'short', 'hourCycle': 'h23',
	},
	'TTTT': {
		'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit',
		'timeZoneName': 'long', 'hourCycle': 'h23',
	},
	'f': {'year': 'numeric', 'month': 'numeric', 'day': 'numeric', 'hour': 'numeric', 'minute': '2-digit'},
	'ff': {'year': 'numeric', 'month': 'short', 'day': 'numeric', 'hour': 'numeric', 'minute': '2-digit'},
	'fff': {
		'year': 'numeric', 'month': 'long', 'day': 'numeric',
		'hour': 'numeric', 'minute': '2-digit', 'timeZoneName': 'short',
	},
	'ffff': {
		'year': 'numeric', 'month': 'long', 'day': 'numeric', 'weekday': 'long',
		'hour': 'numeric', 'minute': '2-digit', 'timeZoneName': 'long',
	},
	'F': {
		'year': 'numeric', 'month': 'numeric', 'day': 'numeric',
		'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit',
	},
	'FF': {
		'year': 'numeric', 'month': 'short', 'day': 'numeric',
		'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit',
	},
	'FFF': {
		'year': 'numeric', 'month': 'long', 'day': 'numeric',
		'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit', 'timeZoneName': 'short',
	},
	'FFFF': {
		'year': 'numeric', 'month': 'long', 'day': 'numeric', 'weekday': 'long',
		'hour': 'numeric', 'minute': '2-digit', 'second': '2-digit', 'timeZoneName': 'long',
	},
}

#: Primitive directive for a formatted part by part type and style.
part_directives = {
	'year': {'2-digit': 'yy', 'numeric': 'yyyyy'},
	'month': {'numeric': 'M', '2-digit': 'MM', 'short': 'MMM', 'long': 'MMMM'},
	'day': {'numeric': 'd', '2-digit': 'dd'},
	'weekday': {'short': 'EEE', 'long': 'EEEE'},
	'dayPeriod': 'a',
	'hour12': {'numeric': 'h', '2-digit': 'hh'},
	'hour24': {'numeric': 'H', '2-digit': 'HH'},
	'minute': {'numeric': 'm', '2-digit': 'mm'},
	'second': {'numeric': 's', '2-digit': 'ss'},
}

_reference = None

def reference_point():
	"""
	# The point rendered to expand macro tokens: &reference_ms in UTC.
	"""
	global _reference
	if _reference is None:
		_reference = Instant.from_millis(reference_ms, zone='utc')
	return _reference

def token_for_part(part, options, locale):
	"""
	# The &Token matching a formatted &part; &None when the part has no directive.
	"""
	if part.type == 'literal':
		return Token.of(True, part.value)

	style = options.get(part.type)
	part_type = part.type
	if part_type == 'hour':
		part_type = 'hour12' if locale.hour12(options) else 'hour24'

	directive = part_directives.get(part_type)
	if isinstance(directive, dict):
		directive = directive.get(style)

	if directive:
		return Token.of(False, directive)
	return None

def expand_macro_token(token, locale):
	"""
	# Expand a macro &token into primitive tokens.

	# [ Returns ]
	# A list of tokens. Tokens that are not macros and macros rendering a part
	# without a primitive directive are returned unchanged. When the locale lacks
	# structured output, the macro is marked with &missing_structured_format.
	"""
	if token.literal:
		return [token]

	options = macro_options.get(token.value)
	if options is None:
		return [token]

	parts = locale.format_parts(reference_point(), options)
	if parts is None:
		logger.debug("macro %r disqualified for %r", token.value, locale)
		return [Token.of(False, token.value, missing_structured_format)]

	tokens = [token_for_part(p, options, locale) for p in parts]
	if None in tokens:
		logger.debug("macro %r left unexpanded for %r", token.value, locale)
		return [token]

	return tokens

def expand_macro_tokens(tokens, locale):
	expanded = []
	for t in tokens:
		expanded.extend(expand_macro_token(t, locale))
	return expanded

# Units

class Unit(tuple):
	"""
	# A token's regular expression fragment and deserializer.

	# [ Properties ]
	# /pattern/
		# Regular expression source matching the token's text.
	# /groups/
		# Number of capture groups inside of &pattern.
	# /deserialize/
		# Callable receiving the sequence of the unit's captured strings, the
		# enclosing group first, and producing the matched value.
	# /literal/
		# Whether the unit only matches verbatim text and produces no value.
	# /token/
		# The originating &Token.
	# /invalid/
		# The reason the unit cannot be used; &None for usable units.
	"""
	__slots__ = ()

	@property
	def pattern(self) -> str:
		return self[0]

	@property
	def groups(self) -> int:
		return self[1]

	@property
	def deserialize(self):
		return self[2]

	@property
	def literal(self) -> bool:
		return self[3]

	@property
	def token(self) -> Token:
		return self[4]

	@property
	def invalid(self):
		return self[5]

	@classmethod
	def of(Class, token, pattern, deserialize, groups=0, literal=False):
		return Class((pattern, groups, deserialize, literal, token, None))

	@classmethod
	def invalidated(Class, token, reason):
		return Class((None, 0, None, False, token, reason))

_space_or_nbsp = '(?: |\u00a0)'

def fix_list_pattern(s):
	"""
	# Escape a name for matching with optional dots and interchangeable spaces.
	"""
	out = []
	for c in s:
		if c == '.':
			out.append(r'\.?')
		elif c in ' \u00a0':
			out.append(_space_or_nbsp)
		else:
			out.append(re.escape(c))
	return ''.join(out)

def strip_insensitivities(s):
	return s.replace('.', '').replace('\u00a0', ' ').lower()

def literal_unit(token):
	return Unit.of(token, re.escape(token.value), (lambda groups: groups[0]), literal=True)

def int_unit(token, pattern, post=None):
	def deserialize(groups):
		i = int(groups[0])
		return i if post is None else post(i)
	return Unit.of(token, pattern, deserialize)

def one_of(token, names, start):
	"""
	# Unit matching one of &names; the value is the index of the name plus &start.
	# &None when &names is not available.
	"""
	if names is None:
		return None

	keys = [strip_insensitivities(x) for x in names]
	def deserialize(groups):
		return keys.index(strip_insensitivities(groups[0])) + start

	# Longer names first so that abbreviations do not shadow them.
	alternatives = sorted(names, key=len, reverse=True)
	return Unit.of(token, '|'.join(fix_list_pattern(x) for x in alternatives), deserialize)

def offset_unit(token, pattern):
	return Unit.of(token, pattern, (lambda groups: zones.signed_offset(groups[1], groups[2])), groups=2)

def simple_unit(token, pattern):
	return Unit.of(token, pattern, (lambda groups: groups[0]))

def _untruncate(year):
	return gregorian.untruncate_year(year, settings.two_digit_cutoff_year)

def _offset_pattern(locale, colon):
	hours = locale.digits('{1,2}')
	minutes = locale.digits('{2}')
	if colon:
		return f"([+-]{hours})(?::({minutes}))?"
	return f"([+-]{hours})({minutes})?"

#: Unit constructors of the directives that can be parsed.
unit_builders = {
	Directive.era_short: lambda l, t: one_of(t, l.eras('short'), 0),
	Directive.era_long: lambda l, t: one_of(t, l.eras('long'), 0),

	Directive.year: lambda l, t: int_unit(t, l.digits('{1,6}')),
	Directive.year_two_digit: lambda l, t: int_unit(t, l.digits('{2,4}'), _untruncate),
	Directive.year_four_digit: lambda l, t: int_unit(t, l.digits('{4}')),
	Directive.year_extended: lambda l, t: int_unit(t, l.digits('{4,6}')),
	Directive.year_six_digit: lambda l, t: int_unit(t, l.digits('{6}')),

	Directive.month: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.month_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.month_short: lambda l, t: one_of(t, l.months('short'), 1),
	Directive.month_long: lambda l, t: one_of(t, l.months('long'), 1),
	Directive.standalone_month: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.standalone_month_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.standalone_month_short: lambda l, t: one_of(t, l.months('short'), 1),
	Directive.standalone_month_long: lambda l, t: one_of(t, l.months('long'), 1),

	Directive.day: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.day_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.ordinal: lambda l, t: int_unit(t, l.digits('{1,3}')),
	Directive.ordinal_three_digit: lambda l, t: int_unit(t, l.digits('{3}')),

	Directive.hour24: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.hour24_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.hour12: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.hour12_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.minute: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.minute_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.second: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.second_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.millisecond: lambda l, t: int_unit(t, l.digits('{1,3}')),
	Directive.millisecond_three_digit: lambda l, t: int_unit(t, l.digits('{3}')),
	Directive.fraction: lambda l, t: simple_unit(t, l.digits('{1,9}')),
	Directive.fraction_hundredths: lambda l, t: simple_unit(t, l.digits('{1,2}')),
	Directive.fraction_tenths: lambda l, t: int_unit(t, l.digits()),

	Directive.quarter: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.quarter_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),
	Directive.meridiem: lambda l, t: one_of(t, l.meridiems(), 0),

	Directive.week_year: lambda l, t: int_unit(t, l.digits('{4}')),
	Directive.week_year_two_digit: lambda l, t: int_unit(t, l.digits('{2,4}'), _untruncate),
	Directive.week_number: lambda l, t: int_unit(t, l.digits('{1,2}')),
	Directive.week_number_two_digit: lambda l, t: int_unit(t, l.digits('{2}')),

	Directive.weekday: lambda l, t: int_unit(t, l.digits()),
	Directive.standalone_weekday: lambda l, t: int_unit(t, l.digits()),
	Directive.weekday_short: lambda l, t: one_of(t, l.weekdays('short'), 1),
	Directive.weekday_long: lambda l, t: one_of(t, l.weekdays('long'), 1),
	Directive.standalone_weekday_short: lambda l, t: one_of(t, l.weekdays('short'), 1),
	Directive.standalone_weekday_long: lambda l, t: one_of(t, l.weekdays('long'), 1),

	Directive.offset_narrow: lambda l, t: offset_unit(t, _offset_pattern(l, True)),
	Directive.offset: lambda l, t: offset_unit(t, _offset_pattern(l, True)),
	Directive.offset_techie: lambda l, t: offset_unit(t, _offset_pattern(l, False)),

	# Names such as `EST` are ambiguous and only IANA identifiers are parsed.
	Directive.zone: lambda l, t: simple_unit(t, r'[a-z_+\-/]{1,256}?'),
}
def unit_for_token(token, locale):
	"""
	# Construct the &Unit for &token.

	# Literal tokens and letter runs that are not parseable directives match verbatim.
	# Name based directives produce an invalidated unit when the locale has no name tables.
	"""
	if token.invalid is not None:
		return Unit.invalidated(token, token.invalid)
	if token.literal:
		return literal_unit(token)

	directive = Directive.identify(token.value)
	builder = unit_builders.get(directive)
	if builder is None:
		return literal_unit(token)

	unit = builder(locale, token)
	if unit is None:
		return Unit.invalidated(token, missing_structured_format)
	return unit

def build_regex(units):
	"""
	# Concatenate the fragments of &units, each inside of a capture group, into an
	# anchored pattern source.
	"""
	return '^' + ''.join(f"({u.pattern})" for u in units) + '$'

def match(text, regex, units):
	"""
	# Match &text against &regex and collect the deserialized values of &units.

	# [ Returns ]
	# `(raw, matches)` where &raw is the &re.Match or &None, and &matches maps the
	# first letter of each directive token to its value.
	"""
	m = regex.fullmatch(text)
	if m is None:
		return None, {}

	groups = (m.group(0),) + m.groups()
	values = {}
	index = 1
	for u in units:
		count = u.groups + 1
		if not u.literal:
			values[u.token.value[0]] = u.deserialize(groups[index:index + count])
		index += count

	return m, values

field_letters = {
	'S': 'millisecond',
	's': 'second',
	'm': 'minute',
	'h': 'hour',
	'H': 'hour',
	'd': 'day',
	'o': 'ordinal',
	'L': 'month',
	'M': 'month',
	'y': 'year',
	'E': 'weekday',
	'c': 'weekday',
	'W': 'week_number',
	'k': 'week_year',
	'q': 'quarter',
}

def fields_from_matches(matches):
	"""
	# Reconcile the letter keyed &matches into calendar fields.

	# [ Returns ]
	# `(fields, zone, specific_offset)`.
	"""
	matches = dict(matches)
	zone = None
	specific_offset = None

	if 'z' in matches:
		zone = zones.IANAZone.create(str(matches['z']))

	if 'Z' in matches:
		if zone is None:
			zone = zones.FixedOffsetZone.instance(matches['Z'])
		specific_offset = matches['Z']

	if 'q' in matches:
		matches['M'] = (matches['q'] - 1) * 3 + 1

	if 'h' in matches:
		if matches['h'] < 12 and matches.get('a') == 1:
			matches['h'] += 12
		elif matches['h'] == 12 and matches.get('a') == 0:
			matches['h'] = 0

	if matches.get('G') == 0 and matches.get('y'):
		matches['y'] = -matches['y']

	if 'u' in matches:
		matches['S'] = iso.parse_millis(str(matches['u']))

	fields = {}
	for k, v in matches.items():
		f = field_letters.get(k)
		if f is not None:
			fields[f] = v

	return fields, zone, specific_offset

def check_conflicts(tokens):
	"""
	# Reject token sets combining 24-hour and 12-hour directives.

	# [ Exceptions ]
	# /&core.ConflictingSpecificationError/
		# An `H` or `HH` directive is present alongside `h`, `hh`, or `a`.
	"""
	directives = {t.value for t in tokens if not t.literal}
	has24 = bool(directives & {'H', 'HH'})
	has12 = bool(directives & {'h', 'hh', 'a'})
	if has24 and has12:
		raise core.ConflictingSpecificationError(
			"can't include meridiem or 12-hour directives when specifying 24-hour format"
		)

@dataclass
class Explanation(object):
	"""
	# The products of parsing text with a pattern.

	# [ Properties ]
	# /input/
		# The parsed text.
	# /tokens/
		# The expanded &Token sequence.
	# /regex/
		# The compiled expression; &None when disqualified.
	# /raw/
		# The &re.Match; &None when the text did not match.
	# /matches/
		# Letter keyed values; empty when the text did not match.
	# /result/
		# Calendar fields; &None when the text did not match.
	# /zone/
		# Zone identified by the text.
	# /specific_offset/
		# Offset identified by the text in minutes.
	# /invalid_reason/
		# Reason the pattern could not be used with the locale.
	"""
	input: str
	tokens: list
	regex: object = None
	raw: object = None
	matches: dict = None
	result: dict = None
	zone: object = None
	specific_offset: int = None
	invalid_reason: str = None

def explain(locale, text, fmt):
	"""
	# Parse &text with the pattern &fmt in &locale reporting every intermediate product.

	# [ Exceptions ]
	# /&core.ConflictingSpecificationError/
		# The pattern mixes 12-hour and 24-hour directives. Raised regardless of &text.
	"""
	tokens = expand_macro_tokens(parse_format(fmt), locale)
	check_conflicts(tokens)

	units = [unit_for_token(t, locale) for t in tokens]
	for u in units:
		if u.invalid is not None:
			return Explanation(text, tokens, invalid_reason=u.invalid)

	regex = re.compile(build_regex(units), re.I)
	raw, matches = match(text, regex, units)
	if raw is None:
		return Explanation(text, tokens, regex, raw, matches)

	result, zone, specific_offset = fields_from_matches(matches)
	return Explanation(text, tokens, regex, raw, matches, result, zone, specific_offset)

def parse(locale, text, fmt):
	"""
	# Parse &text with the pattern &fmt.

	# [ Returns ]
	# `(result, zone, specific_offset, invalid_reason)`.
	"""
	x = explain(locale, text, fmt)
	return (x.result, x.zone, x.specific_offset, x.invalid_reason)

# Rendering

def _names(locale, table, style):
	names = getattr(locale, table)(style)
	if names is None:
		names = getattr(Locale.create('en-US'), table)(style)
	return names

def _pad(value, width):
	if value < 0:
		return '-' + str(-value).rjust(width, '0')
	return str(value).rjust(width, '0')

def _era(pit):
	return 0 if pit.year <= 0 else 1

def _hour12(pit):
	return (pit.hour % 12) or 12

#: Rendering functions of the directives.
renderers = {
	Directive.era_short: lambda p, l: _names(l, 'eras', 'short')[_era(p)],
	Directive.era_long: lambda p, l: _names(l, 'eras', 'long')[_era(p)],
	Directive.era_narrow: lambda p, l: _names(l, 'eras', 'narrow')[_era(p)],

	Directive.year: lambda p, l: str(p.year),
	Directive.year_two_digit: lambda p, l: _pad(p.year % 100, 2),
	Directive.year_four_digit: lambda p, l: _pad(p.year, 4),
	Directive.year_extended: lambda p, l: _pad(p.year, 4),
	Directive.year_six_digit: lambda p, l: _pad(p.year, 6),

	Directive.month: lambda p, l: str(p.month),
	Directive.month_two_digit: lambda p, l: _pad(p.month, 2),
	Directive.month_short: lambda p, l: _names(l, 'months', 'short')[p.month - 1],
	Directive.month_long: lambda p, l: _names(l, 'months', 'long')[p.month - 1],
	Directive.month_narrow: lambda p, l: _names(l, 'months', 'narrow')[p.month - 1],
	Directive.standalone_month: lambda p, l: str(p.month),
	Directive.standalone_month_two_digit: lambda p, l: _pad(p.month, 2),
	Directive.standalone_month_short: lambda p, l: _names(l, 'months', 'short')[p.month - 1],
	Directive.standalone_month_long: lambda p, l: _names(l, 'months', 'long')[p.month - 1],
	Directive.standalone_month_narrow: lambda p, l: _names(l, 'months', 'narrow')[p.month - 1],

	Directive.day: lambda p, l: str(p.day),
	Directive.day_two_digit: lambda p, l: _pad(p.day, 2),
	Directive.ordinal: lambda p, l: str(p.ordinal),
	Directive.ordinal_three_digit: lambda p, l: _pad(p.ordinal, 3),

	Directive.hour24: lambda p, l: str(p.hour),
	Directive.hour24_two_digit: lambda p, l: _pad(p.hour, 2),
	Directive.hour12: lambda p, l: str(_hour12(p)),
	Directive.hour12_two_digit: lambda p, l: _pad(_hour12(p), 2),
	Directive.minute: lambda p, l: str(p.minute),
	Directive.minute_two_digit: lambda p, l: _pad(p.minute, 2),
	Directive.second: lambda p, l: str(p.second),
	Directive.second_two_digit: lambda p, l: _pad(p.second, 2),
	Directive.millisecond: lambda p, l: str(p.millisecond),
	Directive.millisecond_three_digit: lambda p, l: _pad(p.millisecond, 3),
	Directive.fraction: lambda p, l: _pad(p.millisecond, 3),
	Directive.fraction_hundredths: lambda p, l: _pad(p.millisecond // 10, 2),
	Directive.fraction_tenths: lambda p, l: str(p.millisecond // 100),

	Directive.quarter: lambda p, l: str(p.quarter),
	Directive.quarter_two_digit: lambda p, l: _pad(p.quarter, 2),
	Directive.meridiem: lambda p, l: (l.meridiems() or ['AM', 'PM'])[0 if p.hour < 12 else 1],

	Directive.week_year: lambda p, l: _pad(p.week_year, 4),
	Directive.week_year_two_digit: lambda p, l: _pad(p.week_year % 100, 2),
	Directive.week_number: lambda p, l: str(p.week_number),
	Directive.week_number_two_digit: lambda p, l: _pad(p.week_number, 2),

	Directive.weekday: lambda p, l: str(p.weekday),
	Directive.weekday_short: lambda p, l: _names(l, 'weekdays', 'short')[p.weekday - 1],
	Directive.weekday_long: lambda p, l: _names(l, 'weekdays', 'long')[p.weekday - 1],
	Directive.weekday_narrow: lambda p, l: _names(l, 'weekdays', 'narrow')[p.weekday - 1],
	Directive.standalone_weekday: lambda p, l: str(p.weekday),
	Directive.standalone_weekday_short: lambda p, l: _names(l, 'weekdays', 'short')[p.weekday - 1],
	Directive.standalone_weekday_long: lambda p, l: _names(l, 'weekdays', 'long')[p.weekday - 1],
	Directive.standalone_weekday_narrow: lambda p, l: _names(l, 'weekdays', 'narrow')[p.weekday - 1],

	Directive.offset_narrow: lambda p, l: p.zone.format_offset(p.ts, 'narrow'),
	Directive.offset: lambda p, l: p.zone.format_offset(p.ts, 'short'),
	Directive.offset_techie: lambda p, l: p.zone.format_offset(p.ts, 'techie'),
	Directive.offset_name: lambda p, l: p.zone.offset_name(p.ts, 'short') or '',
	Directive.offset_name_long: lambda p, l: p.zone.offset_name(p.ts, 'long') or '',
	Directive.zone: lambda p, l: p.zone.name,

	Directive.unix_seconds: lambda p, l: str(p.ts // 1000),
	Directive.unix_milliseconds: lambda p, l: str(p.ts),
}

#: Directives rendered with digits of the locale's numbering system.
numeric_directives = frozenset(
	d for d in Directive
	if d.value[0] in 'yMLdoHhmsSuqkWEcXx' and not (d.value[0] in 'MLEc' and len(d.value) > 2)
)

def render_token(pit, token, locale):
	"""
	# Render a single &token of a pattern for &pit.
	"""
	if token.literal:
		return token.value

	options = macro_options.get(token.value)
	if options is not None:
		parts = locale.format_parts(pit, options)
		if parts is None:
			parts = Locale.create('en-US').format_parts(pit, options)
		return ''.join(p.value for p in parts)

	directive = Directive.identify(token.value)
	if directive is None:
		return token.value

	text = renderers[directive](pit, locale)
	if directive in numeric_directives:
		text = locale.transliterate(text)
	return text

def render(pit, fmt, locale=None):
	"""
	# Render the point in time &pit with the pattern &fmt.

	# [ Parameters ]
	# /pit/
		# A valid &.instant.Instant.
	# /fmt/
		# The token pattern.
	# /locale/
		# The &.locale.Locale providing names and digits; the configured default when &None.
	"""
	if locale is None:
		locale = Locale.create()
	return ''.join(render_token(pit, t, locale) for t in parse_format(fmt))
