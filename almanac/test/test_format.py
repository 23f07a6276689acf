"""
# Pattern tokenization, macro expansion, parsing, and rendering.
"""
from .. import core
from .. import format
from ..format import Token, Directive
from ..locale import Locale
from ..instant import Instant

def en():
	return Locale.create('en-US')

def values(tokens):
	return [t.value for t in tokens]

def july_fourth(**kw):
	return Instant.of(year=2023, month=7, day=4, hour=15, minute=5, second=9, **kw)

def test_parse_format(test):
	tokens = format.parse_format('yyyy-MM-dd')
	test/tokens == [
		Token.of(False, 'yyyy'),
		Token.of(True, '-'),
		Token.of(False, 'MM'),
		Token.of(True, '-'),
		Token.of(False, 'dd'),
	]

def test_parse_format_quoted(test):
	tokens = format.parse_format("yyyy'T'HH")
	test/tokens == [Token.of(False, 'yyyy'), Token.of(True, 'T'), Token.of(False, 'HH')]

	tokens = format.parse_format("'at' h")
	test/values(tokens) == ['at', ' ', 'h']
	test/[t.literal for t in tokens] == [True, True, False]

def test_parse_format_runs(test):
	tokens = format.parse_format('d MMM, yyyy')
	test/values(tokens) == ['d', ' ', 'MMM', ',', ' ', 'yyyy']
	test/[t.literal for t in tokens] == [False, True, False, True, True, False]

def test_directive_identify(test):
	test/Directive.identify('yyyy') % Directive.year_four_digit
	test/Directive.identify('a') % Directive.meridiem
	test/Directive.identify('D') == None
	test/Directive.identify('Q') == None

def test_expand_macro_tokens(test):
	expanded = format.expand_macro_tokens(format.parse_format('D'), en())
	test/values(expanded) == ['M', '/', 'd', '/', 'yyyyy']

	expanded = format.expand_macro_tokens(format.parse_format('t'), en())
	test/values(expanded) == ['h', ':', 'mm', ' ', 'a']

	expanded = format.expand_macro_tokens(format.parse_format('T'), en())
	test/values(expanded) == ['H', ':', 'mm']

	expanded = format.expand_macro_tokens(format.parse_format('DDD'), Locale.create('de-DE'))
	test/values(expanded) == ['d', '. ', 'MMMM', ' ', 'yyyyy']

def test_expand_macro_unmapped_part(test):
	"""
	# Macros rendering a zone name have no primitive equivalent and remain intact.
	"""
	tokens = format.expand_macro_tokens(format.parse_format('ttt'), en())
	test/tokens == [Token.of(False, 'ttt')]

def test_expand_macro_unstructured(test):
	l = Locale.create('en-US', structured=False)
	tokens = format.expand_macro_tokens(format.parse_format('D'), l)
	test/tokens == [Token.of(False, 'D', format.missing_structured_format)]

def test_explain(test):
	x = format.explain(en(), '2023-07-04', 'yyyy-MM-dd')
	test/x.input == '2023-07-04'
	test/x.matches == {'y': 2023, 'M': 7, 'd': 4}
	test/x.result == {'year': 2023, 'month': 7, 'day': 4}
	test/x.zone == None
	test/x.invalid_reason == None
	test/x.regex.pattern == '^([0-9]{4})(\\-)([0-9]{2})(\\-)([0-9]{2})$'
	test/(x.raw is not None) == True

def test_explain_no_match(test):
	x = format.explain(en(), 'nope', 'yyyy')
	test/x.raw == None
	test/x.matches == {}
	test/x.result == None
	test/format.parse(en(), '202', 'yyyy') == (None, None, None, None)

def test_hour_conflict(test):
	"""
	# Mixing 24-hour and 12-hour directives is rejected before matching.
	"""
	test/core.ConflictingSpecificationError ^ (lambda: format.parse(en(), 'anything', 'h H'))
	test/core.ConflictingSpecificationError ^ (lambda: format.parse(en(), '10 PM', 'HH a'))
	test/core.ConflictingSpecificationError ^ (lambda: format.explain(en(), '', 'hh:HH'))

def test_parse_names(test):
	result = format.parse(en(), 'July 4, 2023', 'MMMM d, yyyy')[0]
	test/result == {'month': 7, 'day': 4, 'year': 2023}

	result = format.parse(en(), 'sep 4 2023', 'MMM d yyyy')[0]
	test/result == {'month': 9, 'day': 4, 'year': 2023}

	result = format.parse(en(), 'Tuesday 2023-07-04', 'EEEE yyyy-MM-dd')[0]
	test/result == {'weekday': 2, 'year': 2023, 'month': 7, 'day': 4}

def test_parse_names_localized(test):
	de = Locale.create('de-DE')
	test/format.parse(de, '4. März 2023', 'd. MMMM yyyy')[0] == {'day': 4, 'month': 3, 'year': 2023}
	test/format.parse(de, '4 Sept 2023', 'd MMM yyyy')[0] == {'day': 4, 'month': 9, 'year': 2023}

def test_parse_meridiem(test):
	test/format.parse(en(), '12:30 AM', 'h:mm a')[0] == {'hour': 0, 'minute': 30}
	test/format.parse(en(), '12:30 PM', 'h:mm a')[0] == {'hour': 12, 'minute': 30}
	test/format.parse(en(), '1:05 pm', 'h:mm a')[0] == {'hour': 13, 'minute': 5}

def test_parse_offset(test):
	result, zone, offset, reason = format.parse(en(), '2023-07-04 10:00 +05:30', 'yyyy-MM-dd HH:mm ZZ')
	test/result == {'year': 2023, 'month': 7, 'day': 4, 'hour': 10, 'minute': 0}
	test/zone.name == 'UTC+5:30'
	test/offset == 330
	test/reason == None

	test/format.parse(en(), '-0430', 'ZZZ')[2] == -270

def test_parse_zone_name(test):
	result, zone, offset, reason = format.parse(en(), 'America/New_York 2023', 'z yyyy')
	test/result == {'year': 2023}
	test/zone.name == 'America/New_York'
	test/offset == None

def test_parse_quarter(test):
	result = format.parse(en(), '2023 Q3', "yyyy 'Q'q")[0]
	test/result == {'year': 2023, 'quarter': 3, 'month': 7}

def test_parse_era(test):
	test/format.parse(en(), '44 BC', 'y G')[0] == {'year': -44}
	test/format.parse(en(), '44 AD', 'y G')[0] == {'year': 44}

def test_parse_fraction(test):
	test/format.parse(en(), '05.25', 'ss.u')[0] == {'second': 5, 'millisecond': 250}
	test/format.parse(en(), '05.025', 'ss.SSS')[0] == {'second': 5, 'millisecond': 25}

def test_parse_two_digit_year(test):
	test/format.parse(en(), '23', 'yy')[0] == {'year': 2023}
	test/format.parse(en(), '75', 'yy')[0] == {'year': 1975}

def test_parse_ordinal_and_week(test):
	test/format.parse(en(), '2016 060', 'yyyy ooo')[0] == {'year': 2016, 'ordinal': 60}
	test/format.parse(en(), '2020-W01-2', "kkkk-'W'WW-E")[0] == {
		'week_year': 2020, 'week_number': 1, 'weekday': 2,
	}

def test_parse_macro(test):
	test/format.parse(en(), '4/18/2019', 'D')[0] == {'month': 4, 'day': 18, 'year': 2019}
	test/format.parse(en(), '9:05 PM', 't')[0] == {'hour': 21, 'minute': 5}
	test/format.parse(en(), '21:05', 'T')[0] == {'hour': 21, 'minute': 5}

def test_parse_unstructured(test):
	l = Locale.create('en-US', structured=False)
	test/format.explain(l, '4/18/2019', 'D').invalid_reason == format.missing_structured_format
	test/format.parse(l, 'Jul', 'MMM')[3] == format.missing_structured_format
	test/format.parse(l, '2019', 'yyyy')[0] == {'year': 2019}

def test_parse_numbering_system(test):
	ar = Locale.create('en-US', numbering='arab')
	test/format.parse(ar, '٢٠٢٣', 'yyyy')[0] == {'year': 2023}
	test/format.parse(ar, '2023', 'yyyy')[0] == None

def test_parse_literal_letters(test):
	"""
	# Letter runs that are not directives are matched verbatim.
	"""
	test/format.parse(en(), 'QQ 2023', 'QQ yyyy')[0] == {'year': 2023}

def test_from_format(test):
	pit = Instant.from_format('2023-07-04', 'yyyy-MM-dd', zone='utc')
	test/pit.to_iso() == '2023-07-04T00:00:00.000Z'

	pit = Instant.from_format('2023-07-04 10:00 +05:30', 'yyyy-MM-dd HH:mm ZZ', zone='utc')
	test/pit.to_iso() == '2023-07-04T04:30:00.000Z'

	pit = Instant.from_format('2023-07-04 10:00 +05:30', 'yyyy-MM-dd HH:mm ZZ', set_zone=True)
	test/pit.to_iso() == '2023-07-04T10:00:00.000+05:30'

	pit = Instant.from_format('18. April 2019', 'd. MMMM yyyy', zone='utc', locale='de')
	test/pit.to_iso_date() == '2019-04-18'

def test_from_format_invalid(test):
	test/Instant.from_format('x', 'yyyy', zone='utc').invalid_reason == 'unparsable'
	test/Instant.from_format('2019-02-29', 'yyyy-MM-dd', zone='utc').invalid_reason == 'unit out of range'
	test/core.ConflictingSpecificationError ^ (lambda: Instant.from_format('1', 'H a'))

def test_render(test):
	pit = july_fourth(zone='utc')
	test/format.render(pit, 'yyyy-MM-dd HH:mm:ss', en()) == '2023-07-04 15:05:09'
	test/format.render(pit, 'h:mm a', en()) == '3:05 PM'
	test/format.render(pit, 'EEEE, MMMM d', en()) == 'Tuesday, July 4'
	test/format.render(pit, "yyyy'Q'q", en()) == '2023Q3'
	test/format.render(pit, 'ooo kkkk-WW', en()) == '185 2023-27'
	test/format.render(pit, 'G yy', en()) == 'AD 23'
	test/format.render(pit, 'ZZ z', en()) == '+00:00 UTC'
	test/format.render(pit, 'X', en()) == str(pit.to_millis() // 1000)

def test_render_macros(test):
	pit = july_fourth(zone='utc')
	test/format.render(pit, 'D', en()) == '7/4/2023'
	test/format.render(pit, 'DD', en()) == 'Jul 4, 2023'
	test/format.render(pit, 'DDDD', en()) == 'Tuesday, July 4, 2023'
	test/format.render(pit, 't', en()) == '3:05 PM'
	test/format.render(pit, 'T', en()) == '15:05'
	test/format.render(pit, 'DDD', Locale.create('de-DE')) == '4. Juli 2023'

def test_render_zone(test):
	pit = july_fourth(zone='America/New_York')
	test/format.render(pit, 'ZZ', en()) == '-04:00'
	test/format.render(pit, 'ZZZ', en()) == '-0400'
	test/format.render(pit, 'Z', en()) == '-4'
	test/format.render(pit, 'ZZZZ', en()) == 'EDT'
	test/format.render(pit, 'z', en()) == 'America/New_York'

def test_render_numbering_system(test):
	pit = july_fourth(zone='utc')
	ar = Locale.create('en-US', numbering='arab')
	test/format.render(pit, 'yyyy', ar) == '٢٠٢٣'
	test/format.render(pit, 'MMMM', ar) == 'July'

def test_render_unstructured_fallback(test):
	pit = july_fourth(zone='utc')
	l = Locale.create('en-US', structured=False)
	test/format.render(pit, 'MMMM', l) == 'July'
	test/format.render(pit, 'D', l) == '7/4/2023'

def test_to_format(test):
	pit = july_fourth(zone='utc')
	test/pit.to_format('dd/MM/yyyy') == '04/07/2023'
	test/pit.to_format('MMMM', locale='fr') == 'juillet'
	test/Instant.from_iso('garbage').to_format('yyyy') == 'Invalid Instant'
