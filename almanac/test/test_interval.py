"""
# Interval construction, queries, and set operations.
"""
from .. import core
from ..instant import Instant
from ..interval import Interval
from ..settings import settings

def day(n, month=1):
	return Instant.of(year=2024, month=month, day=n, zone='utc')

def span(a, b):
	return Interval.from_instants(day(a), day(b))

def days(intervals):
	return [(i.start.day, i.end.day) for i in intervals]

def test_from_instants(test):
	i = span(1, 3)
	test/i.is_valid == True
	test/i.start == day(1)
	test/i.end == day(3)
	test/i.invalid_reason == None

def test_from_instants_friendly(test):
	settings.default_zone = 'utc'
	i = Interval.from_instants(0, {'year': 1970, 'month': 1, 'day': 2, 'zone': 'utc'})
	test/i.length('days') == 1
	test/core.InvalidArgumentError ^ (lambda: Interval.from_instants('2024-01-01', day(2)))

def test_invalid_endpoints(test):
	test/Interval.from_instants(day(5), day(1)).invalid_reason == 'end before start'
	test/Interval.from_instants(None, day(1)).invalid_reason == 'missing or invalid start'
	test/Interval.from_instants(day(1), None).invalid_reason == 'missing or invalid end'

	bad = Instant.of(year=2024, month=13, zone='utc')
	test/Interval.from_instants(bad, day(1)).invalid_reason == 'missing or invalid start'

	i = Interval.from_instants(day(5), day(1))
	test/i.start == None
	test/i.length() == None
	test/str(i) == 'Invalid Interval'
	test/i.to_iso() == 'Invalid Interval'

def test_invalid_requires_reason(test):
	test/core.InvalidArgumentError ^ (lambda: Interval.invalid(''))

def test_throw_on_invalid(test):
	settings.throw_on_invalid = True
	exc = test/core.InvalidIntervalError ^ (lambda: span(5, 1))
	test/exc.invalid.reason == 'end before start'

def test_after_before(test):
	test/Interval.after(day(1), {'days': 3}).end == day(4)
	test/Interval.before(day(4), {'days': 3}).start == day(1)
	test/Interval.after(day(31), {'months': 1}).end == day(29, month=2)

def test_from_iso(test):
	i = Interval.from_iso('2024-01-01T00:00:00Z/2024-01-04T00:00:00Z', zone='utc')
	test/i.start == day(1)
	test/i.end == day(4)

	i = Interval.from_iso('2024-01-01T00:00:00Z/P3D', zone='utc')
	test/i.end == day(4)

	i = Interval.from_iso('P3D/2024-01-04T00:00:00Z', zone='utc')
	test/i.start == day(1)

def test_from_iso_unparsable(test):
	for text in ('bad', '2024-01-01', '2024-01-01/nope', 'P1D/P2D', None):
		test/Interval.from_iso(text, zone='utc').invalid_reason == 'unparsable'

def test_str(test):
	test/str(span(1, 2)) == '[2024-01-01T00:00:00.000Z – 2024-01-02T00:00:00.000Z)'
	test/span(1, 2).to_iso() == '2024-01-01T00:00:00.000Z/2024-01-02T00:00:00.000Z'
	test/span(1, 2).to_iso(suppress_milliseconds=True) == '2024-01-01T00:00:00Z/2024-01-02T00:00:00Z'
	test/span(1, 2).to_iso_date() == '2024-01-01/2024-01-02'
	test/span(1, 2).to_iso_time() == '00:00:00.000Z/00:00:00.000Z'
	test/span(1, 2).to_format('MMM d') == 'Jan 1 – Jan 2'
	test/span(1, 2).to_format('d', separator='..') == '1..2'

def test_length_and_count(test):
	i = span(1, 11)
	test/i.length() == 10 * 24 * 60 * 60 * 1000
	test/i.length('days') == 10

	i = Interval.from_instants(day(1), day(3).plus({'hours': 12}))
	test/i.count('days') == 3
	test/i.count('months') == 1
	test/i.length('hours') == 60

def test_to_duration(test):
	d = span(1, 11).to_duration(['weeks', 'days'])
	test/dict(d) == {'weeks': 1, 'days': 3}
	test/span(5, 1).to_duration().invalid_reason == 'end before start'

def test_queries(test):
	i = span(3, 6)
	test/i.contains(day(3)) == True
	test/i.contains(day(5)) == True
	test/i.contains(day(6)) == False
	test/i.is_after(day(2)) == True
	test/i.is_after(day(3)) == False
	test/i.is_before(day(6)) == True
	test/i.is_before(day(5)) == False
	test/i.has_same('month') == True
	test/Interval.from_instants(day(31), day(2, month=2)).has_same('month') == False
	test/Interval.from_instants(day(31), day(1, month=2)).has_same('month') == True
	test/i.is_empty() == False
	test/span(3, 3).is_empty() == True

def test_relations(test):
	a = span(1, 3)
	test/a.overlaps(span(2, 5)) == True
	test/a.overlaps(span(3, 5)) == False
	test/a.abuts_start(span(3, 5)) == True
	test/span(3, 5).abuts_end(a) == True
	test/span(1, 10).engulfs(span(2, 5)) == True
	test/span(2, 5).engulfs(span(1, 10)) == False
	test/a.equals(span(1, 3)) == True
	test/a.equals(span(1, 4)) == False

def test_set(test):
	i = span(1, 3)
	test/i.set(end=day(5)).end == day(5)
	test/i.set(start=day(2)).start == day(2)
	test/i.set().invalid_reason == 'both start and end are missing'
	test/i.set(start=day(4)).invalid_reason == 'end before start'

def test_intersection(test):
	test/span(1, 5).intersection(span(3, 7)).equals(span(3, 5)) == True
	test/span(1, 3).intersection(span(4, 5)) == None
	test/span(1, 3).intersection(span(3, 5)) == None

def test_union(test):
	test/span(1, 3).union(span(5, 7)).equals(span(1, 7)) == True

def test_merge(test):
	merged = Interval.merge([span(8, 9), span(2, 5), span(1, 3), span(5, 6)])
	test/days(merged) == [(1, 6), (8, 9)]
	test/Interval.merge([]) == []
	test/days(Interval.merge([span(5, 1), span(1, 2)])) == [(1, 2)]

def test_xor(test):
	result = Interval.xor([span(1, 4), span(2, 6), span(8, 10)])
	test/days(result) == [(1, 2), (4, 6), (8, 10)]

	# Identical intervals cancel each other.
	test/Interval.xor([span(1, 4), span(1, 4)]) == []

	# Abutting pieces are merged.
	test/days(Interval.xor([span(1, 2), span(2, 3)])) == [(1, 3)]

def test_difference(test):
	result = span(1, 10).difference(span(3, 5), span(7, 8))
	test/days(result) == [(1, 3), (5, 7), (8, 10)]
	test/span(3, 5).difference(span(1, 10)) == []
	test/days(span(1, 5).difference(span(4, 10))) == [(1, 4)]

def test_split_at(test):
	pieces = span(1, 11).split_at(day(3), day(7), day(20), day(1), day(3))
	test/days(pieces) == [(1, 3), (3, 7), (7, 11)]
	test/days(span(1, 11).split_at()) == [(1, 11)]

def test_split_by(test):
	"""
	# Cuts are measured from the start and the last piece is clipped to the end.
	"""
	pieces = span(1, 11).split_by({'days': 3})
	test/[i.length('days') for i in pieces] == [3, 3, 3, 1]
	test/days(pieces) == [(1, 4), (4, 7), (7, 10), (10, 11)]

def test_split_by_months(test):
	"""
	# Month cuts are made relative to the start so that clamped days do not drift.
	"""
	i = Interval.from_instants(day(31), day(31, month=5))
	pieces = i.split_by({'months': 1})
	test/[p.end.to_iso_date() for p in pieces] == [
		'2024-02-29', '2024-03-31', '2024-04-30', '2024-05-31',
	]

def test_split_by_rejections(test):
	test/span(1, 11).split_by({'days': 0}) == []
	test/span(1, 11).split_by({'days': -1}) == []
	test/span(5, 1).split_by({'days': 1}) == []

def test_divide_equally(test):
	pieces = span(1, 11).divide_equally(2)
	test/days(pieces) == [(1, 6), (6, 11)]
	test/len(span(1, 11).divide_equally(3)) == 3

def test_map_endpoints(test):
	i = span(1, 3).map_endpoints(lambda x: x.plus({'days': 1}))
	test/i.equals(span(2, 4)) == True

def test_split_empty(test):
	test/span(3, 3).split_at(day(3)) == []
	test/span(3, 3).split_at() == []
	test/span(3, 3).split_by({'days': 1}) == []

def test_divide_equally_rejections(test):
	test/span(1, 11).divide_equally(0) == []
	test/span(1, 11).divide_equally(-2) == []

samples = [(1, 3), (2, 5), (3, 5), (4, 9), (6, 7), (1, 10), (8, 8)]

def test_half_open(test):
	for a, b in samples:
		if a < b:
			test/span(a, b).contains(day(a)) == True
			test/span(a, b).contains(day(b)) == False

def test_algebra_identities(test):
	for a, b in samples:
		A = span(a, b)
		test/Interval.xor([A, A]) == []
		test/A.difference(A) == []

		for c, d in samples:
			B = span(c, d)
			test/(len(Interval.merge([A, B])) <= 2) == True
			u = A.union(B)
			test/u.engulfs(A) == True
			test/u.engulfs(B) == True
