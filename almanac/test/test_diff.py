"""
# Calendar aware differences.
"""
from .. import diff
from .. import gregorian
from ..instant import Instant

def utc(**fields):
	return Instant.of(zone='utc', **fields)

def new_york(**fields):
	return Instant.of(zone='America/New_York', **fields)

def test_day_diff(test):
	test/diff.day_diff(utc(year=2024, month=1, day=1, hour=23), utc(year=2024, month=1, day=2)) == 1
	test/diff.day_diff(utc(year=2024, month=1, day=1), utc(year=2024, month=1, day=1, hour=23)) == 0
	test/diff.day_diff(utc(year=2023, month=12, day=25), utc(year=2024, month=1, day=1)) == 7

def test_day_diff_across_transition(test):
	"""
	# Local dates are compared; the transition's missing hour does not reduce the count.
	"""
	a = new_york(year=2024, month=3, day=9, hour=12)
	b = new_york(year=2024, month=3, day=11, hour=12)
	test/diff.day_diff(a, b) == 2
	test/dict(diff.diff(a, b, ['days'])) == {'days': 2}
	test/dict(diff.diff(a, b, ['hours'])) == {'hours': 47}

def test_diff_fractional_remainder(test):
	"""
	# Without smaller units, the remainder becomes a fraction of the smallest unit.
	"""
	a = utc(year=2024, month=1, day=1)
	b = utc(year=2024, month=1, day=2, hour=12)
	test/dict(diff.diff(a, b, ['days'])) == {'days': 1.5}

	# February 2024 has 29 days.
	b = utc(year=2024, month=2, day=15, hour=12)
	test/dict(diff.diff(a, b, ['months'])) == {'months': 1.5}

def test_diff_mixed_units(test):
	a = utc(year=2024, month=1, day=1)
	b = utc(year=2024, month=3, day=15, hour=10, minute=30)
	d = diff.diff(a, b, ['months', 'days', 'hours', 'minutes'])
	test/dict(d) == {'months': 2, 'days': 14, 'hours': 10, 'minutes': 30}
	test/list(d) == ['months', 'days', 'hours', 'minutes']

def test_diff_never_overshoots(test):
	"""
	# A candidate beyond the later point is retracted by one unit.
	"""
	a = utc(year=2024, month=1, day=31)
	b = utc(year=2024, month=3, day=1)
	test/dict(diff.diff(a, b, ['months', 'days'])) == {'months': 1, 'days': 1}

def test_diff_years_clamped(test):
	a = utc(year=2020, month=2, day=29)
	b = utc(year=2021, month=2, day=28)
	test/dict(diff.diff(a, b, ['years'])) == {'years': 1}

def test_diff_weeks(test):
	a = utc(year=2024, month=1, day=1)
	b = utc(year=2024, month=1, day=18)
	test/dict(diff.diff(a, b, ['weeks', 'days'])) == {'weeks': 2, 'days': 3}

def test_diff_quarters(test):
	a = utc(year=2024, month=1, day=1)
	b = utc(year=2024, month=7, day=1)
	test/dict(diff.diff(a, b, ['quarters'])) == {'quarters': 2}

def test_diff_low_order_only(test):
	a = utc(year=2024, month=1, day=1)
	b = utc(year=2024, month=1, day=2, minute=1)
	test/dict(diff.diff(a, b, ['hours', 'minutes'])) == {'hours': 24, 'minutes': 1}
	test/dict(diff.diff(a, b, ['milliseconds'])) == {'milliseconds': 86460000}

def test_diff_identical(test):
	a = utc(year=2024, month=1, day=1)
	test/dict(diff.diff(a, a, ['days'])) == {'days': 0}
	test/dict(diff.diff(a, a, ['months', 'hours'])) == {'months': 0, 'hours': 0}

def test_diff_conversion_accuracy(test):
	a = utc(year=2024, month=1, day=1)
	b = utc(year=2025, month=1, day=1)
	test/diff.diff(a, b, ['years'], 'longterm').conversion_accuracy == 'longterm'

def test_diff_quarters_across_years(test):
	a = utc(year=2020, month=1, day=1)
	b = utc(year=2022, month=1, day=1)
	test/dict(diff.diff(a, b, ['quarters', 'hours'])) == {'quarters': 8, 'hours': 0}
	test/dict(diff.diff(a, b, ['quarters'])) == {'quarters': 8}

	a = utc(year=1998, month=11, day=30)
	b = utc(year=2000, month=2, day=19)
	d = diff.diff(a, b, ['years', 'quarters', 'months', 'days'])
	test/dict(d) == {'years': 1, 'quarters': 0, 'months': 2, 'days': 20}
	test/a.plus(d) == b

def test_diff_intermediate_gap(test):
	"""
	# A calendar step landing in a skipped hour does not shift the later steps.
	"""
	a = new_york(year=2007, month=3, day=8, hour=2, minute=11)
	b = new_york(year=2009, month=3, day=10, hour=2, minute=11)
	d = diff.diff(a, b, ['years', 'days', 'milliseconds'])
	test/dict(d) == {'years': 2, 'days': 2, 'milliseconds': 0}
	test/a.plus(d) == b

unit_sets = [
	['years', 'months', 'days', 'milliseconds'],
	['years', 'quarters', 'months', 'days', 'milliseconds'],
	['quarters', 'weeks', 'milliseconds'],
	['months', 'weeks', 'days', 'milliseconds'],
	['days', 'milliseconds'],
	['years', 'milliseconds'],
]

spans = [
	{'days': 1, 'hours': 3},
	{'days': 40, 'minutes': 17},
	{'days': 95},
	{'days': 400, 'hours': 5},
	{'days': 1000, 'seconds': 7},
]

def test_diff_exactness(test):
	"""
	# Adding the difference to the earlier point reproduces the later point.
	"""
	for construct in (utc, new_york):
		for year in (1999, 2000):
			for month in range(1, 13):
				for day in (1, 29, 31):
					if day > gregorian.days_in_month(year, month):
						continue
					earlier = construct(year=year, month=month, day=day, hour=(month * 5) % 24, minute=day)

					for span in spans:
						later = earlier.plus(span)
						for units in unit_sets:
							d = diff.diff(earlier, later, units)
							test/list(d) == units
							test/earlier.plus(d) == later
