"""
# Calendar aware differences between two points in time.

# &diff measures the distance between an earlier and a later point in an ordered
# set of units. Units of a day and larger are counted on the calendar, each
# candidate measured from the earlier point; smaller units are derived
# from the remaining milliseconds. No unit is ever overshot, so the magnitudes
# do not accumulate rounding error.
"""
import math

from . import abstract
from .duration import Duration

low_order_units = ('hours', 'minutes', 'seconds', 'milliseconds')

def day_diff(earlier, later):
	"""
	# Number of calendar days between the local dates of &earlier and &later.

	# Both points are re-expressed in UTC keeping their local time so that
	# offset transitions between them do not affect the count.
	"""
	def utc_day_start(pit):
		return pit.to_utc(0, keep_local_time=True).start_of('day').to_millis()

	ms = utc_day_start(later) - utc_day_start(earlier)
	return math.floor(Duration.from_millis(ms).as_unit('days'))

def _week_diff(earlier, later):
	days = day_diff(earlier, later)
	return math.trunc(days / 7)

#: Field based estimates of the distance in each high order unit.
differs = (
	('years', lambda a, b: b.year - a.year),
	('quarters', lambda a, b: b.quarter - a.quarter + (b.year - a.year) * 4),
	('months', lambda a, b: b.month - a.month + (b.year - a.year) * 12),
	('weeks', _week_diff),
	('days', day_diff),
)

def high_order_diffs(earlier:abstract.Point, later:abstract.Point, units):
	"""
	# Count the high order &units between &earlier and &later, largest first.

	# Every candidate position is computed from &earlier with all the counts so far
	# so that day clamping and offset gaps at intermediate positions do not
	# accumulate into the lower units.

	# [ Returns ]
	# `(cursor, results, lowest_order)` where &cursor is &earlier advanced by
	# &results and &lowest_order is the smallest counted unit.
	"""
	results = {}
	lowest_order = None
	cursor = earlier

	for unit, differ in differs:
		if unit not in units:
			continue

		lowest_order = unit
		delta = differ(cursor, later)
		candidate = earlier.plus(dict(results, **{unit: delta}))

		while candidate > later:
			delta -= 1
			candidate = earlier.plus(dict(results, **{unit: delta}))

		cursor = candidate
		results[unit] = delta

	return cursor, results, lowest_order

def diff(earlier:abstract.Point, later:abstract.Point, units, conversion_accuracy='casual') -> abstract.Measure:
	"""
	# The distance from &earlier to &later as a &Duration holding exactly &units.

	# [ Parameters ]
	# /earlier/
		# The starting &.abstract.Point.
	# /later/
		# The ending &.abstract.Point; not before &earlier.
	# /units/
		# Sequence of plural unit names.
	# /conversion_accuracy/
		# Matrix selection for the resulting &Duration.

	# When no unit smaller than a day is requested, the milliseconds left after the
	# calendar count become a fraction of the smallest requested unit.
	"""
	cursor, results, lowest_order = high_order_diffs(earlier, later, units)

	remaining = later.to_millis() - cursor.to_millis()
	lower = [u for u in low_order_units if u in units]

	if not lower and lowest_order is not None and remaining:
		following = earlier.plus(dict(results, **{lowest_order: results[lowest_order] + 1}))
		span = following.to_millis() - cursor.to_millis()
		if span:
			results[lowest_order] += remaining / span

	duration = Duration.from_mapping(results, conversion_accuracy)

	if lower:
		return Duration.from_millis(remaining, conversion_accuracy).shift_to(*lower).plus(duration)
	return duration
