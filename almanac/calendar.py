"""
# Conversions between calendar coordinates and their validation.

# A calendar coordinate is a &dict holding one of three calendar variants:

# /Gregorian/
	# `year`, `month`, and `day`.
# /Ordinal/
	# `year` and `ordinal`, the day of the year.
# /Week Date/
	# `week_year`, `week_number`, and `weekday` as defined by ISO 8601.

# Any time of day fields, `hour`, `minute`, `second`, and `millisecond`, present
# in the given coordinate are copied into the result unchanged.

# The conversion functions presume range-valid integers; the `has_invalid_*`
# functions perform the checks and identify the first field that is out of range.
"""
from . import core
from . import gregorian
from . import week

time_fields = ('hour', 'minute', 'second', 'millisecond')

def time_object(coordinate):
	"""
	# Select the time of day fields present in &coordinate.
	"""
	return {k: coordinate[k] for k in time_fields if k in coordinate}

def compute_ordinal(year, month, day):
	return day + gregorian.ladder(year)[month - 1]

def gregorian_to_week(coordinate):
	"""
	# Convert a Gregorian coordinate to an ISO week date.
	"""
	year = coordinate['year']
	month = coordinate['month']
	day = coordinate['day']

	ordinal = compute_ordinal(year, month, day)
	weekday = week.day_of_week(year, month, day)

	week_number = (ordinal - weekday + 10) // 7
	if week_number < 1:
		week_year = year - 1
		week_number = gregorian.weeks_in_week_year(week_year)
	elif week_number > gregorian.weeks_in_week_year(year):
		week_year = year + 1
		week_number = 1
	else:
		week_year = year

	r = {'week_year': week_year, 'week_number': week_number, 'weekday': weekday}
	r.update(time_object(coordinate))
	return r

def week_to_gregorian(coordinate):
	"""
	# Convert an ISO week date to a Gregorian coordinate.
	"""
	week_year = coordinate['week_year']
	week_number = coordinate['week_number']
	weekday = coordinate['weekday']

	weekday_of_jan4 = week.day_of_week(week_year, 1, 4)
	year_in_days = gregorian.days_in_year(week_year)

	ordinal = (week_number * 7) + weekday - weekday_of_jan4 - 3
	if ordinal < 1:
		year = week_year - 1
		ordinal += gregorian.days_in_year(year)
	elif ordinal > year_in_days:
		year = week_year + 1
		ordinal -= year_in_days
	else:
		year = week_year

	month, day = gregorian.month_and_day(year, ordinal)
	r = {'year': year, 'month': month, 'day': day}
	r.update(time_object(coordinate))
	return r

def gregorian_to_ordinal(coordinate):
	year = coordinate['year']
	r = {
		'year': year,
		'ordinal': compute_ordinal(year, coordinate['month'], coordinate['day']),
	}
	r.update(time_object(coordinate))
	return r

def ordinal_to_gregorian(coordinate):
	year = coordinate['year']
	month, day = gregorian.month_and_day(year, coordinate['ordinal'])
	r = {'year': year, 'month': month, 'day': day}
	r.update(time_object(coordinate))
	return r

# Validation

def is_integer(value):
	if isinstance(value, bool):
		return False
	if isinstance(value, int):
		return True
	return isinstance(value, float) and value.is_integer()

def integer_between(value, bottom, top):
	return is_integer(value) and bottom <= value <= top

def unit_out_of_range(unit, value):
	return core.Invalid.of(
		"unit out of range",
		f"you specified {value} (of type {type(value).__name__}) as a {unit}, which is invalid"
	)

def has_invalid_week_data(coordinate):
	"""
	# Check `week_year`, `week_number`, and `weekday`.

	# [ Returns ]
	# &None when valid, otherwise an &core.Invalid naming the first offending field.
	"""
	wy = coordinate.get('week_year')
	wn = coordinate.get('week_number')
	wd = coordinate.get('weekday')

	if not is_integer(wy):
		return unit_out_of_range('week_year', wy)
	if not integer_between(wn, 1, gregorian.weeks_in_week_year(int(wy))):
		return unit_out_of_range('week_number', wn)
	if not integer_between(wd, 1, 7):
		return unit_out_of_range('weekday', wd)
	return None

def has_invalid_ordinal_data(coordinate):
	year = coordinate.get('year')
	ordinal = coordinate.get('ordinal')

	if not is_integer(year):
		return unit_out_of_range('year', year)
	if not integer_between(ordinal, 1, gregorian.days_in_year(int(year))):
		return unit_out_of_range('ordinal', ordinal)
	return None

def has_invalid_gregorian_data(coordinate):
	year = coordinate.get('year')
	month = coordinate.get('month')
	day = coordinate.get('day')

	if not is_integer(year):
		return unit_out_of_range('year', year)
	if not integer_between(month, 1, 12):
		return unit_out_of_range('month', month)
	if not integer_between(day, 1, gregorian.days_in_month(int(year), int(month))):
		return unit_out_of_range('day', day)
	return None

def has_invalid_time_data(coordinate):
	"""
	# Check the time of day fields.

	# Hour `24` is accepted only as the end of day sentinel: when the
	# minute, second, and millisecond are all zero.
	"""
	hour = coordinate.get('hour')
	minute = coordinate.get('minute')
	second = coordinate.get('second')
	millisecond = coordinate.get('millisecond')

	end_of_day = (hour == 24 and minute == 0 and second == 0 and millisecond == 0)
	if not (integer_between(hour, 0, 23) or (is_integer(hour) and end_of_day)):
		return unit_out_of_range('hour', hour)
	if not integer_between(minute, 0, 59):
		return unit_out_of_range('minute', minute)
	if not integer_between(second, 0, 59):
		return unit_out_of_range('second', second)
	if not integer_between(millisecond, 0, 999):
		return unit_out_of_range('millisecond', millisecond)
	return None
