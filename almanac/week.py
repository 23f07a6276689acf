"""
# Week based measures of time: days of seven.

# Weekdays are numbered according to ISO 8601: Monday is `1` and Sunday is `7`.
"""
from . import gregorian

#: English names of the days of the week in ISO order.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

#: Map of weekday names and abbreviations to the ISO weekday number.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

#: ISO weekday of the unix epoch; 1970-01-01 was a Thursday.
epoch_weekday = 4

def weekday_from_days(days):
	"""
	# Derive the ISO weekday from a count of days since the unix epoch.
	"""
	return ((days + epoch_weekday - 1) % days_in_week) + 1

def day_of_week(year, month, day):
	"""
	# The ISO weekday of the proleptic Gregorian date.
	"""
	return weekday_from_days(gregorian.days_from_date((year, month, day)))
