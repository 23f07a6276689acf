"""
# Gregorian calendar functions and data.

# Days are counted relative to the unix epoch, 1970-01-01, so that
# `days_from_date((1970, 1, 1)) == 0`. The calendar is proleptic; year zero exists
# and is a leap year.
"""
import itertools

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Days preceding the first of each month in a common year.
ladder_year = tuple(itertools.accumulate((0,) + calendar_year[:-1]))

#: Days preceding the first of each month in a leap year.
ladder_leap = tuple(itertools.accumulate((0,) + calendar_leap[:-1]))

#: Number of days in a gregorian cycle.
days_in_cycle = (years_in_cycle * 365) + (years_in_cycle // 4) - (years_in_cycle // 100) + 1

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_year(y):
	return 366 if year_is_leap(y) else 365

def days_in_month(year, month):
	"""
	# Number of days in the &month of &year.

	# Months outside of `1-12` are normalized and carried onto the year
	# so that `days_in_month(2019, 14)` is the number of days in February 2020.
	"""
	y, m = divmod(month - 1, months_in_year)
	table = calendar_leap if year_is_leap(year + y) else calendar_year
	return table[m]

def ladder(year):
	"""
	# The cumulative days-per-month ladder appropriate for &year.
	"""
	return ladder_leap if year_is_leap(year) else ladder_year

def weeks_in_week_year(week_year):
	"""
	# Number of ISO weeks, 52 or 53, in the given week year.

	# A week year has 53 weeks when it starts on a Thursday or
	# when it is a leap year starting on a Wednesday.
	"""
	def p(y):
		return (y + (y // 4) - (y // 100) + (y // 400)) % 7

	if p(week_year) == 4 or p(week_year - 1) == 3:
		return 53
	return 52

def untruncate_year(year, cutoff=60):
	"""
	# Expand a two digit year into the century selected by &cutoff.
	"""
	if year > 99:
		return year
	return 1900 + year if year > cutoff else 2000 + year

def days_before_year(year):
	"""
	# Number of days from year zero to the first day of &year.
	"""
	cycles, yc = divmod(year, years_in_cycle)
	leaps = ((yc + 3) // 4) - ((yc + 99) // 100) + ((yc + 399) // 400)
	return (cycles * days_in_cycle) + (yc * 365) + leaps

#: Days between the first day of year zero and the unix epoch.
epoch_offset = days_before_year(1970)

def days_from_date(date):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days since the unix epoch.

	# Day and month overflow onto the larger units.
	"""
	year, month, day = date
	year_carry, moy = divmod(month - 1, months_in_year)
	year += year_carry
	return days_before_year(year) + ladder(year)[moy] + (day - 1) - epoch_offset

def date_from_days(days):
	"""
	# Convert the given days since the unix epoch into a Gregorian date in the
	# common form: (year, month, day).
	"""
	cycles, doc = divmod(days + epoch_offset, days_in_cycle)
	yc = min(doc // 365, years_in_cycle - 1)
	while days_before_year(yc) > doc:
		yc -= 1

	year = (cycles * years_in_cycle) + yc
	ordinal = doc - days_before_year(yc) + 1
	return (year,) + month_and_day(year, ordinal)

def month_and_day(year, ordinal):
	"""
	# Resolve the &ordinal day of &year into a (month, day) pair.
	"""
	table = ladder(year)
	month0 = len(table) - 1
	while table[month0] >= ordinal:
		month0 -= 1
	return (month0 + 1, ordinal - table[month0])
