"""
[ About ]
---------

almanac is a calendar arithmetic package. Points in time are epoch milliseconds
bound to a zone, amounts of time are mappings of calendar units, and spans of time
are half-open intervals. Text interchange is provided by ISO 8601 and by
token patterns that can be localized.

Calendar Support:

	- Proleptic Gregorian
	- Ordinal dates
	- ISO 8601 week dates

Values that cannot be constructed from their data are returned in an invalid state
carrying a reason; &.settings.Settings.throw_on_invalid turns those into exceptions.

#!/pl/python
	from almanac.instant import Instant
	pit = Instant.of(year=2016, month=2, day=29, zone='utc')
	assert pit.ordinal == 60
	assert pit.week_number == 9

	bad = Instant.of(year=2019, month=2, day=29, zone='utc')
	assert bad.invalid_reason == 'unit out of range'

[ Calendar Math ]
-----------------

Month and year arithmetic clamps the day to the length of the target month;
hours and smaller units are elapsed time.

#!/pl/python
	pit = Instant.of(year=2020, month=1, day=31, zone='utc')
	assert pit.plus({'months': 1}).to_iso_date() == '2020-02-29'

	ny = Instant.of(year=2024, month=3, day=10, zone='America/New_York')
	ny.plus({'days': 1})  # 2024-03-11T00:00:00.000-04:00
	ny.plus({'hours': 24}) # 2024-03-11T01:00:00.000-04:00

Differences are counted on the calendar and never overshoot:

#!/pl/python
	a = Instant.of(year=2024, month=1, day=31, zone='utc')
	b = Instant.of(year=2024, month=3, day=1, zone='utc')
	assert dict(b.diff(a, ['months', 'days'])) == {'months': 1, 'days': 1}

[ Text ]
--------

#!/pl/python
	pit = Instant.from_format('July 4, 2023', 'MMMM d, yyyy', zone='utc')
	pit.to_format('DDDD') # 'Tuesday, July 4, 2023'
	pit.to_format('DDD', locale='de') # '4. Juli 2023'

[ Intervals ]
-------------

#!/pl/python
	from almanac.interval import Interval
	i = Interval.from_iso('2024-01-01T00:00:00Z/P10D', zone='utc')
	[x.length('days') for x in i.split_by({'days': 3})] # [3, 3, 3, 1]
"""
__pkg_bottom__ = True
