"""
[ About ]
---------

Civil date and time values on the proleptic Gregorian calendar with nanosecond
precision, zone offset resolution from TZif data, and pattern based text conversion.

&.library will be referred to as `libtime` throughout the examples in this documentation.

#!/pl/python
	from chronicle.time import library as libtime

[ Calendar Representation ]
---------------------------

Dates are validated on construction; fields never overflow onto larger units.

#!/pl/python
	d = libtime.date(2025, 6, 28)
	assert d.weekday == libtime.Weekday.saturday
	assert d.day_of_year == 179

Month arithmetic clamps the day to the end of the resulting month.

#!/pl/python
	assert libtime.date(2022, 1, 31).plus_months(1) == libtime.date(2022, 2, 28)

[ Differences ]
---------------

Exact differences are &.types.Duration instances; calendar differences are
&.types.Period instances whose application to the start reproduces the end.

#!/pl/python
	p = libtime.period_between(libtime.date(2023, 1, 1), libtime.date(2024, 1, 1))
	assert p == libtime.Period(years=1)

[ Time Zones ]
--------------

Zoned values hold the offset resolved for their instant. Conversion to another
zone retains the instant.

#!/pl/python
	zdt = libtime.now('Asia/Calcutta')
	ny = zdt.with_zone_same_instant('America/New_York', libtime.default_resolver())
	assert ny.is_equal(zdt)

[ Text ]
--------

#!/pl/python
	d = libtime.CalendarDate.parse("15/08/2023", "dd/MM/yyyy")
	assert d.format("yyyy.MM.dd") == "2023.08.15"
"""
__pkg_bottom__ = True
