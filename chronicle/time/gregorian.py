"""
# Proleptic Gregorian calendar functions and data.

# Dates are represented as `(year, month, day)` triples with one-based months and days.
# Linear day counts are measured from the Unix epoch, 1970-01-01, with &days_from_civil
# and &civil_from_days providing the exact transformation between the two forms.

# Unlike the day counts, dates are validated: &validate raises &core.InvalidField
# for months outside `1..12` and days beyond &length_of_month. The add functions
# never produce invalid dates; month and year addition clamp the day of month to
# the length of the resulting month.
"""
from . import calendar as callib
from . import core

#: Number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: Number of years in a century.
years_in_century = 100

#: Number of years in a gregorian cycle.
years_in_cycle = centuries_in_cycle * years_in_century

#: English names of the months of the year.
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

#: Number of months in a year.
months_in_year = len(month_names)

#: Abbreviations for the english names of the months of the year.
month_abbreviations = tuple(x[:3] for x in month_names)

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

# Gregorian Cycle; the cycle begins at year zero, a leap year.
leap_cycle = (
	('leap', 1, calendar_leap),
	('years', 3, calendar_year)
)

cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-year-exception', 4, calendar_year),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

calendar = callib.aggregate(cycle)

#: Total number of months in a Gregorian cycle.
months_in_cycle = calendar.total[0]

#: Total number of days in a Gregorian cycle.
days_in_cycle = calendar.total[1]

def resolve_by_months(months, _resolve=callib.resolve, _calendar=calendar):
	return _resolve(0, 1, months, _calendar)

def resolve_by_days(days, _resolve=callib.resolve, _calendar=calendar):
	return _resolve(1, 0, days, _calendar)

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def length_of_month(year, month):
	"""
	# The number of days in the one-based &month of the &year.
	"""
	if month == 2 and year_is_leap(year):
		return 29
	return calendar_year[month-1]

def length_of_year(year):
	"""
	# The number of days in the &year; 365 or 366.
	"""
	return 366 if year_is_leap(year) else 365

def date_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the days since year zero into a Gregorian date in the common form:
	# `(year, month, day)`.
	"""
	cycles, months, day, _d = _resolver(days)
	year_of_cycle, moy = divmod(months, months_in_year)
	return ((cycles * years_in_cycle) + year_of_cycle, moy + 1, day + 1)

def days_from_date(date, _resolver=resolve_by_months):
	"""
	# Convert a Gregorian date in the common form, `(year, month, day)`, to the number
	# of days since year zero leading up to the date.
	"""
	year, month, day = date
	cycles, day_of_cycle, moy, _d = _resolver((month - 1) + (year * months_in_year))
	return (cycles * days_in_cycle) + day_of_cycle + (day - 1)

#: Number of days between 0000-01-01 and the Unix epoch, 1970-01-01.
unix_epoch_days = days_from_date((1970, 1, 1))

def days_from_civil(date, _epoch=unix_epoch_days):
	"""
	# Number of days since 1970-01-01 of the given `(year, month, day)` &date.
	# Negative for dates preceding the epoch.
	"""
	return days_from_date(date) - _epoch

def civil_from_days(days, _epoch=unix_epoch_days):
	"""
	# Inverse of &days_from_civil.
	"""
	return date_from_days(days + _epoch)

def day_of_year(date):
	"""
	# The one-based index of the &date within its year.
	"""
	year, month, day = date
	return days_from_date(date) - days_from_date((year, 1, 1)) + 1

def validate(year, month, day, InvalidField=core.InvalidField):
	"""
	# Raise &core.InvalidField if the &month or &day is out of range for the &year.
	"""
	if month < 1 or month > months_in_year:
		raise InvalidField('month', month, (1, months_in_year))

	limit = length_of_month(year, month)
	if day < 1 or day > limit:
		raise InvalidField('day', day, (1, limit))

	return (year, month, day)

def add_days(date, days):
	"""
	# Add the given number of &days to the &date. Exact.
	"""
	return civil_from_days(days_from_civil(date) + days)

def add_months(date, months):
	"""
	# Add the given number of &months to the &date clamping the day of month
	# to the length of the resulting month.

	#!syntax/python
		assert add_months((2022, 1, 31), 1) == (2022, 2, 28)
	"""
	year, month, day = date
	y, m = divmod((month - 1) + months, months_in_year)
	y += year
	m += 1
	return (y, m, min(day, length_of_month(y, m)))

def add_years(date, years):
	"""
	# Add the given number of &years to the &date; February 29 is clamped to the 28th
	# when the resulting year is not a leap year.
	"""
	return add_months(date, years * months_in_year)

def month_index(date):
	"""
	# The number of months since year zero of the &date's month.
	"""
	return (date[0] * months_in_year) + (date[1] - 1)
