"""
# Data and functions regarding Earth-based units of time: the earth day and its divisions.

# Times of day are represented as a nanosecond count since midnight within
# `[0, nanoseconds_in_day)`. Arithmetic normalizes into that range and reports
# the whole days carried into, or out of, the owning date.
"""
from . import core

#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of nanoseconds contained in a `second`.
nanoseconds_in_second = 1000000000

#: Number of nanoseconds contained in a `millisecond`.
nanoseconds_in_millisecond = 1000000

#: Number of nanoseconds contained in a `minute`.
nanoseconds_in_minute = nanoseconds_in_second * seconds_in_minute

#: Number of nanoseconds contained in an `hour`.
nanoseconds_in_hour = nanoseconds_in_minute * minutes_in_hour

#: Number of nanoseconds contained in an earth `day`.
nanoseconds_in_day = nanoseconds_in_hour * hours_in_day

#: Inclusive limits of the fields of a time of day.
limits = (
	('hour', (0, hours_in_day - 1)),
	('minute', (0, minutes_in_hour - 1)),
	('second', (0, seconds_in_minute - 1)),
	('nanosecond', (0, nanoseconds_in_second - 1)),
)

def nanoseconds_from_fields(hour, minute=0, second=0, nanosecond=0, InvalidField=core.InvalidField):
	"""
	# Validate the time of day fields and return the nanoseconds since midnight.
	"""
	for (field, (low, high)), value in zip(limits, (hour, minute, second, nanosecond)):
		if value < low or value > high:
			raise InvalidField(field, value, (low, high))

	return (
		(hour * nanoseconds_in_hour) +
		(minute * nanoseconds_in_minute) +
		(second * nanoseconds_in_second) +
		nanosecond
	)

def fields_from_nanoseconds(tod):
	"""
	# Split the nanoseconds since midnight into `(hour, minute, second, nanosecond)`.
	"""
	seconds, nanosecond = divmod(tod, nanoseconds_in_second)
	minutes, second = divmod(seconds, seconds_in_minute)
	hour, minute = divmod(minutes, minutes_in_hour)
	return (hour, minute, second, nanosecond)

def add_nanoseconds(tod, nanoseconds, divmod=divmod):
	"""
	# Add &nanoseconds to the time of day, &tod, and normalize the result.

	# [ Returns ]
	# A pair: the normalized time of day and the number of whole days
	# carried. The carry is negative when the sum precedes midnight.
	"""
	carry, tod = divmod(tod + nanoseconds, nanoseconds_in_day)
	return (tod, carry)

def check(tod, InvalidField=core.InvalidField):
	"""
	# Raise &core.InvalidField if &tod is not within a day.
	"""
	if tod < 0 or tod >= nanoseconds_in_day:
		raise InvalidField('nanosecond_of_day', tod, (0, nanoseconds_in_day - 1))
	return tod
