"""
# Primary public module.

# Provides access to the value types, the between functions, text conversion, and
# the system's clock and zone database.

#!syntax/python
	from chronicle.time import library as libtime
	d = libtime.date(2025, 6, 28)
	z = libtime.now('America/New_York')
	assert libtime.days_between(libtime.date(1990, 8, 15), d) == 12736
"""
import functools

from .core import Error, InvalidField, UnsupportedField, UnknownZone, ParseError
from .week import Weekday
from .types import (
	Order,
	Duration,
	Period,
	CalendarDate,
	TimeOfDay,
	DateTime,
	ZonedDateTime,
	midnight,
	noon,
	compare,
	duration_between,
	period_between,
	days_between,
	months_between,
	years_between,
	from_epoch_millis,
	to_epoch_millis,
)
from . import format as _format
from . import system
from . import zones

__shortname__ = 'libtime'

@functools.lru_cache(1)
def default_resolver() -> zones.Resolver:
	"""
	# The shared &zones.Resolver over the system's zone database.
	"""
	return zones.Resolver(zones.SystemDatabase())

@functools.lru_cache(1)
def default_clock() -> system.SystemClock:
	"""
	# The shared &system.SystemClock.
	"""
	return system.SystemClock()

def date(year:int, month:int, day:int) -> CalendarDate:
	return CalendarDate(year, month, day)

def time(hour:int, minute:int=0, second:int=0, nanosecond:int=0) -> TimeOfDay:
	return TimeOfDay.of(hour, minute, second, nanosecond)

def datetime(year, month, day, hour=0, minute=0, second=0, nanosecond=0) -> DateTime:
	return DateTime.of(year, month, day, hour, minute, second, nanosecond)

def zoned(local:DateTime, zone:str, resolver=None) -> ZonedDateTime:
	"""
	# Resolve the civil &local date-time in &zone.
	"""
	return local.at_zone(zone, resolver or default_resolver())

def now(zone:str=None, *, clock=None, resolver=None) -> ZonedDateTime:
	"""
	# The current instant in &zone, or the clock's zone when &None.
	"""
	clock = clock or default_clock()
	resolver = resolver or default_resolver()
	if zone is not None:
		return ZonedDateTime.of_instant(clock.instant(), zone, resolver)
	return system.now(clock, resolver)

def today(delta:int=0, *, clock=None, resolver=None) -> CalendarDate:
	return now(clock=clock, resolver=resolver).to_date().plus_days(delta)

def compile(pattern:str) -> _format.FormatPlan:
	return _format.compile(pattern)

def format(value, pattern) -> str:
	"""
	# Render &value using &pattern, a pattern string or a compiled plan.
	"""
	return _format.plan(pattern).format(value)

def parse(text:str, pattern) -> _format.Fields:
	"""
	# Read &text using &pattern; the returned fields construct the value types.
	"""
	return _format.plan(pattern).parse(text)

def is_known_zone(zone:str, resolver=None) -> bool:
	return (resolver or default_resolver()).is_known_zone(zone)
