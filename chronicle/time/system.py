"""
# Clock access.

# The current instant and the default zone are read through a &Clock so that
# callers, and tests, can substitute a &FixedClock for the &SystemClock.

#!syntax/python
	from chronicle.time import system
	clock = system.FixedClock(instant, 'America/New_York')
	zdt = system.now(clock, resolver)
"""
import os
import os.path
import time
import typing

from ..context import tools
from . import tzif
from . import types

class Clock(typing.Protocol):
	"""
	# Source of the current instant and the zone to present it in.
	"""

	def instant(self) -> int:
		"""
		# The current time in nanoseconds since the Unix epoch.
		"""

	def zone(self) -> str:
		"""
		# The identifier of the zone the clock's owner resides in.
		"""

def default_zone(environ=os.environ, localtime=tzif.tzdefault, readlink=os.readlink) -> str:
	"""
	# Identify the configured zone of the system.

	# The `TZ` environment variable is consulted first; a leading colon is removed and
	# paths inside the zone directory are made relative. Otherwise, the link target
	# of `/etc/localtime` names the zone. `UTC` is used when neither is available.
	"""
	tz = environ.get(tzif.tzenviron)
	if tz:
		tz = tz.lstrip(':')
		tzdir = environ.get(tzif.tzdirenviron) or tzif.tzdir
		if os.path.isabs(tz):
			tz = _zone_from_path(tz, tzdir)
		if tz:
			return tz

	try:
		target = readlink(localtime)
	except OSError:
		return 'UTC'

	return _zone_from_path(target, tzif.tzdir) or 'UTC'

def _zone_from_path(path, tzdir, marker='zoneinfo' + os.sep):
	if path.startswith(tzdir.rstrip(os.sep) + os.sep):
		return path[len(tzdir.rstrip(os.sep)) + 1:]

	index = path.rfind(marker)
	if index == -1:
		return None
	return path[index + len(marker):]

class SystemClock(object):
	"""
	# The real-time clock of the system and its configured zone.

	# [ Properties ]
	# /default/
		# The zone identifier returned by &zone; read from the environment on
		# construction when not given.
	"""

	def __init__(self, zone:str=None, *, read=time.time_ns, environ=os.environ):
		self.default = zone or default_zone(environ)
		self._read = read

	def __repr__(self):
		return '<%s: %s>' %(self.__class__.__name__, self.default)

	def instant(self) -> int:
		return self._read()

	def zone(self) -> str:
		return self.default

@tools.record()
class FixedClock(object):
	"""
	# A clock that always reports the given &time and &identifier.
	"""

	time: int
	identifier: str = 'UTC'

	def instant(self) -> int:
		return self.time

	def zone(self) -> str:
		return self.identifier

def now(clock:Clock, resolver) -> types.ZonedDateTime:
	"""
	# The current instant of &clock in the clock's zone.
	"""
	return types.ZonedDateTime.of_instant(clock.instant(), clock.zone(), resolver)

def local(clock:Clock, resolver) -> types.DateTime:
	"""
	# The current civil date-time of &clock in the clock's zone.
	"""
	return now(clock, resolver).to_local()

def today(clock:Clock, resolver, delta:int=0) -> types.CalendarDate:
	"""
	# The current date of &clock in the clock's zone.

	# [ Parameters ]
	# /delta/
		# The day offset to apply to the current date.
		# Defaults to zero.
	"""
	return now(clock, resolver).to_date().plus_days(delta)
