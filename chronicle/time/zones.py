"""
# Zone offset resolution.

# A zone database is any object implementing &Database: given a zone identifier and
# an instant, it produces the &Offset in effect. The &Resolver wraps a database,
# recognizes fixed identifiers such as `UTC` and `+05:30` on its own, rounds offsets
# to whole minutes, and maps civil date-times back to instants.

# Instants are integers counting nanoseconds since the Unix epoch.

#!syntax/python
	from chronicle.time import zones
	r = zones.Resolver(zones.SystemDatabase())
	minutes = r.resolve('America/New_York', instant)
"""
import os
import os.path
import bisect
import logging
import typing

from ..context import tools
from . import core
from . import earth
from . import tzif

log = logging.getLogger(__name__)

class Offset(tuple):
	"""
	# Offsets are constructed by a tuple of the form: `(seconds, abbreviation, type)`.
	# Primarily, the type signifies whether or not the offset is daylight
	# savings time.

	# &Offset instances are usually extracted from &Zone objects which
	# build a sequence of transitions for subsequent searching.
	"""
	__slots__ = ()

	@property
	def magnitude(self) -> int:
		"""
		# The offset in seconds from UTC.
		"""
		return self[0]

	@property
	def abbreviation(self) -> str:
		"""
		# The Offset's timezone abbreviation; such as UTC, GMT, and EST.
		"""
		return self[1]

	@property
	def type(self) -> str:
		"""
		# Field used to identify if the &Offset is daylight savings time.
		"""
		return self[2]

	@property
	def is_dst(self) -> bool:
		return self.type == 'dst'

	@property
	def minutes(self) -> int:
		"""
		# The offset rounded to the nearest minute; halves are rounded away from zero.
		"""
		m, s = divmod(abs(self[0]), earth.seconds_in_minute)
		if s * 2 >= earth.seconds_in_minute:
			m += 1
		return m if self[0] >= 0 else -m

	def __str__(self):
		return '%s%s%d' %(
			self.abbreviation,
			"+" if self.magnitude >= 0 else "-",
			abs(self.magnitude)
		)

	def __repr__(self):
		return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

	def __int__(self):
		return self.magnitude

	@classmethod
	def from_tzinfo(Class, tzinfo):
		"""
		# Construct an Offset instance from a &.tzif.tzinfo tuple.
		"""
		return Class(
			(
				tzinfo.tz_offset,
				tzinfo.tz_abbrev.decode('ascii'),
				'dst' if tzinfo.tz_isdst else 'std',
			)
		)

	@classmethod
	def fixed(Class, minutes:int, abbreviation:str='UTC'):
		"""
		# Construct a standard time offset from whole minutes.
		"""
		return Class((minutes * earth.seconds_in_minute, abbreviation, 'std'))

utc = Offset.fixed(0)

class Zone(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /transitions/
		# Sorted sequence of transition times in seconds since the Unix epoch.
	# /offsets/
		# The &Offset taking effect at the corresponding transition.
	# /default/
		# The &Offset in effect before the first transition.
	# /name/
		# The zone's identifier.
	"""

	def __init__(self, transitions, offsets, default, name):
		self.transitions = transitions
		self.offsets = offsets
		self.default = default
		self.name = name

	def __repr__(self):
		return '<%s: %s[%d/%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
			len(self.offsets),
		)

	def find(self, instant, search=bisect.bisect, second=earth.nanoseconds_in_second):
		"""
		# Get the appropriate offset in the zone for the given &instant.
		# If the &instant precedes the first transition, the &default will be returned.

		# [ Parameters ]
		# /instant/
			# Nanoseconds since the Unix epoch.
		"""
		idx = search(self.transitions, instant // second) - 1
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def slice(self, start, stop, search=bisect.bisect, second=earth.nanoseconds_in_second):
		"""
		# Get a slice of transition times and zone offsets relative to a given &start and &stop.

		# Returns an iterable of `(unix_seconds, Offset)` pairs for the transition in effect
		# at &start and those that occurred during the period.
		"""
		first_offset = max(0, search(self.transitions, start // second) - 1)
		last_offset = search(self.transitions, stop // second)

		trans = self.transitions[first_offset:last_offset]
		offs = self.offsets[first_offset:last_offset]

		return zip(trans, offs)

	@classmethod
	def from_tzif_data(Class, tzd, name=None, cachedcalls=tools.cachedcalls):
		# Re-use prior created offsets.
		zb = cachedcalls(maxsize=None)(Offset.from_tzinfo)

		types, transitions, leaps = tzd

		transition_offsets = [zb(x[1]) for x in transitions]
		transition_points = [x[0] for x in transitions]

		return Class(transition_points, transition_offsets, zb(types[0]), name)

	@classmethod
	def from_file(Class, filepath, name=None):
		"""
		# Load the zone from a TZif file. Returns &None if the file is not TZif data.
		"""
		tzd = tzif.get_timezone_data(filepath)
		if tzd is None:
			return None
		return Class.from_tzif_data(tzd, name = name or filepath)

	@classmethod
	def from_table(Class, name, default, *changes):
		"""
		# Construct a zone from literal `(unix_seconds, Offset)` &changes.
		"""
		changes = sorted(changes, key=lambda x: x[0])
		return Class([x[0] for x in changes], [x[1] for x in changes], default, name)

class Database(typing.Protocol):
	"""
	# The zone data source interface. Implementations must be deterministic for a given
	# zone identifier and instant, and safe for concurrent lookups.
	"""

	def resolve(self, zone:str, instant:int) -> Offset:
		"""
		# The offset in effect in &zone at &instant.
		# Raises &core.UnknownZone when the identifier is not recognized.
		"""

	def is_known_zone(self, zone:str) -> bool:
		"""
		# Whether the &zone is recognized by the database.
		"""

	def identifiers(self) -> typing.Iterable[str]:
		"""
		# The zone identifiers known to the database.
		"""

class TableDatabase(object):
	"""
	# In-memory zone database built from &Zone instances.
	"""

	def __init__(self, zones:typing.Iterable[Zone]=()):
		self.zones = {z.name: z for z in zones}

	def __repr__(self):
		return '<%s: %s>' %(self.__class__.__name__, ', '.join(sorted(self.zones)))

	def zone(self, zone:str) -> Zone:
		try:
			return self.zones[zone]
		except KeyError:
			raise core.UnknownZone(zone) from None

	def is_known_zone(self, zone:str) -> bool:
		return zone in self.zones

	def identifiers(self):
		return sorted(self.zones)

	def resolve(self, zone:str, instant:int) -> Offset:
		return self.zone(zone).find(instant)

class SystemDatabase(object):
	"""
	# Zone database reading the compiled TZif files of the system.

	# Zones are loaded on first use and cached.

	# [ Properties ]
	# /directory/
		# The root of the zone files; `TZDIR` or `/usr/share/zoneinfo` by default.
	"""

	def __init__(self, directory:str=None, *, environ=os.environ, cache:int=64):
		self.directory = directory or environ.get(tzif.tzdirenviron) or tzif.tzdir
		self.zone = tools.cachedcalls(cache)(self.load)

	def __repr__(self):
		return '<%s: %s>' %(self.__class__.__name__, self.directory)

	def path(self, zone:str, normpath=os.path.normpath, join=os.path.join) -> str:
		"""
		# The file path of the &zone's data. Raises &core.UnknownZone for identifiers
		# that are absolute, leave the &directory, or cannot name a file.
		"""
		if not zone or '\0' in zone:
			raise core.UnknownZone(zone)

		rpath = normpath(zone)
		if os.path.isabs(zone) or rpath.startswith(os.pardir) or rpath == os.curdir:
			raise core.UnknownZone(zone)
		return join(self.directory, rpath)

	def load(self, zone:str) -> Zone:
		"""
		# Read the &Zone identified by &zone from the &directory. Uncached.
		"""
		path = self.path(zone)
		try:
			z = Zone.from_file(path, name=zone)
		except OSError as err:
			raise core.UnknownZone(zone) from err

		if z is None:
			log.warning("zone file is not TZif data: %s", path)
			raise core.UnknownZone(zone)

		log.debug("loaded zone %r from %s: %d transitions", zone, path, len(z.transitions))
		return z

	def is_known_zone(self, zone:str) -> bool:
		try:
			self.zone(zone)
		except core.UnknownZone:
			return False
		return True

	def identifiers(self):
		"""
		# The relative paths of the TZif files in the &directory.
		"""
		return tzif.identifiers(self.directory)

	def resolve(self, zone:str, instant:int) -> Offset:
		return self.zone(zone).find(instant)

def parse_fixed(zone:str):
	"""
	# Identify the offset in minutes of a fixed zone identifier.

	# Recognizes `UTC`, `GMT`, `UT`, `Z`, `±hh:mm`, `±hhmm`, `±hh`, and the
	# prefixed forms `UTC±hh:mm` and `GMT±hh:mm`.
	# Returns &None when &zone is not a fixed identifier or the offset is out of range.
	"""
	if zone in ('Z', 'UTC', 'GMT', 'UT'):
		return 0

	for prefix in ('UTC', 'GMT', 'UT'):
		if zone.startswith(prefix) and zone[len(prefix):len(prefix)+1] in ('+', '-'):
			zone = zone[len(prefix):]
			break

	if zone[:1] not in ('+', '-'):
		return None

	body = zone[1:]
	if len(body) == 5 and body[2] == ':':
		digits = body[:2] + body[3:]
	elif len(body) in (2, 4):
		digits = body
	else:
		return None

	if not (digits.isascii() and digits.isdigit()):
		return None

	hours = int(digits[:2])
	minutes = int(digits[2:] or '0')
	if hours > 18 or minutes >= earth.minutes_in_hour:
		return None

	m = (hours * earth.minutes_in_hour) + minutes
	return -m if zone[0] == '-' else m

def format_offset(minutes:int) -> str:
	"""
	# Render the offset in the ISO-8601 extended form; `Z` for zero.
	"""
	if minutes == 0:
		return 'Z'
	h, m = divmod(abs(minutes), earth.minutes_in_hour)
	return "%s%02d:%02d" %('-' if minutes < 0 else '+', h, m)

class Resolver(object):
	"""
	# Zone offset resolution against a &Database.

	# [ Properties ]
	# /database/
		# The &Database consulted for zone identifiers that are not fixed.
	"""

	def __init__(self, database:Database):
		self.database = database

	def __repr__(self):
		return '<%s: %r>' %(self.__class__.__name__, self.database)

	def is_known_zone(self, zone:str) -> bool:
		return parse_fixed(zone) is not None or self.database.is_known_zone(zone)

	def offset(self, zone:str, instant:int) -> Offset:
		"""
		# The complete &Offset in effect for &zone at &instant.
		"""
		fixed = parse_fixed(zone)
		if fixed is not None:
			return Offset.fixed(fixed, 'UTC' if fixed == 0 else zone)

		if not self.database.is_known_zone(zone):
			raise core.UnknownZone(zone)

		return self.database.resolve(zone, instant)

	def resolve(self, zone:str, instant:int) -> int:
		"""
		# The offset in whole minutes for &zone at &instant.
		"""
		return self.offset(zone, instant).minutes

	def local(self, zone:str, local:int, day=earth.nanoseconds_in_day, minute=earth.nanoseconds_in_minute):
		"""
		# Map a civil date-time in &zone, expressed as nanoseconds since the epoch
		# on the local time line, to its instant.

		# When the local time is repeated by a transition, the earlier offset is used.
		# When the local time is skipped by a transition, the time is moved forward by
		# the length of the gap.

		# [ Returns ]
		# A pair: the instant and the offset in minutes.
		"""
		earlier = self.resolve(zone, local - day)
		later = self.resolve(zone, local + day)

		for offset in (earlier, later):
			instant = local - (offset * minute)
			if self.resolve(zone, instant) == offset:
				return (instant, offset)

		# Gap; interpret with the offset before the transition.
		instant = local - (earlier * minute)
		return (instant, self.resolve(zone, instant))
