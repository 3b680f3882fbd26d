"""
# Date and time value types.

#!syntax/python
	d1 = types.CalendarDate(2023, 1, 1)
	d2 = types.CalendarDate(2024, 1, 1)

	assert d1.is_before(d2)
	assert types.period_between(d1, d2) == types.Period(years=1)
	assert types.days_between(d1, d2) == 365

# All types are immutable. Operations producing a different point in time return new
# instances; no field can be out of range after construction.

# [ Elements ]

# /CalendarDate/
	# A day on the proleptic Gregorian calendar.
# /TimeOfDay/
	# A nanosecond precision offset within an earth day.
# /DateTime/
	# A civil date combined with a time of day. No zone is assumed.
# /ZonedDateTime/
	# A &DateTime with the offset resolved for a zone at its instant.
# /Duration/
	# An exact, calendar independent, count of nanoseconds.
# /Period/
	# Calendar relative elapsed time in years, months, and days.
# /Order/
	# The result of &compare.
"""
import enum

from ..context import tools
from . import core
from . import earth
from . import gregorian
from . import week
from . import zones

class Order(enum.IntEnum):
	before = -1
	equal = 0
	after = 1

def _iso_year(year:int) -> str:
	if 0 <= year <= 9999:
		return f"{year:04}"
	elif -9999 <= year < 0:
		return f"-{-year:04}"
	elif year > 0:
		return f"+{year}"
	else:
		return f"{year}"

class Duration(int):
	"""
	# Elapsed time in exact nanoseconds.

	#!syntax/python
		two_hours = Duration.of(hour=2)
		assert two_hours.select('minute') == 120
	"""
	__slots__ = ()

	unit_sizes = {
		'day': earth.nanoseconds_in_day,
		'hour': earth.nanoseconds_in_hour,
		'minute': earth.nanoseconds_in_minute,
		'second': earth.nanoseconds_in_second,
		'millisecond': earth.nanoseconds_in_millisecond,
		'microsecond': 1000,
		'nanosecond': 1,
	}

	@classmethod
	def of(Class, **parts):
		"""
		# Create a duration from the sum of the given unit quantities.

		#!syntax/python
			Duration.of(hour=33, microsecond=44)
		"""
		total = 0
		for unit, quantity in parts.items():
			try:
				total += quantity * Class.unit_sizes[unit]
			except KeyError:
				raise TypeError("unknown duration unit: " + repr(unit)) from None
		return Class(total)

	def select(self, unit:str) -> int:
		"""
		# The number of whole &unit in the duration, truncated toward zero.
		"""
		q = abs(int(self)) // self.unit_sizes[unit]
		return -q if self < 0 else q

	def __neg__(self):
		return self.__class__(-int(self))

	def __abs__(self):
		return self.__class__(abs(int(self)))

	def __add__(self, other):
		if not isinstance(other, Duration):
			return NotImplemented
		return self.__class__(int(self) + int(other))

	def __sub__(self, other):
		if not isinstance(other, Duration):
			return NotImplemented
		return self.__class__(int(self) - int(other))

	def __mul__(self, factor):
		if not isinstance(factor, int) or isinstance(factor, Duration):
			return NotImplemented
		return self.__class__(int(self) * factor)
	__rmul__ = __mul__

	def __repr__(self):
		ufields = ['d', 'h', 'm', 's', 'ms', 'us', 'ns']
		q = abs(int(self))
		parts = []
		for u, size in zip(ufields, self.unit_sizes.values()):
			v, q = divmod(q, size)
			if v:
				parts.append(str(v) + u)
		units = ('-' if self < 0 else '') + ('.'.join(parts) or '0')
		return f"(time.duration@'{units}')"

	def __str__(self):
		# ISO-8601 with hours as the largest unit; each component carries the sign.
		sign = '-' if self < 0 else ''
		q = abs(int(self))
		h, q = divmod(q, earth.nanoseconds_in_hour)
		m, q = divmod(q, earth.nanoseconds_in_minute)
		s, ns = divmod(q, earth.nanoseconds_in_second)

		text = 'PT'
		if h:
			text += f"{sign}{h}H"
		if m:
			text += f"{sign}{m}M"
		if s or ns or not (h or m):
			text += f"{sign}{s}"
			if ns:
				text += '.' + f"{ns:09}".rstrip('0')
			text += 'S'
		return text

	@classmethod
	def between(Class, start, end):
		return duration_between(start, end)

class Civil(object):
	"""
	# Common comparison and rendering methods of the date and time types.
	"""
	__slots__ = ()

	def is_before(self, other) -> bool:
		return compare(self, other) == Order.before

	def is_after(self, other) -> bool:
		return compare(self, other) == Order.after

	def is_equal(self, other) -> bool:
		"""
		# Whether &other designates the same position on the time line.
		# For zoned values, the instants are compared regardless of zone.
		"""
		return compare(self, other) == Order.equal

	def format(self, pattern) -> str:
		"""
		# Render the value using a pattern string or a compiled &.format.FormatPlan.
		"""
		from . import format
		return format.plan(pattern).format(self)

@tools.record(order=True)
class CalendarDate(Civil):
	"""
	# A day on the proleptic Gregorian calendar.

	# Raises &core.InvalidField on construction when the month or day is out of range.
	"""

	year: int
	month: int
	day: int

	def __post_init__(self):
		gregorian.validate(self.year, self.month, self.day)

	@classmethod
	def of_days(Class, days:int):
		"""
		# Construct the date from the number of days since 1970-01-01.
		"""
		return Class(*gregorian.civil_from_days(days))

	@classmethod
	def of_year_day(Class, year:int, day:int):
		"""
		# Construct the date from the one-based &day of the &year.
		"""
		limit = gregorian.length_of_year(year)
		if day < 1 or day > limit:
			raise core.InvalidField('day_of_year', day, (1, limit))
		return Class(*gregorian.add_days((year, 1, 1), day - 1))

	@classmethod
	def parse(Class, text:str, pattern=None):
		"""
		# Parse the &text as an ISO-8601 date, `yyyy-MM-dd`, or by the given &pattern.
		"""
		from . import format
		return format.plan(pattern or format.iso_date).parse(text).date()

	@property
	def days(self) -> int:
		"""
		# Number of days since 1970-01-01.
		"""
		return gregorian.days_from_civil((self.year, self.month, self.day))

	@property
	def weekday(self) -> week.Weekday:
		return week.day_of_week(self.days)

	@property
	def day_of_year(self) -> int:
		return gregorian.day_of_year((self.year, self.month, self.day))

	@property
	def length_of_month(self) -> int:
		return gregorian.length_of_month(self.year, self.month)

	@property
	def length_of_year(self) -> int:
		return gregorian.length_of_year(self.year)

	def is_leap_year(self) -> bool:
		return gregorian.year_is_leap(self.year)

	def plus_days(self, days:int):
		return self.__class__(*gregorian.add_days((self.year, self.month, self.day), days))

	def plus_weeks(self, weeks:int):
		return self.plus_days(weeks * week.days_in_week)

	def plus_months(self, months:int):
		return self.__class__(*gregorian.add_months((self.year, self.month, self.day), months))

	def plus_years(self, years:int):
		return self.__class__(*gregorian.add_years((self.year, self.month, self.day), years))

	def minus_days(self, days:int):
		return self.plus_days(-days)

	def minus_weeks(self, weeks:int):
		return self.plus_weeks(-weeks)

	def minus_months(self, months:int):
		return self.plus_months(-months)

	def minus_years(self, years:int):
		return self.plus_years(-years)

	def with_day(self, day:int):
		return self.__class__(self.year, self.month, day)

	def with_month(self, month:int):
		return self.__class__(self.year, month, self.day)

	def with_year(self, year:int):
		return self.__class__(year, self.month, self.day)

	def at_time(self, time):
		return DateTime(self, time)

	def at_start_of_day(self):
		return DateTime(self, midnight)

	def __str__(self):
		return f"{_iso_year(self.year)}-{self.month:02}-{self.day:02}"

	def __repr__(self):
		return f"(time.date@'{self}')"

@tools.record(order=True)
class TimeOfDay(Civil):
	"""
	# An offset within a 24-hour day in nanoseconds since midnight.
	"""

	nanoseconds: int

	def __post_init__(self):
		earth.check(self.nanoseconds)

	@classmethod
	def of(Class, hour:int, minute:int=0, second:int=0, nanosecond:int=0):
		"""
		# Construct the time of day from its fields.
		# Raises &core.InvalidField when a field is out of range.
		"""
		return Class(earth.nanoseconds_from_fields(hour, minute, second, nanosecond))

	@classmethod
	def parse(Class, text:str, pattern=None):
		"""
		# Parse the &text as an ISO-8601 time, `HH:mm[:ss[.S…]]`, or by the given &pattern.
		"""
		from . import format
		if pattern is None:
			return format.parse_iso_time(text)
		return format.plan(pattern).parse(text).time()

	@property
	def fields(self):
		"""
		# The `(hour, minute, second, nanosecond)` tuple of the time.
		"""
		return earth.fields_from_nanoseconds(self.nanoseconds)

	@property
	def hour(self) -> int:
		return self.nanoseconds // earth.nanoseconds_in_hour

	@property
	def minute(self) -> int:
		return (self.nanoseconds // earth.nanoseconds_in_minute) % earth.minutes_in_hour

	@property
	def second(self) -> int:
		return (self.nanoseconds // earth.nanoseconds_in_second) % earth.seconds_in_minute

	@property
	def nanosecond(self) -> int:
		return self.nanoseconds % earth.nanoseconds_in_second

	def add_nanoseconds(self, nanoseconds:int):
		"""
		# Add the &nanoseconds and normalize into the day.

		# [ Returns ]
		# A pair: the resulting &TimeOfDay and the number of whole days crossed,
		# negative when elapsing backwards past midnight.
		"""
		tod, carry = earth.add_nanoseconds(self.nanoseconds, nanoseconds)
		return self.__class__(tod), carry

	def plus_nanoseconds(self, nanoseconds:int):
		"""
		# Add the &nanoseconds wrapping around midnight; the day carry is discarded.
		"""
		return self.add_nanoseconds(nanoseconds)[0]

	def plus_seconds(self, seconds:int):
		return self.plus_nanoseconds(seconds * earth.nanoseconds_in_second)

	def plus_minutes(self, minutes:int):
		return self.plus_nanoseconds(minutes * earth.nanoseconds_in_minute)

	def plus_hours(self, hours:int):
		return self.plus_nanoseconds(hours * earth.nanoseconds_in_hour)

	def minus_hours(self, hours:int):
		return self.plus_hours(-hours)

	def __str__(self):
		h, m, s, ns = self.fields
		text = f"{h:02}:{m:02}"
		if s or ns:
			text += f":{s:02}"
			if ns % 1000000 == 0:
				if ns:
					text += f".{ns // 1000000:03}"
			elif ns % 1000 == 0:
				text += f".{ns // 1000:06}"
			else:
				text += f".{ns:09}"
		return text

	def __repr__(self):
		return f"(time.timeofday@'{self}')"

midnight = TimeOfDay(0)
noon = TimeOfDay(12 * earth.nanoseconds_in_hour)

@tools.record(order=True)
class DateTime(Civil):
	"""
	# A civil date combined with a time of day. No zone is assumed.
	"""

	date: CalendarDate
	time: TimeOfDay

	@classmethod
	def of(Class, year:int, month:int, day:int, hour:int=0, minute:int=0, second:int=0, nanosecond:int=0):
		return Class(
			CalendarDate(year, month, day),
			TimeOfDay.of(hour, minute, second, nanosecond),
		)

	@classmethod
	def of_epoch_nanoseconds(Class, nanoseconds:int):
		"""
		# Construct the date-time from nanoseconds since 1970-01-01T00:00 on the local time line.
		"""
		days, tod = divmod(nanoseconds, earth.nanoseconds_in_day)
		return Class(CalendarDate.of_days(days), TimeOfDay(tod))

	@classmethod
	def parse(Class, text:str, pattern=None):
		"""
		# Parse the &text as an ISO-8601 local date-time or by the given &pattern.
		"""
		from . import format
		if pattern is None:
			return format.parse_iso_datetime(text)
		return format.plan(pattern).parse(text).datetime()

	@property
	def epoch_nanoseconds(self) -> int:
		"""
		# Nanoseconds since 1970-01-01T00:00 on the local time line.
		"""
		return (self.date.days * earth.nanoseconds_in_day) + self.time.nanoseconds

	year = property(lambda self: self.date.year)
	month = property(lambda self: self.date.month)
	day = property(lambda self: self.date.day)
	weekday = property(lambda self: self.date.weekday)
	day_of_year = property(lambda self: self.date.day_of_year)
	hour = property(lambda self: self.time.hour)
	minute = property(lambda self: self.time.minute)
	second = property(lambda self: self.time.second)
	nanosecond = property(lambda self: self.time.nanosecond)

	def to_date(self) -> CalendarDate:
		return self.date

	def to_local_time(self) -> TimeOfDay:
		return self.time

	def plus_nanoseconds(self, nanoseconds:int):
		"""
		# Add the &nanoseconds carrying whole days into the date.
		"""
		time, carry = self.time.add_nanoseconds(nanoseconds)
		date = self.date.plus_days(carry) if carry else self.date
		return self.__class__(date, time)

	def plus_seconds(self, seconds:int):
		return self.plus_nanoseconds(seconds * earth.nanoseconds_in_second)

	def plus_minutes(self, minutes:int):
		return self.plus_nanoseconds(minutes * earth.nanoseconds_in_minute)

	def plus_hours(self, hours:int):
		return self.plus_nanoseconds(hours * earth.nanoseconds_in_hour)

	def plus_days(self, days:int):
		return self.__class__(self.date.plus_days(days), self.time)

	def plus_months(self, months:int):
		return self.__class__(self.date.plus_months(months), self.time)

	def plus_years(self, years:int):
		return self.__class__(self.date.plus_years(years), self.time)

	def plus(self, duration:Duration):
		return self.plus_nanoseconds(int(duration))

	def minus_hours(self, hours:int):
		return self.plus_hours(-hours)

	def minus_days(self, days:int):
		return self.plus_days(-days)

	def minus_months(self, months:int):
		return self.plus_months(-months)

	def with_date(self, date:CalendarDate):
		return self.__class__(date, self.time)

	def with_time(self, time:TimeOfDay):
		return self.__class__(self.date, time)

	def at_zone(self, zone:str, resolver:zones.Resolver):
		"""
		# Resolve the date-time in &zone; see &ZonedDateTime.of_local.
		"""
		return ZonedDateTime.of_local(self, zone, resolver)

	def __str__(self):
		return f"{self.date}T{self.time}"

	def __repr__(self):
		return f"(time.datetime@'{self}')"

@tools.record()
class ZonedDateTime(Civil):
	"""
	# A &DateTime with the offset, in minutes, resolved for &zone at its instant.

	# Equality compares the civil fields, offset, and zone; ordering and
	# &is_equal compare the instants.
	"""

	datetime: DateTime
	offset: int
	zone: str

	@classmethod
	def of_instant(Class, instant:int, zone:str, resolver:zones.Resolver):
		"""
		# Construct the zoned date-time of the &instant, nanoseconds since the Unix
		# epoch, in &zone.
		"""
		offset = resolver.resolve(zone, instant)
		local = DateTime.of_epoch_nanoseconds(instant + (offset * earth.nanoseconds_in_minute))
		return Class(local, offset, zone)

	@classmethod
	def of_local(Class, datetime:DateTime, zone:str, resolver:zones.Resolver):
		"""
		# Construct the zoned date-time of the civil &datetime in &zone.

		# Civil times repeated by a transition use the earlier offset; civil times
		# skipped by a transition are moved forward by the length of the gap.
		"""
		instant, offset = resolver.local(zone, datetime.epoch_nanoseconds)
		return Class.of_instant(instant, zone, resolver)

	@classmethod
	def parse(Class, text:str, resolver:zones.Resolver):
		"""
		# Parse the ISO-8601 form produced by &__str__; the zone is re-resolved
		# at the parsed instant.
		"""
		from . import format
		return format.parse_iso_zoned(text, resolver)

	@property
	def instant(self) -> int:
		"""
		# Nanoseconds since the Unix epoch.
		"""
		return self.datetime.epoch_nanoseconds - (self.offset * earth.nanoseconds_in_minute)

	@property
	def epoch_millis(self) -> int:
		return to_epoch_millis(self)

	date = property(lambda self: self.datetime.date)
	time = property(lambda self: self.datetime.time)
	year = property(lambda self: self.datetime.date.year)
	month = property(lambda self: self.datetime.date.month)
	day = property(lambda self: self.datetime.date.day)
	weekday = property(lambda self: self.datetime.date.weekday)
	day_of_year = property(lambda self: self.datetime.date.day_of_year)
	hour = property(lambda self: self.datetime.time.hour)
	minute = property(lambda self: self.datetime.time.minute)
	second = property(lambda self: self.datetime.time.second)
	nanosecond = property(lambda self: self.datetime.time.nanosecond)

	def to_local(self) -> DateTime:
		return self.datetime

	def to_date(self) -> CalendarDate:
		return self.datetime.date

	def with_zone_same_instant(self, zone:str, resolver:zones.Resolver):
		"""
		# Hold the instant fixed and re-resolve the offset for &zone.
		"""
		return self.of_instant(self.instant, zone, resolver)

	def with_zone_same_local(self, zone:str, resolver:zones.Resolver):
		"""
		# Hold the civil fields fixed, where possible, and resolve them in &zone.
		"""
		return self.of_local(self.datetime, zone, resolver)

	def plus(self, duration:Duration, resolver:zones.Resolver):
		"""
		# Elapse the exact &duration from the instant; the offset is re-resolved.
		"""
		return self.of_instant(self.instant + int(duration), self.zone, resolver)

	def __lt__(self, other):
		if not isinstance(other, ZonedDateTime):
			return NotImplemented
		return self.instant < other.instant

	def __le__(self, other):
		if not isinstance(other, ZonedDateTime):
			return NotImplemented
		return self.instant <= other.instant

	def __gt__(self, other):
		if not isinstance(other, ZonedDateTime):
			return NotImplemented
		return self.instant > other.instant

	def __ge__(self, other):
		if not isinstance(other, ZonedDateTime):
			return NotImplemented
		return self.instant >= other.instant

	def __str__(self):
		offset = zones.format_offset(self.offset)
		if self.zone == offset:
			return f"{self.datetime}{offset}"
		return f"{self.datetime}{offset}[{self.zone}]"

	def __repr__(self):
		return f"(time.zoned@'{self}')"

@tools.record()
class Period(object):
	"""
	# Calendar relative elapsed time.

	# The components of a period produced by &period_between share the same sign.
	# A period is applied to a date by adding its total months, with the day of month
	# clamped, and then its days.
	"""

	years: int = 0
	months: int = 0
	days: int = 0

	@classmethod
	def between(Class, start, end):
		return period_between(start, end)

	@property
	def total_months(self) -> int:
		return (self.years * gregorian.months_in_year) + self.months

	def is_zero(self) -> bool:
		return self.years == 0 and self.months == 0 and self.days == 0

	def is_negative(self) -> bool:
		return self.years < 0 or self.months < 0 or self.days < 0

	def negated(self):
		return self.__class__(-self.years, -self.months, -self.days)

	def add_to(self, date:CalendarDate) -> CalendarDate:
		"""
		# Apply the period to the &date.
		"""
		return date.plus_months(self.total_months).plus_days(self.days)

	def __str__(self):
		if self.is_zero():
			return 'P0D'
		parts = zip((self.years, self.months, self.days), 'YMD')
		return 'P' + ''.join(f"{v}{u}" for v, u in parts if v)

	def __repr__(self):
		return f"(time.period@'{self}')"

def _timeline(value):
	"""
	# Identify the time line of the &value and its position on that time line.
	"""
	if isinstance(value, ZonedDateTime):
		return ('instant', value.instant)
	elif isinstance(value, DateTime):
		return ('local', value.epoch_nanoseconds)
	elif isinstance(value, CalendarDate):
		return ('date', value.days * earth.nanoseconds_in_day)
	elif isinstance(value, TimeOfDay):
		return ('time', value.nanoseconds)
	elif isinstance(value, Duration):
		return ('duration', int(value))
	raise TypeError("not a time value: " + repr(value))

def _positions(a, b):
	(ka, pa), (kb, pb) = _timeline(a), _timeline(b)
	if ka != kb:
		raise TypeError(
			"cannot relate %s to %s" %(a.__class__.__name__, b.__class__.__name__)
		)
	return ka, pa, pb

def compare(a, b) -> Order:
	"""
	# Compare two values of the same kind.

	# Zoned date-times are compared by instant, durations by length, and the civil
	# types by their fields. Values of different kinds raise &TypeError.
	"""
	kind, pa, pb = _positions(a, b)
	return Order((pa > pb) - (pa < pb))

def duration_between(start, end) -> Duration:
	"""
	# The exact elapsed time from &start to &end. Negative when &end precedes &start.
	"""
	kind, pa, pb = _positions(start, end)
	if kind == 'duration':
		raise TypeError("durations are not positions on a time line")
	return Duration(pb - pa)

def period_between(start:CalendarDate, end:CalendarDate) -> Period:
	"""
	# The period from &start to &end choosing the largest whole years, then months,
	# then days, such that `period_between(a, b).add_to(a) == b`.
	"""
	if not isinstance(start, CalendarDate) or not isinstance(end, CalendarDate):
		raise TypeError("periods are measured between calendar dates")

	a = (start.year, start.month, start.day)
	target = end.days
	months = gregorian.month_index((end.year, end.month, end.day)) - gregorian.month_index(a)

	# Day of month clamping may overshoot the end by less than a month.
	shifted = gregorian.days_from_civil(gregorian.add_months(a, months))
	if target >= start.days:
		if shifted > target:
			months -= 1
	elif shifted < target:
		months += 1

	days = target - gregorian.days_from_civil(gregorian.add_months(a, months))
	years = abs(months) // gregorian.months_in_year
	if months < 0:
		years = -years

	return Period(years, months - (years * gregorian.months_in_year), days)

def days_between(start, end) -> int:
	"""
	# The whole days from &start to &end, truncated toward zero.
	"""
	if isinstance(start, CalendarDate) and isinstance(end, CalendarDate):
		return end.days - start.days
	return duration_between(start, end).select('day')

def months_between(start:CalendarDate, end:CalendarDate) -> int:
	"""
	# The whole months from &start to &end; the total months of &period_between.
	"""
	return period_between(start, end).total_months

def years_between(start:CalendarDate, end:CalendarDate) -> int:
	"""
	# The whole years from &start to &end; the years of &period_between.
	"""
	return period_between(start, end).years

def from_epoch_millis(milliseconds:int) -> ZonedDateTime:
	"""
	# Convert a legacy millisecond timestamp to a &ZonedDateTime in UTC.
	"""
	local = DateTime.of_epoch_nanoseconds(milliseconds * earth.nanoseconds_in_millisecond)
	return ZonedDateTime(local, 0, 'UTC')

def to_epoch_millis(value:ZonedDateTime) -> int:
	"""
	# Convert the instant of &value to a legacy millisecond timestamp.
	# Sub-millisecond precision is floored.
	"""
	return value.instant // earth.nanoseconds_in_millisecond
