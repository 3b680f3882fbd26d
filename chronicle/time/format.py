"""
# Format and parse date and time strings using patterns.

# Patterns are compiled into a &FormatPlan: a sequence of literal text and field
# tokens. A plan renders any value carrying the fields its tokens designate, and
# parses text back into &Fields whose conversion methods construct, and validate,
# the date and time types.

#!syntax/python
	p = format.compile("dd/MM/yyyy")
	d = p.parse("15/08/2023").date()
	assert format.compile("yyyy.MM.dd").format(d) == "2023.08.15"

# [ Tokens ]

# /`yyyy`, `uuuu`/
	# Year; four digits, signed outside of `0000`-`9999`.
# /`yy`, `uu`/
	# Two digit year; parsed as `2000`-`2099`.
# /`y`, `u`/
	# Year without padding.
# /`M`, `MM`, `MMM`, `MMMM`/
	# Month number, padded month number, abbreviation, and name.
# /`d`, `dd`/
	# Day of month.
# /`D`, `DDD`/
	# Day of year.
# /`H`, `HH`/
	# Hour of day, `0`-`23`.
# /`h`, `hh`/
	# Clock hour, `1`-`12`; used with `a`.
# /`a`/
	# `AM` or `PM`.
# /`m`, `mm`, `s`, `ss`/
	# Minute and second.
# /`S` through `SSSSSSSSS`/
	# Fraction of second with the given number of digits.
# /`E`, `EE`, `EEE`, `EEEE`/
	# Weekday abbreviation, or name when four letters are used.
# /`XXX`/
	# Zone offset; `Z` or `+hh:mm`.
# /`VV`/
	# Zone identifier.

# Text enclosed in single quotes is literal; two single quotes produce one.
# Letters runs that do not form a token, and all other characters, are literal text.

# Parsing is positional and reports the first mismatch with &core.ParseError. Field
# validation is deferred to the constructors used by &Fields.date and &Fields.time.
"""
import typing

from ..context import tools
from . import core
from . import earth
from . import gregorian
from . import week
from . import zones
from . import types

digits = frozenset('0123456789')

def read_digits(text, position, minimum, maximum, expected, digits=digits):
	"""
	# Read an unsigned integer of &minimum to &maximum ASCII digits from &text at &position.

	# [ Returns ]
	# A pair: the integer and the position following the last digit.
	"""
	end = position
	limit = min(len(text), position + maximum)
	while end < limit and text[end] in digits:
		end += 1

	if end - position < minimum:
		raise core.ParseError(position, expected, text)
	return int(text[position:end]), end

def read_name(text, position, names, expected):
	"""
	# Read one of the case insensitive &names from &text at &position.
	# Longer names are preferred when a shorter one is a prefix.

	# [ Returns ]
	# A pair: the index of the name and the position following it.
	"""
	folded = text[position:].lower()
	for index, name in sorted(enumerate(names), key=lambda x: -len(x[1])):
		if folded.startswith(name):
			return index, position + len(name)
	raise core.ParseError(position, expected, text)

def render_year(year:int) -> str:
	if 0 <= year <= 9999:
		return "%04d" %(year,)
	elif year < 0:
		return "-%04d" %(-year,)
	else:
		return "+%d" %(year,)

def read_year(text, position):
	# Signed years carry at least four digits; unsigned years exactly four.
	sign = text[position:position+1]
	if sign in ('+', '-'):
		year, end = read_digits(text, position + 1, 4, 9, 'year')
		return (-year if sign == '-' else year), end
	return read_digits(text, position, 4, 4, 'year')

def read_unpadded_year(text, position):
	if text[position:position+1] == '-':
		year, end = read_digits(text, position + 1, 1, 9, 'year')
		return -year, end
	return read_digits(text, position, 1, 9, 'year')

def read_short_year(text, position):
	year, end = read_digits(text, position, 2, 2, 'year')
	return 2000 + year, end

def read_offset(text, position):
	if text[position:position+1] in ('Z', 'z'):
		return 0, position + 1

	sign = text[position:position+1]
	if sign not in ('+', '-'):
		raise core.ParseError(position, 'offset', text)

	hours, end = read_digits(text, position + 1, 2, 2, 'offset hours')
	if text[end:end+1] != ':':
		raise core.ParseError(end, "':'", text)
	minutes, end = read_digits(text, end + 1, 2, 2, 'offset minutes')

	offset = (hours * earth.minutes_in_hour) + minutes
	return (-offset if sign == '-' else offset), end

def read_zone(text, position, characters=frozenset('+-_/:')):
	end = position
	while end < len(text) and (text[end].isalnum() or text[end] in characters):
		end += 1
	if end == position:
		raise core.ParseError(position, 'zone identifier', text)
	return text[position:end], end

@tools.record()
class Token(object):
	"""
	# A field designating element of a pattern.

	# [ Properties ]
	# /letters/
		# The letters of the pattern that identify the token.
	# /field/
		# The name of the &Fields attribute that the token reads and renders.
	# /render/
		# Callable producing the text of a field value.
	# /read/
		# Callable consuming text at a position; returns the value and the next position.
	"""

	letters: str
	field: str
	render: typing.Callable
	read: typing.Callable

def numeric(letters, field, width, maximum):
	"""
	# Construct a &Token for an unsigned numeric field padded to &width digits.
	# Parsing requires at least &width digits and consumes no more than &maximum.
	"""
	def render(value, width=width):
		return str(value).rjust(width, '0')

	def read(text, position, width=width, maximum=maximum, field=field):
		return read_digits(text, position, width, maximum, field)

	return Token(letters, field, render, read)

def fraction(letters):
	count = len(letters)
	scale = 10 ** (9 - count)

	def render(nanosecond, count=count):
		return ("%09d" %(nanosecond,))[:count]

	def read(text, position, count=count, scale=scale):
		value, end = read_digits(text, position, count, count, 'fraction of second')
		return value * scale, end

	return Token(letters, 'nanosecond', render, read)

def named(letters, field, names, offset):
	"""
	# Construct a &Token for a field rendered as one of &names.
	# &offset is the value of the field identified by the first name.
	"""
	titles = tuple(x.capitalize() for x in names)

	def render(value, titles=titles, offset=offset):
		return titles[value - offset]

	def read(text, position, names=names, offset=offset, expected=field + ' name'):
		index, end = read_name(text, position, names, expected)
		return index + offset, end

	return Token(letters, field, render, read)

def _read_weekday_abbreviation(text, position, names=week.weekday_abbreviations):
	index, end = read_name(text, position, names, 'weekday name')
	return week.Weekday(index + 1), end

def _read_weekday_name(text, position, names=week.weekday_names):
	index, end = read_name(text, position, names, 'weekday name')
	return week.Weekday(index + 1), end

def _read_meridiem(text, position):
	return read_name(text, position, ('am', 'pm'), "'AM' or 'PM'")

tokens = {
	'yyyy': Token('yyyy', 'year', render_year, read_year),
	'yy': Token('yy', 'year', (lambda y: "%02d" %(y % 100,)), read_short_year),
	'y': Token('y', 'year', str, read_unpadded_year),

	'M': numeric('M', 'month', 1, 2),
	'MM': numeric('MM', 'month', 2, 2),
	'MMM': named('MMM', 'month', gregorian.month_abbreviations, 1),
	'MMMM': named('MMMM', 'month', gregorian.month_names, 1),

	'd': numeric('d', 'day', 1, 2),
	'dd': numeric('dd', 'day', 2, 2),
	'D': numeric('D', 'day_of_year', 1, 3),
	'DDD': numeric('DDD', 'day_of_year', 3, 3),

	'H': numeric('H', 'hour', 1, 2),
	'HH': numeric('HH', 'hour', 2, 2),
	'h': numeric('h', 'clock_hour', 1, 2),
	'hh': numeric('hh', 'clock_hour', 2, 2),
	'a': Token('a', 'meridiem', ('AM', 'PM').__getitem__, _read_meridiem),
	'm': numeric('m', 'minute', 1, 2),
	'mm': numeric('mm', 'minute', 2, 2),
	's': numeric('s', 'second', 1, 2),
	'ss': numeric('ss', 'second', 2, 2),

	'EEEE': Token('EEEE', 'weekday', (lambda w: w.title), _read_weekday_name),
	'XXX': Token('XXX', 'offset', zones.format_offset, read_offset),
	'VV': Token('VV', 'zone', str, read_zone),
}
tokens.update((x, tokens['yyyy' if len(x) == 4 else 'y' * len(x)]) for x in ('uuuu', 'uu', 'u'))
tokens.update(('E' * i, Token('E' * i, 'weekday', (lambda w: w.abbreviation), _read_weekday_abbreviation)) for i in range(1, 4))
tokens.update(('S' * i, fraction('S' * i)) for i in range(1, 10))

#: Value accessors used when rendering; keyed by &Token.field.
extractors = {
	'year': (lambda v: v.year),
	'month': (lambda v: v.month),
	'day': (lambda v: v.day),
	'day_of_year': (lambda v: v.day_of_year),
	'weekday': (lambda v: v.weekday),
	'hour': (lambda v: v.hour),
	'clock_hour': (lambda v: (v.hour % 12) or 12),
	'meridiem': (lambda v: v.hour // 12),
	'minute': (lambda v: v.minute),
	'second': (lambda v: v.second),
	'nanosecond': (lambda v: v.nanosecond),
	'offset': (lambda v: v.offset),
	'zone': (lambda v: v.zone),
}

@tools.record()
class Fields(object):
	"""
	# The field values read by &FormatPlan.parse. Fields not present in the
	# pattern are &None.

	# No validation is performed until the conversion methods are used.
	"""

	year: int = None
	month: int = None
	day: int = None
	day_of_year: int = None
	weekday: week.Weekday = None
	hour: int = None
	clock_hour: int = None
	meridiem: int = None
	minute: int = None
	second: int = None
	nanosecond: int = None
	offset: int = None
	zone: str = None

	def require(self, field):
		value = getattr(self, field)
		if value is None:
			raise core.InvalidField(field, None)
		return value

	def date(self) -> types.CalendarDate:
		"""
		# Construct the &types.CalendarDate designated by the fields.
		# Raises &core.InvalidField when a field is missing, out of range, or inconsistent.
		"""
		year = self.require('year')

		if self.month is None and self.day is None and self.day_of_year is not None:
			d = types.CalendarDate.of_year_day(year, self.day_of_year)
		else:
			d = types.CalendarDate(year, self.require('month'), self.require('day'))
			if self.day_of_year is not None and self.day_of_year != d.day_of_year:
				raise core.InvalidField('day_of_year', self.day_of_year)

		if self.weekday is not None and self.weekday != d.weekday:
			raise core.InvalidField('weekday', self.weekday)

		return d

	def time(self) -> types.TimeOfDay:
		"""
		# Construct the &types.TimeOfDay designated by the fields.
		# Minutes, seconds, and fractions default to zero.

		# When both the hour of day and the clock hour or meridiem are present,
		# they must agree.
		"""
		hour = self.hour
		clock = self.clock_hour
		if clock is not None and (clock < 1 or clock > 12):
			raise core.InvalidField('clock_hour', clock, (1, 12))

		if hour is None:
			if clock is None:
				raise core.InvalidField('hour', None)
			hour = (clock % 12) + (12 * self.require('meridiem'))
		else:
			if clock is not None and clock != ((hour % 12) or 12):
				raise core.InvalidField('clock_hour', clock)
			if self.meridiem is not None and self.meridiem != (hour // 12):
				raise core.InvalidField('meridiem', self.meridiem)

		return types.TimeOfDay.of(
			hour,
			self.minute or 0,
			self.second or 0,
			self.nanosecond or 0,
		)

	def datetime(self) -> types.DateTime:
		return types.DateTime(self.date(), self.time())

	def zoned(self, resolver:zones.Resolver) -> types.ZonedDateTime:
		"""
		# Construct the &types.ZonedDateTime designated by the fields.

		# When an offset is present, it selects the instant and the zone, or the
		# offset itself when no zone was read, is resolved at that instant.
		"""
		local = self.datetime()
		if self.offset is not None:
			instant = local.epoch_nanoseconds - (self.offset * earth.nanoseconds_in_minute)
			zone = self.zone or zones.format_offset(self.offset)
			return types.ZonedDateTime.of_instant(instant, zone, resolver)

		return local.at_zone(self.require('zone'), resolver)

@tools.record()
class Segment(object):
	"""
	# An element of a &FormatPlan: literal &text, or a &token.
	"""

	text: str
	token: Token = None

@tools.record()
class FormatPlan(object):
	"""
	# A compiled pattern.

	# [ Properties ]
	# /pattern/
		# The source pattern.
	# /segments/
		# The sequence of &Segment instances rendered or parsed in order.
	"""

	pattern: str
	segments: tuple

	def format(self, value) -> str:
		"""
		# Render the &value.
		# Raises &core.UnsupportedField when &value lacks a designated field.
		"""
		parts = []
		for segment in self.segments:
			if segment.token is None:
				parts.append(segment.text)
				continue

			field = segment.token.field
			try:
				v = extractors[field](value)
			except AttributeError:
				raise core.UnsupportedField(field, value) from None
			parts.append(segment.token.render(v))

		return ''.join(parts)

	def parse(self, text:str) -> Fields:
		"""
		# Read the &text positionally.

		# Raises &core.ParseError on a literal mismatch, a numeric token without its
		# digits, an unknown name, a field read twice with different values, or
		# unconsumed text.
		"""
		values = {}
		position = 0

		for segment in self.segments:
			if segment.token is None:
				if not text.startswith(segment.text, position):
					raise core.ParseError(position, repr(segment.text), text)
				position += len(segment.text)
				continue

			field = segment.token.field
			value, end = segment.token.read(text, position)
			if values.setdefault(field, value) != value:
				raise core.ParseError(position, "%s consistent with %r" %(field, values[field]), text)
			position = end

		if position != len(text):
			raise core.ParseError(position, 'end of text', text)

		return Fields(**values)

def tokenize(pattern:str):
	"""
	# Split the &pattern into &Segment instances; adjacent literals are joined.
	"""
	literal = []
	i = 0
	n = len(pattern)

	while i < n:
		c = pattern[i]

		if c == "'":
			if pattern[i+1:i+2] == "'":
				literal.append("'")
				i += 2
				continue

			start = i
			i += 1
			while True:
				end = pattern.find("'", i)
				if end == -1:
					raise core.ParseError(start, 'closing quote', pattern)
				literal.append(pattern[i:end])
				if pattern[end+1:end+2] == "'":
					# Escaped quote inside quoted text.
					literal.append("'")
					i = end + 2
				else:
					i = end + 1
					break
		elif c.isascii() and c.isalpha():
			j = i
			while j < n and pattern[j] == c:
				j += 1
			run = pattern[i:j]
			token = tokens.get(run)
			if token is None:
				literal.append(run)
			else:
				if literal:
					yield Segment(''.join(literal))
					literal = []
				yield Segment(run, token)
			i = j
		else:
			literal.append(c)
			i += 1

	if literal:
		yield Segment(''.join(literal))

@tools.cachedcalls(256)
def compile(pattern:str) -> FormatPlan:
	"""
	# Compile the &pattern into a reusable &FormatPlan.
	"""
	return FormatPlan(pattern, tuple(tokenize(pattern)))

def plan(pattern) -> FormatPlan:
	"""
	# Get the &FormatPlan for &pattern; compiled plans are returned as-is.
	"""
	if isinstance(pattern, FormatPlan):
		return pattern
	return compile(pattern)

def format(pattern, value) -> str:
	return plan(pattern).format(value)

def parse(pattern, text:str) -> Fields:
	return plan(pattern).parse(text)

iso_date = "yyyy-MM-dd"
rfc1123 = "EEE, dd MMM yyyy HH:mm:ss 'GMT'"
iso8601 = "yyyy-MM-dd'T'HH:mm:ss"

models = {
	'rfc1123': rfc1123,
	'iso8601': iso8601,
	'date': iso_date,
}

aliases = {'http': 'rfc1123'}

def model(name:str) -> FormatPlan:
	"""
	# Get the compiled plan of a named format: `rfc1123` (`http`), `iso8601`, or `date`.
	"""
	return compile(models[aliases.get(name, name)])

def _expect(text, position, literal):
	if not text.startswith(literal, position):
		raise core.ParseError(position, repr(literal), text)
	return position + len(literal)

def read_iso_date(text, position):
	year, position = read_year(text, position)
	position = _expect(text, position, '-')
	month, position = read_digits(text, position, 2, 2, 'month')
	position = _expect(text, position, '-')
	day, position = read_digits(text, position, 2, 2, 'day')
	return types.CalendarDate(year, month, day), position

def read_iso_time(text, position):
	"""
	# Read `HH:mm`, `HH:mm:ss`, or `HH:mm:ss.f` with one to nine fraction digits.
	"""
	hour, position = read_digits(text, position, 2, 2, 'hour')
	position = _expect(text, position, ':')
	minute, position = read_digits(text, position, 2, 2, 'minute')

	second = nanosecond = 0
	if text.startswith(':', position):
		second, position = read_digits(text, position + 1, 2, 2, 'second')
		if text.startswith('.', position):
			start = position + 1
			nanosecond, position = read_digits(text, start, 1, 9, 'fraction of second')
			nanosecond *= 10 ** (9 - (position - start))

	return types.TimeOfDay.of(hour, minute, second, nanosecond), position

def read_iso_datetime(text, position):
	date, position = read_iso_date(text, position)
	position = _expect(text, position, 'T')
	time, position = read_iso_time(text, position)
	return types.DateTime(date, time), position

def _complete(text, position, value):
	if position != len(text):
		raise core.ParseError(position, 'end of text', text)
	return value

def parse_iso_time(text:str) -> types.TimeOfDay:
	value, position = read_iso_time(text, 0)
	return _complete(text, position, value)

def parse_iso_datetime(text:str) -> types.DateTime:
	"""
	# Parse the extended ISO-8601 local date-time form: `2025-06-28T15:30:33.2235833`.
	"""
	value, position = read_iso_datetime(text, 0)
	return _complete(text, position, value)

def parse_iso_zoned(text:str, resolver:zones.Resolver) -> types.ZonedDateTime:
	"""
	# Parse the extended ISO-8601 zoned form with an optional bracketed zone
	# identifier: `2025-06-28T06:00:33.4025944-04:00[America/New_York]`.
	"""
	local, position = read_iso_datetime(text, 0)
	offset, position = read_offset(text, position)

	zone = None
	if text.startswith('[', position):
		zone, position = read_zone(text, position + 1)
		position = _expect(text, position, ']')
	_complete(text, position, None)

	return Fields(
		year=local.year, month=local.month, day=local.day,
		hour=local.hour, minute=local.minute, second=local.second,
		nanosecond=local.nanosecond, offset=offset, zone=zone,
	).zoned(resolver)
