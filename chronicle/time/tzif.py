"""
# Read TZif, time zone information, files (zic output).

# Versions 1, 2, and 3 are recognized. For version 2 and later files, the 64-bit
# data block following the version 1 block is used. The POSIX TZ string footer
# is not interpreted; the last transition's offset applies indefinitely.

# ! WARNING:
	# This module is intended for internal use only. The protocol is subject to change without warning.
"""
import os
import os.path
import struct
import collections

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

header_fields = (
	'tzh_ttisutcnt',   # The number of UT/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of transition times for which data is stored in the file.
	'tzh_typecnt',     # The number of local time types for which data is stored in the file (must not be zero).
	'tzh_charcnt',     # The number of characters of time zone abbreviation strings stored in the file.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# Identification: magic, version, and fifteen reserved bytes.
ident_struct = struct.Struct("!4sc15x")
header_struct = struct.Struct("!" + (len(header_fields) * "l"))

ttinfo_fields = (
	'tt_utoff',
	'tt_isdst',
	'tt_desigidx',
)
tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', ttinfo_fields)
ttinfo_struct = struct.Struct("!lBB")

# Per version block formats of the transition times and leap second records.
block_structs = {
	1: (struct.Struct("!l"), struct.Struct("!ll")),
	2: (struct.Struct("!q"), struct.Struct("!ql")),
}

def parse_block(data, version):
	"""
	# Parse a header and data block from &data using the time sizes of &version.

	# Returns a pair: the fields, `(transtimes, types, leaps, isstd, isut, timeinfo)`,
	# and the number of bytes consumed. See tzfile(5) for information about the fields.
	"""
	transtime_struct, leappairs_struct = block_structs[version]

	header = tzinfo_header(*header_struct.unpack_from(data, 0))
	offset = header_struct.size

	size = transtime_struct.size
	transtimes = tuple([
		transtime_struct.unpack_from(data, offset + (i * size))[0]
		for i in range(header.tzh_timecnt)
	])
	offset += header.tzh_timecnt * size

	# unsigned char's
	types = tuple(bytes(data[offset:offset+header.tzh_timecnt]))
	offset += header.tzh_timecnt

	size = ttinfo_struct.size
	timetypinfo = [
		tzinfo_ttinfo(*ttinfo_struct.unpack_from(data, offset + (i * size)))
		for i in range(header.tzh_typecnt)
	]
	offset += header.tzh_typecnt * size

	abbr = bytes(data[offset:offset+header.tzh_charcnt])
	offset += header.tzh_charcnt

	size = leappairs_struct.size
	leaps = tuple([
		leappairs_struct.unpack_from(data, offset + (i * size))
		for i in range(header.tzh_leapcnt)
	])
	offset += header.tzh_leapcnt * size

	isstd = tuple(bytes(data[offset:offset+header.tzh_ttisstdcnt]))
	offset += header.tzh_ttisstdcnt

	isut = tuple(bytes(data[offset:offset+header.tzh_ttisutcnt]))
	offset += header.tzh_ttisutcnt

	# Resolve the desigidx. Append a NUL terminator to the
	# string to guarantee that abbr.find() will not return -1.
	abbr += b'\0'
	timeinfo = tuple([
		(abbr[x.tt_desigidx:abbr.find(b'\0', x.tt_desigidx)], x.tt_utoff, x.tt_isdst)
		for x in timetypinfo
	])

	return (transtimes, types, leaps, isstd, isut, timeinfo), offset

def parse(data):
	"""
	# Given TZif data, identify the appropriate version and unpack the timezone information.
	# Returns &None if the data is not TZif data.
	"""
	if len(data) < ident_struct.size or bytes(data[:4]) != magic:
		# not a TZif file
		return None

	data = memoryview(data)
	ident, version = ident_struct.unpack_from(data, 0)
	v1, consumed = parse_block(data[ident_struct.size:], 1)
	if version == b'\0':
		return v1

	# Version 2+: skip the first block and parse the second, 64-bit, block.
	start = ident_struct.size + consumed + ident_struct.size
	return parse_block(data[start:], 2)[0]

tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
	'tz_isstd',
	'tz_isut',
))

def structure(tzif):
	"""
	# Given the parse fields from &parse, make a more accessible structure.

	# Returns `(types, transitions, leaps)` where &transitions is a sorted
	# list of `(unix_seconds, tzinfo)` pairs and the first of &types is the type
	# in effect before the first transition.
	"""
	(transtimes, types, leaps, isstd, isut, timeinfo) = tzif
	ltt = []
	for i, x in enumerate(timeinfo):
		ttyp = tzinfo(
			tz_abbrev = x[0],
			tz_offset = x[1],
			tz_isdst = bool(x[2]),
			tz_isstd = bool(isstd[i]) if i < len(isstd) else False,
			tz_isut = bool(isut[i]) if i < len(isut) else False,
		)
		ltt.append(ttyp)

	r = list(zip(transtimes, map(ltt.__getitem__, types)))
	# order by the transition time
	r.sort(key = lambda x: x[0])
	return tuple(ltt), r, leaps

def get_timezone_data(filepath):
	"""
	# Get the structured timezone data out of the specified file.
	# Returns &None if the file is not TZif data.
	"""
	with open(filepath, 'rb') as f:
		d = parse(f.read())
		if d is None:
			return None
		return structure(d)

def identifiers(tzdir=tzdir, _join=os.path.join):
	"""
	# Yield the relative paths of the TZif files in &tzdir; the zone identifiers.
	"""
	prefixlen = len(tzdir.rstrip('/')) + 1
	for dirpath, dirnames, filenames in os.walk(tzdir):
		dirnames.sort()
		for x in sorted(filenames):
			path = _join(dirpath, x)
			with open(path, 'rb') as f:
				if f.read(4) != magic:
					continue
			yield path[prefixlen:]
