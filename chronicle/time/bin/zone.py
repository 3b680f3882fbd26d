"""
# Print the transitions of a zone; the system's default zone when no identifier is given.

#!syntax/sh
	chronicle-zone [identifier [start-year [stop-year]]]
	chronicle-zone -l

# When a start year is given, only the transition in effect at the start of that year
# and those occurring before the stop year, defaulting to the following year, are printed.
# `-l` lists the identifiers of the zone database.
"""
import sys

from .. import earth
from .. import system
from .. import types
from .. import zones

def print_zone_transitions(identifier=None, database=None, out=sys.stdout, start=None, stop=None):
	identifier = identifier or system.default_zone()
	database = database or zones.SystemDatabase()
	zone = database.zone(identifier)

	if start is None:
		changes = zip(zone.transitions, zone.offsets)
	else:
		stop = stop or (start + 1)
		changes = zone.slice(
			types.DateTime.of(start, 1, 1).epoch_nanoseconds,
			types.DateTime.of(stop, 1, 1).epoch_nanoseconds,
		)

	out.write("%s: %s\n" %(identifier, zone.default))
	for transition, offset in changes:
		dt = types.DateTime.of_epoch_nanoseconds(transition * earth.nanoseconds_in_second)
		out.write("%sZ: %s\n" %(dt, offset))

def list_zones(database=None, out=sys.stdout):
	database = database or zones.SystemDatabase()
	for identifier in database.identifiers():
		out.write(identifier + "\n")

def main(argv=None, database=None, out=sys.stdout):
	argv = sys.argv[1:] if argv is None else argv

	if argv[:1] == ['-l']:
		return list_zones(database, out)

	identifier = argv[0] if argv else None
	years = [int(x) for x in argv[1:3]]
	print_zone_transitions(identifier, database, out, *years)

if __name__ == '__main__':
	main()
