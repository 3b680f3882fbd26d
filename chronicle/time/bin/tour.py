"""
# Print a walkthrough of the date and time types using the system clock and zone.

# Construction, formatting and parsing, legacy millisecond conversion, field access,
# comparison, differences, and zone conversion are demonstrated in order.
"""
import sys

from .. import library as libtime
from .. import gregorian
from .. import system

def legacy(zdt, resolver, pattern="EEE MMM dd HH:mm:ss '%s' yyyy"):
	"""
	# Render &zdt in the style of the C library's `ctime` with the zone abbreviation.
	"""
	abbreviation = resolver.offset(zdt.zone, zdt.instant).abbreviation
	return zdt.format(pattern %(abbreviation.replace("'", "''"),))

def main(clock=None, resolver=None, out=sys.stdout):
	clock = clock or libtime.default_clock()
	resolver = resolver or libtime.default_resolver()
	zone = clock.zone()
	w = lambda *args: out.write(''.join(map(str, args)) + '\n')

	# Construction
	current = system.now(clock, resolver)
	today = current.to_date()
	specific_date = libtime.date(2022, 12, 25)
	parsed_date = libtime.CalendarDate.parse("2022-12-25")
	current_datetime = current.to_local()
	legacy_ms = libtime.to_epoch_millis(current)

	w("Today: ", today)
	w("Specific Date: ", specific_date)
	w("Parsed Date: ", parsed_date)
	w("Current DateTime: ", current_datetime)
	w("Specific DateTime: ", libtime.datetime(2022, 12, 25, 10, 30))
	w("Legacy Date: ", legacy(current, resolver))

	# Formatting and parsing
	formatter = libtime.compile("dd-MM-yyyy")
	w()
	w("Formatted CalendarDate: ", today.format(formatter))
	w("Parsed CalendarDate: ", libtime.CalendarDate.parse("25-12-2022", formatter))

	# Legacy millisecond timestamps
	w()
	from_local = libtime.to_epoch_millis(current_datetime.at_zone(zone, resolver))
	w("Milliseconds from DateTime: ", from_local)
	w("Legacy Date from DateTime: ", legacy(libtime.from_epoch_millis(from_local).with_zone_same_instant(zone, resolver), resolver))
	restored = libtime.from_epoch_millis(legacy_ms).with_zone_same_instant(zone, resolver)
	w("DateTime from milliseconds: ", restored.to_local())

	# Fields and arithmetic
	w()
	w("Year: ", today.year)
	w("Month: ", gregorian.month_names[today.month - 1].upper())
	w("Day of Week: ", today.weekday)
	w("First Day of Month: ", today.with_day(1))
	w("Plus 10 Days: ", today.plus_days(10))
	w("Minus 2 Months: ", today.minus_months(2))
	w()
	w("Current Time: ", current_datetime.to_local_time())
	w("Plus 3 Hours: ", current_datetime.plus_hours(3))

	# Comparison
	d1 = libtime.date(2023, 1, 1)
	d2 = libtime.date(2024, 1, 1)
	w()
	w("Is d1 before d2? ", d1.is_before(d2))
	w("Is d1 after d2? ", d1.is_after(d2))
	w("Is d1 equal to d2? ", d1 == d2)

	# Differences
	period = libtime.period_between(d1, d2)
	w()
	w("Days between: ", libtime.days_between(d1, d2))
	w("Months between: ", libtime.months_between(d1, d2))
	w("Years between: ", libtime.years_between(d1, d2))
	w("Period: %d years, %d months, %d days" %(period.years, period.months, period.days))

	# Utilities
	w()
	w("Is leap year? ", today.is_leap_year())
	w("Day of Year: ", today.day_of_year)
	w("Day of Month: ", today.day)

	# Practice
	independence_day = libtime.CalendarDate.parse("15/08/2023", "dd/MM/yyyy")
	w()
	w("Formatted Independence Day: ", independence_day.format("yyyy.MM.dd"))
	w("Age in days: ", libtime.days_between(libtime.date(1990, 8, 15), today))
	w("First day of this month: ", today.with_day(1))
	w("Last day of this month: ", today.with_day(today.length_of_month))
	w("DateTime after 100 days: ", current_datetime.plus_days(100).format("EEE, dd MMM yyyy HH:mm"))

	# Zones
	w()
	w("Local ZonedDateTime: ", current)
	w("New York Time: ", current.with_zone_same_instant("America/New_York", resolver))

if __name__ == '__main__':
	main()
