"""
# Date and time value types, comparisons, and differences.
"""
from .. import core
from .. import earth
from .. import types as module
from ..week import Weekday
from . import mock

Date = module.CalendarDate
TimeOfDay = module.TimeOfDay
DateTime = module.DateTime

def test_date_construction(test):
	d = Date(2022, 12, 25)
	test/d.year == 2022
	test/d.month == 12
	test/d.day == 25
	test/str(d) == '2022-12-25'
	test/repr(d) == "(time.date@'2022-12-25')"

	test/Date(2024, 2, 29).is_leap_year() == True

	with test/core.InvalidField as exc:
		Date(2023, 2, 29)
	test/exc().field == 'day'
	test/exc().value == 29

	test/core.InvalidField ^ (lambda: Date(2023, 13, 1))
	test/core.InvalidField ^ (lambda: Date(2023, 4, 31))

def test_date_immutable(test):
	d = Date(2025, 6, 28)
	with test/AttributeError:
		d.day = 1
	test/d.plus_days(1) != d
	test/d == Date(2025, 6, 28)
	test/hash(d) == hash(Date(2025, 6, 28))

def test_date_fields(test):
	d = Date(2025, 6, 28)
	test/d.weekday == Weekday.saturday
	test/str(d.weekday) == 'SATURDAY'
	test/d.day_of_year == 179
	test/d.length_of_month == 30
	test/d.length_of_year == 365
	test/d.is_leap_year() == False
	test/d.days == 20267
	test/Date.of_days(20267) == d
	test/Date.of_days(0) == Date(1970, 1, 1)
	test/Date.of_year_day(2025, 179) == d
	test/core.InvalidField ^ (lambda: Date.of_year_day(2025, 366))

def test_date_arithmetic(test):
	d = Date(2025, 6, 28)
	test/d.plus_days(10) == Date(2025, 7, 8)
	test/d.minus_months(2) == Date(2025, 4, 28)
	test/d.with_day(1) == Date(2025, 6, 1)
	test/d.with_day(d.length_of_month) == Date(2025, 6, 30)
	test/d.plus_weeks(1) == Date(2025, 7, 5)
	test/d.minus_weeks(1) == Date(2025, 6, 21)
	test/d.plus_years(-1) == Date(2024, 6, 28)
	test/d.minus_years(1) == Date(2024, 6, 28)
	test/d.minus_days(28) == Date(2025, 5, 31)
	test/d.with_month(2) == Date(2025, 2, 28)
	test/d.with_year(2000) == Date(2000, 6, 28)

	test/Date(2022, 1, 31).plus_months(1) == Date(2022, 2, 28)
	test/Date(2024, 2, 29).plus_years(1) == Date(2025, 2, 28)
	test/core.InvalidField ^ (lambda: d.with_day(31))
	test/core.InvalidField ^ (lambda: Date(2025, 1, 31).with_month(2))

def test_date_parse(test):
	test/Date.parse('2022-12-25') == Date(2022, 12, 25)
	test/Date.parse('25-12-2022', 'dd-MM-yyyy') == Date(2022, 12, 25)
	test/core.ParseError ^ (lambda: Date.parse('2022-12-5'))
	test/core.InvalidField ^ (lambda: Date.parse('2023-02-29'))

def test_date_years_outside_four_digits(test):
	test/str(Date(12345, 1, 1)) == '+12345-01-01'
	test/str(Date(-44, 3, 15)) == '-0044-03-15'
	test/str(Date(5, 3, 15)) == '0005-03-15'

def test_time_of_day(test):
	t = TimeOfDay.of(15, 30, 33, 223583300)
	test/t.hour == 15
	test/t.minute == 30
	test/t.second == 33
	test/t.nanosecond == 223583300
	test/t.fields == (15, 30, 33, 223583300)
	test/str(t) == '15:30:33.223583300'

	test/str(TimeOfDay.of(10, 30)) == '10:30'
	test/str(TimeOfDay.of(10, 30, 5)) == '10:30:05'
	test/str(TimeOfDay.of(10, 30, 5, 223000000)) == '10:30:05.223'
	test/str(TimeOfDay.of(10, 30, 5, 223583000)) == '10:30:05.223583'
	test/str(TimeOfDay.of(10, 30, 0, 1)) == '10:30:00.000000001'
	test/str(module.midnight) == '00:00'
	test/str(module.noon) == '12:00'

	test/core.InvalidField ^ (lambda: TimeOfDay.of(24))
	test/core.InvalidField ^ (lambda: TimeOfDay(earth.nanoseconds_in_day))

def test_time_of_day_arithmetic(test):
	t = TimeOfDay.of(22, 15)
	test/t.plus_hours(3) == TimeOfDay.of(1, 15)
	test/t.minus_hours(23) == TimeOfDay.of(23, 15)
	test/t.plus_minutes(45) == TimeOfDay.of(23)
	test/t.plus_seconds(-1) == TimeOfDay.of(22, 14, 59)
	test/t.plus_nanoseconds(1) == TimeOfDay.of(22, 15, 0, 1)
	test/TimeOfDay.parse('22:15:00.5') == TimeOfDay.of(22, 15, 0, 500000000)
	test/TimeOfDay.parse('10:15 PM', 'hh:mm a') == t

def test_time_of_day_carry(test):
	hour = earth.nanoseconds_in_hour
	day = earth.nanoseconds_in_day

	test/TimeOfDay.of(23, 30).add_nanoseconds(hour) == (TimeOfDay.of(0, 30), 1)
	test/TimeOfDay.of(0, 30).add_nanoseconds(-hour) == (TimeOfDay.of(23, 30), -1)
	test/TimeOfDay.of(12).add_nanoseconds((3 * day) + hour) == (TimeOfDay.of(13), 3)
	test/TimeOfDay.of(12).add_nanoseconds(-(2 * day)) == (TimeOfDay.of(12), -2)
	test/TimeOfDay.of(12).add_nanoseconds(0) == (TimeOfDay.of(12), 0)

	# The date absorbs the carry.
	dt = DateTime.of(2024, 12, 31, 23, 30)
	test/dt.plus_nanoseconds(hour) == DateTime.of(2025, 1, 1, 0, 30)
	test/dt.plus_nanoseconds(-(366 * day)) == DateTime.of(2023, 12, 31, 23, 30)

def test_datetime(test):
	dt = DateTime.of(2025, 6, 28, 15, 30, 33, 223583300)
	test/str(dt) == '2025-06-28T15:30:33.223583300'
	test/str(DateTime.of(2022, 12, 25, 10, 30)) == '2022-12-25T10:30'
	test/dt.to_date() == Date(2025, 6, 28)
	test/dt.to_local_time() == TimeOfDay.of(15, 30, 33, 223583300)
	test/dt.year == 2025
	test/dt.hour == 15
	test/dt.weekday == Weekday.saturday

	test/dt.plus_hours(3) == DateTime.of(2025, 6, 28, 18, 30, 33, 223583300)
	test/dt.plus_hours(9) == DateTime.of(2025, 6, 29, 0, 30, 33, 223583300)
	test/dt.minus_hours(16) == DateTime.of(2025, 6, 27, 23, 30, 33, 223583300)
	test/dt.plus_days(100) == DateTime.of(2025, 10, 6, 15, 30, 33, 223583300)
	test/dt.plus_months(-2).to_date() == Date(2025, 4, 28)
	test/dt.plus(module.Duration.of(day=1, nanosecond=1)) == DateTime.of(2025, 6, 29, 15, 30, 33, 223583301)

	test/DateTime.of_epoch_nanoseconds(dt.epoch_nanoseconds) == dt
	test/DateTime.of_epoch_nanoseconds(-1) == DateTime.of(1969, 12, 31, 23, 59, 59, 999999999)
	test/DateTime.parse('2025-06-28T15:30:33.2235833') == dt
	test/core.ParseError ^ (lambda: DateTime.parse('2025-06-28 15:30'))
	test/core.InvalidField ^ (lambda: DateTime.of(2025, 6, 28, 24))

def test_zoned(test):
	r = mock.resolver
	z = module.ZonedDateTime.of_instant(mock.walkthrough, 'Asia/Calcutta', r)
	test/z.offset == 330
	test/z.instant == mock.walkthrough
	test/str(z) == '2025-06-28T15:30:33.402594400+05:30[Asia/Calcutta]'

	ny = z.with_zone_same_instant('America/New_York', r)
	test/str(ny) == '2025-06-28T06:00:33.402594400-04:00[America/New_York]'
	test/ny.instant == z.instant
	test/ny.is_equal(z) == True
	test/ny != z
	test/ny.to_local() == DateTime.of(2025, 6, 28, 6, 0, 33, 402594400)
	test/ny.to_date() == Date(2025, 6, 28)
	test/ny.hour == 6

	utc = z.with_zone_same_instant('UTC', r)
	test/str(utc) == '2025-06-28T10:00:33.402594400Z[UTC]'
	fixed = z.with_zone_same_instant('+05:30', r)
	test/str(fixed) == '2025-06-28T15:30:33.402594400+05:30'

def test_zoned_of_local(test):
	r = mock.resolver
	local = DateTime.of(2025, 3, 9, 2, 30)
	z = local.at_zone('America/New_York', r)
	test/z.to_local() == DateTime.of(2025, 3, 9, 3, 30)
	test/z.offset == -240

	z = DateTime.of(2025, 11, 2, 1, 30).at_zone('America/New_York', r)
	test/z.offset == -240
	later = z.plus(module.Duration.of(hour=1), r)
	test/later.to_local() == DateTime.of(2025, 11, 2, 1, 30)
	test/later.offset == -300
	test/later > z

	same = z.with_zone_same_local('Asia/Calcutta', r)
	test/same.to_local() == z.to_local()
	test/same.offset == 330

	test/core.UnknownZone ^ (lambda: local.at_zone('Mars/Olympus', r))

def test_zoned_parse(test):
	r = mock.resolver
	text = '2025-06-28T06:00:33.4025944-04:00[America/New_York]'
	z = module.ZonedDateTime.parse(text, r)
	test/z.instant == mock.walkthrough
	test/z.zone == 'America/New_York'
	test/str(z) == '2025-06-28T06:00:33.402594400-04:00[America/New_York]'

	z = module.ZonedDateTime.parse('2025-06-28T10:00:33.4025944Z', r)
	test/z.zone == 'Z'
	test/z.instant == mock.walkthrough

	test/core.ParseError ^ (lambda: module.ZonedDateTime.parse('2025-06-28T10:00Z[', r))
	test/core.ParseError ^ (lambda: module.ZonedDateTime.parse('2025-06-28T10:00', r))

def test_legacy_milliseconds(test):
	z = module.from_epoch_millis(1751104833223)
	test/z.zone == 'UTC'
	test/z.offset == 0
	test/str(z.to_local()) == '2025-06-28T10:00:33.223'
	test/module.to_epoch_millis(z) == 1751104833223
	test/z.epoch_millis == 1751104833223

	# Sub-millisecond precision is floored.
	later = module.ZonedDateTime.of_instant(mock.walkthrough, 'UTC', mock.resolver)
	test/module.to_epoch_millis(later) == mock.walkthrough // 1000000
	before = module.ZonedDateTime.of_instant(-1, 'UTC', mock.resolver)
	test/module.to_epoch_millis(before) == -1
	test/module.from_epoch_millis(-1).to_local() == DateTime.of(1969, 12, 31, 23, 59, 59, 999000000)

def test_compare(test):
	d1 = Date(2023, 1, 1)
	d2 = Date(2024, 1, 1)
	test/module.compare(d1, d2) == module.Order.before
	test/module.compare(d2, d1) == module.Order.after
	test/module.compare(d1, Date(2023, 1, 1)) == module.Order.equal
	test/d1.is_before(d2) == True
	test/d1.is_after(d2) == False
	test/d1.is_equal(d2) == False
	test/d1 < d2
	test/sorted([d2, d1]) == [d1, d2]

	t1 = TimeOfDay.of(9)
	test/t1.is_before(TimeOfDay.of(10)) == True
	test/DateTime.of(2023, 1, 1, 23).is_before(DateTime.of(2023, 1, 2)) == True

	test/module.compare(module.Duration.of(hour=1), module.Duration.of(minute=61)) == module.Order.before

	z = module.ZonedDateTime.of_instant(0, 'UTC', mock.resolver)
	test/TypeError ^ (lambda: module.compare(z, DateTime.of(1970, 1, 1)))
	test/TypeError ^ (lambda: module.compare(d1, DateTime.of(2023, 1, 1)))
	test/TypeError ^ (lambda: z < DateTime.of(1970, 1, 1))

def test_duration(test):
	d = module.Duration.of(hour=33, microsecond=44)
	test/d == (33 * earth.nanoseconds_in_hour) + 44000
	test/d.select('day') == 1
	test/d.select('hour') == 33
	test/(-d).select('day') == -1
	test/str(module.Duration.of(hour=8, minute=6, second=12, millisecond=345)) == 'PT8H6M12.345S'
	test/str(module.Duration(0)) == 'PT0S'
	test/str(module.Duration.of(hour=-1)) == 'PT-1H'
	test/str(module.Duration.of(millisecond=-500)) == 'PT-0.5S'
	test/repr(module.Duration.of(day=1, hour=2)) == "(time.duration@'1d.2h')"
	test/(d + module.Duration.of(hour=1)).select('hour') == 34
	test/(d - d) == 0
	test/(d * 2).select('hour') == 66
	test.isinstance(d * 2, module.Duration)
	test/TypeError ^ (lambda: module.Duration.of(fortnight=1))

def test_duration_between(test):
	r = mock.resolver
	a = module.ZonedDateTime.of_instant(mock.walkthrough, 'Asia/Calcutta', r)
	b = a.with_zone_same_instant('America/New_York', r)
	test/module.duration_between(a, b) == 0

	d = module.duration_between(DateTime.of(2025, 1, 1), DateTime.of(2025, 1, 2, 1))
	test/d == module.Duration.of(hour=25)
	test/module.duration_between(DateTime.of(2025, 1, 2, 1), DateTime.of(2025, 1, 1)) == -d
	test/module.duration_between(Date(2023, 1, 1), Date(2024, 1, 1)).select('day') == 365
	test/TypeError ^ (lambda: module.duration_between(module.Duration(0), module.Duration(1)))

def test_period_between(test):
	pb = module.period_between
	test/pb(Date(2023, 1, 1), Date(2024, 1, 1)) == module.Period(1, 0, 0)
	test/pb(Date(2022, 1, 31), Date(2022, 3, 1)) == module.Period(0, 1, 1)
	test/pb(Date(2022, 1, 31), Date(2022, 2, 28)) == module.Period(0, 1, 0)
	test/pb(Date(2022, 1, 15), Date(2022, 1, 20)) == module.Period(0, 0, 5)
	test/pb(Date(2022, 3, 1), Date(2022, 1, 31)) == module.Period(0, -1, -1)
	test/pb(Date(2025, 6, 28), Date(2024, 4, 1)) == module.Period(-1, -2, -27)
	test/pb(Date(1990, 8, 15), Date(2025, 6, 28)) == module.Period(34, 10, 13)
	test/pb(Date(2025, 6, 28), Date(2025, 6, 28)).is_zero() == True
	test/TypeError ^ (lambda: pb(DateTime.of(2025, 1, 1), DateTime.of(2025, 1, 2)))

def test_period_reconstruction(test):
	"""
	# Applying the period to the start always reproduces the end.
	"""
	starts = [Date(2024, 1, 31), Date(2024, 2, 29), Date(2023, 12, 31), Date(2025, 3, 15)]
	for start in starts:
		for offset in range(-800, 800, 13):
			end = start.plus_days(offset)
			p = module.period_between(start, end)
			test/p.add_to(start) == end
			signs = {(x > 0) - (x < 0) for x in (p.years, p.months, p.days)} - {0}
			test/len(signs) <= 1
			test/abs(p.months) < 12

def test_period(test):
	p = module.Period(1, 2, 3)
	test/str(p) == 'P1Y2M3D'
	test/str(module.Period()) == 'P0D'
	test/str(module.Period(months=-1)) == 'P-1M'
	test/repr(p) == "(time.period@'P1Y2M3D')"
	test/p.total_months == 14
	test/p.negated() == module.Period(-1, -2, -3)
	test/p.negated().is_negative() == True
	test/p.add_to(Date(2024, 1, 31)) == Date(2025, 3, 31).plus_days(3)
	test/module.Period.between(Date(2023, 1, 1), Date(2024, 1, 1)) == module.Period(years=1)

def test_between_counts(test):
	d1 = Date(2023, 1, 1)
	d2 = Date(2024, 1, 1)
	test/module.days_between(d1, d2) == 365
	test/module.months_between(d1, d2) == 12
	test/module.years_between(d1, d2) == 1
	test/module.days_between(d2, d1) == -365
	test/module.months_between(d2, d1) == -12
	test/module.days_between(Date(1990, 8, 15), Date(2025, 6, 28)) == 12736
	test/module.months_between(Date(2025, 1, 15), Date(2025, 2, 14)) == 0
	test/module.years_between(Date(2024, 2, 29), Date(2025, 2, 28)) == 1

	test/module.days_between(DateTime.of(2025, 1, 1, 12), DateTime.of(2025, 1, 3, 11)) == 1
	test/module.days_between(DateTime.of(2025, 1, 3, 11), DateTime.of(2025, 1, 1, 12)) == -1

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
