"""
# Week based measures of time: days of seven.

# Weekdays are numbered from Monday, `1`, through Sunday, `7`, and are derived
# from the day count of &.gregorian.days_from_civil whose epoch, 1970-01-01,
# was a Thursday.
"""
import enum

#: English names of the days of the week.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = tuple(x[:3] for x in weekday_names)

#: Zero-based weekday index of the epoch day, Thursday.
epoch_weekday = weekday_names.index('thursday')

class Weekday(enum.IntEnum):
	"""
	# Day of the week with ISO numbering.
	"""

	monday = 1
	tuesday = 2
	wednesday = 3
	thursday = 4
	friday = 5
	saturday = 6
	sunday = 7

	@property
	def abbreviation(self) -> str:
		"""
		# The capitalized three letter abbreviation; `'Mon'`.
		"""
		return weekday_abbreviations[self - 1].capitalize()

	@property
	def title(self) -> str:
		"""
		# The capitalized english name; `'Monday'`.
		"""
		return weekday_names[self - 1].capitalize()

	def __str__(self):
		return self.name.upper()

def day_of_week(days, offset=epoch_weekday) -> Weekday:
	"""
	# Derive the weekday of the given &days since the epoch.
	"""
	return Weekday(((days + offset) % days_in_week) + 1)
