"""
# Exception hierarchy for calendar, clock, zone, and text errors.

# All errors are raised at the point of detection; operations are pure
# computations and never produce partial results.
"""

class Error(Exception):
	"""
	# Base class for chronicle time errors.
	"""

class InvalidField(Error, ValueError):
	"""
	# A calendar or time-of-day component was out of range on direct construction.

	# [ Properties ]
	# /field/
		# The name of the field; `'month'`, `'day'`, `'hour'`.
	# /value/
		# The rejected value. &None when the field was missing altogether.
	# /limits/
		# The inclusive range that the value must fall within, or &None.
	"""

	def __init__(self, field, value, limits=None):
		self.field = field
		self.value = value
		self.limits = limits
		super().__init__(field, value, limits)

	def __str__(self):
		if self.value is None:
			return "field %r is required" %(self.field,)
		if self.limits is None:
			return "invalid %s: %r" %(self.field, self.value)
		return "invalid %s: %r not in [%d, %d]" %((self.field, self.value) + tuple(self.limits))

class UnsupportedField(Error, TypeError):
	"""
	# The value being formatted does not carry the field designated by a pattern token.
	"""

	def __init__(self, field, value):
		self.field = field
		self.value = value
		super().__init__(field, value)

	def __str__(self):
		return "%s has no %r field" %(self.value.__class__.__name__, self.field)

class UnknownZone(Error, LookupError):
	"""
	# The zone identifier was not recognized by the resolver or its database.
	"""

	def __init__(self, zone):
		self.zone = zone
		super().__init__(zone)

	def __str__(self):
		return "unknown zone: %r" %(self.zone,)

class ParseError(Error, ValueError):
	"""
	# Text did not match a compiled pattern or textual form.

	# [ Properties ]
	# /position/
		# The character offset in &text where the mismatch was detected.
	# /expected/
		# Description of what the plan expected at &position.
	# /text/
		# The complete text given to the parser.
	"""

	def __init__(self, position, expected, text=None):
		self.position = position
		self.expected = expected
		self.text = text
		super().__init__(position, expected, text)

	def __str__(self):
		return "expected %s at position %d in %r" %(self.expected, self.position, self.text)
