"""
# Test primitives: &Test, &Contention, &Absurdity, and &Fate.

# Test functions take a single &Test parameter and state their expectations with
# contentions constructed by the division operators:

#!syntax/python
	def test_feature(test):
		test/subject() == expectation
		test//subject() == unexpected
		with test/LookupError as exc:
			raise KeyError('x')

# Modules may be executed directly using &execute.
"""
import builtins
import operator
import functools
import contextlib

def gather(container, prefix='test_'):
	"""
	# Collect the `(identifier, function)` pairs of the tests in &container ordered by
	# their first line number.
	"""
	tests = [
		('#'.join((container.__name__, name)), getattr(container, name))
		for name in dir(container)
		if name.startswith(prefix) and callable(getattr(container, name))
	]
	tests.sort(key=lambda x: getattr(getattr(x[1], '__code__', None), 'co_firstlineno', 0))
	return tests

class Absurdity(Exception):
	"""
	# Raised by &Contention instances when a contended relationship does not hold.
	"""

	#: Operator method names mapped to their expression form.
	symbols = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=False):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter, inverse)

	def __str__(self):
		op = self.symbols.get(self.operator, self.operator)
		return ('not ' if self.inverse else '') + ' '.join((repr(self.former), op, repr(self.latter)))

class Contention(object):
	"""
	# Comparison proxy produced by `test/subject` and, inverted, `test//subject`.

	# Every binary operator of the &operator module is forwarded to the subject and
	# raises &Absurdity when the result is false, or true when inverted. `%` contends
	# identity. Used as a context manager, the subject is an exception type to trap.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__': ('__mod__', operator.is_),
	}

	for k, v in operator.__dict__.items():
		if not k.startswith('__') or k.startswith('__get') or k.startswith('__set'):
			continue
		if k.strip('_') not in operator.__dict__:
			continue
		opname, v = _override.get(k, (k, v))

		def check(self, ob, opname=opname, operator=v):
			if bool(operator(self.object, ob)) == self.inverse:
				raise self.test.Absurdity(opname, self.object, ob, inverse=self.inverse)
		locals()[k] = check
	del k, v, check, opname

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		self.storage = val
		if isinstance(val, self.test.Fate):
			# Fates pass through the trap.
			return None

		if not isinstance(val, self.object):
			raise self.test.Absurdity("isinstance", self.object, val)
		return True

	def __xor__(self, subject):
		"""
		# Contend that calling &subject raises the exception type:

		#!syntax/python
			test/ValueError ^ (lambda: int('x'))
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Fate(BaseException):
	"""
	# The conclusion of a test. Raised by &Test.skip and &Test.fail, and assigned by
	# &Test.seal.
	"""

	#: Subtype to `(abstract, impact)`.
	descriptors = {
		'return': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
		'interrupt': ("interrupted", -1),
	}

	line = None

	def __init__(self, content, subtype='fail'):
		self.content = content
		self.subtype = subtype
		super().__init__(content, subtype)

	@property
	def impact(self) -> int:
		return self.descriptors[self.subtype][1]

	@property
	def negative(self) -> bool:
		return self.impact < 0

class Test(object):
	"""
	# Handle given to test functions for constructing contentions and concluding the test.

	# [ Properties ]
	# /identifier/
		# The qualified name of the test function.
	# /subject/
		# The test function.
	# /fate/
		# The &Fate assigned by &seal.
	# /exits/
		# A &contextlib.ExitStack closed after the test is sealed.
	"""
	__slots__ = ('identifier', 'subject', 'fate', 'exits')

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)
	__rtruediv__ = __truediv__

	def __floordiv__(self, object):
		return self.Contention(self, object, True)
	__rfloordiv__ = __floordiv__

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args)

	def skip(self, condition):
		"""
		# Conclude the test as skipped when &condition is true.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')

	def seal(self):
		"""
		# Run the &subject and assign its &fate. Exceptions other than &Fate
		# become failures with the exception as the cause.
		"""
		try:
			self.subject(self)
			self.fate = self.Fate(None, subtype='return')
		except Fate as fate:
			self.fate = fate
		except Exception as err:
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
			self.fate.line = err.__traceback__.tb_lineno
		except BaseException as err:
			self.fate = self.Fate('test raised interrupt', subtype='interrupt')
			self.fate.__cause__ = err
			raise

def execute(module):
	"""
	# Run the tests contained in &module in order. The first failure is raised.
	"""
	for identifier, subject in gather(module):
		test = Test(identifier, subject)
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
