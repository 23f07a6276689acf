"""
# Contention based assertions for pytest.

# Test functions receive a &Test instance through the `test` fixture and state their
# expectations with the true division operator:

#!python
	def test_feature(test):
		test/feature.functionality() == expectation
		test/ValueError ^ (lambda: feature.failure())

# Failed contentions raise &Absurdity, an &AssertionError, so that pytest reports
# them as ordinary assertion failures.
"""
import builtins
import functools
import operator

import pytest

from ..settings import settings

class Absurdity(AssertionError):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(str(self))

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Object constructed by &Test instances to perform a comparison.
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	_override = {
		'__mod__': ('is', lambda x, y: x is y),
	}

	def _check(opname, op):
		def check(self, ob):
			x, y = self.object, ob
			if self.inverse:
				if op(x, y):
					raise Absurdity(opname, x, y, inverse=True)
			else:
				if not op(x, y):
					raise Absurdity(opname, x, y, inverse=False)
		return check

	for k in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__'):
		locals()[k] = _check(k, getattr(operator, k))
	__mod__ = _check(*_override['__mod__'])
	__hash__ = None
	del k

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		x = self.object
		y = self.storage = val
		if not isinstance(y, x):
			raise Absurdity("isinstance", x, y)
		return True

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called.

		#!python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

	def __lshift__(self, subject):
		"""
		# Contend that &subject is contained by the object.

		#!python
			test/Container << subject
		"""
		if (subject in self.object) == self.inverse:
			raise Absurdity("contains", self.object, subject, inverse=self.inverse)
	__rlshift__ = __lshift__

class Test(object):
	"""
	# Provides &Contention instances using the division operators.
	"""
	__slots__ = ('identifier',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier):
		self.identifier = identifier

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	settings.reset()
	yield Test(request.node.name)
	settings.reset()
