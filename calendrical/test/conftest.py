"""
# Contention fixture allowing the test modules to be collected by pytest.

# Test functions receive a &Test instance as `test` and express assertions as
# contentions using true division:

#!syntax/python
	def test_feature(test):
		test/expectation == functionality()
"""
import builtins
import functools
import operator

import pytest

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
		'__lshift__': '<<',
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
	# Assertion object constructed by `test/operand`. Comparisons raise &Absurdity
	# when they do not hold; `test//operand` inverts the contention.
	"""
	__slots__ = ('_operand', '_inverse', '_storage')

	def __init__(self, object, inverse=False):
		self._operand = object
		self._inverse = inverse

	def _check(self, opname, operator, operand):
		x = self._operand
		y = operand
		if self._inverse:
			if operator(x, y): raise Absurdity(opname, x, y, inverse=True)
		else:
			if not operator(x, y): raise Absurdity(opname, x, y, inverse=False)
		return True

	# Build operator methods based on operator.
	for k in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__'):
		locals()[k] = functools.partialmethod(_check, k, getattr(operator, k))
	__mod__ = functools.partialmethod(_check, '__mod__', operator.is_)
	__lshift__ = functools.partialmethod(_check, '__lshift__', (lambda x, y: y in x))
	del k

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, '_storage', None)

	def __exit__(self, typ, val, tb):
		x = self._operand
		self._storage = val
		if val is None or not isinstance(val, x):
			raise Absurdity("isinstance", x, val)
		return True # !!! Inhibiting raise.

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called:

		#!syntax/python
			test/Exception ^ (lambda: subject())
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Test(object):
	"""
	# Contention constructor and assertion utilities given to test functions.
	"""
	__slots__ = ('identity',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identity):
		self.identity = identity

	def __truediv__(self, object):
		return self.Contention(object)

	def __rtruediv__(self, object):
		return self.Contention(object)

	def __floordiv__(self, object):
		return self.Contention(object, True)

	def __rfloordiv__(self, object):
		return self.Contention(object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

	def fail(self, cause):
		pytest.fail(cause)

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

@pytest.fixture
def test(request):
	return Test(request.node.nodeid)
