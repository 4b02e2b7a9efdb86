"""
# Failure values and the boundary functions that interpret them.

# Fallible operations in calendrical return either the new value or a &Failure
# instance. Failures are not raised; callers inspect the result with &failed,
# or by truth testing as &Failure instances are always false.

#!python
	d = types.Date.of(2023, 2, 29)
	if core.failed(d):
		assert d.fault is core.Fault.invalid

# &require and &fallback are the sanctioned ways to leave the result protocol at
# a boundary: raising &Rejection, or explicitly substituting a default.
"""
import enum
import functools
import dataclasses
import logging

log = logging.getLogger(__name__)

#: Dataclass constructor used for the immutable value types.
record = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

class Fault(enum.Enum):
	"""
	# The kind of rejection a &Failure represents.

	# [ Elements ]
	# /invalid/
		# A field combination violates a range or calendar consistency rule.
	# /overflow/
		# Same-day arithmetic would cross a day boundary.
	# /shift/
		# An offset shift required by a local view could not be performed
		# by the viewed value.
	"""

	invalid  = 1
	overflow = 2
	shift    = 3

@record()
class Failure(object):
	"""
	# The result of a rejected operation.

	# [ Properties ]
	# /fault/
		# The &Fault classifying the rejection.
	# /context/
		# Description of the field or operation that was rejected.
	"""

	fault: Fault
	context: str = ''

	def __bool__(self):
		return False

	def __str__(self):
		if self.context:
			return self.fault.name + ': ' + self.context
		return self.fault.name

def invalid(context=''):
	return Failure(Fault.invalid, context)

def overflow(context=''):
	return Failure(Fault.overflow, context)

def shift(context=''):
	return Failure(Fault.shift, context)

def failed(result, isinstance=isinstance) -> bool:
	"""
	# Whether the &result of an operation is a &Failure.
	"""
	return isinstance(result, Failure)

def integer(x, isinstance=isinstance) -> bool:
	"""
	# Whether &x is an &int suitable for a calendar field; &bool is excluded.
	"""
	return isinstance(x, int) and not isinstance(x, bool)

class Rejection(ValueError):
	"""
	# Exception raised by &require when given a &Failure.
	"""

	def __init__(self, failure:Failure):
		super().__init__(str(failure))
		self.failure = failure

	@property
	def fault(self) -> Fault:
		return self.failure.fault

def require(result):
	"""
	# Return &result if it is not a &Failure; otherwise, raise &Rejection.
	"""
	if isinstance(result, Failure):
		log.debug("rejecting failed result: %s", result)
		raise Rejection(result)
	return result

def fallback(result, default):
	"""
	# Return &result, or &default if &result is a &Failure.

	# Substitution is logged as a warning; it is a convenience for diagnostics
	# and should not be relied on for control flow.
	"""
	if isinstance(result, Failure):
		log.warning("substituting %r for failed result (%s)", default, result)
		return default
	return result
