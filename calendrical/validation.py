"""
# Flat calendar records and their validation.

# &CalendarTime is the boundary representation exchanged with parsers and
# renderers of timestamp strings. Records are constructed without checks and
# validated on demand by &validate, which either returns the record unchanged
# or a &core.Failure; fields are never repaired or clamped.

# [ Elements ]
# /standard_checks/
	# The checks performed by &validate by default.
# /literal_checks/
	# The checks of &standard_checks, but with the millisecond bound applied
	# to the minute-of-day field. Preserved for compatibility with records
	# that were validated by that rule.
"""
from . import core
from . import gregorian
from . import constants
from . import earth

class Offset(object):
	"""
	# Local offset of a &CalendarTime or &.views.Local.
	# Either &Known, carrying signed minutes, or &Unknown.

	# Known offsets are ordered by their minutes and all precede &Unknown.
	"""
	__slots__ = ()

	def _order(self):
		raise NotImplementedError

	def __lt__(self, operand):
		if not isinstance(operand, Offset):
			return NotImplemented
		return self._order() < operand._order()

	def __le__(self, operand):
		if not isinstance(operand, Offset):
			return NotImplemented
		return self._order() <= operand._order()

	def __gt__(self, operand):
		if not isinstance(operand, Offset):
			return NotImplemented
		return self._order() > operand._order()

	def __ge__(self, operand):
		if not isinstance(operand, Offset):
			return NotImplemented
		return self._order() >= operand._order()

@core.record()
class Known(Offset):
	"""
	# An asserted offset of &minutes from UTC.
	"""
	minutes:(int)

	def _order(self):
		return (0, self.minutes)

	@property
	def seconds(self) -> int:
		return self.minutes * 60

	def __repr__(self):
		return "(offset@%+d)" %(self.minutes,)

@core.record()
class Unknown(Offset):
	"""
	# UTC with no assertion about the local offset.
	# Distinct from `Known(0)`.
	"""

	def _order(self):
		return (1, 0)

	def __repr__(self):
		return "(offset@unknown)"

unknown = Unknown()
utc = Known(0)

def neutral(offset:Offset) -> bool:
	"""
	# Whether the &offset leaves fields unchanged; &Unknown or zero minutes.
	"""
	return offset == unknown or offset == utc

@core.record(order=True)
class CalendarTime(object):
	"""
	# Naive calendar record.

	# [ Properties ]
	# /year/
		# Gregorian year.
	# /month/
		# One-based month of the year.
	# /day/
		# One-based day of the month.
	# /minutes/
		# Minute of the day.
	# /milliseconds/
		# Millisecond of the minute; values of `60000` and above address a leap second.
	# /offset/
		# The &Offset of the fields from UTC.
	"""

	year:(int)
	month:(int)
	day:(int)
	minutes:(int) = 0
	milliseconds:(int) = 0
	offset:(Offset) = unknown

def check_year(ct:CalendarTime):
	if not (constants.minimum_year <= ct.year <= constants.maximum_year):
		return core.invalid("year %r out of range" %(ct.year,))

def check_month_and_day(ct:CalendarTime):
	if not (1 <= ct.month <= gregorian.months_in_year):
		return core.invalid("month %r out of range" %(ct.month,))

	if not (1 <= ct.day <= gregorian.days_in_month(ct.year, ct.month)):
		return core.invalid("day %r out of range for %d-%02d" %(ct.day, ct.year, ct.month))

def check_minutes(ct:CalendarTime):
	if not (0 <= ct.minutes < earth.minutes_in_day):
		return core.invalid("minute of day %r out of range" %(ct.minutes,))

def check_milliseconds(ct:CalendarTime):
	if not (0 <= ct.milliseconds < constants.millisecond_limit):
		return core.invalid("millisecond of minute %r out of range" %(ct.milliseconds,))

def check_milliseconds_by_minutes(ct:CalendarTime):
	# Millisecond bound applied to the minute field; the millisecond field is not inspected.
	if not (0 <= ct.minutes < constants.millisecond_limit):
		return core.invalid("minute of day %r out of millisecond range" %(ct.minutes,))

def check_offset_value(offset):
	"""
	# Return &None if &offset is &Unknown or a &Known offset of integer minutes
	# strictly within a day; otherwise, the &core.Failure describing it.
	"""
	if isinstance(offset, Unknown):
		return None

	if not isinstance(offset, Known):
		return core.invalid("offset %r is not an Offset" %(offset,))

	if not core.integer(offset.minutes):
		return core.invalid("offset minutes %r must be an integer" %(offset.minutes,))

	if not (-constants.offset_limit < offset.minutes < constants.offset_limit):
		return core.invalid("offset %r out of range" %(offset.minutes,))

	return None

def check_offset(ct:CalendarTime):
	return check_offset_value(ct.offset)

standard_checks = (
	check_year,
	check_month_and_day,
	check_minutes,
	check_milliseconds,
	check_offset,
)

literal_checks = (
	check_year,
	check_month_and_day,
	check_minutes,
	check_milliseconds_by_minutes,
	check_offset,
)

def validate(ct:CalendarTime, checks=standard_checks):
	"""
	# Return &ct if all &checks pass, otherwise the &core.Failure of the first check
	# that rejected it.

	# [ Parameters ]
	# /ct/
		# The record to validate.
	# /checks/
		# Sequence of check functions returning &None or a &core.Failure.
	"""
	for check in checks:
		failure = check(ct)
		if failure is not None:
			return failure
	return ct

def valid(ct:CalendarTime, checks=standard_checks) -> bool:
	return not core.failed(validate(ct, checks))
