"""
# Primary public module.

# Provides access to the value types, &Date, &Time, &DateTime, and &Local,
# along with the record validation and failure interfaces.
"""
from .core import Fault, Failure, Rejection, failed, require, fallback
from .validation import CalendarTime, Offset, Known, Unknown, validate, valid
from .types import Date, Time, DateTime
from .views import Local, Total

__shortname__ = 'libcal'

def date(year, month, day):
	"""
	# Construct a &Date; returns a &Failure if the fields do not address a real day.
	"""
	return Date.of(year, month, day)

def datetime(year, month, day, hour=0, minute=0, second=0, fraction=0):
	"""
	# Construct a &DateTime; returns a &Failure if any field is out of range.
	"""
	return DateTime.of(year, month, day, hour, minute, second, fraction)

def offset(minutes=None) -> Offset:
	"""
	# Construct the &Offset for &minutes; &None designates &Unknown.

	# The offset is not range checked; &local and the validation of a
	# &CalendarTime containing it do that.
	"""
	if minutes is None:
		return Unknown()
	return Known(minutes)

def local(value, minutes=None):
	"""
	# View &value through the offset designated by &minutes.
	# Returns a &Failure if the offset is out of range.
	"""
	return Local.of(value, offset(minutes))

def unix(seconds, Type=DateTime):
	"""
	# Construct the &Type instance for the given exact Unix timestamp.
	"""
	return Type.from_unix_seconds(seconds)

def parse(ct:CalendarTime) -> Total:
	"""
	# Convert a parsed record into a &Local view of a &DateTime.
	"""
	return Local.from_record(ct)

def epoch() -> DateTime:
	return DateTime.epoch()
