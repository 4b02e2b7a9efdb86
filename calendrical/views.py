"""
# Offset views for presenting UTC values in a local frame.

# A &Local pairs a value with an &.validation.Offset. The value always holds the
# UTC instant; field access shifts it forward by the offset before reading, and
# field updates shift the updated value back before it is stored.

#!syntax/python
	from calendrical import types, views, validation
	t = types.DateTime.of(2024, 1, 1, 0, 30)
	lt = views.Local(t, validation.Known(-90))
	assert (lt.year, lt.hour, lt.minute) == (2023, 23, 0)

# Views over a &.types.Time may fail to shift when the local reading is on
# another day; the failure is returned as &.core.Fault.shift.
"""
import typing
from fractions import Fraction

from . import abstract
from . import core
from . import constants
from . import earth
from . import types
from . import validation

T = typing.TypeVar('T', bound=abstract.TimeFields)

@core.record(order=True)
class Local(typing.Generic[T]):
	"""
	# A &value seen through an &offset.

	# Equality and ordering consider the value first and then the offset;
	# views with an &.validation.Unknown offset are distinct from UTC views.

	# [ Properties ]
	# /value/
		# The UTC value. Must provide &.abstract.TimeFields.
	# /offset/
		# The &.validation.Offset of the view.
	"""

	value:(T)
	offset:(validation.Offset) = validation.unknown

	def __post_init__(self):
		failure = validation.check_offset_value(self.offset)
		if failure is not None:
			raise core.Rejection(failure)

	def __repr__(self):
		return "(local@'%s' %r)" %(self.value, self.offset)

	@classmethod
	def of(Class, value:T, offset=validation.unknown):
		"""
		# Construct the view or return the &core.Failure describing the invalid &offset.
		"""
		failure = validation.check_offset_value(offset)
		if failure is not None:
			return failure
		return Class(value, offset)

	@classmethod
	def utc(Class, value:T):
		"""
		# View &value with a known zero offset.
		"""
		return Class(value, validation.utc)

	@classmethod
	def unknown(Class, value:T):
		"""
		# View &value without asserting an offset.
		"""
		return Class(value, validation.unknown)

	@classmethod
	def epoch(Class) -> 'Total':
		return Class(types.DateTime.epoch(), validation.unknown)

	@property
	def neutral(self) -> bool:
		"""
		# Whether fields are read from &value directly.
		"""
		return validation.neutral(self.offset)

	@property
	def total(self) -> bool:
		"""
		# Whether &value is declared to always shift successfully; see &.abstract.TotalShift.
		# A failed shift of such a value raises &core.Rejection instead of returning
		# &core.Fault.shift.
		"""
		return getattr(self.value, 'total_shift', False)

	def _shift(self, value, seconds):
		shifted = value.add_second_fractions(seconds)
		if core.failed(shifted):
			if self.total:
				raise core.Rejection(shifted)
			return core.shift("%r shifted by %s seconds: %s" %(value, seconds, shifted))
		return shifted

	def view(self):
		"""
		# The value in the local frame; the value whose fields are presented.
		# Returns a &core.Failure if the shift could not be performed.
		"""
		if self.neutral:
			return self.value
		return self._shift(self.value, self.offset.seconds)

	def _read(self, field):
		v = self.view()
		if core.failed(v):
			return v
		return getattr(v, field)

	def _write(self, method, *args):
		if self.neutral:
			updated = getattr(self.value, method)(*args)
			if core.failed(updated):
				return updated
			return self.__class__(updated, self.offset)

		v = self.view()
		if core.failed(v):
			return v

		updated = getattr(v, method)(*args)
		if core.failed(updated):
			return updated

		restored = self._shift(updated, -self.offset.seconds)
		if core.failed(restored):
			return restored
		return self.__class__(restored, self.offset)

	# Date fields; available when &value provides &.abstract.DateFields.

	@property
	def year(self):
		return self._read('year')

	@property
	def month(self):
		return self._read('month')

	@property
	def day(self):
		return self._read('day')

	def set_year(self, year):
		return self._write('set_year', year)

	def set_month(self, month):
		return self._write('set_month', month)

	def set_day(self, day):
		return self._write('set_day', day)

	def add_days(self, days):
		return self._write('add_days', days)

	# Time fields.

	@property
	def hour(self):
		return self._read('hour')

	@property
	def minute(self):
		return self._read('minute')

	@property
	def second(self):
		return self._read('second')

	@property
	def second_fraction(self):
		return self._read('second_fraction')

	def set_hour(self, hour):
		return self._write('set_hour', hour)

	def set_minute(self, minute):
		return self._write('set_minute', minute)

	def set_second(self, second):
		return self._write('set_second', second)

	def set_second_fraction(self, fraction):
		return self._write('set_second_fraction', fraction)

	def add_hours(self, hours):
		return self._write('add_hours', hours)

	def add_minutes(self, minutes):
		return self._write('add_minutes', minutes)

	def add_seconds(self, seconds):
		return self._write('add_seconds', seconds)

	def add_second_fractions(self, seconds):
		return self._write('add_second_fractions', seconds)

	# Linear conversion; the offset does not contribute.

	def to_unix_seconds(self):
		return self.value.to_unix_seconds()

	@classmethod
	def from_unix_seconds(Class, seconds, Type=types.DateTime):
		"""
		# Construct a view with an unknown offset over the &Type instance
		# addressed by &seconds.
		"""
		v = Type.from_unix_seconds(seconds)
		if core.failed(v):
			return v
		return Class(v, validation.unknown)

	# Record boundary.

	@classmethod
	def from_record(Class, ct:validation.CalendarTime, checks=validation.standard_checks) -> 'Total':
		"""
		# Validate &ct and construct the &types.DateTime view that it describes.
		# The fields of &ct are local to its offset.

		# Records addressing a leap second are rejected as &types.Time
		# cannot represent them.
		"""
		ct = validation.validate(ct, checks)
		if core.failed(ct):
			return ct

		# Not covered by &validation.literal_checks.
		if not (0 <= ct.milliseconds < constants.millisecond_limit):
			return core.invalid("millisecond of minute %r out of range" %(ct.milliseconds,))

		hour, minute = divmod(ct.minutes, earth.minutes_in_hour)
		second, ms = divmod(ct.milliseconds, earth.milliseconds_in_second)
		if second >= earth.seconds_in_minute:
			return core.invalid("leap second %r is not representable" %(ct.milliseconds,))

		local = types.DateTime.of(ct.year, ct.month, ct.day,
			hour, minute, second, Fraction(ms, earth.milliseconds_in_second))
		if core.failed(local):
			return local

		if validation.neutral(ct.offset):
			return Class(local, ct.offset)
		return Class(local.add_second_fractions(-ct.offset.seconds), ct.offset)

	def to_record(self, checks=validation.standard_checks):
		"""
		# Construct and validate the &validation.CalendarTime of the local fields.

		# Fails when the second fraction is not a whole number of milliseconds;
		# the fraction is not rounded.
		"""
		v = self.view()
		if core.failed(v):
			return v

		ms = v.second_fraction * earth.milliseconds_in_second
		if ms.denominator != 1:
			return core.invalid("second fraction %s is not whole milliseconds" %(v.second_fraction,))

		ct = validation.CalendarTime(
			v.year, v.month, v.day,
			(v.hour * earth.minutes_in_hour) + v.minute,
			(v.second * earth.milliseconds_in_second) + int(ms),
			self.offset,
		)
		return validation.validate(ct, checks)

#: &Local over a value that always shifts successfully; the result of the
#: &types.DateTime constructors of &Local.
Total = Local[abstract.TotalShift]

abstract.TimeFields.register(Local)
abstract.DateFields.register(Local)
abstract.UnixTime.register(Local)
abstract.Epochal.register(Local)
