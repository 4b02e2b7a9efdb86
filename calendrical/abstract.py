"""
# Capability protocols shared by the calendar value types.

# Primarily, this module exists to document the interfaces implemented by
# &.types.Date, &.types.Time, &.types.DateTime, and &.views.Local.
# Each type declares the protocols that it satisfies; &.views.Local forwards
# to the implementation of the value that it views.

# Methods documented as fallible return the new value or a &.core.Failure.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Epochal(typing.Protocol):
	"""
	# Types with a designated value at the epoch.
	"""

	@classmethod
	@abstractmethod
	def epoch(Class):
		"""
		# The instance corresponding to 1970-01-01T00:00:00.
		"""

@typing.runtime_checkable
class UnixTime(typing.Protocol):
	"""
	# Types convertible to and from a linear count of seconds since the epoch.
	"""

	@abstractmethod
	def to_unix_seconds(self):
		"""
		# The exact number of seconds since the epoch as an &int or &fractions.Fraction.

		# [ Invariants ]
		#!python
			assert type(t).from_unix_seconds(t.to_unix_seconds()) == t
		"""

	@classmethod
	@abstractmethod
	def from_unix_seconds(Class, seconds):
		"""
		# Construct an instance from an exact count of seconds since the epoch.
		# Fallible; &float and other inexact quantities are rejected.
		"""

@typing.runtime_checkable
class DateFields(typing.Protocol):
	"""
	# Access to the year, month, and day fields.
	"""

	@property
	@abstractmethod
	def year(self) -> int:
		pass

	@property
	@abstractmethod
	def month(self) -> int:
		pass

	@property
	@abstractmethod
	def day(self) -> int:
		pass

	@abstractmethod
	def set_year(self, year:int):
		"""
		# Fallible. Fails when the current month and day do not exist in &year.
		"""

	@abstractmethod
	def set_month(self, month:int):
		"""
		# Fallible. Fails when the current day does not exist in &month.
		"""

	@abstractmethod
	def set_day(self, day:int):
		"""
		# Fallible. Fails when &day does not exist in the current month.
		"""

	@abstractmethod
	def add_days(self, days:int):
		"""
		# Move the date by &days. Total for any &int.
		"""

@typing.runtime_checkable
class TimeFields(typing.Protocol):
	"""
	# Access to the hour, minute, second, and second fraction fields.

	# Setters never carry into other fields. Additions may fail with
	# &.core.Fault.overflow when the implementation cannot carry into a date.
	"""

	@property
	@abstractmethod
	def hour(self) -> int:
		pass

	@property
	@abstractmethod
	def minute(self) -> int:
		pass

	@property
	@abstractmethod
	def second(self) -> int:
		pass

	@property
	@abstractmethod
	def second_fraction(self):
		"""
		# The exact sub-second fraction; `0 <= f < 1`.
		"""

	@abstractmethod
	def set_hour(self, hour:int):
		pass

	@abstractmethod
	def set_minute(self, minute:int):
		pass

	@abstractmethod
	def set_second(self, second:int):
		pass

	@abstractmethod
	def set_second_fraction(self, fraction):
		pass

	@abstractmethod
	def add_hours(self, hours:int):
		pass

	@abstractmethod
	def add_minutes(self, minutes:int):
		pass

	@abstractmethod
	def add_seconds(self, seconds:int):
		pass

	@abstractmethod
	def add_second_fractions(self, seconds):
		"""
		# Add an exact, possibly fractional, number of &seconds.
		"""

@typing.runtime_checkable
class TotalShift(TimeFields, typing.Protocol):
	"""
	# &TimeFields whose additions always succeed.

	# Required by &.views.Local for infallible field access; a view over a type
	# lacking this capability propagates &.core.Fault.shift failures instead.

	# [ Invariants ]
	#!python
		assert not core.failed(t.add_second_fractions(s))
	"""

	total_shift: typing.Literal[True]
