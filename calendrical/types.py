"""
# Calendar value types: &Date, &Time, and their composition, &DateTime.

#!python
	dt = core.require(types.DateTime.of(2023, 12, 31, 23))
	assert dt.add_hours(2) == types.DateTime.of(2024, 1, 1, 1)

	# Setters reject instead of normalizing.
	assert core.failed(dt.set_month(2))

# All instances are immutable and always hold a real calendar day or clock reading.
# Fallible operations return a &core.Failure instead of the new value.

# Linear conversions use the Unix epoch, 1970-01-01T00:00:00, and exact
# quantities: &int and &fractions.Fraction. Floating point input is rejected.
"""
import functools
import numbers
from fractions import Fraction

from . import abstract
from . import core
from . import constants
from . import earth
from . import gregorian

def exact(quantity, Rational=numbers.Rational, Fraction=Fraction):
	"""
	# Convert the given &quantity to a &Fraction if it is an exact rational number.
	# Returns &None for floats and non-numeric objects.
	"""
	if isinstance(quantity, Rational):
		return Fraction(quantity)
	return None

def check_date(year, month, day):
	if not (core.integer(year) and core.integer(month) and core.integer(day)):
		return core.invalid("date fields must be integers")
	if not (1 <= month <= gregorian.months_in_year):
		return core.invalid("month %r out of range" %(month,))
	if not (1 <= day <= gregorian.days_in_month(year, month)):
		return core.invalid("day %r out of range for %d-%02d" %(day, year, month))
	return None

def check_time(hour, minute, second, fraction):
	if not (core.integer(hour) and core.integer(minute) and core.integer(second)):
		return core.invalid("time fields must be integers")
	if not (0 <= hour < earth.hours_in_day):
		return core.invalid("hour %r out of range" %(hour,))
	if not (0 <= minute < earth.minutes_in_hour):
		return core.invalid("minute %r out of range" %(minute,))
	if not (0 <= second < earth.seconds_in_minute):
		return core.invalid("second %r out of range" %(second,))
	f = exact(fraction)
	if f is None or not (0 <= f < 1):
		return core.invalid("second fraction %r out of range" %(fraction,))
	return None

@core.record(order=True)
class Date(object):
	"""
	# A day of the proleptic Gregorian calendar. The year is unbounded.

	# Direct construction with fields that do not address a real day raises
	# &core.Rejection; use &of for a fallible constructor.
	"""

	year:(int)
	month:(int)
	day:(int)

	def __post_init__(self):
		failure = check_date(self.year, self.month, self.day)
		if failure is not None:
			raise core.Rejection(failure)

	def __repr__(self):
		return "(date@'%s')" %(str(self),)

	def __str__(self):
		return "%04d-%02d-%02d" %(self.year, self.month, self.day)

	@classmethod
	def of(Class, year, month, day):
		"""
		# Construct the &Date or return the &core.Failure describing the invalid field.
		"""
		failure = check_date(year, month, day)
		if failure is not None:
			return failure
		return Class(year, month, day)

	@classmethod
	def epoch(Class):
		return Class(*constants.unix_epoch)

	@classmethod
	def from_days(Class, days:int):
		"""
		# Construct the &Date that is &days after the epoch date.
		"""
		return Class(*gregorian.date_from_epoch(days))

	def to_days(self) -> int:
		"""
		# The number of days since the epoch date; negative for earlier dates.
		"""
		return gregorian.days_from_epoch((self.year, self.month, self.day))

	def is_leap(self) -> bool:
		return gregorian.year_is_leap(self.year)

	def days_in_month(self) -> int:
		return gregorian.days_in_month(self.year, self.month)

	def set_year(self, year):
		return self.of(year, self.month, self.day)

	def set_month(self, month):
		return self.of(self.year, month, self.day)

	def set_day(self, day):
		return self.of(self.year, self.month, day)

	def add_days(self, days:int):
		if not core.integer(days):
			return core.invalid("days must be an integer")
		return self.from_days(self.to_days() + days)

	def to_unix_seconds(self) -> int:
		return self.to_days() * earth.seconds_in_day

	@classmethod
	def from_unix_seconds(Class, seconds):
		"""
		# The &Date containing the given point; seconds are floored to the day.
		"""
		s = exact(seconds)
		if s is None:
			return core.invalid("inexact unix seconds %r" %(seconds,))
		return Class.from_days(s // earth.seconds_in_day)

@core.record(order=True)
class Time(object):
	"""
	# A clock reading within a single day.

	# Additions that leave the day fail with &core.Fault.overflow; &Time
	# has no date to carry into.
	"""

	hour:(int) = 0
	minute:(int) = 0
	second:(int) = 0
	second_fraction:(Fraction) = Fraction(0)

	total_shift = False

	def __post_init__(self):
		failure = check_time(self.hour, self.minute, self.second, self.second_fraction)
		if failure is not None:
			raise core.Rejection(failure)
		if not isinstance(self.second_fraction, Fraction):
			object.__setattr__(self, 'second_fraction', Fraction(self.second_fraction))

	def __repr__(self):
		return "(time@'%s')" %(str(self),)

	def __str__(self):
		hms = "%02d:%02d:%02d" %(self.hour, self.minute, self.second)
		if self.second_fraction:
			return hms + '+' + str(self.second_fraction)
		return hms

	@classmethod
	def of(Class, hour=0, minute=0, second=0, fraction=0):
		failure = check_time(hour, minute, second, fraction)
		if failure is not None:
			return failure
		return Class(hour, minute, second, Fraction(fraction))

	@classmethod
	def midnight(Class):
		return Class()
	epoch = midnight

	@classmethod
	def from_seconds(Class, seconds):
		"""
		# Construct the &Time that is &seconds after midnight.
		# Fails unless `0 <= seconds < 86400`.
		"""
		s = exact(seconds)
		if s is None:
			return core.invalid("inexact seconds %r" %(seconds,))
		if not (0 <= s < earth.seconds_in_day):
			return core.invalid("seconds %r outside of a day" %(seconds,))

		whole = s.__floor__()
		hour, remainder = divmod(whole, earth.seconds_in_hour)
		minute, second = divmod(remainder, earth.seconds_in_minute)
		return Class(hour, minute, second, s - whole)

	def to_seconds(self) -> Fraction:
		"""
		# The exact number of seconds since midnight.
		"""
		return (
			(self.hour * earth.seconds_in_hour) +
			(self.minute * earth.seconds_in_minute) +
			self.second + Fraction(self.second_fraction)
		)

	def set_hour(self, hour):
		return self.of(hour, self.minute, self.second, self.second_fraction)

	def set_minute(self, minute):
		return self.of(self.hour, minute, self.second, self.second_fraction)

	def set_second(self, second):
		return self.of(self.hour, self.minute, second, self.second_fraction)

	def set_second_fraction(self, fraction):
		return self.of(self.hour, self.minute, self.second, fraction)

	def add_second_fractions(self, seconds):
		s = exact(seconds)
		if s is None:
			return core.invalid("inexact seconds %r" %(seconds,))

		total = self.to_seconds() + s
		if not (0 <= total < earth.seconds_in_day):
			return core.overflow("%s + %s seconds leaves the day" %(self, s))
		return self.from_seconds(total)

	def add_seconds(self, seconds):
		if not core.integer(seconds):
			return core.invalid("seconds must be an integer")
		return self.add_second_fractions(seconds)

	def add_minutes(self, minutes):
		if not core.integer(minutes):
			return core.invalid("minutes must be an integer")
		return self.add_second_fractions(minutes * earth.seconds_in_minute)

	def add_hours(self, hours):
		if not core.integer(hours):
			return core.invalid("hours must be an integer")
		return self.add_second_fractions(hours * earth.seconds_in_hour)

	def to_unix_seconds(self) -> Fraction:
		return self.to_seconds()

	@classmethod
	def from_unix_seconds(Class, seconds):
		"""
		# The clock reading of the given point; the day is discarded.
		"""
		s = exact(seconds)
		if s is None:
			return core.invalid("inexact unix seconds %r" %(seconds,))
		return Class.from_seconds(s % earth.seconds_in_day)

@functools.total_ordering
@core.record(eq=False)
class DateTime(object):
	"""
	# A &Date and a &Time of that day.

	# Equality, ordering, and hashing are defined by &to_unix_seconds.
	# Hour additions ripple into the date, and sub-day additions are carried
	# through the linear count, so all additions succeed.
	"""

	date:(Date)
	time:(Time)

	total_shift = True

	def __eq__(self, operand):
		if not isinstance(operand, DateTime):
			return NotImplemented
		return self.to_unix_seconds() == operand.to_unix_seconds()

	def __lt__(self, operand):
		if not isinstance(operand, DateTime):
			return NotImplemented
		return self.to_unix_seconds() < operand.to_unix_seconds()

	def __hash__(self):
		return hash(self.to_unix_seconds())

	def __repr__(self):
		return "(datetime@'%s')" %(str(self),)

	def __str__(self):
		return str(self.date) + 'T' + str(self.time)

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, fraction=0):
		d = Date.of(year, month, day)
		if core.failed(d):
			return d
		t = Time.of(hour, minute, second, fraction)
		if core.failed(t):
			return t
		return Class(d, t)

	@classmethod
	def epoch(Class):
		return Class(Date.epoch(), Time.midnight())

	def to_unix_seconds(self) -> Fraction:
		return self.date.to_unix_seconds() + self.time.to_unix_seconds()

	@classmethod
	def from_unix_seconds(Class, seconds):
		d = Date.from_unix_seconds(seconds)
		if core.failed(d):
			return d
		return Class(d, Time.from_unix_seconds(seconds))

	# Date fields.

	@property
	def year(self) -> int:
		return self.date.year

	@property
	def month(self) -> int:
		return self.date.month

	@property
	def day(self) -> int:
		return self.date.day

	def _with_date(self, date):
		if core.failed(date):
			return date
		return self.__class__(date, self.time)

	def _with_time(self, time):
		if core.failed(time):
			return time
		return self.__class__(self.date, time)

	def set_year(self, year):
		return self._with_date(self.date.set_year(year))

	def set_month(self, month):
		return self._with_date(self.date.set_month(month))

	def set_day(self, day):
		return self._with_date(self.date.set_day(day))

	def add_days(self, days:int):
		return self._with_date(self.date.add_days(days))

	# Time fields.

	@property
	def hour(self) -> int:
		return self.time.hour

	@property
	def minute(self) -> int:
		return self.time.minute

	@property
	def second(self) -> int:
		return self.time.second

	@property
	def second_fraction(self) -> Fraction:
		return self.time.second_fraction

	def set_hour(self, hour):
		return self._with_time(self.time.set_hour(hour))

	def set_minute(self, minute):
		return self._with_time(self.time.set_minute(minute))

	def set_second(self, second):
		return self._with_time(self.time.set_second(second))

	def set_second_fraction(self, fraction):
		return self._with_time(self.time.set_second_fraction(fraction))

	def add_hours(self, hours:int):
		"""
		# Add &hours, rippling whole days into the date.
		"""
		if not core.integer(hours):
			return core.invalid("hours must be an integer")

		total = self.time.hour + hours
		days = total // earth.hours_in_day
		t = self.time.set_hour(total % earth.hours_in_day)
		return self.__class__(self.date.add_days(days), t)

	def add_second_fractions(self, seconds):
		s = exact(seconds)
		if s is None:
			return core.invalid("inexact seconds %r" %(seconds,))
		return self.from_unix_seconds(self.to_unix_seconds() + s)

	def add_seconds(self, seconds):
		if not core.integer(seconds):
			return core.invalid("seconds must be an integer")
		return self.add_second_fractions(seconds)

	def add_minutes(self, minutes):
		if not core.integer(minutes):
			return core.invalid("minutes must be an integer")
		return self.add_second_fractions(minutes * earth.seconds_in_minute)

for _t in (Date, DateTime):
	abstract.DateFields.register(_t)
for _t in (Time, DateTime):
	abstract.TimeFields.register(_t)
for _t in (Date, Time, DateTime):
	abstract.UnixTime.register(_t)
	abstract.Epochal.register(_t)
abstract.TotalShift.register(DateTime)
del _t
