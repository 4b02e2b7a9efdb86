"""
[ About ]
---------

calendrical is a Gregorian date and time value package based on the built-in
Python &int and &fractions.Fraction. Values are validated on construction,
immutable, and convertible to and from an exact count of seconds since the
Unix epoch, 1970-01-01T00:00:00, for any year.

Calendar Support:

	- Proleptic Gregorian

The surface functionality is provided by &.library:

#!/pl/python
	from calendrical import library as libcal

[ Fallible Operations ]
-----------------------

Construction and field updates return the new value or a &.core.Failure.
Failures are false, and carry the &.core.Fault that caused them.

#!/pl/python
	d = libcal.date(2023, 2, 29)
	assert libcal.failed(d)
	assert d.fault is libcal.Fault.invalid

Fields are never normalized; setting the month to February on the thirtieth
fails rather than moving into March.

#!/pl/python
	d = libcal.require(libcal.date(2024, 1, 30))
	assert not d.set_month(2)
	assert d.set_day(1).set_month(2) == libcal.date(2024, 2, 1)

[ Arithmetic ]
--------------

A &.types.Time has no date to carry into, so additions leaving the day fail.
&.types.DateTime carries into its date:

#!/pl/python
	dt = libcal.require(libcal.datetime(2023, 12, 31, 23))
	assert dt.add_hours(2) == libcal.datetime(2024, 1, 1, 1)
	assert not dt.time.add_hours(2)

Equality and ordering of &.types.DateTime is defined by the exact
count of seconds since the epoch.

#!/pl/python
	assert dt.to_unix_seconds() == 1704063600
	assert libcal.unix(1704063600) == dt

[ Local Views ]
---------------

Offsets are modeled as signed minutes, &.validation.Known, or &.validation.Unknown.
A &.views.Local presents the fields of a UTC value in the offset's frame:

#!/pl/python
	lt = libcal.local(libcal.datetime(2024, 1, 1, 0, 30), -90)
	assert (lt.day, lt.hour) == (31, 23)

Writes through the view are stored back in UTC.

[ Records ]
-----------

&.validation.CalendarTime is the flat record exchanged with parsers and
renderers of timestamp strings. &.validation.validate checks the calendar
rules without repairing fields, and &.views.Local.from_record converts a
record into a view.
"""
