"""
# Scenarios exercised through the public module.
"""
from fractions import Fraction
from .. import library as module

def test_leap_validation(test):
	test/module.valid(module.CalendarTime(2023, 2, 29, 0, 0, module.Known(0))) == False
	test/module.valid(module.CalendarTime(2024, 2, 29, 0, 0, module.Known(0))) == True

def test_rollover(test):
	dt = module.require(module.datetime(2023, 12, 31, 23))
	test/dt.add_hours(2) == module.datetime(2024, 1, 1, 1)
	test/dt.time.add_hours(2).fault == module.Fault.overflow

def test_local_read(test):
	lt = module.local(module.require(module.datetime(2024, 1, 1, 0, 30)), -90)
	test/lt.hour == 23
	test/lt.day == 31

def test_offsets(test):
	test/module.offset() == module.Unknown()
	test/module.offset(0) != module.offset()
	test/module.offset(-60) == module.Known(-60)

	# offsets are range checked by local()
	test/module.local(module.epoch(), 1440).fault == module.Fault.invalid
	test/module.local(module.epoch(), -1440).fault == module.Fault.invalid
	test/module.local(module.epoch(), 1439).offset == module.Known(1439)
	test/module.local(module.epoch()).offset == module.Unknown()

def test_constructors(test):
	test/module.date(2024, 2, 29) == module.Date(2024, 2, 29)
	test/module.failed(module.date(2023, 2, 29)) == True
	test/module.epoch().to_unix_seconds() == 0
	test/module.unix(1704063600) == module.datetime(2023, 12, 31, 23)
	test/module.unix(Fraction(1, 2), module.Time) == module.Time.of(0, 0, 0, Fraction(1, 2))
	test/module.unix(86400 * 2, module.Date) == module.date(1970, 1, 3)

def test_parse(test):
	lt = module.parse(module.CalendarTime(2024, 1, 1, 30, 0, module.Known(60)))
	test/lt.value == module.datetime(2023, 12, 31, 23, 30)
	test/lt.to_record() == module.CalendarTime(2024, 1, 1, 30, 0, module.Known(60))
	test/module.fallback(module.parse(module.CalendarTime(2024, 13, 1)), None) == None

def test_project(test):
	from .. import project
	test/project.version == '.'.join(map(str, project.version_info))
	test/project.name == 'calendrical'
