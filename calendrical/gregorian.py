"""
# Proleptic Gregorian calendar functions and data.

# Dates are addressed in the common form, `(year, month, day)`, with one-based
# months and days. Conversions to and from linear day counts resolve the date within
# a four hundred year cycle, so any &int year is supported.
"""
import bisect
import itertools

#: number of years in a gregorian cycle.
years_in_cycle = 400

#: number of months in a year.
months_in_year = 12

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_month(year, month):
	"""
	# The number of days in the one-based &month of the &year.
	"""
	if year_is_leap(year):
		return calendar_leap[month-1]
	return calendar_year[month-1]

def days_in_year(year):
	return 366 if year_is_leap(year) else 365

##
# Cumulative tables. The trailing entry of each is the total.
month_offsets = tuple(itertools.accumulate(itertools.chain((0,), calendar_year)))
leap_month_offsets = tuple(itertools.accumulate(itertools.chain((0,), calendar_leap)))
year_offsets = tuple(itertools.accumulate(
	itertools.chain((0,), map(days_in_year, range(years_in_cycle)))
))

#: Total number of days in a Gregorian cycle.
days_in_cycle = year_offsets[-1]

def days_from_date(date,
		divmod=divmod,
		_years=year_offsets,
		_months=(month_offsets, leap_month_offsets),
	):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days leading up to the date from the first day of year zero.

	# The date is not validated; fields are expected to be in range.
	"""
	year, month, day = date
	cycles, year_of_cycle = divmod(year, years_in_cycle)
	moffsets = _months[year_is_leap(year_of_cycle)]
	return (cycles * days_in_cycle) + _years[year_of_cycle] + moffsets[month-1] + (day-1)

def date_from_days(days,
		divmod=divmod,
		search=bisect.bisect_right,
		_years=year_offsets,
		_months=(month_offsets, leap_month_offsets),
	):
	"""
	# Convert the given Earth-days, counted from the first day of year zero,
	# into a Gregorian date in the common form: (year, month, day).
	"""
	cycles, day_of_cycle = divmod(days, days_in_cycle)
	year_of_cycle = search(_years, day_of_cycle) - 1
	day_of_year = day_of_cycle - _years[year_of_cycle]

	moffsets = _months[year_is_leap(year_of_cycle)]
	month = search(moffsets, day_of_year) - 1

	return ((cycles * years_in_cycle) + year_of_cycle, month + 1, day_of_year - moffsets[month] + 1)

#: Number of days between the first day of year zero and 1970-01-01.
unix_epoch_days = days_from_date((1970, 1, 1))

def days_from_epoch(date):
	"""
	# Number of days between 1970-01-01 and the given &date.
	# Negative for dates preceding the epoch.
	"""
	return days_from_date(date) - unix_epoch_days

def date_from_epoch(days):
	"""
	# Inverse of &days_from_epoch.
	"""
	return date_from_days(days + unix_epoch_days)
