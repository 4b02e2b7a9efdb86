"""
# Various constants.

# [ Elements ]

# /unix_epoch/
	# The date, in the common `(year, month, day)` form, that linear counts are relative to.
# /minimum_year/
	# The earliest year accepted by record validation.
# /maximum_year/
	# The latest year accepted by record validation.
# /offset_limit/
	# Exclusive bound, in minutes, of a known offset's magnitude.
# /millisecond_limit/
	# Exclusive bound of a record's millisecond-of-minute field.
	# One second above a minute so that leap seconds are representable.
"""
from . import earth

unix_epoch = (1970, 1, 1)

minimum_year = 0
maximum_year = 9999

offset_limit = earth.minutes_in_day
millisecond_limit = earth.milliseconds_in_minute + earth.milliseconds_in_second
