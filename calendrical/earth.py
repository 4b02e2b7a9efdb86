"""
Data regarding Earth-based units of time. (The earth day)
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of minutes contained in an earth `day`.
minutes_in_day = minutes_in_hour * hours_in_day

#: Number of seconds contained in an `hour`.
seconds_in_hour = seconds_in_minute * minutes_in_hour

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_hour * hours_in_day

#: Number of milliseconds contained in a `second`.
milliseconds_in_second = 1000

#: Number of milliseconds contained in a `minute` that does not hold a leap second.
milliseconds_in_minute = milliseconds_in_second * seconds_in_minute
