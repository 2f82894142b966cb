"""Time unit constants for durationcalc.

Durations are plain integers counting whole seconds. The unit constants
below are the only units accepted on input.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

# Unit letters as written in duration strings
UNITS = {
    "d": DAY,
    "h": HOUR,
    "m": MINUTE,
    "s": SECOND,
}

# Largest magnitude a total may reach (signed 64-bit seconds)
MAX_SECONDS = 2**63 - 1
