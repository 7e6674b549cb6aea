"""Shared display constants.

The list page, the edit form and the client sync controller all render
entries with the same rules, so the markers live in one place.
"""

# Shown in place of an unset (or zero) reps/weight value
PLACEHOLDER = "–"

# Shown in place of a missing date
DATE_PLACEHOLDER = "0000-00-00"

UNITS_LBS = "lbs"
UNITS_KGS = "kgs"

# Longest exercise name the table accepts
NAME_MAX_LENGTH = 255
