"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

# Placeholder label used when a shift is created without a time.
DEFAULT_SHIFT_TIME = "1234"

BANNER_RULE = "------------------"
LABEL_SEPARATOR = ", "

DEFAULT_SAMPLE_SIZE = 3
DEFAULT_VOLUNTEER_NAME = "JohnJoe Jones"

DEMO_SHIFT_TIMES = (
    "Saturday morning",
    "Saturday afternoon",
    "Saturday night",
    "Sunday morning",
    "Sunday afternoon",
    "Sunday night",
)

DEMO_JOB_NAMES = (
    "Childcare",
    "Bartending",
    "Wristband Checking",
    "Parking Lot",
)
