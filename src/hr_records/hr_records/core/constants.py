"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINIMUM_WAGE = 600
MINIMUM_AGE = 18
PHONE_MIN_DIGITS = 8
DEFAULT_COUNTRY_CODE = "+961"

UPLOAD_SUBDIRECTORIES = ("photos", "documents")

COUNTRY_CODES = (
    "+961",
    "+1",
    "+44",
    "+33",
    "+49",
    "+971",
    "+966",
    "+20",
    "+212",
    "+962",
    "+963",
    "+974",
    "+965",
    "+973",
    "+968",
)
