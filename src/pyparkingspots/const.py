"""Constants for the availability API payload and date handling."""

KEY_STRUCTURES = "Structures"

STRUCTURE_KEY_LEVELS = "Levels"
STRUCTURE_KEY_CURRENT_COUNT = "CurrentCount"
STRUCTURE_KEY_NAME = "Name"
STRUCTURE_KEY_CAPACITY = "Capacity"
STRUCTURE_KEY_TIMESTAMP = "Timestamp"

LEVEL_KEY_CURRENT_COUNT = "CurrentCount"
LEVEL_KEY_NAME = "FriendlyName"
LEVEL_KEY_CAPACITY = "Capacity"

SCHEMA_FILENAME = "response.schema.json"

DEFAULT_TIMEZONE = "UTC"
DEFAULT_DISPLAY_PATTERN = "%Y-%m-%d %H:%M:%S"

# Abbreviations resolve to the zone a US-English device would pick for them.
TIMEZONE_ABBREVIATIONS = {
    "UTC": "UTC",
    "GMT": "UTC",
    "BST": "Europe/London",
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "CST": "America/Chicago",
    "CDT": "America/Chicago",
    "MST": "America/Denver",
    "MDT": "America/Denver",
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
    "AKST": "America/Anchorage",
    "AKDT": "America/Anchorage",
    "HST": "Pacific/Honolulu",
}

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
