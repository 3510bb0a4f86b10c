"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Kolkata"
DEFAULT_BREAK_LIMIT_MINUTES = 20
SUMMARY_WINDOW_DAYS = 7

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

STATUS_SUBMITTED = "Data submitted successfully"
STATUS_SUBMITTED_MISSING = "Submitted with missing mandatory tags"
WARNING_MISSING_MANDATORY = "Mandatory tags were not filled"
