"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_WEEK_START_DAY = "saturday"
DEFAULT_UNDO_GRACE_SECONDS = 60

ABSENT_ONE_WEEK_DAYS = 7
ABSENT_THREE_WEEKS_DAYS = 21

WHATSAPP_BASE_URL = "https://wa.me/"
EGYPT_COUNTRY_CODE = "20"
