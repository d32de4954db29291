"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Server-side freshness window for a check-in token (authoritative).
CHECKIN_TOKEN_TTL_SECONDS = 120

# Countdown shown next to an issued QR code. Informational only.
QR_DISPLAY_TTL_SECONDS = 60

MIN_RAW_TOKEN_LENGTH = 10

SCAN_PAYLOAD_VERSION = 1
SCAN_PAYLOAD_TYPE = "staff_attendance"

CHECKIN_PATH = "/staff/attendance/check-in"
DEFAULT_PUBLIC_ORIGIN = "https://schooladmin.local"

MSG_ATTENDANCE_RECORDED = "Attendance recorded"
MSG_ALREADY_CHECKED_IN = "Already checked in for today"
MSG_INVALID_SCAN = "Invalid QR. Please try again."
