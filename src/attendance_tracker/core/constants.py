"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

STORAGE_KEY = "attendance_state"

SEED_STUDENT_NAMES = ("Alice", "Bob", "Charlie", "David")

# Flask's session cookie is capped around 4 KB once signed.
DEFAULT_SESSION_MAX_BYTES = 3800

# Cookie entry naming the server-side overflow slot of a session.
SESSION_ID_KEY = "_roster_sid"
