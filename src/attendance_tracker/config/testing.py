SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

STORAGE_BACKEND = "memory"
STORAGE_PATH = None
STORAGE_KEY = "attendance_state"
SESSION_MAX_BYTES = 3800

LOG_LEVEL = "WARNING"
