import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# session | file | memory
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "session")
STORAGE_PATH = os.getenv("STORAGE_PATH", "instance/attendance_state.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "attendance_state")
SESSION_MAX_BYTES = int(os.getenv("SESSION_MAX_BYTES", "3800"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
