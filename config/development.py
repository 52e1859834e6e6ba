import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "sunday_attendance"),
}

# Where the roster comes from: "mysql" (students table) or "http" (ROSTER_URL)
ROSTER_SOURCE = os.getenv("ROSTER_SOURCE", "mysql")
ROSTER_URL = os.getenv("ROSTER_URL", "")
ROSTER_TOKEN = os.getenv("ROSTER_TOKEN", "")
ROSTER_TIMEOUT = float(os.getenv("ROSTER_TIMEOUT", "10"))

# Empty = server local time
TIMEZONE = os.getenv("TIMEZONE", "Africa/Addis_Ababa")
# Pin the clock for demos, e.g. 2025-07-06T10:00:00+03:00
ATTENDANCE_NOW = os.getenv("ATTENDANCE_NOW", "")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo students and accounts on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
