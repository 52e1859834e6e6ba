import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "sunday_attendance"),
}

ROSTER_SOURCE = os.getenv("ROSTER_SOURCE", "mysql")
ROSTER_URL = os.getenv("ROSTER_URL", "")
ROSTER_TOKEN = os.getenv("ROSTER_TOKEN", "")
ROSTER_TIMEOUT = float(os.getenv("ROSTER_TIMEOUT", "10"))

TIMEZONE = os.getenv("TIMEZONE", "Africa/Addis_Ababa")
ATTENDANCE_NOW = os.getenv("ATTENDANCE_NOW", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
