import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "punch_db"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "60")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SHIFT_MINUTES = int(os.getenv("SHIFT_MINUTES", "540"))
ON_TIME_CUTOFF = os.getenv("ON_TIME_CUTOFF", "09:15:00")
# Restrict earliest check-in / latest check-out to one reader area, e.g. '30048'
PUNCH_AREA_ID = os.getenv("PUNCH_AREA_ID") or None

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo punches on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
