import os

# No fallback: create_app refuses to start without a signing key
SECRET_KEY = os.getenv("SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "punch_db"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
    "connection_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "60")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SHIFT_MINUTES = int(os.getenv("SHIFT_MINUTES", "540"))
ON_TIME_CUTOFF = os.getenv("ON_TIME_CUTOFF", "09:15:00")
PUNCH_AREA_ID = os.getenv("PUNCH_AREA_ID") or None

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
