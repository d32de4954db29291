import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

CHECKIN_TOKEN_TTL_SECONDS = Config.CHECKIN_TOKEN_TTL_SECONDS
QR_DISPLAY_TTL_SECONDS = Config.QR_DISPLAY_TTL_SECONDS
PUBLIC_ORIGIN = Config.PUBLIC_ORIGIN

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo staff on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
