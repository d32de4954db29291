import os

from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = Config.db_config()

CHECKIN_TOKEN_TTL_SECONDS = 120
QR_DISPLAY_TTL_SECONDS = 60
PUBLIC_ORIGIN = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
