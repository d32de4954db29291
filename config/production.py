import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

CHECKIN_TOKEN_TTL_SECONDS = Config.CHECKIN_TOKEN_TTL_SECONDS
QR_DISPLAY_TTL_SECONDS = Config.QR_DISPLAY_TTL_SECONDS
PUBLIC_ORIGIN = Config.PUBLIC_ORIGIN

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
