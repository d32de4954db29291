import os


class Config:
    """Shared defaults; environment modules override what differs."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "school_admin")

    # Server-side token TTL is authoritative; the display countdown is only shown to users.
    CHECKIN_TOKEN_TTL_SECONDS = int(os.environ.get("CHECKIN_TOKEN_TTL_SECONDS", "120"))
    QR_DISPLAY_TTL_SECONDS = int(os.environ.get("QR_DISPLAY_TTL_SECONDS", "60"))
    # Unset: web routes build deep links from the request host.
    PUBLIC_ORIGIN = os.environ.get("PUBLIC_ORIGIN") or None

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
