import os


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # In-memory SQLite by default: all state lives for the life of the process.
    # Point DATABASE_URL at a file or server to keep it across restarts.
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite://")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session tokens: 0 means tokens never expire
    SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", "0"))

    # bcrypt cost factor for account passwords
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # Bootstrap admin account
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@greenfield.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

    # Slots are generated this many days ahead, starting today
    SLOT_HORIZON_DAYS = int(os.getenv("SLOT_HORIZON_DAYS", "30"))

    # Booking price policy: False trusts the client-supplied total
    RECOMPUTE_BOOKING_PRICE = _env_bool("RECOMPUTE_BOOKING_PRICE")

    # Payment gateway (Razorpay-style order + HMAC signature)
    RAZORPAY_KEY_ID = os.getenv("RAZORPAY_KEY_ID", "")
    RAZORPAY_KEY_SECRET = os.getenv("RAZORPAY_KEY_SECRET", "")
    PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "INR")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Basic app settings
    DEBUG = False
