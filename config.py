import os

class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-only-change-me")

    # DEBUG, INFO, WARNING, ...; LOG_FILE adds a rotating file next to stderr
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None
    LOG_ROTATION = os.environ.get("LOG_ROTATION", "5 MB")
    LOG_RETENTION = os.environ.get("LOG_RETENTION", "14 days")

    # Comma-separated list, "*" allows any web/iOS client
    CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Read by Flask-Limiter
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "200 per hour")
    RATELIMIT_ENABLED = os.environ.get("RATELIMIT_ENABLED", "true").lower() not in ("0", "false", "no")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")

    MAX_SUBJECTS = int(os.environ.get("MAX_SUBJECTS", "50"))
