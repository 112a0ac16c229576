import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_CONFIG = {
    "backend": os.getenv("STORE_BACKEND", "firebase"),
    "credentials_path": os.getenv("FIREBASE_CREDENTIALS", ""),
    "database_url": os.getenv("DATABASE_URL", ""),
    "app_name": os.getenv("FIREBASE_APP_NAME", "site-attendance"),
}

API_PREFIX = os.getenv("API_PREFIX", "/api")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "please-set-DEFAULT_ADMIN_PASSWORD")

FANOUT_WORKERS = int(os.getenv("FANOUT_WORKERS", "8"))
