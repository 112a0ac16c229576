import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORE_CONFIG = {
    # 'firebase' talks to the Realtime Database; 'memory' keeps data in-process.
    "backend": os.getenv("STORE_BACKEND", "firebase"),
    "credentials_path": os.getenv("FIREBASE_CREDENTIALS", "firebase-adminsdk.json"),
    "database_url": os.getenv("DATABASE_URL", ""),
    "app_name": os.getenv("FIREBASE_APP_NAME", "site-attendance"),
}

API_PREFIX = os.getenv("API_PREFIX", "/api")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed the default admin worker and its login on startup (idempotent).
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin")

FANOUT_WORKERS = int(os.getenv("FANOUT_WORKERS", "8"))
