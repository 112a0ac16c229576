import os

SECRET_KEY = "test-secret"

STORE_CONFIG = {
    "backend": "memory",
}

API_PREFIX = "/api"
PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
DEFAULT_ADMIN_PASSWORD = "admin"

FANOUT_WORKERS = 4
