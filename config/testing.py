import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "class_tracker_test"),
}

DEFAULT_NUM_GROUPS = 4

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
