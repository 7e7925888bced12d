import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "followup_test_db"),
}

DEBUG = False
TESTING = True

WEEK_START_DAY = "saturday"
REGENERATION_POLICY = "strict"
REQUIRE_APPROVAL = True
UNDO_GRACE_SECONDS = 60

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
