import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "followup_db"),
}

DEBUG = False

WEEK_START_DAY = os.getenv("WEEK_START_DAY", "saturday")
REGENERATION_POLICY = os.getenv("REGENERATION_POLICY", "strict")
REQUIRE_APPROVAL = bool(int(os.getenv("REQUIRE_APPROVAL", "1")))
UNDO_GRACE_SECONDS = int(os.getenv("UNDO_GRACE_SECONDS", "60"))

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "please-set-ADMIN_PASSWORD")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
