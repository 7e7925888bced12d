import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "followup_db"),
}

DEBUG = True

# Weekday that starts an assignment week (name or 0=Monday .. 6=Sunday)
WEEK_START_DAY = os.getenv("WEEK_START_DAY", "saturday")
# 'strict' refuses to regenerate a week, 'overwrite' replaces it
REGENERATION_POLICY = os.getenv("REGENERATION_POLICY", "strict")
REQUIRE_APPROVAL = bool(int(os.getenv("REQUIRE_APPROVAL", "1")))
UNDO_GRACE_SECONDS = int(os.getenv("UNDO_GRACE_SECONDS", "60"))

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
