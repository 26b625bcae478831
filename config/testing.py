import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
    "connect_timeout": 1,
}

DEBUG = False
TESTING = True

STORAGE_BACKEND = "local"
LOCAL_STORAGE_PATH = os.getenv("LOCAL_STORAGE_PATH", "instance/test_local_storage.json")
LOCAL_OWNER_ID = "local"

SUBJECT_LIST_CSV = None

AUTO_INIT_DB = False

LOG_LEVEL = "WARNING"
