import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
}

DEBUG = False

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "remote")
LOCAL_STORAGE_PATH = os.getenv("LOCAL_STORAGE_PATH", "instance/local_storage.json")
LOCAL_OWNER_ID = os.getenv("LOCAL_OWNER_ID", "local")

SUBJECT_LIST_CSV = os.getenv("SUBJECT_LIST_CSV", "database/subject_list.csv")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
