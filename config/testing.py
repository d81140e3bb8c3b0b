import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "asistencia_test"),
}

USE_REMOTE_DB = False
LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/asistencia_test.json")

TIMEZONE = "America/Lima"
LATE_TOLERANCE_MINUTES = 0

QR_BOX_SIZE = 10
QR_BORDER = 2

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
