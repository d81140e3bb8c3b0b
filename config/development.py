import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "asistencia_db"),
}

# Remote MySQL store; when disabled only the local JSON cache is used
USE_REMOTE_DB = bool(int(os.getenv("USE_REMOTE_DB", "0")))
LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/asistencia.json")

# Single operational timezone for the kiosk clock
TIMEZONE = os.getenv("TIMEZONE", "America/Lima")

# Minutes after 08:00 still counted as on time (0 = strict)
LATE_TOLERANCE_MINUTES = int(os.getenv("LATE_TOLERANCE_MINUTES", "0"))

QR_BOX_SIZE = int(os.getenv("QR_BOX_SIZE", "10"))
QR_BORDER = int(os.getenv("QR_BORDER", "2"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
