"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/Lima"

# Scheduled start of the workday (08:00) in minutes since midnight.
SCHEDULED_START_MINUTES = 8 * 60

DEFAULT_LATE_TOLERANCE_MINUTES = 0

DEFAULT_QR_BOX_SIZE = 10
DEFAULT_QR_BORDER = 2

NO_AREA_LABEL = "Sin área"
NO_PHONE_LABEL = "Sin teléfono"
NO_RECORDS_LABEL = "Sin registros"
