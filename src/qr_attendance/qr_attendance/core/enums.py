from __future__ import annotations

from enum import Enum


class EventKind(str, Enum):
    """Tipo de evento de asistencia guardado en el registro."""

    ENTRADA = "entrada"
    SALIDA_ALMUERZO = "salida_almuerzo"
    REGRESO_ALMUERZO = "regreso_almuerzo"
    SALIDA_FINAL = "salida_final"
