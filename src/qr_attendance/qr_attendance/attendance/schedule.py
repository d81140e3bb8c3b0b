"""Daily schedule: the four attendance events and their clock windows."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import minutes_since_midnight
from ..core.enums import EventKind


@dataclass(frozen=True)
class EventWindow:
    kind: EventKind
    label: str
    scheduled: time
    start: time
    end: time

    def contains(self, moment: time) -> bool:
        minutes = minutes_since_midnight(moment)
        return minutes_since_midnight(self.start) <= minutes <= minutes_since_midnight(self.end)


# Order matters: the first window containing a moment wins.
SCHEDULE: tuple[EventWindow, ...] = (
    EventWindow(EventKind.ENTRADA, "Entrada", time(8, 0), time(6, 0), time(11, 0)),
    EventWindow(EventKind.SALIDA_ALMUERZO, "Salida a Almuerzo", time(12, 30), time(11, 1), time(13, 30)),
    EventWindow(EventKind.REGRESO_ALMUERZO, "Regreso de Almuerzo", time(14, 0), time(13, 31), time(16, 0)),
    EventWindow(EventKind.SALIDA_FINAL, "Salida Final", time(17, 30), time(16, 1), time(19, 0)),
)

_BY_KIND = {w.kind: w for w in SCHEDULE}


def classify_event(moment: time) -> EventKind:
    """Pick the event kind whose window holds ``moment``.

    Outside every window the scan is treated as an entry.
    """
    for window in SCHEDULE:
        if window.contains(moment):
            return window.kind
    return EventKind.ENTRADA


def event_label(kind: EventKind) -> str:
    window = _BY_KIND.get(kind)
    return window.label if window else str(kind.value)
