from __future__ import annotations

from datetime import date, datetime, time, timezone

from src.qr_attendance.qr_attendance.attendance.lateness.grace_policy import GraceLatenessPolicy
from src.qr_attendance.qr_attendance.attendance.metrics import (
    absence_days_between,
    count_absences,
    count_lateness,
)
from src.qr_attendance.qr_attendance.attendance.model import AttendanceRecord
from src.qr_attendance.qr_attendance.core.enums import EventKind

MONDAY = date(2026, 1, 5)


def _record(employee_id: str, day: date, at: time, kind: EventKind = EventKind.ENTRADA) -> AttendanceRecord:
    return AttendanceRecord(
        employee_id=employee_id,
        employee_name="Ana Quispe",
        employee_position="Analista",
        event_kind=kind,
        event_date=day,
        event_time=at,
        created_at=datetime.combine(day, at),
    )


def test_lateness_counts_only_entries_strictly_after_eight(make_employee):
    roster = [make_employee()]
    records = [
        _record("EMP001", date(2026, 1, 5), time(7, 59)),
        _record("EMP001", date(2026, 1, 6), time(8, 0)),
        _record("EMP001", date(2026, 1, 7), time(8, 1)),
    ]

    assert count_lateness("EMP001", records, roster=roster) == 1


def test_lateness_ignores_other_events_and_other_employees(make_employee):
    roster = [make_employee(), make_employee(employee_id="EMP002", name="Luis")]
    records = [
        _record("EMP001", MONDAY, time(12, 45), EventKind.SALIDA_ALMUERZO),
        _record("EMP002", MONDAY, time(9, 30)),
        _record("EMP001", MONDAY, time(8, 0, 59)),
    ]

    assert count_lateness("EMP001", records, roster=roster) == 0
    assert count_lateness("EMP002", records, roster=roster) == 1


def test_grace_policy_moves_the_threshold(make_employee):
    roster = [make_employee()]
    records = [
        _record("EMP001", date(2026, 1, 5), time(8, 5)),
        _record("EMP001", date(2026, 1, 6), time(8, 6)),
    ]

    assert count_lateness("EMP001", records, roster=roster, policy=GraceLatenessPolicy(5)) == 1


def test_absences_week_without_entries_is_five(make_employee):
    roster = [make_employee(created_at=datetime(2026, 1, 5, 9, 0))]

    assert count_absences("EMP001", [], roster=roster, today=date(2026, 1, 12)) == 5


def test_absences_skip_attended_days_weekends_and_today(make_employee):
    roster = [make_employee(created_at=datetime(2026, 1, 5, 9, 0))]
    records = [
        _record("EMP001", date(2026, 1, 6), time(8, 0)),
        _record("EMP001", date(2026, 1, 6), time(8, 30)),
        # Lunch events do not count as attendance
        _record("EMP001", date(2026, 1, 7), time(12, 30), EventKind.SALIDA_ALMUERZO),
        _record("EMP001", date(2026, 1, 10), time(8, 0)),
    ]

    # Mon 5, Wed 7, Thu 8, Fri 9 missing; Sat/Sun ignored; Mon 12 is today
    assert count_absences("EMP001", records, roster=roster, today=date(2026, 1, 12)) == 4


def test_absences_on_registration_day_are_zero(make_employee):
    roster = [make_employee(created_at=datetime(2026, 1, 5, 9, 0))]

    assert count_absences("EMP001", [], roster=roster, today=MONDAY) == 0


def test_absences_use_the_operational_day_of_registration(make_employee):
    # 03:00 UTC on Tuesday is still Monday evening in Lima
    roster = [make_employee(created_at=datetime(2026, 1, 6, 3, 0, tzinfo=timezone.utc))]

    assert count_absences("EMP001", [], roster=roster, today=date(2026, 1, 12)) == 5


def test_absences_never_decrease_as_days_pass():
    counts = [absence_days_between(MONDAY, date(2026, 1, d), set()) for d in range(5, 31)]
    assert counts == sorted(counts)
    assert all(c >= 0 for c in counts)


def test_unknown_employee_yields_zero(make_employee):
    roster = [make_employee()]
    records = [_record("GHOST", MONDAY, time(9, 0))]

    assert count_lateness("GHOST", records, roster=roster) == 0
    assert count_absences("GHOST", records, roster=roster, today=date(2026, 2, 1)) == 0


def test_metrics_are_idempotent_and_leave_inputs_untouched(make_employee):
    roster = [make_employee()]
    records = [_record("EMP001", date(2026, 1, 7), time(8, 10))]
    snapshot = list(records)

    first = (count_lateness("EMP001", records, roster=roster), count_absences("EMP001", records, roster=roster, today=date(2026, 1, 12)))
    second = (count_lateness("EMP001", records, roster=roster), count_absences("EMP001", records, roster=roster, today=date(2026, 1, 12)))

    assert first == second == (1, 4)
    assert records == snapshot
