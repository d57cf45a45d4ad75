"""Attendance inputs for payroll: present days and paid leave days in a month."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.enums import AttendanceStatus, LeaveStatus, LeaveType
from ..timeoff.model import LeaveRecord
from .model import AttendanceRecord

PAID_LEAVE_TYPES = frozenset({LeaveType.PAID, LeaveType.SICK})


@dataclass(frozen=True)
class AttendanceInputs:
    attendance_days: int
    paid_leave_days: int


def leave_span_days(leave: LeaveRecord) -> int:
    """Inclusive day count of the leave's own span; a reversed span counts as 0."""
    return max((leave.end_date - leave.start_date).days + 1, 0)


def compute_attendance_inputs(
    employee_id: int,
    month_start: date,
    month_end: date,
    attendance_records: Iterable[AttendanceRecord],
    leave_records: Iterable[LeaveRecord],
) -> AttendanceInputs:
    attendance_days = sum(
        1
        for a in attendance_records
        if a.employee_id == employee_id
        and a.status == AttendanceStatus.PRESENT
        and month_start <= a.work_date <= month_end
    )

    # Only the start date is matched against the month; the span is not clipped.
    paid_leave_days = sum(
        leave_span_days(t)
        for t in leave_records
        if t.employee_id == employee_id
        and t.status == LeaveStatus.APPROVED
        and t.leave_type in PAID_LEAVE_TYPES
        and month_start <= t.start_date <= month_end
    )

    return AttendanceInputs(attendance_days=attendance_days, paid_leave_days=paid_leave_days)
