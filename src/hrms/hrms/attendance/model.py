from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per employee per day."""

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports (attendance joined with the employee name)."""

    employee_id: int
    full_name: str
    work_date: date
    status: AttendanceStatus
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    work_hours: Optional[float] = None
