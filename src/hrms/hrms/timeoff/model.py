from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: a time-off request as stored by the time-off module."""

    leave_id: int
    employee_id: int
    leave_type: LeaveType
    status: LeaveStatus
    start_date: date
    end_date: date
