from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles consumed from the external auth layer."""

    ADMIN = "admin"
    HR = "hr"
    PAYROLL = "payroll"
    EMPLOYEE = "employee"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    ON_LEAVE = "on_leave"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored by the attendance module."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"


class LeaveType(str, Enum):
    PAID = "paid"
    SICK = "sick"
    UNPAID = "unpaid"


class LeaveStatus(str, Enum):
    """Approval workflow state of a time-off request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
