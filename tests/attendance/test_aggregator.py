from datetime import date

from src.hrms.hrms.attendance.aggregator import compute_attendance_inputs, leave_span_days
from src.hrms.hrms.attendance.model import AttendanceRecord
from src.hrms.hrms.core.enums import AttendanceStatus, LeaveStatus, LeaveType
from src.hrms.hrms.timeoff.model import LeaveRecord

JAN_START = date(2026, 1, 1)
JAN_END = date(2026, 1, 31)


def _att(aid, employee_id, day, status=AttendanceStatus.PRESENT):
    return AttendanceRecord(attendance_id=aid, employee_id=employee_id, work_date=day, status=status)


def _leave(lid, employee_id, start, end, *, leave_type=LeaveType.PAID, status=LeaveStatus.APPROVED):
    return LeaveRecord(
        leave_id=lid,
        employee_id=employee_id,
        leave_type=leave_type,
        status=status,
        start_date=start,
        end_date=end,
    )


def test_counts_present_days_in_month_for_employee_only():
    records = [
        _att(1, 7, date(2026, 1, 1)),
        _att(2, 7, date(2026, 1, 31)),
        _att(3, 7, date(2026, 1, 15), AttendanceStatus.ABSENT),
        _att(4, 7, date(2026, 1, 16), AttendanceStatus.LEAVE),
        _att(5, 7, date(2025, 12, 31)),
        _att(6, 7, date(2026, 2, 1)),
        _att(7, 8, date(2026, 1, 10)),
    ]

    inputs = compute_attendance_inputs(7, JAN_START, JAN_END, records, [])

    assert inputs.attendance_days == 2
    assert inputs.paid_leave_days == 0


def test_only_approved_paid_or_sick_leave_counts():
    leaves = [
        _leave(1, 7, date(2026, 1, 5), date(2026, 1, 6)),
        _leave(2, 7, date(2026, 1, 8), date(2026, 1, 8), leave_type=LeaveType.SICK),
        _leave(3, 7, date(2026, 1, 12), date(2026, 1, 14), leave_type=LeaveType.UNPAID),
        _leave(4, 7, date(2026, 1, 20), date(2026, 1, 21), status=LeaveStatus.PENDING),
        _leave(5, 7, date(2026, 1, 22), date(2026, 1, 23), status=LeaveStatus.REJECTED),
        _leave(6, 8, date(2026, 1, 5), date(2026, 1, 9)),
    ]

    inputs = compute_attendance_inputs(7, JAN_START, JAN_END, [], leaves)

    assert inputs.paid_leave_days == 3


def test_leave_span_is_not_clipped_to_month():
    leaves = [_leave(1, 7, date(2026, 1, 30), date(2026, 2, 4))]

    inputs = compute_attendance_inputs(7, JAN_START, JAN_END, [], leaves)

    assert inputs.paid_leave_days == 6


def test_leave_starting_before_month_is_ignored():
    leaves = [_leave(1, 7, date(2025, 12, 30), date(2026, 1, 2))]

    inputs = compute_attendance_inputs(7, JAN_START, JAN_END, [], leaves)

    assert inputs.paid_leave_days == 0


def test_reversed_leave_span_counts_as_zero():
    assert leave_span_days(_leave(1, 7, date(2026, 1, 10), date(2026, 1, 5))) == 0
    assert leave_span_days(_leave(2, 7, date(2026, 1, 10), date(2026, 1, 10))) == 1
