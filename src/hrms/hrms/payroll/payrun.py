"""Payrun computation: one payslip per active employee plus a batch summary.

Pure: reads nothing and writes nothing. ``PayrunService`` feeds it records
from the stores and persists the result.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence, Union

from ..attendance.aggregator import compute_attendance_inputs
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_bounds, month_name
from ..employees.model import Employee
from ..timeoff.model import LeaveRecord
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import NewPayrun, NewPayslip, PayrunBatch

logger = logging.getLogger(__name__)


def build_payslip(
    employee: Employee,
    *,
    month: str,
    year: int,
    month_start: date,
    month_end: date,
    attendance_records: Sequence[AttendanceRecord],
    leave_records: Sequence[LeaveRecord],
    calculator: PayrollCalculator,
) -> NewPayslip:
    total_working_days = calculator.policy.total_working_days

    inputs = compute_attendance_inputs(
        employee.employee_id,
        month_start,
        month_end,
        attendance_records,
        leave_records,
    )
    payable_days = calculator.calculate_payable_days(
        inputs.attendance_days,
        inputs.paid_leave_days,
        total_working_days,
    )
    # A missing wage is paid as 0 rather than failing the batch.
    breakdown = calculator.calculate_salary_with_attendance(
        employee.monthly_wage or 0,
        payable_days,
        total_working_days,
    )

    return NewPayslip(
        employee_id=employee.employee_id,
        month=month,
        year=year,
        breakdown=breakdown,
        payable_days=payable_days,
        attendance_days=inputs.attendance_days,
        paid_leave_days=inputs.paid_leave_days,
        total_working_days=total_working_days,
    )


def build_payrun(
    month: Union[int, str],
    year: int,
    employees: Iterable[Employee],
    attendance_records: Iterable[AttendanceRecord],
    leave_records: Iterable[LeaveRecord],
    *,
    calculator: Optional[PayrollCalculator] = None,
    created_by: Optional[int] = None,
) -> PayrunBatch:
    calculator = calculator or StandardPayrollCalculator()
    name = month_name(month)
    month_start, month_end = month_bounds(month, year)
    attendance = list(attendance_records)
    leaves = list(leave_records)

    active = [e for e in employees if e.is_active]
    payslips: list[NewPayslip] = []
    total_amount = 0

    for employee in active:
        slip = build_payslip(
            employee,
            month=name,
            year=int(year),
            month_start=month_start,
            month_end=month_end,
            attendance_records=attendance,
            leave_records=leaves,
            calculator=calculator,
        )
        payslips.append(slip)
        total_amount += slip.breakdown.net_salary

    payrun = NewPayrun(
        month=name,
        year=int(year),
        total_employees=len(active),
        total_amount=total_amount,
        created_by=created_by,
    )
    logger.debug("Computed payrun %s %s: %d payslips, total %d", name, year, len(payslips), total_amount)
    return PayrunBatch(payslips=payslips, payrun=payrun)
