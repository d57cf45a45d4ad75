from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_name
from ..core.enums import AttendanceStatus, EmployeeStatus, LeaveStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from ..timeoff.repository import LeaveRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import NewPayrun, Payrun, Payslip, SalaryBreakdown
from .payrun import build_payrun
from .repository import PayrunRepository, PayslipRepository

logger = logging.getLogger(__name__)

PAYROLL_ROLES = frozenset({Role.ADMIN, Role.PAYROLL})


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


@dataclass(frozen=True)
class PayrunResult:
    payrun_id: int
    payslip_ids: list[int]
    payrun: NewPayrun


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> ReportData:
        if end < start:
            raise ValidationError("End date must not be before start date")

        query_rows = self._attendance.get_report_rows(start_date=start, end_date=end, employee_id=employee_id)

        summary_map: dict[int, dict] = {}
        out_rows: list[dict] = []

        for r in query_rows:
            if r.check_in and r.check_out:
                hours = self._calculator.work_hours(r.check_in, r.check_out)
            else:
                # no check-out: use the stored total
                hours = r.work_hours or 0.0
            extra = self._calculator.extra_hours(hours)

            out_rows.append(
                {
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "check_in": r.check_in.strftime("%H:%M") if r.check_in else "-",
                    "check_out": r.check_out.strftime("%H:%M") if r.check_out else "-",
                    "work_hours": hours,
                    "extra_hours": extra,
                    "status": r.status.value,
                }
            )

            s = summary_map.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "present_days": 0,
                    "total_hours": 0.0,
                    "extra_hours": 0.0,
                }
                summary_map[r.employee_id] = s
            if r.status == AttendanceStatus.PRESENT:
                s["present_days"] += 1
            s["total_hours"] += hours
            s["extra_hours"] += extra

        summary = []
        for s in summary_map.values():
            s["total_hours"] = round(s["total_hours"], 2)
            s["extra_hours"] = round(s["extra_hours"], 2)
            summary.append(s)

        summary.sort(key=lambda x: x["total_hours"], reverse=True)
        return ReportData(rows=out_rows, summary=summary)


class PayrunService:
    """Use case: run payroll for a month and persist payslips + payrun."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        payslips: PayslipRepository,
        payruns: PayrunRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._payslips = payslips
        self._payruns = payruns
        self._calculator = calculator or StandardPayrollCalculator()

    def create_payrun(
        self,
        *,
        current_role: Role,
        created_by: Optional[int],
        month: Union[int, str],
        year: int,
    ) -> PayrunResult:
        """Compute and store one payslip per active employee, then the payrun summary.

        Writes are sequential and independent: if a write fails the error
        propagates, payslips already stored stay stored and no payrun record
        is written. Running the same month twice stores a second batch.
        """
        if current_role not in PAYROLL_ROLES:
            raise AuthorizationError("You are not allowed to run payroll")

        name = month_name(month)
        month_start, month_end = month_bounds(month, year)

        employees = self._employees.list_all(status=EmployeeStatus.ACTIVE)
        attendance = self._attendance.list_between(start_date=month_start, end_date=month_end)
        leaves = self._leaves.list_starting_between(
            start_date=month_start,
            end_date=month_end,
            status=LeaveStatus.APPROVED,
        )
        batch = build_payrun(
            month,
            year,
            employees,
            attendance,
            leaves,
            calculator=self._calculator,
            created_by=created_by,
        )
        payrun = batch.payrun
        logger.info("Starting payrun %s %s for %d active employees", name, year, payrun.total_employees)

        payslip_ids: list[int] = []
        for slip in batch.payslips:
            payslip_ids.append(self._payslips.create_payslip(slip))
            logger.debug(
                "Payslip for employee %s: payable_days=%d net=%d",
                slip.employee_id,
                slip.payable_days,
                slip.breakdown.net_salary,
            )

        payrun_id = self._payruns.create_payrun(payrun)
        logger.info(
            "Payrun %s created for %s %s: %d employees, total %d",
            payrun_id,
            name,
            year,
            payrun.total_employees,
            payrun.total_amount,
        )
        return PayrunResult(payrun_id=payrun_id, payslip_ids=payslip_ids, payrun=payrun)

    def preview_salary(self, monthly_wage: Optional[int]) -> SalaryBreakdown:
        return self._calculator.calculate_salary(monthly_wage)

    def list_payslips(
        self,
        *,
        month: Optional[Union[int, str]] = None,
        year: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[Payslip]:
        return self._payslips.list_payslips(
            month=month_name(month) if month is not None else None,
            year=int(year) if year is not None else None,
            employee_id=int(employee_id) if employee_id is not None else None,
        )

    def list_payruns(self, *, year: Optional[int] = None) -> Sequence[Payrun]:
        return self._payruns.list_payruns(year=int(year) if year is not None else None)
