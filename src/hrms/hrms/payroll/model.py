from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SalaryBreakdown:
    """Monthly salary components in whole rupees."""

    basic: int
    hra: int
    standard_allowance: int
    performance_bonus: int
    lta: int
    fixed_allowance: int
    gross_earnings: int
    pf_employee: int
    pf_employer: int
    professional_tax: int
    total_deductions: int
    net_salary: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class NewPayslip:
    """A computed payslip, not yet persisted."""

    employee_id: int
    month: str
    year: int
    breakdown: SalaryBreakdown
    payable_days: int
    attendance_days: int
    paid_leave_days: int
    total_working_days: int

    def as_record(self) -> dict:
        """Flat mapping as stored by the payslip store."""
        return {
            "employee_id": self.employee_id,
            "month": self.month,
            "year": self.year,
            **self.breakdown.as_dict(),
            "payable_days": self.payable_days,
            "attendance_days": self.attendance_days,
            "paid_leave_days": self.paid_leave_days,
            "total_working_days": self.total_working_days,
        }


@dataclass(frozen=True)
class Payslip:
    payslip_id: int
    employee_id: int
    month: str
    year: int
    breakdown: SalaryBreakdown
    payable_days: int
    attendance_days: int
    paid_leave_days: int
    total_working_days: int
    created_at: datetime

    def as_record(self) -> dict:
        return {
            "payslip_id": self.payslip_id,
            "employee_id": self.employee_id,
            "month": self.month,
            "year": self.year,
            **self.breakdown.as_dict(),
            "payable_days": self.payable_days,
            "attendance_days": self.attendance_days,
            "paid_leave_days": self.paid_leave_days,
            "total_working_days": self.total_working_days,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class NewPayrun:
    month: str
    year: int
    total_employees: int
    total_amount: int
    created_by: Optional[int] = None


@dataclass(frozen=True)
class Payrun:
    payrun_id: int
    month: str
    year: int
    total_employees: int
    total_amount: int
    created_by: Optional[int]
    created_at: datetime

    def as_record(self) -> dict:
        return {
            "payrun_id": self.payrun_id,
            "month": self.month,
            "year": self.year,
            "total_employees": self.total_employees,
            "total_amount": self.total_amount,
            "created_by": self.created_by,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class PayrunBatch:
    """Output of one payrun computation: payslips first, summary last."""

    payslips: list[NewPayslip]
    payrun: NewPayrun
