from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..model import SalaryBreakdown
from .policy import SalaryPolicy


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    policy: SalaryPolicy

    @abstractmethod
    def calculate_salary(self, monthly_wage: Optional[int]) -> SalaryBreakdown:
        raise NotImplementedError

    @abstractmethod
    def calculate_salary_with_attendance(
        self,
        monthly_wage: Optional[int],
        payable_days: int,
        total_working_days: Optional[int] = None,
    ) -> SalaryBreakdown:
        raise NotImplementedError

    def calculate_payable_days(
        self,
        attendance_days: int,
        paid_leave_days: int = 0,
        total_working_days: Optional[int] = None,
    ) -> int:
        """Attendance plus paid leave, capped at the working days of the month."""
        total = self.policy.total_working_days if total_working_days is None else int(total_working_days)
        return min(int(attendance_days) + int(paid_leave_days), total)

    @abstractmethod
    def work_hours(self, check_in: datetime, check_out: Optional[datetime]) -> float:
        raise NotImplementedError

    def extra_hours(self, work_hours: float) -> float:
        return max(0.0, round(work_hours - self.policy.standard_hours_per_day, 2))
