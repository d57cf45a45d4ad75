from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...common.money import prorate, round_half_up
from ...common.validators import require_non_negative_int
from ..model import SalaryBreakdown
from .base import PayrollCalculator
from .policy import SalaryPolicy


class StandardPayrollCalculator(PayrollCalculator):
    """Standard salary structure.

    Every component is rounded as soon as it is computed and later
    components are derived from the rounded values, so the order below
    determines fixed_allowance and the totals.
    """

    def __init__(self, policy: Optional[SalaryPolicy] = None):
        self.policy = policy or SalaryPolicy()

    def calculate_salary(self, monthly_wage: Optional[int]) -> SalaryBreakdown:
        p = self.policy
        wage = require_non_negative_int(monthly_wage, "Monthly wage")

        basic = round_half_up(wage * p.basic_rate)
        hra = round_half_up(basic * p.hra_rate)
        standard_allowance = p.standard_allowance
        performance_bonus = round_half_up(basic * p.bonus_rate)
        lta = round_half_up(basic * p.lta_rate)

        # Absorbs the rounding residue so gross lands on the wage.
        known = basic + hra + standard_allowance + performance_bonus + lta
        fixed_allowance = max(0, wage - known)
        gross_earnings = known + fixed_allowance

        pf_employee = round_half_up(basic * p.pf_rate)
        pf_employer = round_half_up(basic * p.pf_rate)
        professional_tax = p.professional_tax
        total_deductions = pf_employee + professional_tax

        return SalaryBreakdown(
            basic=basic,
            hra=hra,
            standard_allowance=standard_allowance,
            performance_bonus=performance_bonus,
            lta=lta,
            fixed_allowance=fixed_allowance,
            gross_earnings=gross_earnings,
            pf_employee=pf_employee,
            pf_employer=pf_employer,
            professional_tax=professional_tax,
            total_deductions=total_deductions,
            net_salary=gross_earnings - total_deductions,
        )

    def calculate_salary_with_attendance(
        self,
        monthly_wage: Optional[int],
        payable_days: int,
        total_working_days: Optional[int] = None,
    ) -> SalaryBreakdown:
        total = self.policy.total_working_days if total_working_days is None else int(total_working_days)
        days = max(int(payable_days), 0)
        full = self.calculate_salary(monthly_wage)
        if days >= total:
            return full

        # Professional tax is all-or-nothing: any payable day carries the full amount.
        professional_tax = full.professional_tax if days > 0 else 0
        pf_employee = prorate(full.pf_employee, days, total)
        gross_earnings = prorate(full.gross_earnings, days, total)
        total_deductions = pf_employee + professional_tax

        return SalaryBreakdown(
            basic=prorate(full.basic, days, total),
            hra=prorate(full.hra, days, total),
            standard_allowance=prorate(full.standard_allowance, days, total),
            performance_bonus=prorate(full.performance_bonus, days, total),
            lta=prorate(full.lta, days, total),
            fixed_allowance=prorate(full.fixed_allowance, days, total),
            gross_earnings=gross_earnings,
            pf_employee=pf_employee,
            pf_employer=prorate(full.pf_employer, days, total),
            professional_tax=professional_tax,
            total_deductions=total_deductions,
            net_salary=gross_earnings - total_deductions,
        )

    def work_hours(self, check_in: datetime, check_out: Optional[datetime]) -> float:
        """Hours between check-in and check-out, 2 decimals, not below 0."""
        if not check_out:
            return 0.0
        hours = (check_out - check_in).total_seconds() / 3600
        return max(0.0, round(hours, 2))
