from datetime import datetime
from decimal import Decimal

import pytest

from src.hrms.hrms.core.exceptions import ValidationError
from src.hrms.hrms.payroll.calculator.policy import SalaryPolicy
from src.hrms.hrms.payroll.calculator.standard_calculator import StandardPayrollCalculator

WAGES = [0, 1, 999, 10000, 12345, 30000, 50000, 75001, 123457, 1000000]


def test_full_breakdown_for_50000():
    b = StandardPayrollCalculator().calculate_salary(50000)

    assert b.basic == 25000
    assert b.hra == 12500
    assert b.standard_allowance == 4167
    # 25000 * 0.0833 = 2082.5 exactly, rounded half up
    assert b.performance_bonus == 2083
    assert b.lta == 2083
    assert b.fixed_allowance == 4167
    assert b.gross_earnings == 50000
    assert b.pf_employee == 3000
    assert b.pf_employer == 3000
    assert b.professional_tax == 200
    assert b.total_deductions == 3200
    assert b.net_salary == 46800


@pytest.mark.parametrize("wage", WAGES)
def test_full_breakdown_invariants(wage):
    b = StandardPayrollCalculator().calculate_salary(wage)

    assert b.gross_earnings == (
        b.basic + b.hra + b.standard_allowance + b.performance_bonus + b.lta + b.fixed_allowance
    )
    assert b.total_deductions == b.pf_employee + b.professional_tax
    assert b.net_salary == b.gross_earnings - b.total_deductions
    assert b.fixed_allowance >= 0
    assert b.pf_employer == b.pf_employee


def test_basic_rounds_half_up():
    assert StandardPayrollCalculator().calculate_salary(12345).basic == 6173


def test_calculate_salary_is_pure():
    calc = StandardPayrollCalculator()
    assert calc.calculate_salary(65432) == calc.calculate_salary(65432)


def test_zero_wage_keeps_fixed_amounts():
    b = StandardPayrollCalculator().calculate_salary(0)

    assert (b.basic, b.hra, b.performance_bonus, b.lta, b.fixed_allowance) == (0, 0, 0, 0, 0)
    assert b.standard_allowance == 4167
    assert b.professional_tax == 200
    assert b.gross_earnings == 4167
    assert b.net_salary == 3967


def test_missing_wage_is_treated_as_zero():
    calc = StandardPayrollCalculator()
    assert calc.calculate_salary(None) == calc.calculate_salary(0)


def test_low_wage_fixed_allowance_never_negative():
    b = StandardPayrollCalculator().calculate_salary(10000)

    assert b.fixed_allowance == 0
    assert b.gross_earnings == 12501
    assert b.net_salary == 11701


def test_negative_wage_rejected():
    with pytest.raises(ValidationError):
        StandardPayrollCalculator().calculate_salary(-1)


def test_policy_overrides_fixed_amounts():
    policy = SalaryPolicy(standard_allowance=5000, professional_tax=0, pf_rate=Decimal("0.10"))
    b = StandardPayrollCalculator(policy).calculate_salary(50000)

    assert b.standard_allowance == 5000
    assert b.professional_tax == 0
    assert b.pf_employee == 2500
    assert b.net_salary == b.gross_earnings - 2500


@pytest.mark.parametrize("wage", WAGES)
def test_full_month_equals_unprorated(wage):
    calc = StandardPayrollCalculator()
    assert calc.calculate_salary_with_attendance(wage, 30, 30) == calc.calculate_salary(wage)


def test_more_payable_days_than_month_is_full_salary():
    calc = StandardPayrollCalculator()
    assert calc.calculate_salary_with_attendance(50000, 31) == calc.calculate_salary(50000)


@pytest.mark.parametrize("wage", [1, 10000, 50000, 1000000])
def test_zero_payable_days_pays_nothing(wage):
    b = StandardPayrollCalculator().calculate_salary_with_attendance(wage, 0, 30)

    assert b.net_salary == 0
    assert b.professional_tax == 0
    assert b.gross_earnings == 0
    assert b.total_deductions == 0


@pytest.mark.parametrize("wage", [10000, 30000, 50000])
def test_single_payable_day_charges_full_professional_tax(wage):
    b = StandardPayrollCalculator().calculate_salary_with_attendance(wage, 1, 30)
    assert b.total_deductions - b.pf_employee == 200


def test_single_day_for_30000():
    b = StandardPayrollCalculator().calculate_salary_with_attendance(30000, 1, 30)

    assert b.gross_earnings == 1000
    assert b.pf_employee == 60
    assert b.total_deductions == 260
    assert b.net_salary == 740


def test_half_month_prorates_each_component_independently():
    b = StandardPayrollCalculator().calculate_salary_with_attendance(50000, 15, 30)

    assert b.basic == 12500
    assert b.hra == 6250
    assert b.standard_allowance == 2084
    assert b.performance_bonus == 1042
    assert b.lta == 1042
    assert b.fixed_allowance == 2084
    # Gross is the prorated full gross, not the sum of prorated parts.
    assert b.gross_earnings == 25000
    assert b.pf_employee == 1500
    assert b.pf_employer == 1500
    assert b.professional_tax == 200
    assert b.total_deductions == 1700
    assert b.net_salary == 23300


def test_factor_is_not_pre_rounded():
    b = StandardPayrollCalculator().calculate_salary_with_attendance(50000, 20, 30)

    assert b.basic == 16667
    assert b.gross_earnings == 33333
    assert b.pf_employee == 2000
    assert b.net_salary == 31133


@pytest.mark.parametrize(
    "attendance, paid_leave, expected",
    [
        (20, 3, 23),
        (28, 5, 30),
        (0, 0, 0),
        (30, 0, 30),
    ],
)
def test_payable_days_are_capped(attendance, paid_leave, expected):
    assert StandardPayrollCalculator().calculate_payable_days(attendance, paid_leave, 30) == expected


def test_payable_days_default_to_policy_month():
    calc = StandardPayrollCalculator(SalaryPolicy(total_working_days=26))
    assert calc.calculate_payable_days(25, 4) == 26


def test_work_hours_and_extra_hours():
    calc = StandardPayrollCalculator()
    hours = calc.work_hours(datetime(2026, 1, 5, 9, 0), datetime(2026, 1, 5, 18, 30))

    assert hours == 9.5
    assert calc.extra_hours(hours) == 1.5
    assert calc.extra_hours(7.25) == 0.0


def test_work_hours_without_checkout_or_reversed_is_zero():
    calc = StandardPayrollCalculator()

    assert calc.work_hours(datetime(2026, 1, 5, 9, 0), None) == 0.0
    assert calc.work_hours(datetime(2026, 1, 5, 18, 0), datetime(2026, 1, 5, 9, 0)) == 0.0
