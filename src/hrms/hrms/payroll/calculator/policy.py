from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...core import constants


@dataclass(frozen=True)
class SalaryPolicy:
    """Company salary structure: fixed amounts in rupees, rates as exact decimals."""

    standard_allowance: int = constants.DEFAULT_STANDARD_ALLOWANCE
    professional_tax: int = constants.DEFAULT_PROFESSIONAL_TAX
    pf_rate: Decimal = constants.DEFAULT_PF_RATE
    bonus_rate: Decimal = constants.DEFAULT_BONUS_RATE
    lta_rate: Decimal = constants.DEFAULT_LTA_RATE
    hra_rate: Decimal = constants.DEFAULT_HRA_RATE
    basic_rate: Decimal = constants.DEFAULT_BASIC_RATE
    total_working_days: int = constants.DEFAULT_TOTAL_WORKING_DAYS
    standard_hours_per_day: int = constants.DEFAULT_STANDARD_HOURS_PER_DAY

    @classmethod
    def from_settings(cls, payroll_settings: dict) -> "SalaryPolicy":
        """Build from the PAYROLL dict of a settings module; missing keys keep defaults."""
        defaults = cls()
        return cls(
            standard_allowance=int(payroll_settings.get("STANDARD_ALLOWANCE", defaults.standard_allowance)),
            professional_tax=int(payroll_settings.get("PROFESSIONAL_TAX", defaults.professional_tax)),
            pf_rate=Decimal(str(payroll_settings.get("PF_RATE", defaults.pf_rate))),
            bonus_rate=Decimal(str(payroll_settings.get("BONUS_RATE", defaults.bonus_rate))),
            lta_rate=Decimal(str(payroll_settings.get("LTA_RATE", defaults.lta_rate))),
            hra_rate=Decimal(str(payroll_settings.get("HRA_RATE", defaults.hra_rate))),
            basic_rate=Decimal(str(payroll_settings.get("BASIC_RATE", defaults.basic_rate))),
            total_working_days=int(payroll_settings.get("TOTAL_WORKING_DAYS", defaults.total_working_days)),
            standard_hours_per_day=int(
                payroll_settings.get("STANDARD_HOURS_PER_DAY", defaults.standard_hours_per_day)
            ),
        )
