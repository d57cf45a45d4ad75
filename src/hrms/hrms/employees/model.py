from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee, read-only to the payroll engine.

    Note: monthly_wage is in whole rupees; None means the wage was never set.
    """

    employee_id: int
    first_name: str
    last_name: str
    monthly_wage: Optional[int]
    status: EmployeeStatus

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
