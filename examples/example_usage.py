"""Example: use the payroll engine and service layer without Flask."""

import importlib
import sys
from datetime import date

from config import get_settings_module

from src.hrms.hrms.attendance.model import AttendanceRecord
from src.hrms.hrms.common.money import format_currency
from src.hrms.hrms.container import build_container
from src.hrms.hrms.core.enums import AttendanceStatus, EmployeeStatus, Role
from src.hrms.hrms.employees.model import Employee
from src.hrms.hrms.payroll.payrun import build_payrun


def offline_demo():
    employees = [Employee(1, "Asha", "Rao", 50000, EmployeeStatus.ACTIVE)]
    attendance = [
        AttendanceRecord(i, 1, date(2026, 1, i), AttendanceStatus.PRESENT) for i in range(1, 21)
    ]
    batch = build_payrun("January", 2026, employees, attendance, [])
    for slip in batch.payslips:
        print(slip.employee_id, slip.payable_days, format_currency(slip.breakdown.net_salary))
    print("total", format_currency(batch.payrun.total_amount))


def database_demo():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, payroll_settings=settings.PAYROLL)
    result = container.payrun_service.create_payrun(
        current_role=Role.ADMIN,
        created_by=None,
        month="January",
        year=2026,
    )
    print(result)


if __name__ == "__main__":
    if "--db" in sys.argv[1:]:
        database_demo()
    else:
        offline_demo()
