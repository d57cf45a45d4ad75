from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.calculator.policy import SalaryPolicy
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrunRepository, MySQLPayslipRepository
from .payroll.service import PayrollReportService, PayrunService
from .timeoff.mysql_leave_repository import MySQLLeaveRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    leaves_repo: MySQLLeaveRepository
    payslips_repo: MySQLPayslipRepository
    payruns_repo: MySQLPayrunRepository

    calculator: StandardPayrollCalculator
    payrun_service: PayrunService
    payroll_report_service: PayrollReportService


def build_container(*, db_config: dict, payroll_settings: Optional[dict] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    payslips_repo = MySQLPayslipRepository(conn)
    payruns_repo = MySQLPayrunRepository(conn)

    calculator = StandardPayrollCalculator(SalaryPolicy.from_settings(payroll_settings or {}))
    payrun_service = PayrunService(
        employees_repo,
        attendance_repo,
        leaves_repo,
        payslips_repo,
        payruns_repo,
        calculator=calculator,
    )
    payroll_report_service = PayrollReportService(attendance_repo, calculator=calculator)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payslips_repo=payslips_repo,
        payruns_repo=payruns_repo,
        calculator=calculator,
        payrun_service=payrun_service,
        payroll_report_service=payroll_report_service,
    )
