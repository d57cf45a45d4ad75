from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import NewPayrun, NewPayslip, Payrun, Payslip, SalaryBreakdown
from .repository import PayrunRepository, PayslipRepository

BREAKDOWN_COLUMNS = (
    "basic",
    "hra",
    "standard_allowance",
    "performance_bonus",
    "lta",
    "fixed_allowance",
    "gross_earnings",
    "pf_employee",
    "pf_employer",
    "professional_tax",
    "total_deductions",
    "net_salary",
)

PAYSLIP_COLUMNS = (
    ("employee_id", "month", "year")
    + BREAKDOWN_COLUMNS
    + ("payable_days", "attendance_days", "paid_leave_days", "total_working_days")
)


class MySQLPayslipRepository(PayslipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_payslip(self, payslip: NewPayslip) -> int:
        record = payslip.as_record()
        columns = ", ".join(PAYSLIP_COLUMNS)
        placeholders = ",".join(["%s"] * len(PAYSLIP_COLUMNS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO payslips({columns}) VALUES({placeholders})",
                tuple(record[c] for c in PAYSLIP_COLUMNS),
            )
            return int(cur.lastrowid)

    def list_payslips(
        self,
        *,
        month: Optional[str] = None,
        year: Optional[int] = None,
        employee_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[Payslip]:
        clauses = ["1=1"]
        params: list[object] = []

        if month is not None:
            clauses.append("month=%s")
            params.append(month)
        if year is not None:
            clauses.append("year=%s")
            params.append(int(year))
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        columns = ", ".join(PAYSLIP_COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT payslip_id, {columns}, created_at
                FROM payslips
                WHERE {where}
                ORDER BY created_at DESC, payslip_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            rows = fetchall(cur)
            return [
                Payslip(
                    payslip_id=int(r["payslip_id"]),
                    employee_id=int(r["employee_id"]),
                    month=r["month"],
                    year=int(r["year"]),
                    breakdown=SalaryBreakdown(**{c: int(r[c]) for c in BREAKDOWN_COLUMNS}),
                    payable_days=int(r["payable_days"]),
                    attendance_days=int(r["attendance_days"]),
                    paid_leave_days=int(r["paid_leave_days"]),
                    total_working_days=int(r["total_working_days"]),
                    created_at=r["created_at"],
                )
                for r in rows
            ]


class MySQLPayrunRepository(PayrunRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_payrun(self, payrun: NewPayrun) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payruns(month, year, created_by, total_employees, total_amount)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    payrun.month,
                    int(payrun.year),
                    payrun.created_by,
                    int(payrun.total_employees),
                    int(payrun.total_amount),
                ),
            )
            return int(cur.lastrowid)

    def list_payruns(self, *, year: Optional[int] = None, limit: int = 200) -> Sequence[Payrun]:
        clauses = ["1=1"]
        params: list[object] = []
        if year is not None:
            clauses.append("year=%s")
            params.append(int(year))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT payrun_id, month, year, created_by, total_employees, total_amount, created_at
                FROM payruns
                WHERE {where}
                ORDER BY created_at DESC, payrun_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            rows = fetchall(cur)
            return [
                Payrun(
                    payrun_id=int(r["payrun_id"]),
                    month=r["month"],
                    year=int(r["year"]),
                    created_by=r.get("created_by"),
                    total_employees=int(r["total_employees"]),
                    total_amount=int(r["total_amount"]),
                    created_at=r["created_at"],
                )
                for r in rows
            ]
