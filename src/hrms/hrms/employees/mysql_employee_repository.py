from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    wage = row.get("monthly_wage")
    return Employee(
        employee_id=int(row["employee_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        monthly_wage=int(wage) if wage is not None else None,
        status=EmployeeStatus(row["status"]),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, status: Optional[EmployeeStatus] = None) -> Sequence[Employee]:
        clauses = ["1=1"]
        params: list[object] = []
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, first_name, last_name, monthly_wage, status
                FROM employees
                WHERE {where}
                ORDER BY employee_id
                """,
                tuple(params),
            )
            return [_to_employee(r) for r in fetchall(cur)]
