from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LeaveRecord
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_starting_between(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[LeaveRecord]:
        clauses = ["start_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT leave_id, employee_id, leave_type, status,
                       start_date, end_date
                FROM time_off
                WHERE {where}
                ORDER BY start_date, employee_id
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                LeaveRecord(
                    leave_id=int(r["leave_id"]),
                    employee_id=int(r["employee_id"]),
                    leave_type=LeaveType(r["leave_type"]),
                    status=LeaveStatus(r["status"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                )
                for r in rows
            ]
