from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository


def _optional_float(value) -> Optional[float]:
    return float(value) if value is not None else None


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, employee_id, work_date, status,
                       check_in, check_out
                FROM attendance
                WHERE {where}
                ORDER BY work_date, employee_id
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    employee_id=int(r["employee_id"]),
                    work_date=r["work_date"],
                    status=AttendanceStatus(r["status"]),
                    check_in=r.get("check_in"),
                    check_out=r.get("check_out"),
                )
                for r in rows
            ]

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["a.work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("a.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.employee_id, CONCAT(e.first_name, ' ', e.last_name) AS full_name,
                       a.work_date, a.status, a.check_in, a.check_out, a.work_hours
                FROM attendance a
                JOIN employees e ON e.employee_id = a.employee_id
                WHERE {where}
                ORDER BY a.work_date DESC, full_name
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                AttendanceReportRow(
                    employee_id=int(r["employee_id"]),
                    full_name=r["full_name"],
                    work_date=r["work_date"],
                    status=AttendanceStatus(r["status"]),
                    check_in=r.get("check_in"),
                    check_out=r.get("check_out"),
                    work_hours=_optional_float(r.get("work_hours")),
                )
                for r in rows
            ]
