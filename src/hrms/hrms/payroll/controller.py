from __future__ import annotations

from datetime import date
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date
from ..common.money import format_currency
from ..common.validators import require_non_negative_int
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError


def _current_role() -> Role:
    try:
        return Role(session.get("role"))
    except ValueError:
        raise AuthorizationError("Unknown role")


def _optional_int(name: str):
    value = request.args.get(name)
    if value in (None, ""):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be a whole number")


def register(app: Flask, container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Login required"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(e):
        return jsonify({"error": str(e)}), 403

    @app.errorhandler(NotFoundError)
    def handle_not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.route("/api/payruns", methods=["POST"], endpoint="create_payrun")
    @login_required
    def create_payrun():
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValidationError("Expected a JSON object")
        month = payload.get("month")
        year = payload.get("year") or date.today().year
        if not month:
            raise ValidationError("Please select a month")

        result = container.payrun_service.create_payrun(
            current_role=_current_role(),
            created_by=session.get("user_id"),
            month=month,
            year=require_non_negative_int(year, "Year"),
        )
        return (
            jsonify(
                {
                    "payrun_id": result.payrun_id,
                    "payslip_ids": result.payslip_ids,
                    "month": result.payrun.month,
                    "year": result.payrun.year,
                    "total_employees": result.payrun.total_employees,
                    "total_amount": result.payrun.total_amount,
                    "total_amount_display": format_currency(result.payrun.total_amount),
                }
            ),
            201,
        )

    @app.route("/api/payruns", methods=["GET"], endpoint="list_payruns")
    @login_required
    def list_payruns():
        payruns = container.payrun_service.list_payruns(year=_optional_int("year"))
        return jsonify([p.as_record() for p in payruns])

    @app.route("/api/payslips", methods=["GET"], endpoint="list_payslips")
    @login_required
    def list_payslips():
        role = _current_role()
        employee_id = _optional_int("employee_id")
        if role == Role.EMPLOYEE:
            # Employees only see their own payslips.
            employee_id = session.get("employee_id")
            if employee_id is None:
                raise NotFoundError("No employee profile linked to this account")

        payslips = container.payrun_service.list_payslips(
            month=request.args.get("month") or None,
            year=_optional_int("year"),
            employee_id=employee_id,
        )
        return jsonify([p.as_record() for p in payslips])

    @app.route("/api/salary/preview", methods=["GET"], endpoint="salary_preview")
    @login_required
    def salary_preview():
        wage = _optional_int("wage")
        breakdown = container.payrun_service.preview_salary(wage)
        data = breakdown.as_dict()
        data["net_salary_display"] = format_currency(breakdown.net_salary)
        return jsonify(data)

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @login_required
    def attendance_report():
        if _current_role() not in {Role.ADMIN, Role.HR, Role.PAYROLL}:
            raise AuthorizationError("You are not allowed to view reports")
        try:
            start = parse_iso_date(request.args.get("start", ""))
            end = parse_iso_date(request.args.get("end", ""))
        except ValueError:
            raise ValidationError("Dates must be YYYY-MM-DD")

        report = container.payroll_report_service.build_attendance_report(
            start=start,
            end=end,
            employee_id=_optional_int("employee_id"),
        )
        return jsonify({"rows": report.rows, "summary": report.summary})
