from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRecord


class LeaveRepository(Protocol):
    def list_starting_between(
        self,
        *,
        start_date: date,
        end_date: date,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[LeaveRecord]:
        """Leave records whose start_date falls in [start_date, end_date]."""

        raise NotImplementedError
