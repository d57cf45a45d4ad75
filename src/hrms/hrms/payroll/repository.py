from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewPayrun, NewPayslip, Payrun, Payslip


class PayslipRepository(Protocol):
    def create_payslip(self, payslip: NewPayslip) -> int:
        raise NotImplementedError

    def list_payslips(
        self,
        *,
        month: Optional[str] = None,
        year: Optional[int] = None,
        employee_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[Payslip]:
        raise NotImplementedError


class PayrunRepository(Protocol):
    def create_payrun(self, payrun: NewPayrun) -> int:
        raise NotImplementedError

    def list_payruns(self, *, year: Optional[int] = None, limit: int = 200) -> Sequence[Payrun]:
        raise NotImplementedError
