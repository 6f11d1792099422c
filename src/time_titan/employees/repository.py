from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeIdentity


class EmployeeRepository(Protocol):
    def get_by_card(self, card_number: str) -> Optional[EmployeeIdentity]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[EmployeeIdentity]:
        raise NotImplementedError

    def list_by_department(self, department: str) -> Sequence[EmployeeIdentity]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeIdentity]:
        raise NotImplementedError
