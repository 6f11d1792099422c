from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_identifier
from ..core.exceptions import AuthenticationError, NotFoundError
from .model import EmployeeIdentity
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: verify an employee code against the directory (login)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _lookup(self, code: str) -> Optional[EmployeeIdentity]:
        return self._employees.get_by_id(code) or self._employees.get_by_card(code)

    def authenticate(self, employee_code: Optional[str]) -> EmployeeIdentity:
        code = require_identifier(employee_code)
        employee = self._lookup(code)
        if not employee:
            logger.info("Rejected login for unknown employee code %s", code)
            raise AuthenticationError("Unknown employee code")
        return employee

    def get(self, employee_code: Optional[str]) -> EmployeeIdentity:
        code = require_identifier(employee_code)
        employee = self._lookup(code)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee
