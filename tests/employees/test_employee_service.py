from __future__ import annotations

import pytest

from time_titan.core.exceptions import AuthenticationError, MissingIdentifierError, NotFoundError
from time_titan.employees.model import display_name_for
from time_titan.employees.service import EmployeeService


def test_authenticate_by_id_or_card(directory):
    directory.add("30874", "Lan Pham", department="Ops", card="7781")
    svc = EmployeeService(directory)

    assert svc.authenticate("30874").display_name == "Lan Pham"
    assert svc.authenticate(" 7781 ").employee_id == "30874"


def test_unknown_code_is_rejected(directory):
    svc = EmployeeService(directory)

    with pytest.raises(AuthenticationError):
        svc.authenticate("nope")
    with pytest.raises(NotFoundError):
        svc.get("nope")
    with pytest.raises(MissingIdentifierError):
        svc.authenticate("")


def test_display_name_fallbacks():
    assert display_name_for("Lan Pham", "Pham Lan", "7781") == "Lan Pham"
    assert display_name_for("  ", "Pham Lan", "7781") == "Pham Lan"
    assert display_name_for(None, None, "7781") == "#7781"
