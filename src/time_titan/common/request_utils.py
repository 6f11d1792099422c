from __future__ import annotations

from typing import Optional

from flask import request, session

SESSION_EMP_CODE = "emp_code"


def employee_code_param() -> Optional[str]:
    """empCode from the query string, else the verified code stored at login."""
    code = request.args.get("empCode")
    if code is not None and code.strip():
        return code
    return session.get(SESSION_EMP_CODE)
