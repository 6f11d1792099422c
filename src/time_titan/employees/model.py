from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def display_name_for(primary: Any, secondary: Any, card_number: Any) -> str:
    """Directory name with the fallbacks the dashboard shows: name, alt name, '#card'."""
    for candidate in (primary, secondary):
        if candidate is not None and str(candidate).strip():
            return str(candidate).strip()
    return f"#{'' if card_number is None else str(card_number).strip()}"


@dataclass(frozen=True)
class EmployeeIdentity:
    """Thực thể miền (domain): một dòng trong danh bạ nhân viên.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    employee_id: str
    card_number: str
    display_name: str
    department: Optional[str] = None
