from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Staff:
    """Domain entity: a staff member as known to the staff directory.

    `staff_id` is stored in its canonical upper-case form (e.g. "TCH001").
    """

    staff_id: str
    name: str
    department: str = ""
    email: Optional[str] = None
