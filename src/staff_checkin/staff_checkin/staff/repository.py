from __future__ import annotations

from typing import Optional, Protocol

from .model import Staff


class StaffDirectory(Protocol):
    """Repository interface for staff lookups.

    The check-in service depends on this interface, not on a concrete database.
    """

    def find_by_normalized_id(self, staff_id: str) -> Optional[Staff]:
        raise NotImplementedError
