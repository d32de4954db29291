from __future__ import annotations


def normalize_staff_id(value: str) -> str:
    """Staff ids are matched case-insensitively ("tch001" == "TCH001")."""
    return str(value).strip().upper()
