from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence
from urllib.parse import parse_qs, urlsplit

from ..model import DecodedPayload


def parse_absolute_url(text: str):
    """Return a SplitResult for absolute URLs (scheme + host), else None."""
    try:
        parts = urlsplit(text.strip())
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts


def payload_from_query(query: str) -> DecodedPayload:
    params: Mapping[str, Sequence[str]] = parse_qs(query)
    token = (params.get("token") or [""])[0].strip()
    staff_id = (params.get("staffId") or [""])[0].strip()
    return DecodedPayload(token=token or None, staff_id=staff_id or None)


class PayloadDecoder(ABC):
    """Strategy Pattern: one way of reading a scanned check-in payload."""

    @abstractmethod
    def decode(self, text: str) -> Optional[DecodedPayload]:
        """Return the decoded payload, or None when this format does not apply."""
        raise NotImplementedError
