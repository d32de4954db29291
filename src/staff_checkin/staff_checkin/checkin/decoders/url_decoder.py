from __future__ import annotations

from typing import Optional

from ..model import DecodedPayload
from .base import PayloadDecoder, parse_absolute_url, payload_from_query


class UrlQueryDecoder(PayloadDecoder):
    """Deep link: `https://host/staff/attendance/check-in?token=...&staffId=...`"""

    def decode(self, text: str) -> Optional[DecodedPayload]:
        parts = parse_absolute_url(text)
        if not parts:
            return None
        return payload_from_query(parts.query)
