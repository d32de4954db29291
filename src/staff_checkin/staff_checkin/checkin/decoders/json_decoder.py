from __future__ import annotations

import json
from typing import Optional

from ..model import DecodedPayload
from .base import PayloadDecoder, parse_absolute_url, payload_from_query


class JsonEnvelopeDecoder(PayloadDecoder):
    """`{"v": 1, "type": "staff_attendance", "token": ..., "staffId": ..., "url": ...}`"""

    def decode(self, text: str) -> Optional[DecodedPayload]:
        try:
            obj = json.loads(text)
        except ValueError:
            return None
        if not isinstance(obj, dict):
            return None

        token = obj.get("token")
        if token:
            staff_id = obj.get("staffId")
            return DecodedPayload(token=str(token), staff_id=str(staff_id) if staff_id else None)

        url = obj.get("url")
        if isinstance(url, str):
            parts = parse_absolute_url(url)
            if parts:
                return payload_from_query(parts.query)
        return None
