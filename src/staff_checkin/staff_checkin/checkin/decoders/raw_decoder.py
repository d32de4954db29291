from __future__ import annotations

import json
from typing import Optional

from ...core.constants import MIN_RAW_TOKEN_LENGTH
from ..model import DecodedPayload
from .base import PayloadDecoder, parse_absolute_url


class RawTokenDecoder(PayloadDecoder):
    """Manually pasted bare token, no staff id."""

    def __init__(self, min_length: int = MIN_RAW_TOKEN_LENGTH):
        self._min_length = int(min_length)

    def decode(self, text: str) -> Optional[DecodedPayload]:
        candidate = text.strip()
        if len(candidate) <= self._min_length:
            return None
        if self._is_structured(candidate):
            return None
        return DecodedPayload(token=candidate, staff_id=None)

    @staticmethod
    def _is_structured(text: str) -> bool:
        if parse_absolute_url(text):
            return True
        try:
            parsed = json.loads(text)
        except ValueError:
            return False
        return isinstance(parsed, (dict, list))
