from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

from ..core.constants import CHECKIN_PATH, SCAN_PAYLOAD_TYPE, SCAN_PAYLOAD_VERSION


def _encode_component(value: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent.
    return quote(str(value), safe="-_.!~*'()")


def build_checkin_url(origin: str, token: str, staff_id: Optional[str] = None) -> str:
    url = f"{origin.rstrip('/')}{CHECKIN_PATH}?token={_encode_component(token)}"
    if staff_id:
        url += f"&staffId={_encode_component(staff_id)}"
    return url


@dataclass(frozen=True)
class ScanPayload:
    """Data embedded in the QR code / share link. Wraps exactly one token."""

    token: str
    expires_at_ms: int
    url: str
    staff_id: Optional[str] = None
    v: int = SCAN_PAYLOAD_VERSION
    type: str = SCAN_PAYLOAD_TYPE

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "v": self.v,
            "type": self.type,
            "token": self.token,
            "exp": self.expires_at_ms,
        }
        if self.staff_id:
            out["staffId"] = self.staff_id
        out["url"] = self.url
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


def build_payload(token: str, staff_id: Optional[str] = None, *, expires_at_ms: int, origin: str) -> ScanPayload:
    return ScanPayload(
        token=str(token),
        expires_at_ms=int(expires_at_ms),
        url=build_checkin_url(origin, str(token), staff_id),
        staff_id=staff_id or None,
    )
