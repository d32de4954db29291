from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import epoch_ms, now_utc
from ..core.constants import DEFAULT_PUBLIC_ORIGIN, QR_DISPLAY_TTL_SECONDS
from .payload import ScanPayload, build_payload
from .token import CheckinToken, issue_token


@dataclass(frozen=True)
class IssuedCode:
    """A freshly issued token plus the countdown shown beside its QR code.

    The countdown is a UX hint only. Acceptance is decided by the server TTL
    applied to the timestamp inside the token.
    """

    token: CheckinToken
    payload: ScanPayload
    issued_at_ms: int
    expires_at_ms: int
    staff_id: Optional[str] = None
    origin: str = DEFAULT_PUBLIC_ORIGIN

    def seconds_left(self, now: Optional[datetime] = None) -> int:
        remaining_ms = self.expires_at_ms - epoch_ms(now or now_utc())
        return max(0, -(-remaining_ms // 1000))

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.seconds_left(now) == 0

    def status_label(self, now: Optional[datetime] = None) -> str:
        return "Expired" if self.is_expired(now) else "Active"


class TokenIssuer:
    def __init__(
        self,
        *,
        display_ttl_seconds: int = QR_DISPLAY_TTL_SECONDS,
        default_origin: str = DEFAULT_PUBLIC_ORIGIN,
    ):
        self._display_ttl_ms = int(display_ttl_seconds) * 1000
        self._default_origin = default_origin.rstrip("/")

    def issue(
        self,
        staff_id: Optional[str] = None,
        *,
        origin: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> IssuedCode:
        now = now or now_utc()
        origin = (origin or self._default_origin).rstrip("/")
        token = issue_token(now)
        expires_at_ms = token.issued_at_ms + self._display_ttl_ms

        return IssuedCode(
            token=token,
            payload=build_payload(str(token), staff_id, expires_at_ms=expires_at_ms, origin=origin),
            issued_at_ms=token.issued_at_ms,
            expires_at_ms=expires_at_ms,
            staff_id=staff_id or None,
            origin=origin,
        )

    def regenerate(self, code: IssuedCode, *, now: Optional[datetime] = None) -> IssuedCode:
        """New token for the same staff/origin; the old one is simply dropped."""
        return self.issue(code.staff_id, origin=code.origin, now=now)
