from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple

from ..core.constants import MIN_RAW_TOKEN_LENGTH, MSG_INVALID_SCAN
from .decoders.factory import decode_payload
from .issuer import IssuedCode, TokenIssuer
from .model import CheckinForm, DecodedPayload, SubmitResult
from .service import CheckinService


class CheckinKiosk:
    """What the presentation layer calls: issue, decode, submit."""

    def __init__(self, issuer: TokenIssuer, service: CheckinService):
        self._issuer = issuer
        self._service = service

    def issue_token(self, staff_id: Optional[str] = None, *, origin: Optional[str] = None) -> IssuedCode:
        return self._issuer.issue(staff_id, origin=origin)

    def decode_payload(self, raw_text: Optional[str]) -> DecodedPayload:
        return decode_payload(raw_text)

    def submit_check_in(self, staff_id: Optional[str], token: Optional[str], *, now: Optional[datetime] = None) -> SubmitResult:
        return self._service.submit(staff_id, token, now=now)

    def scan(
        self,
        raw_text: Optional[str],
        form: Optional[CheckinForm] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Tuple[CheckinForm, SubmitResult]:
        form = form or CheckinForm()
        form = self.decode_payload(raw_text).apply_to(form)

        if not form.token or len(form.token) < MIN_RAW_TOKEN_LENGTH:
            return form, SubmitResult(ok=False, message=MSG_INVALID_SCAN)
        return form, self.submit_check_in(form.staff_id, form.token, now=now)
