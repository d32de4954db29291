from __future__ import annotations

import random
import string
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import epoch_ms, now_utc
from ..core.exceptions import InvalidTokenFormatError, InvalidTokenTimestampError

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value < 0:
        return "-" + to_base36(-value)
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_BASE36_DIGITS[rem])
    return "".join(reversed(out))


def from_base36(text: str) -> int:
    """Strict base-36 parse: ASCII letters/digits only, no sign or spaces."""
    if not text or not text.isascii() or not text.isalnum():
        raise ValueError(f"Invalid base36 value: {text!r}")
    return int(text, 36)


@dataclass(frozen=True)
class CheckinToken:
    """Opaque bearer credential: `<random_component>.<base36(issued_at_ms)>`.

    Never stored server-side; freshness is derived from `issued_at_ms`.
    """

    random_component: str
    issued_at_ms: int

    def __str__(self) -> str:
        return f"{self.random_component}.{to_base36(self.issued_at_ms)}"

    def age_ms(self, now: datetime) -> int:
        return epoch_ms(now) - self.issued_at_ms


def _random_component(now_ms: int) -> str:
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        # No OS randomness source available.
        weak = to_base36(random.getrandbits(64))
        return f"{weak}-{to_base36(now_ms)}"


def issue_token(now: Optional[datetime] = None) -> CheckinToken:
    now_ms = epoch_ms(now or now_utc())
    return CheckinToken(random_component=_random_component(now_ms), issued_at_ms=now_ms)


def parse_token(raw: str) -> CheckinToken:
    parts = str(raw).split(".")
    if len(parts) != 2:
        raise InvalidTokenFormatError("Invalid token format")

    random_part, ts_part = parts
    try:
        issued_at_ms = from_base36(ts_part)
    except ValueError:
        raise InvalidTokenTimestampError("Invalid token timestamp") from None
    if issued_at_ms <= 0:
        raise InvalidTokenTimestampError("Invalid token timestamp")

    return CheckinToken(random_component=random_part, issued_at_ms=issued_at_ms)
