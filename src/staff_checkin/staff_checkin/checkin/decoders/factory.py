from __future__ import annotations

from typing import Optional, Sequence

from ..model import DecodedPayload
from .base import PayloadDecoder
from .json_decoder import JsonEnvelopeDecoder
from .raw_decoder import RawTokenDecoder
from .url_decoder import UrlQueryDecoder


def default_decoders() -> list[PayloadDecoder]:
    """Ordered: richest format first, bare token last."""
    return [JsonEnvelopeDecoder(), UrlQueryDecoder(), RawTokenDecoder()]


def decode_payload(text: Optional[str], decoders: Optional[Sequence[PayloadDecoder]] = None) -> DecodedPayload:
    if not text:
        return DecodedPayload()

    for decoder in decoders if decoders is not None else default_decoders():
        result = decoder.decode(text)
        if result is not None and not result.is_empty:
            return result
    return DecodedPayload()
