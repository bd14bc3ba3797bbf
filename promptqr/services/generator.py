"""PromptPay payload generation and QR rendering service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import Settings, settings as default_settings
from ..monitoring import record_payload
from ..promptpay_encoder import AmountLike, EncodedPayload, PromptPayOptions, encode_payload
from ..renderer import render_qr_payload

logger = logging.getLogger("promptqr.generator")


@dataclass(slots=True)
class GenerateResult:
    encoded: EncodedPayload
    png_bytes: bytes | None = None


class QRGenerator:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    def generate(self, target: str, amount: AmountLike | None = None, *, render: bool = True) -> GenerateResult:
        options = PromptPayOptions(amount=amount, zero_amount=self.settings.zero_amount_policy)
        encoded = encode_payload(target, options)

        logger.info(
            "payload generated",
            extra={
                "target_type": encoded.target.type.value,
                "dynamic": encoded.is_dynamic,
                "crc": encoded.crc,
            },
        )
        record_payload(encoded.target.type.value, encoded.is_dynamic)

        png_bytes = None
        if render:
            png_bytes = render_qr_payload(encoded.payload, title=self.settings.qr_title)["png_bytes"]
        return GenerateResult(encoded=encoded, png_bytes=png_bytes)
