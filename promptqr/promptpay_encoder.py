"""PromptPay payload encoder following the EMV merchant-presented QR profile."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Union

from .crc import crc16_hex
from .errors import (
    err_amount_invalid,
    err_amount_negative,
    err_amount_too_large,
    err_empty_identifier,
    err_identifier_too_short,
)
from .identifiers import PHONE_LENGTH, PromptPayTarget, describe_target, merchant_tag, sanitize_target
from .tlv import TLVItem, build_tlv, template

TAG_PAYLOAD_FORMAT = "00"
TAG_POI_METHOD = "01"
TAG_MERCHANT_INFORMATION_BOT = "29"
TAG_TRANSACTION_CURRENCY = "53"
TAG_TRANSACTION_AMOUNT = "54"
TAG_COUNTRY_CODE = "58"
TAG_CRC = "63"

PAYLOAD_FORMAT_EMV_QRCPS = "01"
POI_METHOD_STATIC = "11"
POI_METHOD_DYNAMIC = "12"
MERCHANT_TEMPLATE_ID_GUID = "00"
PROMPTPAY_GUID = "A000000677010111"
TRANSACTION_CURRENCY_THB = "764"
COUNTRY_CODE_TH = "TH"

# Tag and length of the checksum field, covered by the checksum itself.
CRC_HEADER = f"{TAG_CRC}04"

MAX_AMOUNT = Decimal("1000000")
_CENTS = Decimal("0.01")

AmountLike = Union[Decimal, int, float, str]


class ZeroAmountPolicy(str, enum.Enum):
    """How an amount of exactly zero is encoded."""

    FLEXIBLE = "flexible"  # zero means "payer enters the amount"
    FIXED = "fixed"  # zero is a fixed amount of 0.00


@dataclass(frozen=True)
class PromptPayOptions:
    amount: AmountLike | None = None
    zero_amount: ZeroAmountPolicy = ZeroAmountPolicy.FLEXIBLE


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str
    target: PromptPayTarget
    amount: Decimal | None

    @property
    def is_dynamic(self) -> bool:
        return self.amount is not None


def validate_target(target: str) -> str:
    """Return the sanitized target or raise if it cannot be a PromptPay ID."""

    clean = sanitize_target(target)
    if not clean:
        raise err_empty_identifier()
    if len(clean) < PHONE_LENGTH:
        raise err_identifier_too_short()
    return clean


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, bool):
        raise err_amount_invalid()
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation:
        raise err_amount_invalid() from None
    if not value.is_finite():
        raise err_amount_invalid()
    return value


def validate_amount(amount: AmountLike | None) -> Decimal | None:
    if amount is None:
        return None
    value = _to_decimal(amount)
    if value < 0:
        raise err_amount_negative()
    if value > MAX_AMOUNT:
        raise err_amount_too_large()
    # -0 would otherwise format as "-0.00"
    return value.copy_abs() if value == 0 else value


def resolve_amount(amount: Decimal | None, policy: ZeroAmountPolicy) -> Decimal | None:
    """Map a validated amount to the amount actually emitted, if any."""

    if amount is None:
        return None
    if amount == 0 and policy is ZeroAmountPolicy.FLEXIBLE:
        return None
    return amount


def format_amount(amount: Decimal) -> str:
    """Format with exactly two decimals, rounding half to even."""

    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN))


def _amount_field(amount: Decimal | None) -> TLVItem | None:
    if amount is None:
        return None
    return TLVItem(tag=TAG_TRANSACTION_AMOUNT, value=format_amount(amount))


def encode_payload(target: str, options: PromptPayOptions | None = None) -> EncodedPayload:
    """Validate inputs and assemble the checksummed PromptPay payload."""

    options = options or PromptPayOptions()
    clean = validate_target(target)
    amount = resolve_amount(validate_amount(options.amount), options.zero_amount)

    info = describe_target(clean)
    items = [
        TLVItem(tag=TAG_PAYLOAD_FORMAT, value=PAYLOAD_FORMAT_EMV_QRCPS),
        TLVItem(tag=TAG_POI_METHOD, value=POI_METHOD_STATIC if amount is None else POI_METHOD_DYNAMIC),
        template(
            TAG_MERCHANT_INFORMATION_BOT,
            [
                TLVItem(tag=MERCHANT_TEMPLATE_ID_GUID, value=PROMPTPAY_GUID),
                TLVItem(tag=merchant_tag(info.type), value=info.canonical),
            ],
        ),
        TLVItem(tag=TAG_COUNTRY_CODE, value=COUNTRY_CODE_TH),
        TLVItem(tag=TAG_TRANSACTION_CURRENCY, value=TRANSACTION_CURRENCY_THB),
        _amount_field(amount),
    ]
    payload_no_crc = build_tlv(items)
    crc = crc16_hex(f"{payload_no_crc}{CRC_HEADER}")
    final_payload = build_tlv([*items, TLVItem(tag=TAG_CRC, value=crc)])
    return EncodedPayload(payload=final_payload, crc=crc, target=info, amount=amount)


def generate_payload(target: str, options: PromptPayOptions | None = None) -> str:
    """Return the PromptPay payload string for ``target``."""

    return encode_payload(target, options).payload
