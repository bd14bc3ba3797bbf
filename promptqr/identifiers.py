"""PromptPay target identifiers: sanitizing, classification and canonical form."""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_NON_DIGITS = re.compile(r"[^0-9]")

COUNTRY_CALLING_CODE = "66"
PHONE_LENGTH = 10
TAX_ID_LENGTH = 13
EWALLET_MIN_LENGTH = 15


class TargetType(str, enum.Enum):
    PHONE = "phone"
    TAX_ID = "tax"
    EWALLET = "ewallet"


_MERCHANT_TAGS = {
    TargetType.PHONE: "01",
    TargetType.TAX_ID: "02",
    TargetType.EWALLET: "03",
}


@dataclass(frozen=True)
class PromptPayTarget:
    value: str
    type: TargetType
    formatted: str
    canonical: str


def sanitize_target(raw: str) -> str:
    """Drop every character that is not an ASCII digit."""

    return _NON_DIGITS.sub("", raw)


def get_target_type(target: str) -> TargetType:
    """Classify a target by its digit count, longest bucket first."""

    clean = sanitize_target(target)
    if len(clean) >= EWALLET_MIN_LENGTH:
        return TargetType.EWALLET
    if len(clean) >= TAX_ID_LENGTH:
        return TargetType.TAX_ID
    return TargetType.PHONE


classify = get_target_type


def merchant_tag(target_type: TargetType) -> str:
    return _MERCHANT_TAGS[target_type]


def format_target(target: str) -> str:
    """Return the digit string embedded in the merchant information template.

    Tax and e-wallet IDs are used as-is. Phone numbers swap the trunk ``0`` for
    the country calling code and are left-padded with zeros to 13 digits, so
    ``0812345678`` becomes ``0066812345678``.
    """

    numbers = sanitize_target(target)
    if len(numbers) >= TAX_ID_LENGTH:
        return numbers
    if numbers.startswith("0"):
        numbers = COUNTRY_CALLING_CODE + numbers[1:]
    return numbers.rjust(TAX_ID_LENGTH, "0")


def format_display_target(target: str) -> str:
    clean = sanitize_target(target)

    # 081-234-5678
    if len(clean) == PHONE_LENGTH and clean.startswith("0"):
        return "-".join((clean[:3], clean[3:6], clean[6:]))

    # 1-2345-67890-12-3
    if len(clean) == TAX_ID_LENGTH:
        return "-".join((clean[:1], clean[1:5], clean[5:10], clean[10:12], clean[12:]))

    return clean


def describe_target(target: str) -> PromptPayTarget:
    clean = sanitize_target(target)
    return PromptPayTarget(
        value=clean,
        type=get_target_type(clean),
        formatted=format_display_target(clean),
        canonical=format_target(clean),
    )
