import pytest

from promptqr.identifiers import (
    TargetType,
    classify,
    describe_target,
    format_display_target,
    format_target,
    get_target_type,
    merchant_tag,
    sanitize_target,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("081-234-5678", "0812345678"),
        (" +66 81 234 5678 ", "66812345678"),
        ("1-2345-67890-12-3", "1234567890123"),
        ("abc", ""),
        ("", ""),
        ("١٢٣", ""),  # non-ASCII digits are dropped
    ],
)
def test_sanitize_target(raw, expected):
    assert sanitize_target(raw) == expected


def test_sanitize_is_idempotent():
    once = sanitize_target("08-1234 5678x")
    assert sanitize_target(once) == once


@pytest.mark.parametrize(
    "length, expected",
    [
        (3, TargetType.PHONE),
        (10, TargetType.PHONE),
        (12, TargetType.PHONE),
        (13, TargetType.TAX_ID),
        (14, TargetType.TAX_ID),
        (15, TargetType.EWALLET),
        (40, TargetType.EWALLET),
    ],
)
def test_classification_thresholds(length, expected):
    assert get_target_type("1" * length) == expected


def test_classification_ignores_separators():
    assert classify("1-2345-67890-12-3") == TargetType.TAX_ID


def test_classification_is_monotonic_in_digit_count():
    order = [TargetType.PHONE, TargetType.TAX_ID, TargetType.EWALLET]
    ranks = [order.index(get_target_type("9" * n)) for n in range(0, 30)]
    assert ranks == sorted(ranks)


def test_merchant_tags():
    assert merchant_tag(TargetType.PHONE) == "01"
    assert merchant_tag(TargetType.TAX_ID) == "02"
    assert merchant_tag(TargetType.EWALLET) == "03"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0812345678", "0066812345678"),
        ("081-234-5678", "0066812345678"),
        ("1234567890", "0001234567890"),  # no trunk zero: padding only
        ("1234567890123", "1234567890123"),
        ("123456789012345", "123456789012345"),
    ],
)
def test_format_target(raw, expected):
    assert format_target(raw) == expected


def test_canonical_phone_and_tax_forms_are_13_digits():
    for raw in ("0812345678", "0899999999", "1234567890123", "12345678901234"):
        canonical = format_target(raw)
        assert canonical.isdigit()
        assert len(canonical) >= 13


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0812345678", "081-234-5678"),
        ("1234567890123", "1-2345-67890-12-3"),
        ("123456789012345", "123456789012345"),
        ("1234567890", "1234567890"),
    ],
)
def test_format_display_target(raw, expected):
    assert format_display_target(raw) == expected


def test_describe_target():
    target = describe_target("081-234-5678")
    assert target.value == "0812345678"
    assert target.type == TargetType.PHONE
    assert target.formatted == "081-234-5678"
    assert target.canonical == "0066812345678"
