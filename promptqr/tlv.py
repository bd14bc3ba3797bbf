"""Helpers to build EMV-style TLV payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import err_field_too_long

MAX_VALUE_LENGTH = 99


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    def serialize(self) -> str:
        if len(self.value) > MAX_VALUE_LENGTH:
            raise err_field_too_long(self.tag)
        length = f"{len(self.value):02d}"
        return f"{self.tag}{length}{self.value}"


def build_tlv(items: Iterable[TLVItem | None]) -> str:
    """Serialize TLV items in order, skipping absent (``None``) entries."""

    return "".join(item.serialize() for item in items if item is not None)


def template(tag: str, items: Iterable[TLVItem | None]) -> TLVItem:
    """Wrap nested items as the value of an outer template field."""

    return TLVItem(tag=tag, value=build_tlv(items))
