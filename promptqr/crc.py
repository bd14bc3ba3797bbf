"""CRC-16 checksum used by the EMV QR payload (tag 63)."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16(data: str, initial: int = CRC16_INIT) -> int:
    """Compute the 16-bit CRC (poly 0x1021, init 0xFFFF, no final XOR).

    Each character contributes the low byte of its code point, shifted into
    the top of the register.
    """

    checksum = initial
    for ch in data:
        checksum ^= (ord(ch) & 0xFF) << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return checksum


def format_crc(value: int) -> str:
    return f"{value:04X}"


def crc16_hex(data: str) -> str:
    return format_crc(crc16(data))
