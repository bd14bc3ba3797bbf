"""Domain error definitions for payload generation."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_empty_identifier(message: str | None = None) -> ServiceError:
    return ServiceError(
        code="ERR_EMPTY_IDENTIFIER",
        message=message or "Please provide a valid phone number, tax ID, or e-wallet ID",
    )


def err_identifier_too_short(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_IDENTIFIER_TOO_SHORT", message=message or "Target must be at least 10 digits")


def err_amount_invalid(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_AMOUNT_INVALID", message=message or "Invalid amount. Must be a number.")


def err_amount_negative(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_AMOUNT_NEGATIVE", message=message or "Amount cannot be negative")


def err_amount_too_large(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_AMOUNT_TOO_LARGE", message=message or "Amount cannot exceed 1,000,000 THB")


def err_field_too_long(tag: str) -> ServiceError:
    return ServiceError(code="ERR_FIELD_TOO_LONG", message=f"Field {tag} value exceeds 99 characters")
