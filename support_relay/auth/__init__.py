"""Authentication package."""
from .telegram import (
    InitDataInvalid,
    InitDataValid,
    TelegramUser,
    VerificationReason,
    VerificationResult,
    verify_init_data,
)

__all__ = [
    "InitDataInvalid",
    "InitDataValid",
    "TelegramUser",
    "VerificationReason",
    "VerificationResult",
    "verify_init_data",
]
