"""Telegram WebApp initData verification.

Implements the Mini App launch-data check described in the Bot API docs:

    secret_key = HMAC_SHA256(key="WebAppData", msg=bot_token)
    hash       = hex(HMAC_SHA256(key=secret_key, msg=data_check_string))

Note the key/message order in the first step: the constant is the key and
the bot token is the message.
"""
import hashlib
import hmac
import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict

WEBAPP_DATA_KEY = b"WebAppData"


class TelegramUser(BaseModel):
    """Telegram user data from initData"""
    model_config = ConfigDict(extra="ignore")

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    photo_url: Optional[str] = None


class VerificationReason(str, Enum):
    """Why initData was rejected."""
    NO_HASH = "no_hash"
    BAD_HASH = "bad_hash"
    NO_USER = "no_user"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class InitDataValid:
    user: TelegramUser

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class InitDataInvalid:
    reason: VerificationReason

    @property
    def ok(self) -> bool:
        return False


VerificationResult = Union[InitDataValid, InitDataInvalid]


def build_data_check_string(pairs: list[tuple[str, str]]) -> str:
    """
    Build the data-check-string from initData pairs (``hash`` already removed).

    Keys are sorted and rendered as ``key=value`` joined by ``\\n``.
    A repeated key uses its first value.
    """
    first_values: dict[str, str] = {}
    for key, value in pairs:
        first_values.setdefault(key, value)
    return "\n".join(f"{key}={first_values[key]}" for key, _ in sorted(pairs, key=lambda p: p[0]))


def compute_init_data_hash(data_check_string: str, bot_token: str) -> str:
    """Compute the hex signature Telegram attaches to initData."""
    secret_key = hmac.new(WEBAPP_DATA_KEY, bot_token.encode(), hashlib.sha256).digest()
    return hmac.new(secret_key, data_check_string.encode(), hashlib.sha256).hexdigest()


def verify_init_data(init_data: str, bot_token: str) -> VerificationResult:
    """
    Validate Telegram Mini App initData and extract the user.

    Args:
        init_data: Raw initData query string from Telegram WebApp
        bot_token: Token of the bot that launched the Mini App

    Returns:
        InitDataValid with the user, or InitDataInvalid with the reason
    """
    try:
        pairs = parse_qsl(init_data, keep_blank_values=True)

        received_hash = next((value for key, value in pairs if key == "hash"), None)
        if not received_hash:
            return InitDataInvalid(VerificationReason.NO_HASH)

        signed_pairs = [(key, value) for key, value in pairs if key != "hash"]
        calculated_hash = compute_init_data_hash(build_data_check_string(signed_pairs), bot_token)

        if not hmac.compare_digest(calculated_hash.encode(), received_hash.encode()):
            return InitDataInvalid(VerificationReason.BAD_HASH)

        user_json = next((value for key, value in pairs if key == "user"), None)
        if not user_json:
            return InitDataInvalid(VerificationReason.NO_USER)

        user_data = json.loads(user_json)
        return InitDataValid(TelegramUser.model_validate(user_data))
    except Exception:
        return InitDataInvalid(VerificationReason.EXCEPTION)
