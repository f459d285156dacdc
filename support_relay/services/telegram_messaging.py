"""
Telegram Bot API message sending for the admin bot.

Single attempt per message: retries are left to whoever reconciles
undelivered tickets. The outcome is always returned as a DeliveryResult,
never raised.
"""

from dataclasses import dataclass
from typing import Union

import httpx

from support_relay.logging import get_logger

logger = get_logger(__name__)

NO_RESPONSE_BODY = "No response body"


@dataclass(frozen=True)
class Delivered:
    message_id: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Undelivered:
    reason: str

    @property
    def ok(self) -> bool:
        return False


DeliveryResult = Union[Delivered, Undelivered]


# =============================================================================
# Helper Functions
# =============================================================================


def _convert_keyboard_to_dict(keyboard) -> dict | None:
    """Convert aiogram keyboard (or a ready reply_markup dict) to a payload dict."""
    if keyboard is None:
        return None
    if isinstance(keyboard, dict):
        return dict(keyboard)
    if hasattr(keyboard, "model_dump"):
        return dict(keyboard.model_dump(exclude_none=True))
    raise TypeError(f"Unknown keyboard type: {type(keyboard)}")


def _parse_error_response(response: httpx.Response) -> str:
    """Extract Telegram's error description from a failed response."""
    try:
        error_data = response.json() if response.text else {}
    except ValueError:
        return response.text[:500] if response.text else NO_RESPONSE_BODY
    return error_data.get("description") or f"HTTP {response.status_code}"


# =============================================================================
# Public API
# =============================================================================


class TelegramMessenger:
    """
    Sends messages through one bot.

    Args:
        client: Shared httpx client (owned by the caller)
        bot_token: Token of the sending bot
        api_url: Bot API base URL
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        bot_token: str,
        api_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
    ):
        self._client = client
        self._bot_token = bot_token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout

    async def send_message(
        self,
        chat_id: int,
        text: str,
        keyboard=None,
        parse_mode: str | None = "HTML",
    ) -> DeliveryResult:
        """
        Send a message, optionally with an inline keyboard.

        Args:
            chat_id: Telegram chat ID (user or group)
            text: Message text, sent as is
            keyboard: InlineKeyboardMarkup or reply_markup dict
            parse_mode: "HTML", "Markdown", or None

        Returns:
            Delivered with the message id, or Undelivered with the reason
        """
        if not self._bot_token:
            logger.warning(f"No bot token configured for sending message to {chat_id}")
            return Undelivered("bot token not configured")

        payload: dict = {"chat_id": chat_id, "text": text}
        if parse_mode:
            payload["parse_mode"] = parse_mode
        reply_markup = _convert_keyboard_to_dict(keyboard)
        if reply_markup:
            payload["reply_markup"] = reply_markup

        url = f"{self._api_url}/bot{self._bot_token}/sendMessage"
        try:
            response = await self._client.post(url, json=payload, timeout=self._timeout)
        except httpx.TimeoutException:
            logger.warning(f"Timeout sending message to {chat_id}")
            return Undelivered("timeout")
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error sending message to {chat_id}: {type(e).__name__}")
            return Undelivered(f"http error: {type(e).__name__}")

        if response.status_code != 200:
            description = _parse_error_response(response)
            logger.error(f"Telegram API error for {chat_id}: status={response.status_code}, description={description}")
            return Undelivered(description)

        try:
            body = response.json()
        except ValueError:
            return Undelivered("invalid JSON from Bot API")

        message_id = (body.get("result") or {}).get("message_id") if body.get("ok") else None
        if not message_id:
            return Undelivered(body.get("description") or "no message_id in response")

        logger.debug(f"Message {message_id} sent to {chat_id}")
        return Delivered(message_id=message_id)
