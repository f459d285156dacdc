"""Support relay configuration.

Built once at process start and passed explicitly to the services,
so nothing below the app factory reads the environment.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Required environment variables
REQUIRED_ENV_VARS = (
    "TELEGRAM_TOKEN",
    "ADMIN_BOT_TOKEN",
    "TELEGRAM_ADMIN_CHAT_ID",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
)

DEFAULT_TELEGRAM_API_URL = "https://api.telegram.org"
DEFAULT_TELEGRAM_API_TIMEOUT = 10.0


@dataclass(frozen=True)
class SupportRelayConfig:
    """
    Secrets and endpoints for the relay.

    - telegram_token: Mini App bot token, the shared secret for initData
    - admin_bot_token: bot that delivers questions to operators
    - admin_chat_id: operator chat receiving the questions
    """
    telegram_token: str
    admin_bot_token: str
    admin_chat_id: int
    supabase_url: str
    supabase_service_role_key: str
    telegram_api_url: str = DEFAULT_TELEGRAM_API_URL
    telegram_api_timeout: float = DEFAULT_TELEGRAM_API_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SupportRelayConfig":
        """
        Load configuration from environment variables.

        Raises:
            ValueError: if a required variable is missing or malformed
        """
        env = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        try:
            admin_chat_id = int(env["TELEGRAM_ADMIN_CHAT_ID"])
        except ValueError:
            raise ValueError("TELEGRAM_ADMIN_CHAT_ID must be an integer chat id") from None

        try:
            timeout = float(env.get("TELEGRAM_API_TIMEOUT") or DEFAULT_TELEGRAM_API_TIMEOUT)
        except ValueError:
            raise ValueError("TELEGRAM_API_TIMEOUT must be a number of seconds") from None

        return cls(
            telegram_token=env["TELEGRAM_TOKEN"],
            admin_bot_token=env["ADMIN_BOT_TOKEN"],
            admin_chat_id=admin_chat_id,
            supabase_url=env["SUPABASE_URL"],
            supabase_service_role_key=env["SUPABASE_SERVICE_ROLE_KEY"],
            telegram_api_url=(env.get("TELEGRAM_API_URL") or DEFAULT_TELEGRAM_API_URL).rstrip("/"),
            telegram_api_timeout=timeout,
        )

    def __repr__(self) -> str:
        # Keep tokens out of tracebacks and logs
        return (
            f"SupportRelayConfig(admin_chat_id={self.admin_chat_id}, "
            f"supabase_url={self.supabase_url!r}, telegram_api_url={self.telegram_api_url!r})"
        )
