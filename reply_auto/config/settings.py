"""
Helpers for loading configuration and credentials from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv

from reply_auto.errors import ConfigurationError

OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


@dataclass(frozen=True)
class AppConfig:
    """Process-wide configuration, resolved once at startup."""
    openai_api_key: str = ""
    api_url: str = OPENAI_CHAT_COMPLETIONS_URL
    request_timeout: Optional[float] = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)

    def require_api_key(self) -> str:
        """
        Return the OpenAI API key, checking that it is present.

        Returns:
            The configured API key.

        Raises:
            ConfigurationError: If OPENAI_API_KEY was not set.
        """
        if not self.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY is required for classifier calls.")
        return self.openai_api_key


def load_environment(dotenv_path: Optional[str] = ".env") -> None:
    """
    Load environment variables from a .env file and the host environment.

    Falls back to `.env.example` when the requested file does not exist.

    Args:
        dotenv_path: Path to the .env file. Defaults to ".env".

    Returns:
        None. Modifies process environment in-place.
    """
    if not dotenv_path:
        return
    if os.path.isfile(dotenv_path):
        load_dotenv(dotenv_path)
    elif os.path.isfile(".env.example"):
        load_dotenv(".env.example")


def get_api_credentials() -> Dict[str, str]:
    """
    Collect credentials for the OpenAI API.

    Returns:
        A dictionary containing keys sourced from environment variables.
    """
    return {
        "openai_api_key": os.getenv("OPENAI_API_KEY", "").strip(),
    }


def _parse_timeout(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"OPENAI_REQUEST_TIMEOUT must be a number, got {raw!r}.") from exc
    if timeout <= 0:
        raise ConfigurationError(f"OPENAI_REQUEST_TIMEOUT must be positive, got {raw!r}.")
    return timeout


def load_config() -> AppConfig:
    """
    Build the application configuration from the process environment.

    A missing API key is not an error here; it is reported when an analysis
    is attempted.

    Returns:
        An AppConfig snapshot of the current environment.

    Raises:
        ConfigurationError: If OPENAI_REQUEST_TIMEOUT is not a positive number.
    """
    credentials = get_api_credentials()
    return AppConfig(
        openai_api_key=credentials["openai_api_key"],
        api_url=os.getenv("OPENAI_API_URL", "").strip() or OPENAI_CHAT_COMPLETIONS_URL,
        request_timeout=_parse_timeout(os.getenv("OPENAI_REQUEST_TIMEOUT", "")),
    )
