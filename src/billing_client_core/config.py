"""Client settings.

Settings can be built directly or read from the environment (and a .env
file) with ``ClientSettings.from_env``:

    BILLING_API_BASE_URL   default https://api.stripe.com/v1
    BILLING_API_TIMEOUT    seconds, default 30
    BILLING_API_VERSION    optional API version header value
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from billing_client_core import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.stripe.com/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"billing-client-core/{__version__}"

BASE_URL_ENV_VAR = "BILLING_API_BASE_URL"
TIMEOUT_ENV_VAR = "BILLING_API_TIMEOUT"
API_VERSION_ENV_VAR = "BILLING_API_VERSION"


@dataclass(frozen=True)
class ClientSettings:
    """Transport-level settings for a BillingClient."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_version: str | None = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, dotenv_path: str | None = None, load_env_file: bool = True) -> "ClientSettings":
        """Build settings from environment variables, falling back to defaults.

        Raises:
            ValueError: If BILLING_API_TIMEOUT is not a number.
        """
        if load_env_file:
            load_dotenv(dotenv_path=dotenv_path)

        base_url = os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL

        raw_timeout = os.environ.get(TIMEOUT_ENV_VAR)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}") from None
        else:
            timeout = DEFAULT_TIMEOUT

        settings = cls(
            base_url=base_url,
            timeout=timeout,
            api_version=os.environ.get(API_VERSION_ENV_VAR) or None,
        )
        logger.debug(f"Loaded client settings: base_url={settings.base_url} timeout={settings.timeout}")
        return settings
