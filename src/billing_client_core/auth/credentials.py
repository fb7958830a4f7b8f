"""Default credential lookup for billing API calls.

When a call carries no explicit ``Credential``, the client asks a
``DefaultCredentialProvider`` for the account owner's secret key. The provider
is handed to the client at construction time and consulted once per public
call; the client never stores what it returns.

Resolution order (highest to lowest priority):
1. Value configured on the provider
2. Environment variable (``STRIPE_SECRET_KEY`` by default)
3. .env file (python-dotenv, loaded into the environment once)
4. File whose path is named by ``STRIPE_SECRET_KEY_FILE``

Example:
    ```python
    from billing_client_core.auth import DefaultCredentialProvider

    provider = DefaultCredentialProvider()
    secret = provider.get_credential()

    # Fixed key, no environment lookup at all
    provider = DefaultCredentialProvider(api_key="sk_test_123", load_dotenv=False)
    ```

Security Considerations:
    - Secrets are never logged (masked with ***)
    - Only source information is logged (env var name, file path)
    - File-based secrets have whitespace stripped
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from billing_client_core.auth.exceptions import CredentialFileError, MissingCredentialError

logger = logging.getLogger(__name__)

DEFAULT_API_KEY_ENV_VAR = "STRIPE_SECRET_KEY"
DEFAULT_API_KEY_FILE_ENV_VAR = "STRIPE_SECRET_KEY_FILE"


class DefaultCredentialProvider:
    """Supply the process-wide default secret key.

    The provider is read-only from the client's point of view. Every call to
    ``get_credential`` re-reads its sources, so a rotated environment value is
    picked up by the next request without rebuilding the client.

    Attributes:
        env_var_name: Environment variable holding the secret.
        file_env_var_name: Environment variable holding a path to a file
            containing the secret.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        env_var_name: str = DEFAULT_API_KEY_ENV_VAR,
        file_env_var_name: str | None = DEFAULT_API_KEY_FILE_ENV_VAR,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        """Initialize the provider.

        Args:
            api_key: Fixed secret. When set, the environment is never read.
            env_var_name: Environment variable checked for the secret.
            file_env_var_name: Environment variable naming a secret file.
                Pass None to disable file lookup.
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file before the first lookup.
        """
        self._api_key = api_key
        self.env_var_name = env_var_name
        self.file_env_var_name = file_env_var_name
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded or not self._load_dotenv_enabled:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def get_credential(self) -> str | None:
        """Return the default secret, or None if no source provides one.

        Raises:
            CredentialFileError: If the secret file env var is set but the
                file cannot be read.
        """
        if self._api_key:
            logger.debug("Resolved default credential from provider configuration: ***")
            return self._api_key

        self._ensure_dotenv_loaded()

        value = os.environ.get(self.env_var_name)
        if value:
            logger.debug(f"Resolved default credential from environment variable '{self.env_var_name}': ***")
            return value

        if self.file_env_var_name:
            path_from_env = os.environ.get(self.file_env_var_name)
            if path_from_env:
                return self._read_file(path_from_env)

        return None

    def require_credential(self) -> str:
        """Return the default secret or raise MissingCredentialError."""
        secret = self.get_credential()
        if not secret:
            error_msg = "No credential supplied and no default credential configured"
            error_msg += f" (checked env var: {self.env_var_name})"
            raise MissingCredentialError(error_msg, env_var_name=self.env_var_name)
        return secret

    def _read_file(self, file_path: str) -> str | None:
        # Expand user home directory and environment variables
        path_obj = Path(os.path.expanduser(os.path.expandvars(file_path)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            raise CredentialFileError(f"Credential file not found: {path_obj}") from None
        except PermissionError:
            raise CredentialFileError(f"Permission denied reading credential file: {path_obj}") from None
        except OSError as e:
            raise CredentialFileError(f"Error reading credential file {path_obj}: {e}") from e

        if not content:
            logger.warning(f"Credential file is empty: {path_obj}")
            return None

        logger.debug(f"Resolved default credential from file: {path_obj} (***)")
        return content
