"""Custom exceptions for credential resolution and authentication.

This module defines exceptions raised before a request ever reaches the
network, when no usable secret can be found for a call.

Example:
    ```python
    from billing_client_core.auth.exceptions import MissingCredentialError

    if not api_key:
        raise MissingCredentialError("API key not found", env_var_name="STRIPE_SECRET_KEY")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class MissingCredentialError(CredentialError):
    """Raised when no credential can be resolved for a call.

    Raised when the caller supplied neither a ``Credential`` nor a
    ``HeaderSet`` carrying one, and the default provider yields nothing.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            client.request("GET", "plans/gold")
        except MissingCredentialError as e:
            print(f"Set {e.env_var_name} or pass a Credential")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize MissingCredentialError.

        Args:
            message: Error message describing what credential is missing.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a configured credential file cannot be read.

    Example:
        ```python
        try:
            secret = provider.get_credential()
        except CredentialFileError as e:
            print(f"Cannot read credential file: {e}")
        ```
    """

    pass
