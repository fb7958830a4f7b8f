"""Tests for credential resolution exceptions."""

import pytest

from billing_client_core.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    MissingCredentialError,
)


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_exception_message(self):
        """Test that exception message is preserved."""
        with pytest.raises(CredentialError) as exc_info:
            raise CredentialError("Custom error message")

        assert str(exc_info.value) == "Custom error message"


class TestMissingCredentialError:
    """Test MissingCredentialError exception."""

    def test_is_credential_error(self):
        """Test that MissingCredentialError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise MissingCredentialError("Test error")

    def test_env_var_name_attribute(self):
        """Test that env_var_name attribute is set."""
        with pytest.raises(MissingCredentialError) as exc_info:
            raise MissingCredentialError("Test error", env_var_name="STRIPE_SECRET_KEY")

        assert exc_info.value.env_var_name == "STRIPE_SECRET_KEY"

    def test_env_var_name_optional(self):
        """Test that env_var_name is optional."""
        error = MissingCredentialError("Test error")
        assert error.env_var_name is None


class TestCredentialFileError:
    """Test CredentialFileError exception."""

    def test_is_credential_error(self):
        """Test that CredentialFileError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialFileError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        error = CredentialFileError("File not found: /path/to/file")
        assert str(error) == "File not found: /path/to/file"
