"""Exception taxonomy for key retrieval.

FetchError subclasses are raised by provider adapters. They are turned into
user-facing messages by superkeyloader.result, never inside the adapters.
"""

from abc import ABC, abstractmethod

from superkeyloader.models import ErrorCode, Provider


class KeyloaderError(Exception):
    """Base exception for superkeyloader. The message is user-facing."""


class FetchError(KeyloaderError, ABC):
    """Typed failure of a single provider fetch."""

    @property
    @abstractmethod
    def code(self) -> int:
        """Numeric code for serialization (legacy code or HTTP status)."""


class InvalidUsernameError(FetchError):
    def __init__(self, provider: Provider) -> None:
        self.provider = provider
        super().__init__(f"Invalid {provider.display_name} username")

    @property
    def code(self) -> int:
        if self.provider is Provider.GITHUB:
            return ErrorCode.GITHUB_INVALID_USERNAME
        return ErrorCode.GITLAB_INVALID_USERNAME


class InvalidApiResponseError(FetchError):
    def __init__(self, provider: Provider) -> None:
        self.provider = provider
        super().__init__(f"Invalid {provider.display_name} API response")

    @property
    def code(self) -> int:
        if self.provider is Provider.GITHUB:
            return ErrorCode.GITHUB_INVALID_API_RESPONSE
        return ErrorCode.GITLAB_INVALID_API_RESPONSE


class TransportStatusError(FetchError):
    """Provider answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API response code: {status_code}")

    @property
    def code(self) -> int:
        return self.status_code


class NetworkUnreachableError(KeyloaderError):
    """Connection, DNS or timeout failure. No HTTP response was received."""


class NoKeysError(KeyloaderError):
    """Fetch succeeded but the user has no public keys."""
