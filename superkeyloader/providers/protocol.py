"""Protocol for SSH key providers (GitHub, GitLab, etc.)."""

from typing import Protocol

from superkeyloader.models import Provider


class KeyProviderProtocol(Protocol):
    """Interface every key provider adapter implements.

    Providers share this contract shape only: authentication scheme, response
    format and validation are provider specific.
    """

    type: Provider
    """Provider type (e.g., Provider.GITHUB)"""

    def is_valid_username(self, username: str) -> bool:
        """Check username syntax without any network call.

        Args:
            username: Account name on this provider

        Returns:
            True if the username is acceptable for this provider
        """
        ...

    def get_keys(self, username: str, token: str | None = None) -> list[str]:
        """Fetch the user's public keys as normalized key lines.

        Args:
            username: Account name on this provider
            token: Optional API token

        Returns:
            Key lines in provider order (possibly empty)

        Raises:
            FetchError: Invalid username, invalid response or non-2xx status
            NetworkUnreachableError: Provider could not be reached
        """
        ...
