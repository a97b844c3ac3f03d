"""Turn provider fetch outcomes into keys or user-facing errors.

This is the only place where typed fetch errors become messages.
"""

from collections.abc import Sequence

from superkeyloader.errors import (
    FetchError,
    InvalidApiResponseError,
    InvalidUsernameError,
    KeyloaderError,
    NoKeysError,
    TransportStatusError,
)
from superkeyloader.models import Provider
from superkeyloader.providers.protocol import KeyProviderProtocol

ISSUES_URL = "https://github.com/biosan/superkeyloader/issues"

USERNAME_RULES = {
    Provider.GITHUB: (
        "up to 39 alphanumeric characters or single hyphens, "
        "cannot begin or end with a hyphen"
    ),
    Provider.GITLAB: "alphanumeric characters, '.', '-' and '_'",
}


def error_message(error: FetchError) -> str:
    """User-facing message for a fetch error.

    A 404 means the user does not exist, while an invalid response is most
    likely a bug: the two messages stay distinct.
    """
    match error:
        case TransportStatusError(status_code=404):
            return "Wrong username, doesn't exist"
        case TransportStatusError(status_code=status_code):
            return f"API response code: {status_code}"
        case InvalidApiResponseError(provider=provider):
            return f"Invalid {provider.display_name} API response"
        case InvalidUsernameError(provider=provider):
            return (
                f"Invalid username. Username isn't allowed on "
                f"{provider.display_name} ({USERNAME_RULES[provider]}). "
                f"If you think this is a bug, please open an issue at {ISSUES_URL}"
            )
    msg = f"Unhandled fetch error: {error!r}"
    raise TypeError(msg)


def normalize(result: Sequence[str] | FetchError) -> list[str]:
    """Check a fetch result.

    Args:
        result: Keys returned by a provider, or the error it raised

    Returns:
        The keys, unchanged

    Raises:
        NoKeysError: The key list is empty
        KeyloaderError: The fetch failed, with a user-facing message
    """
    if isinstance(result, FetchError):
        raise KeyloaderError(error_message(result)) from result
    if not result:
        raise NoKeysError("User has no SSH keys available")
    return list(result)


def fetch_keys(
    provider: KeyProviderProtocol, username: str, token: str | None = None
) -> list[str]:
    """Fetch keys with `provider` and normalize the outcome.

    Raises:
        NoKeysError: The user has no keys
        KeyloaderError: The fetch failed, with a user-facing message
        NetworkUnreachableError: The provider could not be reached
    """
    try:
        keys = provider.get_keys(username, token)
    except FetchError as e:
        return normalize(e)
    return normalize(keys)
