"""Download public SSH keys from GitHub or GitLab.

Example:
    >>> from superkeyloader import GitHubKeysApi, fetch_keys
    >>> keys = fetch_keys(GitHubKeysApi(), "biosan")
"""

__version__ = "0.2.0"

# HTTP defaults, overridable through Settings
TIMEOUT = 30
USER_AGENT = f"superkeyloader/{__version__}"

from superkeyloader.errors import (  # noqa: E402
    FetchError,
    InvalidApiResponseError,
    InvalidUsernameError,
    KeyloaderError,
    NetworkUnreachableError,
    NoKeysError,
    TransportStatusError,
)
from superkeyloader.models import ErrorCode, GitHubKey, Provider  # noqa: E402
from superkeyloader.providers import (  # noqa: E402
    GitHubKeysApi,
    GitLabKeysApi,
    KeyProviderProtocol,
)
from superkeyloader.registry import (  # noqa: E402
    KeyProviderRegistry,
    get_default_registry,
)
from superkeyloader.result import error_message, fetch_keys, normalize  # noqa: E402

__all__ = [
    "ErrorCode",
    "FetchError",
    "GitHubKey",
    "GitHubKeysApi",
    "GitLabKeysApi",
    "InvalidApiResponseError",
    "InvalidUsernameError",
    "KeyProviderProtocol",
    "KeyProviderRegistry",
    "KeyloaderError",
    "NetworkUnreachableError",
    "NoKeysError",
    "Provider",
    "TIMEOUT",
    "TransportStatusError",
    "USER_AGENT",
    "__version__",
    "error_message",
    "fetch_keys",
    "get_default_registry",
    "normalize",
]
