"""Key provider adapters."""

from superkeyloader.providers.github import GitHubKeysApi
from superkeyloader.providers.gitlab import GitLabKeysApi
from superkeyloader.providers.protocol import KeyProviderProtocol

__all__ = [
    "GitHubKeysApi",
    "GitLabKeysApi",
    "KeyProviderProtocol",
]
