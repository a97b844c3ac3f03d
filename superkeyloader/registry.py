"""Key provider registry.

Maps each Provider to the adapter handling it.
"""

from superkeyloader.config import Settings
from superkeyloader.models import Provider
from superkeyloader.providers import GitHubKeysApi, GitLabKeysApi
from superkeyloader.providers.protocol import KeyProviderProtocol


class KeyProviderRegistry:
    """Registry for key providers.

    Example:
        >>> registry = KeyProviderRegistry()
        >>> registry.register(GitHubKeysApi())
        >>> registry.get_provider(Provider.GITHUB).type
        <Provider.GITHUB: 'github'>
    """

    def __init__(self) -> None:
        self._providers: dict[Provider, KeyProviderProtocol] = {}

    def register(self, provider: KeyProviderProtocol) -> None:
        """Register a key provider.

        Raises:
            ValueError: If a provider of the same type is already registered
        """
        if provider.type in self._providers:
            msg = f"Provider already registered: {provider.type.value}"
            raise ValueError(msg)

        self._providers[provider.type] = provider

    def get_provider(self, provider_type: Provider) -> KeyProviderProtocol:
        """Get key provider by type.

        Raises:
            ValueError: If provider not found
        """
        if provider_type not in self._providers:
            msg = f"Provider not found: {provider_type.value}"
            raise ValueError(msg)

        return self._providers[provider_type]

    def list_providers(self) -> list[Provider]:
        return list(self._providers.keys())


def get_default_registry(settings: Settings | None = None) -> KeyProviderRegistry:
    """Create registry with the GitHub and GitLab providers.

    Args:
        settings: Settings with API URLs and timeout (default: from environment)
    """
    settings = settings or Settings()
    registry = KeyProviderRegistry()
    registry.register(
        GitHubKeysApi(
            api_url=settings.github_api_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )
    )
    registry.register(
        GitLabKeysApi(
            gitlab_url=settings.gitlab_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )
    )
    return registry
