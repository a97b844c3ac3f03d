"""GitHub public SSH keys adapter (REST API v3).

Keys are fetched from `GET <api_url>/users/<username>/keys`:
https://docs.github.com/en/rest/users/keys#list-public-keys-for-a-user
"""

import re

import structlog
from pydantic import TypeAdapter, ValidationError

from superkeyloader import TIMEOUT, USER_AGENT
from superkeyloader.errors import InvalidApiResponseError, InvalidUsernameError
from superkeyloader.hooks import Hooks
from superkeyloader.models import GitHubKey, Provider
from superkeyloader.providers._common import BUILTIN_HOOKS, KeysApiCallContext, get

logger = structlog.get_logger(__name__)

# Max 39 characters, alphanumerical and '-' (case insensitive), no leading or
# trailing '-' and no consecutive hyphens.
# See https://github.com/shinnn/github-username-regex
USERNAME_RE = re.compile(r"^(?=[A-Za-z0-9-]{1,39}$)[A-Za-z0-9](?:-?[A-Za-z0-9])*$")

_keys_adapter = TypeAdapter(list[GitHubKey])


class GitHubKeysApi:
    """GitHub SSH keys API client.

    Args:
        api_url: GitHub API base URL (GitHub Enterprise: https://<host>/api/v3)
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
        hooks: Optional custom hooks, merged after the built-in ones

    Example:
        >>> api = GitHubKeysApi()
        >>> api.get_keys("biosan")
        ['ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQ... from-GH-id-12257919', ...]
    """

    type = Provider.GITHUB

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        timeout: float = TIMEOUT,
        user_agent: str = USER_AGENT,
        hooks: Hooks | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent
        self._hooks = BUILTIN_HOOKS.merge(hooks)

    @staticmethod
    def is_valid_username(username: str) -> bool:
        return USERNAME_RE.fullmatch(username) is not None

    def get_keys(self, username: str, token: str | None = None) -> list[str]:
        """Download the user's public SSH keys.

        Keys keep the API order and are formatted as
        `<SSH_KEY> from-GH-id-<KEY_ID>`, where KEY_ID is GitHub's key id.

        Args:
            username: GitHub username
            token: Optional GitHub token (raises the API rate limit)

        Returns:
            List of key lines, empty if the user has no keys

        Raises:
            InvalidUsernameError: Username is not a valid GitHub username
            InvalidApiResponseError: Response body is not a list of keys
            TransportStatusError: Response status is not 2xx
            NetworkUnreachableError: GitHub could not be reached
        """
        if not self.is_valid_username(username):
            raise InvalidUsernameError(self.type)

        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._user_agent,
        }
        if token:
            headers["Authorization"] = f"token {token}"

        context = KeysApiCallContext(
            provider=self.type,
            username=username,
            url=f"{self.api_url}/users/{username}/keys",
        )
        response = get(context, headers=headers, timeout=self._timeout, hooks=self._hooks)

        try:
            keys = _keys_adapter.validate_json(response.content)
        except ValidationError as e:
            logger.debug(
                "Unable to parse GitHub API response",
                username=username,
                errors=e.errors(include_url=False),
            )
            raise InvalidApiResponseError(self.type) from e

        return [key.to_key_line() for key in keys]
