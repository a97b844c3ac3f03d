"""GitLab public SSH keys adapter.

Keys are fetched from the plain text `GET <gitlab_url>/<username>.keys`
endpoint, one key per line.
"""

import re

import structlog

from superkeyloader import TIMEOUT, USER_AGENT
from superkeyloader.errors import InvalidApiResponseError, InvalidUsernameError
from superkeyloader.hooks import Hooks
from superkeyloader.models import Provider
from superkeyloader.providers._common import BUILTIN_HOOKS, KeysApiCallContext, get
from superkeyloader.ssh import is_valid_key_line

logger = structlog.get_logger(__name__)

# Alphanumerical, '.', '-' and '_' (case insensitive). GitLab namespace rules
# are looser than GitHub ones and not documented any further.
USERNAME_RE = re.compile(r"^[A-Za-z0-9._-]+$")


def parse_keys(body: str) -> list[str] | None:
    """Split a `.keys` response into key lines.

    Blank lines are dropped. The response is valid only if ALL remaining
    lines are valid SSH keys.

    Args:
        body: Raw response text

    Returns:
        Key lines in response order, or None if any line is not a valid key
    """
    lines = [line for line in body.strip().split("\n") if line.strip()]
    if not all(is_valid_key_line(line) for line in lines):
        return None
    return lines


class GitLabKeysApi:
    """GitLab SSH keys API client.

    Args:
        gitlab_url: GitLab instance URL
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
        hooks: Optional custom hooks, merged after the built-in ones
    """

    type = Provider.GITLAB

    def __init__(
        self,
        gitlab_url: str = "https://gitlab.com",
        timeout: float = TIMEOUT,
        user_agent: str = USER_AGENT,
        hooks: Hooks | None = None,
    ) -> None:
        self.gitlab_url = gitlab_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent
        self._hooks = BUILTIN_HOOKS.merge(hooks)

    @staticmethod
    def is_valid_username(username: str) -> bool:
        return USERNAME_RE.fullmatch(username) is not None

    def get_keys(self, username: str, token: str | None = None) -> list[str]:
        """Download the user's public SSH keys.

        Key lines are returned exactly as sent by GitLab, in the same order.

        Args:
            username: GitLab username
            token: Optional personal access token or OAuth token

        Returns:
            List of key lines, empty if the user has no keys

        Raises:
            InvalidUsernameError: Username is not a valid GitLab username
            InvalidApiResponseError: A response line is not a valid SSH key
            TransportStatusError: Response status is not 2xx
            NetworkUnreachableError: GitLab could not be reached
        """
        if not self.is_valid_username(username):
            raise InvalidUsernameError(self.type)

        headers = {"User-Agent": self._user_agent}
        if token:
            # OAuth compliant header, works with personal access tokens too
            headers["Authorization"] = f"Bearer {token}"

        context = KeysApiCallContext(
            provider=self.type,
            username=username,
            url=f"{self.gitlab_url}/{username}.keys",
        )
        response = get(context, headers=headers, timeout=self._timeout, hooks=self._hooks)

        keys = parse_keys(response.text)
        if keys is None:
            logger.debug("Invalid GitLab API response", username=username)
            raise InvalidApiResponseError(self.type)
        return keys
