"""Pydantic models and enums for provider key data."""

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Provider(StrEnum):
    GITHUB = "github"
    GITLAB = "gitlab"

    @property
    def display_name(self) -> str:
        """Human readable provider name (e.g., "GitHub")."""
        return {Provider.GITHUB: "GitHub", Provider.GITLAB: "GitLab"}[self]


class ErrorCode(IntEnum):
    """Legacy numeric codes for internal validation failures.

    Kept stable for scripts parsing the command output. HTTP status codes are
    never part of this enum.
    """

    GITHUB_INVALID_USERNAME = 1001
    GITHUB_INVALID_API_RESPONSE = 1002
    GITLAB_INVALID_USERNAME = 1003
    GITLAB_INVALID_API_RESPONSE = 1004


class GitHubKey(BaseModel):
    """Single entry of the GitHub `GET /users/<username>/keys` response.

    Strict types: a string `id` or a numeric `key` is a malformed response,
    not something to coerce.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(..., ge=0, le=2**64 - 1, description="GitHub key id")
    key: str = Field(..., description="Public key line (type and base64 data)")

    def to_key_line(self) -> str:
        return f"{self.key} from-GH-id-{self.id}"
