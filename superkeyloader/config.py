"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from superkeyloader import TIMEOUT, USER_AGENT
from superkeyloader.models import Provider


class Settings(BaseSettings):
    """Settings from SUPERKEYLOADER_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUPERKEYLOADER_",
        extra="ignore",
    )

    # Providers
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub API URL (for GitHub Enterprise: https://<host>/api/v3)",
    )
    gitlab_url: str = Field(
        default="https://gitlab.com",
        description="GitLab instance URL",
    )
    github_token: str | None = Field(
        default=None,
        description="GitHub token, used when --token is not given",
    )
    gitlab_token: str | None = Field(
        default=None,
        description="GitLab token, used when --token is not given",
    )
    timeout: float = Field(
        default=TIMEOUT,
        description="HTTP request timeout in seconds",
    )
    user_agent: str = Field(default=USER_AGENT, description="HTTP User-Agent")

    # Output
    authorized_keys_path: str = Field(
        default="~/.ssh/authorized_keys",
        description="File keys are appended to",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format_json: bool = Field(
        default=False,
        description="Use JSON logging format instead of human readable logs",
    )

    def token_for(self, provider: Provider) -> str | None:
        """Configured token for the given provider."""
        match provider:
            case Provider.GITHUB:
                return self.github_token
            case Provider.GITLAB:
                return self.gitlab_token
