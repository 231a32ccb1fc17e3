"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_INSTANCE_URL, GitLabConfig


class Settings(BaseSettings):
    """Settings for the GitLab repository reader."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gitlab_instance_url: str = DEFAULT_INSTANCE_URL
    gitlab_access_token: str | None = None

    def to_config(self) -> GitLabConfig:
        """Build the per-call config record. Requires a token."""
        if not self.gitlab_access_token:
            raise RuntimeError("GITLAB_ACCESS_TOKEN must be set")
        return GitLabConfig(base_url=self.gitlab_instance_url, token=self.gitlab_access_token)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
