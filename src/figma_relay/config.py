"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from figma_relay.models.rules import ReplaceRule

DEFAULT_REPLY_IMAGE_URL = "https://media1.tenor.com/m/Be-YL9ewKnMAAAAC/diseñadorcliente4.gif"
DEFAULT_THREAD_IMAGE_URL = "https://media1.tenor.com/m/ehqokSFplPIAAAAd/design-designer.gif"
DEFAULT_VERSION_IMAGE_URL = (
    "https://i.namu.wiki/i/vcPIh-2LKgTCpeKuzLpVs1uGs9RHtZDezU438Wk5za0W18Zf_A9k7OO9kAz4yzWW31KjB2Talrzbldmvjv5KGw.gif"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Frozen after construction: the same instance is shared by every request.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Discord
    discord_webhook_url: str = ""

    # Figma
    figma_api_token: str = ""
    figma_api_base: str = "https://api.figma.com/v1"
    figma_design_base: str = "https://www.figma.com/design"
    figma_webhook_passcode: str | None = None

    # Relay behaviour
    replace_words: list[ReplaceRule] = []  # REPLACE_WORDS='[{"word": "@Designer", "replacement": "<@&1>"}]'
    project_name: str | None = None  # Only relay events for this file name when set

    # Embed images
    reply_image_url: str = DEFAULT_REPLY_IMAGE_URL
    thread_image_url: str = DEFAULT_THREAD_IMAGE_URL
    version_image_url: str = DEFAULT_VERSION_IMAGE_URL

    # Timeouts (seconds)
    request_timeout_seconds: float = 10.0
    event_timeout_seconds: float = 30.0

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
