"""
Configuration management for the places bot.
Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, SecretStr, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TelegramSettings(BaseModel):
    """Telegram Bot API configuration settings."""

    token: SecretStr = Field(
        default=SecretStr(""),
        validate_default=True,
        description="Bot token issued by @BotFather",
    )
    api_base: str = Field(
        default="https://api.telegram.org",
        description="Base URL for Telegram Bot API requests",
    )

    @field_validator("token")
    def validate_telegram_token(cls, v):
        """Ensure Telegram token is set to a real value."""
        token_value = v.get_secret_value() if isinstance(v, SecretStr) else str(v)

        if not token_value or token_value.strip() == "":
            raise ValueError(
                "Telegram bot token must be set. Please configure PLACEBOT_TELEGRAM__TOKEN environment variable."
            )

        return v

    def method_url(self, method: str) -> str:
        """Full URL for a Bot API method, e.g. ``sendMessage``."""
        return f"{self.api_base.rstrip('/')}/bot{self.token.get_secret_value()}/{method}"


class FoursquareSettings(BaseModel):
    """Foursquare Places API configuration settings."""

    api_key: SecretStr = Field(
        default=SecretStr(""),
        validate_default=True,
        description="Foursquare service API key (bearer)",
    )
    base_url: str = Field(
        default="https://places-api.foursquare.com",
        description="Base URL for Foursquare Places API requests",
    )
    api_version: str = Field(
        default="2025-06-17",
        description="Value sent in the X-Places-Api-Version header",
    )
    radius: int = Field(
        default=5000,
        ge=1,
        le=100000,
        description="Search radius in meters",
    )
    limit: int = Field(
        default=10, ge=1, le=50, description="Maximum number of places per search"
    )

    @field_validator("api_key")
    def validate_foursquare_api_key(cls, v):
        """Ensure Foursquare API key is set to a real value."""
        api_key_value = v.get_secret_value() if isinstance(v, SecretStr) else str(v)

        if not api_key_value or api_key_value.strip() == "":
            raise ValueError(
                "Foursquare API key must be set. Please configure PLACEBOT_FOURSQUARE__API_KEY environment variable."
            )

        return v


class OpenAISettings(BaseModel):
    """OpenAI API configuration for chat completions."""

    api_key: SecretStr = Field(
        default=SecretStr(""),
        validate_default=True,
        description="OpenAI API key for chat completions",
    )
    base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL for OpenAI API requests",
    )
    model: str = Field(
        default="gpt-3.5-turbo", description="Chat completion model"
    )
    max_tokens: int = Field(
        default=150, ge=1, le=4096, description="Output token cap per completion"
    )

    @field_validator("api_key")
    def validate_openai_api_key(cls, v):
        """Ensure OpenAI API key is set to a real value."""
        api_key_value = v.get_secret_value() if isinstance(v, SecretStr) else str(v)

        if not api_key_value or api_key_value.strip() == "":
            raise ValueError(
                "OpenAI API key must be set. Please configure PLACEBOT_OPENAI__API_KEY environment variable."
            )

        return v


class BotSettings(BaseModel):
    """Conversation behavior configuration."""

    default_query: Optional[str] = Field(
        default=None,
        description="Fixed search term used when a location arrives with no pending query",
    )
    fallback: Literal["answer", "prompt"] = Field(
        default="answer",
        description="What to do with non-location text: answer it with the LLM, or ask for a location",
    )

    @field_validator("default_query")
    def blank_default_query_is_none(cls, v):
        """Treat an empty default query as unset."""
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class ServerSettings(BaseModel):
    """Webhook HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3002, ge=1, le=65535, description="Port to bind")
    public_url: Optional[str] = Field(
        default=None,
        description="Externally reachable base URL; the webhook is registered on startup when set",
    )

    @field_validator("public_url")
    def strip_trailing_slash(cls, v):
        """Normalize the public URL so the webhook path can be appended."""
        if v is None or not v.strip():
            return None
        return v.strip().rstrip("/")


class Settings(BaseSettings):
    """Main configuration class for the places bot."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_nested_delimiter="__",
        env_prefix="PLACEBOT_",
    )

    telegram: TelegramSettings = Field(default_factory=TelegramSettings)
    foursquare: FoursquareSettings = Field(default_factory=FoursquareSettings)
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    bot: BotSettings = Field(default_factory=BotSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @property
    def webhook_path(self) -> str:
        """Path the webhook is served on; the token keeps it unguessable."""
        return f"/webhook/{self.telegram.token.get_secret_value()}"

    @property
    def webhook_url(self) -> Optional[str]:
        """Full webhook URL to register, if a public URL is configured."""
        if not self.server.public_url:
            return None
        return f"{self.server.public_url}{self.webhook_path}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
