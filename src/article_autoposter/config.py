from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Telegram (trigger transport + notification channel)
    TELEGRAM_BOT_TOKEN: Optional[str] = Field(None, description="Telegram bot token")
    TELEGRAM_CHAT_ID: Optional[str] = Field(None, description="Chat that receives status notifications")
    TELEGRAM_API_BASE: str = "https://api.telegram.org"
    TELEGRAM_WEBHOOK_SECRET: Optional[str] = Field(
        None, description="Expected X-Telegram-Bot-Api-Secret-Token header; unset disables the check"
    )

    # Content API
    ARTICLE_LOOKUP_URL: str = Field(
        "https://viewon.news/notion.php?id={id}", description="Article lookup URL template"
    )
    ARTICLE_PUBLIC_URL: str = Field(
        "https://viewon.news/article.html?id={id}", description="Public article URL template used in posts"
    )

    # OpenRouter
    OPENROUTER_API_KEY: Optional[str] = Field(None, description="OpenRouter API Key")
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    HASHTAG_MODEL: str = "deepseek/deepseek-r1:free"

    # X / Twitter (OAuth 1.0a user context)
    TWITTER_CONSUMER_KEY: Optional[str] = None
    TWITTER_CONSUMER_SECRET: Optional[str] = None
    TWITTER_ACCESS_TOKEN: Optional[str] = None
    TWITTER_ACCESS_SECRET: Optional[str] = None
    TWITTER_API_URL: str = "https://api.twitter.com/2/tweets"

    # None waits for the peer indefinitely
    REQUEST_TIMEOUT_SEC: Optional[float] = None

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def twitter_credentials(self) -> Optional[tuple]:
        """Return the four OAuth values, or None if any of them is unset."""
        values = (
            self.TWITTER_CONSUMER_KEY,
            self.TWITTER_CONSUMER_SECRET,
            self.TWITTER_ACCESS_TOKEN,
            self.TWITTER_ACCESS_SECRET,
        )
        if not all(values):
            return None
        return values

@lru_cache()
def get_settings() -> Settings:
    return Settings()
