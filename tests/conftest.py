import pytest
import os
from dotenv import load_dotenv

from article_autoposter.config import Settings
from article_autoposter.schemas.article import ArticleContent, PublishResult
from article_autoposter.telegram.notifier import ParseMode

@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

def _truthy(v: str | None) -> bool:
    return v is not None and v.strip().lower() not in ("", "0", "false", "no")

@pytest.fixture(scope="session")
def allow_integration(_load_env) -> bool:
    # Depends on _load_env to ensure .env is loaded first
    return _truthy(os.getenv("RUN_INTEGRATION_TESTS"))

@pytest.fixture(scope="session")
def openrouter_api_key(_load_env) -> str | None:
    key = os.getenv("OPENROUTER_API_KEY")
    if not key or key == "sk-or-...":
        return None
    return key

def make_settings(**overrides) -> Settings:
    """
    Build Settings with every credential filled in.
    Explicit values win over the process environment, so tests never pick up a real .env.
    """
    values = {
        "TELEGRAM_BOT_TOKEN": "123:TEST",
        "TELEGRAM_CHAT_ID": "-100200",
        "TELEGRAM_API_BASE": "https://telegram.test",
        "TELEGRAM_WEBHOOK_SECRET": None,
        "ARTICLE_LOOKUP_URL": "https://content.test/notion.php?id={id}",
        "ARTICLE_PUBLIC_URL": "https://viewon.news/article.html?id={id}",
        "OPENROUTER_API_KEY": "sk-or-test",
        "OPENROUTER_BASE_URL": "https://llm.test/api/v1",
        "HASHTAG_MODEL": "test/model",
        "TWITTER_CONSUMER_KEY": "ck",
        "TWITTER_CONSUMER_SECRET": "cs",
        "TWITTER_ACCESS_TOKEN": "at",
        "TWITTER_ACCESS_SECRET": "as",
        "TWITTER_API_URL": "https://x.test/2/tweets",
        "REQUEST_TIMEOUT_SEC": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)

@pytest.fixture
def settings() -> Settings:
    return make_settings()

@pytest.fixture
def settings_factory():
    return make_settings

# Fake pipeline collaborators

class FakeNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message: str, parse_mode: ParseMode = ParseMode.PLAIN) -> None:
        self.messages.append((message, parse_mode))

class FakeResolver:
    def __init__(self, article: ArticleContent | None = None, error: Exception | None = None):
        self.article = article or ArticleContent(title="T", description="D", image="img.png")
        self.error = error
        self.calls = []

    def resolve(self, identifier: str) -> ArticleContent:
        self.calls.append(identifier)
        if self.error:
            raise self.error
        return self.article

class FakeHashtagger:
    def __init__(self, hashtags: str = "#a #b #c", error: Exception | None = None):
        self.hashtags = hashtags
        self.error = error
        self.calls = []

    def generate(self, title: str, description: str) -> str:
        self.calls.append((title, description))
        if self.error:
            raise self.error
        return self.hashtags

class FakePublisher:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    def publish(self, article, identifier, hashtags) -> PublishResult:
        self.calls.append((article, identifier, hashtags))
        if self.error:
            raise self.error
        return PublishResult(status_code=201, post_id="1850000000000000000")

@pytest.fixture
def fakes():
    return {
        "resolver": FakeResolver(),
        "hashtagger": FakeHashtagger(),
        "publisher": FakePublisher(),
        "notifier": FakeNotifier(),
    }
