"""Single-method interfaces for each external call made by the pipeline.

The concrete clients (ArticleResolver, HashtagGenerator, Publisher,
TelegramNotifier) satisfy these structurally; tests pass fakes.
"""

from __future__ import annotations

from typing import Protocol

from ..schemas.article import ArticleContent, HashtagSet, PublishResult
from ..telegram.notifier import ParseMode


class ArticleSource(Protocol):
    def resolve(self, identifier: str) -> ArticleContent: ...


class HashtagSource(Protocol):
    def generate(self, title: str, description: str) -> HashtagSet: ...


class PostPublisher(Protocol):
    def publish(self, article: ArticleContent, identifier: str, hashtags: HashtagSet) -> PublishResult: ...


class Notifier(Protocol):
    def notify(self, message: str, parse_mode: ParseMode = ParseMode.PLAIN) -> None: ...
