"""Article lookup against the content API.

One GET per identifier, no retries. Errors map to NotFoundError (404),
TransportError (network, other non-200) and DecodeError (bad body).
"""

from typing import Optional
from urllib.parse import quote
import httpx
from pydantic import ValidationError
from ..config import Settings
from ..errors import DecodeError, NotFoundError, TransportError
from ..log import get_logger
from ..schemas.article import ArticleContent

logger = get_logger("resolver")

class ArticleResolver:
    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def lookup_url(self, identifier: str) -> str:
        return self.settings.ARTICLE_LOOKUP_URL.format(id=quote(identifier, safe=""))

    def resolve(self, identifier: str) -> ArticleContent:
        url = self.lookup_url(identifier)
        try:
            with httpx.Client(timeout=self.settings.REQUEST_TIMEOUT_SEC, transport=self.transport) as client:
                resp = client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"could not fetch article: {e}") from e

        if resp.status_code == 404:
            raise NotFoundError(f"article not found (status {resp.status_code})")
        if resp.status_code != 200:
            raise TransportError(f"unexpected status code: {resp.status_code}")

        try:
            return ArticleContent.model_validate_json(resp.content)
        except ValidationError as e:
            raise DecodeError(f"could not decode article data: {e}") from e
