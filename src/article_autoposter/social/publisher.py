"""Publishing article posts to X (Twitter API v2).

Requests are signed with OAuth 1.0a user context. Only 201 Created counts as
success; any other status is a failure carrying the response body.
"""

from typing import Callable, Optional, Tuple
import httpx
from authlib.integrations.httpx_client import OAuth1Client
from ..config import Settings
from ..errors import MissingCredentialError, RequestBuildError, TransportError
from ..log import get_logger
from ..schemas.article import ArticleContent, HashtagSet, PublishResult

logger = get_logger("publisher")

Credentials = Tuple[str, str, str, str]

class Publisher:
    def __init__(
        self,
        settings: Settings,
        client_factory: Optional[Callable[[Credentials], httpx.Client]] = None,
    ):
        self.settings = settings
        self.client_factory = client_factory or self._oauth_client

    def _oauth_client(self, credentials: Credentials) -> httpx.Client:
        consumer_key, consumer_secret, access_token, access_secret = credentials
        return OAuth1Client(
            consumer_key,
            consumer_secret,
            token=access_token,
            token_secret=access_secret,
            timeout=self.settings.REQUEST_TIMEOUT_SEC,
        )

    def article_url(self, identifier: str) -> str:
        return self.settings.ARTICLE_PUBLIC_URL.format(id=identifier)

    def compose_post_text(self, article: ArticleContent, identifier: str, hashtags: HashtagSet) -> str:
        return f"{article.title}\n{hashtags}\n\n{self.article_url(identifier)}"

    def publish(self, article: ArticleContent, identifier: str, hashtags: HashtagSet) -> PublishResult:
        credentials = self.settings.twitter_credentials()
        if credentials is None:
            raise MissingCredentialError("twitter api credentials not set")

        payload = {"text": self.compose_post_text(article, identifier, hashtags)}

        try:
            client = self.client_factory(credentials)
        except (ValueError, TypeError) as e:
            raise RequestBuildError(f"failed to create client: {e}") from e

        with client:
            try:
                request = client.build_request("POST", self.settings.TWITTER_API_URL, json=payload)
            except (httpx.InvalidURL, ValueError, TypeError) as e:
                raise RequestBuildError(f"failed to create request: {e}") from e

            try:
                resp = client.send(request)
            except httpx.HTTPError as e:
                raise TransportError(f"failed to send request: {e}") from e
            except ValueError as e:
                # raised while signing
                raise RequestBuildError(f"failed to sign request: {e}") from e

        if resp.status_code != 201:
            raise TransportError(f"received non-201 status code: {resp.status_code}\nResponse: {resp.text}")

        post_id = None
        try:
            post_id = resp.json().get("data", {}).get("id")
            if post_id is not None:
                post_id = str(post_id)
        except (ValueError, AttributeError):
            logger.warning(f"Post created but response body was not understood: {resp.text}")

        logger.info(f"Post created on X (id={post_id})")
        return PublishResult(status_code=resp.status_code, post_id=post_id)
