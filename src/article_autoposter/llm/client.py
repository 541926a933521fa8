"""OpenAI-compatible chat completion client pointed at OpenRouter.

The SDK's built-in retries are disabled: one request per call.
"""

from typing import Optional
import httpx
from openai import OpenAI, APIConnectionError, APIResponseValidationError, APIStatusError
from ..config import Settings
from ..errors import DecodeError, EmptyResultError, MissingCredentialError, TransportError

class LLMClient:
    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        self.settings = settings
        self.http_client = http_client
        self._openai: Optional[OpenAI] = None

    def _client(self) -> OpenAI:
        # Built on first use so a missing key fails the call, not startup
        if not self.settings.OPENROUTER_API_KEY:
            raise MissingCredentialError("OPENROUTER_API_KEY not set")
        if self._openai is None:
            self._openai = OpenAI(
                api_key=self.settings.OPENROUTER_API_KEY,
                base_url=self.settings.OPENROUTER_BASE_URL,
                timeout=self.settings.REQUEST_TIMEOUT_SEC,
                max_retries=0,
                http_client=self.http_client,
            )
        return self._openai

    def complete(self, prompt: str, model: Optional[str] = None) -> str:
        """
        Send a single user message and return the first choice's text verbatim.
        """
        client = self._client()
        try:
            completion = client.chat.completions.create(
                model=model or self.settings.HASHTAG_MODEL,
                messages=[
                    {"role": "user", "content": prompt}
                ],
            )
        except APIStatusError as e:
            raise TransportError(f"received non-200 status from OpenRouter: {e.status_code} {e.response.text}") from e
        except APIConnectionError as e:
            raise TransportError(f"failed to send request to OpenRouter: {e}") from e
        except (APIResponseValidationError, ValueError) as e:
            raise DecodeError(f"failed to decode OpenRouter response: {e}") from e

        try:
            choices = list(completion.choices or [])
            if not choices:
                raise EmptyResultError("no content found in OpenRouter response")
            return choices[0].message.content or ""
        except (AttributeError, TypeError) as e:
            # Non-JSON bodies come back from the SDK as raw text
            raise DecodeError(f"failed to decode OpenRouter response: {e}") from e
