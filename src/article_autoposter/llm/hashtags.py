"""Hashtag generation for article posts.

The model's reply is trusted as-is; no hashtag syntax validation is done.
"""

import yaml
from functools import lru_cache
from pathlib import Path
from .client import LLMClient
from ..schemas.article import HashtagSet

PROMPT_PATH = Path(__file__).parent / "prompts" / "hashtags.yaml"


@lru_cache()
def load_hashtag_prompt() -> str:
    with open(PROMPT_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)["content"]


class HashtagGenerator:
    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client

    def build_prompt(self, title: str, description: str) -> str:
        return load_hashtag_prompt().format(title=title, description=description)

    def generate(self, title: str, description: str) -> HashtagSet:
        """
        Ask the LLM for 3-5 hashtags describing the article.

        Raises:
            MissingCredentialError, TransportError, DecodeError, EmptyResultError
        """
        prompt = self.build_prompt(title, description)
        return self.llm_client.complete(prompt)
