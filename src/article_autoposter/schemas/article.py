"""Pydantic schemas for article content and publish results."""

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

# Hashtag string returned by the LLM, used verbatim (e.g. "#ai #news #tech").
HashtagSet = str

class ArticleContent(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    description: str = ""
    image: str = ""

    @field_validator("title", "description", "image", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # The content API sends null for unset fields
        return "" if value is None else value

class PublishResult(BaseModel):
    status_code: int
    post_id: Optional[str] = None
