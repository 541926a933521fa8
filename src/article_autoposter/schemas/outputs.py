"""Pipeline run states and outcome.

A run moves received -> validated -> resolved -> hashtags_ready -> published
-> acknowledged. It may instead end in skipped (URL trigger) or failed.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class Stage(str, Enum):
    RESOLVE = "resolve"
    GENERATE = "generate"
    PUBLISH = "publish"


class PipelineState(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    RESOLVED = "resolved"
    HASHTAGS_READY = "hashtags_ready"
    PUBLISHED = "published"
    ACKNOWLEDGED = "acknowledged"
    SKIPPED = "skipped"
    FAILED = "failed"


class PipelineOutcome(BaseModel):
    identifier: str
    state: PipelineState = PipelineState.RECEIVED
    failed_stage: Optional[Stage] = None
    reason: Optional[str] = None
    post_id: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.state in (PipelineState.PUBLISHED, PipelineState.ACKNOWLEDGED)
