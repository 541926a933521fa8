"""Pydantic schemas for inbound Telegram webhook updates.

Only the fields the pipeline reads are modelled; everything else Telegram
sends is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class TelegramMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str = ""

class TelegramUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: Optional[int] = None
    message: TelegramMessage = Field(default_factory=TelegramMessage)
