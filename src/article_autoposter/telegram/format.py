"""Telegram message text for pipeline notifications.

Success messages are sent as MarkdownV2, so anything interpolated into them
must be escaped. Failure messages are plain text and need no escaping.
"""

from __future__ import annotations

import re

# Inside `code` spans MarkdownV2 only treats ` and \ as special
_CODE_SPECIAL_RE = re.compile(r"([`\\])")

_FAILURE_ACTIONS = {
    "resolve": "fetch article",
    "generate": "get hashtags for article",
    "publish": "post to X for article",
}


def escape_code_span(text: str) -> str:
    return _CODE_SPECIAL_RE.sub(r"\\\1", text)


def format_success(identifier: str) -> str:
    return f"✅ Successfully posted article with ID: `{escape_code_span(identifier)}`"


def format_failure(stage: str, identifier: str, reason: str) -> str:
    action = _FAILURE_ACTIONS[stage]
    return f"❌ Failed to {action} with ID {identifier}. Reason: {reason}"
