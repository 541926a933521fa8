"""Best-effort status notifications to the Telegram chat.

notify() never raises: missing credentials, network failures and non-200
responses are logged and dropped.
"""

from enum import Enum
from typing import Optional
import httpx
from ..config import Settings
from ..log import get_logger

logger = get_logger("notifier")

class ParseMode(str, Enum):
    PLAIN = "plain"
    MARKDOWN_V2 = "MarkdownV2"

class TelegramNotifier:
    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def _method_url(self, method: str) -> str:
        base = self.settings.TELEGRAM_API_BASE.rstrip("/")
        return f"{base}/bot{self.settings.TELEGRAM_BOT_TOKEN}/{method}"

    def build_payload(self, message: str, parse_mode: ParseMode = ParseMode.PLAIN) -> dict:
        payload = {
            "chat_id": self.settings.TELEGRAM_CHAT_ID,
            "text": message,
        }
        # parse_mode is omitted entirely for plain text
        if parse_mode is not ParseMode.PLAIN:
            payload["parse_mode"] = parse_mode.value
        return payload

    def notify(self, message: str, parse_mode: ParseMode = ParseMode.PLAIN) -> None:
        if not self.settings.TELEGRAM_BOT_TOKEN or not self.settings.TELEGRAM_CHAT_ID:
            logger.warning("TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID not set. Cannot send notification.")
            return

        try:
            payload = self.build_payload(message, parse_mode)
            with httpx.Client(timeout=self.settings.REQUEST_TIMEOUT_SEC, transport=self.transport) as client:
                resp = client.post(self._method_url("sendMessage"), json=payload)
        except Exception as e:
            # Bad URLs (httpx.InvalidURL) are not HTTPError; nothing may escape
            logger.warning(f"Failed to send notification to Telegram: {e}")
            return

        if resp.status_code != 200:
            logger.warning(f"Telegram API returned non-200 status for notification: {resp.text}")
            return

        logger.info(f"Sent notification to Telegram chat: {message}")
