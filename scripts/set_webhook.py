#!/usr/bin/env python3
"""
Register the bot's webhook with Telegram.

Usage:
    python scripts/set_webhook.py https://<public-host>
"""
import sys
import httpx

from article_autoposter.config import get_settings

settings = get_settings()

def set_webhook(public_url: str) -> int:
    if not settings.TELEGRAM_BOT_TOKEN:
        print("❌ TELEGRAM_BOT_TOKEN not set")
        return 1

    api_url = f"{settings.TELEGRAM_API_BASE.rstrip('/')}/bot{settings.TELEGRAM_BOT_TOKEN}/setWebhook"
    payload = {
        "url": f"{public_url.rstrip('/')}/telegram",
        "allowed_updates": ["message"],
    }
    if settings.TELEGRAM_WEBHOOK_SECRET:
        payload["secret_token"] = settings.TELEGRAM_WEBHOOK_SECRET

    resp = httpx.post(api_url, json=payload, timeout=30.0)
    print(f"Status: {resp.status_code}")
    print(f"Response: {resp.text}")
    return 0 if resp.status_code == 200 else 1

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(set_webhook(sys.argv[1]))
