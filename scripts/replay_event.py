import asyncio
import httpx
import json
import time

from article_autoposter.config import get_settings
from article_autoposter.telegram.verify import SECRET_HEADER

settings = get_settings()

URL = f"http://localhost:{settings.PORT}/telegram"
# Sends a fake Telegram update to a locally running server.
# If TELEGRAM_WEBHOOK_SECRET is set the server checks the secret header, so we send it too.

def generate_headers():
    headers = {"Content-Type": "application/json"}
    if settings.TELEGRAM_WEBHOOK_SECRET:
        headers[SECRET_HEADER] = settings.TELEGRAM_WEBHOOK_SECRET
    return headers

async def send_update(text: str):
    payload = {
        "update_id": int(time.time()),
        "message": {
            "message_id": 1,
            "date": int(time.time()),
            "chat": {"id": settings.TELEGRAM_CHAT_ID, "type": "private"},
            "text": text
        }
    }

    body = json.dumps(payload).encode('utf-8')

    async with httpx.AsyncClient(timeout=None) as client:
        print(f"Sending update to {URL}...")
        resp = await client.post(URL, content=body, headers=generate_headers())
        print(f"Status: {resp.status_code}")
        print(f"Response: {resp.text}")

if __name__ == "__main__":
    article_id = input("Enter article ID to post: ").strip()
    if not article_id:
        print("No article ID given.")
    else:
        asyncio.run(send_update(article_id))
