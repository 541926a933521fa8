import hmac
from fastapi import Request, HTTPException
from ..config import Settings

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"

def verify_telegram_secret(request: Request, settings: Settings):
    """
    Verifies the X-Telegram-Bot-Api-Secret-Token header set via setWebhook.
    No-op when TELEGRAM_WEBHOOK_SECRET is not configured.
    Raises HTTPException if missing or wrong.
    """
    expected = settings.TELEGRAM_WEBHOOK_SECRET
    if not expected:
        return

    received = request.headers.get(SECRET_HEADER)
    if not received:
        raise HTTPException(status_code=401, detail="Missing Telegram secret token")

    if not hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8")):
        raise HTTPException(status_code=401, detail="Invalid Telegram secret token")
