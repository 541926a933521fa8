import pytest
from fastapi import Request, HTTPException
from article_autoposter.telegram.verify import verify_telegram_secret


def _request(headers):
    scope = {
        "type": "http",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


def test_verify_valid_secret(settings_factory):
    """
    WHY: Ensure we accept updates carrying the secret we registered with setWebhook.
    HOW: Send the matching X-Telegram-Bot-Api-Secret-Token header.
    EXPECTED: Function completes without raising HTTPException.
    """
    settings = settings_factory(TELEGRAM_WEBHOOK_SECRET="s3cret")

    # Should not raise
    verify_telegram_secret(_request({"X-Telegram-Bot-Api-Secret-Token": "s3cret"}), settings)


def test_verify_invalid_secret(settings_factory):
    """
    WHY: Reject forged updates (security).
    HOW: Send a wrong secret.
    EXPECTED: Raise HTTPException 401.
    """
    settings = settings_factory(TELEGRAM_WEBHOOK_SECRET="s3cret")

    with pytest.raises(HTTPException) as exc:
        verify_telegram_secret(_request({"X-Telegram-Bot-Api-Secret-Token": "guess"}), settings)
    assert exc.value.status_code == 401


def test_verify_missing_secret_header(settings_factory):
    settings = settings_factory(TELEGRAM_WEBHOOK_SECRET="s3cret")

    with pytest.raises(HTTPException) as exc:
        verify_telegram_secret(_request({}), settings)
    assert exc.value.status_code == 401


def test_verify_disabled_when_unset(settings):
    """
    WHY: The check is opt-in; deployments without a secret must keep working.
    HOW: No secret configured, no header sent.
    EXPECTED: No exception.
    """
    verify_telegram_secret(_request({}), settings)
