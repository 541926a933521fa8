import pytest
from article_autoposter.telegram.format import escape_code_span, format_failure, format_success
from article_autoposter.telegram.parse import is_url_trigger, parse_update
from article_autoposter.errors import TriggerDecodeError


def test_success_message():
    assert format_success("abc123") == "✅ Successfully posted article with ID: `abc123`"


def test_success_message_escapes_code_span():
    """
    WHY: A backtick in the identifier would end the MarkdownV2 code span and make Telegram reject the message.
    HOW: Format an identifier containing ` and \\.
    EXPECTED: Both characters are backslash-escaped.
    """
    assert escape_code_span("a`b\\c") == "a\\`b\\\\c"
    assert format_success("a`b") == "✅ Successfully posted article with ID: `a\\`b`"


@pytest.mark.parametrize("stage,expected", [
    ("resolve", "❌ Failed to fetch article with ID abc. Reason: boom"),
    ("generate", "❌ Failed to get hashtags for article with ID abc. Reason: boom"),
    ("publish", "❌ Failed to post to X for article with ID abc. Reason: boom"),
])
def test_failure_messages(stage, expected):
    assert format_failure(stage, "abc", "boom") == expected


@pytest.mark.parametrize("text,expected", [
    ("http://viewon.news/article.html?id=1", True),
    ("https://evil.example/x", True),
    ("abc123", False),
    ("", False),
    (" https://leading-space.example", False),
    ("ftp://files.example", False),
])
def test_is_url_trigger(text, expected):
    assert is_url_trigger(text) is expected


def test_parse_update_reads_message_text():
    update = parse_update(b'{"update_id": 7, "message": {"message_id": 1, "chat": {"id": 5}, "text": "abc123"}}')
    assert update.update_id == 7
    assert update.message.text == "abc123"


def test_parse_update_without_message_has_empty_text():
    """
    WHY: Telegram sends other update kinds (edits, callbacks) that carry no message.
    HOW: Parse an edited_message update.
    EXPECTED: Decodes fine with empty text.
    """
    update = parse_update(b'{"update_id": 8, "edited_message": {"text": "abc"}}')
    assert update.message.text == ""


@pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b'{"update_id": "x"}', b'{"message": {"text": 5}}'])
def test_parse_update_rejects_malformed(body):
    with pytest.raises(TriggerDecodeError):
        parse_update(body)
