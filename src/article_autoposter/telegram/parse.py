from pydantic import ValidationError
from ..errors import TriggerDecodeError
from ..schemas.telegram import TelegramUpdate

URL_PREFIXES = ("http://", "https://")

def parse_update(body: bytes) -> TelegramUpdate:
    """
    Decode a raw webhook body into a TelegramUpdate.
    Raises TriggerDecodeError if the body is not JSON or has the wrong shape.
    Updates without a message (edits, callbacks) decode to empty text.
    """
    try:
        return TelegramUpdate.model_validate_json(body)
    except ValidationError as e:
        raise TriggerDecodeError(str(e)) from e

def is_url_trigger(text: str) -> bool:
    """
    True if the message is a link rather than an article ID.
    Users sometimes paste the full article URL; those can never be resolved.
    """
    return text.startswith(URL_PREFIXES)
