"""Error taxonomy for pipeline stages.

Every failure of an outbound call is raised as a StageError subclass so the
orchestrator can absorb it into a notification. TriggerDecodeError is the only
error that reaches the webhook transport.
"""


class TriggerDecodeError(ValueError):
    """Inbound update body could not be decoded."""


class StageError(Exception):
    kind = "error"


class NotFoundError(StageError):
    kind = "not_found"


class TransportError(StageError):
    kind = "transport"


class DecodeError(StageError):
    kind = "decode"


class MissingCredentialError(StageError):
    kind = "missing_credential"


class EmptyResultError(StageError):
    kind = "empty_result"


class RequestBuildError(StageError):
    kind = "request_build"
