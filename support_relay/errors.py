"""
Support relay errors.

Error codes are the only part of a failure that reaches the client;
everything else stays in the logs.
"""

# Wire error codes
ERROR_UNAUTHORIZED = "unauthorized"
ERROR_EMPTY_QUESTION = "empty_question"
ERROR_SAVE_FAILED = "save_failed"
ERROR_SERVER = "server_error"


class SupportRelayError(Exception):
    """Base class for failures reported to the Mini App as ``{"error": code}``."""

    code: str = ERROR_SERVER
    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.code)
        self.detail = detail


class Unauthorized(SupportRelayError):
    """initData did not verify. The verification reason is never exposed."""

    code = ERROR_UNAUTHORIZED
    status_code = 401


class EmptyQuestion(SupportRelayError):
    """Question is empty after trimming."""

    code = ERROR_EMPTY_QUESTION
    status_code = 400


class SaveFailed(SupportRelayError):
    """The ticket row could not be inserted."""

    code = ERROR_SAVE_FAILED
    status_code = 500


class InternalError(SupportRelayError):
    """Unexpected failure anywhere in the submission flow."""

    code = ERROR_SERVER
    status_code = 500


__all__ = [
    "ERROR_EMPTY_QUESTION",
    "ERROR_SAVE_FAILED",
    "ERROR_SERVER",
    "ERROR_UNAUTHORIZED",
    "EmptyQuestion",
    "InternalError",
    "SaveFailed",
    "SupportRelayError",
    "Unauthorized",
]
