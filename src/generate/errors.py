from __future__ import annotations


class TalkioError(Exception):
    """Base error; carries the HTTP status and the text shown to the caller."""
    status_code = 500
    public_message = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class InvalidInput(TalkioError):
    status_code = 400
    public_message = "Invalid message"


class MissingCredential(TalkioError):
    """Provider API key absent from configuration."""
    status_code = 500

    def __init__(self, key: str):
        super().__init__(f"Missing {key}")
        self.key = key


class ProviderFailure(TalkioError):
    """Model call failed; detail stays in the server log."""
    status_code = 500
