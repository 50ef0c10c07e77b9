"""Transcription error taxonomy — every failure is terminal for its call."""
from src.constants import ERR_API, ERR_MISSING_CREDENTIAL, ERR_TRANSPORT


class TranscriptionError(Exception):
    """Base class for failures raised by a TranscriptionClient."""


class MissingCredential(TranscriptionError):

    def __init__(self) -> None:
        super().__init__(ERR_MISSING_CREDENTIAL)


class TransportError(TranscriptionError):
    """The request never produced a server response."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(ERR_TRANSPORT % (str(cause) or type(cause).__name__))
        self.cause = cause


class ApiError(TranscriptionError):
    """The server answered with a failure; `message` is its own wording."""

    def __init__(self, message: str) -> None:
        super().__init__(ERR_API % message)
        self.message = message
