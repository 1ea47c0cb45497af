"""Errors raised by the transcription client."""


class TranscriptionError(Exception):
    """Base class: the transcription did not happen."""


class RequestBuildError(TranscriptionError):
    """The multipart body or HTTP request could not be built."""


class WriteError(RequestBuildError):
    """The audio part was not written in full."""

    def __init__(self, written: int, expected: int):
        self.written = written
        self.expected = expected
        super().__init__(f"Failed to write all file data: request body has {written} of {expected} bytes")


class TransportError(TranscriptionError):
    """The HTTP exchange could not be completed."""


class APIStatusError(TranscriptionError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API request failed with status code: {status_code}")


class EmptyResponseError(TranscriptionError):
    """The API answered 200 with an empty body."""

    def __init__(self):
        super().__init__("Empty response")


class DecodeError(TranscriptionError):
    """The response looked like JSON but could not be decoded."""
