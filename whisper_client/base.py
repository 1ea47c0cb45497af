"""Value types for transcription requests and results."""

import os
from dataclasses import dataclass
from typing import Any, BinaryIO


@dataclass(frozen=True)
class AudioFile:
    """Audio payload sent as the multipart ``file`` part."""
    data: bytes | bytearray | memoryview | BinaryIO
    name: str

    @classmethod
    def from_path(cls, path: str) -> "AudioFile":
        with open(path, "rb") as f:
            data = f.read()
        return cls(data=data, name=os.path.basename(path))


@dataclass(frozen=True)
class TranscriptionRequest:
    """Parameters for a single transcription call."""
    file: AudioFile
    model: str = "whisper-large-v3"
    temperature: float = 0.0
    response_format: str = "json"
    language: str = ""


class TranscriptionResult(dict[str, Any]):
    """
    Parsed transcription response.

    JSON responses keep every key the API returned (including provider
    extras such as ``x_groq``). Plain text responses are stored under
    ``"text"``, so ``result["text"]`` works for either response format.
    """

    @property
    def text(self) -> str:
        return self.get("text", "")
