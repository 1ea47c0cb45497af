"""
Shared test fixtures and configuration for pytest.
"""
import re
import pytest
import httpx

from whisper_client import AudioFile, TranscriptionRequest


@pytest.fixture
def sample_wav_bytes():
    """Create a minimal WAV file for testing."""
    # Minimal WAV file header + some data
    wav_header = b'RIFF'
    wav_header += b'\x24\x00\x00\x00'  # File size - 8
    wav_header += b'WAVE'
    wav_header += b'fmt '
    wav_header += b'\x10\x00\x00\x00'  # fmt chunk size
    wav_header += b'\x01\x00'  # Audio format (PCM)
    wav_header += b'\x01\x00'  # Number of channels
    wav_header += b'\x44\xac\x00\x00'  # Sample rate (44100)
    wav_header += b'\x88\x58\x01\x00'  # Byte rate
    wav_header += b'\x02\x00'  # Block align
    wav_header += b'\x10\x00'  # Bits per sample
    wav_header += b'data'
    wav_header += b'\x00\x00\x00\x00'  # Data chunk size

    return wav_header


@pytest.fixture
def sample_request(sample_wav_bytes):
    """Transcription request for the sample WAV."""
    return TranscriptionRequest(
        file=AudioFile(data=sample_wav_bytes, name="sample.wav"),
        model="whisper-large-v3",
        temperature=0.1,
        response_format="text",
        language="en",
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, status_code=200, content=b"", headers=None, exc=None):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if exc is not None:
                raise exc
            return httpx.Response(status_code, content=content, headers=headers)

        super().__init__(handler)


@pytest.fixture
def make_transport():
    """Factory for a recording mock transport."""
    return RecordingTransport


def parse_multipart(request):
    """Split a multipart request body into (name, filename, data) tuples."""
    boundary = request.headers["Content-Type"].split("boundary=", 1)[1].encode()
    parts = []
    for chunk in request.content.split(b"--" + boundary)[1:-1]:
        raw_headers, _, data = chunk[2:].partition(b"\r\n\r\n")
        headers = raw_headers.decode()
        name = re.search(r'form-data; name="([^"]*)"', headers).group(1)
        filename = re.search(r'filename="([^"]*)"', headers)
        parts.append((name, filename.group(1) if filename else None, data[:-2]))
    return parts


@pytest.fixture
def parse_form():
    """Multipart body parser for captured requests."""
    return parse_multipart
