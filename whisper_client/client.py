"""Whisper transcription client for OpenAI-compatible REST APIs (Groq by default)."""

import logging

import httpx

from .base import TranscriptionRequest, TranscriptionResult
from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS, ClientConfig
from .errors import (
    APIStatusError,
    DecodeError,
    EmptyResponseError,
    RequestBuildError,
    TransportError,
    WriteError,
)

logger = logging.getLogger(__name__)


class WhisperClient:
    """Transcription client using the /audio/transcriptions REST endpoint."""

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        # Plain attribute: reassigning it redirects subsequent calls.
        self.api_url = api_url
        self.timeout = timeout
        self.http_client = http_client

    @classmethod
    def from_config(cls, config: ClientConfig, http_client: httpx.Client | None = None) -> "WhisperClient":
        return cls(
            api_key=config.api_key,
            api_url=config.api_url,
            timeout=config.timeout,
            http_client=http_client,
        )

    def transcribe(self, request: TranscriptionRequest) -> TranscriptionResult:
        """
        Transcribe an audio file.

        Even when ``response_format`` is ``"text"`` the result is a mapping;
        the plain text body is stored under ``result["text"]``.

        Args:
            request: Audio file plus model, temperature, response format and language

        Returns:
            TranscriptionResult with every key the API returned

        Raises:
            RequestBuildError: The request body could not be built
            WriteError: The audio data was not written in full
            TransportError: The HTTP exchange failed
            APIStatusError: The API returned a status other than 200
            EmptyResponseError: The API returned an empty body
            DecodeError: The body started with "{" but is not valid JSON
        """
        if self.http_client is not None:
            return self._transcribe(self.http_client, request)

        with httpx.Client(timeout=self.timeout) as client:
            return self._transcribe(client, request)

    def _transcribe(self, client: httpx.Client, request: TranscriptionRequest) -> TranscriptionResult:
        http_request = self._build_request(client, request)

        logger.debug(
            "Whisper request: url=%s model=%s response_format=%s language=%r file=%s size=%s",
            self.api_url,
            request.model,
            request.response_format,
            request.language,
            request.file.name,
            http_request.headers.get("Content-Length"),
        )

        try:
            response = client.send(http_request)
        except httpx.RequestError as e:
            raise TransportError(f"Failed to send request: {e}") from e

        logger.debug(
            "Whisper response: status=%s content_type=%s body_preview=%s",
            response.status_code,
            response.headers.get("Content-Type"),
            response.text[:500],
        )

        return self._parse_response(response)

    def _build_request(self, client: httpx.Client, request: TranscriptionRequest) -> httpx.Request:
        data = request.file.data
        # httpx treats anything but str/bytes as a file object.
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)

        # Passed as an ordered list so the file part precedes the text fields.
        files = [
            ("file", (request.file.name, data)),
            ("model", (None, request.model.encode("utf-8"))),
            ("temperature", (None, f"{request.temperature:f}".encode("utf-8"))),
            ("response_format", (None, request.response_format.encode("utf-8"))),
            ("language", (None, request.language.encode("utf-8"))),
        ]
        headers = {
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            http_request = client.build_request("POST", self.api_url, headers=headers, files=files)
            body = http_request.read()
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"Failed to create request: {e}") from e
        except OSError as e:
            raise RequestBuildError(f"Failed to write file data: {e}") from e

        declared = http_request.headers.get("Content-Length")
        if declared is not None and len(body) != int(declared):
            raise WriteError(written=len(body), expected=int(declared))

        return http_request

    def _parse_response(self, response: httpx.Response) -> TranscriptionResult:
        if response.status_code != httpx.codes.OK:
            logger.error("Whisper API request failed: status=%s url=%s", response.status_code, self.api_url)
            raise APIStatusError(response.status_code)

        content = response.content
        if not content:
            raise EmptyResponseError()

        # The API answers response_format="text" with a bare body instead of JSON.
        if not content.startswith(b"{"):
            return TranscriptionResult(text=response.text)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Failed to decode Whisper response: %s", response.text[:500])
            raise DecodeError(f"Failed to decode response: {e}") from e

        return TranscriptionResult(payload)
