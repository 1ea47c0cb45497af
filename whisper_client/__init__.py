"""Whisper speech-to-text client for OpenAI-compatible transcription APIs."""

import logging
from dataclasses import replace

import httpx

from .base import AudioFile, TranscriptionRequest, TranscriptionResult
from .client import WhisperClient
from .config import DEFAULT_API_URL, ClientConfig
from .errors import (
    APIStatusError,
    DecodeError,
    EmptyResponseError,
    RequestBuildError,
    TranscriptionError,
    TransportError,
    WriteError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "APIStatusError",
    "AudioFile",
    "ClientConfig",
    "DEFAULT_API_URL",
    "DecodeError",
    "EmptyResponseError",
    "RequestBuildError",
    "TranscriptionError",
    "TranscriptionRequest",
    "TranscriptionResult",
    "TransportError",
    "WhisperClient",
    "WriteError",
    "get_client",
]


def get_client(
    api_key: str | None = None,
    api_url: str | None = None,
    http_client: httpx.Client | None = None,
) -> WhisperClient:
    """
    Get a Whisper client instance.

    Args:
        api_key: Bearer token. If None, uses GROQ_API_KEY env var.
        api_url: Endpoint override. If None, uses WHISPER_API_URL env var or the Groq endpoint.
        http_client: Optional httpx.Client to send requests with

    Returns:
        WhisperClient instance

    Raises:
        ValueError: If no API key is given and GROQ_API_KEY is missing
    """
    config = ClientConfig.from_env(api_key=api_key)
    if api_url is not None:
        config = replace(config, api_url=api_url)

    logger.debug("Using Whisper endpoint %s", config.api_url)
    return WhisperClient.from_config(config, http_client=http_client)
