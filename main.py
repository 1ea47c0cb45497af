import argparse
import logging
import os
import sys
from dotenv import load_dotenv
from whisper_client import AudioFile, TranscriptionError, TranscriptionRequest, get_client


# Load environment variables
load_dotenv(dotenv_path=".env")

# Configure logging
log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
log_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
)
logger = logging.getLogger("main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Transcribe an audio file with a Whisper API")
    parser.add_argument("path", help="Audio file to transcribe")
    parser.add_argument("--model", default="whisper-large-v3")
    parser.add_argument("--temperature", type=float, default=0.0)
    parser.add_argument("--response-format", default="text")
    parser.add_argument("--language", default="")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    # exit if the api key is not set
    try:
        client = get_client()
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        audio = AudioFile.from_path(args.path)
    except OSError as e:
        logger.error(f"Cannot read audio file {args.path}: {e}")
        return 1

    request = TranscriptionRequest(
        file=audio,
        model=args.model,
        temperature=args.temperature,
        response_format=args.response_format,
        language=args.language,
    )

    try:
        result = client.transcribe(request)
    except TranscriptionError as e:
        logger.error(f"Transcription failed: {e}")
        return 1

    print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
