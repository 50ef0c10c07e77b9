"""Entry point — wires Config → CredentialStore → TranscriberApp → TelegramClient."""
import logging
from pathlib import Path

from rich.logging import RichHandler

from src.app import TranscriberApp
from src.config import Config
from src.constants import MSG_BOT_STARTING
from src.credential_store import CredentialStore
from src.telegram.client import TelegramClient
from src.transcription.elevenlabs import ElevenLabsTranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))
    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    store = CredentialStore(Path(config.credential_store_path))
    transcriber = ElevenLabsTranscriptionClient(timeout=config.transcribe_timeout)
    app = TranscriberApp(store, transcriber)
    app.load()

    client = TelegramClient(config, app)
    client.run()


if __name__ == "__main__":
    main()
