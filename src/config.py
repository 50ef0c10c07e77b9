from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import DEFAULT_CREDENTIAL_STORE


TIMEOUT_ERROR = "TRANSCRIBE_TIMEOUT must be a positive number of seconds"


def _parse_timeout(raw: str) -> Optional[float]:
    match raw:
        case "":
            return None
        case _:
            try:
                return float(raw)
            except ValueError:
                raise ValueError(TIMEOUT_ERROR) from None


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_id: str
    log_level: str
    credential_store_path: str
    transcribe_timeout: Optional[float]

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        token = os.getenv("TELEGRAM_BOT_TOKEN")
        chat_id = os.getenv("ALLOWED_CHAT_ID")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        store_path = os.getenv("CREDENTIAL_STORE_PATH") or DEFAULT_CREDENTIAL_STORE
        raw_timeout = (os.getenv("TRANSCRIBE_TIMEOUT") or "").strip()

        return cls._validate(
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            log_level=log_level,
            credential_store_path=store_path,
            transcribe_timeout=_parse_timeout(raw_timeout),
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        log_level: str,
        credential_store_path: str,
        transcribe_timeout: Optional[float],
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match allowed_chat_id:
            case None | "":
                raise ValueError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass

        match transcribe_timeout:
            case float() as t if t <= 0:
                raise ValueError(TIMEOUT_ERROR)
            case _:
                pass

        return Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            log_level=log_level,
            credential_store_path=credential_store_path,
            transcribe_timeout=transcribe_timeout,
        )
