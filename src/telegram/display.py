"""TelegramDisplay — Display implemented as bot messages to a single chat."""
import io
import logging

from telegram import Bot

from src.constants import (
    MSG_EMPTY_TRANSCRIPT,
    MSG_PROGRESS,
    MSG_SEND_FAIL,
    TELEGRAM_MESSAGE_LIMIT,
    TRANSCRIPT_FILENAME,
)
from src.display import Display

logger = logging.getLogger(__name__)


def split_message(text: str, limit: int = TELEGRAM_MESSAGE_LIMIT) -> list[str]:
    """Split text into Telegram-sized pieces, preferring line breaks."""
    match text:
        case "":
            return []
        case _ if len(text) <= limit:
            return [text]
        case _:
            cut = text.rfind("\n", 0, limit)
            match cut > 0:
                case True:
                    return [text[:cut]] + split_message(text[cut + 1:], limit)
                case False:
                    return [text[:limit]] + split_message(text[limit:], limit)


class TelegramDisplay(Display):

    def __init__(self, bot: Bot, chat_id: str) -> None:
        self._bot = bot
        self._chat_id = chat_id
        self._last_progress: int | None = None

    async def _send(self, text: str) -> bool:
        match text.strip():
            case "":
                return False
            case _:
                try:
                    await self._bot.send_message(chat_id=int(self._chat_id), text=text)
                    return True
                except Exception as exc:
                    logger.error(MSG_SEND_FAIL, exc)
                    return False

    async def show_status(self, text: str) -> None:
        await self._send(text)

    async def show_error(self, text: str) -> None:
        await self._send(text)

    async def clear_error(self) -> None:
        # Sent messages stay in the chat history; nothing to clear.
        pass

    async def set_progress(self, percent: int) -> None:
        match percent == self._last_progress:
            case True:
                return
            case False:
                self._last_progress = percent
                await self._send(MSG_PROGRESS % percent)

    async def show_transcript(self, text: str) -> None:
        chunks = split_message(text) if text.strip() else [MSG_EMPTY_TRANSCRIPT]
        for chunk in chunks:
            await self._send(chunk)

    async def copy_to_clipboard(self, text: str) -> None:
        document = io.BytesIO(text.encode("utf-8"))
        document.name = TRANSCRIPT_FILENAME
        await self._bot.send_document(
            chat_id=int(self._chat_id),
            document=document,
            filename=TRANSCRIPT_FILENAME,
        )
