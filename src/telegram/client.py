"""TelegramClient — event-driven host for TranscriberApp via python-telegram-bot."""
import logging
from typing import Awaitable, Callable, Optional

from telegram import Message, Update
from telegram.ext import Application, CommandHandler, ContextTypes
from telegram.ext import MessageHandler as TGMessageHandler
from telegram.ext import filters

from src.app import TranscriberApp
from src.config import Config
from src.constants import (
    CMD_COPY,
    CMD_HELP,
    CMD_KEY,
    CMD_START,
    CMD_STATUS,
    CMD_TRANSCRIBE,
    DEFAULT_FILENAME,
    MSG_BLOCKED_CHAT,
    MSG_DOWNLOAD_FAILED,
    MSG_FILE_DOWNLOAD_FAILED,
    MSG_HELP,
    VOICE_FILENAME,
)
from src.models import SelectedFile
from src.telegram.display import TelegramDisplay

logger = logging.getLogger(__name__)

# handler body signature: (update, context, display) -> None
HandlerBody = Callable[[Update, ContextTypes.DEFAULT_TYPE, TelegramDisplay], Awaitable[None]]

ATTACHMENT_FILTER = filters.AUDIO | filters.VOICE | filters.Document.ALL


def _digits(s: str) -> str:
    return "".join(c for c in s if c.isdigit())


class TelegramClient:

    def __init__(self, config: Config, app: TranscriberApp) -> None:
        self._token = config.telegram_bot_token
        self._allowed_chat_id = config.allowed_chat_id
        self._app = app
        self._application: Optional[Application] = None

    def run(self) -> None:
        self._application = (
            Application.builder().token(self._token).concurrent_updates(True).build()
        )
        self._application.add_handler(CommandHandler(CMD_START, self._guarded(self._on_help)))
        self._application.add_handler(CommandHandler(CMD_HELP, self._guarded(self._on_help)))
        self._application.add_handler(CommandHandler(CMD_KEY, self._guarded(self._on_key)))
        self._application.add_handler(
            CommandHandler(CMD_TRANSCRIBE, self._guarded(self._on_transcribe))
        )
        self._application.add_handler(CommandHandler(CMD_COPY, self._guarded(self._on_copy)))
        self._application.add_handler(
            CommandHandler(CMD_STATUS, self._guarded(self._on_status))
        )
        self._application.add_handler(
            TGMessageHandler(ATTACHMENT_FILTER, self._guarded(self._on_attachment))
        )
        self._application.run_polling()

    # ── helpers (also used in tests) ─────────────────────────────────────────

    def _is_allowed(self, update: Update) -> bool:
        if update.effective_chat is None:
            return False
        incoming = _digits(str(update.effective_chat.id))
        allowed = _digits(self._allowed_chat_id)
        return incoming == allowed

    @staticmethod
    def _key_from_args(args: list[str] | None) -> str:
        return " ".join(args or []).strip()

    @staticmethod
    def _attachment_of(message: Message | None):
        """Return (attachment, file name) for the first audio-bearing part of a message."""
        match message:
            case None:
                return None
            case _:
                pass
        match (message.audio, message.voice, message.document):
            case (None, None, None):
                return None
            case (audio, _, _) if audio is not None:
                return audio, audio.file_name or DEFAULT_FILENAME
            case (None, voice, _) if voice is not None:
                return voice, VOICE_FILENAME
            case (None, None, document):
                return document, document.file_name or DEFAULT_FILENAME

    @staticmethod
    async def _download(message: Message | None) -> Optional[SelectedFile]:
        match TelegramClient._attachment_of(message):
            case None:
                return None
            case (attachment, name):
                tg_file = await attachment.get_file()
                data = bytes(await tg_file.download_as_bytearray())
                return SelectedFile(
                    name=name,
                    size=attachment.file_size or len(data),
                    data=data,
                    mime_type=attachment.mime_type,
                )

    # ── internal handler factory ──────────────────────────────────────────────

    def _guarded(self, body: HandlerBody) -> Callable:
        """Wrap a handler body with the allowed-chat filter and a chat-bound display."""
        async def _handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
            match self._is_allowed(update):
                case False:
                    chat_id = update.effective_chat.id if update.effective_chat else "?"
                    logger.warning(MSG_BLOCKED_CHAT, chat_id)
                    return
                case True:
                    pass
            display = TelegramDisplay(context.bot, str(update.effective_chat.id))
            await body(update, context, display)

        return _handler

    # ── handler bodies ────────────────────────────────────────────────────────

    async def _on_help(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, display: TelegramDisplay
    ) -> None:
        await display.show_status(MSG_HELP)

    async def _on_key(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, display: TelegramDisplay
    ) -> None:
        await self._app.handle_save_key(self._key_from_args(context.args), display)

    async def _on_transcribe(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, display: TelegramDisplay
    ) -> None:
        await self._app.handle_submit(display)

    async def _on_copy(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, display: TelegramDisplay
    ) -> None:
        await self._app.handle_copy(display)

    async def _on_status(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, display: TelegramDisplay
    ) -> None:
        await display.show_status(self._app.status_text())

    async def _on_attachment(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE, display: TelegramDisplay
    ) -> None:
        try:
            selected = await self._download(update.message)
        except Exception:
            logger.exception(MSG_DOWNLOAD_FAILED)
            await display.show_error(MSG_FILE_DOWNLOAD_FAILED)
            return
        match selected:
            case None:
                return
            case file:
                await self._app.handle_files([file], display)
