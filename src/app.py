"""TranscriberApp — top-level event handlers, transport-agnostic.

The host (Telegram here) dispatches user events to these handlers and passes
the Display to write to. All state changes go through the pure transitions in
`src.state`; the transcription call only ever sees a snapshot taken at submit.
"""
import logging

from src.constants import (
    CREDENTIAL_KEY,
    MSG_COMPLETE,
    MSG_COPIED,
    MSG_COPY_FAILED,
    MSG_ERROR,
    MSG_FAILED,
    MSG_KEY_INVALID,
    MSG_KEY_SAVED,
    MSG_LOG_CREDENTIAL_SAVED,
    MSG_LOG_TRANSCRIPTION_FAILED,
    MSG_NOT_READY,
    MSG_NOTHING_TO_COPY,
    MSG_STARTING,
    MSG_STATUS,
    MSG_STATUS_NO_FILE,
    MSG_UPLOADING,
    PROGRESS_DONE,
)
from src.credential_store import CredentialStore
from src.display import Display
from src.models import SelectedFile, first_file
from src.state import (
    AppState,
    begin_submission,
    describe_file,
    fail_submission,
    finish_submission,
    load_credential,
    save_credential,
    select_file,
)
from src.transcription.client import TranscriptionClient
from src.transcription.errors import TranscriptionError

logger = logging.getLogger(__name__)


class TranscriberApp:

    def __init__(self, store: CredentialStore, transcriber: TranscriptionClient) -> None:
        self._store = store
        self._transcriber = transcriber
        self._state = AppState()

    @property
    def state(self) -> AppState:
        return self._state

    def load(self) -> None:
        self._state = load_credential(self._state, self._store.get(CREDENTIAL_KEY))

    # ── credential ────────────────────────────────────────────────────────────

    async def handle_save_key(self, raw: str, display: Display) -> None:
        key = raw.strip()
        match key:
            case "":
                await display.show_error(MSG_KEY_INVALID)
            case _:
                self._store.set(CREDENTIAL_KEY, key)
                self._state = save_credential(self._state, key)
                logger.info(MSG_LOG_CREDENTIAL_SAVED)
                await display.show_status(MSG_KEY_SAVED)

    # ── file selection ────────────────────────────────────────────────────────

    async def handle_files(self, files: list[SelectedFile], display: Display) -> None:
        match first_file(files):
            case None:
                return
            case file:
                self._state = select_file(self._state, file)
                await display.show_status(describe_file(file))
                await display.clear_error()

    # ── submission ────────────────────────────────────────────────────────────

    async def handle_submit(self, display: Display) -> None:
        match self._state.submit_enabled:
            case False:
                await display.show_error(MSG_NOT_READY)
                return
            case True:
                pass

        file, credential = self._state.selected_file, self._state.credential
        self._state = begin_submission(self._state)
        try:
            await display.clear_error()
            await display.show_status(MSG_STARTING)
            await display.show_status(MSG_UPLOADING)
            transcript = await self._transcriber.transcribe(
                file, credential or "", on_progress=display.set_progress
            )
        except TranscriptionError as exc:
            logger.warning(MSG_LOG_TRANSCRIPTION_FAILED, exc)
            self._state = fail_submission(self._state)
            await display.show_error(MSG_ERROR % exc)
            await display.show_status(MSG_FAILED)
            return
        except Exception:
            self._state = fail_submission(self._state)
            raise

        self._state = finish_submission(self._state, transcript)
        await display.show_transcript(transcript)
        await display.show_status(MSG_COMPLETE)
        await display.set_progress(PROGRESS_DONE)

    # ── clipboard ─────────────────────────────────────────────────────────────

    async def handle_copy(self, display: Display) -> None:
        match self._state.copy_enabled:
            case False:
                await display.show_error(MSG_NOTHING_TO_COPY)
                return
            case True:
                pass
        try:
            await display.copy_to_clipboard(self._state.transcript)
        except Exception as exc:
            await display.show_error(MSG_COPY_FAILED % exc)
            return
        await display.show_status(MSG_COPIED)

    # ── status ────────────────────────────────────────────────────────────────

    def status_text(self) -> str:
        state = self._state
        key = "saved" if state.credential else "not set"
        file = describe_file(state.selected_file) if state.selected_file else MSG_STATUS_NO_FILE
        ready = "yes" if state.submit_enabled else "no"
        return MSG_STATUS % (key, file, ready)
