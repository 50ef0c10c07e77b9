"""ElevenLabsTranscriptionClient — ElevenLabs speech-to-text over a single multipart POST."""
import logging
import time

import httpx

from src.constants import (
    DEFAULT_MIME_TYPE,
    ELEVENLABS_KEY_HEADER,
    ELEVENLABS_LANGUAGE,
    ELEVENLABS_MODEL_ID,
    ELEVENLABS_STT_URL,
    FIELD_FILE,
    FIELD_LANGUAGE,
    FIELD_MODEL_ID,
    MSG_LOG_REQUEST,
    MSG_LOG_RESPONSE,
    MSG_LOG_TRANSPORT_FAILED,
    PROGRESS_DONE,
    PROGRESS_START,
    RESPONSE_ERROR_FIELD,
    RESPONSE_TEXT_FIELD,
)
from src.models import SelectedFile
from src.transcription.client import OnProgress, TranscriptionClient
from src.transcription.errors import ApiError, MissingCredential, TransportError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Server-provided `error` text when the body carries one, else the status description."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    message = payload.get(RESPONSE_ERROR_FIELD) if isinstance(payload, dict) else None
    match message:
        case str() as text if text:
            return text
        case _:
            return response.reason_phrase


def _transcript_text(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        raise ApiError(response.reason_phrase)
    text = payload.get(RESPONSE_TEXT_FIELD) if isinstance(payload, dict) else None
    match text:
        case str():
            return text
        case _:
            return ""


class ElevenLabsTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def transcribe(
        self,
        file: SelectedFile,
        credential: str,
        on_progress: OnProgress | None = None,
    ) -> str:
        key = (credential or "").strip()
        match key:
            case "":
                raise MissingCredential()
            case _:
                pass

        await self._report(on_progress, PROGRESS_START)
        files = {FIELD_FILE: (file.name, file.data, file.mime_type or DEFAULT_MIME_TYPE)}
        data = {FIELD_MODEL_ID: ELEVENLABS_MODEL_ID, FIELD_LANGUAGE: ELEVENLABS_LANGUAGE}

        logger.info(MSG_LOG_REQUEST, file.name, file.size)
        start = time.time()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    ELEVENLABS_STT_URL,
                    headers={ELEVENLABS_KEY_HEADER: key},
                    files=files,
                    data=data,
                )
        except Exception as exc:
            logger.warning(MSG_LOG_TRANSPORT_FAILED, exc)
            raise TransportError(exc) from exc

        logger.info(MSG_LOG_RESPONSE, response.status_code, time.time() - start)
        await self._report(on_progress, PROGRESS_DONE)

        match response.is_success:
            case True:
                return _transcript_text(response)
            case False:
                raise ApiError(_error_message(response))

    @staticmethod
    async def _report(on_progress: OnProgress | None, percent: int) -> None:
        match on_progress:
            case None:
                pass
            case callback:
                await callback(percent)
