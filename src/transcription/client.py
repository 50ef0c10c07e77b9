"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from src.models import SelectedFile

# on_progress signature: (percent 0..100) -> None
OnProgress = Callable[[int], Awaitable[None]]


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(
        self,
        file: SelectedFile,
        credential: str,
        on_progress: OnProgress | None = None,
    ) -> str:
        """Upload the whole file once and return its transcript. Raises TranscriptionError."""
        ...
