"""Display — abstract output surface the app writes status, progress and results to."""
from abc import ABC, abstractmethod


class Display(ABC):
    @abstractmethod
    async def show_status(self, text: str) -> None: ...

    @abstractmethod
    async def show_error(self, text: str) -> None: ...

    @abstractmethod
    async def clear_error(self) -> None: ...

    @abstractmethod
    async def set_progress(self, percent: int) -> None: ...

    @abstractmethod
    async def show_transcript(self, text: str) -> None: ...

    @abstractmethod
    async def copy_to_clipboard(self, text: str) -> None:
        """Hand the text to the user's clipboard surface. Raises on failure."""
        ...
