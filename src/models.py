from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SelectedFile:
    name: str
    size: int
    data: bytes
    mime_type: Optional[str] = None

    @property
    def size_mb(self) -> float:
        return self.size / (1024 * 1024)


def first_file(files: list[SelectedFile]) -> Optional[SelectedFile]:
    """Multi-file selections collapse to the first file."""
    match files:
        case [first, *_]:
            return first
        case _:
            return None
