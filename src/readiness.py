"""Readiness — decides whether a transcription may be submitted."""
from typing import Optional

from src.models import SelectedFile


def evaluate(credential: Optional[str], file: Optional[SelectedFile]) -> bool:
    """True iff a non-blank credential and a selected file are both present."""
    match (credential, file):
        case (str() as key, f) if key.strip() and f is not None:
            return True
        case _:
            return False
