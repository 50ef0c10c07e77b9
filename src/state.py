"""AppState — immutable application state and its pure transitions.

Every transition that touches the credential or the selected file re-runs
`evaluate`, so `submit_enabled` is never set independently of readiness.
"""
from dataclasses import dataclass, replace
from typing import Optional

from src.constants import MSG_FILE_SELECTED
from src.models import SelectedFile
from src.readiness import evaluate


@dataclass(frozen=True)
class AppState:
    credential: Optional[str] = None
    selected_file: Optional[SelectedFile] = None
    transcript: str = ""
    submitting: bool = False
    submit_enabled: bool = False
    copy_enabled: bool = False


def _ready(state: AppState) -> bool:
    return not state.submitting and evaluate(state.credential, state.selected_file)


def load_credential(state: AppState, key: Optional[str]) -> AppState:
    """Populate the credential from storage without re-evaluating readiness."""
    return replace(state, credential=key)


def save_credential(state: AppState, key: str) -> AppState:
    updated = replace(state, credential=key.strip())
    return replace(updated, submit_enabled=_ready(updated))


def select_file(state: AppState, file: SelectedFile) -> AppState:
    updated = replace(state, selected_file=file)
    return replace(updated, submit_enabled=_ready(updated))


def begin_submission(state: AppState) -> AppState:
    return replace(
        state,
        transcript="",
        submitting=True,
        submit_enabled=False,
        copy_enabled=False,
    )


def finish_submission(state: AppState, transcript: str) -> AppState:
    updated = replace(state, transcript=transcript, submitting=False, copy_enabled=True)
    return replace(updated, submit_enabled=_ready(updated))


def fail_submission(state: AppState) -> AppState:
    updated = replace(state, submitting=False)
    return replace(updated, submit_enabled=_ready(updated))


def describe_file(file: SelectedFile) -> str:
    return MSG_FILE_SELECTED % (file.name, file.size_mb)
