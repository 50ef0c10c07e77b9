"""CredentialStore — JSON-file key/value persistence for the saved API key."""
import json
import logging
from pathlib import Path

from src.constants import DEFAULT_CREDENTIAL_STORE

logger = logging.getLogger(__name__)


class CredentialStore:

    def __init__(self, path: Path = Path(DEFAULT_CREDENTIAL_STORE)):
        self._path = path
        self._store: dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        match self._path.exists():
            case True:
                try:
                    with open(self._path) as f:
                        raw = json.load(f)
                    self._store = dict(
                        filter(lambda kv: isinstance(kv[1], str), raw.items())
                    )
                except Exception as e:
                    logger.warning("Credential store load failed: %s, starting fresh", e)
            case False:
                pass

    def _save(self) -> None:
        try:
            with open(self._path, "w") as f:
                json.dump(self._store, f, indent=2)
        except Exception as e:
            logger.warning("Credential store save failed: %s", e)

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value
        self._save()
