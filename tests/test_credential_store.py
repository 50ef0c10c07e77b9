import json
from pathlib import Path

from src.constants import CREDENTIAL_KEY
from src.credential_store import CredentialStore


# --- Helpers ---

def _make_store(tmp_path: Path, data: dict) -> CredentialStore:
    p = tmp_path / "credentials.json"
    p.write_text(json.dumps(data))
    return CredentialStore(path=p)


# --- Load tests ---

def test_missing_file_starts_empty(tmp_path):
    store = CredentialStore(path=tmp_path / "absent.json")
    assert store.get(CREDENTIAL_KEY) is None


def test_load_reads_saved_key(tmp_path):
    store = _make_store(tmp_path, {CREDENTIAL_KEY: "sk-123"})
    assert store.get(CREDENTIAL_KEY) == "sk-123"


def test_corrupt_file_starts_fresh(tmp_path):
    p = tmp_path / "credentials.json"
    p.write_text("{not json")
    store = CredentialStore(path=p)
    assert store.get(CREDENTIAL_KEY) is None


def test_non_string_values_are_dropped(tmp_path):
    store = _make_store(tmp_path, {CREDENTIAL_KEY: 42, "other": "x"})
    assert store.get(CREDENTIAL_KEY) is None
    assert store.get("other") == "x"


# --- Save tests ---

def test_set_persists_to_disk(tmp_path):
    p = tmp_path / "credentials.json"
    store = CredentialStore(path=p)
    store.set(CREDENTIAL_KEY, "sk-abc")
    assert json.loads(p.read_text()) == {CREDENTIAL_KEY: "sk-abc"}


def test_set_survives_reload(tmp_path):
    p = tmp_path / "credentials.json"
    CredentialStore(path=p).set(CREDENTIAL_KEY, "sk-abc")
    assert CredentialStore(path=p).get(CREDENTIAL_KEY) == "sk-abc"


def test_set_overwrites_previous_value(tmp_path):
    store = _make_store(tmp_path, {CREDENTIAL_KEY: "old"})
    store.set(CREDENTIAL_KEY, "new")
    assert store.get(CREDENTIAL_KEY) == "new"


def test_save_failure_keeps_in_memory_value(tmp_path):
    """Unwritable path: the value is still served for this session."""
    store = CredentialStore(path=tmp_path / "missing-dir" / "credentials.json")
    store.set(CREDENTIAL_KEY, "sk-abc")
    assert store.get(CREDENTIAL_KEY) == "sk-abc"
