"""TDD: Config tests written FIRST"""
import pytest
from src.config import Config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    for name in ("LOG_LEVEL", "CREDENTIAL_STORE_PATH", "TRANSCRIBE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    """Happy-path: all required env vars present."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot123:ABC")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "987654321")

    config = Config.from_env()

    assert config.telegram_bot_token == "bot123:ABC"
    assert config.allowed_chat_id == "987654321"


def test_config_missing_token_fails(monkeypatch):
    """Missing TELEGRAM_BOT_TOKEN must raise."""
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")

    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        Config.from_env()


def test_config_missing_chat_id_fails(monkeypatch):
    """Missing ALLOWED_CHAT_ID must raise."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot123:ABC")
    monkeypatch.delenv("ALLOWED_CHAT_ID", raising=False)

    with pytest.raises(ValueError, match="ALLOWED_CHAT_ID"):
        Config.from_env()


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(
        telegram_bot_token="token",
        allowed_chat_id="123456789",
        log_level="INFO",
        credential_store_path=".credentials.json",
        transcribe_timeout=None,
    )

    with pytest.raises(Exception):
        config.telegram_bot_token = "other"


def test_config_defaults(monkeypatch):
    """Optional fields have sensible defaults."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot:tok")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")

    config = Config.from_env()

    assert config.log_level == "INFO"
    assert config.credential_store_path == ".credentials.json"
    assert config.transcribe_timeout is None


def test_config_optional_fields_from_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot:tok")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CREDENTIAL_STORE_PATH", "/tmp/keys.json")
    monkeypatch.setenv("TRANSCRIBE_TIMEOUT", "120")

    config = Config.from_env()

    assert config.log_level == "DEBUG"
    assert config.credential_store_path == "/tmp/keys.json"
    assert config.transcribe_timeout == 120.0


def test_config_blank_timeout_means_none(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot:tok")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")
    monkeypatch.setenv("TRANSCRIBE_TIMEOUT", "  ")

    assert Config.from_env().transcribe_timeout is None


def test_config_non_positive_timeout_fails(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot:tok")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")
    monkeypatch.setenv("TRANSCRIBE_TIMEOUT", "0")

    with pytest.raises(ValueError, match="TRANSCRIBE_TIMEOUT"):
        Config.from_env()


def test_config_unparseable_timeout_names_variable(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot:tok")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")
    monkeypatch.setenv("TRANSCRIBE_TIMEOUT", "abc")

    with pytest.raises(ValueError, match="TRANSCRIBE_TIMEOUT"):
        Config.from_env()
