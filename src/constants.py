"""All magic values live here — no inline literals anywhere else."""

# ElevenLabs speech-to-text
ELEVENLABS_STT_URL = "https://api.elevenlabs.io/v1/speech-to-text"
ELEVENLABS_KEY_HEADER = "xi-api-key"
ELEVENLABS_MODEL_ID = "eleven_multilingual_v2"
ELEVENLABS_LANGUAGE = "en"
FIELD_FILE = "file"
FIELD_MODEL_ID = "model_id"
FIELD_LANGUAGE = "language"
RESPONSE_TEXT_FIELD = "text"
RESPONSE_ERROR_FIELD = "error"
DEFAULT_MIME_TYPE = "application/octet-stream"

PROGRESS_START = 0
PROGRESS_DONE = 100

# Credential persistence
CREDENTIAL_KEY = "elevenlabs_api_key"
DEFAULT_CREDENTIAL_STORE = ".credentials.json"

# Telegram
VOICE_FILENAME = "voice.ogg"
DEFAULT_FILENAME = "audio"
TRANSCRIPT_FILENAME = "transcript.txt"
TELEGRAM_MESSAGE_LIMIT = 4096
CMD_START = "start"
CMD_HELP = "help"
CMD_KEY = "key"
CMD_TRANSCRIBE = "transcribe"
CMD_COPY = "copy"
CMD_STATUS = "status"

# Exception messages
ERR_MISSING_CREDENTIAL = "API key is missing."
ERR_TRANSPORT = "Request failed: %s"
ERR_API = "API error: %s"

# Log messages
MSG_BOT_STARTING = "Starting Telegram bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_SEND_FAIL = "Telegram send failed: %s"
MSG_DOWNLOAD_FAILED = "Attachment download failed"
MSG_LOG_REQUEST = "→ ElevenLabs speech-to-text (%s, %d bytes)"
MSG_LOG_RESPONSE = "← ElevenLabs %d (%.1fs)"
MSG_LOG_TRANSPORT_FAILED = "ElevenLabs request failed: %s"
MSG_LOG_TRANSCRIPTION_FAILED = "Transcription failed: %s"
MSG_LOG_CREDENTIAL_SAVED = "API key saved"

# User-facing status / error text
MSG_KEY_SAVED = "API key saved."
MSG_KEY_INVALID = "Please enter a valid API key."
MSG_FILE_SELECTED = "Selected: %s (%.2f MB)"
MSG_STARTING = "Starting transcription..."
MSG_UPLOADING = "Uploading file..."
MSG_COMPLETE = "Transcription complete."
MSG_FAILED = "Transcription failed."
MSG_ERROR = "Error: %s"
MSG_NOT_READY = "Not ready: save an API key and select a file first."
MSG_COPIED = "Copied to clipboard."
MSG_COPY_FAILED = "Copy failed: %s"
MSG_NOTHING_TO_COPY = "Nothing to copy yet — run /transcribe first."
MSG_FILE_DOWNLOAD_FAILED = "Could not read that file — please send it again."
MSG_PROGRESS = "Progress: %d%%"
MSG_EMPTY_TRANSCRIPT = "(empty transcript)"

MSG_STATUS = (
    "Status\n"
    "  API key : %s\n"
    "  File    : %s\n"
    "  Ready   : %s\n"
)
MSG_STATUS_NO_FILE = "none"

MSG_HELP = (
    "voice-to-text — ElevenLabs transcription in Telegram\n"
    "\n"
    "Commands:\n"
    "  /help                 — show this message\n"
    "  /key <api-key>        — save your ElevenLabs API key\n"
    "  /transcribe           — transcribe the selected file\n"
    "  /copy                 — get the last transcript as a text file\n"
    "  /status               — key, file and readiness at a glance\n"
    "\n"
    "Files:\n"
    "  Send an audio file, voice note or document to select it.\n"
    "  A new file replaces the previous selection.\n"
)
