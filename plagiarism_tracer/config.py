import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


# ───── Matching ─────
DEFAULT_WINDOW_SIZE = _env_int("DEFAULT_WINDOW_SIZE", 5)
USE_ROLLING_HASH = _env_bool("USE_ROLLING_HASH", True)

# ───── Caller-side limits ─────
# The partial-match scan is quadratic in document length
MAX_INPUT_WORDS = _env_int("MAX_INPUT_WORDS", 5000)
MAX_FILE_SIZE_MB = _env_int("MAX_FILE_SIZE_MB", 10)

# ───── Logging ─────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
STRUCTURED_LOGGING = _env_bool("STRUCTURED_LOGGING", True)
LOG_TO_FILE = _env_bool("LOG_TO_FILE", False)
