import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://www.lanzoui.com"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class Settings:
    def __init__(self):
        self.base_url = os.getenv("LANZOU_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        self.user_agent = os.getenv("LANZOU_USER_AGENT", DEFAULT_USER_AGENT)
        self.timeout = _env_int("LANZOU_TIMEOUT", 10)
        self.challenge_retries = _env_int("LANZOU_CHALLENGE_RETRIES", 2)
        self.strict_token = _env_bool("LANZOU_STRICT_TOKEN", True)
