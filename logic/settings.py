import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false), got {raw!r}")


def _env_seconds(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass
class Settings:
    temp_dir: Optional[str] = None
    unique_send_file: bool = True
    send_file_max_age: int = 24 * 60 * 60  # seconds
    outputs_file: str = os.path.join(os.path.expanduser("~"), ".manuscript_outputs.json")
    default_url: str = ""

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            temp_dir=os.getenv("MANUSCRIPT_TEMP_DIR") or None,
            unique_send_file=_env_flag("MANUSCRIPT_UNIQUE_SEND_FILE", True),
            send_file_max_age=_env_seconds("MANUSCRIPT_SEND_FILE_MAX_AGE", cls.send_file_max_age),
            outputs_file=os.getenv("MANUSCRIPT_OUTPUTS_FILE") or cls.outputs_file,
            default_url=os.getenv("MANUSCRIPT_DEFAULT_URL", ""),
        )
