# config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

APP_TITLE = "LAN File Drop"

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_PORT = 3001
MAX_FILE_SIZE = 50 * 1024 * 1024 * 1024  # 50 GiB
MULTIPART_OVERHEAD = 1024 * 1024          # headers and boundaries around the file part

_FALSY = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class ServerConfig:
    upload_dir: Path = Path("uploads")
    static_dir: Path = BASE_DIR / "public"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    max_file_size: int = MAX_FILE_SIZE
    show_qr: bool = field(default=True, compare=False)

    @property
    def max_content_length(self) -> int:
        # allow some header overhead beyond the file itself
        return self.max_file_size + MULTIPART_OVERHEAD

    @property
    def incoming_dir(self) -> Path:
        return self.upload_dir / ".incoming"

    def ensure_dirs(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from HOST, PORT, UPLOAD_DIR, STATIC_DIR, MAX_FILE_SIZE and SHOW_QR."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            upload_dir=Path(env.get("UPLOAD_DIR") or defaults.upload_dir),
            static_dir=Path(env.get("STATIC_DIR") or defaults.static_dir),
            host=env.get("HOST") or defaults.host,
            port=_int_from_env(env, "PORT", defaults.port, minimum=0, maximum=65535),
            max_file_size=_int_from_env(env, "MAX_FILE_SIZE", defaults.max_file_size, minimum=1),
            show_qr=(env.get("SHOW_QR") or "1").strip().lower() not in _FALSY,
        )


def _int_from_env(env, name, default, minimum=None, maximum=None):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigError(f"{name} must be <= {maximum}, got {value}")
    return value
