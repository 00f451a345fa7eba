# utils.py
import unicodedata
from datetime import datetime
from typing import Union

MAX_NAME_BYTES = 255


class FilenameError(ValueError):
    """The client-declared filename cannot be decoded or is unsafe to store."""


def decode_filename(name: Union[str, bytes]) -> str:
    """Turn the filename from a multipart header into text.

    Filenames are UTF-8 on the wire. Raw bytes are decoded strictly; text that
    Werkzeug already decoded as UTF-8 is kept exactly as given. A name that
    carries a replacement character lost bytes upstream and is rejected
    rather than stored garbled.
    """
    if isinstance(name, bytes):
        try:
            text = name.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FilenameError(f"filename is not valid UTF-8: {exc.reason}") from None
    else:
        text = name
    if "\ufffd" in text:
        raise FilenameError("filename contains undecodable characters")
    return text


def sanitize_filename(name: str) -> str:
    """Keep the last path component and reject names that can't be stored as-is.

    Unlike ``werkzeug.utils.secure_filename`` this keeps non-ASCII text intact.
    """
    base = name.replace("\\", "/").rsplit("/", 1)[-1].strip()
    if not base or base in (".", ".."):
        raise FilenameError("empty filename")
    if any(unicodedata.category(c) == "Cc" for c in base):
        raise FilenameError("filename contains control characters")
    if len(base.encode("utf-8")) > MAX_NAME_BYTES:
        raise FilenameError(f"filename longer than {MAX_NAME_BYTES} bytes")
    return base


def format_megabytes(size: int) -> str:
    return f"{size / 1024 / 1024:.2f} MB"


def format_local_time(timestamp: float) -> str:
    """Local time rendered with the current locale's date and time format."""
    return datetime.fromtimestamp(timestamp).strftime("%c")
