"""Read a saved shelf page from disk."""

import logging
from pathlib import Path

import chardet

logger = logging.getLogger(__name__)


def decode_document(raw_bytes: bytes, origin: str = "<bytes>") -> str:
    """Decode page bytes, guessing the encoding when UTF-8 fails.

    Args:
        raw_bytes: The undecoded page.
        origin: Name used in log messages.

    Returns:
        The page as text.
    """
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence", 0)

    if confidence < 0.7:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            origin,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logger.error("Failed to decode %s as %s", origin, encoding)
        return raw_bytes.decode("utf-8", errors="replace")


def read_document(file_path: str | Path) -> str:
    """Read a shelf page file as text.

    Raises:
        FileNotFoundError: If file_path does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return decode_document(path.read_bytes(), str(path))
