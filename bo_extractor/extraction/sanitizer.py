"""Byte sanitizer: turns a binary/text hybrid file into one decodable text stream."""

_SPACE = 0x20

# 0x00-0x1F map to space, everything else is left alone.
_CONTROL_TO_SPACE = bytes(_SPACE if value < _SPACE else value for value in range(256))


def sanitize(raw: bytes) -> str:
    """Replace ASCII control bytes with spaces and decode as permissive UTF-8.

    Undecodable sequences become U+FFFD instead of raising.
    """
    return raw.translate(_CONTROL_TO_SPACE).decode("utf-8", errors="replace")
