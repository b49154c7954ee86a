"""Text helpers shared by collectors and the renderer."""

from typing import Union

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def format_duration(seconds: int) -> str:
    """
    Format an elapsed number of seconds as a compact string.

    Leftover seconds are dropped, so anything under a minute is "0m".

    Examples:
        90000 -> "1d 1h 0m"
        3661  -> "1h 1m"
        59    -> "0m"
    """
    days = seconds // SECONDS_PER_DAY
    hours = (seconds // SECONDS_PER_HOUR) % 24
    minutes = (seconds // SECONDS_PER_MINUTE) % 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    elif hours > 0:
        return f"{hours}h {minutes}m"
    else:
        return f"{minutes}m"


def decode_lossy(value: Union[str, bytes]) -> str:
    """
    Turn a platform string into clean text, replacing undecodable bytes.

    psutil hands back paths and filesystem names as str, with invalid bytes
    smuggled through as surrogate escapes; those are re-encoded and replaced
    with U+FFFD here. Never raises.
    """
    if isinstance(value, bytes):
        raw = value
    else:
        text = str(value)
        try:
            raw = text.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError:
            raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", errors="replace")
