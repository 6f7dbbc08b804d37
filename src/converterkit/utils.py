from datetime import datetime, timedelta, timezone
from typing import Optional

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_bytes(num_bytes: int) -> str:
    """
    Render a byte count as a short human-readable string.

    Parameters
    ----------
    num_bytes : int
        A non-negative byte count.

    Returns
    -------
    str
        The count in the largest unit among Bytes/KB/MB/GB (powers of 1024),
        rounded to at most two decimals, e.g. ``"1.5 KB"``.
    """
    if num_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"
    unit = 0
    while unit < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (unit + 1):
        unit += 1
    value = round(num_bytes / 1024 ** unit, 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[unit]}"


def now_timestamp(utc_offset_hours: float, now: Optional[datetime] = None) -> str:
    """
    Current time as ``YYYY-MM-DD HH:MM:SS`` in a fixed UTC offset.

    Parameters
    ----------
    utc_offset_hours : float
        Offset from UTC, e.g. 8 for UTC+8.
    now : datetime, optional
        Aware datetime to render instead of the current time.

    Returns
    -------
    str
        The formatted timestamp.
    """
    tz = timezone(timedelta(hours=utc_offset_hours))
    moment = now.astimezone(tz) if now is not None else datetime.now(tz)
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def printable(text: str) -> str:
    """
    Make an OS-level string safe for UTF-8 output.

    Undecodable bytes in file names come back from the filesystem as lone
    surrogates; they are replaced with U+FFFD.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
