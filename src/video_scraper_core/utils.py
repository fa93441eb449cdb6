def parse_duration_text(duration_text):
    """
    Convert a player duration text such as ``1:30:23`` or ``4:05`` into milliseconds.

    Fields are read from the right (seconds, minutes, hours), so the hour field
    may be missing and may exceed 24. Seconds may carry a fractional part.
    """
    text = (duration_text or "").strip()
    if not text:
        raise ValueError("Empty video duration text")

    fields = text.split(":")
    if len(fields) > 3:
        raise ValueError(f"Unsupported video duration format: {duration_text!r}")

    try:
        seconds = float(fields[-1])
        minutes = int(fields[-2]) if len(fields) >= 2 else 0
        hours = int(fields[-3]) if len(fields) == 3 else 0
    except ValueError:
        raise ValueError(f"Unsupported video duration format: {duration_text!r}") from None

    if min(seconds, minutes, hours) < 0:
        raise ValueError(f"Negative field in video duration: {duration_text!r}")

    return int(round((hours * 3600 + minutes * 60 + seconds) * 1000))


def format_duration(milliseconds):
    """Format milliseconds as ``H:MM:SS``."""
    total_seconds = int(milliseconds) // 1000
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"
