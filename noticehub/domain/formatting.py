from datetime import datetime


def format_timestamp(value: str | datetime | None) -> str:
    """
    Render a stored timestamp for display.

    Input that cannot be parsed or shown in the local zone comes back
    unchanged so a damaged record still shows something.
    """
    if not value:
        return ""

    try:
        if isinstance(value, datetime):
            parsed = value
        else:
            # fromisoformat only accepts a trailing "Z" from 3.11 on
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed.strftime("%c")
    except (TypeError, ValueError, OverflowError, OSError):
        return str(value)
