import secrets
from datetime import datetime


def new_id(now: datetime) -> str:
    """
    Opaque identifier: random hex followed by the millisecond timestamp in hex.

    Only uniqueness is guaranteed, callers must not parse it.
    """
    millis = int(now.timestamp() * 1000)
    return f"{secrets.token_hex(6)}{millis:x}"
