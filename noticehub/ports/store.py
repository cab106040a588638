from typing import Protocol


class KeyValueStorePort(Protocol):
    """Flat string-keyed store holding serialized documents."""

    def get(self, key: str) -> str | None:
        """Return the raw value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Overwrite the whole value stored under key."""
        ...

    def remove(self, key: str) -> None:
        """Drop the key; a missing key is not an error."""
        ...

    def keys(self) -> list[str]:
        ...
