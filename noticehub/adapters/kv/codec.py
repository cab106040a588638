"""
Reading documents back out of the key-value store.

The store is a best-effort local cache: a value that is not valid JSON, or
that does not validate against the expected record type, reads as the
caller's default instead of failing the operation. Record lists are checked
one record at a time so a single damaged record does not hide the others.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from noticehub.ports.store import KeyValueStorePort

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


def _load_json(store: KeyValueStorePort, key: str) -> Any:
    raw = store.get(key)
    if not raw:
        return _MISSING

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Corrupt JSON under %r, using default", key)
        return _MISSING


def load_or_default(
    store: KeyValueStorePort, key: str, adapter: TypeAdapter[T], default: T
) -> T:
    data = _load_json(store, key)
    if data is _MISSING:
        return default

    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        logger.warning("Invalid document under %r (%d errors), using default", key, e.error_count())
        return default


def load_records(store: KeyValueStorePort, key: str, adapter: TypeAdapter[T]) -> list[T]:
    """Load a list of records, dropping the ones that fail validation."""
    data = _load_json(store, key)
    if data is _MISSING:
        return []
    if not isinstance(data, list):
        logger.warning("Expected a list under %r, using default", key)
        return []

    records: list[T] = []
    for idx, item in enumerate(data):
        try:
            records.append(adapter.validate_python(item))
        except ValidationError as e:
            logger.warning(
                "Skipping invalid record %d under %r (%d errors)", idx, key, e.error_count()
            )
    return records


def dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))
