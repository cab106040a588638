from .codec import load_or_default, load_records
from .repos import (
    KVFavoritesRepo,
    KVNoticeRepo,
    KVSessionStore,
    KVUserRepo,
    StoreKeys,
)

__all__ = [
    "load_or_default",
    "load_records",
    "KVFavoritesRepo",
    "KVNoticeRepo",
    "KVSessionStore",
    "KVUserRepo",
    "StoreKeys",
]
