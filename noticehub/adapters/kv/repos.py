"""
Collections kept in the key-value store.

Each collection lives under one key and is rewritten whole on every change,
so an interrupted operation can lose its own update but never leaves a half
written collection behind.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import TypeAdapter

from noticehub.domain.entities import Notice, Session, User
from noticehub.ports.store import KeyValueStorePort

from .codec import dump, load_or_default, load_records

_USER = TypeAdapter(User)
_NOTICE = TypeAdapter(Notice)
_SESSION = TypeAdapter(Session | None)
_IDS = TypeAdapter(list[str])


@dataclass(frozen=True)
class StoreKeys:
    prefix: str = "noticehub_"

    @property
    def users(self) -> str:
        return f"{self.prefix}users"

    @property
    def notices(self) -> str:
        return f"{self.prefix}notices"

    @property
    def session(self) -> str:
        return f"{self.prefix}current_user"

    def favorites(self, user_id: str) -> str:
        return f"{self.prefix}fav_{user_id}"


class KVUserRepo:
    def __init__(self, store: KeyValueStorePort, keys: StoreKeys | None = None):
        self.store = store
        self.keys = keys or StoreKeys()

    def list_all(self) -> list[User]:
        return load_records(self.store, self.keys.users, _USER)

    def replace_all(self, users: list[User]) -> None:
        self.store.set(self.keys.users, dump([u.to_document() for u in users]))


class KVNoticeRepo:
    def __init__(self, store: KeyValueStorePort, keys: StoreKeys | None = None):
        self.store = store
        self.keys = keys or StoreKeys()

    def list_all(self) -> list[Notice]:
        return load_records(self.store, self.keys.notices, _NOTICE)

    def replace_all(self, notices: list[Notice]) -> None:
        self.store.set(self.keys.notices, dump([n.to_document() for n in notices]))


class KVFavoritesRepo:
    def __init__(self, store: KeyValueStorePort, keys: StoreKeys | None = None):
        self.store = store
        self.keys = keys or StoreKeys()

    def get(self, user_id: str) -> list[str]:
        return load_or_default(self.store, self.keys.favorites(user_id), _IDS, [])

    def replace(self, user_id: str, notice_ids: list[str]) -> None:
        self.store.set(self.keys.favorites(user_id), dump(notice_ids))


class KVSessionStore:
    def __init__(self, store: KeyValueStorePort, keys: StoreKeys | None = None):
        self.store = store
        self.keys = keys or StoreKeys()

    def get(self) -> Session | None:
        return load_or_default(self.store, self.keys.session, _SESSION, None)

    def save(self, session: Session) -> None:
        self.store.set(self.keys.session, dump(session.to_document()))

    def clear(self) -> None:
        self.store.remove(self.keys.session)
