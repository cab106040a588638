from typing import Protocol

from noticehub.domain.entities import Notice, Session, User


class UserRepoPort(Protocol):
    def list_all(self) -> list[User]:
        ...

    def replace_all(self, users: list[User]) -> None:
        ...


class NoticeRepoPort(Protocol):
    def list_all(self) -> list[Notice]:
        ...

    def replace_all(self, notices: list[Notice]) -> None:
        ...


class FavoritesRepoPort(Protocol):
    def get(self, user_id: str) -> list[str]:
        ...

    def replace(self, user_id: str, notice_ids: list[str]) -> None:
        ...


class SessionStorePort(Protocol):
    """The single current-session slot."""

    def get(self) -> Session | None:
        ...

    def save(self, session: Session) -> None:
        ...

    def clear(self) -> None:
        ...
