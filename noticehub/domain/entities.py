from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
RoleType = Literal["teacher", "student"]

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Record(BaseModel):
    """Base for persisted records; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# --- User & Auth ---

class User(Record):
    id: NonEmptyStr
    role: RoleType
    name: str
    email: NonEmptyStr
    password: str

    def has_email(self, email: str) -> bool:
        return self.email.lower() == email.lower()


class Session(Record):
    """Snapshot of the logged-in user. Never carries the password."""

    id: NonEmptyStr
    role: RoleType
    name: str
    email: str

    @classmethod
    def for_user(cls, user: User) -> "Session":
        return cls(id=user.id, role=user.role, name=user.name, email=user.email)


# --- Notices ---

class Notice(Record):
    id: NonEmptyStr
    title: str
    body: str
    # Weak reference: may dangle once the author account is removed.
    author_id: str | None = None
    author_name: str
    published: bool = False
    # ISO-8601 as written; rendering goes through format_timestamp
    created_at: str

    def toggled(self) -> "Notice":
        return self.model_copy(update={"published": not self.published})
