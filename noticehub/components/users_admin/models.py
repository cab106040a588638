from dataclasses import dataclass

from noticehub.domain.entities import Session, User
from noticehub.domain.errors import ErrorCode


@dataclass(frozen=True)
class DeleteUserInput:
    actor: Session | None
    target_id: str


@dataclass(frozen=True)
class UserListOutput:
    # Records include plaintext passwords; callers must not display them.
    users: tuple[User, ...]
    success: bool = True


@dataclass(frozen=True)
class UserAdminOutput:
    success: bool
    message: str
    error: ErrorCode | None = None
    user: User | None = None
