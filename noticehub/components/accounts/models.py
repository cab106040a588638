from dataclasses import dataclass

from noticehub.domain.entities import RoleType, Session, User
from noticehub.domain.errors import ErrorCode


@dataclass(frozen=True)
class RegisterInput:
    name: str
    email: str
    password: str
    role: RoleType


@dataclass(frozen=True)
class LoginInput:
    email: str
    password: str


@dataclass(frozen=True)
class AccountOutput:
    success: bool
    message: str
    error: ErrorCode | None = None
    user: User | None = None
    session: Session | None = None
