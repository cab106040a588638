from dataclasses import dataclass

from noticehub.domain.entities import Session, User
from noticehub.domain.errors import ErrorCode


@dataclass(frozen=True)
class UpdateProfileInput:
    actor: Session | None
    name: str
    email: str


@dataclass(frozen=True)
class ChangePasswordInput:
    actor: Session | None
    old_password: str
    new_password: str


@dataclass(frozen=True)
class DeleteAccountInput:
    actor: Session | None


@dataclass(frozen=True)
class ProfileOutput:
    success: bool
    message: str
    error: ErrorCode | None = None
    user: User | None = None
    session: Session | None = None
