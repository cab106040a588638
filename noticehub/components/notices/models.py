from dataclasses import dataclass

from noticehub.domain.entities import Notice, Session
from noticehub.domain.errors import ErrorCode


@dataclass(frozen=True)
class AddNoticeInput:
    actor: Session | None
    title: str
    body: str


@dataclass(frozen=True)
class DeleteNoticeInput:
    actor: Session | None
    notice_id: str


@dataclass(frozen=True)
class TogglePublishInput:
    actor: Session | None
    notice_id: str


@dataclass(frozen=True)
class NoticeOutput:
    success: bool
    message: str
    error: ErrorCode | None = None
    notice: Notice | None = None


@dataclass(frozen=True)
class NoticeListOutput:
    notices: tuple[Notice, ...]
    success: bool = True
