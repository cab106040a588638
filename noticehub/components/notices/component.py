"""
Notices component - teacher-managed announcements.

Invariants:
- New notices start unpublished and go to the front of the collection
- authorId is taken from the session at creation and never changed
- Toggling reports the state after the flip
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from noticehub.domain.entities import Notice, Session
from noticehub.domain.errors import ErrorCode
from noticehub.domain.ids import new_id
from noticehub.domain.policy import (
    CREATE_NOTICE,
    DELETE_NOTICE,
    PUBLISH_NOTICE,
    PolicyEngine,
)
from noticehub.ports.clock import ClockPort
from noticehub.ports.repo import NoticeRepoPort

from .models import (
    AddNoticeInput,
    DeleteNoticeInput,
    NoticeListOutput,
    NoticeOutput,
    TogglePublishInput,
)

logger = logging.getLogger(__name__)

NOTICE_MISSING = NoticeOutput(
    success=False, message="Notice not found.", error=ErrorCode.NOT_FOUND
)


def _denied(actor: Session | None, message: str) -> NoticeOutput:
    code = ErrorCode.UNAUTHENTICATED if actor is None else ErrorCode.UNAUTHORIZED
    logger.debug("Notice operation denied: %s", code.value)
    return NoticeOutput(success=False, message=message, error=code)


def _find(notices: list[Notice], notice_id: str) -> int | None:
    return next((i for i, n in enumerate(notices) if n.id == notice_id), None)


def run_add_notice(
    inp: AddNoticeInput, notice_repo: NoticeRepoPort, policy: PolicyEngine, clock: ClockPort
) -> NoticeOutput:
    if inp.actor is None or not policy.check_permission(inp.actor, CREATE_NOTICE):
        return _denied(inp.actor, "Only teacher can add notice.")

    now = clock.now_utc()
    notice = Notice(
        id=new_id(now),
        title=inp.title.strip(),
        body=inp.body.strip(),
        author_id=inp.actor.id,
        author_name=inp.actor.name,
        published=False,
        created_at=now.isoformat(),
    )
    notice_repo.replace_all([notice, *notice_repo.list_all()])
    logger.info("Notice %s added by %s", notice.id, inp.actor.id)
    return NoticeOutput(success=True, message="Notice added (unpublished).", notice=notice)


def run_delete_notice(
    inp: DeleteNoticeInput, notice_repo: NoticeRepoPort, policy: PolicyEngine
) -> NoticeOutput:
    if not policy.check_permission(inp.actor, DELETE_NOTICE):
        return _denied(inp.actor, "Only teacher can delete notice.")

    notices = notice_repo.list_all()
    idx = _find(notices, inp.notice_id)
    if idx is None:
        return NOTICE_MISSING

    removed = notices.pop(idx)
    notice_repo.replace_all(notices)
    logger.info("Notice %s deleted", removed.id)
    return NoticeOutput(success=True, message="Notice deleted.", notice=removed)


def run_toggle_publish(
    inp: TogglePublishInput, notice_repo: NoticeRepoPort, policy: PolicyEngine
) -> NoticeOutput:
    if not policy.check_permission(inp.actor, PUBLISH_NOTICE):
        return _denied(inp.actor, "Only teacher can publish/unpublish.")

    notices = notice_repo.list_all()
    idx = _find(notices, inp.notice_id)
    if idx is None:
        return NOTICE_MISSING

    notices[idx] = notices[idx].toggled()
    notice_repo.replace_all(notices)
    published = notices[idx].published
    logger.info("Notice %s %s", notices[idx].id, "published" if published else "unpublished")
    return NoticeOutput(
        success=True,
        message="Published." if published else "Unpublished.",
        notice=notices[idx],
    )


def run_list_notices(notice_repo: NoticeRepoPort) -> NoticeListOutput:
    return NoticeListOutput(notices=tuple(notice_repo.list_all()))


def visible_notices(
    notices: Iterable[Notice], role: str | None, policy: PolicyEngine
) -> list[Notice]:
    """Roles allowed to publish see drafts too; everyone else sees published notices only."""
    if policy.can_see_unpublished(role):
        return list(notices)
    return [n for n in notices if n.published]
