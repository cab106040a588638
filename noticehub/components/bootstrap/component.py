"""
Bootstrap component - first-run demo data.

Seeds the configured demo accounts when there are no users, and the welcome
notice when there are no notices. Calling it again changes nothing.
"""

from __future__ import annotations

import logging

from noticehub.domain.entities import Notice, User
from noticehub.domain.ids import new_id
from noticehub.ports.clock import ClockPort
from noticehub.ports.repo import NoticeRepoPort, UserRepoPort

from .models import BootstrapInput, BootstrapOutput

logger = logging.getLogger(__name__)


def run(
    inp: BootstrapInput,
    *,
    user_repo: UserRepoPort,
    notice_repo: NoticeRepoPort,
    clock: ClockPort,
) -> BootstrapOutput:
    if not inp.seed.enabled_if_empty:
        return BootstrapOutput(skipped_reason="Seeding not enabled in rules")

    created_users: list[User] = []
    created_notice: Notice | None = None

    users = user_repo.list_all()
    if not users and inp.seed.accounts:
        for account in inp.seed.accounts:
            created_users.append(
                User(
                    id=new_id(clock.now_utc()),
                    role=account.role,
                    name=account.name,
                    email=account.email,
                    password=account.password,
                )
            )
        user_repo.replace_all(created_users)
        logger.info("Seeded %d demo accounts", len(created_users))

    if inp.seed.notice is not None and not notice_repo.list_all():
        author = next((u for u in user_repo.list_all() if u.role == "teacher"), None)
        now = clock.now_utc()
        created_notice = Notice(
            id=new_id(now),
            title=inp.seed.notice.title,
            body=inp.seed.notice.body,
            author_id=author.id if author else None,
            author_name=author.name if author else "Teacher",
            published=inp.seed.notice.published,
            created_at=now.isoformat(),
        )
        notice_repo.replace_all([created_notice])
        logger.info("Seeded welcome notice %s", created_notice.id)

    if not created_users and created_notice is None:
        return BootstrapOutput(skipped_reason="Users and notices already exist")

    return BootstrapOutput(created_users=created_users, created_notice=created_notice)
