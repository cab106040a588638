"""
Users admin component - teacher view and removal of accounts.

Removing another user leaves their notices in place; only self-service
deletion (profile component) cascades.
"""

from __future__ import annotations

import logging

from noticehub.domain.errors import ErrorCode
from noticehub.domain.policy import PolicyEngine
from noticehub.ports.repo import UserRepoPort

from .models import DeleteUserInput, UserAdminOutput, UserListOutput

logger = logging.getLogger(__name__)


def run_list_users(user_repo: UserRepoPort) -> UserListOutput:
    return UserListOutput(users=tuple(user_repo.list_all()))


def run_delete_user(
    inp: DeleteUserInput, user_repo: UserRepoPort, policy: PolicyEngine
) -> UserAdminOutput:
    if not policy.can_manage_users(inp.actor):
        code = ErrorCode.UNAUTHENTICATED if inp.actor is None else ErrorCode.UNAUTHORIZED
        return UserAdminOutput(success=False, message="Only teacher can delete users.", error=code)

    assert inp.actor is not None
    if inp.actor.id == inp.target_id:
        return UserAdminOutput(
            success=False,
            message="You can't delete yourself here. Use Delete My Account.",
            error=ErrorCode.SELF_DELETION_FORBIDDEN,
        )

    users = user_repo.list_all()
    target = next((u for u in users if u.id == inp.target_id), None)
    if target is None:
        return UserAdminOutput(
            success=False, message="User not found.", error=ErrorCode.NOT_FOUND
        )

    user_repo.replace_all([u for u in users if u.id != inp.target_id])
    logger.info("User %s deleted by %s", target.id, inp.actor.id)
    return UserAdminOutput(success=True, message="User deleted.", user=target)
