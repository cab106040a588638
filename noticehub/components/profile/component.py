"""
Profile component - self-service account changes.

Every operation acts on the account of the given session. A session can
outlive its user row, which is reported as USER_NOT_FOUND except on account
deletion, which always succeeds once a session exists.

Deleting your own account also deletes every notice you authored. Teacher
deletion of other users (users_admin) does not.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from noticehub.components.accounts import email_taken
from noticehub.domain.entities import User
from noticehub.domain.errors import ErrorCode
from noticehub.ports.repo import NoticeRepoPort, SessionStorePort, UserRepoPort

from .models import ChangePasswordInput, DeleteAccountInput, ProfileOutput, UpdateProfileInput

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = ProfileOutput(
    success=False, message="Not logged in.", error=ErrorCode.UNAUTHENTICATED
)
USER_MISSING = ProfileOutput(
    success=False, message="User not found.", error=ErrorCode.USER_NOT_FOUND
)


def run_update_profile(
    inp: UpdateProfileInput, user_repo: UserRepoPort, session_store: SessionStorePort
) -> ProfileOutput:
    if inp.actor is None:
        return NOT_LOGGED_IN

    users = user_repo.list_all()
    idx = next((i for i, u in enumerate(users) if u.id == inp.actor.id), None)
    if idx is None:
        return USER_MISSING

    if email_taken(users, inp.email, except_id=inp.actor.id):
        return ProfileOutput(
            success=False,
            message="Email already taken by another user.",
            error=ErrorCode.DUPLICATE_EMAIL,
        )

    try:
        updated = User.model_validate(
            {**users[idx].model_dump(), "name": inp.name, "email": inp.email}
        )
    except ValidationError as e:
        return ProfileOutput(
            success=False,
            message=f"Invalid profile: {e.errors()[0]['msg']}",
            error=ErrorCode.INVALID_INPUT,
        )

    users[idx] = updated
    user_repo.replace_all(users)

    session = inp.actor.model_copy(update={"name": updated.name, "email": updated.email})
    session_store.save(session)
    logger.info("Profile updated for user %s", updated.id)
    return ProfileOutput(success=True, message="Profile updated.", user=updated, session=session)


def run_change_password(inp: ChangePasswordInput, user_repo: UserRepoPort) -> ProfileOutput:
    if inp.actor is None:
        return NOT_LOGGED_IN

    users = user_repo.list_all()
    idx = next((i for i, u in enumerate(users) if u.id == inp.actor.id), None)
    if idx is None:
        return USER_MISSING

    if users[idx].password != inp.old_password:
        return ProfileOutput(
            success=False, message="Old password is wrong.", error=ErrorCode.WRONG_PASSWORD
        )

    users[idx] = users[idx].model_copy(update={"password": inp.new_password})
    user_repo.replace_all(users)
    logger.info("Password changed for user %s", inp.actor.id)
    return ProfileOutput(success=True, message="Password changed.", user=users[idx])


def run_delete_own_account(
    inp: DeleteAccountInput,
    user_repo: UserRepoPort,
    notice_repo: NoticeRepoPort,
    session_store: SessionStorePort,
) -> ProfileOutput:
    if inp.actor is None:
        return NOT_LOGGED_IN

    user_id = inp.actor.id
    user_repo.replace_all([u for u in user_repo.list_all() if u.id != user_id])

    notices = notice_repo.list_all()
    kept = [n for n in notices if n.author_id != user_id]
    notice_repo.replace_all(kept)

    session_store.clear()
    logger.info(
        "User %s deleted own account, removed %d notices", user_id, len(notices) - len(kept)
    )
    return ProfileOutput(success=True, message="Account deleted.")
