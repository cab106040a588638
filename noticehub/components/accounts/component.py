"""
Accounts component - registration, login and the session slot.

Invariants:
- User emails are unique ignoring case
- Registering never logs the new user in
- The session snapshot never carries the password
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from noticehub.domain.entities import Session, User
from noticehub.domain.errors import ErrorCode
from noticehub.domain.ids import new_id
from noticehub.ports.clock import ClockPort
from noticehub.ports.repo import SessionStorePort, UserRepoPort

from .models import AccountOutput, LoginInput, RegisterInput

logger = logging.getLogger(__name__)


def email_taken(users: list[User], email: str, *, except_id: str | None = None) -> bool:
    return any(u.has_email(email) and u.id != except_id for u in users)


def run_register(inp: RegisterInput, user_repo: UserRepoPort, clock: ClockPort) -> AccountOutput:
    users = user_repo.list_all()
    if email_taken(users, inp.email):
        return AccountOutput(
            success=False,
            message="Email already exists. Try login.",
            error=ErrorCode.DUPLICATE_EMAIL,
        )

    try:
        user = User(
            id=new_id(clock.now_utc()),
            role=inp.role,
            name=inp.name,
            email=inp.email,
            password=inp.password,
        )
    except ValidationError as e:
        return AccountOutput(
            success=False,
            message=f"Invalid registration: {e.errors()[0]['msg']}",
            error=ErrorCode.INVALID_INPUT,
        )

    user_repo.replace_all([*users, user])
    logger.info("Registered %s user %s", user.role, user.id)
    return AccountOutput(success=True, message="Registration successful. Now login.", user=user)


def run_login(
    inp: LoginInput, user_repo: UserRepoPort, session_store: SessionStorePort
) -> AccountOutput:
    user = next(
        (
            u
            for u in user_repo.list_all()
            if u.has_email(inp.email) and u.password == inp.password
        ),
        None,
    )
    if not user:
        return AccountOutput(
            success=False,
            message="Wrong email or password.",
            error=ErrorCode.INVALID_CREDENTIALS,
        )

    session = Session.for_user(user)
    session_store.save(session)
    logger.info("User %s logged in", user.id)
    return AccountOutput(success=True, message="Login successful.", user=user, session=session)


def run_logout(session_store: SessionStorePort) -> AccountOutput:
    session_store.clear()
    return AccountOutput(success=True, message="Logged out.")


def run_current_session(session_store: SessionStorePort) -> Session | None:
    return session_store.get()


def run_require_session(session_store: SessionStorePort) -> Session | None:
    """
    Return the active session, or None when the caller must send the user to
    the login page. Never touches the slot.
    """
    session = session_store.get()
    if session is None:
        logger.debug("No active session")
    return session
