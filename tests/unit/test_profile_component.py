from __future__ import annotations

from noticehub.components.profile import (
    ChangePasswordInput,
    DeleteAccountInput,
    UpdateProfileInput,
    run_change_password,
    run_delete_own_account,
    run_update_profile,
)
from noticehub.domain.entities import Notice, Session
from noticehub.domain.errors import ErrorCode


def _notice(notice_id: str, author_id: str | None) -> Notice:
    return Notice(
        id=notice_id,
        title=notice_id,
        body="",
        author_id=author_id,
        author_name="x",
        created_at="2025-01-01T00:00:00+00:00",
    )


class TestUpdateProfile:
    def test_requires_session(self, user_repo, session_store):
        result = run_update_profile(
            UpdateProfileInput(actor=None, name="N", email="n@x.com"), user_repo, session_store
        )
        assert result.error == ErrorCode.UNAUTHENTICATED

    def test_stale_session(self, user_repo, session_store):
        ghost = Session(id="gone", role="student", name="G", email="g@x.com")
        result = run_update_profile(
            UpdateProfileInput(actor=ghost, name="N", email="n@x.com"), user_repo, session_store
        )
        assert result.error == ErrorCode.USER_NOT_FOUND

    def test_email_taken_by_other_user(self, user_repo, session_store, student_session, teacher):
        result = run_update_profile(
            UpdateProfileInput(actor=student_session, name="Sam", email="TESS@school.org"),
            user_repo,
            session_store,
        )
        assert result.error == ErrorCode.DUPLICATE_EMAIL
        assert result.message == "Email already taken by another user."

    def test_own_email_in_other_case_is_fine(self, user_repo, session_store, student_session):
        result = run_update_profile(
            UpdateProfileInput(actor=student_session, name="Sammy", email="SAM@school.org"),
            user_repo,
            session_store,
        )
        assert result.success is True

    def test_updates_user_and_session(self, user_repo, session_store, student_session, student):
        session_store.save(student_session)
        result = run_update_profile(
            UpdateProfileInput(actor=student_session, name="Samuel", email="samuel@school.org"),
            user_repo,
            session_store,
        )

        assert result.success is True
        stored = user_repo.list_all()[0]
        assert (stored.name, stored.email, stored.password) == ("Samuel", "samuel@school.org", "pw2")
        session = session_store.get()
        assert session.id == student.id
        assert (session.name, session.email, session.role) == ("Samuel", "samuel@school.org", "student")


class TestChangePassword:
    def test_wrong_old_password(self, user_repo, student_session):
        result = run_change_password(
            ChangePasswordInput(actor=student_session, old_password="nope", new_password="x"),
            user_repo,
        )
        assert result.error == ErrorCode.WRONG_PASSWORD
        assert user_repo.list_all()[0].password == "pw2"

    def test_changes_password(self, user_repo, student_session):
        result = run_change_password(
            ChangePasswordInput(actor=student_session, old_password="pw2", new_password="new"),
            user_repo,
        )
        assert result.success is True
        assert result.message == "Password changed."
        assert user_repo.list_all()[0].password == "new"

    def test_requires_live_user(self, user_repo):
        assert (
            run_change_password(
                ChangePasswordInput(actor=None, old_password="a", new_password="b"), user_repo
            ).error
            == ErrorCode.UNAUTHENTICATED
        )
        ghost = Session(id="gone", role="student", name="G", email="g@x.com")
        assert (
            run_change_password(
                ChangePasswordInput(actor=ghost, old_password="a", new_password="b"), user_repo
            ).error
            == ErrorCode.USER_NOT_FOUND
        )


class TestDeleteOwnAccount:
    def test_cascades_notices_and_clears_session(
        self, user_repo, notice_repo, session_store, teacher_session, student
    ):
        notice_repo.replace_all([_notice("n1", "t-1"), _notice("n2", "other"), _notice("n3", "t-1")])
        session_store.save(teacher_session)

        result = run_delete_own_account(
            DeleteAccountInput(actor=teacher_session), user_repo, notice_repo, session_store
        )

        assert result.success is True
        assert [u.id for u in user_repo.list_all()] == [student.id]
        assert [n.id for n in notice_repo.list_all()] == ["n2"]
        assert session_store.get() is None

    def test_succeeds_when_user_row_already_gone(self, user_repo, notice_repo, session_store):
        ghost = Session(id="gone", role="teacher", name="G", email="g@x.com")
        session_store.save(ghost)

        result = run_delete_own_account(
            DeleteAccountInput(actor=ghost), user_repo, notice_repo, session_store
        )
        assert result.success is True
        assert session_store.get() is None

    def test_requires_session(self, user_repo, notice_repo, session_store):
        result = run_delete_own_account(
            DeleteAccountInput(actor=None), user_repo, notice_repo, session_store
        )
        assert result.error == ErrorCode.UNAUTHENTICATED
