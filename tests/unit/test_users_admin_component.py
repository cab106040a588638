from noticehub.components.users_admin import DeleteUserInput, run_delete_user, run_list_users
from noticehub.domain.errors import ErrorCode


def test_list_users_includes_everyone(user_repo, teacher, student):
    users = run_list_users(user_repo).users
    assert [u.id for u in users] == [teacher.id, student.id]


def test_teacher_deletes_student(user_repo, policy, teacher_session, student):
    result = run_delete_user(DeleteUserInput(actor=teacher_session, target_id=student.id), user_repo, policy)

    assert result.success is True
    assert result.message == "User deleted."
    assert [u.id for u in user_repo.list_all()] == [teacher_session.id]


def test_self_deletion_forbidden(user_repo, policy, teacher_session):
    result = run_delete_user(
        DeleteUserInput(actor=teacher_session, target_id=teacher_session.id), user_repo, policy
    )

    assert result.error == ErrorCode.SELF_DELETION_FORBIDDEN
    assert "Delete My Account" in result.message
    assert len(user_repo.list_all()) == 1


def test_unknown_target(user_repo, policy, teacher_session):
    result = run_delete_user(DeleteUserInput(actor=teacher_session, target_id="nope"), user_repo, policy)
    assert result.error == ErrorCode.NOT_FOUND
    assert result.message == "User not found."


def test_student_and_anonymous_denied(user_repo, policy, teacher, student_session):
    as_student = run_delete_user(DeleteUserInput(actor=student_session, target_id=teacher.id), user_repo, policy)
    anonymous = run_delete_user(DeleteUserInput(actor=None, target_id=teacher.id), user_repo, policy)

    assert as_student.error == ErrorCode.UNAUTHORIZED
    assert anonymous.error == ErrorCode.UNAUTHENTICATED
    assert len(user_repo.list_all()) == 2
