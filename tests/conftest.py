from datetime import UTC, datetime, timedelta

import pytest

from noticehub.adapters.clock import SystemClock
from noticehub.adapters.kv import (
    KVFavoritesRepo,
    KVNoticeRepo,
    KVSessionStore,
    KVUserRepo,
)
from noticehub.adapters.memory_store import InMemoryKeyValueStore
from noticehub.domain.entities import Session, User
from noticehub.domain.policy import PolicyEngine
from noticehub.rules.loader import DEFAULT_RULES_PATH, load_rules
from noticehub.services.board import NoticeBoard


class FakeClock(SystemClock):
    def __init__(self):
        self._now = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta):
        self._now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rules():
    # Load the REAL rules shipped at the project root
    return load_rules(DEFAULT_RULES_PATH)


@pytest.fixture
def policy(rules) -> PolicyEngine:
    return PolicyEngine(rules)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def user_repo(store) -> KVUserRepo:
    return KVUserRepo(store)


@pytest.fixture
def notice_repo(store) -> KVNoticeRepo:
    return KVNoticeRepo(store)


@pytest.fixture
def favorites_repo(store) -> KVFavoritesRepo:
    return KVFavoritesRepo(store)


@pytest.fixture
def session_store(store) -> KVSessionStore:
    return KVSessionStore(store)


@pytest.fixture
def teacher(user_repo) -> User:
    user = User(id="t-1", role="teacher", name="Tess", email="tess@school.org", password="pw1")
    user_repo.replace_all([*user_repo.list_all(), user])
    return user


@pytest.fixture
def student(user_repo) -> User:
    user = User(id="s-1", role="student", name="Sam", email="sam@school.org", password="pw2")
    user_repo.replace_all([*user_repo.list_all(), user])
    return user


@pytest.fixture
def teacher_session(teacher) -> Session:
    return Session.for_user(teacher)


@pytest.fixture
def student_session(student) -> Session:
    return Session.for_user(student)


@pytest.fixture
def board(rules, store, clock) -> NoticeBoard:
    """Empty board over an in-memory store."""
    return NoticeBoard.create(rules, store, clock=clock)


@pytest.fixture
def seeded_board(board) -> NoticeBoard:
    board.seed_if_empty()
    return board
