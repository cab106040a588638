import logging

from noticehub.adapters.kv import KVNoticeRepo, KVSessionStore, KVUserRepo, StoreKeys
from noticehub.adapters.memory_store import InMemoryKeyValueStore
from noticehub.adapters.sqlite_store import SQLiteKeyValueStore, create_sqlite_store
from noticehub.domain.entities import Session, User


def test_keys_follow_prefix():
    keys = StoreKeys(prefix="nh_")
    assert keys.users == "nh_users"
    assert keys.notices == "nh_notices"
    assert keys.session == "nh_current_user"
    assert keys.favorites("abc") == "nh_fav_abc"


def test_corrupt_json_reads_as_empty(caplog):
    store = InMemoryKeyValueStore({"noticehub_users": "{not json"})
    with caplog.at_level(logging.WARNING):
        assert KVUserRepo(store).list_all() == []
    assert "Corrupt JSON" in caplog.text


def test_invalid_records_read_as_empty():
    store = InMemoryKeyValueStore({"noticehub_notices": '[{"id": "n1"}]'})
    assert KVNoticeRepo(store).list_all() == []


def test_corrupt_session_reads_as_logged_out():
    store = InMemoryKeyValueStore({"noticehub_current_user": '"nobody"'})
    assert KVSessionStore(store).get() is None


def test_users_written_whole(store):
    repo = KVUserRepo(store)
    a = User(id="a", role="student", name="A", email="a@x.com", password="1")
    b = User(id="b", role="teacher", name="B", email="b@x.com", password="2")

    repo.replace_all([a, b])
    repo.replace_all([b])

    assert repo.list_all() == [b]
    assert store.keys() == ["noticehub_users"]


def test_session_slot_cleared(store):
    sessions = KVSessionStore(store)
    sessions.save(Session(id="a", role="student", name="A", email="a@x.com"))
    assert sessions.get() is not None

    sessions.clear()
    assert sessions.get() is None
    assert "noticehub_current_user" not in store.keys()


def test_sqlite_store_roundtrip(tmp_path):
    path = tmp_path / "board.db"
    store = SQLiteKeyValueStore(path)
    store.set("k", "v1")
    store.set("k", "v2")
    store.set("a", "x")

    reopened = SQLiteKeyValueStore(path)
    assert reopened.get("k") == "v2"
    assert reopened.keys() == ["a", "k"]

    reopened.remove("k")
    reopened.remove("missing")
    assert reopened.get("k") is None


def test_sqlite_factory_reads_env(tmp_path, monkeypatch):
    path = tmp_path / "env.db"
    monkeypatch.setenv("NOTICEHUB_DB_PATH", str(path))

    store = create_sqlite_store()
    assert store.db_path == str(path)
    assert path.exists()


def test_bad_record_does_not_hide_the_rest(caplog):
    store = InMemoryKeyValueStore(
        {
            "noticehub_notices": (
                '[{"id": "n1", "title": "A", "body": "", "authorName": "T",'
                ' "createdAt": "2025-01-01T00:00:00+00:00"},'
                ' {"id": "n2", "body": "no title"},'
                ' {"id": "n3", "title": "C", "body": "", "authorName": "T",'
                ' "createdAt": "not a date"}]'
            )
        }
    )
    with caplog.at_level(logging.WARNING):
        notices = KVNoticeRepo(store).list_all()

    assert [n.id for n in notices] == ["n1", "n3"]
    assert notices[1].created_at == "not a date"
    assert "Skipping invalid record 1" in caplog.text


def test_non_list_collection_reads_as_empty():
    store = InMemoryKeyValueStore({"noticehub_users": '{"id": "a"}'})
    assert KVUserRepo(store).list_all() == []
