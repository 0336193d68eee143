"""Tests for session creation, lookup and expiry in the in-memory store."""

import threading
from datetime import datetime, timedelta, timezone

import store


class TestStore:

    def setup_method(self):
        store.sessions.clear()

    def test_create_and_get(self):
        session = store.create_session()
        assert session.session_id.startswith("todo_")
        assert store.get_session(session.session_id) is session

    def test_get_unknown_session(self):
        assert store.get_session("missing") is None

    def test_get_refreshes_last_seen(self):
        session = store.create_session()
        session.last_seen_at = datetime.now(timezone.utc) - timedelta(seconds=30)
        store.get_session(session.session_id, max_age=60)
        assert datetime.now(timezone.utc) - session.last_seen_at < timedelta(seconds=5)

    def test_idle_session_expires_on_get(self):
        session = store.create_session()
        session.last_seen_at = datetime.now(timezone.utc) - timedelta(hours=2)
        assert store.get_session(session.session_id, max_age=3600) is None
        assert session.session_id not in store.sessions

    def test_prune_expired(self):
        stale = store.create_session()
        fresh = store.create_session()
        stale.last_seen_at = datetime.now(timezone.utc) - timedelta(days=30)

        assert store.prune_expired(max_age=3600) == 1
        assert list(store.sessions) == [fresh.session_id]

    def test_prune_while_other_threads_create(self):
        stale_at = datetime.now(timezone.utc) - timedelta(days=30)
        for _ in range(20000):
            store.create_session().last_seen_at = stale_at

        errors = []
        created = []
        start = threading.Barrier(4)

        def create_many():
            start.wait()
            try:
                for _ in range(2000):
                    created.append(store.create_session().session_id)
            except Exception as exc:
                errors.append(repr(exc))

        def prune_repeatedly():
            start.wait()
            try:
                for _ in range(50):
                    store.prune_expired(max_age=3600)
            except Exception as exc:
                errors.append(repr(exc))

        threads = [threading.Thread(target=create_many) for _ in range(3)]
        threads.append(threading.Thread(target=prune_repeatedly))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        store.prune_expired(max_age=3600)
        assert sorted(store.sessions) == sorted(created)
