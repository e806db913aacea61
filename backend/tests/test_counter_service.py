"""Tests for app.services.counter_service: peek and atomic increments."""
import threading

import pytest

from app.database import Base, build_engine
from app.errors import CounterUnavailable
from app.models.counter import CounterScope
from app.services.counter_service import SequenceCounter
from sqlalchemy.orm import sessionmaker


@pytest.fixture
def counter():
    return SequenceCounter()


class TestPeekNext:
    def test_absent_scope_peeks_one(self, db, counter):
        assert counter.peek_next(db, "2501") == 1

    def test_peek_does_not_persist(self, db, counter):
        counter.peek_next(db, "2501")
        counter.peek_next(db, "2501")
        assert db.query(CounterScope).count() == 0

    def test_peek_follows_increments(self, db, counter):
        counter.increment_and_get(db, "2501")
        counter.increment_and_get(db, "2501")
        assert counter.peek_next(db, "2501") == 3

    def test_peek_never_decreases(self, db, counter):
        seen = []
        for _ in range(5):
            seen.append(counter.peek_next(db, "2501"))
            counter.increment_and_get(db, "2501")
            seen.append(counter.peek_next(db, "2501"))
        assert seen == sorted(seen)


class TestIncrementAndGet:
    def test_first_increment_creates_scope(self, db, counter):
        assert counter.increment_and_get(db, "2501") == 1
        row = db.query(CounterScope).filter(CounterScope.name == "2501").one()
        assert row.last_sequence == 1

    def test_consecutive_increments(self, db, counter):
        values = [counter.increment_and_get(db, "2501") for _ in range(4)]
        assert values == [1, 2, 3, 4]

    def test_scopes_are_independent(self, db, counter):
        counter.increment_and_get(db, "2501")
        counter.increment_and_get(db, "2501")
        assert counter.increment_and_get(db, "2502") == 1
        assert counter.peek_next(db, "2501") == 3

    def test_increment_survives_caller_rollback(self, db, counter):
        counter.increment_and_get(db, "2501")
        db.rollback()
        assert counter.increment_and_get(db, "2501") == 2


class TestCounterUnavailable:
    def test_increment_fails_without_storage(self, db, engine, counter):
        Base.metadata.tables["counters"].drop(engine)
        with pytest.raises(CounterUnavailable) as exc_info:
            counter.increment_and_get(db, "2501")
        assert exc_info.value.scope_key == "2501"
        assert exc_info.value.context["scope_key"] == "2501"

    def test_peek_fails_without_storage(self, db, engine, counter):
        Base.metadata.tables["counters"].drop(engine)
        with pytest.raises(CounterUnavailable):
            counter.peek_next(db, "2501")


class TestConcurrentIncrements:
    """Concurrent callers on a file database must get a gapless, duplicate-free set."""

    THREADS = 8
    CALLS_PER_THREAD = 5

    @pytest.fixture
    def file_session_factory(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'counters.db'}", timeout_seconds=30)
        Base.metadata.create_all(engine)
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
        engine.dispose()

    def _run_concurrently(self, session_factory, key):
        counter = SequenceCounter()
        results = []
        errors = []
        lock = threading.Lock()
        start = threading.Barrier(self.THREADS)

        def worker():
            session = session_factory()
            try:
                start.wait()
                for _ in range(self.CALLS_PER_THREAD):
                    value = counter.increment_and_get(session, key)
                    with lock:
                        results.append(value)
            except Exception as e:
                with lock:
                    errors.append(e)
            finally:
                session.close()

        threads = [threading.Thread(target=worker) for _ in range(self.THREADS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return results, errors

    def test_no_duplicates_and_no_gaps(self, file_session_factory):
        results, errors = self._run_concurrently(file_session_factory, "2501")

        assert errors == []
        total = self.THREADS * self.CALLS_PER_THREAD
        assert sorted(results) == list(range(1, total + 1))

    def test_continues_from_existing_sequence(self, file_session_factory):
        session = file_session_factory()
        counter = SequenceCounter()
        for _ in range(3):
            counter.increment_and_get(session, "2501")
        session.close()

        results, errors = self._run_concurrently(file_session_factory, "2501")

        assert errors == []
        total = self.THREADS * self.CALLS_PER_THREAD
        assert sorted(results) == list(range(4, 4 + total))
