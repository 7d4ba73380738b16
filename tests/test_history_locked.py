"""Tests for the lock-serialized history manager."""

from __future__ import annotations

import threading

import pytest

from rvedit.core.errors import UninitializedHistoryError
from rvedit.core.history import HistoryManager, LockedHistoryManager


def test_locked_manager_keeps_base_semantics() -> None:
    """The locked variant is a drop-in HistoryManager."""
    history: LockedHistoryManager[str] = LockedHistoryManager(3)
    assert isinstance(history, HistoryManager)

    history.initialize("s0")
    for snap in ("s1", "s2", "s3", "s4"):
        history.push(snap)
    assert history.past() == ("s1", "s2", "s3")
    assert history.undo() == "s3"
    assert history.status().redo_count == 1
    history.push("s5")
    assert history.can_redo() is False


def test_locked_manager_still_requires_initialize() -> None:
    history: LockedHistoryManager[str] = LockedHistoryManager(3)
    with pytest.raises(UninitializedHistoryError):
        history.undo()


def test_concurrent_pushes_are_all_recorded() -> None:
    """Pushes from several threads never lose or duplicate an entry."""
    threads_n, per_thread = 8, 50
    history: LockedHistoryManager[tuple[int, int]] = LockedHistoryManager(
        threads_n * per_thread
    )
    history.initialize((-1, -1))
    start = threading.Barrier(threads_n)

    def worker(tid: int) -> None:
        start.wait()
        for i in range(per_thread):
            history.push((tid, i))

    threads = [threading.Thread(target=worker, args=(t,)) for t in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    recorded = [*history.past()[1:], history.get_present()]
    assert history.get_undo_count() == threads_n * per_thread
    assert sorted(recorded) == sorted((t, i) for t in range(threads_n) for i in range(per_thread))
    # Each thread's own pushes stay in order.
    for tid in range(threads_n):
        mine = [i for t, i in recorded if t == tid]
        assert mine == list(range(per_thread))


def test_concurrent_undo_redo_keep_counters_consistent() -> None:
    history: LockedHistoryManager[int] = LockedHistoryManager(20)
    history.initialize(0)
    for value in range(1, 21):
        history.push(value)
    start = threading.Barrier(4)

    def flip(n: int) -> None:
        start.wait()
        for _ in range(n):
            with history.transaction() as h:
                if h.can_undo():
                    h.undo()
                    h.redo()

    threads = [threading.Thread(target=flip, args=(200,)) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert history.get_present() == 20
    assert history.get_undo_count() == 20
    assert history.get_redo_count() == 0


def test_transaction_is_reentrant() -> None:
    history: LockedHistoryManager[str] = LockedHistoryManager(5)
    with history.transaction() as h:
        h.initialize("a")
        h.push("b")
        with h.transaction():
            assert h.undo() == "a"
    assert history.status().can_redo is True


@pytest.mark.parametrize(
    "query", ["is_initialized", "can_undo", "can_redo", "get_undo_count", "get_redo_count"]
)
def test_queries_wait_for_the_lock(query: str) -> None:
    """Read-only queries block while another thread holds a transaction."""
    history: LockedHistoryManager[str] = LockedHistoryManager(5)
    history.initialize("s0")
    history.push("s1")
    answers: list[object] = []
    reader = threading.Thread(target=lambda: answers.append(getattr(history, query)()))

    with history.transaction():
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive(), f"{query}() did not wait for the lock"
        assert answers == []

    reader.join(timeout=5)
    assert not reader.is_alive()
    assert len(answers) == 1
