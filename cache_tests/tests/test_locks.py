import threading
import time

from core.locks import ReadWriteLock

import pytest


def test_rwlock_allows_concurrent_readers():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=5)

    def reader():
        with lock.read_locked():
            # All three readers must be inside at once to pass the barrier
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not any(t.is_alive() for t in threads)


def test_rwlock_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_in = threading.Event()

    def writer():
        with lock.write_locked():
            writer_in.set()
            time.sleep(0.05)
            events.append("writer-done")

    def reader():
        writer_in.wait(timeout=5)
        with lock.read_locked():
            events.append("reader")

    tw = threading.Thread(target=writer)
    tr = threading.Thread(target=reader)
    tw.start()
    tr.start()
    tw.join(timeout=5)
    tr.join(timeout=5)

    assert events == ["writer-done", "reader"]


def test_rwlock_release_without_acquire_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_rwlock_releases_on_exception():
    lock = ReadWriteLock()

    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("boom")

    # Lock must be free again
    with lock.read_locked():
        pass
    with lock.write_locked():
        pass


def test_rwlock_interrupted_writer_wakes_readers(monkeypatch):
    lock = ReadWriteLock()
    lock.acquire_read()
    notified = []
    real_notify_all = lock._cond.notify_all

    def fake_wait(timeout=None):
        raise RuntimeError("interrupted")

    def notify_all():
        notified.append(True)
        real_notify_all()

    monkeypatch.setattr(lock._cond, "wait", fake_wait)
    monkeypatch.setattr(lock._cond, "notify_all", notify_all)

    with pytest.raises(RuntimeError, match="interrupted"):
        lock.acquire_write()

    assert lock._writers_waiting == 0
    assert notified == [True]

    # No writer is pending any more, so another reader gets in
    lock.acquire_read()
    lock.release_read()
    lock.release_read()
