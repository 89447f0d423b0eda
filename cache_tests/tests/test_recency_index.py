import pytest

from core.errors import IndexInconsistencyError
from core.models import Entry
from core.recency_index import RecencyIndex


def _index(*keys):
    idx = RecencyIndex()
    for k in keys:
        idx.push_front(Entry(key=k, value=k.upper()))
    return idx


def test_recency_index_empty():
    idx = RecencyIndex()
    assert len(idx) == 0
    assert idx.front() is None
    assert idx.back() is None
    assert list(idx) == []


def test_recency_index_push_front_orders_most_recent_first():
    idx = _index("a", "b", "c")

    assert [e.key for e in idx] == ["c", "b", "a"]
    assert idx.front().key == "c"
    assert idx.back().key == "a"
    assert "b" in idx
    assert idx.lookup("b").value == "B"
    assert idx.lookup("zzz") is None


def test_recency_index_move_to_front_and_pop_back():
    idx = _index("a", "b", "c")

    idx.move_to_front("a")
    assert idx.front().key == "a"

    assert idx.pop_back().key == "b"
    assert [e.key for e in idx] == ["a", "c"]


def test_recency_index_replace_keeps_position():
    idx = _index("a", "b")

    idx.replace(Entry(key="a", value=1, expire_at=5))

    assert idx.back().key == "a"
    assert idx.back().value == 1
    assert idx.back().expire_at == 5


def test_recency_index_remove():
    idx = _index("a", "b")
    assert idx.remove("a").key == "a"
    assert len(idx) == 1
    assert "a" not in idx


def test_recency_index_inconsistency_is_fatal():
    idx = _index("a")

    with pytest.raises(IndexInconsistencyError):
        idx.push_front(Entry(key="a", value=None))
    with pytest.raises(IndexInconsistencyError):
        idx.move_to_front("missing")
    with pytest.raises(IndexInconsistencyError):
        idx.remove("missing")
    with pytest.raises(IndexInconsistencyError):
        idx.replace(Entry(key="missing", value=None))

    idx.pop_back()
    with pytest.raises(IndexInconsistencyError):
        idx.pop_back()


def test_index_inconsistency_is_not_a_cache_error():
    from core.errors import CacheError

    assert not issubclass(IndexInconsistencyError, CacheError)
    assert issubclass(IndexInconsistencyError, RuntimeError)


def test_entry_expiry_boundary():
    e = Entry(key="k", value=1, expire_at=10.0)
    assert not e.is_expired(9.999)
    assert e.is_expired(10.0)
    assert not Entry(key="k", value=1).is_expired(1e12)
