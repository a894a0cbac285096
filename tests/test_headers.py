"""Tests for protonav.headers."""

import threading

from protonav.entity import Header
from protonav.headers import HeaderStore


class TestHeaderStore:
    def test_add_and_list(self):
        store = HeaderStore()
        store.add(Header("x-id", "1"))
        assert store.list() == [Header("x-id", "1")]
        assert "x-id" in store
        assert len(store) == 1

    def test_add_overwrites(self):
        store = HeaderStore()
        store.add(Header("k", "old"))
        store.add(Header("k", "new"))
        assert store.list() == [Header("k", "new")]

    def test_remove(self):
        store = HeaderStore()
        store.add(Header("k", "v"))
        store.remove("k")
        assert store.list() == []
        assert "k" not in store

    def test_remove_absent_is_noop(self):
        store = HeaderStore()
        store.remove("missing")
        assert len(store) == 0

    def test_list_sorted_by_key(self):
        store = HeaderStore()
        for key in ["zeta", "alpha", "Mid", "beta"]:
            store.add(Header(key, key.upper()))
        assert [h.key for h in store.list()] == ["Mid", "alpha", "beta", "zeta"]

    def test_list_returns_copies(self):
        store = HeaderStore()
        store.add(Header("k", "v"))
        listed = store.list()
        listed[0].value = "tampered"
        listed.append(Header("extra", "x"))
        assert store.list() == [Header("k", "v")]

    def test_added_header_is_copied(self):
        store = HeaderStore()
        header = Header("k", "v")
        store.add(header)
        header.value = "changed"
        assert store.list() == [Header("k", "v")]

    def test_concurrent_access(self):
        store = HeaderStore()
        errors: list[Exception] = []

        def worker(n: int) -> None:
            try:
                for i in range(200):
                    key = f"w{n}-{i % 10}"
                    store.add(Header(key, str(i)))
                    store.list()
                    if i % 3 == 0:
                        store.remove(key)
            except Exception as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        keys = [h.key for h in store.list()]
        assert keys == sorted(keys)
        assert len(keys) == len(set(keys))
