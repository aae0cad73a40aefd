from rbdb.store import Store


def test_store_starts_empty() -> None:
    store = Store()

    assert len(store) == 0
    assert store.get("k") is None
    assert "k" not in store


def test_put_reports_replacement() -> None:
    store = Store()

    assert store.put("k", "v1") is False
    assert store.put("k", "v2") is True
    assert store.get("k") == "v2"


def test_remove_returns_value_or_none() -> None:
    store = Store(entries={"k": "v"})

    assert store.remove("k") == "v"
    assert store.remove("k") is None

