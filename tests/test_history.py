# tests/test_history.py
"""Tests for the lookup history."""

import json

from lexilens.core.history import HistoryStore


def test_starts_empty(storage):
    assert HistoryStore(storage).all() == []


def test_add_puts_most_recent_first(storage):
    history = HistoryStore(storage)
    history.add("a")
    history.add("b")
    assert history.all() == ["b", "a"]


def test_readd_moves_to_front(storage):
    history = HistoryStore(storage)
    for word in ["c", "b", "a"]:
        history.add(word)
    assert history.all() == ["a", "b", "c"]

    history.add("b")
    assert history.all() == ["b", "a", "c"]


def test_bounded_to_five(storage):
    history = HistoryStore(storage)
    for word in ["one", "two", "three", "four", "five", "six"]:
        history.add(word)
    assert history.all() == ["six", "five", "four", "three", "two"]


def test_case_sensitive_identity(storage):
    history = HistoryStore(storage)
    history.add("Polish")
    history.add("polish")
    assert history.all() == ["polish", "Polish"]


def test_write_through(storage, redis_client):
    history = HistoryStore(storage)
    history.add("resilience")

    raw = redis_client.get("lexilens:test:history")
    assert json.loads(raw) == ["resilience"]
    assert HistoryStore(storage).all() == ["resilience"]


def test_clients_are_separate(redis_client, storage):
    from lexilens.core.storage import ClientStorage

    HistoryStore(storage).add("mine")
    other = HistoryStore(ClientStorage(redis_client, client_id="other"))
    assert other.all() == []


def test_malformed_record_is_empty(storage, redis_client):
    redis_client.set("lexilens:test:history", '{"not": "a list"}')
    assert HistoryStore(storage).all() == []

    redis_client.set("lexilens:test:history", "not json")
    assert HistoryStore(storage).all() == []


def test_clear(storage, redis_client):
    history = HistoryStore(storage)
    history.add("a")
    history.clear()
    assert history.all() == []
    assert redis_client.get("lexilens:test:history") is None


def test_get(storage):
    history = HistoryStore(storage)
    history.add("a")
    history.add("b")
    assert history.get(0) == "b"
    assert history.get(1) == "a"
    assert history.get(2) is None
    assert history.get(-1) is None


def test_tampered_record_is_cleaned(storage, redis_client):
    redis_client.set(
        "lexilens:test:history",
        '["a", "a", "", "  padded ", "one two three four", "b"]',
    )
    history = HistoryStore(storage)

    assert history.all() == ["a", "b"]
