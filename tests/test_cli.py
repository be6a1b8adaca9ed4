# tests/test_cli.py
"""Tests for the CLI and the HTTP-backed definition backend."""

import json

import httpx
import pytest

from lexilens.cli import client
from lexilens.cli.main import main
from lexilens.core.lookup import LookupClient


@pytest.fixture
def session(make_backend, storage, monkeypatch):
    lookup_client = LookupClient(make_backend(), storage)
    monkeypatch.setattr(client, "open_session", lambda client_id, direct=False: lookup_client)
    return lookup_client


# === HttpBackend ===

def test_http_backend_success(monkeypatch, good_response):
    body = json.loads(good_response)
    body["usage"] = {"prompt_tokens": 1000, "completion_tokens": 500, "total_tokens": 1500}
    monkeypatch.setattr(client, "lookup", lambda word: body)

    result = client.HttpBackend().define("resilience")

    assert result.success
    assert result.data.usage.total_tokens == 1500
    assert result.data.antonyms == ("fragility",)


def test_http_backend_server_error(monkeypatch):
    def fail(word):
        request = httpx.Request("GET", "http://localhost:8000/api/lookup")
        response = httpx.Response(500, request=request, json={"error": "Failed to fetch definition"})
        raise httpx.HTTPStatusError("500", request=request, response=response)

    monkeypatch.setattr(client, "lookup", fail)
    assert not client.HttpBackend().define("resilience").success


def test_http_backend_unreachable(monkeypatch):
    def fail(word):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(client, "lookup", fail)
    assert not client.HttpBackend().define("resilience").success


def test_http_backend_missing_usage(monkeypatch, good_response):
    monkeypatch.setattr(client, "lookup", lambda word: json.loads(good_response))
    assert not client.HttpBackend().define("resilience").success


# === Commands ===

def test_define(session, capsys):
    main(["define", "resilience"])

    out = capsys.readouterr().out
    assert "Resilience" in out
    assert "Definition:" in out
    assert "toughness, elasticity" in out
    assert "160 tokens used" in out
    assert session.history.all() == ["resilience"]


def test_define_too_many_words(session, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["define", "once", "upon", "a", "time"])

    assert exc.value.code == 1
    assert "at most 3 words" in capsys.readouterr().out
    assert session.history.all() == []


def test_history_list_and_again(session, capsys):
    main(["define", "alpha"])
    main(["define", "bravo"])
    capsys.readouterr()

    main(["history"])
    out = capsys.readouterr().out
    assert "1. bravo" in out
    assert "2. alpha" in out

    main(["history", "again", "2"])
    assert session.history.all() == ["alpha", "bravo"]


def test_history_again_out_of_range(session):
    with pytest.raises(SystemExit):
        main(["history", "again", "3"])


def test_history_clear(session, capsys):
    main(["define", "alpha"])
    main(["history", "clear"])
    assert session.history.all() == []


def test_quota_show_and_reset(session, capsys):
    main(["define", "alpha"])
    capsys.readouterr()

    main(["quota"])
    assert "24" in capsys.readouterr().out

    main(["quota", "reset"])
    main(["quota"])
    assert "25" in capsys.readouterr().out
