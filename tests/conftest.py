"""Shared fixtures: fake Redis storage and scripted definition backends."""

import json

import fakeredis
import pytest

from lexilens.core.define import BackendResult, parse_response
from lexilens.core.result import Usage
from lexilens.core.storage import ClientStorage


GOOD_RESPONSE = json.dumps({
    "definition": "the capacity to recover quickly from difficulties",
    "synonyms": ["toughness", "elasticity"],
    "antonyms": ["fragility"],
    "examples": ["Her resilience carried the team through the season."],
    "fact": "From the Latin resilire, 'to leap back'.",
})


class ScriptedBackend:
    """Replies with fixed content and records every word it was asked for."""

    def __init__(self, content: str | None = GOOD_RESPONSE, fail: bool = False):
        self.content = content
        self.fail = fail
        self.calls = []

    def define(self, word: str) -> BackendResult:
        self.calls.append(word)
        if self.fail:
            return BackendResult(False, None, "connection refused")
        return parse_response(self.content, Usage(40, 120))


@pytest.fixture
def redis_client():
    r = fakeredis.FakeRedis()
    yield r
    r.flushall()


@pytest.fixture
def storage(redis_client):
    return ClientStorage(redis_client, client_id="test")


@pytest.fixture
def make_backend():
    return ScriptedBackend


@pytest.fixture
def good_response():
    return GOOD_RESPONSE
