"""
HTTP client for the LexiLens API, and the session wiring the CLI uses.
"""

import httpx
from loguru import logger

from lexilens.config import API_URL, CLIENT_ID
from lexilens.core.define import BackendResult, OpenAIBackend, parse_payload
from lexilens.core.lookup import LookupClient
from lexilens.core.result import Usage
from lexilens.core.storage import ClientStorage, connect

BASE_URL = API_URL


def lookup(word: str) -> dict:
    r = httpx.get(f"{BASE_URL}/lookup", params={"word": word}, timeout=60)
    r.raise_for_status()
    return r.json()


class HttpBackend:
    """Definition backend that goes through the LexiLens API."""

    def define(self, word: str) -> BackendResult:
        try:
            data = lookup(word)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("API lookup failed for {!r}: {}", word, e)
            return BackendResult(False, None, str(e))

        if not isinstance(data, dict):
            logger.error("API returned a non-object body for {!r}", word)
            return BackendResult(False, None, "malformed response")

        try:
            usage = Usage.from_dict(data.get("usage") or {})
        except (KeyError, TypeError, ValueError) as e:
            logger.error("API returned bad usage for {!r}: {}", word, e)
            return BackendResult(False, None, "malformed usage")

        result = parse_payload(data, usage)
        if not result.success:
            logger.error("API returned an unusable definition for {!r}: {}", word, result.message)
        return result


def open_session(client_id: str = CLIENT_ID, direct: bool = False) -> LookupClient:
    """A lookup client over this machine's storage."""
    backend = OpenAIBackend() if direct else HttpBackend()
    storage = ClientStorage(connect(), client_id)
    return LookupClient(backend, storage)
