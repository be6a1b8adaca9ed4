# src/lexilens/core/define.py
"""
Definition backend: one chat completion per lookup.

The model is asked for a JSON object with the keys definition, synonyms,
antonyms, examples and fact. Its reply is decoded strictly; anything that
does not fit comes back as a failed BackendResult, never as an exception.
"""

from dataclasses import dataclass
from typing import Protocol

from loguru import logger
from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lexilens.config import MODEL
from lexilens.core.result import LookupResult, Usage


PROMPT_TEMPLATE = (
    'Define the word "{word}". Also include synonyms, antonyms, a couple of usage '
    "examples, and an interesting fact if available. Respond in JSON format with "
    "keys: definition, synonyms, antonyms, examples, fact."
)


def build_prompt(word: str) -> str:
    return PROMPT_TEMPLATE.format(word=word)


class DefinitionPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    definition: str = Field(min_length=1)
    synonyms: list[str]
    antonyms: list[str]
    examples: list[str]
    fact: str | None = None


@dataclass
class BackendResult:
    success: bool
    data: LookupResult | None
    message: str = ""


def _to_result(payload: DefinitionPayload, usage: Usage) -> BackendResult:
    result = LookupResult(
        definition=payload.definition,
        synonyms=tuple(payload.synonyms),
        antonyms=tuple(payload.antonyms),
        examples=tuple(payload.examples),
        fact=payload.fact or None,
        usage=usage,
    )
    return BackendResult(True, result)


def parse_response(content: str | None, usage: Usage) -> BackendResult:
    """Decode the model's raw text."""
    if not content:
        return BackendResult(False, None, "empty response")
    try:
        payload = DefinitionPayload.model_validate_json(content)
    except ValidationError as e:
        return BackendResult(False, None, f"malformed definition: {e.error_count()} error(s)")
    return _to_result(payload, usage)


def parse_payload(data, usage: Usage) -> BackendResult:
    """Decode an already-parsed JSON value (e.g. the HTTP API's body)."""
    try:
        payload = DefinitionPayload.model_validate(data)
    except ValidationError as e:
        return BackendResult(False, None, f"malformed definition: {e.error_count()} error(s)")
    return _to_result(payload, usage)


class DefinitionBackend(Protocol):
    def define(self, word: str) -> BackendResult: ...


class OpenAIBackend:
    """Asks OpenAI directly."""

    def __init__(self, client: OpenAI | None = None, model: str = MODEL):
        self._client = client
        self.model = model

    def _get_client(self) -> OpenAI:
        # Built lazily so a missing API key surfaces as a failed lookup
        if self._client is None:
            self._client = OpenAI()
        return self._client

    def define(self, word: str) -> BackendResult:
        prompt = build_prompt(word)

        try:
            response = self._get_client().chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error("OpenAI error for {!r}: {}", word, e)
            return BackendResult(False, None, str(e))

        content = response.choices[0].message.content if response.choices else None
        result = parse_response(content, Usage.from_openai(response.usage))

        if not result.success:
            logger.error("Unusable definition for {!r}: {}", word, result.message)
            logger.debug("Raw response: {!r}", content)
        return result
