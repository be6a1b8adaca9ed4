"""
Lookup results as returned to the UI.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int
    completion_tokens: int

    def __post_init__(self):
        if self.prompt_tokens < 0 or self.completion_tokens < 0:
            raise ValueError("token counts must be non-negative")

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    def to_dict(self) -> dict:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Usage":
        return cls(
            prompt_tokens=int(data["prompt_tokens"]),
            completion_tokens=int(data["completion_tokens"]),
        )

    @classmethod
    def from_openai(cls, usage) -> "Usage":
        # Some responses omit usage entirely
        if usage is None:
            return cls(0, 0)
        return cls(usage.prompt_tokens or 0, usage.completion_tokens or 0)


@dataclass(frozen=True)
class LookupResult:
    definition: str
    synonyms: tuple[str, ...]
    antonyms: tuple[str, ...]
    examples: tuple[str, ...]
    fact: str | None
    usage: Usage

    def to_dict(self) -> dict:
        return {
            "definition": self.definition,
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
            "examples": list(self.examples),
            "fact": self.fact,
            "usage": self.usage.to_dict(),
        }
