"""
Shared dependencies for routes.
"""

from lexilens.core.define import DefinitionBackend, OpenAIBackend


def get_backend() -> DefinitionBackend:
    return OpenAIBackend()
