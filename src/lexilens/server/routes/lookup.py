"""
Lookup route: /api/lookup

Stateless: quota and history belong to the client, not the server.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from lexilens.core.lookup import BACKEND_MESSAGE
from lexilens.core.validate import ValidationError, validate
from lexilens.server.deps import get_backend


router = APIRouter(prefix="/api", tags=["lookup"])


@router.get("/lookup")
def lookup_word(word: str | None = None):
    """Define a word (at most 3 words)."""
    query = validate(word)
    if isinstance(query, ValidationError):
        return JSONResponse(status_code=400, content={"error": query.value})

    outcome = get_backend().define(query)
    if not outcome.success:
        return JSONResponse(status_code=500, content={"error": BACKEND_MESSAGE})

    return outcome.data.to_dict()
