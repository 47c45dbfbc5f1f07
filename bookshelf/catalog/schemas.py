"""
Pydantic schema definitions for the items API.

Titles travel as bare strings, so the only models are the request body
used by create/update and the envelopes returned after a mutation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class TitlePayload(BaseModel):
    """Body of ``POST /api/items`` and ``PUT /api/items/{id}``.

    ``title`` is optional at the schema level so that a missing field
    reaches the catalogue's own check and gets its 400 message instead of
    a generic validation error.
    """

    title: Optional[str] = None


class BooksResponse(BaseModel):
    message: str
    books: List[str]


class RemovedBookResponse(BaseModel):
    """Returned by ``DELETE /api/items/{id}``."""

    message: str
    # Serialised as ``removedBook`` for compatibility with existing clients.
    removed_book: str = Field(alias="removedBook")
    books: List[str]
