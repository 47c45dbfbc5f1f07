"""
Route definitions for the items API.

Endpoints under /api/items:
- GET    /                : list every title
- GET    /search?title=   : case-insensitive partial title search
- GET    /{item_id}       : one title by index
- POST   /                : append a title
- PUT    /{item_id}       : replace the title at an index
- DELETE /{item_id}       : remove the title at an index

``/search`` must stay registered before ``/{item_id}``; FastAPI matches
routes in registration order and would otherwise treat "search" as an id.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request

from .schemas import BooksResponse, RemovedBookResponse, TitlePayload
from .store import (
    BOOK_NOT_FOUND,
    BookNotFoundError,
    Catalog,
    IndexParseError,
    InvalidTitleError,
    parse_index,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/items", tags=["items"])


def get_catalog(request: Request) -> Catalog:
    """Dependency returning the catalogue owned by the running app."""
    return request.app.state.catalog


def _resolve_index(item_id: str) -> int:
    # Unparseable ids are reported exactly like out-of-range ones.
    try:
        return parse_index(item_id)
    except IndexParseError:
        logger.debug("Rejected non-numeric item id %r", item_id)
        raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)


def _title_of(payload: Optional[TitlePayload]) -> Optional[str]:
    return payload.title if payload is not None else None


@router.get("", response_model=List[str])
@router.get("/", response_model=List[str], include_in_schema=False)
def list_items(catalog: Catalog = Depends(get_catalog)) -> List[str]:
    return catalog.list_titles()


@router.get("/search", response_model=List[str])
def search_items(
    title: Optional[str] = Query(default=None, description="Partial title, case-insensitive"),
    catalog: Catalog = Depends(get_catalog),
) -> List[str]:
    """
    Returns every title containing ``title``.

    An empty ``title`` matches everything; an absent one is a 400.
    No match is still a 200 with an empty list.
    """
    if title is None:
        raise HTTPException(status_code=400, detail="Please provide a title to search.")
    return catalog.search(title)


@router.get("/{item_id}", response_model=str)
def get_item(item_id: str, catalog: Catalog = Depends(get_catalog)) -> str:
    index = _resolve_index(item_id)
    try:
        return catalog.get(index)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=BooksResponse, status_code=201)
@router.post("/", response_model=BooksResponse, status_code=201, include_in_schema=False)
def create_item(
    payload: Optional[TitlePayload] = Body(default=None),
    catalog: Catalog = Depends(get_catalog),
) -> BooksResponse:
    try:
        books = catalog.add(_title_of(payload))
    except InvalidTitleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BooksResponse(message="Book added successfully", books=books)


@router.put("/{item_id}", response_model=BooksResponse)
def update_item(
    item_id: str,
    payload: Optional[TitlePayload] = Body(default=None),
    catalog: Catalog = Depends(get_catalog),
) -> BooksResponse:
    """
    Replaces the title at ``item_id``.

    The catalogue checks the index before the title, so a bad index wins
    over a bad payload (404 rather than 400).
    """
    index = _resolve_index(item_id)
    try:
        books = catalog.update(index, _title_of(payload))
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTitleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BooksResponse(message="Book updated successfully", books=books)


@router.delete("/{item_id}", response_model=RemovedBookResponse)
def delete_item(item_id: str, catalog: Catalog = Depends(get_catalog)) -> RemovedBookResponse:
    index = _resolve_index(item_id)
    try:
        removed, books = catalog.remove(index)
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return RemovedBookResponse(
        message="Book removed successfully",
        removedBook=removed,
        books=books,
    )
