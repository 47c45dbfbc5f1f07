"""
In-memory data store for the items API.

The catalogue is an ordered list of book titles addressed by position:
the title at index ``i`` is reachable as ``/api/items/i`` and deleting a
title shifts every later index down by one. Nothing is persisted; a new
``Catalog`` starts from ``SEED_TITLES`` each time the process starts.

FastAPI runs synchronous handlers in a thread pool, so every operation
that reads and then writes the list holds ``Catalog._lock`` for its whole
duration.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Iterable, List, Optional, Tuple


logger = logging.getLogger(__name__)

SEED_TITLES: Tuple[str, ...] = (
    "The Hobbit",
    "1984",
    "To Kill a Mockingbird",
    "Moby Dick",
    "Pride and Prejudice",
)

TITLE_REQUIRED = "Title is required and cannot be empty."
BOOK_NOT_FOUND = "Book not found"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class CatalogError(Exception):
    """Base class for errors raised by the catalogue."""


class BookNotFoundError(CatalogError):
    """The requested index is outside ``[0, len(catalog))``."""

    def __init__(self, index: int):
        super().__init__(BOOK_NOT_FOUND)
        self.index = index


class InvalidTitleError(CatalogError):
    """The title is missing or blank once whitespace is stripped."""

    def __init__(self):
        super().__init__(TITLE_REQUIRED)


class IndexParseError(CatalogError):
    """A path segment could not be read as an integer index."""

    def __init__(self, raw: str):
        super().__init__(f"Not an index: {raw!r}")
        self.raw = raw


def parse_index(raw: str) -> int:
    """Convert a path segment into an integer index.

    Only an optional sign followed by ASCII digits is accepted, so values
    such as ``"search"``, ``"1.5"`` or ``" 2"`` raise ``IndexParseError``.
    The value is not bounds-checked here.
    """
    if not _INDEX_RE.fullmatch(raw or ""):
        raise IndexParseError(raw)
    try:
        return int(raw)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        raise IndexParseError(raw)


def validate_title(title: Optional[str]) -> str:
    """Return ``title`` unchanged if it holds at least one non-blank character.

    Raises
    ------
    InvalidTitleError
        When ``title`` is ``None`` or empty after stripping whitespace.
    """
    if title is None or not title.strip():
        raise InvalidTitleError()
    return title


class Catalog:
    """Ordered, index-addressed collection of book titles.

    Parameters
    ----------
    titles : Optional[Iterable[str]]
        Initial contents. Defaults to ``SEED_TITLES``. The iterable is
        copied, so the caller's sequence is never mutated.
    """

    def __init__(self, titles: Optional[Iterable[str]] = None):
        self._titles: List[str] = list(SEED_TITLES if titles is None else titles)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._titles)

    def _check_bounds(self, index: int) -> None:
        # caller holds self._lock
        if not 0 <= index < len(self._titles):
            raise BookNotFoundError(index)

    def list_titles(self) -> List[str]:
        """Return a snapshot of every title in catalogue order."""
        with self._lock:
            return list(self._titles)

    def search(self, query: str) -> List[str]:
        """Return titles containing ``query``, ignoring case.

        The query is not stripped. An empty query is a substring of every
        title and therefore matches the whole catalogue.

        Parameters
        ----------
        query : str
            Partial title to look for.

        Returns
        -------
        List[str]
            Matching titles in their original relative order; empty when
            nothing matches.
        """
        needle = query.lower()
        with self._lock:
            return [t for t in self._titles if needle in t.lower()]

    def get(self, index: int) -> str:
        with self._lock:
            self._check_bounds(index)
            return self._titles[index]

    def add(self, title: Optional[str]) -> List[str]:
        """Append a title and return the updated catalogue.

        The untrimmed value is stored; only the validity check strips it.
        """
        title = validate_title(title)
        with self._lock:
            self._titles.append(title)
            index = len(self._titles) - 1
            snapshot = list(self._titles)
        logger.info("Added book %r at index %d", title, index)
        return snapshot

    def update(self, index: int, title: Optional[str]) -> List[str]:
        """Replace the title at ``index`` and return the updated catalogue.

        The bounds check runs before title validation, so an out-of-range
        index reports ``BookNotFoundError`` even when the title is blank.
        """
        with self._lock:
            self._check_bounds(index)
            title = validate_title(title)
            previous = self._titles[index]
            self._titles[index] = title
            snapshot = list(self._titles)
        logger.info("Updated book at index %d: %r -> %r", index, previous, title)
        return snapshot

    def remove(self, index: int) -> Tuple[str, List[str]]:
        """Delete the title at ``index``.

        Returns
        -------
        Tuple[str, List[str]]
            The removed title and the catalogue after removal.
        """
        with self._lock:
            self._check_bounds(index)
            removed = self._titles.pop(index)
            snapshot = list(self._titles)
        logger.info("Removed book %r from index %d", removed, index)
        return removed, snapshot
