"""
Catalog package for the items API.

This package holds the in-memory title store, the request/response
schemas and the ``/api/items`` routes. Each application instance owns
one ``Catalog``; routes reach it through the ``get_catalog`` dependency
so tests can start every case from a fresh seed list.
"""

from .router import router as catalog_router  # noqa: F401
from .store import Catalog  # noqa: F401
