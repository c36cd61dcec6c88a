"""
Restaurant catalog.

Responsibilities:
- Read the static restaurant dataset once per process.
- Validate every row into an immutable ``Restaurant`` record.
- Hand the search pipeline a read-only, ordered sequence.
"""
from .data_store import get_catalog, get_restaurant, load_catalog
from .models import Restaurant

__all__ = ["Restaurant", "get_catalog", "get_restaurant", "load_catalog"]
