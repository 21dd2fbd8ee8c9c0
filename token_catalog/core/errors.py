from __future__ import annotations


class CatalogError(Exception):
    """Base error for catalog resolution."""


class MetadataFetchError(CatalogError):
    """Venue list or spot metadata could not be fetched; the run cannot continue."""
