"""Custom exception hierarchy for pyflota.

Malformed entity IDs are never reported through these: they resolve to
index/seed ``0`` so a UI surface cannot crash on an unexpected ID.
"""

from __future__ import annotations


class FlotaError(Exception):
    """Base exception for all pyflota errors."""


class FlotaConfigError(FlotaError):
    """Invalid or missing configuration."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class FlotaCatalogError(FlotaConfigError):
    """A catalog was constructed empty.

    Catalog lookups index with ``floor(scalar * len(catalog))`` and have
    no valid result for an empty sequence, so the check happens when the
    :class:`~pyflota.catalogs.Catalogs` bundle is built.
    """
