"""Errors raised while reading build-output manifests."""

from __future__ import annotations


class ManifestFormatError(ValueError):
    """Raised when a manifest or one of its records has an unexpected shape."""


__all__ = ["ManifestFormatError"]
