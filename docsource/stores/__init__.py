"""In-memory stores scoped to a build session."""

from .blob_cache import BlobCache

__all__ = ["BlobCache"]
