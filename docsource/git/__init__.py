"""Git plumbing used to read dependency repositories."""

from .objects import GitObjectReader

__all__ = ["GitObjectReader"]
