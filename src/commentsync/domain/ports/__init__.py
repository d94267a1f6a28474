"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import ExternalRowSource
from .persistence import ChangeSink, CommentStore

__all__ = [
    "ChangeSink",
    "CommentStore",
    "ExternalRowSource",
]
