"""Public interface for the JSON comment store adapter."""

from __future__ import annotations

from .schema import CommentRecordInput, CommentRecordPayload
from .store import CommentStoreError, JsonChangeWriter, JsonCommentStore, parse_canonical_record

__all__ = [
    "CommentRecordInput",
    "CommentRecordPayload",
    "CommentStoreError",
    "JsonChangeWriter",
    "JsonCommentStore",
    "parse_canonical_record",
]
