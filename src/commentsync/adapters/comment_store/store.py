"""JSON-file comment store and change sink."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

from commentsync.domain.model import CanonicalRecord

from .schema import CommentRecordPayload

if TYPE_CHECKING:
    from collections.abc import Mapping

    from commentsync.domain.reconciliation.contracts import ChangeSet

    from .schema import CommentRecordInput


log = logging.getLogger(__name__)


class CommentStoreError(LookupError):
    """Raised when the store has no records for a grouping key."""

    def __init__(self, *, grouping_key: str | None, path: Path) -> None:
        self.grouping_key = grouping_key
        self.path = path
        super().__init__(f"No comment records for {grouping_key!r} in {path}")


def parse_canonical_record(record: CommentRecordInput) -> CanonicalRecord:
    payload = (
        record
        if isinstance(record, CommentRecordPayload)
        else CommentRecordPayload.model_validate(record)
    )
    return CanonicalRecord(**payload.model_dump())


@dataclass(slots=True)
class JsonCommentStore:
    """``CommentStore`` backed by a JSON export.

    The file holds either one array of records (a single ballot) or an object
    mapping grouping keys to arrays of records.
    """

    path: Path

    def records_for(self, grouping_key: str | None = None) -> list[CanonicalRecord]:
        payload = json.loads(Path(self.path).read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            by_key = cast(dict[str, object], payload)
            if grouping_key is None or grouping_key not in by_key:
                raise CommentStoreError(grouping_key=grouping_key, path=self.path)
            payload = by_key[grouping_key]
        if not isinstance(payload, list):
            raise CommentStoreError(grouping_key=grouping_key, path=self.path)

        records = [
            parse_canonical_record(cast("Mapping[str, object]", item))
            for item in cast(list[object], payload)
        ]
        log.info("Loaded %s canonical records from %s", len(records), self.path)
        return records


@dataclass(slots=True)
class JsonChangeWriter:
    """``ChangeSink`` that writes the change set for a later persistence step."""

    path: Path

    def apply(self, changes: ChangeSet) -> None:
        Path(self.path).write_text(
            json.dumps(changes.as_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        log.info(
            "Wrote %s updates and %s inserts to %s",
            len(changes.updates),
            len(changes.inserts),
            self.path,
        )
