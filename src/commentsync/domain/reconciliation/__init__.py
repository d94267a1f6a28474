"""Reconciliation of re-imported spreadsheet rows with canonical records.

Flow:
1) parse and validate caller options
2) match records to rows through a corruption-tolerant comparator chain
3) diff matched pairs for the selected update categories
4) apply the merge policy to matches and leftovers
5) report what matched and what would change
"""

from __future__ import annotations

from .comparators import ComparatorChain, FieldComparison, default_comparator_chain
from .contracts import (
    ChangeSet,
    MatchedPair,
    MatchOutcome,
    MatchStrategy,
    MergePolicy,
    NewRecord,
    RecordChanges,
    RecordField,
    UpdateCategory,
)
from .diff import apply_changes, derive_new_record, diff_fields
from .disposition import Disposition, parse_disposition
from .engine import ReconciliationEngine, ReconciliationResult, reconcile
from .errors import InsufficientRowsError, InvalidConfigurationError, ReconciliationError
from .matching import find_match_by_elimination, match_records
from .options import ReconciliationOptions
from .policy import PolicyDecision, resolve_merge_policy
from .report import ReconciliationReport, build_report

__all__ = [
    "ChangeSet",
    "ComparatorChain",
    "Disposition",
    "FieldComparison",
    "InsufficientRowsError",
    "InvalidConfigurationError",
    "MatchOutcome",
    "MatchStrategy",
    "MatchedPair",
    "MergePolicy",
    "NewRecord",
    "PolicyDecision",
    "ReconciliationEngine",
    "ReconciliationError",
    "ReconciliationOptions",
    "ReconciliationReport",
    "ReconciliationResult",
    "RecordChanges",
    "RecordField",
    "UpdateCategory",
    "apply_changes",
    "build_report",
    "default_comparator_chain",
    "derive_new_record",
    "diff_fields",
    "find_match_by_elimination",
    "match_records",
    "parse_disposition",
    "reconcile",
    "resolve_merge_policy",
]
