from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from commentsync.adapters.comment_store import JsonChangeWriter, JsonCommentStore
from commentsync.adapters.legacy_sheet import JsonRowSource
from commentsync.app import reconcile_ballot
from commentsync.config import (
    ConfigurationError,
    configure_logging,
    get_reconcile_config,
    split_tokens,
    verbosity_level,
)
from commentsync.domain.reconciliation import (
    ReconciliationEngine,
    ReconciliationOptions,
    default_comparator_chain,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from commentsync.config import ReconcileConfig
    from commentsync.domain.reconciliation import ReconciliationResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Re-import edited comment spreadsheets")
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Match spreadsheet rows to stored comments and compute changes",
    )
    reconcile.add_argument(
        "--records",
        type=Path,
        required=True,
        help="JSON export of the stored comment/resolution records",
    )
    reconcile.add_argument(
        "--rows",
        type=Path,
        required=True,
        help="JSON export of the edited spreadsheet rows",
    )
    reconcile.add_argument(
        "--ballot",
        type=str,
        help="Grouping key to read from the records file (required for keyed exports)",
    )
    reconcile.add_argument(
        "--strategy",
        type=str,
        help="Match strategy: ByIdentity, Perfect or ByElimination (defaults to config)",
    )
    reconcile.add_argument(
        "--policy",
        type=str,
        help="Merge policy: RequireTotalMatch, ApplyPartial or InsertUnmatchedOnly "
        "(defaults to config)",
    )
    reconcile.add_argument(
        "--categories",
        type=str,
        help="Comma-separated update categories (defaults to config)",
    )
    reconcile.add_argument(
        "--output",
        type=Path,
        help="Write the report as JSON to this file instead of stdout",
    )
    reconcile.add_argument(
        "--changes",
        type=Path,
        help="Write the change set as JSON to this file when it may be applied",
    )
    reconcile.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-rotation matching detail",
    )

    return parser.parse_args(list(argv))


def _build_options(args: argparse.Namespace, config: ReconcileConfig) -> ReconciliationOptions:
    categories = split_tokens(args.categories) if args.categories else config.categories
    return ReconciliationOptions.parse(
        categories=categories,
        policy=args.policy or config.policy,
        strategy=args.strategy or config.strategy,
    )


def _write_result(result: ReconciliationResult, output: Path | None) -> None:
    document = {
        "report": result.report.as_dict(),
        "changes": result.changes.as_dict(),
    }
    rendered = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    if output is None:
        sys.stdout.write(rendered)
    else:
        output.write_text(rendered, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=verbosity_level(verbose=parsed_args.verbose))

    try:
        config = get_reconcile_config()
        options = _build_options(parsed_args, config)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command != "reconcile":
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
        engine = ReconciliationEngine(
            chain=default_comparator_chain(
                clause_truncation_length=config.clause_truncation_length,
            )
        )
        result = reconcile_ballot(
            store=JsonCommentStore(parsed_args.records),
            row_source=JsonRowSource(parsed_args.rows),
            grouping_key=parsed_args.ballot,
            options=options,
            sink=JsonChangeWriter(parsed_args.changes) if parsed_args.changes else None,
            engine=engine,
        )
        _write_result(result, parsed_args.output)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
