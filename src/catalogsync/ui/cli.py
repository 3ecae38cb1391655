from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from catalogsync.adapters.catalog import read_product_drafts, read_products
from catalogsync.app import plan_product_actions, sync_product_drafts
from catalogsync.config import configure_logging
from catalogsync.domain.reconciliation import ReconciliationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise catalog products")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log reconciliation details at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan = subparsers.add_parser("plan", help="Print the update actions without executing them")
    plan.add_argument(
        "--existing",
        type=Path,
        required=True,
        help="JSON file with the products as they currently exist",
    )
    plan.add_argument(
        "--drafts",
        type=Path,
        required=True,
        help="JSON file with the desired product drafts",
    )

    sync = subparsers.add_parser("sync", help="Sync product drafts into the catalog")
    sync.add_argument(
        "--drafts",
        type=Path,
        required=True,
        help="JSON file with the desired product drafts",
    )
    sync.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Number of products fetched per request (defaults to config)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        batch_size = getattr(parsed_args, "batch_size", None)
        if batch_size is not None and batch_size < 1:
            raise ValueError("Batch size must be at least 1")  # noqa: TRY301
        existing = read_products(parsed_args.existing) if parsed_args.command == "plan" else []
        drafts = read_product_drafts(parsed_args.drafts)
    except (OSError, ValidationError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "plan":
            plans = plan_product_actions(existing, drafts)
            json.dump([plan.to_payload() for plan in plans], sys.stdout, indent=2)
            sys.stdout.write("\n")
            if any(plan.failed for plan in plans):
                sys.exit(1)
        elif parsed_args.command == "sync":
            statistics = sync_product_drafts(drafts, batch_size=batch_size)
            if statistics.failed:
                sys.exit(1)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ReconciliationError:
        log.exception("Failed to build update actions")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during sync")
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
