#!/usr/bin/env python3
"""CLI helper to query a word bank the same way the web UI does."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from phrase_finder.app.app import PhraseFinderApp
from phrase_finder.app.data.word_bank import WordBankError
from phrase_finder.app.services.search_service import SearchContext


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Filter one category of a word bank with a wildcard query. "
            "Use '*' for any run of characters; a query without '*' is a "
            "substring search."
        )
    )
    parser.add_argument("query", nargs="?", default="", help="Wildcard query (default: everything).")
    parser.add_argument(
        "--word-bank",
        default=None,
        help="Path to a word bank JSON file (defaults to the bundled sample).",
    )
    parser.add_argument(
        "--category",
        type=int,
        default=1,
        help="One-based category number, as shown in the sidebar.",
    )
    parser.add_argument("--tier", type=int, default=None, help="Point tier for tiered banks.")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON.")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate the word bank, then print a summary.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        app = PhraseFinderApp(args.word_bank)
    except WordBankError as exc:
        print(f"Word bank error: {exc}", file=sys.stderr)
        return 2

    if args.check:
        bank = app.word_bank
        print(
            f"ok: {len(bank)} phrases, tiered={bank.is_tiered}, "
            f"tiers={list(bank.tiers)}"
        )
        return 0

    context = SearchContext(
        category_index=max(0, args.category - 1),
        tier=args.tier if args.tier is not None else app.word_bank.default_tier,
        query=args.query,
    )
    result = app.search(context)

    if args.json:
        payload = {"count": result.count, "phrases": list(result.phrases)}
        json.dump(payload, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0

    print(result.count)
    for phrase in result.phrases:
        print(phrase)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
