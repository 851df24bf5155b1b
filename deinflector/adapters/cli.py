# deinflector/adapters/cli.py
"""
Command-line interface for inspecting deinflection.

Usage:
    python -m deinflector lookup <lang> <text> [--trace]
    python -m deinflector health
    python -m deinflector languages

Examples:
    python -m deinflector lookup en studied
    python -m deinflector lookup ko 한글이다 --trace
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from deinflector.core.domain.exceptions import LanguageNotFoundError, LanguageUnavailableError
from deinflector.core.languages import list_registered_languages
from deinflector.shared.config import settings
from deinflector.shared.container import Container
from deinflector.shared.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deinflector",
        description="Enumerate dictionary lookup keys for inflected words.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Deinflect a word or phrase")
    lookup.add_argument("lang", help="Language code (en, ja, es, ko)")
    lookup.add_argument("text", nargs="+", help="Surface text; several words are joined with spaces")
    lookup.add_argument("--trace", action="store_true", help="Show conditions and applied rules")

    sub.add_parser("health", help="Build every enabled language and print the health report")
    sub.add_parser("languages", help="List registered languages")
    return parser


def _cmd_lookup(container: Container, lang: str, text: str, show_trace: bool) -> int:
    use_case = container.lookup_candidates_use_case()
    try:
        if not show_trace:
            for key in use_case.execute(lang, text):
                print(key)
            return 0

        for candidate in use_case.trace(lang, text):
            steps = " <- ".join(str(step) for step in candidate.trace) or "(input)"
            tags = ",".join(sorted(candidate.conditions)) or "-"
            print(f"{candidate.text}\t[{tags}]\t{steps}")
        return 0
    except (LanguageNotFoundError, LanguageUnavailableError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


def _cmd_health(container: Container) -> int:
    report = container.load_languages_use_case().execute()
    print(json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0 if report.healthy else 1


def _cmd_languages() -> int:
    enabled = set(settings.ENABLED_LANGUAGES)
    for code, spec in sorted(list_registered_languages().items()):
        marker = "*" if code in enabled else " "
        print(f"{marker} {code:4} {spec.name}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(settings)

    if args.command == "languages":
        return _cmd_languages()

    container = Container()
    if args.command == "health":
        return _cmd_health(container)
    return _cmd_lookup(container, args.lang, " ".join(args.text), args.trace)


if __name__ == "__main__":
    sys.exit(main())
