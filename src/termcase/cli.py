"""Command line interface for the termcase utilities."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError

from .config import TranslatorSettings
from .core.adapters import OpenAITranslator, TranslationAdapter
from .core.errors import TranslationError
from .core.models import FormattedResult
from .naming import FormatMode, format_identifier
from .pipeline import split_terms, translate_terms

LOGGER = logging.getLogger(__name__)

_MODES = [mode.value for mode in FormatMode]


def _collect_terms(values: Iterable[str], source: str | None) -> list[str]:
    terms: list[str] = []
    for value in values:
        terms.extend(split_terms(value))
    if source == "-":
        terms.extend(split_terms(sys.stdin.read()))
    elif source:
        terms.extend(split_terms(Path(source).read_text(encoding="utf-8")))
    return terms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate terms into PascalCase or camelCase identifiers"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    format_parser = subparsers.add_parser("format", help="case English text without translating it")
    format_parser.add_argument("text", nargs="+", help="Text to convert, one identifier per value")
    format_parser.add_argument(
        "-m",
        "--mode",
        choices=_MODES,
        default=FormatMode.PASCAL_CASE.value,
        help="Identifier casing",
    )

    translate_parser = subparsers.add_parser(
        "translate", help="translate a batch of terms and case the results"
    )
    translate_parser.add_argument(
        "terms",
        nargs="*",
        help="Terms to translate; values may hold several comma or newline separated terms",
    )
    translate_parser.add_argument(
        "-i",
        "--input",
        metavar="FILE",
        help="Read additional terms from FILE, or stdin when FILE is '-'",
    )
    translate_parser.add_argument(
        "-m",
        "--mode",
        choices=_MODES,
        default=FormatMode.PASCAL_CASE.value,
        help="Identifier casing",
    )
    translate_parser.add_argument("--model", help="Override the configured chat model")
    translate_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit results as a JSON array instead of tab separated lines",
    )

    return parser


def _render_results(results: Sequence[FormattedResult], *, as_json: bool) -> str:
    if as_json:
        payload = [result.model_dump(mode="json") for result in results]
        return json.dumps(payload, ensure_ascii=False, indent=2)
    return "\n".join(
        f"{result.original}\t{result.translated}\t{result.formatted}" for result in results
    )


def _handle_format(args: argparse.Namespace) -> int:
    for text in args.text:
        sys.stdout.write(format_identifier(text, args.mode) + "\n")
    return 0


def _build_translator(args: argparse.Namespace) -> TranslationAdapter:
    settings = TranslatorSettings()
    return OpenAITranslator(settings=settings, default_model=args.model)


async def _run_translation(
    terms: Sequence[str], mode: str, translator: TranslationAdapter
) -> list[FormattedResult]:
    try:
        return await translate_terms(terms, mode, translator)
    finally:
        await translator.aclose()


def _handle_translate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        terms = _collect_terms(args.terms, args.input)
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read {args.input}: {exc}")
    if not terms:
        parser.error("no terms provided")

    try:
        translator = _build_translator(args)
    except ValidationError as exc:
        sys.stderr.write(f"error: invalid configuration: {exc}\n")
        return 2

    try:
        results = asyncio.run(_run_translation(terms, args.mode, translator))
    except TranslationError as exc:
        LOGGER.debug("translation failed", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1

    rendered = _render_results(results, as_json=args.json)
    if rendered:
        sys.stdout.write(rendered + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command == "format":
        return _handle_format(args)
    if args.command == "translate":
        return _handle_translate(args, parser)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
