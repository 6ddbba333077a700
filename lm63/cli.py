from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from lm63.models.header import IESHeader
from lm63.parser.errors import ParseError, UnsupportedFeatureError
from lm63.parser.ies_parser import parse_ies_file
from lm63.parser.options import ParserOptions
from lm63.standards.keywords import standard_label
from lm63.validation.defaults import default_validator

logger = logging.getLogger(__name__)


def _options_from_args(args: argparse.Namespace) -> ParserOptions:
    return ParserOptions(
        restrict_keyword_length=bool(args.restrict_keyword_length),
        ignore_allowed_keywords=bool(args.ignore_allowed_keywords),
        ignore_required_keywords=not bool(args.require_keywords),
        ignore_blocks=bool(args.ignore_blocks),
        ignore_empty_lines=not bool(args.keep_empty_lines),
    )


def _load(args: argparse.Namespace) -> tuple[IESHeader | None, int]:
    ies_path = Path(args.file).expanduser().resolve()
    if not ies_path.exists():
        print(f"[ERROR] File not found: {ies_path}")
        print("        Provide a valid path to a .ies file.")
        return None, 2
    if not ies_path.is_file():
        print(f"[ERROR] Not a file: {ies_path}")
        return None, 2

    try:
        return parse_ies_file(ies_path, _options_from_args(args)), 0
    except UnsupportedFeatureError as e:
        print(f"[ERROR] Unsupported feature: {e}")
        return None, 4
    except ParseError as e:
        print(f"[ERROR] Invalid LM-63 file: {e}")
        return None, 3


def _cmd_check(args: argparse.Namespace) -> int:
    header, rc = _load(args)
    if header is None:
        return rc

    report = default_validator().run(header)
    if args.json:
        print(json.dumps({"header": header.to_dict(), "report": report.to_dict()}, indent=2))
        return 0

    print("LM-63 Check")
    print(f"  File: {Path(args.file).expanduser().resolve()}")
    print(f"  Standard: {standard_label(header.format)}")
    print(f"  TILT: {header.tilt_specification.value}")
    print(f"  Keywords: {len(header.keywords)}")
    print(f"  Photometric data starts after line {header.lines_consumed}")
    s = report.summary
    print(f"  Findings: {s['errors']} error(s), {s['warnings']} warning(s), {s['info']} info")
    for f in report.findings:
        print(f"    [{f.severity}] {f.id}: {f.message}")
    return 0


def _cmd_keywords(args: argparse.Namespace) -> int:
    header, rc = _load(args)
    if header is None:
        return rc
    for key, value in header.keywords.items():
        lines = value.split("\n")
        print(f"[{key}] {lines[0]}")
        for more in lines[1:]:
            print(f"[MORE] {more}")
    return 0


def _add_parser_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", help="Path to .ies file")
    p.add_argument("--restrict-keyword-length", action="store_true",
                   help="Enforce the 18 character keyword cap even with --ignore-allowed-keywords")
    p.add_argument("--ignore-allowed-keywords", action="store_true",
                   help="Accept keywords outside the standard's keyword list")
    p.add_argument("--require-keywords", action="store_true",
                   help="Fail when keywords mandatory for the standard are missing")
    p.add_argument("--ignore-blocks", action="store_true",
                   help="Accept BLOCK/ENDBLOCK pairs as nesting markers")
    p.add_argument("--keep-empty-lines", action="store_true",
                   help="Treat blank lines in the header as errors")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="lm63")
    p.add_argument("-v", "--verbose", action="store_true", help="Log parser decisions")
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("check", help="Parse an IES file header and report findings.")
    _add_parser_options(c)
    c.add_argument("--json", action="store_true", help="Print header and findings as JSON")
    c.set_defaults(func=_cmd_check)

    k = sub.add_parser("keywords", help="Print the keywords of an IES file in declaration order.")
    _add_parser_options(k)
    k.set_defaults(func=_cmd_keywords)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Running %s on %s", args.cmd, args.file)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
