"""
Censor Text — Command-line front end for CensorSensor.

Usage:
    python scripts/censor_text.py check "that darn dog"      # exit 1 if profane
    python scripts/censor_text.py clean "Sh1t happens" --ish
    echo "some text" | python scripts/censor_text.py clean --mask "[x]"
    python scripts/censor_text.py clean "zut alors" --locale fr --locale-dir ./locales

Settings not given on the command line come from CENSOR_* environment
variables (see censor_sensor/config.py).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from censor_sensor.config import load_settings
from censor_sensor.engine import CensorSensor
from tools.censor_errors import CensorError

logger = logging.getLogger("CensorText")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Detect or redact profanity in text.",
    )
    parser.add_argument(
        "command",
        choices=["check", "clean"],
        help="check: report whether the text is profane; clean: print redacted text",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to process (read from stdin if omitted)",
    )
    parser.add_argument(
        "--ish",
        action="store_true",
        help="Use substring matching instead of exact word matching",
    )
    parser.add_argument("--locale", help="Locale id to match against")
    parser.add_argument("--locale-dir", help="Directory of extra <locale>.yaml files")
    parser.add_argument(
        "--disable-tier",
        action="append",
        default=[],
        metavar="TIER",
        help="Tier number or name to ignore (repeatable)",
    )
    parser.add_argument(
        "--add-word",
        action="append",
        default=[],
        metavar="WORD",
        help="Extra word to treat as profane (repeatable)",
    )
    parser.add_argument("--mask", help="Replacement text for matched words")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _read_text(args) -> str:
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read().rstrip("\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"ERROR: invalid CENSOR_* setting: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    overrides = {}
    if args.locale:
        overrides["locale"] = args.locale
    if args.locale_dir:
        overrides["locale_dir"] = args.locale_dir
    if args.mask is not None:
        overrides["mask"] = args.mask
    if args.disable_tier:
        overrides["disabled_tiers"] = list(settings.disabled_tiers) + args.disable_tier

    try:
        settings = settings.model_validate({**settings.model_dump(), **overrides})
        engine = CensorSensor.from_settings(settings)
        for word in args.add_word:
            engine.add_word(word)
    except (CensorError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    text = _read_text(args)

    if args.command == "check":
        profane = engine.is_profane_ish(text) if args.ish else engine.is_profane(text)
        print("profane" if profane else "clean")
        return 1 if profane else 0

    cleaned = engine.clean_profanity_ish(text) if args.ish else engine.clean_profanity(text)
    print(cleaned)
    return 0


if __name__ == "__main__":
    sys.exit(main())
