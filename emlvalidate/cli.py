# emlvalidate/cli.py
"""Command line wrapper around the validation engine and the scaffolder.

Usage:
    eml-validate validate path/to/mod
    eml-validate validate path/to/mod --json
    eml-validate generate --game EMR --platform PC path/to/new-mod
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from emlvalidate import __version__
from emlvalidate.config.service import initConfig
from emlvalidate.core.errors import ModValidationError, PackageIOError
from emlvalidate.core.jsonutils import prettyJsonDumps, serializeError
from emlvalidate.core.logging import configureLogging
from emlvalidate.mods.rules import loadRules
from emlvalidate.mods.scaffold import generateProject
from emlvalidate.mods.validator import ModValidator

logger = logging.getLogger(__name__)

__all__ = ["EXIT_OK", "EXIT_REJECTED", "EXIT_IO_ERROR", "buildParser", "main"]

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_IO_ERROR = 2



def _configureStdioUtf8() -> None:
    """Mod names and descriptions may contain non-ASCII text; Windows consoles may not default to UTF-8."""
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]



def cmdValidate(args: argparse.Namespace) -> int:
    validator = ModValidator(loadRules())
    if args.json:
        try:
            info = validator.validate(args.mod_dir)
        except (ModValidationError, PackageIOError) as error:
            # Machine readers get the verdict on stdout; main() still reports on stderr
            sys.stdout.write(prettyJsonDumps({"error": serializeError(error)}))
            raise
        sys.stdout.write(info.toJson())
        return EXIT_OK

    info = validator.validate(args.mod_dir)
    tags = ", ".join(info.auto_generated_tags) or "none"
    print(f"OK: {info.name} ({info.game}/{info.platform}), tags: {tags}")
    return EXIT_OK



def cmdGenerate(args: argparse.Namespace) -> int:
    info = generateProject(args.game, args.platform, args.output_dir, rules=loadRules())
    print(f"Generated {info.game}/{info.platform} mod skeleton in {args.output_dir}")
    print(f"Add {info.icon_path} before validating.")
    return EXIT_OK



def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eml-validate",
        description="Validate or scaffold Epic Mickey Launcher mod packages.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON5 config file layered over the shipped defaults.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to config 'logging.level'.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=None,
        help="Emit log records as JSON lines on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validateParser = subparsers.add_parser("validate", help="Validate a mod directory.")
    validateParser.add_argument("mod_dir", type=Path, help="Mod root directory (contains mod.json).")
    validateParser.add_argument(
        "--json",
        action="store_true",
        help="Print the validated record as JSON.",
    )
    validateParser.set_defaults(handler=cmdValidate)

    generateParser = subparsers.add_parser("generate", help="Create a new mod skeleton.")
    generateParser.add_argument("--game", required=True, help="Target game (e.g. EM1, EM2, EMR).")
    generateParser.add_argument("--platform", required=True, help="Target platform (e.g. WII, PC).")
    generateParser.add_argument("output_dir", type=Path, help="Directory to create the mod in.")
    generateParser.set_defaults(handler=cmdGenerate)

    return parser



def main(argv: list[str] | None = None) -> int:
    """
    Returns:
        0 on success, 1 when the mod (or the requested pair) is rejected,
        2 on I/O or configuration failures
    """
    _configureStdioUtf8()
    parser = buildParser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["logging.level"] = args.log_level
    if args.log_json:
        overrides["logging.json"] = True

    try:
        initConfig(args.config, overrides=overrides)
        configureLogging()
        return int(args.handler(args))
    except ModValidationError as error:
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_REJECTED
    except PackageIOError as error:
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_IO_ERROR
    except (OSError, TypeError, ValueError, ValidationError) as error:
        # Config file missing/unparsable, malformed rule tables, unwritable output dir
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_IO_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
