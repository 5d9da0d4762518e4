#!/usr/bin/env python3
# cli.py — Packaged entrypoint
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from intopost.constants import ConstantStuff as CS
from intopost.driver import InToPost
from intopost.errors import ConfigError, ExpressionError
from intopost.loader import apply_overrides, load_yaml_config
from intopost.report import write_report


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="intopost",
        description="Convert infix expressions (one per line) to postfix notation.",
    )
    p.add_argument("input", help="Text file with one whitespace-separated infix expression per line.")
    p.add_argument("-c", "--config", default=None, help="YAML config file (optional)")
    p.add_argument("-o", "--output", default=None, help="Write postfix output here instead of stdout")
    p.add_argument("--report", default=None, help="Write a .json/.yaml run report (optional)")
    p.add_argument("--fail-fast", action="store_true", default=None,
                   help="Stop at the first malformed expression")
    p.add_argument("--allow-numbers", action="store_true", default=None,
                   help="Accept numeric literals as operands")
    p.add_argument("--no-echo", dest="echo_tokens", action="store_false", default=None,
                   help="Do not echo token lists while reading")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.debug("Starting main with args: %s", argv)

    input_path = Path(args.input)
    if not input_path.is_file():
        logging.error("Input file not found: %s", input_path)
        return CS.ExitCode.INPUT_NOT_FOUND

    if args.report and Path(args.report).suffix.lower() not in CS.REPORT_SUFFIXES:
        logging.error("Unsupported report format '%s' (expected one of %s)",
                      args.report, ", ".join(CS.REPORT_SUFFIXES))
        return CS.ExitCode.OUTPUT_ERROR

    try:
        config = load_yaml_config(args.config) if args.config else None
    except ConfigError as e:
        logging.error("%s", e)
        return CS.ExitCode.BAD_CONFIG

    config = apply_overrides(
        config,
        fail_fast=args.fail_fast,
        allow_numbers=args.allow_numbers,
        echo_tokens=args.echo_tokens,
    )
    logging.debug("Effective config: %s", config)

    out = sys.stdout
    if args.output:
        try:
            out = open(args.output, "w", encoding="utf-8")
        except OSError as e:
            logging.error("Cannot open output %s: %s", args.output, e)
            return CS.ExitCode.OUTPUT_ERROR

    try:
        converter = InToPost(input_path, config=config, out=out)
        try:
            results = converter.run()
        except ExpressionError as e:
            logging.error("Aborting at first malformed expression → %s", e)
            return CS.ExitCode.MALFORMED_EXPRESSION
        except (OSError, UnicodeDecodeError) as e:
            logging.error("Cannot read %s: %s", input_path, e)
            return CS.ExitCode.INPUT_NOT_FOUND
    finally:
        if out is not sys.stdout:
            out.close()

    if args.report:
        try:
            write_report(results, args.report, source=str(input_path))
        except (OSError, ValueError) as e:
            logging.error("Failed to write report: %s", e)
            return CS.ExitCode.OUTPUT_ERROR

    if any(not r.ok for r in results):
        return CS.ExitCode.MALFORMED_EXPRESSION

    logging.info("Done.")
    return CS.ExitCode.OK


if __name__ == "__main__":
    sys.exit(main())
