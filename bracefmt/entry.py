import argparse
from argparse import ArgumentParser
import logging.config
import sys
from textwrap import dedent
from typing import Any, Optional, Union

import yaml

from ._core import exceptions
from ._core.config import load_syntax_config
from ._core.renderer import RenderOutcome, check_template
from .printer import olprintf, osprintf

logger: logging.Logger = logging.getLogger(__name__)


class BracefmtArgParser(ArgumentParser):
    def __init__(self):
        description = """Format values into a template and print the result

        Placeholders look like {} and can contain specifiers:
            #    hexadecimal
            ~    octal
            -    left justify
            .N   N digits after the decimal point
            Nc   width N, padded with character c"""

        super().__init__(
            description=dedent(description),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        self.add_argument("template", help="Template with placeholders in")
        self.add_argument("values", nargs="*", help="Values to substitute, in order")

        self.add_argument(
            "--plain",
            help="Only substitute plain {} placeholders, without specifiers",
            action="store_true",
            default=False,
        )

        self.add_argument(
            "-n",
            "--no-newline",
            help="Do not print a trailing newline",
            action="store_true",
            default=False,
        )

        self.add_argument(
            "--raw",
            help="Do not convert values that look like numbers",
            action="store_true",
            default=False,
        )

        self.add_argument(
            "--strict",
            help="Fail instead of printing malformed or unfilled placeholders as-is",
            action="store_true",
            default=False,
        )

        self.add_argument(
            "--syntax-cfg",
            help="YAML file overriding marker characters, can be given multiple times",
            action="append",
            default=[],
        )

        self.add_argument(
            "--log-to-file",
            help="Log output to a file (bracefmt.log if no argument is given)",
            nargs="?",
            const="bracefmt.log",
        )

        self.add_argument(
            "--stderr", help="Log output to stderr", action="store_true", default=False
        )

        self.add_argument(
            "--debug",
            help="Log debug information (only relevant if --stderr or --log-to-file is passed)",
            action="store_true",
            default=False,
        )


def coerce_value(raw: str) -> Union[int, float, str]:
    """Convert a command line value to an int or float if it looks like one

    Integers can have a 0x, 0o or 0b prefix. Leading zeros are read as decimal.
    Values with surrounding whitespace or underscores are kept as strings.
    """
    if raw != raw.strip() or "_" in raw:
        return raw

    for convert in (lambda v: int(v, 0), int, float):
        try:
            return convert(raw)
        except ValueError:
            continue

    return raw


def _configure_logging(debug: bool, log_loc: Optional[str], stderr: bool) -> None:
    if debug:
        log_level = "DEBUG"
    else:
        log_level = "INFO"

    # Basic logging config that will print out useful information
    log_cfg: dict[str, Any] = {
        "version": 1,
        "formatters": {
            "default": {
                "format": "%(asctime)s [%(levelname)s]: (%(name)s:%(lineno)d) %(message)s",
                "style": "%",
            }
        },
        "handlers": {
            "to_stderr": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
            "nothing": {"class": "logging.NullHandler"},
        },
        "loggers": {
            "bracefmt": {"handlers": ["nothing"], "level": log_level},
            "": {"handlers": ["nothing"], "level": log_level},
        },
    }

    if log_loc:
        log_cfg["handlers"].update(
            {
                "to_file": {
                    "class": "logging.FileHandler",
                    "filename": log_loc,
                    "formatter": "default",
                }
            }
        )

        log_cfg["loggers"]["bracefmt"]["handlers"].append("to_file")

    if stderr:
        log_cfg["loggers"]["bracefmt"]["handlers"].append("to_stderr")

    logging.config.dictConfig(log_cfg)


def main(argv: Optional[list[str]] = None) -> int:
    args = BracefmtArgParser().parse_args(argv)

    _configure_logging(args.debug, args.log_to_file, args.stderr)

    try:
        syntax = load_syntax_config(args.syntax_cfg)
    except (OSError, yaml.YAMLError, exceptions.BracefmtException) as e:
        logger.error("Unable to load syntax config: %s", e)
        sys.stderr.write(f"bracefmt: {e}\n")
        return 2

    if args.raw:
        values = list(args.values)
    else:
        values = [coerce_value(v) for v in args.values]

    logger.debug("Formatting '%s' with %s", args.template, values)

    if args.strict:
        try:
            check_template(args.template, len(values), plain=args.plain, syntax=syntax)
        except exceptions.BracefmtException as e:
            sys.stderr.write(f"bracefmt: {e}\n")
            return 2

    if args.no_newline:
        outcome = osprintf(
            sys.stdout, args.template, *values, plain=args.plain, syntax=syntax
        )
    else:
        outcome = olprintf(
            sys.stdout, args.template, *values, plain=args.plain, syntax=syntax
        )

    if outcome == RenderOutcome.COMPLETE:
        return 0
    else:
        return 1


def console_main() -> None:
    raise SystemExit(main())
