# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import argparse
import dataclasses
import json
import sys
from collections.abc import Sequence
from typing import Any, Final, Optional, TextIO

from aws_lambda_powertools import Logger

from cron_dialect import __version__
from cron_dialect.cron.errors import CronParseError
from cron_dialect.cron.expression import FieldExpression
from cron_dialect.cron.parser import CronParser
from cron_dialect.cron.serializer import to_cron_str
from cron_dialect.model.cron import Cron
from cron_dialect.model.presets import CronType, definition_for
from cron_dialect.observability.powertools_logging import (
    LogContext,
    powertools_logger,
    should_log_events,
)
from cron_dialect.util.app_env import AppEnv, get_app_env

CMD_VALIDATE = "validate"
CMD_DIALECTS = "dialects"

HELP_CMD_VALIDATE = "Validates a cron expression and prints its parsed fields"
HELP_CMD_DIALECTS = "Lists the supported cron dialects and their fields"
HELP_EXPRESSION = "The cron expression, quoted as a single argument"
HELP_DIALECT = "Cron dialect to validate against, default is taken from CRON_DIALECT"
CMD_HELP_VERSION = "Show version"

EXIT_OK: Final = 0
EXIT_INVALID: Final = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cron-dialect", description="Validate cron expressions"
    )
    parser.add_argument(
        "--version", action="version", version=__version__, help=CMD_HELP_VERSION
    )
    subparsers = parser.add_subparsers(help="Commands", dest="command")

    validate_parser = subparsers.add_parser(CMD_VALIDATE, help=HELP_CMD_VALIDATE)
    validate_parser.add_argument("expression", help=HELP_EXPRESSION)
    validate_parser.add_argument(
        "--dialect",
        "-d",
        choices=[cron_type.value for cron_type in CronType],
        help=HELP_DIALECT,
    )
    validate_parser.set_defaults(func=handle_validate)

    dialects_parser = subparsers.add_parser(CMD_DIALECTS, help=HELP_CMD_DIALECTS)
    dialects_parser.set_defaults(func=handle_dialects)

    return parser


def describe_expression(expr: FieldExpression) -> dict[str, Any]:
    return {
        "type": type(expr).__name__,
        "expression": to_cron_str(expr),
        **dataclasses.asdict(expr),
    }


def describe_cron(cron: Cron) -> dict[str, Any]:
    return {
        "expression": cron.as_string(),
        "fields": [
            {
                "field": field.name.name,
                "supplied": field.supplied,
                **describe_expression(field.expression),
            }
            for field in cron.cron_fields
        ],
    }


def handle_validate(
    args: argparse.Namespace, env: AppEnv, logger: Logger, out: TextIO
) -> int:
    cron_type: Final = CronType(args.dialect) if args.dialect else env.default_cron_type
    logger.append_keys(context=LogContext.VALIDATE.value, dialect=cron_type.value)
    parser: Final = CronParser(definition_for(cron_type))
    try:
        cron: Final = parser.parse(args.expression)
    except CronParseError as err:
        logger.info(
            "Invalid cron expression",
            extra={
                "error_code": err.error_code.value,
                "field": err.field_name.name if err.field_name else None,
                "fragment": err.fragment,
            },
        )
        out.write(f"{err.error_code.value}: {err}\n")
        return EXIT_INVALID

    if should_log_events(logger):
        logger.debug("Parsed cron expression", extra={"cron": describe_cron(cron)})
    out.write(json.dumps(describe_cron(cron), indent=2))
    out.write("\n")
    return EXIT_OK


def handle_dialects(
    args: argparse.Namespace, env: AppEnv, logger: Logger, out: TextIO
) -> int:
    logger.append_keys(context=LogContext.DIALECTS.value)
    dialects: Final = {
        cron_type.value: [
            {
                "field": field.name.name,
                "range": [field.constraints.low_range, field.constraints.high_range],
                "special_chars": sorted(
                    char.value for char in field.constraints.special_chars
                ),
                "optional": field.optional,
            }
            for field in definition_for(cron_type)
        ]
        for cron_type in CronType
    }
    out.write(json.dumps(dialects, indent=2))
    out.write("\n")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    args_list: Final = list(sys.argv[1:] if argv is None else argv)
    parser: Final = build_parser()
    if not args_list:
        parser.print_help(out)
        return EXIT_OK

    args: Final = parser.parse_args(args_list)
    if not hasattr(args, "func"):
        parser.print_help(out)
        return EXIT_OK

    env: Final = get_app_env()
    logger: Final = powertools_logger(
        service=env.log_service_name, level=env.log_level
    )
    return int(args.func(args, env, logger, out))
