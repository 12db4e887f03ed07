# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
import sys
from enum import Enum
from typing import IO, Optional

from aws_lambda_powertools import Logger


def should_log_events(logger: Logger) -> bool:
    return logger.log_level <= logging.DEBUG


def powertools_logger(
    service: str = "cron-dialect",
    level: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> Logger:
    # command output goes to stdout, keep structured logs out of the way on stderr
    logger = Logger(
        use_rfc3339=True,
        log_uncaught_exceptions=True,
        service=service,
        level=level,
        stream=stream if stream is not None else sys.stderr,
    )
    return logger


class LogContext(str, Enum):
    VALIDATE = "validate"
    DIALECTS = "dialects"
