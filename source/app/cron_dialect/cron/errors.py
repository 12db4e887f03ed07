# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Errors raised while parsing a cron expression. Every error aborts the parse at the
point of detection; no partial result is ever produced.

All parse errors derive from `ValueError`, so callers that only care about "was the
expression valid" can catch that alone. Callers that need to report the kind of
failure can inspect `error_code`, and `fragment` holds the part of the input that was
rejected.
"""
from typing import TYPE_CHECKING, ClassVar, Optional

from cron_dialect.observability.error_codes import ErrorCode

if TYPE_CHECKING:
    from cron_dialect.model.field import CronFieldName
else:
    CronFieldName = object


class CronParseError(ValueError):
    error_code: ClassVar[ErrorCode]

    def __init__(self, message: str, fragment: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.fragment = fragment
        # set by the cron parser once the failing field is known
        self.field_name: Optional[CronFieldName] = None


class MalformedExpressionError(CronParseError):
    """Wrong number of fields, empty input, or a syntactically incomplete term"""

    error_code = ErrorCode.MALFORMED_EXPRESSION


class InvalidFieldTokenError(CronParseError):
    """A special character the field does not permit, or an unrecognized value"""

    error_code = ErrorCode.INVALID_FIELD_TOKEN


class OutOfRangeValueError(CronParseError):
    """A resolved value outside of the field's domain"""

    error_code = ErrorCode.OUT_OF_RANGE_VALUE


class InvalidPeriodError(CronParseError):
    """A step period of zero, or larger than the field's domain"""

    error_code = ErrorCode.INVALID_PERIOD


class ConflictingFieldUsageError(CronParseError):
    """A dialect rule spanning more than one field was violated"""

    error_code = ErrorCode.CONFLICTING_FIELD_USAGE
