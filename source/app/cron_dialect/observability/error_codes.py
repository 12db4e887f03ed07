# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class ErrorCode(str, Enum):
    MALFORMED_EXPRESSION = "MalformedExpression"
    INVALID_FIELD_TOKEN = "InvalidFieldToken"
    OUT_OF_RANGE_VALUE = "OutOfRangeValue"
    INVALID_PERIOD = "InvalidPeriod"
    CONFLICTING_FIELD_USAGE = "ConflictingFieldUsage"
