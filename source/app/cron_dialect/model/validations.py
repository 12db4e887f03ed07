# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Rules spanning more than one field of a cron expression. Each rule is a callable
accepting the assembled cron and raising ConflictingFieldUsageError when the rule is
broken, so a definition can list the rules that apply to its dialect.
"""
from typing import Final

from cron_dialect.cron.errors import ConflictingFieldUsageError
from cron_dialect.cron.expression import QuestionMark
from cron_dialect.model.cron import Cron
from cron_dialect.model.definition import CronValidation
from cron_dialect.model.field import CronFieldName


def ensure_either_day_of_week_or_day_of_month(cron: Cron) -> None:
    """Quartz requires exactly one of day-of-month and day-of-week to be "?" """
    day_of_month: Final = cron.get(CronFieldName.DAY_OF_MONTH)
    day_of_week: Final = cron.get(CronFieldName.DAY_OF_WEEK)
    if isinstance(day_of_month, QuestionMark) == isinstance(day_of_week, QuestionMark):
        raise ConflictingFieldUsageError(
            "Both, a day-of-week AND a day-of-month parameter, are not supported. "
            f"Exactly one of them must be '?', received: {cron.as_string()}",
            fragment=cron.as_string(),
        )


def ensure_single_day_field(*names: CronFieldName) -> CronValidation:
    """Exactly one of the named day fields may hold something other than "?" """

    def validate(cron: Cron) -> None:
        specified: Final = [
            name
            for name in names
            if cron.get(name) is not None
            and not isinstance(cron.get(name), QuestionMark)
        ]
        if len(specified) != 1:
            raise ConflictingFieldUsageError(
                f"Exactly one of {[name.name for name in names]} must be specified, "
                f"the others must be '?', received: {cron.as_string()}",
                fragment=cron.as_string(),
            )

    return validate
