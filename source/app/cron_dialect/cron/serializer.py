# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Render parsed field expressions back to the cron syntax they were parsed from"""
from cron_dialect.cron.expression import (
    Always,
    And,
    ClosestWeekday,
    Exact,
    FieldExpression,
    LastDayOfMonth,
    LastDayOfWeek,
    LastDayOfWeekInMonth,
    LastWeekday,
    NthWeekdayOfMonth,
    Periodic,
    QuestionMark,
    Range,
)


def to_cron_str(expr: FieldExpression) -> str:
    match expr:
        case Always():
            return "*"
        case QuestionMark():
            return "?"
        case Exact(value=value):
            return str(value)
        case Range(start=start, end=end):
            return f"{start}-{end}"
        case Periodic(base=base, period=period):
            return f"{to_cron_str(base)}/{period}"
        case And(members=members):
            return ",".join(to_cron_str(member) for member in members)
        case LastDayOfMonth(offset=0):
            return "L"
        case LastDayOfMonth(offset=offset):
            return f"L-{offset}"
        case LastDayOfWeek():
            return "L"
        case LastWeekday():
            return "LW"
        case LastDayOfWeekInMonth(day=day):
            return f"{day}L"
        case NthWeekdayOfMonth(day=day, nth=nth):
            return f"{day}#{nth}"
        case ClosestWeekday(day=day):
            return f"{day}W"
    raise ValueError(f"Unknown field expression: {expr!r}")
