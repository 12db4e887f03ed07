# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
The classes defined in this module are the parsed form of a single field of a cron
expression. A cron expression is a whitespace-separated list of fields, for example:

    <second> <minute> <hour> <day_of_month> <month> <day_of_week> [<year>]

cron expressions are not defined by a standard, so the fields present, their order,
their domains and the special characters they accept differ between implementations.
Those differences are captured by a `CronDefinition` (a dialect). The expressions here
are shared by every dialect: a parser that knows the dialect decides which forms are
allowed for a field, and the values stored have already been checked against that
field's domain.

Features shared by most implementations:

- names instead of integer values for months and weekdays (resolved to integers)
- ranges (e.g. 4-6)
- steps (e.g. */2, 0/15, 1-10/3)
- lists (e.g. 1,15,30)

Extensions supported by some implementations:

- no specific value (?)
- last day of month (L, or L-3 for three days before the last)
- last day of the week (L in a day-of-week field)
- last weekday of month (LW)
- last occurrence of a weekday in a month (e.g. 5L)
- nth weekday of a month (e.g. 6#3, the third Friday in Quartz numbering)
- nearest weekday (e.g. 15W, the weekday nearest the 15th)

Expressions keep the syntactic form the user chose rather than a normalized one.
"0/1", "*/1" and "*" mean the same thing for a minutes field but parse to three
different expressions, so that rendering a parsed cron reproduces its input.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Always:
    """All values, written as an asterisk"""


@dataclass(frozen=True)
class QuestionMark:
    """No specific value"""


@dataclass(frozen=True)
class Exact:
    """A single numeric value"""

    value: int


@dataclass(frozen=True)
class Range:
    """All values from `start` up to and including `end`. `start` may only be after
    `end` when the field allows wrapping around its domain."""

    start: int
    end: int


@dataclass(frozen=True)
class Periodic:
    """Every `period` values, beginning at `base`. When `base` is a single value the
    repetition continues to the end of the field's domain."""

    base: "Always | Exact | Range"
    period: int


@dataclass(frozen=True)
class And:
    """A comma-separated list of expressions, in the order they were written"""

    members: tuple["FieldExpression", ...]


@dataclass(frozen=True)
class LastDayOfMonth:
    """
    The last day of the month, or `offset` days before it. Zero is the plain "L" form,
    an explicit offset ("L-3") is at least 1.
    """

    offset: int = 0


@dataclass(frozen=True)
class LastDayOfWeek:
    """The last day of every week"""


@dataclass(frozen=True)
class LastWeekday:
    """The last weekday (Monday through Friday) of the month"""


@dataclass(frozen=True)
class LastDayOfWeekInMonth:
    """The last occurrence of the specified day of the week in a month"""

    day: int


@dataclass(frozen=True)
class NthWeekdayOfMonth:
    """The nth occurrence of the specified day of the week in a month"""

    day: int
    nth: int


@dataclass(frozen=True)
class ClosestWeekday:
    """The weekday nearest the specified day of the month"""

    day: int


PeriodicBase = Always | Exact | Range
"""The expressions a step may be applied to"""

FieldExpression = (
    Always
    | QuestionMark
    | Exact
    | Range
    | Periodic
    | And
    | LastDayOfMonth
    | LastDayOfWeek
    | LastWeekday
    | LastDayOfWeekInMonth
    | NthWeekdayOfMonth
    | ClosestWeekday
)
"""A union type for the possible values of a single parsed cron field"""
