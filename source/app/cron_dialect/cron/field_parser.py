# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parse the text of one cron field to an abstract representation, validating it against
the definition of the field as it goes.

Grammar for a single field:

    expr    := term (',' term)*
    term    := step | range | value | special
    step    := base '/' period            base is '*', a value, or a range
    range   := value '-' value
    value   := integer | name
    special := '*' | '?' | 'L' | 'L-' integer | 'LW' | value 'L' | value 'W'
               | value '#' integer

Every special character is only accepted when the field's constraints allow it. The
day forms are further tied to the field they describe: 'L-n', 'LW' and 'nW' to the day
of the month, 'nL' and 'n#k' to the day of the week. A bare 'L' is the last day of the
month in the one and the last day of the week in the other. The first violation aborts
the parse, there is no attempt to recover.
"""
import re
from typing import Final

from cron_dialect.cron.errors import (
    InvalidFieldTokenError,
    InvalidPeriodError,
    MalformedExpressionError,
    OutOfRangeValueError,
)
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
    PeriodicBase,
    QuestionMark,
    Range,
)
from cron_dialect.model.field import (
    DECIMAL_INTEGER_RE,
    CronFieldName,
    FieldDefinition,
    SpecialChar,
)

# the nth occurrence of a weekday can be at most the fifth in any month
MAX_NTH_WEEKDAY: Final = 5


def parse_field(token: str, definition: FieldDefinition) -> FieldExpression:
    if not token:
        raise MalformedExpressionError("Empty field expression", fragment=token)
    terms: Final = token.split(",")
    if len(terms) == 1:
        return _parse_term(token, definition)

    _require(definition, SpecialChar.COMMA, token)
    members: list[FieldExpression] = []
    for term in terms:
        if not term:
            raise MalformedExpressionError(
                f"Missing value in list expression: {token}", fragment=token
            )
        members.append(_parse_term(term, definition))
    return And(members=tuple(members))


def _parse_term(expr: str, definition: FieldDefinition) -> FieldExpression:
    if "/" in expr:
        return _parse_periodic(expr, definition)
    return _parse_single(expr, definition)


def _require(
    definition: FieldDefinition, special_char: SpecialChar, expr: str
) -> None:
    if not definition.constraints.is_allowed(special_char):
        raise InvalidFieldTokenError(
            f"Special character {special_char.value!r} is not supported for this field: {expr}",
            fragment=expr,
        )


def _require_field(
    definition: FieldDefinition, field_name: CronFieldName, expr: str
) -> None:
    if definition.name != field_name:
        raise InvalidFieldTokenError(
            f"Expression {expr} is only supported for the {field_name.name} field, not for {definition.name.name}",
            fragment=expr,
        )


def _parse_periodic(expr: str, definition: FieldDefinition) -> Periodic:
    _require(definition, SpecialChar.SLASH, expr)
    base_expr, _, period_expr = expr.partition("/")

    if not period_expr:
        raise MalformedExpressionError(
            f"Missing steps for expression: {expr}", fragment=expr
        )
    if not base_expr:
        raise MalformedExpressionError(
            f"Missing base for expression: {expr}", fragment=expr
        )
    if not DECIMAL_INTEGER_RE.fullmatch(period_expr):
        raise InvalidFieldTokenError(
            f"Invalid period {period_expr!r} for expression: {expr}", fragment=expr
        )

    base: Final = _parse_periodic_base(base_expr, definition)
    period: Final = int(period_expr)
    _validate_period(period, definition, expr)
    return Periodic(base=base, period=period)


def _parse_periodic_base(expr: str, definition: FieldDefinition) -> PeriodicBase:
    if expr == "*":
        _require(definition, SpecialChar.ASTERISK, expr)
        return Always()
    if "-" in expr:
        return _parse_range(expr, definition)
    return Exact(value=definition.constraints.normalize(expr))


def _validate_period(period: int, definition: FieldDefinition, expr: str) -> None:
    domain_size: Final = definition.constraints.domain_size
    if period < 1:
        raise InvalidPeriodError(
            f"Invalid period {period} for expression {expr}: periods must be at least 1",
            fragment=expr,
        )
    if period > domain_size:
        raise InvalidPeriodError(
            f"Invalid period {period} for expression {expr}: period exceeds field's domain size, maximum is {domain_size}",
            fragment=expr,
        )


_value_pattern: Final = r"[A-Za-z0-9]+"
_last_day_offset_re: Final = re.compile(r"L-([0-9]+)", flags=re.IGNORECASE)
_nth_weekday_re: Final = re.compile(rf"({_value_pattern})#([0-9]+)")
_last_day_of_week_re: Final = re.compile(rf"({_value_pattern})L", flags=re.IGNORECASE)
_closest_weekday_re: Final = re.compile(r"([0-9]+)W", flags=re.IGNORECASE)


def _parse_single(expr: str, definition: FieldDefinition) -> FieldExpression:
    constraints: Final = definition.constraints

    # names are resolved first so that e.g. "jul" is not mistaken for "ju" + "L"
    if expr.lower() in constraints.string_mapping:
        return Exact(value=constraints.normalize(expr))

    if expr == "*":
        _require(definition, SpecialChar.ASTERISK, expr)
        return Always()

    if expr == "?":
        _require(definition, SpecialChar.QUESTION_MARK, expr)
        return QuestionMark()

    if expr.upper() == "L":
        return _parse_last(expr, definition)

    if expr.upper() == "LW":
        _require(definition, SpecialChar.L, expr)
        _require(definition, SpecialChar.W, expr)
        _require_field(definition, CronFieldName.DAY_OF_MONTH, expr)
        return LastWeekday()

    if match := _last_day_offset_re.fullmatch(expr):
        return _parse_last_day_offset(expr, int(match.group(1)), definition)

    if match := _nth_weekday_re.fullmatch(expr):
        return _parse_nth_weekday(expr, match.group(1), match.group(2), definition)

    if match := _last_day_of_week_re.fullmatch(expr):
        _require(definition, SpecialChar.L, expr)
        _require_field(definition, CronFieldName.DAY_OF_WEEK, expr)
        return LastDayOfWeekInMonth(day=constraints.normalize(match.group(1)))

    if match := _closest_weekday_re.fullmatch(expr):
        _require(definition, SpecialChar.W, expr)
        _require_field(definition, CronFieldName.DAY_OF_MONTH, expr)
        return ClosestWeekday(day=constraints.normalize(match.group(1)))

    if "-" in expr:
        return _parse_range(expr, definition)

    if "#" in expr:
        day_expr, _, nth_expr = expr.partition("#")
        if not day_expr or not nth_expr:
            raise MalformedExpressionError(
                f"Incomplete nth weekday expression: {expr}", fragment=expr
            )
        raise InvalidFieldTokenError(
            f"Invalid nth weekday expression: {expr}", fragment=expr
        )

    return Exact(value=constraints.normalize(expr))


def _parse_last(
    expr: str, definition: FieldDefinition
) -> LastDayOfMonth | LastDayOfWeek:
    _require(definition, SpecialChar.L, expr)
    match definition.name:
        case CronFieldName.DAY_OF_MONTH:
            return LastDayOfMonth()
        case CronFieldName.DAY_OF_WEEK:
            return LastDayOfWeek()
    raise InvalidFieldTokenError(
        f"Expression {expr} is only supported for the DAY_OF_MONTH and DAY_OF_WEEK fields, not for {definition.name.name}",
        fragment=expr,
    )


def _parse_last_day_offset(
    expr: str, offset: int, definition: FieldDefinition
) -> LastDayOfMonth:
    _require(definition, SpecialChar.L, expr)
    _require_field(definition, CronFieldName.DAY_OF_MONTH, expr)
    domain_size: Final = definition.constraints.domain_size
    if not 1 <= offset <= domain_size:
        raise OutOfRangeValueError(
            f"Offset from the last day must be between 1 and {domain_size}: {expr}",
            fragment=expr,
        )
    return LastDayOfMonth(offset=offset)


def _parse_nth_weekday(
    expr: str, day_expr: str, nth_expr: str, definition: FieldDefinition
) -> NthWeekdayOfMonth:
    _require(definition, SpecialChar.HASH, expr)
    _require_field(definition, CronFieldName.DAY_OF_WEEK, expr)
    day: Final = definition.constraints.normalize(day_expr)
    nth: Final = int(nth_expr)
    if not 1 <= nth <= MAX_NTH_WEEKDAY:
        raise OutOfRangeValueError(
            f"Value for N in nth weekday expression must be between 1 and {MAX_NTH_WEEKDAY}: {expr}",
            fragment=expr,
        )
    return NthWeekdayOfMonth(day=day, nth=nth)


def _parse_range(expr: str, definition: FieldDefinition) -> Range:
    _require(definition, SpecialChar.HYPHEN, expr)
    start_expr, _, end_expr = expr.partition("-")
    if not start_expr or not end_expr:
        raise MalformedExpressionError(
            f"Missing bound for range expression: {expr}", fragment=expr
        )

    constraints: Final = definition.constraints
    start: Final = constraints.normalize(start_expr)
    end: Final = constraints.normalize(end_expr)
    if start > end and not constraints.allow_wraparound:
        raise InvalidFieldTokenError(
            f"Range wrapping is not supported for this field. received: {expr}",
            fragment=expr,
        )
    return Range(start=start, end=end)
