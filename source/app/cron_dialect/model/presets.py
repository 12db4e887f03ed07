# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Definitions for well known cron dialects. The definitions are built once per process
and shared, since they are immutable.
"""
from collections.abc import Iterable
from enum import Enum
from functools import cache
from typing import Final

from cron_dialect.cron.expression import QuestionMark
from cron_dialect.model.definition import CronDefinition, CronValidation
from cron_dialect.model.field import (
    MONTH_ALIASES,
    CronFieldName,
    FieldConstraints,
    FieldDefinition,
    SpecialChar,
    field_constraints,
    weekday_aliases,
)
from cron_dialect.model.validations import (
    ensure_either_day_of_week_or_day_of_month,
    ensure_single_day_field,
)


class CronType(str, Enum):
    UNIX = "unix"
    QUARTZ = "quartz"
    CRON4J = "cron4j"
    SPRING = "spring"
    QUARTZ_DAY_OF_YEAR = "quartz-day-of-year"


_seconds: Final = field_constraints(0, 59)
_minutes: Final = field_constraints(0, 59)
_hours: Final = field_constraints(0, 23)
_months: Final = field_constraints(1, 12, aliases=MONTH_ALIASES)


def custom_definition(
    *fields: tuple[CronFieldName, FieldConstraints, bool],
    validations: Iterable[CronValidation] = (),
) -> CronDefinition:
    """Build a definition from (name, constraints, optional) triples, in order"""
    return CronDefinition(
        fields=tuple(
            FieldDefinition(name=name, constraints=constraints, optional=optional)
            for name, constraints, optional in fields
        ),
        validations=tuple(validations),
    )


def unix_definition() -> CronDefinition:
    # Sunday may be written as 0 or 7
    return custom_definition(
        (CronFieldName.MINUTE, _minutes, False),
        (CronFieldName.HOUR, _hours, False),
        (CronFieldName.DAY_OF_MONTH, field_constraints(1, 31), False),
        (CronFieldName.MONTH, _months, False),
        (
            CronFieldName.DAY_OF_WEEK,
            field_constraints(0, 7, aliases=weekday_aliases(sunday=0)),
            False,
        ),
    )


def _quartz_fields() -> tuple[FieldDefinition, ...]:
    return (
        FieldDefinition(CronFieldName.SECOND, _seconds),
        FieldDefinition(CronFieldName.MINUTE, _minutes),
        FieldDefinition(CronFieldName.HOUR, _hours),
        FieldDefinition(
            CronFieldName.DAY_OF_MONTH,
            field_constraints(
                1,
                31,
                special_chars=(
                    SpecialChar.QUESTION_MARK,
                    SpecialChar.L,
                    SpecialChar.W,
                ),
            ),
        ),
        FieldDefinition(CronFieldName.MONTH, _months),
        FieldDefinition(
            CronFieldName.DAY_OF_WEEK,
            field_constraints(
                1,
                7,
                special_chars=(
                    SpecialChar.QUESTION_MARK,
                    SpecialChar.L,
                    SpecialChar.HASH,
                ),
                aliases=weekday_aliases(sunday=1),
            ),
        ),
    )


_years: Final = field_constraints(1970, 2099)


def quartz_definition() -> CronDefinition:
    return CronDefinition(
        fields=(
            *_quartz_fields(),
            FieldDefinition(CronFieldName.YEAR, _years, optional=True),
        ),
        validations=(ensure_either_day_of_week_or_day_of_month,),
    )


def quartz_day_of_year_definition() -> CronDefinition:
    """Quartz extended with a trailing day-of-year field. Exactly one of the three day
    fields may be specified, the others must be "?"."""
    return CronDefinition(
        fields=(
            *_quartz_fields(),
            FieldDefinition(CronFieldName.YEAR, _years),
            FieldDefinition(
                CronFieldName.DAY_OF_YEAR,
                field_constraints(1, 366, special_chars=(SpecialChar.QUESTION_MARK,)),
                optional=True,
                default=QuestionMark(),
            ),
        ),
        validations=(
            ensure_single_day_field(
                CronFieldName.DAY_OF_MONTH,
                CronFieldName.DAY_OF_WEEK,
                CronFieldName.DAY_OF_YEAR,
            ),
        ),
    )


def cron4j_definition() -> CronDefinition:
    return custom_definition(
        (CronFieldName.MINUTE, _minutes, False),
        (CronFieldName.HOUR, _hours, False),
        (
            CronFieldName.DAY_OF_MONTH,
            field_constraints(1, 31, special_chars=(SpecialChar.L,)),
            False,
        ),
        (CronFieldName.MONTH, _months, False),
        (
            CronFieldName.DAY_OF_WEEK,
            field_constraints(0, 6, aliases=weekday_aliases(sunday=0)),
            False,
        ),
    )


def spring_definition() -> CronDefinition:
    return custom_definition(
        (CronFieldName.SECOND, _seconds, False),
        (CronFieldName.MINUTE, _minutes, False),
        (CronFieldName.HOUR, _hours, False),
        (
            CronFieldName.DAY_OF_MONTH,
            field_constraints(
                1,
                31,
                special_chars=(
                    SpecialChar.QUESTION_MARK,
                    SpecialChar.L,
                    SpecialChar.W,
                ),
            ),
            False,
        ),
        (CronFieldName.MONTH, _months, False),
        (
            CronFieldName.DAY_OF_WEEK,
            field_constraints(
                0,
                7,
                special_chars=(
                    SpecialChar.QUESTION_MARK,
                    SpecialChar.L,
                    SpecialChar.HASH,
                ),
                aliases=weekday_aliases(sunday=0),
            ),
            False,
        ),
    )


@cache
def definition_for(cron_type: CronType) -> CronDefinition:
    match cron_type:
        case CronType.UNIX:
            return unix_definition()
        case CronType.QUARTZ:
            return quartz_definition()
        case CronType.CRON4J:
            return cron4j_definition()
        case CronType.SPRING:
            return spring_definition()
        case CronType.QUARTZ_DAY_OF_YEAR:
            return quartz_day_of_year_definition()
    raise ValueError(f"Unknown cron type: {cron_type}")
