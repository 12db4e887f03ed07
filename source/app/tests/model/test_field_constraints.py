# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from pytest import raises

from cron_dialect.cron.errors import InvalidFieldTokenError, OutOfRangeValueError
from cron_dialect.model.field import (
    BASIC_SPECIAL_CHARS,
    MONTH_ALIASES,
    CronFieldName,
    FieldConstraints,
    InvalidCronDefinition,
    SpecialChar,
    field_constraints,
    weekday_aliases,
)


def test_normalize_parses_integers_within_range() -> None:
    constraints = field_constraints(0, 59)
    for i in range(0, 60):
        assert constraints.normalize(str(i)) == i


def test_normalize_accepts_leading_zeros() -> None:
    assert field_constraints(0, 59).normalize("05") == 5


def test_normalize_rejects_values_outside_of_range() -> None:
    constraints = field_constraints(1, 12)
    with raises(OutOfRangeValueError):
        constraints.normalize("0")
    with raises(OutOfRangeValueError):
        constraints.normalize("13")


def test_normalize_rejects_non_numeric_values() -> None:
    constraints = field_constraints(0, 59)
    for token in ("", "a", "1.5", "-1", "+1", "1 ", "5\n", "١"):
        with raises(InvalidFieldTokenError):
            constraints.normalize(token)


def test_normalize_resolves_aliases_case_insensitively() -> None:
    constraints = field_constraints(1, 12, aliases=MONTH_ALIASES)
    assert constraints.normalize("jan") == 1
    assert constraints.normalize("JAN") == 1
    assert constraints.normalize("Feb") == 2
    assert constraints.normalize("december") == 12
    assert constraints.normalize("DECEMBER") == 12


def test_aliases_stored_case_insensitively() -> None:
    constraints = field_constraints(0, 6, aliases={"MON": 1})
    assert constraints.normalize("mon") == 1
    assert constraints.normalize("Mon") == 1


def test_aliases_are_scoped_to_the_field() -> None:
    months = field_constraints(1, 12, aliases=MONTH_ALIASES)
    minutes = field_constraints(0, 59)
    assert months.normalize("mar") == 3
    with raises(InvalidFieldTokenError):
        minutes.normalize("mar")


def test_weekday_aliases_for_both_numbering_conventions() -> None:
    unix = weekday_aliases(sunday=0)
    quartz = weekday_aliases(sunday=1)

    assert unix["sun"] == 0
    assert unix["saturday"] == 6
    assert quartz["sun"] == 1
    assert quartz["saturday"] == 7
    assert quartz["fri"] == 6


def test_default_special_chars_are_the_basic_grammar() -> None:
    constraints = field_constraints(0, 59)
    assert constraints.special_chars == BASIC_SPECIAL_CHARS
    assert constraints.is_allowed(SpecialChar.ASTERISK)
    assert constraints.is_allowed(SpecialChar.SLASH)
    assert constraints.is_allowed(SpecialChar.HYPHEN)
    assert constraints.is_allowed(SpecialChar.COMMA)
    assert not constraints.is_allowed(SpecialChar.QUESTION_MARK)
    assert not constraints.is_allowed(SpecialChar.L)
    assert not constraints.is_allowed(SpecialChar.W)
    assert not constraints.is_allowed(SpecialChar.HASH)


def test_extra_special_chars_are_added_to_the_basic_grammar() -> None:
    constraints = field_constraints(1, 31, special_chars=(SpecialChar.L,))
    assert constraints.is_allowed(SpecialChar.L)
    assert constraints.is_allowed(SpecialChar.ASTERISK)


def test_domain_size() -> None:
    assert field_constraints(0, 59).domain_size == 59
    assert field_constraints(1, 12).domain_size == 11
    assert field_constraints(1970, 2099).domain_size == 129
    assert field_constraints(5, 5).domain_size == 0


def test_rejects_inverted_range() -> None:
    with raises(InvalidCronDefinition):
        FieldConstraints(low_range=10, high_range=1)


def test_rejects_aliases_outside_of_range() -> None:
    with raises(InvalidCronDefinition):
        field_constraints(1, 6, aliases={"sun": 0})


def test_constraints_are_immutable() -> None:
    constraints = field_constraints(1, 12, aliases=MONTH_ALIASES)
    with raises(AttributeError):
        constraints.low_range = 0  # type: ignore[misc]
    with raises(TypeError):
        constraints.string_mapping["foo"] = 1  # type: ignore[index]


def test_field_names_are_ordered() -> None:
    assert CronFieldName.SECOND < CronFieldName.MINUTE < CronFieldName.YEAR
    assert sorted([CronFieldName.DAY_OF_WEEK, CronFieldName.HOUR]) == [
        CronFieldName.HOUR,
        CronFieldName.DAY_OF_WEEK,
    ]
