# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from pytest import raises

from cron_dialect.cron.expression import Always
from cron_dialect.model.definition import CronDefinition
from cron_dialect.model.field import (
    CronFieldName,
    FieldDefinition,
    InvalidCronDefinition,
    field_constraints,
)

seconds = FieldDefinition(CronFieldName.SECOND, field_constraints(0, 59))
minutes = FieldDefinition(CronFieldName.MINUTE, field_constraints(0, 59))
years = FieldDefinition(
    CronFieldName.YEAR, field_constraints(1970, 2099), optional=True
)


def test_field_definition_lookup() -> None:
    definition = CronDefinition(fields=(seconds, minutes, years))
    assert definition.field_definition(CronFieldName.SECOND) == seconds
    assert definition.field_definition(CronFieldName.YEAR) == years
    assert definition.field_definition(CronFieldName.DAY_OF_YEAR) is None


def test_fields_keep_their_order() -> None:
    definition = CronDefinition(fields=(minutes, seconds))
    assert definition.field_names == [CronFieldName.MINUTE, CronFieldName.SECOND]
    assert list(definition) == [minutes, seconds]
    assert len(definition) == 2


def test_arity_without_optional_field() -> None:
    definition = CronDefinition(fields=(seconds, minutes))
    assert definition.min_fields == 2
    assert definition.max_fields == 2


def test_arity_with_optional_field() -> None:
    definition = CronDefinition(fields=(seconds, minutes, years))
    assert definition.min_fields == 2
    assert definition.max_fields == 3


def test_optional_field_defaults_to_all_values() -> None:
    assert years.default == Always()


def test_fields_given_as_list_are_stored_as_tuple() -> None:
    definition = CronDefinition(fields=[seconds, minutes])  # type: ignore[arg-type]
    assert definition.fields == (seconds, minutes)


def test_rejects_empty_definition() -> None:
    with raises(InvalidCronDefinition):
        CronDefinition(fields=())


def test_rejects_duplicate_fields() -> None:
    with raises(InvalidCronDefinition, match="Duplicate field SECOND"):
        CronDefinition(fields=(seconds, minutes, seconds))


def test_rejects_more_than_one_optional_field() -> None:
    optional_minutes = FieldDefinition(
        CronFieldName.MINUTE, field_constraints(0, 59), optional=True
    )
    with raises(InvalidCronDefinition, match="Only one optional field"):
        CronDefinition(fields=(seconds, optional_minutes, years))


def test_rejects_optional_field_that_is_not_last() -> None:
    with raises(InvalidCronDefinition, match="must be the last field"):
        CronDefinition(fields=(years, seconds))


def test_definition_is_immutable() -> None:
    definition = CronDefinition(fields=(seconds,))
    with raises(AttributeError):
        definition.fields = (minutes,)  # type: ignore[misc]
