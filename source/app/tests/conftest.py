# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from unittest.mock import patch

from pytest import fixture

import cron_dialect.util.app_env
from cron_dialect.model.definition import CronDefinition
from cron_dialect.model.field import (
    CronFieldName,
    FieldDefinition,
    field_constraints,
)
from cron_dialect.model.presets import CronType, definition_for


@fixture(autouse=True)
def clean_environment() -> Iterator[None]:
    cron_dialect.util.app_env._app_env = None
    with patch.dict(environ, {}, clear=True):
        yield
    cron_dialect.util.app_env._app_env = None


@fixture
def seconds_only_definition() -> CronDefinition:
    return CronDefinition(
        fields=(FieldDefinition(CronFieldName.SECOND, field_constraints(0, 59)),)
    )


@fixture
def five_field_definition() -> CronDefinition:
    return CronDefinition(
        fields=tuple(
            FieldDefinition(name, field_constraints(0, 59))
            for name in (
                CronFieldName.MINUTE,
                CronFieldName.HOUR,
                CronFieldName.DAY_OF_MONTH,
                CronFieldName.MONTH,
                CronFieldName.DAY_OF_WEEK,
            )
        )
    )


@fixture
def quartz_definition() -> CronDefinition:
    return definition_for(CronType.QUARTZ)
