# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Optional

from cron_dialect.cron.expression import FieldExpression
from cron_dialect.cron.serializer import to_cron_str
from cron_dialect.model.definition import CronDefinition
from cron_dialect.model.field import CronFieldName


@dataclass(frozen=True)
class CronField:
    name: CronFieldName
    expression: FieldExpression
    # false for an optional trailing field that was left out of the expression
    supplied: bool = True


@dataclass(frozen=True)
class Cron:
    """
    A parsed cron expression. The fields are held in the order of the definition that
    produced them. Only a parser creates instances, after every field and every
    cross-field rule of the definition has been checked.
    """

    definition: CronDefinition
    cron_fields: tuple[CronField, ...]

    def get(self, name: CronFieldName) -> Optional[FieldExpression]:
        for field in self.cron_fields:
            if field.name == name:
                return field.expression
        return None

    def is_supplied(self, name: CronFieldName) -> bool:
        return any(field.supplied for field in self.cron_fields if field.name == name)

    @property
    def fields(self) -> dict[CronFieldName, FieldExpression]:
        return {field.name: field.expression for field in self.cron_fields}

    def as_string(self) -> str:
        return " ".join(
            to_cron_str(field.expression)
            for field in self.cron_fields
            if field.supplied
        )

    def equivalent(self, other: "Cron") -> bool:
        return self.as_string() == other.as_string()

    def __str__(self) -> str:
        return self.as_string()
