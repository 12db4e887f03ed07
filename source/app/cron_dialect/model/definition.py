# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Optional

from cron_dialect.model.field import (
    CronFieldName,
    FieldDefinition,
    InvalidCronDefinition,
)

if TYPE_CHECKING:
    from cron_dialect.model.cron import Cron
else:
    Cron = object

CronValidation = Callable[[Cron], None]
"""A rule spanning more than one field, raising ConflictingFieldUsageError when the
parsed cron breaks it"""


@dataclass(frozen=True)
class CronDefinition:
    """
    A dialect of cron: the fields an expression consists of, in order, and the rules
    that apply across fields.

    Definitions are immutable and can be shared freely between parsers and threads.
    """

    fields: tuple[FieldDefinition, ...]
    validations: tuple[CronValidation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "validations", tuple(self.validations))
        validate_field_definitions(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self.fields)

    @property
    def field_names(self) -> list[CronFieldName]:
        return [field.name for field in self.fields]

    @property
    def max_fields(self) -> int:
        return len(self.fields)

    @property
    def min_fields(self) -> int:
        if self.fields[-1].optional:
            return len(self.fields) - 1
        return len(self.fields)

    def field_definition(self, name: CronFieldName) -> Optional[FieldDefinition]:
        for field in self.fields:
            if field.name == name:
                return field
        return None


def validate_field_definitions(fields: Sequence[FieldDefinition]) -> None:
    if not fields:
        raise InvalidCronDefinition("A cron definition requires at least one field")

    seen: Final[set[CronFieldName]] = set()
    for field in fields:
        if field.name in seen:
            raise InvalidCronDefinition(f"Duplicate field {field.name.name}")
        seen.add(field.name)

    optional_fields: Final = [field for field in fields if field.optional]
    if len(optional_fields) > 1:
        raise InvalidCronDefinition(
            f"Only one optional field is supported, received: {[field.name.name for field in optional_fields]}"
        )
    if optional_fields and optional_fields[0] is not fields[-1]:
        raise InvalidCronDefinition(
            f"Optional field {optional_fields[0].name.name} must be the last field"
        )
