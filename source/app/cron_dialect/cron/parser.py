# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parse a complete cron expression according to a dialect.

The expression is split into whitespace-separated fields, which are aligned with the
fields of the definition by position. A definition whose last field is optional also
accepts an expression that leaves that field out. Each field is then parsed and checked
against its own constraints, and finally the rules of the definition that span more
than one field are applied to the assembled result.
"""
import re
from typing import Final

from cron_dialect.cron.errors import CronParseError, MalformedExpressionError
from cron_dialect.cron.field_parser import parse_field
from cron_dialect.model.cron import Cron, CronField
from cron_dialect.model.definition import CronDefinition

_whitespace_re: Final = re.compile(r"[ \t]+")


def tokenize(expression: str) -> list[str]:
    stripped: Final = expression.strip(" \t")
    if not stripped:
        return []
    return _whitespace_re.split(stripped)


class CronParser:
    def __init__(self, definition: CronDefinition) -> None:
        self._definition = definition

    @property
    def definition(self) -> CronDefinition:
        return self._definition

    def parse(self, expression: str) -> Cron:
        tokens: Final = tokenize(expression)
        if not tokens:
            raise MalformedExpressionError("Empty expression!", fragment=expression)

        self._validate_arity(tokens, expression)

        cron_fields: Final[list[CronField]] = []
        for token, field in zip(tokens, self._definition.fields):
            try:
                cron_fields.append(
                    CronField(name=field.name, expression=parse_field(token, field))
                )
            except CronParseError as err:
                err.field_name = field.name
                raise

        for omitted in self._definition.fields[len(tokens) :]:
            cron_fields.append(
                CronField(name=omitted.name, expression=omitted.default, supplied=False)
            )

        cron: Final = Cron(definition=self._definition, cron_fields=tuple(cron_fields))
        for validation in self._definition.validations:
            validation(cron)
        return cron

    def _validate_arity(self, tokens: list[str], expression: str) -> None:
        count: Final = len(tokens)
        if self._definition.min_fields <= count <= self._definition.max_fields:
            return
        if self._definition.min_fields == self._definition.max_fields:
            expected = str(self._definition.max_fields)
        else:
            expected = f"{self._definition.min_fields} or {self._definition.max_fields}"
        raise MalformedExpressionError(
            f"Cron expression contains {count} parts but we expect {expected}: {expression}",
            fragment=expression,
        )


def parse_cron(expression: str, definition: CronDefinition) -> Cron:
    return CronParser(definition).parse(expression)
