# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from itertools import chain
from types import MappingProxyType
from typing import Final

from cron_dialect.cron.errors import InvalidFieldTokenError, OutOfRangeValueError
from cron_dialect.cron.expression import Always, FieldExpression


class InvalidCronDefinition(Exception):
    pass


class CronFieldName(Enum):
    SECOND = 0
    MINUTE = 1
    HOUR = 2
    DAY_OF_MONTH = 3
    MONTH = 4
    DAY_OF_WEEK = 5
    YEAR = 6
    DAY_OF_YEAR = 7

    @property
    def order(self) -> int:
        return self.value

    def __lt__(self, other: "CronFieldName") -> bool:
        if not isinstance(other, CronFieldName):
            return NotImplemented
        return self.order < other.order


class SpecialChar(str, Enum):
    ASTERISK = "*"
    QUESTION_MARK = "?"
    SLASH = "/"
    HYPHEN = "-"
    COMMA = ","
    L = "L"
    W = "W"
    HASH = "#"


BASIC_SPECIAL_CHARS: Final = frozenset(
    (SpecialChar.ASTERISK, SpecialChar.SLASH, SpecialChar.HYPHEN, SpecialChar.COMMA)
)

# digits only, a trailing newline or a sign is not an integer
DECIMAL_INTEGER_RE: Final = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class FieldConstraints:
    """The domain of a single cron field: the range of numeric values it accepts, the
    special characters permitted in it, and the names that may be used in place of
    numbers (e.g. "jan" for 1 in a months field)."""

    low_range: int
    high_range: int
    special_chars: frozenset[SpecialChar] = BASIC_SPECIAL_CHARS
    string_mapping: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    allow_wraparound: bool = False

    def __post_init__(self) -> None:
        if self.low_range > self.high_range:
            raise InvalidCronDefinition(
                f"Low range {self.low_range} is greater than high range {self.high_range}"
            )
        # store aliases lower-cased and read-only so lookups are case-insensitive
        aliases: Final = {
            name.lower(): value for name, value in self.string_mapping.items()
        }
        for name, value in aliases.items():
            if not self.low_range <= value <= self.high_range:
                raise InvalidCronDefinition(
                    f"Alias {name} maps to {value}, outside of range {self.low_range}-{self.high_range}"
                )
        object.__setattr__(self, "string_mapping", MappingProxyType(aliases))
        object.__setattr__(self, "special_chars", frozenset(self.special_chars))

    @property
    def domain_size(self) -> int:
        """The largest step that still lands on a second value within the domain"""
        return self.high_range - self.low_range

    def is_allowed(self, special_char: SpecialChar) -> bool:
        return special_char in self.special_chars

    def in_range(self, value: int) -> bool:
        return self.low_range <= value <= self.high_range

    def normalize(self, token: str) -> int:
        """
        Resolve a single value, either an alias or a decimal integer, and check that it
        lies within the domain.

        :param token: the text of one value, without surrounding whitespace
        :return: the integer value
        """
        alias_value = self.string_mapping.get(token.lower())
        if alias_value is not None:
            return alias_value
        if not DECIMAL_INTEGER_RE.fullmatch(token):
            raise InvalidFieldTokenError(
                f"Invalid value {token!r}, expected an integer or one of the names: {sorted(self.string_mapping)}",
                fragment=token,
            )
        value: Final = int(token)
        if not self.in_range(value):
            raise OutOfRangeValueError(
                f"Value {value} not in range [{self.low_range}, {self.high_range}]",
                fragment=token,
            )
        return value


def field_constraints(
    low_range: int,
    high_range: int,
    *,
    special_chars: Iterable[SpecialChar] = (),
    aliases: Mapping[str, int] = MappingProxyType({}),
    allow_wraparound: bool = False,
) -> FieldConstraints:
    """Constraints accepting the basic grammar (*, /, -, ,) plus `special_chars`"""
    return FieldConstraints(
        low_range=low_range,
        high_range=high_range,
        special_chars=BASIC_SPECIAL_CHARS.union(special_chars),
        string_mapping=aliases,
        allow_wraparound=allow_wraparound,
    )


@dataclass(frozen=True)
class FieldDefinition:
    """A field of a dialect. Only the last field of a dialect may be optional, and
    when it is omitted from an expression `default` is recorded in its place."""

    name: CronFieldName
    constraints: FieldConstraints
    optional: bool = False
    default: FieldExpression = Always()


# cron expressions are not localized
month_names: Final = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
month_abbrs: Final = list(month_name[0:3] for month_name in month_names)
# months are one-indexed, names may be abbreviated to the first three letters
MONTH_ALIASES: Final = MappingProxyType(
    {name: i + 1 for i, name in chain(enumerate(month_names), enumerate(month_abbrs))}
)

weekday_names: Final = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)
weekday_abbrs: Final = list(weekday_name[0:3] for weekday_name in weekday_names)


def weekday_aliases(sunday: int) -> Mapping[str, int]:
    """
    Weekday names for a dialect numbering the days of the week consecutively starting
    on Sunday. Unix cron uses zero for Sunday, Quartz uses one.
    """
    return MappingProxyType(
        {
            name: i + sunday
            for i, name in chain(enumerate(weekday_names), enumerate(weekday_abbrs))
        }
    )
