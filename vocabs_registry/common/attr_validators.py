# Vocabs Registry - a temporal metadata registry for controlled vocabularies
# Copyright (C) 2026 Vocabs Registry contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Contains helper aliases and functions for various attrs validators that can be passed to the `validator=` arg of
any attr field. For example:

@attr.s
class MyClass:
  slug: str = attr.ib(validator=is_non_empty_str)
  modified_by: Optional[str] = attr.ib(validator=is_opt(str))
"""

import datetime
from typing import Any, Callable, Type

import attr


class IsOptionalValidator:
    def __init__(self, expected_cls_type: Type) -> None:
        self._expected_cls_type = expected_cls_type

    def __call__(self, instance: Any, attribute: attr.Attribute, value: Any) -> None:
        return attr.validators.optional(
            attr.validators.instance_of(self._expected_cls_type)
        )(instance, attribute, value)


def is_opt(cls_type: Type) -> Callable:
    """Returns an attrs validator that checks if the value is an instance of |cls_type|
    or None."""
    return IsOptionalValidator(cls_type)


def is_non_empty_str(_instance: Any, _attribute: attr.Attribute, value: str) -> None:
    if not isinstance(value, str):
        raise ValueError(f"Expected value type str, found {type(value)}.")
    if not value:
        raise ValueError("String value should not be empty.")


def is_naive_datetime(
    _instance: Any, attribute: attr.Attribute, value: datetime.datetime
) -> None:
    """Temporal columns are stored as naive UTC datetimes. Rejects anything
    else so that comparisons against instants never mix naive and aware
    values."""
    if not isinstance(value, datetime.datetime):
        raise ValueError(
            f"Expected [{attribute.name}] to be a datetime, found {type(value)}."
        )
    if value.tzinfo is not None:
        raise ValueError(
            f"Expected [{attribute.name}] to be a naive UTC datetime, found "
            f"tzinfo [{value.tzinfo}]."
        )


# Int field validators
is_int = attr.validators.instance_of(int)

# String field validators
is_str = attr.validators.instance_of(str)
is_opt_str = is_opt(str)
