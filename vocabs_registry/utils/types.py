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
"""General use mypy types."""

from typing import Optional, TypeVar

# A Generic type where the generic can be any object
T = TypeVar("T")
U = TypeVar("U")


def non_optional(v: Optional[T]) -> T:
    """Converts the type of a value from optional to non-optional, throwing if it is
    None.
    """
    if v is None:
        raise ValueError("Expected non-null value.")
    return v
