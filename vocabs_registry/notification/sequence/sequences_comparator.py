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
"""Computes a minimal edit script between two sequences.

The script is derived from a longest common subsequence of the two inputs.
Applying its commands in order to the first sequence yields the second:

  KEEP(a, b)  a and b are the same element; step past both
  DELETE(a)   a appears only in the first sequence
  INSERT(b)   b appears only in the second sequence

Where the script could equally start with a deletion or an insertion, the
deletion is emitted first.

Elements are compared with ==. To compare rows of the registry by the
identity of the element they describe, wrap them in a VersionElement or an
AccessPointElement, which ignore the rest of the row. Callers are expected to
sort both sequences by natural id first; this is not checked.
"""
from enum import Enum
from typing import Any, Generic, List, Optional, Sequence, Tuple

import attr

from vocabs_registry.persistence.entity.registry_entities import AccessPoint, Version
from vocabs_registry.utils.types import T


class EditCommandType(Enum):
    KEEP = "KEEP"
    DELETE = "DELETE"
    INSERT = "INSERT"


@attr.s(frozen=True, kw_only=True)
class EditCommand(Generic[T]):
    command_type: EditCommandType = attr.ib()

    # The element of the first sequence; None for INSERT
    a: Optional[T] = attr.ib(default=None)

    # The element of the second sequence; None for DELETE
    b: Optional[T] = attr.ib(default=None)


@attr.s(frozen=True, kw_only=True)
class EditScript(Generic[T]):
    commands: List[EditCommand[T]] = attr.ib()
    lcs_length: int = attr.ib()

    @property
    def modifications(self) -> int:
        """The number of DELETE and INSERT commands."""
        return sum(
            1
            for command in self.commands
            if command.command_type is not EditCommandType.KEEP
        )


def compare_sequences(sequence_a: Sequence[T], sequence_b: Sequence[T]) -> EditScript[T]:
    n = len(sequence_a)
    m = len(sequence_b)

    # lcs[i][j] is the length of a longest common subsequence of
    # sequence_a[i:] and sequence_b[j:].
    lcs = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if sequence_a[i] == sequence_b[j]:
                lcs[i][j] = lcs[i + 1][j + 1] + 1
            else:
                lcs[i][j] = max(lcs[i + 1][j], lcs[i][j + 1])

    commands: List[EditCommand[T]] = []
    i = 0
    j = 0
    while i < n and j < m:
        if sequence_a[i] == sequence_b[j]:
            commands.append(
                EditCommand(
                    command_type=EditCommandType.KEEP,
                    a=sequence_a[i],
                    b=sequence_b[j],
                )
            )
            i += 1
            j += 1
        elif lcs[i + 1][j] >= lcs[i][j + 1]:
            commands.append(
                EditCommand(command_type=EditCommandType.DELETE, a=sequence_a[i])
            )
            i += 1
        else:
            commands.append(
                EditCommand(command_type=EditCommandType.INSERT, b=sequence_b[j])
            )
            j += 1
    for a in sequence_a[i:]:
        commands.append(EditCommand(command_type=EditCommandType.DELETE, a=a))
    for b in sequence_b[j:]:
        commands.append(EditCommand(command_type=EditCommandType.INSERT, b=b))

    return EditScript(commands=commands, lcs_length=lcs[0][0])


@attr.s(frozen=True, order=True)
class VersionElement:
    """A version row, identified by its version_id."""

    version_id: int = attr.ib()
    version: Version = attr.ib(eq=False, order=False, repr=False)

    @classmethod
    def for_version(cls, version: Version) -> "VersionElement":
        return cls(version.version_id, version)


@attr.s(frozen=True, eq=False)
class AccessPointElement:
    """An access point row. Access points are identified by their
    access_point_id alone, but sort by (version_id, access_point_id) so that
    the access points of one version are kept together."""

    access_point: AccessPoint = attr.ib()

    @property
    def access_point_id(self) -> int:
        return self.access_point.access_point_id

    @property
    def version_id(self) -> int:
        return self.access_point.version_id

    @property
    def sort_key(self) -> Tuple[int, int]:
        return self.version_id, self.access_point_id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AccessPointElement):
            return NotImplemented
        return self.access_point_id == other.access_point_id

    def __hash__(self) -> int:
        return hash(self.access_point_id)

    def __lt__(self, other: "AccessPointElement") -> bool:
        return self.sort_key < other.sort_key
