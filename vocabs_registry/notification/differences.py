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
"""The account of what changed for one vocabulary between two instants."""
from typing import Any, Dict, Iterable, List, Optional

import attr
import cattrs

from vocabs_registry.common.constants.registry import DifferenceClassification
from vocabs_registry.notification.entity_diff import FieldDiff


def _append_unique(statements: List[str], statement: str) -> None:
    if statement not in statements:
        statements.append(statement)


@attr.s(kw_only=True)
class VersionDifferences:
    final_result: DifferenceClassification = attr.ib()
    title: Optional[str] = attr.ib(default=None)

    # Human-readable statements, in the order in which they were first made
    version_diffs: List[str] = attr.ib(factory=list)

    # Changed fields for which no statement is made
    field_diffs: List[FieldDiff] = attr.ib(factory=list)

    def add_version_diff(self, statement: str) -> None:
        _append_unique(self.version_diffs, statement)

    def add_version_diffs(self, statements: Iterable[str]) -> None:
        for statement in statements:
            self.add_version_diff(statement)

    def has_differences(self) -> bool:
        return bool(self.version_diffs or self.field_diffs)


@attr.s(kw_only=True)
class VocabularyDifferences:
    final_result: DifferenceClassification = attr.ib()
    title: Optional[str] = attr.ib(default=None)

    # Owner of the vocabulary at the earlier instant, or at the later instant
    # if it was created in between
    owner: Optional[str] = attr.ib(default=None)

    vocabulary_diffs: List[str] = attr.ib(factory=list)
    field_diffs: List[FieldDiff] = attr.ib(factory=list)

    # Keyed by version_id
    version_diffs: Dict[int, VersionDifferences] = attr.ib(factory=dict)

    def add_vocabulary_diff(self, statement: str) -> None:
        _append_unique(self.vocabulary_diffs, statement)

    def cleanup(self) -> None:
        """Removes versions that were kept but for which there is nothing to
        report."""
        self.version_diffs = {
            version_id: version_differences
            for version_id, version_differences in self.version_diffs.items()
            if version_differences.final_result is not DifferenceClassification.UPDATED
            or version_differences.has_differences()
        }

    def is_empty(self) -> bool:
        """True if the vocabulary existed at both instants and nothing about it
        changed that is worth reporting."""
        return (
            self.final_result
            in (DifferenceClassification.UPDATED, DifferenceClassification.UNCHANGED)
            and not self.vocabulary_diffs
            and not self.field_diffs
            and not self.version_diffs
        )

    def to_json_dict(self) -> Dict[str, Any]:
        return cattrs.unstructure(self)
