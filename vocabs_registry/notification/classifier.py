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
"""Turns edit scripts and field differences into reportable changes."""
from collections import defaultdict
from typing import Dict, List, Mapping, Tuple

from vocabs_registry.common.constants.registry import DifferenceClassification
from vocabs_registry.notification.differences import VersionDifferences
from vocabs_registry.notification.entity_diff import (
    IMPORT,
    POOLPARTY_HARVEST,
    PUBLISH,
    SLUG,
    STATUS,
    FieldDiff,
    diff_versions,
    diff_vocabularies,
)
from vocabs_registry.notification.sequence.sequences_comparator import (
    AccessPointElement,
    EditCommandType,
    EditScript,
    VersionElement,
)
from vocabs_registry.persistence.entity.payloads import version_data
from vocabs_registry.persistence.entity.registry_entities import Version, Vocabulary
from vocabs_registry.utils.string import capitalize_fully
from vocabs_registry.utils.types import non_optional

VOCABULARY_CREATED = "The vocabulary was created"
VOCABULARY_DELETED = "The vocabulary was deleted"
VERSION_ADDED = "Added"
VERSION_DELETED = "Deleted"
ACCESS_POINT_ADDED = "A user-specified access point was added"
ACCESS_POINT_DELETED = "A user-specified access point was deleted"
SPARQL_PUBLISHED = "Version published via a SPARQL endpoint"
SPARQL_UNPUBLISHED = "Version no longer published via a SPARQL endpoint"
LDA_PUBLISHED = "Version published via the Linked Data API"
LDA_UNPUBLISHED = "Version no longer published via the Linked Data API"

# Fields whose changes are detected but never reported
_SUPPRESSED_VERSION_FIELDS = frozenset([SLUG, POOLPARTY_HARVEST])


def status_set_statement(status: str) -> str:
    return f"Status set to {capitalize_fully(status)}"


def status_updated_statement(status: str) -> str:
    return f"Status updated to {capitalize_fully(status)}"


def classify_vocabulary(
    left: Vocabulary, right: Vocabulary
) -> Tuple[List[str], List[FieldDiff]]:
    """Returns the statements to make about a vocabulary that exists at both
    instants, and the changed fields for which no statement is made."""
    statements: List[str] = []
    field_diffs: List[FieldDiff] = []
    for field_diff in diff_vocabularies(left, right):
        if field_diff.field_name == STATUS:
            statements.append(status_updated_statement(field_diff.right))
        else:
            field_diffs.append(field_diff)
    return statements, field_diffs


def _classify_kept_version(left: Version, right: Version) -> VersionDifferences:
    differences = VersionDifferences(
        final_result=DifferenceClassification.UPDATED,
        title=version_data(left).title,
    )
    for field_diff in diff_versions(left, right):
        if field_diff.field_name in _SUPPRESSED_VERSION_FIELDS:
            continue
        if field_diff.field_name == STATUS:
            differences.add_version_diff(status_updated_statement(field_diff.right))
        elif field_diff.field_name == IMPORT:
            differences.add_version_diff(
                SPARQL_PUBLISHED if field_diff.right else SPARQL_UNPUBLISHED
            )
        elif field_diff.field_name == PUBLISH:
            differences.add_version_diff(
                LDA_PUBLISHED if field_diff.right else LDA_UNPUBLISHED
            )
        else:
            differences.field_diffs.append(field_diff)
    return differences


def classify_versions(
    script: EditScript[VersionElement],
) -> Dict[int, VersionDifferences]:
    """Returns an entry for every version that was added, deleted or kept,
    keyed by version_id, in the order of |script|. Kept versions always get
    an UPDATED entry, even when nothing about them changed."""
    results: Dict[int, VersionDifferences] = {}
    for command in script.commands:
        if command.command_type is EditCommandType.INSERT:
            version = non_optional(command.b).version
            differences = VersionDifferences(
                final_result=DifferenceClassification.CREATED,
                title=version_data(version).title,
            )
            differences.add_version_diff(VERSION_ADDED)
            differences.add_version_diff(status_set_statement(version.status.value))
        elif command.command_type is EditCommandType.DELETE:
            version = non_optional(command.a).version
            differences = VersionDifferences(
                final_result=DifferenceClassification.DELETED,
                title=version_data(version).title,
            )
            differences.add_version_diff(VERSION_DELETED)
        else:
            version = non_optional(command.a).version
            differences = _classify_kept_version(
                version, non_optional(command.b).version
            )
        results[version.version_id] = differences
    return results


def classify_access_points(
    script: EditScript[AccessPointElement],
) -> Mapping[int, List[str]]:
    """Returns the statements to make about added and deleted access points,
    keyed by the version_id of the access point."""
    statements: Dict[int, List[str]] = defaultdict(list)
    for command in script.commands:
        if command.command_type is EditCommandType.INSERT:
            element = non_optional(command.b)
            statements[element.version_id].append(ACCESS_POINT_ADDED)
        elif command.command_type is EditCommandType.DELETE:
            element = non_optional(command.a)
            statements[element.version_id].append(ACCESS_POINT_DELETED)
    return dict(statements)
