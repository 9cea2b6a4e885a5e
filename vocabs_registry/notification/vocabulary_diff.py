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
"""Compares the state of a vocabulary at two instants."""
import datetime
import logging
from typing import List, Optional

from vocabs_registry.common.constants.registry import (
    AccessPointSource,
    DifferenceClassification,
)
from vocabs_registry.notification.classifier import (
    VOCABULARY_CREATED,
    VOCABULARY_DELETED,
    classify_access_points,
    classify_versions,
    classify_vocabulary,
)
from vocabs_registry.notification.differences import VocabularyDifferences
from vocabs_registry.notification.fixed_time.snapshot import (
    FixedTimeSnapshotBuilder,
    VocabularySnapshot,
)
from vocabs_registry.notification.sequence.sequences_comparator import (
    AccessPointElement,
    VersionElement,
    compare_sequences,
)
from vocabs_registry.persistence.temporal_store_gateway import TemporalStoreGateway
from vocabs_registry.utils import structured_logging
from vocabs_registry.utils.types import non_optional


def _user_access_point_elements(
    snapshot: VocabularySnapshot, differences: VocabularyDifferences
) -> List[AccessPointElement]:
    """Returns the user-specified access points of those versions of
    |snapshot| that were kept, sorted by version_id then access_point_id."""
    elements = []
    for version_id, version_snapshot in snapshot.versions.items():
        version_differences = differences.version_diffs.get(version_id)
        if (
            version_differences is None
            or version_differences.final_result is not DifferenceClassification.UPDATED
        ):
            continue
        elements.extend(
            AccessPointElement(access_point)
            for access_point in version_snapshot.access_points
            if access_point.source is AccessPointSource.USER
        )
    return sorted(elements)


def diff_snapshots(
    snapshot_a: VocabularySnapshot, snapshot_b: VocabularySnapshot
) -> VocabularyDifferences:
    """Returns what changed between |snapshot_a| and the later |snapshot_b|
    of the same vocabulary."""
    if snapshot_a.is_empty() and snapshot_b.is_empty():
        return VocabularyDifferences(final_result=DifferenceClassification.UNCHANGED)

    if snapshot_a.is_empty():
        differences = VocabularyDifferences(
            final_result=DifferenceClassification.CREATED,
            title=snapshot_b.title,
            owner=snapshot_b.owner,
        )
        differences.add_vocabulary_diff(VOCABULARY_CREATED)
        return differences

    if snapshot_b.is_empty():
        differences = VocabularyDifferences(
            final_result=DifferenceClassification.DELETED,
            title=snapshot_a.title,
            owner=snapshot_a.owner,
        )
        differences.add_vocabulary_diff(VOCABULARY_DELETED)
        return differences

    differences = VocabularyDifferences(
        final_result=DifferenceClassification.UPDATED,
        title=snapshot_a.title,
        owner=snapshot_a.owner,
    )
    statements, field_diffs = classify_vocabulary(
        non_optional(snapshot_a.vocabulary), non_optional(snapshot_b.vocabulary)
    )
    for statement in statements:
        differences.add_vocabulary_diff(statement)
    differences.field_diffs.extend(field_diffs)

    differences.version_diffs = classify_versions(
        compare_sequences(
            [VersionElement.for_version(v) for v in snapshot_a.sorted_versions()],
            [VersionElement.for_version(v) for v in snapshot_b.sorted_versions()],
        )
    )

    access_point_statements = classify_access_points(
        compare_sequences(
            _user_access_point_elements(snapshot_a, differences),
            _user_access_point_elements(snapshot_b, differences),
        )
    )
    for version_id, version_statements in access_point_statements.items():
        differences.version_diffs[version_id].add_version_diffs(version_statements)

    differences.cleanup()
    if differences.is_empty():
        differences.final_result = DifferenceClassification.UNCHANGED
    return differences


class VocabularyDiffer:
    """Compares vocabularies read through |gateway|."""

    def __init__(self, gateway: TemporalStoreGateway) -> None:
        self.gateway = gateway

    def diff(
        self,
        vocabulary_id: Optional[int],
        instant_a: datetime.datetime,
        instant_b: datetime.datetime,
    ) -> VocabularyDifferences:
        with structured_logging.vocabulary_context(vocabulary_id):
            builder = FixedTimeSnapshotBuilder(self.gateway, vocabulary_id)
            snapshot_a = builder.build(instant_a)
            snapshot_b = builder.build(instant_b)
            snapshot_a.log_description()
            snapshot_b.log_description()
            differences = diff_snapshots(snapshot_a, snapshot_b)
            logging.info(
                "Vocabulary [%s] between [%s] and [%s]: %s",
                vocabulary_id,
                instant_a,
                instant_b,
                differences.final_result.value,
            )
            return differences


def diff_vocabulary(
    gateway: TemporalStoreGateway,
    vocabulary_id: Optional[int],
    instant_a: datetime.datetime,
    instant_b: datetime.datetime,
) -> VocabularyDifferences:
    return VocabularyDiffer(gateway).diff(vocabulary_id, instant_a, instant_b)
