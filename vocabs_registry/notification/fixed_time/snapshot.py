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
"""Reconstructs the state of a vocabulary as it was at a fixed instant.

A snapshot holds the vocabulary row valid at the instant, the rows of its
versions valid at the instant, and for each of those versions the rows of
its access points valid at the instant. A vocabulary that did not exist at
the instant has an empty snapshot.
"""
import datetime
import logging
from typing import Dict, List, Optional

import attr

from vocabs_registry.common.temporal import temporal_meaning
from vocabs_registry.notification.errors import InvalidArgumentError
from vocabs_registry.persistence.entity.payloads import vocabulary_data
from vocabs_registry.persistence.entity.registry_entities import (
    AccessPoint,
    Version,
    Vocabulary,
)
from vocabs_registry.persistence.temporal_store_gateway import TemporalStoreGateway


@attr.s(frozen=True, kw_only=True)
class VersionSnapshot:
    version: Version = attr.ib()

    # All access points of the version, whatever their source
    access_points: List[AccessPoint] = attr.ib(factory=list)


@attr.s(frozen=True, kw_only=True)
class VocabularySnapshot:
    """The state of one vocabulary at |instant|."""

    vocabulary_id: int = attr.ib()
    instant: datetime.datetime = attr.ib()
    vocabulary: Optional[Vocabulary] = attr.ib(default=None)

    # Keyed by version_id
    versions: Dict[int, VersionSnapshot] = attr.ib(factory=dict)

    def is_empty(self) -> bool:
        return self.vocabulary is None

    @property
    def title(self) -> Optional[str]:
        if self.vocabulary is None:
            return None
        return vocabulary_data(self.vocabulary).title

    @property
    def owner(self) -> Optional[str]:
        if self.vocabulary is None:
            return None
        return self.vocabulary.owner

    def sorted_versions(self) -> List[Version]:
        return [
            self.versions[version_id].version for version_id in sorted(self.versions)
        ]

    def describe(self) -> List[str]:
        """Returns one line per row in the snapshot."""
        lines = [f"Vocabulary; Id: {self.vocabulary_id}"]
        if self.vocabulary is None:
            return lines
        lines.append(f"Has vocabulary instance; Id: {self.vocabulary.id}")
        for version_id in sorted(self.versions):
            version_snapshot = self.versions[version_id]
            lines.append(
                "Versions | Fixed time version; Id, Version Id: "
                f"{version_snapshot.version.id},{version_id}"
            )
            for access_point in version_snapshot.access_points:
                lines.append(
                    "AP | Fixed time version has AP; V Id, AP Id: "
                    f"{version_id},{access_point.access_point_id}"
                )
        return lines

    def log_description(self) -> None:
        if self.vocabulary is None:
            row_meaning = "absent"
        else:
            row_meaning = temporal_meaning(self.vocabulary).value
        logging.debug(
            "Snapshot of vocabulary [%s] at [%s], vocabulary row %s:\n%s",
            self.vocabulary_id,
            self.instant,
            row_meaning,
            "\n".join(self.describe()),
        )


class FixedTimeSnapshotBuilder:
    """Builds snapshots of a single vocabulary."""

    def __init__(
        self, gateway: TemporalStoreGateway, vocabulary_id: Optional[int]
    ) -> None:
        if vocabulary_id is None:
            logging.error("Attempted to build a snapshot with no vocabulary id")
            raise InvalidArgumentError("A vocabulary id is required")
        if not gateway.vocabulary_id_exists(vocabulary_id):
            logging.error(
                "Attempted to build a snapshot of unknown vocabulary id [%s]",
                vocabulary_id,
            )
            raise InvalidArgumentError(f"Unknown vocabulary id [{vocabulary_id}]")
        self.gateway = gateway
        self.vocabulary_id = vocabulary_id

    def build(self, instant: datetime.datetime) -> VocabularySnapshot:
        vocabulary = self.gateway.lookup_vocabulary(self.vocabulary_id, instant)
        if vocabulary is None:
            return VocabularySnapshot(vocabulary_id=self.vocabulary_id, instant=instant)

        versions: Dict[int, VersionSnapshot] = {}
        for version in self.gateway.lookup_versions(self.vocabulary_id, instant):
            versions[version.version_id] = VersionSnapshot(
                version=version,
                access_points=self.gateway.lookup_access_points(
                    version.version_id, instant
                ),
            )
        return VocabularySnapshot(
            vocabulary_id=self.vocabulary_id,
            instant=instant,
            vocabulary=vocabulary,
            versions=versions,
        )


def build_snapshot(
    gateway: TemporalStoreGateway,
    vocabulary_id: Optional[int],
    instant: datetime.datetime,
) -> VocabularySnapshot:
    return FixedTimeSnapshotBuilder(gateway, vocabulary_id).build(instant)
