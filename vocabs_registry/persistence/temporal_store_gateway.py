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
"""Interfaces for point-in-time reads of the registry's temporal tables."""
import abc
import datetime
from typing import List, Optional

from vocabs_registry.persistence.entity.registry_entities import (
    AccessPoint,
    RegistryEvent,
    Version,
    Vocabulary,
)


class TemporalStoreGateway(abc.ABC):
    """Point-in-time lookups against the registry.

    Every lookup returns only the rows whose validity interval contains the
    given instant. Draft rows are never returned. Implementations must be safe
    to call from multiple threads at once.
    """

    @abc.abstractmethod
    def vocabulary_id_exists(self, vocabulary_id: int) -> bool:
        """Returns True if |vocabulary_id| has ever been issued, whether or not
        the vocabulary currently exists."""

    @abc.abstractmethod
    def lookup_vocabulary(
        self, vocabulary_id: int, instant: datetime.datetime
    ) -> Optional[Vocabulary]:
        """Returns the row of the vocabulary valid at |instant|, or None if the
        vocabulary did not exist at that instant."""

    @abc.abstractmethod
    def lookup_versions(
        self, vocabulary_id: int, instant: datetime.datetime
    ) -> List[Version]:
        """Returns the rows of all versions of the vocabulary valid at
        |instant|, sorted by version_id."""

    @abc.abstractmethod
    def lookup_access_points(
        self, version_id: int, instant: datetime.datetime
    ) -> List[AccessPoint]:
        """Returns the rows of all access points of the version valid at
        |instant|, whatever their source, sorted by access_point_id."""


class RegistryEventSource(abc.ABC):
    @abc.abstractmethod
    def events_between(
        self, from_date: datetime.datetime, to_date: datetime.datetime
    ) -> List[RegistryEvent]:
        """Returns the registry events with from_date <= event_date < to_date,
        in the order in which they were recorded."""
