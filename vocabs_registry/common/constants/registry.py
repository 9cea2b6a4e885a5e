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
"""Constants related to the vocabulary, version and access point entities of
the registry, and to the registry events recorded against them."""

from enum import Enum


class VocabularyStatus(Enum):
    PUBLISHED = "PUBLISHED"
    DEPRECATED = "DEPRECATED"
    DRAFT = "DRAFT"


class VersionStatus(Enum):
    CURRENT = "CURRENT"
    SUPERSEDED = "SUPERSEDED"
    DEPRECATED = "DEPRECATED"
    DRAFT = "DRAFT"


class AccessPointSource(Enum):
    """Who is responsible for the existence of an access point."""

    # Added explicitly by the owner of the vocabulary
    USER = "USER"
    # Generated by a harvest/import workflow task
    SYSTEM = "SYSTEM"


class AccessPointType(Enum):
    API_SPARQL = "API_SPARQL"
    FILE = "FILE"
    SESAME_DOWNLOAD = "SESAME_DOWNLOAD"
    SISSVOC = "SISSVOC"
    WEB_PAGE = "WEB_PAGE"


class RegistryEventElementType(Enum):
    VOCABULARIES = "VOCABULARIES"
    VERSIONS = "VERSIONS"
    ACCESS_POINTS = "ACCESS_POINTS"
    RELATED_ENTITIES = "RELATED_ENTITIES"


class RegistryEventEventType(Enum):
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"


class DifferenceClassification(Enum):
    """High-level nature of what changed for an element between two instants."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    UNCHANGED = "unchanged"
