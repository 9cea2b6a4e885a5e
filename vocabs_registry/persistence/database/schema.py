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
"""Define the ORM schema objects that map directly to the database.

The below schema uses only generic SQLAlchemy types, and therefore should be
portable between database implementations.

NOTE: The vocabulary, version and access_point tables are temporal tables.
Rows are never updated in place, apart from closing their validity interval:
an update to an entity sets the end_date of its current row and inserts a new
row with the same natural id (vocabulary_id, version_id or access_point_id).
The primary key of a temporal table therefore identifies a single row, not an
entity, and should not be referenced by any other table. References between
tables are always made through natural ids.
"""
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeMeta, declarative_base

from vocabs_registry.common.constants.registry import (
    AccessPointSource,
    AccessPointType,
    RegistryEventElementType,
    RegistryEventEventType,
    VersionStatus,
    VocabularyStatus,
)

# Base class for all table classes
Base: DeclarativeMeta = declarative_base()

# SQLAlchemy enums. Created separately from the tables so that the stored
# values are the enum values, not the Python member names.

vocabulary_status = Enum(
    *[status.value for status in VocabularyStatus], name="vocabulary_status"
)

version_status = Enum(*[status.value for status in VersionStatus], name="version_status")

access_point_source = Enum(
    *[source.value for source in AccessPointSource], name="access_point_source"
)

access_point_type = Enum(
    *[ap_type.value for ap_type in AccessPointType], name="access_point_type"
)

registry_event_element_type = Enum(
    *[element_type.value for element_type in RegistryEventElementType],
    name="registry_event_element_type",
)

registry_event_event_type = Enum(
    *[event_type.value for event_type in RegistryEventEventType],
    name="registry_event_event_type",
)


class _TemporalColumns:
    """A mixin which defines all columns common to temporal tables"""

    # Consider this class a mixin and only allow instantiating subclasses
    def __new__(cls, *_, **__):
        if cls is _TemporalColumns:
            raise Exception("_TemporalColumns cannot be instantiated")
        return super().__new__(cls)

    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    modified_by = Column(String(255))

    # Free-form attributes of the row, serialized as JSON
    data = Column(Text)


class VocabularyId(Base):
    """Issues vocabulary ids. A vocabulary id is known to the registry iff
    it has a row here, whether or not the vocabulary currently exists."""

    __tablename__ = "vocabulary_id"

    id = Column(Integer, primary_key=True)


class Vocabulary(Base, _TemporalColumns):
    """Represents one temporal row of a vocabulary"""

    __tablename__ = "vocabulary"

    id = Column(Integer, primary_key=True)
    vocabulary_id = Column(
        Integer, ForeignKey("vocabulary_id.id"), nullable=False, index=True
    )
    owner = Column(String(255), nullable=False)
    status = Column(vocabulary_status, nullable=False)
    slug = Column(String(255), nullable=False)

    __table_args__ = (
        Index("vocabulary_fixed_time_idx", "vocabulary_id", "start_date", "end_date"),
    )


class Version(Base, _TemporalColumns):
    """Represents one temporal row of a version of a vocabulary"""

    __tablename__ = "version"

    id = Column(Integer, primary_key=True)
    version_id = Column(Integer, nullable=False, index=True)
    vocabulary_id = Column(
        Integer, ForeignKey("vocabulary_id.id"), nullable=False, index=True
    )
    status = Column(version_status, nullable=False)
    slug = Column(String(255), nullable=False)
    release_date = Column(String(45))

    __table_args__ = (
        Index("version_fixed_time_idx", "vocabulary_id", "start_date", "end_date"),
    )


class AccessPoint(Base, _TemporalColumns):
    """Represents one temporal row of an access point of a version"""

    __tablename__ = "access_point"

    id = Column(Integer, primary_key=True)
    access_point_id = Column(Integer, nullable=False, index=True)
    version_id = Column(Integer, nullable=False, index=True)
    source = Column(access_point_source, nullable=False)
    type = Column(access_point_type, nullable=False)

    __table_args__ = (
        Index("access_point_fixed_time_idx", "version_id", "start_date", "end_date"),
    )


class RegistryEvent(Base):
    """Records that an element of the registry was created, updated or
    deleted. Registry events are not temporal; they are only ever inserted."""

    __tablename__ = "registry_event"

    id = Column(Integer, primary_key=True)
    element_type = Column(registry_event_element_type, nullable=False)
    element_id = Column(Integer, nullable=False)
    event_date = Column(DateTime, nullable=False, index=True)
    event_type = Column(registry_event_event_type, nullable=False)
    event_user = Column(String(255), nullable=False)
    details = Column(Text)
