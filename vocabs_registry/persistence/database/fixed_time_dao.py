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
"""SQLAlchemy implementations of the point-in-time registry lookups."""
import datetime
import logging
from typing import List, Optional, Type, Union

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from vocabs_registry.common.constants.registry import (
    AccessPointSource,
    AccessPointType,
    RegistryEventElementType,
    RegistryEventEventType,
    VersionStatus,
    VocabularyStatus,
)
from vocabs_registry.common.temporal import CURRENTLY_VALID_END_DATE
from vocabs_registry.persistence.database import schema
from vocabs_registry.persistence.database.session_factory import SessionFactory
from vocabs_registry.persistence.entity import registry_entities as entities
from vocabs_registry.persistence.temporal_store_gateway import (
    RegistryEventSource,
    TemporalStoreGateway,
)

_TemporalTable = Union[
    Type[schema.Vocabulary], Type[schema.Version], Type[schema.AccessPoint]
]


def _valid_at(table: _TemporalTable, instant: datetime.datetime) -> ColumnElement:
    """Filter selecting the rows of |table| valid at |instant|. Draft rows start
    after the sentinel end date, which excludes them."""
    return and_(
        table.start_date <= instant,
        table.end_date > instant,
        table.start_date <= CURRENTLY_VALID_END_DATE,
    )


def _convert_vocabulary(row: schema.Vocabulary) -> entities.Vocabulary:
    return entities.Vocabulary(
        id=row.id,
        vocabulary_id=row.vocabulary_id,
        start_date=row.start_date,
        end_date=row.end_date,
        owner=row.owner,
        status=VocabularyStatus(row.status),
        slug=row.slug,
        modified_by=row.modified_by,
        data=row.data,
    )


def _convert_version(row: schema.Version) -> entities.Version:
    return entities.Version(
        id=row.id,
        version_id=row.version_id,
        vocabulary_id=row.vocabulary_id,
        start_date=row.start_date,
        end_date=row.end_date,
        status=VersionStatus(row.status),
        slug=row.slug,
        release_date=row.release_date,
        modified_by=row.modified_by,
        data=row.data,
    )


def _convert_access_point(row: schema.AccessPoint) -> entities.AccessPoint:
    return entities.AccessPoint(
        id=row.id,
        access_point_id=row.access_point_id,
        version_id=row.version_id,
        start_date=row.start_date,
        end_date=row.end_date,
        source=AccessPointSource(row.source),
        type=AccessPointType(row.type),
        modified_by=row.modified_by,
        data=row.data,
    )


def _convert_registry_event(row: schema.RegistryEvent) -> entities.RegistryEvent:
    element_type: Union[RegistryEventElementType, str]
    try:
        element_type = RegistryEventElementType(row.element_type)
    except ValueError:
        element_type = row.element_type
    return entities.RegistryEvent(
        id=row.id,
        element_type=element_type,
        element_id=row.element_id,
        event_date=row.event_date,
        event_type=RegistryEventEventType(row.event_type),
        event_user=row.event_user,
        details=row.details,
    )


class SqlAlchemyTemporalStoreGateway(TemporalStoreGateway):
    """Reads the registry's temporal tables. Each lookup uses its own session,
    so one instance may be shared between threads."""

    def __init__(self, db_url: Optional[str] = None) -> None:
        self._db_url = db_url

    def vocabulary_id_exists(self, vocabulary_id: int) -> bool:
        with SessionFactory.for_database(self._db_url) as session:
            return (
                session.query(schema.VocabularyId.id)
                .filter(schema.VocabularyId.id == vocabulary_id)
                .first()
                is not None
            )

    def lookup_vocabulary(
        self, vocabulary_id: int, instant: datetime.datetime
    ) -> Optional[entities.Vocabulary]:
        with SessionFactory.for_database(self._db_url) as session:
            # More than one result means that the store's intervals overlap,
            # in which case one_or_none() raises.
            row = (
                session.query(schema.Vocabulary)
                .filter(
                    schema.Vocabulary.vocabulary_id == vocabulary_id,
                    _valid_at(schema.Vocabulary, instant),
                )
                .one_or_none()
            )
            return _convert_vocabulary(row) if row is not None else None

    def lookup_versions(
        self, vocabulary_id: int, instant: datetime.datetime
    ) -> List[entities.Version]:
        with SessionFactory.for_database(self._db_url) as session:
            rows = (
                session.query(schema.Version)
                .filter(
                    schema.Version.vocabulary_id == vocabulary_id,
                    _valid_at(schema.Version, instant),
                )
                .order_by(schema.Version.version_id)
                .all()
            )
            return [_convert_version(row) for row in rows]

    def lookup_access_points(
        self, version_id: int, instant: datetime.datetime
    ) -> List[entities.AccessPoint]:
        with SessionFactory.for_database(self._db_url) as session:
            rows = (
                session.query(schema.AccessPoint)
                .filter(
                    schema.AccessPoint.version_id == version_id,
                    _valid_at(schema.AccessPoint, instant),
                )
                .order_by(schema.AccessPoint.access_point_id)
                .all()
            )
            return [_convert_access_point(row) for row in rows]


class SqlAlchemyRegistryEventSource(RegistryEventSource):
    def __init__(self, db_url: Optional[str] = None) -> None:
        self._db_url = db_url

    def events_between(
        self, from_date: datetime.datetime, to_date: datetime.datetime
    ) -> List[entities.RegistryEvent]:
        with SessionFactory.for_database(self._db_url) as session:
            rows = (
                session.query(schema.RegistryEvent)
                .filter(
                    schema.RegistryEvent.event_date >= from_date,
                    schema.RegistryEvent.event_date < to_date,
                )
                .order_by(schema.RegistryEvent.event_date, schema.RegistryEvent.id)
                .all()
            )
            logging.info(
                "Found [%d] registry events between [%s] and [%s]",
                len(rows),
                from_date,
                to_date,
            )
            return [_convert_registry_event(row) for row in rows]
