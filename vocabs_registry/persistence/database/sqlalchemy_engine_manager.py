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
"""A class to manage all SQLAlchemy Engines for our database instances."""
import logging
from typing import Any, Dict, Optional

import sqlalchemy
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeMeta

from vocabs_registry.utils import environment


class SQLAlchemyEngineManager:
    """A class to manage all SQLAlchemy Engines, one per database URL."""

    _engine_for_database: Dict[str, Engine] = {}

    @classmethod
    def init_engine_for_db_instance(
        cls,
        *,
        db_url: str,
        schema_base: Optional[DeclarativeMeta] = None,
        **dialect_specific_kwargs: Any,
    ) -> Engine:
        """Initializes a sqlalchemy Engine object for the given database and
        caches it for future use. If |schema_base| is provided, any of its
        tables that do not yet exist are created."""
        if db_url in cls._engine_for_database:
            raise ValueError(f"Already initialized database [{db_url}]")

        try:
            engine = sqlalchemy.create_engine(db_url, **dialect_specific_kwargs)
            if schema_base is not None:
                schema_base.metadata.create_all(engine)
        except BaseException as e:
            logging.error(
                "Unable to connect to database instance for [%s]: %s",
                engine_label(db_url),
                str(e),
            )
            raise e
        cls._engine_for_database[db_url] = engine
        return engine

    @classmethod
    def get_engine_for_database(cls, db_url: Optional[str] = None) -> Optional[Engine]:
        """Retrieve the engine for a given database URL, defaulting to the URL
        configured in the environment."""
        return cls._engine_for_database.get(db_url or environment.get_database_url())

    @classmethod
    def teardown_engines(cls) -> None:
        for engine in cls._engine_for_database.values():
            engine.dispose()
        cls._engine_for_database.clear()


def engine_label(db_url: str) -> str:
    """Returns |db_url| with any password removed, for logging."""
    try:
        return sqlalchemy.engine.make_url(db_url).render_as_string(hide_password=True)
    except sqlalchemy.exc.ArgumentError:
        return "<unparseable database url>"
