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
"""Tools for working with environment variables and the runtime environment."""
import os
import sys
from functools import wraps
from typing import Any, Callable

import vocabs_registry

DATABASE_URL_ENV_VAR = "VOCABS_REGISTRY_DATABASE_URL"

_DEFAULT_SQLITE_PATH = "vocabs_registry.db"


def get_database_url() -> str:
    """Returns the SQLAlchemy URL of the registry database.

    Reads |VOCABS_REGISTRY_DATABASE_URL|, falling back to an on-disk SQLite
    database in the working directory for local development.
    """
    database_url = os.getenv(DATABASE_URL_ENV_VAR)
    if database_url:
        # SQLAlchemy no longer accepts the postgres:// scheme alias
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)
        return database_url
    return f"sqlite:///{_DEFAULT_SQLITE_PATH}"


def in_test() -> bool:
    """Check whether we are running in a test"""
    # Pytest sets vocabs_registry.called_from_test in conftest.py
    if not hasattr(vocabs_registry, "called_from_test"):
        # If it is not set, we may have been called from unittest. Check if unittest has been imported, if it has then
        # we assume we are running from a unittest
        setattr(vocabs_registry, "called_from_test", "unittest" in sys.modules)
    return getattr(vocabs_registry, "called_from_test")


def test_only(func: Callable) -> Callable:
    """Decorator to verify function only runs in tests

    If called while not in tests, throws an exception.
    """

    @wraps(func)
    def check_test_and_call(*args: Any, **kwargs: Any) -> Callable:
        if not in_test():
            raise RuntimeError("Function may only be called from tests")
        return func(*args, **kwargs)

    return check_test_and_call
