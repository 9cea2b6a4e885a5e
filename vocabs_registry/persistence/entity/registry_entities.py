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
"""In-memory representations of the rows of the registry's tables.

Each temporal entity corresponds to exactly one row, and so to one validity
interval of the element it describes. Two objects with the same natural id
(for example two Version objects with the same |version_id|) describe the same
element at different times.
"""
import datetime
from typing import Optional, Union

import attr

from vocabs_registry.common.attr_validators import (
    is_int,
    is_naive_datetime,
    is_non_empty_str,
    is_opt_str,
    is_str,
)
from vocabs_registry.common.constants.registry import (
    AccessPointSource,
    AccessPointType,
    RegistryEventElementType,
    RegistryEventEventType,
    VersionStatus,
    VocabularyStatus,
)


@attr.s(frozen=True, kw_only=True)
class Vocabulary:
    """One temporal row of a vocabulary."""

    # Primary key of the row
    id: int = attr.ib(validator=is_int)
    vocabulary_id: int = attr.ib(validator=is_int)
    start_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    end_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    owner: str = attr.ib(validator=is_non_empty_str)
    status: VocabularyStatus = attr.ib(
        validator=attr.validators.instance_of(VocabularyStatus)
    )
    slug: str = attr.ib(validator=is_str)
    modified_by: Optional[str] = attr.ib(default=None, validator=is_opt_str)

    # Raw JSON payload; see payloads.VocabularyData
    data: Optional[str] = attr.ib(default=None, validator=is_opt_str)


@attr.s(frozen=True, kw_only=True)
class Version:
    """One temporal row of a version of a vocabulary."""

    # Primary key of the row
    id: int = attr.ib(validator=is_int)
    version_id: int = attr.ib(validator=is_int)
    vocabulary_id: int = attr.ib(validator=is_int)
    start_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    end_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    status: VersionStatus = attr.ib(validator=attr.validators.instance_of(VersionStatus))
    slug: str = attr.ib(validator=is_str)
    release_date: Optional[str] = attr.ib(default=None, validator=is_opt_str)
    modified_by: Optional[str] = attr.ib(default=None, validator=is_opt_str)

    # Raw JSON payload; see payloads.VersionData
    data: Optional[str] = attr.ib(default=None, validator=is_opt_str)


@attr.s(frozen=True, kw_only=True)
class AccessPoint:
    """One temporal row of an access point of a version."""

    # Primary key of the row
    id: int = attr.ib(validator=is_int)
    access_point_id: int = attr.ib(validator=is_int)
    version_id: int = attr.ib(validator=is_int)
    start_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    end_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    source: AccessPointSource = attr.ib(
        validator=attr.validators.instance_of(AccessPointSource)
    )
    type: AccessPointType = attr.ib(
        validator=attr.validators.instance_of(AccessPointType)
    )
    modified_by: Optional[str] = attr.ib(default=None, validator=is_opt_str)
    data: Optional[str] = attr.ib(default=None, validator=is_opt_str)


@attr.s(frozen=True, kw_only=True)
class RegistryEvent:
    """Records that a registry element was created, updated or deleted."""

    id: int = attr.ib(validator=is_int)

    # Element types written by newer registry releases are kept as their raw
    # value, so that readers can report them instead of failing the whole read.
    element_type: Union[RegistryEventElementType, str] = attr.ib()
    element_id: int = attr.ib(validator=is_int)
    event_date: datetime.datetime = attr.ib(validator=is_naive_datetime)
    event_type: RegistryEventEventType = attr.ib(
        validator=attr.validators.instance_of(RegistryEventEventType)
    )
    event_user: str = attr.ib(validator=is_str)
    details: Optional[str] = attr.ib(default=None, validator=is_opt_str)
