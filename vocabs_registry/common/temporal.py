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
"""Helpers for working with the validity intervals of temporal rows.

Every temporal row has a validity interval [start_date, end_date). A row that
is still valid has the sentinel CURRENTLY_VALID_END_DATE as its end date.
Draft rows are given start and end dates that lie after that sentinel, so that
no point-in-time query for a real instant can ever select them.
"""
import datetime
from enum import Enum
from typing import Optional, Protocol

# The end date of rows that are currently valid.
CURRENTLY_VALID_END_DATE = datetime.datetime(9999, 12, 1, 0, 0)

# The start date of rows that are draft data.
DRAFT_START_DATE = datetime.datetime(9999, 12, 2, 0, 0)

# The end date of rows that are draft data.
DRAFT_END_DATE = datetime.datetime(9999, 12, 3, 0, 0)


class TemporalMeaning(Enum):
    HISTORICAL = "HISTORICAL"
    CURRENT = "CURRENT"
    DRAFT = "DRAFT"
    UNKNOWN = "UNKNOWN"


class TemporalRow(Protocol):
    start_date: Optional[datetime.datetime]
    end_date: Optional[datetime.datetime]


def now_utc() -> datetime.datetime:
    """Returns the current time in UTC as a naive datetime, which is the form
    in which all temporal columns are stored."""
    return datetime.datetime.now(tz=datetime.timezone.utc).replace(tzinfo=None)


def as_naive_utc(instant: datetime.datetime) -> datetime.datetime:
    """Converts |instant| to a naive UTC datetime. A naive |instant| is taken to
    already be in UTC."""
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(datetime.timezone.utc).replace(tzinfo=None)


def parse_naive_utc(value: str) -> datetime.datetime:
    return as_naive_utc(datetime.datetime.fromisoformat(value))


def is_current(row: TemporalRow) -> bool:
    return row.end_date == CURRENTLY_VALID_END_DATE


def is_draft(row: TemporalRow) -> bool:
    return row.start_date is not None and row.start_date > CURRENTLY_VALID_END_DATE


def is_historical(row: TemporalRow, now: Optional[datetime.datetime] = None) -> bool:
    if row.end_date is None:
        return False
    return row.end_date <= (now or now_utc())


def temporal_meaning(
    row: TemporalRow, now: Optional[datetime.datetime] = None
) -> TemporalMeaning:
    if is_historical(row, now):
        return TemporalMeaning.HISTORICAL
    if is_current(row):
        return TemporalMeaning.CURRENT
    if is_draft(row):
        return TemporalMeaning.DRAFT
    return TemporalMeaning.UNKNOWN


def is_valid_at(row: TemporalRow, instant: datetime.datetime) -> bool:
    """Returns True if |row| is published data whose validity interval
    contains |instant|."""
    if row.start_date is None or is_draft(row):
        return False
    end_date = row.end_date or CURRENTLY_VALID_END_DATE
    return row.start_date <= instant < end_date
