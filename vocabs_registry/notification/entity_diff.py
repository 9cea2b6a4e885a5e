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
"""Field-by-field comparison of two rows of the same vocabulary or version.

The labels below are the names under which differences are reported, and so
are part of what readers of a notification see.
"""
from typing import Any, List, Optional

import attr

from vocabs_registry.persistence.entity.payloads import version_data, vocabulary_data
from vocabs_registry.persistence.entity.registry_entities import Version, Vocabulary

ACRONYM = "acronym"
CREATION_DATE = "creation date"
DESCRIPTION = "description"
IMPORT = "import"
LICENCE = "licence"
NOTE = "note"
OTHER_LANGUAGES = "other languages"
OWNER = "owner"
POOLPARTY_HARVEST = "PoolParty Harvest"
PRIMARY_LANGUAGE = "primary language"
PUBLISH = "publish"
RELEASE_DATE = "release date"
REVISION_CYCLE = "revision cycle"
SLUG = "slug"
STATUS = "status"
SUBJECTS = "subjects"
TITLE = "title"
TOP_CONCEPTS = "top concepts"


@attr.s(frozen=True, auto_attribs=True)
class FieldDiff:
    """A field whose value differs between the earlier (left) and later
    (right) rows."""

    field_name: str
    left: Any
    right: Any


class _DiffBuilder:
    def __init__(self) -> None:
        self._diffs: List[FieldDiff] = []

    def append(self, field_name: str, left: Any, right: Any) -> "_DiffBuilder":
        if left != right:
            self._diffs.append(FieldDiff(field_name=field_name, left=left, right=right))
        return self

    def build(self) -> List[FieldDiff]:
        return list(self._diffs)


def _value(enum_value: Optional[Any]) -> Optional[str]:
    return enum_value.value if enum_value is not None else None


def diff_vocabularies(left: Vocabulary, right: Vocabulary) -> List[FieldDiff]:
    """Returns the differences between two rows of a vocabulary, in the
    order status, slug, owner, then the fields of the payload."""
    left_data = vocabulary_data(left)
    right_data = vocabulary_data(right)
    return (
        _DiffBuilder()
        .append(STATUS, _value(left.status), _value(right.status))
        .append(SLUG, left.slug, right.slug)
        .append(OWNER, left.owner, right.owner)
        .append(TITLE, left_data.title, right_data.title)
        .append(ACRONYM, left_data.acronym, right_data.acronym)
        .append(DESCRIPTION, left_data.description, right_data.description)
        .append(NOTE, left_data.note, right_data.note)
        .append(REVISION_CYCLE, left_data.revision_cycle, right_data.revision_cycle)
        .append(CREATION_DATE, left_data.creation_date, right_data.creation_date)
        .append(
            PRIMARY_LANGUAGE, left_data.primary_language, right_data.primary_language
        )
        .append(OTHER_LANGUAGES, left_data.other_languages, right_data.other_languages)
        .append(SUBJECTS, left_data.subjects, right_data.subjects)
        .append(TOP_CONCEPTS, left_data.top_concepts, right_data.top_concepts)
        .append(LICENCE, left_data.licence, right_data.licence)
        .build()
    )


def diff_versions(left: Version, right: Version) -> List[FieldDiff]:
    """Returns the differences between two rows of a version."""
    left_data = version_data(left)
    right_data = version_data(right)
    return (
        _DiffBuilder()
        .append(STATUS, _value(left.status), _value(right.status))
        .append(SLUG, left.slug, right.slug)
        .append(RELEASE_DATE, left.release_date, right.release_date)
        .append(TITLE, left_data.title, right_data.title)
        .append(NOTE, left_data.note, right_data.note)
        .append(
            POOLPARTY_HARVEST,
            left_data.do_poolparty_harvest,
            right_data.do_poolparty_harvest,
        )
        .append(IMPORT, left_data.do_import, right_data.do_import)
        .append(PUBLISH, left_data.do_publish, right_data.do_publish)
        .build()
    )
