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
"""Tests for registry_entities.py"""
import datetime
import unittest

import attr

from vocabs_registry.common.constants.registry import VocabularyStatus
from vocabs_registry.common.temporal import CURRENTLY_VALID_END_DATE
from vocabs_registry.persistence.entity.registry_entities import Vocabulary

_VOCABULARY = Vocabulary(
    id=1,
    vocabulary_id=1,
    start_date=datetime.datetime(2026, 1, 1),
    end_date=CURRENTLY_VALID_END_DATE,
    owner="owner-1",
    status=VocabularyStatus.PUBLISHED,
    slug="a-vocabulary",
)


class VocabularyTest(unittest.TestCase):
    def test_rejects_aware_datetimes(self) -> None:
        with self.assertRaises(ValueError):
            attr.evolve(
                _VOCABULARY,
                start_date=datetime.datetime(2026, 1, 1, tzinfo=datetime.timezone.utc),
            )

    def test_rejects_empty_owner(self) -> None:
        with self.assertRaises(ValueError):
            attr.evolve(_VOCABULARY, owner="")

    def test_rejects_raw_status(self) -> None:
        with self.assertRaises(TypeError):
            attr.evolve(_VOCABULARY, status="PUBLISHED")

    def test_immutable(self) -> None:
        with self.assertRaises(attr.exceptions.FrozenInstanceError):
            _VOCABULARY.slug = "changed"  # type: ignore[misc]
