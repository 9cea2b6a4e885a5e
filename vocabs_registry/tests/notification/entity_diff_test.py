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
"""Tests for entity_diff.py"""
import unittest

from vocabs_registry.common.constants.registry import VersionStatus, VocabularyStatus
from vocabs_registry.notification import entity_diff
from vocabs_registry.notification.entity_diff import (
    FieldDiff,
    diff_versions,
    diff_vocabularies,
)
from vocabs_registry.persistence.entity.payloads import Subject
from vocabs_registry.tests.notification.fake_gateway import FakeTemporalStore


class DiffVocabulariesTest(unittest.TestCase):
    """Tests for diff_vocabularies"""

    def setUp(self) -> None:
        self.store = FakeTemporalStore()

    def test_no_differences(self) -> None:
        left = self.store.add_vocabulary(1, data={"title": "T", "acronym": "A"})
        right = self.store.add_vocabulary(1, data={"acronym": "A", "title": "T"})

        self.assertEqual([], diff_vocabularies(left, right))

    def test_differences_in_fixed_order(self) -> None:
        left = self.store.add_vocabulary(
            1,
            status=VocabularyStatus.DRAFT,
            owner="owner-1",
            data={"title": "Old", "licence": "CC-BY", "top_concepts": ["a"]},
        )
        right = self.store.add_vocabulary(
            1,
            status=VocabularyStatus.PUBLISHED,
            owner="owner-2",
            data={"title": "New", "licence": "CC0", "top_concepts": ["a", "b"]},
        )

        self.assertEqual(
            [
                FieldDiff(field_name="status", left="DRAFT", right="PUBLISHED"),
                FieldDiff(field_name="owner", left="owner-1", right="owner-2"),
                FieldDiff(field_name="title", left="Old", right="New"),
                FieldDiff(field_name="top concepts", left=["a"], right=["a", "b"]),
                FieldDiff(field_name="licence", left="CC-BY", right="CC0"),
            ],
            diff_vocabularies(left, right),
        )

    def test_subjects_compared_by_value(self) -> None:
        subject = {"source": "anzsrc-for", "label": "Ecology", "notation": "0602"}
        left = self.store.add_vocabulary(1, data={"subjects": [subject]})
        right = self.store.add_vocabulary(
            1, data={"subjects": [subject, {"source": "local", "label": "Birds"}]}
        )

        (field_diff,) = diff_vocabularies(left, right)

        self.assertEqual(entity_diff.SUBJECTS, field_diff.field_name)
        self.assertEqual(
            [Subject(source="anzsrc-for", label="Ecology", notation="0602")],
            field_diff.left,
        )
        self.assertEqual(2, len(field_diff.right))
        self.assertEqual([], diff_vocabularies(left, left))

    def test_unparsable_payload_treated_as_missing_fields(self) -> None:
        left = self.store.add_vocabulary(1, data="{not json")
        right = self.store.add_vocabulary(1, data={"title": "A title"})

        with self.assertLogs(level="WARNING"):
            self.assertEqual(
                [FieldDiff(field_name="title", left=None, right="A title")],
                diff_vocabularies(left, right),
            )


class DiffVersionsTest(unittest.TestCase):
    """Tests for diff_versions"""

    def setUp(self) -> None:
        self.store = FakeTemporalStore()

    def test_differences_in_fixed_order(self) -> None:
        left = self.store.add_version(
            1,
            10,
            status=VersionStatus.DRAFT,
            slug="v1",
            release_date="2026-01-01",
            data={"title": "Version 1", "do_import": False, "do_publish": True},
        )
        right = self.store.add_version(
            1,
            10,
            status=VersionStatus.CURRENT,
            slug="version-1",
            release_date="2026-02-01",
            data={
                "title": "Version 1",
                "note": "A note",
                "do_poolparty_harvest": True,
                "do_import": True,
                "do_publish": False,
            },
        )

        self.assertEqual(
            [
                entity_diff.STATUS,
                entity_diff.SLUG,
                entity_diff.RELEASE_DATE,
                entity_diff.NOTE,
                entity_diff.POOLPARTY_HARVEST,
                entity_diff.IMPORT,
                entity_diff.PUBLISH,
            ],
            [field_diff.field_name for field_diff in diff_versions(left, right)],
        )

    def test_status_reported_as_enum_value(self) -> None:
        left = self.store.add_version(1, 10, status=VersionStatus.SUPERSEDED)
        right = self.store.add_version(1, 10, status=VersionStatus.DEPRECATED)

        self.assertEqual(
            [FieldDiff(field_name="status", left="SUPERSEDED", right="DEPRECATED")],
            diff_versions(left, right),
        )
