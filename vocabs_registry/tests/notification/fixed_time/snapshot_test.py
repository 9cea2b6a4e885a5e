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
"""Tests for snapshot.py"""
import unittest

from vocabs_registry.common.constants.registry import AccessPointSource
from vocabs_registry.common.temporal import DRAFT_END_DATE, DRAFT_START_DATE
from vocabs_registry.notification.errors import InvalidArgumentError
from vocabs_registry.notification.fixed_time.snapshot import (
    FixedTimeSnapshotBuilder,
    build_snapshot,
)
from vocabs_registry.tests.notification.fake_gateway import (
    T0,
    T1,
    T2,
    T3,
    FakeTemporalStore,
)


class FixedTimeSnapshotBuilderTest(unittest.TestCase):
    """Tests for FixedTimeSnapshotBuilder"""

    def setUp(self) -> None:
        self.store = FakeTemporalStore()

    def test_missing_vocabulary_id(self) -> None:
        with self.assertLogs(level="ERROR"):
            with self.assertRaises(InvalidArgumentError):
                FixedTimeSnapshotBuilder(self.store, None)

    def test_unknown_vocabulary_id(self) -> None:
        with self.assertLogs(level="ERROR"):
            with self.assertRaises(InvalidArgumentError):
                build_snapshot(self.store, 99, T1)

    def test_vocabulary_absent_at_instant(self) -> None:
        self.store.add_vocabulary(1, start_date=T1)
        self.store.add_version(1, 10, start_date=T1)

        snapshot = build_snapshot(self.store, 1, T0)

        self.assertTrue(snapshot.is_empty())
        self.assertEqual({}, snapshot.versions)
        self.assertIsNone(snapshot.title)
        self.assertIsNone(snapshot.owner)

    def test_versions_not_read_for_absent_vocabulary(self) -> None:
        self.store.add_vocabulary(1, start_date=T1)
        builder = FixedTimeSnapshotBuilder(self.store, 1)
        lookups_before = self.store.lookup_count

        builder.build(T0)

        self.assertEqual(1, self.store.lookup_count - lookups_before)

    def test_rows_valid_at_instant(self) -> None:
        self.store.add_vocabulary(1, end_date=T1, data={"title": "Old title"})
        current = self.store.add_vocabulary(
            1, start_date=T1, owner="owner-2", data={"title": "New title"}
        )
        self.store.add_version(1, 10, end_date=T2)
        kept = self.store.add_version(1, 11)
        user_ap = self.store.add_access_point(11, 100)
        system_ap = self.store.add_access_point(
            11, 101, source=AccessPointSource.SYSTEM
        )
        self.store.add_access_point(11, 102, start_date=T3)

        snapshot = build_snapshot(self.store, 1, T2)

        self.assertFalse(snapshot.is_empty())
        self.assertEqual(current, snapshot.vocabulary)
        self.assertEqual("New title", snapshot.title)
        self.assertEqual("owner-2", snapshot.owner)
        self.assertEqual([11], list(snapshot.versions))
        self.assertEqual(kept, snapshot.versions[11].version)
        self.assertEqual([user_ap, system_ap], snapshot.versions[11].access_points)

    def test_interval_is_closed_open(self) -> None:
        self.store.add_vocabulary(1, start_date=T1, end_date=T2)

        self.assertFalse(build_snapshot(self.store, 1, T1).is_empty())
        self.assertTrue(build_snapshot(self.store, 1, T2).is_empty())

    def test_drafts_are_excluded(self) -> None:
        self.store.add_vocabulary(1)
        self.store.add_version(
            1, 10, start_date=DRAFT_START_DATE, end_date=DRAFT_END_DATE
        )

        snapshot = build_snapshot(self.store, 1, DRAFT_START_DATE)

        self.assertTrue(snapshot.is_empty())
        self.assertEqual({}, build_snapshot(self.store, 1, T1).versions)

    def test_repeated_builds_are_equal(self) -> None:
        self.store.add_vocabulary(1)
        self.store.add_version(1, 10)
        self.store.add_access_point(10, 100)
        builder = FixedTimeSnapshotBuilder(self.store, 1)

        self.assertEqual(builder.build(T1), builder.build(T1))


class VocabularySnapshotTest(unittest.TestCase):
    """Tests for the description of a snapshot"""

    def setUp(self) -> None:
        self.store = FakeTemporalStore()

    def test_describe(self) -> None:
        vocabulary = self.store.add_vocabulary(1)
        version_11 = self.store.add_version(1, 11)
        version_10 = self.store.add_version(1, 10)
        self.store.add_access_point(10, 100)
        self.store.add_access_point(10, 101)

        snapshot = build_snapshot(self.store, 1, T1)

        self.assertEqual(
            [
                "Vocabulary; Id: 1",
                f"Has vocabulary instance; Id: {vocabulary.id}",
                f"Versions | Fixed time version; Id, Version Id: {version_10.id},10",
                "AP | Fixed time version has AP; V Id, AP Id: 10,100",
                "AP | Fixed time version has AP; V Id, AP Id: 10,101",
                f"Versions | Fixed time version; Id, Version Id: {version_11.id},11",
            ],
            snapshot.describe(),
        )

    def test_describe_empty(self) -> None:
        self.store.add_vocabulary(1, start_date=T2)

        self.assertEqual(
            ["Vocabulary; Id: 1"], build_snapshot(self.store, 1, T1).describe()
        )

    def test_log_description(self) -> None:
        self.store.add_vocabulary(1)

        with self.assertLogs(level="DEBUG") as logs:
            build_snapshot(self.store, 1, T1).log_description()

        self.assertIn("vocabulary row CURRENT", logs.output[0])
        self.assertIn("Vocabulary; Id: 1", logs.output[0])

    def test_log_description_of_superseded_row(self) -> None:
        self.store.add_vocabulary(1, end_date=T2)
        self.store.add_vocabulary(1, start_date=T2)

        with self.assertLogs(level="DEBUG") as logs:
            build_snapshot(self.store, 1, T1).log_description()

        self.assertIn("vocabulary row HISTORICAL", logs.output[0])

    def test_log_description_of_empty_snapshot(self) -> None:
        self.store.add_vocabulary(1, start_date=T2)

        with self.assertLogs(level="DEBUG") as logs:
            build_snapshot(self.store, 1, T1).log_description()

        self.assertIn("vocabulary row absent", logs.output[0])
