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
"""Collects the changes made to vocabularies over a notification period.

The registry events recorded during the period say which vocabularies were
touched. Each of those vocabularies is compared as it was at the start of the
period with how it was at the end, and those with something to report are
grouped by their owner.
"""
import datetime
import logging
from typing import Dict, List, Optional, Set

from vocabs_registry.common.constants.registry import (
    DifferenceClassification,
    RegistryEventElementType,
)
from vocabs_registry.common.temporal import as_naive_utc, now_utc
from vocabs_registry.notification.differences import VocabularyDifferences
from vocabs_registry.notification.notification_config import NotificationConfig
from vocabs_registry.notification.vocabulary_diff import VocabularyDiffer
from vocabs_registry.persistence.temporal_store_gateway import (
    RegistryEventSource,
    TemporalStoreGateway,
)
from vocabs_registry.utils.future_executor import map_fn_with_results
from vocabs_registry.utils.types import non_optional

# Changes to these elements are reported through the vocabulary they belong to,
# which always has an event of its own.
_ELEMENT_TYPES_REPORTED_BY_VOCABULARY = frozenset(
    [
        RegistryEventElementType.VERSIONS,
        RegistryEventElementType.ACCESS_POINTS,
        RegistryEventElementType.RELATED_ENTITIES,
    ]
)


class CollectEvents:
    """Collects the vocabulary changes of the period [from_date, to_date).

    |to_date| defaults to now. If |from_date| is not given, the period is the
    configured number of days leading up to |to_date|.
    """

    def __init__(
        self,
        gateway: TemporalStoreGateway,
        registry_event_source: RegistryEventSource,
        from_date: Optional[datetime.datetime] = None,
        to_date: Optional[datetime.datetime] = None,
        config: Optional[NotificationConfig] = None,
    ) -> None:
        self.config = config or NotificationConfig.build()
        self.to_date = as_naive_utc(to_date) if to_date else now_utc()
        self.from_date = (
            as_naive_utc(from_date)
            if from_date
            else self.to_date - datetime.timedelta(days=self.config.lookback_days)
        )
        if self.from_date > self.to_date:
            raise ValueError(
                f"Notification period starts [{self.from_date}] after it ends "
                f"[{self.to_date}]"
            )
        self.registry_event_source = registry_event_source
        self.differ = VocabularyDiffer(gateway)

        # Owner -> ids of the vocabularies of that owner with changes to report
        self.owner_vocabularies: Dict[str, Set[int]] = {}

        # Vocabulary id -> the changes to report for that vocabulary
        self.vocabulary_id_map: Dict[int, VocabularyDifferences] = {}

    def _vocabulary_ids_from_events(self) -> List[int]:
        vocabulary_ids: List[int] = []
        for event in self.registry_event_source.events_between(
            self.from_date, self.to_date
        ):
            if event.element_type is RegistryEventElementType.VOCABULARIES:
                if event.element_id not in vocabulary_ids:
                    vocabulary_ids.append(event.element_id)
            elif event.element_type not in _ELEMENT_TYPES_REPORTED_BY_VOCABULARY:
                logging.error(
                    "Found registry event with unknown element type [%s]: id = %s",
                    event.element_type,
                    event.id,
                )
        return vocabulary_ids

    def _diff_vocabulary(self, vocabulary_id: int) -> VocabularyDifferences:
        return self.differ.diff(vocabulary_id, self.from_date, self.to_date)

    def collect(self) -> "CollectEvents":
        vocabulary_ids = self._vocabulary_ids_from_events()
        logging.info(
            "Comparing [%d] vocabularies between [%s] and [%s]",
            len(vocabulary_ids),
            self.from_date,
            self.to_date,
        )

        results = map_fn_with_results(
            work_items=vocabulary_ids,
            work_fn=self._diff_vocabulary,
            overall_timeout_sec=self.config.overall_timeout_sec,
            single_work_item_timeout_sec=self.config.single_work_item_timeout_sec,
            max_workers=self.config.max_workers,
        )

        for vocabulary_id, e in results.exceptions:
            logging.error(
                "Unable to compare vocabulary [%s], omitting it: %s", vocabulary_id, e
            )

        for vocabulary_id, differences in sorted(
            results.successes, key=lambda success: success[0]
        ):
            # Either absent at both ends of the period, or edited without
            # anything worth reporting having changed.
            if differences.final_result is DifferenceClassification.UNCHANGED:
                continue
            self.vocabulary_id_map[vocabulary_id] = differences
            self.owner_vocabularies.setdefault(
                non_optional(differences.owner), set()
            ).add(vocabulary_id)
        return self
