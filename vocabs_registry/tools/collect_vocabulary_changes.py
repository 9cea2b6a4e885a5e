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
"""Prints the changes made to vocabularies over a notification period, as JSON,
grouped by the owner of the vocabularies.

Run with the following command:

    python -m vocabs_registry.tools.collect_vocabulary_changes \
     --from_date 2026-10-01T00:00:00 \
     [--to_date 2026-10-08T00:00:00] \
     [--database_url sqlite:///vocabs_registry.db]

Dates are naive UTC. If --from_date is omitted, the period is the configured
number of days before --to_date, which itself defaults to now.
"""
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Tuple

from vocabs_registry.common.temporal import parse_naive_utc
from vocabs_registry.notification.collect_events import CollectEvents
from vocabs_registry.persistence.database.fixed_time_dao import (
    SqlAlchemyRegistryEventSource,
    SqlAlchemyTemporalStoreGateway,
)
from vocabs_registry.persistence.database.sqlalchemy_engine_manager import (
    SQLAlchemyEngineManager,
)
from vocabs_registry.utils import environment, structured_logging


def parse_arguments(argv: List[str]) -> Tuple[argparse.Namespace, List[str]]:
    """Parses the arguments needed to call the desired function."""
    parser = argparse.ArgumentParser()

    parser.add_argument(
        "--from_date",
        dest="from_date",
        type=parse_naive_utc,
        default=None,
    )

    parser.add_argument(
        "--to_date",
        dest="to_date",
        type=parse_naive_utc,
        default=None,
    )

    parser.add_argument(
        "--database_url",
        dest="database_url",
        type=str,
        default=None,
        help=f"Defaults to the value of ${environment.DATABASE_URL_ENV_VAR}.",
    )

    return parser.parse_known_args(argv)


def collect_changes_by_owner(collector: CollectEvents) -> Dict[str, Any]:
    collector.collect()
    return {
        owner: {
            str(vocabulary_id): collector.vocabulary_id_map[vocabulary_id].to_json_dict()
            for vocabulary_id in sorted(vocabulary_ids)
        }
        for owner, vocabulary_ids in sorted(collector.owner_vocabularies.items())
    }


def main(argv: List[str]) -> None:
    known_args, _ = parse_arguments(argv)
    database_url = known_args.database_url or environment.get_database_url()
    SQLAlchemyEngineManager.init_engine_for_db_instance(db_url=database_url)

    collector = CollectEvents(
        gateway=SqlAlchemyTemporalStoreGateway(database_url),
        registry_event_source=SqlAlchemyRegistryEventSource(database_url),
        from_date=known_args.from_date,
        to_date=known_args.to_date,
    )
    changes = collect_changes_by_owner(collector)
    logging.info(
        "Found changes to [%d] vocabularies of [%d] owners",
        len(collector.vocabulary_id_map),
        len(changes),
    )
    json.dump(changes, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    structured_logging.setup()
    main(sys.argv[1:])
