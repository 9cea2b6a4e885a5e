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
"""Configuration of event collection, read from notification_config.yaml"""
import os
from functools import lru_cache

import attr
import cattrs
import yaml

NOTIFICATION_CONFIG_YAML_PATH = os.path.join(
    os.path.dirname(__file__), "notification_config.yaml"
)


@attr.s(auto_attribs=True, frozen=True)
class NotificationConfig:
    lookback_days: int = attr.ib(default=7, validator=attr.validators.gt(0))
    max_workers: int = attr.ib(default=8, validator=attr.validators.gt(0))
    overall_timeout_sec: int = attr.ib(default=1800, validator=attr.validators.gt(0))
    single_work_item_timeout_sec: int = attr.ib(
        default=300, validator=attr.validators.gt(0)
    )

    @classmethod
    def from_path(cls, path: str) -> "NotificationConfig":
        with open(path, mode="r", encoding="utf-8") as yaml_file:
            config_yaml = yaml.safe_load(yaml_file) or {}

        strict_converter = cattrs.Converter(forbid_extra_keys=True)
        return strict_converter.structure(config_yaml, cls)

    @classmethod
    @lru_cache
    def build(cls) -> "NotificationConfig":
        return cls.from_path(NOTIFICATION_CONFIG_YAML_PATH)
