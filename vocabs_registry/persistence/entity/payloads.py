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
"""Structured views of the JSON payloads stored in the |data| column of
vocabulary and version rows.

Payloads are written by other parts of the registry and may carry keys that
are of no interest here, so unknown keys are ignored. A payload that cannot
be parsed at all is logged and treated as if every field were missing.
"""
import json
import logging
from typing import Any, Callable, List, Optional, Type, TypeVar, get_args, get_origin

import attr
import cattrs
from cattrs.gen import make_dict_structure_fn

from vocabs_registry.persistence.entity.registry_entities import Version, Vocabulary


@attr.s(frozen=True, auto_attribs=True)
class Subject:
    source: Optional[str] = None
    label: Optional[str] = None
    iri: Optional[str] = None
    notation: Optional[str] = None


@attr.s(frozen=True, auto_attribs=True)
class VocabularyData:
    title: Optional[str] = None
    acronym: Optional[str] = None
    description: Optional[str] = None
    note: Optional[str] = None
    revision_cycle: Optional[str] = None
    creation_date: Optional[str] = None
    primary_language: Optional[str] = None
    other_languages: Optional[List[str]] = None
    subjects: Optional[List[Subject]] = None
    top_concepts: Optional[List[str]] = None
    licence: Optional[str] = None


@attr.s(frozen=True, auto_attribs=True)
class VersionData:
    title: Optional[str] = None
    note: Optional[str] = None
    do_poolparty_harvest: Optional[bool] = None
    do_import: Optional[bool] = None
    do_publish: Optional[bool] = None


PayloadT = TypeVar("PayloadT", VocabularyData, VersionData)

_converter = cattrs.Converter()


# The default hooks coerce values (for example "false" to True, or "fr" to
# ["f", "r"]). Payload values must already have the declared JSON type.
def _strict_primitive(primitive_type: type) -> Callable[[Any, type], Any]:
    def _structure(value: Any, _: type) -> Any:
        if not isinstance(value, primitive_type):
            raise ValueError(
                f"Expected a {primitive_type.__name__}, found {type(value).__name__}"
            )
        return value

    return _structure


def _structure_list(value: Any, list_type: type) -> List[Any]:
    if not isinstance(value, list):
        raise ValueError(f"Expected a list, found {type(value).__name__}")
    (element_type,) = get_args(list_type)
    return [_converter.structure(element, element_type) for element in value]


_converter.register_structure_hook(str, _strict_primitive(str))
_converter.register_structure_hook(bool, _strict_primitive(bool))

_structure_subject_dict = make_dict_structure_fn(Subject, _converter)


def _structure_subject(value: Any, _: type) -> Subject:
    if not isinstance(value, dict):
        raise ValueError(f"Expected a subject object, found {type(value).__name__}")
    return _structure_subject_dict(value, Subject)


_converter.register_structure_hook(Subject, _structure_subject)
_converter.register_structure_hook_func(
    lambda t: get_origin(t) is list, _structure_list
)


def _parse(data: Optional[str], payload_cls: Type[PayloadT], row_label: str) -> PayloadT:
    if not data:
        return payload_cls()
    try:
        raw: Any = json.loads(data)
        if raw is None:
            return payload_cls()
        if not isinstance(raw, dict):
            raise ValueError(f"Expected a JSON object, found {type(raw).__name__}")
        return _converter.structure(raw, payload_cls)
    except (ValueError, TypeError, cattrs.BaseValidationError) as e:
        logging.warning(
            "Unable to parse data of %s, treating all of its fields as missing: %s",
            row_label,
            e,
        )
        return payload_cls()


def vocabulary_data(vocabulary: Vocabulary) -> VocabularyData:
    return _parse(
        vocabulary.data,
        VocabularyData,
        f"vocabulary row [{vocabulary.id}] (vocabulary_id [{vocabulary.vocabulary_id}])",
    )


def version_data(version: Version) -> VersionData:
    return _parse(
        version.data,
        VersionData,
        f"version row [{version.id}] (version_id [{version.version_id}])",
    )
