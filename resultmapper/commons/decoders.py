#  Copyright 2025 EPAM Systems
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
Sparse decoders which build lightweight results directly from projected hit fields.

A decoder reads only the fields requested by the query projection. Required fields
are guaranteed by the fast path eligibility check, optional ones are guarded.
"""

from typing import Any, Callable, Optional, TypeVar

from resultmapper.commons.model.domain import Concept, Description, QueryConcept, ReferenceSetMember, Relationship
from resultmapper.commons.model.search import Hit

T = TypeVar("T")

Decoder = Callable[[Hit], Any]


def has_field(hit: Hit, name: str) -> bool:
    return name in hit.fields


def field_value(hit: Hit, name: str) -> Any:
    """
    Return the value of a projected field.

    The engine always returns projected field values as lists, the value is the first element.

    :param hit: Raw search hit
    :param name: Stored field name
    :return: First value of the field
    :raises KeyError: if the field was not projected
    """
    value = hit.fields[name]
    if isinstance(value, list):
        return value[0]
    return value


def decode_concept(hit: Hit) -> Concept:
    return Concept(concept_id=field_value(hit, Concept.Fields.CONCEPT_ID))


def decode_description(hit: Hit) -> Description:
    return Description(concept_id=field_value(hit, Description.Fields.CONCEPT_ID))


def decode_relationship(hit: Hit) -> Relationship:
    return Relationship(source_id=field_value(hit, Relationship.Fields.SOURCE_ID))


def decode_reference_set_member(hit: Hit) -> ReferenceSetMember:
    member = ReferenceSetMember(
        referenced_component_id=field_value(hit, ReferenceSetMember.Fields.REFERENCED_COMPONENT_ID)
    )
    if has_field(hit, ReferenceSetMember.Fields.CONCEPT_ID):
        member.concept_id = field_value(hit, ReferenceSetMember.Fields.CONCEPT_ID)
    return member


def decode_query_concept(hit: Hit) -> QueryConcept:
    query_concept = QueryConcept(concept_id_l=int(field_value(hit, QueryConcept.Fields.CONCEPT_ID)))
    if has_field(hit, QueryConcept.Fields.ATTR_MAP):
        query_concept.attr_map = field_value(hit, QueryConcept.Fields.ATTR_MAP)
    return query_concept


class DecoderRegistry:
    """Sparse decoder per result type. Built once at startup, read-only afterwards."""

    _decoders: dict[type, Decoder]

    def __init__(self, decoders: Optional[dict[type, Decoder]] = None) -> None:
        self._decoders = dict(decoders or {})

    def register(self, result_type: type[T], decoder: Callable[[Hit], T]) -> "DecoderRegistry":
        """Associate a decoder with a result type, replacing any previous one."""
        self._decoders[result_type] = decoder
        return self

    def lookup(self, result_type: type[T]) -> Optional[Callable[[Hit], T]]:
        return self._decoders.get(result_type)

    def __contains__(self, result_type: object) -> bool:
        return result_type in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)


def default_registry() -> DecoderRegistry:
    """Create a registry holding the decoders for all built-in document types."""
    return (
        DecoderRegistry()
        .register(Concept, decode_concept)
        .register(Description, decode_description)
        .register(Relationship, decode_relationship)
        .register(ReferenceSetMember, decode_reference_set_member)
        .register(QueryConcept, decode_query_concept)
    )
