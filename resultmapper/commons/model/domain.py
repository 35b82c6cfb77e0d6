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
Terminology documents stored in the search index.

Attributes use snake_case in Python and lowerCamelCase in the stored documents.
Every attribute is optional so that a sparse decoder can build a partially
populated object from a handful of projected fields.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base for every type persisted as a search index document, stored in the index named by ``index_name``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    index_name: ClassVar[str] = ""
    id_attribute: ClassVar[Optional[str]] = None


class SnomedComponent(DocumentModel):
    id_attribute: ClassVar[Optional[str]] = "internal_id"

    internal_id: Optional[str] = None
    path: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    active: Optional[bool] = None
    module_id: Optional[str] = None
    effective_time: Optional[str] = None
    released: Optional[bool] = None


class Concept(SnomedComponent):
    index_name: ClassVar[str] = "concept"

    class Fields:
        CONCEPT_ID = "conceptId"

    concept_id: Optional[str] = None
    definition_status_id: Optional[str] = None


class Description(SnomedComponent):
    index_name: ClassVar[str] = "description"

    class Fields:
        CONCEPT_ID = "conceptId"

    description_id: Optional[str] = None
    concept_id: Optional[str] = None
    term: Optional[str] = None
    language_code: Optional[str] = None
    type_id: Optional[str] = None
    case_significance_id: Optional[str] = None


class Relationship(SnomedComponent):
    index_name: ClassVar[str] = "relationship"

    class Fields:
        SOURCE_ID = "sourceId"

    relationship_id: Optional[str] = None
    source_id: Optional[str] = None
    destination_id: Optional[str] = None
    type_id: Optional[str] = None
    relationship_group: Optional[int] = None
    characteristic_type_id: Optional[str] = None
    modifier_id: Optional[str] = None


class ReferenceSetMember(SnomedComponent):
    index_name: ClassVar[str] = "member"

    class Fields:
        REFERENCED_COMPONENT_ID = "referencedComponentId"
        CONCEPT_ID = "conceptId"

    member_id: Optional[str] = None
    refset_id: Optional[str] = None
    referenced_component_id: Optional[str] = None
    concept_id: Optional[str] = None
    additional_fields: dict[str, str] = Field(default_factory=dict)


class QueryConcept(DocumentModel):
    """Denormalised concept used for ECL evaluation (transitive closure and attribute map)."""

    index_name: ClassVar[str] = "semantic"
    id_attribute: ClassVar[Optional[str]] = "id"

    class Fields:
        CONCEPT_ID = "conceptIdL"
        ATTR_MAP = "attrMap"

    id: Optional[str] = None
    concept_id_l: Optional[int] = None
    path: Optional[str] = None
    stated: Optional[bool] = None
    parents: list[int] = Field(default_factory=list)
    ancestors: list[int] = Field(default_factory=list)
    attr_map: Optional[str] = None
