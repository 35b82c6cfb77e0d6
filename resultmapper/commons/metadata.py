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

"""Document metadata used to read and assign the identity attribute of decoded results."""

import types
from typing import Any, Optional, Union, get_args, get_origin

from resultmapper.commons.model.domain import DocumentModel


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


class DocumentMetadata:
    """Identity attribute of a mapped document type and an accessor for it."""

    document_type: type[DocumentModel]
    id_attribute: Optional[str]
    id_type: Any

    def __init__(self, document_type: type[DocumentModel]):
        self.document_type = document_type
        self.id_attribute = None
        self.id_type = None
        id_attribute = document_type.id_attribute
        if id_attribute and id_attribute in document_type.model_fields:
            self.id_attribute = id_attribute
            self.id_type = _unwrap_optional(document_type.model_fields[id_attribute].annotation)

    @property
    def has_string_id(self) -> bool:
        """Whether a string identity can be assigned to the identity attribute."""
        if self.id_attribute is None:
            return False
        if self.id_type is Any:
            return True
        return isinstance(self.id_type, type) and issubclass(str, self.id_type)

    def get_id(self, instance: DocumentModel) -> Any:
        if self.id_attribute is None:
            return None
        return getattr(instance, self.id_attribute, None)

    def set_id(self, instance: DocumentModel, value: Any) -> None:
        if self.id_attribute is None:
            raise AttributeError(f"{self.document_type.__name__} declares no identity attribute")
        setattr(instance, self.id_attribute, value)


class MappingContext:
    """Resolves document metadata for result types, ``None`` for types that are not mapped documents."""

    _entities: dict[type, DocumentMetadata]

    def __init__(self) -> None:
        self._entities = {}

    def get_document_metadata(self, result_type: type) -> Optional[DocumentMetadata]:
        if not isinstance(result_type, type) or not issubclass(result_type, DocumentModel):
            return None
        metadata = self._entities.get(result_type)
        if metadata is None:
            # Resolved once per type, concurrent first lookups build equal entries
            metadata = self._entities.setdefault(result_type, DocumentMetadata(result_type))
        return metadata
