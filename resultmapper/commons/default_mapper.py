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

"""Standard result mapper which decodes complete stored documents."""

from typing import Any, Optional, TypeVar, get_origin

from resultmapper.commons import logging
from resultmapper.commons.metadata import MappingContext
from resultmapper.commons.model.search import Hit, PageRequest, ResultPage, SearchResponse

LOGGER = logging.getLogger("resultMapper.defaultResultMapper")

T = TypeVar("T")


def _document_from_fields(fields: dict[str, Any], result_type: type) -> dict[str, Any]:
    multi_valued: set[str] = set()
    for name, field in getattr(result_type, "model_fields", {}).items():
        if get_origin(field.annotation) in (list, set, tuple):
            multi_valued.update({name, field.alias or name})
    return {
        name: value[0] if isinstance(value, list) and value and name not in multi_valued else value
        for name, value in fields.items()
    }


class DefaultResultMapper:
    """Decode every hit of a response into a fully populated result object."""

    mapping_context: MappingContext

    def __init__(self, mapping_context: Optional[MappingContext] = None) -> None:
        self.mapping_context = mapping_context or MappingContext()

    def map_hit(self, hit: Hit, result_type: type[T]) -> T:
        """Decode a single hit.

        The stored ``_source`` document is used when it is present, otherwise projected
        ``fields`` are used as the document body.

        :param hit: Raw search hit
        :param result_type: Type of the result object
        :return: Decoded result
        :raises pydantic.ValidationError: if the document does not match the result type
        """
        document = hit.source if hit.source is not None else _document_from_fields(hit.fields, result_type)
        result = result_type.model_validate(document)  # type: ignore[attr-defined]
        metadata = self.mapping_context.get_document_metadata(result_type)
        if metadata is not None and metadata.has_string_id:
            metadata.set_id(result, hit.id)
        return result

    def map_results(
        self, response: SearchResponse, result_type: type[T], page_request: Optional[PageRequest] = None
    ) -> ResultPage[T]:
        """Decode a search response into a page of results.

        :param response: Search response
        :param result_type: Type of the result objects
        :param page_request: Page which was requested
        :return: Page of decoded results
        """
        results = [self.map_hit(hit, result_type) for hit in response.hits.hits]
        LOGGER.debug(f"Decoded {len(results)} {result_type.__name__} documents")
        return ResultPage(
            content=results,
            page_request=page_request,
            total=response.hits.total,
            aggregations=response.aggregations,
        )
