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
Result mapper which produces results much faster than the standard mapper by decoding
only the projected fields of each hit.

To use it, set the ``fields`` parameter of the search request to the fields the result
type's decoder reads (e.g. ``conceptId``, or ``sourceId`` for relationships) and disable
``_source``. Responses which were not projected are decoded by the standard mapper.
"""

from typing import Any, Optional, TypeVar

from resultmapper.commons import logging
from resultmapper.commons.decoders import DecoderRegistry, default_registry
from resultmapper.commons.default_mapper import DefaultResultMapper
from resultmapper.commons.metadata import MappingContext
from resultmapper.commons.model.launch_objects import ApplicationConfig
from resultmapper.commons.model.search import PageRequest, ResultPage, SearchResponse

LOGGER = logging.getLogger("resultMapper.fastResultsMapper")

T = TypeVar("T")


class FastResultsMapper:
    mapping_context: MappingContext
    default_mapper: DefaultResultMapper
    registry: DecoderRegistry
    enabled: bool

    def __init__(
        self,
        mapping_context: MappingContext,
        default_mapper: DefaultResultMapper,
        registry: Optional[DecoderRegistry] = None,
        *,
        enabled: bool = True,
    ) -> None:
        self.mapping_context = mapping_context
        self.default_mapper = default_mapper
        self.registry = registry if registry is not None else default_registry()
        self.enabled = enabled

    def is_fast_path(self, response: SearchResponse, result_type: type) -> bool:
        """Whether a response can be decoded from projected fields.

        Field projection is applied by the query uniformly to all hits, so the first hit
        stands for the whole response.
        """
        hits = response.hits.hits
        return self.enabled and len(hits) > 0 and result_type in self.registry and bool(hits[0].fields)

    def map_results(
        self, response: SearchResponse, result_type: type[T], page_request: Optional[PageRequest] = None
    ) -> ResultPage[T]:
        """Decode a search response into a page of results.

        :param response: Search response
        :param result_type: Type of the result objects
        :param page_request: Page which was requested
        :return: Page of decoded results
        """
        hits = response.hits.hits
        type_name = result_type.__name__
        if LOGGER.is_debug_enabled():
            LOGGER.debug(
                f"hits: {len(hits)}, has decoder: {result_type in self.registry}, "
                f"first hit fields empty: {not hits[0].fields if hits else ''}"
            )

        if not self.is_fast_path(response, result_type):
            LOGGER.debug(f"Loading {len(hits)} {type_name} using STANDARD result mapping.")
            return self.default_mapper.map_results(response, result_type, page_request)

        LOGGER.debug(f"Loading {len(hits)} {type_name} using FAST result mapping.")
        decoder = self.registry.lookup(result_type)
        results: list[T] = []
        for hit in hits:
            result = decoder(hit)
            self.backfill_id(result, hit.id, result_type)
            results.append(result)

        return ResultPage(
            content=results,
            page_request=page_request,
            total=response.hits.total,
            aggregations=response.aggregations,
        )

    def backfill_id(self, result: Any, hit_id: str, result_type: type) -> None:
        """Assign the hit id to the result's string identity attribute unless the decoder already set it."""
        metadata = self.mapping_context.get_document_metadata(result_type)
        if metadata is None or not metadata.has_string_id:
            return
        if metadata.get_id(result) in (None, ""):
            metadata.set_id(result, hit_id)


def create_result_mapper(app_config: ApplicationConfig, registry: Optional[DecoderRegistry] = None) -> FastResultsMapper:
    """Wire a fast results mapper with the standard mapper as its fallback.

    :param app_config: Application configuration
    :param registry: Sparse decoders to use, the built-in ones by default
    :return: Result mapper
    """
    mapping_context = MappingContext()
    return FastResultsMapper(
        mapping_context,
        DefaultResultMapper(mapping_context),
        registry,
        enabled=app_config.fastResultMapping,
    )
